"""Thresholds used by the validation rules."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class RuleLimits:
    """
    Operational limits a flight is checked against.

    Only ground time is bounded today; the other rules are
    structural and need no threshold.
    """
    # Ground rules
    max_ground_time: timedelta = timedelta(hours=2)

    @property
    def max_ground_minutes(self) -> int:
        """Maximum total ground time in whole minutes."""
        return int(self.max_ground_time.total_seconds() // 60)
