"""Segment data model."""

from dataclasses import dataclass
from datetime import datetime, timedelta

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"


@dataclass(frozen=True)
class Segment:
    """
    Represents one leg of a flight.

    Attributes:
        departure: Departure time
        arrival: Arrival time (may precede departure in malformed data)
    """
    departure: datetime
    arrival: datetime

    def __post_init__(self) -> None:
        for name in ("departure", "arrival"):
            value = getattr(self, name)
            if not isinstance(value, datetime):
                raise TypeError(
                    f"Segment {name} must be a datetime, got {value!r}"
                )
            # Local wall-clock times only, comparable with datetime.now()
            if value.tzinfo is not None:
                raise ValueError(
                    f"Segment {name} must be a naive local time, got {value!r}"
                )

    @property
    def duration(self) -> timedelta:
        """Time in the air (negative for inverted segments)."""
        return self.arrival - self.departure

    @property
    def is_inverted(self) -> bool:
        """True if the segment arrives before it departs."""
        return self.arrival < self.departure

    def __str__(self) -> str:
        return (
            f"[{self.departure.strftime(TIMESTAMP_FORMAT)}|"
            f"{self.arrival.strftime(TIMESTAMP_FORMAT)}]"
        )
