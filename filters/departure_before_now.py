"""Flags flights with a segment departing in the past."""

from datetime import datetime
from typing import Optional

from models import Flight
from filters.base import Rule


class DepartureBeforeNowRule(Rule):
    """Matches if any segment departs strictly before the reference instant."""

    @property
    def description(self) -> str:
        return "\nВылет до текущего момента времени:"

    def matches(self, flight: Flight, now: Optional[datetime] = None) -> bool:
        if now is None:
            now = datetime.now()
        return any(segment.departure < now for segment in flight.segments)
