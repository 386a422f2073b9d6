"""Flags flights containing logically inverted segments."""

from datetime import datetime
from typing import Optional

from models import Flight
from filters.base import Rule


class ArrivalBeforeDepartureRule(Rule):
    """Matches if any segment arrives before it departs."""

    @property
    def description(self) -> str:
        return "\nИмеются сегменты с датой прилёта раньше даты вылета:"

    def matches(self, flight: Flight, now: Optional[datetime] = None) -> bool:
        # Purely structural; the clock plays no part
        return any(segment.is_inverted for segment in flight.segments)
