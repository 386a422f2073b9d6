"""Flags flights spending too long on the ground between segments."""

from datetime import datetime
from typing import Optional
import logging

from models import Flight, ItineraryNetwork, RuleLimits
from filters.base import Rule

logger = logging.getLogger(__name__)


class LongGroundTimeRule(Rule):
    """
    Matches if total ground time exceeds the limit.

    Ground time is measured only between adjacent segments, in the
    order they appear in the itinerary. Each connection contributes its
    whole minutes; a single-segment flight has no ground time at all.
    """

    def __init__(self, limits: Optional[RuleLimits] = None):
        self.limits = limits or RuleLimits()

    @property
    def description(self) -> str:
        return "\nОбщее время, проведённое на земле, превышает два часа:"

    def ground_minutes(self, flight: Flight) -> int:
        """Total ground time of a flight in minutes."""
        return ItineraryNetwork(flight).total_ground_minutes()

    def matches(self, flight: Flight, now: Optional[datetime] = None) -> bool:
        minutes = self.ground_minutes(flight)
        logger.debug(f"Ground time for {flight}: {minutes} min")
        return minutes > self.limits.max_ground_minutes

    def __repr__(self) -> str:
        return f"LongGroundTimeRule(max_minutes={self.limits.max_ground_minutes})"
