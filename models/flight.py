"""Flight data model."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from models.segment import Segment


@dataclass(frozen=True)
class Flight:
    """
    Represents a full itinerary made of one or more segments.

    Segments are kept in itinerary order exactly as given; they are
    neither sorted nor checked for chronology.

    Attributes:
        segments: Ordered segments of the itinerary
    """
    segments: Tuple[Segment, ...]

    def __post_init__(self) -> None:
        # Freeze whatever sequence was passed in
        object.__setattr__(self, "segments", tuple(self.segments))

    @property
    def departure(self) -> Optional[datetime]:
        """Departure time of the first segment."""
        return self.segments[0].departure if self.segments else None

    @property
    def arrival(self) -> Optional[datetime]:
        """Arrival time of the last segment."""
        return self.segments[-1].arrival if self.segments else None

    @property
    def ground_times(self) -> List[timedelta]:
        """Time on the ground between each pair of adjacent segments."""
        return [
            nxt.departure - cur.arrival
            for cur, nxt in zip(self.segments, self.segments[1:])
        ]

    @property
    def ground_minutes(self) -> List[int]:
        """Whole minutes of each ground time, truncated toward zero."""
        return [int(gap.total_seconds() / 60) for gap in self.ground_times]

    @property
    def total_ground_minutes(self) -> int:
        """Total time on the ground, summed per connection in whole minutes."""
        return sum(self.ground_minutes)

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.segments)

    def __repr__(self) -> str:
        return f"Flight({self})"
