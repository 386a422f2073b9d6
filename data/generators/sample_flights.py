"""Sample flight dataset generator.

Creates six flights relative to the current time, each exercising a
different scenario for the validation rules.
"""

from datetime import datetime, timedelta
from typing import List, Optional
import logging

from models import Flight, Segment

logger = logging.getLogger(__name__)


def create_flight(*dates: datetime) -> Flight:
    """
    Build a flight from consecutive departure/arrival pairs.

    Dates 0-1 form the first segment, 2-3 the second, and so on.

    Raises:
        ValueError: If an odd number of dates is given
    """
    if len(dates) % 2 != 0:
        raise ValueError(
            f"you must pass an even number of dates, got {len(dates)}"
        )
    segments = [
        Segment(departure=dates[i], arrival=dates[i + 1])
        for i in range(0, len(dates), 2)
    ]
    return Flight(segments)


def generate_sample_flights(now: Optional[datetime] = None) -> List[Flight]:
    """
    Generate the sample flight list.

    Args:
        now: Reference instant (defaults to the current time)

    Returns:
        Six flights, in this order:
        1. a normal two-hour flight
        2. a normal two-segment flight with one hour on the ground
        3. a flight departing in the past
        4. a flight arriving before it departs
        5. a flight with three hours on the ground
        6. a flight with 1h + 2h on the ground
    """
    if now is None:
        now = datetime.now()
    base = now + timedelta(days=3)

    def at(hours: int = 0, days: int = 0) -> datetime:
        return base + timedelta(days=days, hours=hours)

    flights = [
        create_flight(at(0), at(2)),
        create_flight(at(0), at(2), at(3), at(5)),
        create_flight(at(days=-6), at(0)),
        create_flight(at(0), at(-6)),
        create_flight(at(0), at(2), at(5), at(6)),
        create_flight(at(0), at(2), at(3), at(4), at(6), at(7)),
    ]

    logger.debug(f"Generated {len(flights)} sample flights from {base.isoformat()}")
    return flights


if __name__ == "__main__":
    for i, flight in enumerate(generate_sample_flights(), start=1):
        print(f"{i}: {flight}")
