"""Evaluates validation rules against a flight list."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional
import logging

from models import Flight, RuleLimits
from filters.base import Rule
from filters.departure_before_now import DepartureBeforeNowRule
from filters.arrival_before_departure import ArrivalBeforeDepartureRule
from filters.long_ground_time import LongGroundTimeRule

logger = logging.getLogger(__name__)


@dataclass
class RuleReport:
    """Flights matched by a single rule, in their original order."""
    rule: Rule
    matches: List[Flight] = field(default_factory=list)

    @property
    def description(self) -> str:
        return self.rule.description

    @property
    def num_matches(self) -> int:
        return len(self.matches)

    def render_lines(self) -> Iterator[str]:
        """Yield the description followed by one line per matching flight."""
        yield self.description
        for flight in self.matches:
            yield str(flight)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for inspection."""
        return {
            "rule": type(self.rule).__name__,
            "description": self.description.strip(),
            "flights": [
                [
                    {
                        "departure": s.departure.isoformat(),
                        "arrival": s.arrival.isoformat()
                    }
                    for s in flight.segments
                ]
                for flight in self.matches
            ]
        }


def default_rules(limits: Optional[RuleLimits] = None) -> List[Rule]:
    """The fixed rule list, in reporting order."""
    return [
        DepartureBeforeNowRule(),
        ArrivalBeforeDepartureRule(),
        LongGroundTimeRule(limits),
    ]


def filter_flights(
    flights: List[Flight],
    rule: Rule,
    now: Optional[datetime] = None
) -> List[Flight]:
    """Flights matching a rule, preserving input order."""
    return [flight for flight in flights if rule.matches(flight, now)]


def evaluate_rules(
    flights: List[Flight],
    rules: List[Rule],
    now: Optional[datetime] = None
) -> List[RuleReport]:
    """
    Run every rule over the full flight list.

    The reference instant is read once for the whole pass so that
    every rule and every segment is compared against the same clock.

    Args:
        flights: Flights to check
        rules: Rules to apply, in reporting order
        now: Reference instant (defaults to the current time)

    Returns:
        One report per rule, in the order of ``rules``
    """
    if now is None:
        now = datetime.now()

    logger.info(f"Evaluating {len(rules)} rules over {len(flights)} flights")

    reports = []
    for rule in rules:
        report = RuleReport(rule=rule, matches=filter_flights(flights, rule, now))
        logger.info(f"{rule!r}: {report.num_matches} matching flights")
        reports.append(report)

    return reports


def print_reports(reports: List[RuleReport]) -> None:
    """Print each report's description and matching flights to stdout."""
    for report in reports:
        for line in report.render_lines():
            print(line)
