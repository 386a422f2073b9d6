"""Validation rules for flights."""

from filters.base import Rule
from filters.departure_before_now import DepartureBeforeNowRule
from filters.arrival_before_departure import ArrivalBeforeDepartureRule
from filters.long_ground_time import LongGroundTimeRule
from filters.engine import (
    RuleReport,
    default_rules,
    filter_flights,
    evaluate_rules,
    print_reports,
)

__all__ = [
    "Rule",
    "DepartureBeforeNowRule",
    "ArrivalBeforeDepartureRule",
    "LongGroundTimeRule",
    "RuleReport",
    "default_rules",
    "filter_flights",
    "evaluate_rules",
    "print_reports",
]
