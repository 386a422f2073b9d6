"""Base class for flight validation rules."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from models import Flight


class Rule(ABC):
    """
    Abstract base class for validation rules.

    A rule pairs a human-readable description with a predicate that
    flags anomalous flights. Rules keep no state between calls, so
    each one can be evaluated against a flight list on its own.
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Text printed above the flights this rule matches."""
        pass

    @abstractmethod
    def matches(self, flight: Flight, now: Optional[datetime] = None) -> bool:
        """
        Check whether a flight is flagged by this rule.

        Args:
            flight: Flight to check
            now: Reference instant for clock-dependent rules; the
                current time is read when omitted

        Returns:
            True if the flight matches
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
