"""Core data models for the flight filter."""

from models.segment import Segment
from models.flight import Flight
from models.rule_limits import RuleLimits
from models.network import ItineraryNetwork, NetworkNode, NetworkArc

__all__ = [
    "Segment",
    "Flight",
    "RuleLimits",
    "ItineraryNetwork",
    "NetworkNode",
    "NetworkArc",
]
