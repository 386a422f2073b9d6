"""Pytest fixtures for flight filter tests."""

import pytest
from datetime import datetime
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import RuleLimits
from data.generators.sample_flights import generate_sample_flights
from filters import default_rules


@pytest.fixture
def now():
    """Fixed reference instant."""
    return datetime(2024, 1, 1, 12, 0)


@pytest.fixture
def sample_flights(now):
    """The six sample flights built around the fixed instant."""
    return generate_sample_flights(now)


@pytest.fixture
def default_limits():
    """Standard rule limits."""
    return RuleLimits()


@pytest.fixture
def rules(default_limits):
    """The fixed rule list."""
    return default_rules(default_limits)
