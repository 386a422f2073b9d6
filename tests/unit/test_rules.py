"""Unit tests for validation rules."""

import pytest
from datetime import datetime, timedelta
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from models import Flight, Segment, RuleLimits
from filters import (
    Rule,
    DepartureBeforeNowRule,
    ArrivalBeforeDepartureRule,
    LongGroundTimeRule,
)


class TestRuleBase:
    """Tests for the Rule abstraction."""

    def test_abstract(self):
        """Test Rule cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Rule()

    def test_descriptions(self, rules):
        """Test each rule's description starts on a fresh line."""
        descriptions = [r.description for r in rules]
        assert descriptions == [
            "\nВылет до текущего момента времени:",
            "\nИмеются сегменты с датой прилёта раньше даты вылета:",
            "\nОбщее время, проведённое на земле, превышает два часа:",
        ]


class TestDepartureBeforeNowRule:
    """Tests for DepartureBeforeNowRule."""

    def test_past_departure_matches(self, sample_flights, now):
        """Test the flight departing six days before base matches."""
        assert DepartureBeforeNowRule().matches(sample_flights[2], now)

    def test_future_departure_does_not_match(self, sample_flights, now):
        """Test a flight departing three days ahead does not match."""
        assert not DepartureBeforeNowRule().matches(sample_flights[0], now)

    def test_any_segment_counts(self, now):
        """Test a later segment in the past is enough to match."""
        flight = Flight([
            Segment(now + timedelta(hours=1), now + timedelta(hours=2)),
            Segment(now - timedelta(minutes=1), now + timedelta(hours=3)),
        ])
        assert DepartureBeforeNowRule().matches(flight, now)

    def test_departure_at_now_does_not_match(self, now):
        """Test the comparison is strict."""
        flight = Flight([Segment(now, now + timedelta(hours=1))])
        assert not DepartureBeforeNowRule().matches(flight, now)

    def test_reads_clock_by_default(self):
        """Test the current time is used when no reference is given."""
        past = datetime.now() - timedelta(days=1)
        future = datetime.now() + timedelta(days=1)
        rule = DepartureBeforeNowRule()
        assert rule.matches(Flight([Segment(past, future)]))
        assert not rule.matches(Flight([Segment(future, future)]))


class TestArrivalBeforeDepartureRule:
    """Tests for ArrivalBeforeDepartureRule."""

    def test_inverted_matches(self, sample_flights, now):
        """Test the flight arriving six hours before departure matches."""
        assert ArrivalBeforeDepartureRule().matches(sample_flights[3], now)

    def test_normal_does_not_match(self, sample_flights, now):
        """Test a normal flight does not match."""
        assert not ArrivalBeforeDepartureRule().matches(sample_flights[0], now)

    def test_zero_duration_does_not_match(self, now):
        """Test arrival equal to departure is not inverted."""
        flight = Flight([Segment(now, now)])
        assert not ArrivalBeforeDepartureRule().matches(flight)


class TestLongGroundTimeRule:
    """Tests for LongGroundTimeRule."""

    def test_single_long_gap_matches(self, sample_flights):
        """Test a three hour connection matches."""
        assert LongGroundTimeRule().matches(sample_flights[4])

    def test_cumulative_gaps_match(self, sample_flights):
        """Test 1h + 2h across two connections matches."""
        assert LongGroundTimeRule().matches(sample_flights[5])

    def test_short_gap_does_not_match(self, sample_flights):
        """Test a one hour connection does not match."""
        assert not LongGroundTimeRule().matches(sample_flights[1])

    def test_single_segment_does_not_match(self, sample_flights):
        """Test a flight without connections does not match."""
        assert not LongGroundTimeRule().matches(sample_flights[0])

    def test_exactly_two_hours_does_not_match(self, now):
        """Test the threshold is exclusive."""
        flight = Flight([
            Segment(now, now + timedelta(hours=1)),
            Segment(now + timedelta(hours=3), now + timedelta(hours=4)),
        ])
        rule = LongGroundTimeRule()
        assert rule.ground_minutes(flight) == 120
        assert not rule.matches(flight)

    def test_custom_limit(self, sample_flights):
        """Test a tighter limit flags the one hour connection."""
        rule = LongGroundTimeRule(RuleLimits(max_ground_time=timedelta(minutes=30)))
        assert rule.matches(sample_flights[1])

    def test_seconds_past_limit_do_not_count(self, now):
        """Test two connections of 1h00m30s sum to 120 whole minutes."""
        gap = timedelta(hours=1, seconds=30)
        flight = Flight([
            Segment(now, now + timedelta(hours=1)),
            Segment(now + timedelta(hours=1) + gap, now + timedelta(hours=3)),
            Segment(now + timedelta(hours=3) + gap, now + timedelta(hours=5)),
        ])
        rule = LongGroundTimeRule()
        assert rule.ground_minutes(flight) == flight.total_ground_minutes == 120
        assert not rule.matches(flight)
