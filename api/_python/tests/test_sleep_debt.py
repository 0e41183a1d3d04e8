"""Tests for sleep debt estimation."""

import pytest

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepcycle.sleep_debt import (
    SLEEP_RECOMMENDATIONS,
    calculate_sleep_debt,
    classify_debt,
    recommended_hours_for,
)


class TestCalculateSleepDebt:
    """Tests for calculate_sleep_debt."""

    def test_typical_adult_is_mildly_short(self):
        """6.5h weekdays + 8h weekends vs 8h target: 7.5h short per week."""
        report = calculate_sleep_debt(6.5, 8)

        assert report.weekly_debt_hours == 7.5
        assert report.daily_debt_hours == 1.1
        assert report.category == "mild"
        assert report.recovery_time == "1-2 nights of good sleep"

    def test_exactly_enough_sleep(self):
        report = calculate_sleep_debt(8, 8, 8)
        assert report.weekly_debt_hours == 0
        assert report.category == "none"
        assert report.recovery_time == "You're getting enough sleep!"

    def test_surplus_is_negative_debt(self):
        report = calculate_sleep_debt(9, 9, 8)
        assert report.weekly_debt_hours == -7.0
        assert report.daily_debt_hours == -1.0
        assert report.category == "none"

    def test_moderate_debt(self):
        report = calculate_sleep_debt(5, 6, 8)
        assert report.weekly_debt_hours == 19.0
        assert report.daily_debt_hours == 2.7
        assert report.category == "moderate"

    def test_severe_debt(self):
        report = calculate_sleep_debt(2, 3, 8)
        assert report.daily_debt_hours == 5.7
        assert report.category == "severe"
        assert report.recovery_time == "7-10 days of consistent adequate sleep"

    def test_two_hours_a_night_is_moderate(self):
        """Boundary: exactly 2h/night average is no longer mild."""
        assert calculate_sleep_debt(6, 6, 8).category == "moderate"

    def test_negative_hours_raise(self):
        with pytest.raises(ValueError):
            calculate_sleep_debt(-1, 8)


class TestClassifyDebt:
    """Tests for the category thresholds."""

    @pytest.mark.parametrize(
        "debt, category",
        [(-2, "none"), (0, "none"), (0.1, "mild"), (1.99, "mild"), (2, "moderate"), (4.99, "moderate"), (5, "severe")],
    )
    def test_thresholds(self, debt, category):
        assert classify_debt(debt) == category


class TestRecommendations:
    """Tests for the age-group table."""

    def test_adult_recommendation(self):
        assert recommended_hours_for("Adults (18-64 years)") == 8

    def test_teen_recommendation(self):
        assert recommended_hours_for("Teens (13-18 years)") == 9

    def test_unknown_age_group_raises(self):
        with pytest.raises(ValueError):
            recommended_hours_for("Cats")

    def test_recommendations_decrease_with_age(self):
        optimal = [r.optimal_hours for r in SLEEP_RECOMMENDATIONS]
        assert optimal == sorted(optimal, reverse=True)
