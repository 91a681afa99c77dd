"""Tests for metric types, profiles and impact data points."""

from __future__ import annotations

from datetime import date

import pytest

from lifeimpact.impact.models import ImpactDataPoint, PeriodType, PowerLevel, describe_minutes
from lifeimpact.metrics import (
    METRIC_SPECS,
    MetricType,
    Sex,
    UserProfile,
    clamp_to_bounds,
    get_metric_type,
)


class TestMetricTypes:
    """Tests for metric lookup and bounds."""

    def test_every_type_has_metric_attributes(self) -> None:
        """Every metric type has attributes."""
        assert set(METRIC_SPECS) == set(MetricType)

    @pytest.mark.parametrize("name", ["sleepHours", "sleep_hours", "SLEEP_HOURS", "sleep-hours"])
    def test_lookup(self, name: str) -> None:
        """Metric names resolve in any common spelling."""
        assert get_metric_type(name) is MetricType.SLEEP_HOURS

    def test_unknown_name(self) -> None:
        """Unknown names raise KeyError."""
        with pytest.raises(KeyError):
            get_metric_type("mood")

    def test_clamp(self) -> None:
        """Values are clamped to the physiological bounds."""
        assert clamp_to_bounds(MetricType.RESTING_HEART_RATE, 20) == 40
        assert clamp_to_bounds(MetricType.RESTING_HEART_RATE, 200) == 120
        assert clamp_to_bounds(MetricType.RESTING_HEART_RATE, 65) == 65

    def test_questionnaire_flags(self) -> None:
        """Questionnaire metrics are flagged."""
        assert MetricType.STRESS_LEVEL.spec.is_questionnaire
        assert not MetricType.STEPS.spec.is_questionnaire


class TestUserProfile:
    """Tests for UserProfile validation."""

    def test_sex_string_coerced(self) -> None:
        """Sex strings are parsed on construction."""
        assert UserProfile(sex="Female").sex is Sex.FEMALE

    def test_prefer_not_to_say(self) -> None:
        """Undisclosed sex is unspecified."""
        assert Sex.parse("prefer_not_to_say") is Sex.UNSPECIFIED
        assert Sex.parse(None) is Sex.UNSPECIFIED

    def test_invalid_sex(self) -> None:
        """Unknown sex strings are rejected."""
        with pytest.raises(ValueError):
            UserProfile(sex="robot")

    def test_negative_age(self) -> None:
        """Negative ages are rejected."""
        with pytest.raises(ValueError):
            UserProfile(age=-1)


class TestImpactDataPoint:
    """Tests for data point display helpers."""

    def make(self, total: float, **impacts: float) -> ImpactDataPoint:
        return ImpactDataPoint(
            date=date(2024, 3, 1),
            period_type=PeriodType.DAY,
            total_impact_minutes=total,
            metric_impacts={MetricType[k.upper()]: v for k, v in impacts.items()},
        )

    @pytest.mark.parametrize(
        "total, text",
        [(12.7, "+12 min"), (-45, "-45 min"), (90, "+1.5 hrs"), (-2880, "-2.0 days")],
    )
    def test_formatted_impact(self, total: float, text: str) -> None:
        """Totals are formatted with sign and unit."""
        assert self.make(total).formatted_impact == text

    def test_top_contributor_by_magnitude(self) -> None:
        """The top contributor has the largest absolute impact."""
        point = self.make(0, steps=10, smoking_status=-40, sleep_hours=5)
        assert point.top_contributing_metric is MetricType.SMOKING_STATUS

    def test_to_dict(self) -> None:
        """to_dict uses string keys."""
        data = self.make(5, steps=5).to_dict()
        assert data == {
            "date": "2024-03-01",
            "period_type": "day",
            "total_impact_minutes": 5,
            "metric_impacts": {"steps": 5},
        }


def test_describe_minutes() -> None:
    """Minutes are described in the largest whole unit."""
    assert describe_minutes(3 * 1440) == "3 days gained"
    assert describe_minutes(-1) == "1 minute lost"


def test_power_level_fill() -> None:
    """Power levels map to fill fractions."""
    assert PowerLevel.FULL.fill_percent == 1.0
    assert PowerLevel.CRITICAL.fill_percent == 0.1
