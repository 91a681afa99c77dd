"""Pytest fixtures for lifeimpact tests."""

from __future__ import annotations

from datetime import date

import pytest

from lifeimpact.calculators.base import BASELINE_LIFE_MINUTES, DAYS_PER_YEAR
from lifeimpact.metrics.types import HealthMetric, MetricType, Sex, UserProfile

SCORING_DATE = date(2024, 3, 1)


def expected_minutes(relative_risk: float, scaling: float, remaining_years: float) -> float:
    """Daily minutes for a relative risk, written out independently of the code under test."""
    return BASELINE_LIFE_MINUTES * (1.0 - relative_risk) * scaling / (
        remaining_years * DAYS_PER_YEAR
    )


def make_metrics(**values: float) -> list[HealthMetric]:
    """Build metrics from keyword arguments named after MetricType members."""
    return [
        HealthMetric(type=MetricType[name.upper()], value=value, date=SCORING_DATE)
        for name, value in values.items()
    ]


@pytest.fixture
def profile_40() -> UserProfile:
    """A 40-year-old with no other attributes (38 remaining years)."""
    return UserProfile(age=40)


@pytest.fixture
def anonymous_profile() -> UserProfile:
    """A profile with nothing filled in."""
    return UserProfile()


@pytest.fixture
def us_woman_65() -> UserProfile:
    return UserProfile(age=65, sex=Sex.FEMALE, region="US")


@pytest.fixture
def baseline_day() -> list[HealthMetric]:
    """Near-baseline day used as the end-to-end regression scenario."""
    return make_metrics(
        steps=10000,
        sleep_hours=7.5,
        exercise_minutes=21.4,
        body_mass=160,
        stress_level=3,
        nutrition_quality=8,
    )
