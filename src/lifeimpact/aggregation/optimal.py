"""Optimal-habit metric set used for the potential projection."""

from __future__ import annotations

from datetime import date
from typing import Optional

from lifeimpact.metrics.types import HealthMetric, MetricType, Sex, UserProfile

OPTIMAL_SOURCE = "calculated"

# Values that do not depend on the profile
FIXED_OPTIMAL_VALUES: dict[MetricType, float] = {
    MetricType.STEPS: 12000,
    MetricType.EXERCISE_MINUTES: 45,
    MetricType.SLEEP_HOURS: 7.5,
    MetricType.RESTING_HEART_RATE: 55,
    MetricType.SMOKING_STATUS: 10,
    MetricType.ALCOHOL_CONSUMPTION: 9,
    MetricType.STRESS_LEVEL: 2,
    MetricType.NUTRITION_QUALITY: 9,
    MetricType.SOCIAL_CONNECTIONS_QUALITY: 8,
    MetricType.ACTIVE_ENERGY_BURNED: 600,
    MetricType.OXYGEN_SATURATION: 98,
}


def optimal_hrv(age: float) -> float:
    """Excellent HRV for the age: 60 ms at 30, down 0.5 ms a year, floor 50."""
    return max(50.0, 60.0 - (age - 30) * 0.5)


def optimal_vo2_max(age: float, sex: Sex) -> float:
    """Age-adjusted excellent VO2 max; women scale to 88% of the male values."""
    multiplier = 0.88 if sex is Sex.FEMALE else 1.0
    return max(50.0 * multiplier - max(0.0, age - 30) * 0.3, 35.0 * multiplier)


def optimal_body_mass(sex: Sex) -> float:
    return 135.0 if sex is Sex.FEMALE else 155.0


def optimal_metrics(profile: UserProfile, on_date: Optional[date] = None) -> list[HealthMetric]:
    """One metric per type at the value healthy habits would produce.

    Age defaults to 30 and an unspecified sex uses the male values.

    Args:
        profile: User the optimal values are adjusted for
        on_date: Date stamped on each metric. Defaults to today.

    Returns:
        Metrics in ``MetricType`` declaration order
    """
    age = float(profile.age if profile.age is not None else 30)
    values = dict(FIXED_OPTIMAL_VALUES)
    values[MetricType.HEART_RATE_VARIABILITY] = optimal_hrv(age)
    values[MetricType.VO2_MAX] = optimal_vo2_max(age, profile.sex)
    values[MetricType.BODY_MASS] = optimal_body_mass(profile.sex)

    on_date = on_date or date.today()
    return [
        HealthMetric(type=metric_type, value=values[metric_type], date=on_date, source=OPTIMAL_SOURCE)
        for metric_type in MetricType
    ]
