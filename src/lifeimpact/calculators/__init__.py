"""Dose-response calculators, one per metric type."""

from __future__ import annotations

from typing import Mapping, Optional

from lifeimpact.calculators.activity import (
    ActiveEnergyCalculator,
    BodyMassCalculator,
    ExerciseCalculator,
    OxygenSaturationCalculator,
    StepsCalculator,
    Vo2MaxCalculator,
)
from lifeimpact.calculators.base import (
    AGE_DERIVED,
    AGE_DERIVED_DEFAULT_35,
    BASELINE_LIFE_MINUTES,
    FIXED_45_YEARS,
    ImpactResult,
    LinearDeviationCalculator,
    MetricCalculator,
    RelativeRiskCalculator,
    RemainingYearsPolicy,
    relative_risk_to_daily_minutes,
)
from lifeimpact.calculators.cardiovascular import (
    HeartRateVariabilityCalculator,
    RestingHeartRateCalculator,
    SleepCalculator,
)
from lifeimpact.calculators.lifestyle import (
    AlcoholCalculator,
    NutritionCalculator,
    SmokingCalculator,
    SocialConnectionsCalculator,
    StressCalculator,
)
from lifeimpact.metrics.types import MetricType

CALCULATOR_CLASSES: tuple[type[MetricCalculator], ...] = (
    StepsCalculator,
    ExerciseCalculator,
    ActiveEnergyCalculator,
    BodyMassCalculator,
    Vo2MaxCalculator,
    OxygenSaturationCalculator,
    RestingHeartRateCalculator,
    SleepCalculator,
    HeartRateVariabilityCalculator,
    AlcoholCalculator,
    SmokingCalculator,
    StressCalculator,
    NutritionCalculator,
    SocialConnectionsCalculator,
)

# Remaining-years policy each relative-risk calculator has always used
LEGACY_REMAINING_YEARS: dict[MetricType, RemainingYearsPolicy] = {
    cls.metric_type: cls.default_policy
    for cls in CALCULATOR_CLASSES
    if issubclass(cls, RelativeRiskCalculator)
}


def unified_policies(policy: RemainingYearsPolicy) -> dict[MetricType, RemainingYearsPolicy]:
    """Use one remaining-years policy for every relative-risk calculator."""
    return {metric_type: policy for metric_type in LEGACY_REMAINING_YEARS}


def build_calculators(
    policies: Optional[Mapping[MetricType, RemainingYearsPolicy]] = None,
) -> dict[MetricType, MetricCalculator]:
    """Build the metric type -> calculator lookup table.

    Args:
        policies: Remaining-years policy overrides per metric type.
            Metrics not listed keep their legacy policy.

    Returns:
        One calculator instance per metric type
    """
    policies = policies or {}
    calculators: dict[MetricType, MetricCalculator] = {}
    for cls in CALCULATOR_CLASSES:
        if issubclass(cls, RelativeRiskCalculator):
            calculators[cls.metric_type] = cls(policies.get(cls.metric_type))
        else:
            calculators[cls.metric_type] = cls()
    return calculators


__all__ = [
    "AGE_DERIVED",
    "AGE_DERIVED_DEFAULT_35",
    "BASELINE_LIFE_MINUTES",
    "CALCULATOR_CLASSES",
    "FIXED_45_YEARS",
    "LEGACY_REMAINING_YEARS",
    "ImpactResult",
    "LinearDeviationCalculator",
    "MetricCalculator",
    "RelativeRiskCalculator",
    "RemainingYearsPolicy",
    "build_calculators",
    "relative_risk_to_daily_minutes",
    "unified_policies",
]
