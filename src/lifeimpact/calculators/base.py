"""Shared machinery for dose-response calculators.

Two calculator shapes exist:

* ``RelativeRiskCalculator`` evaluates a piecewise relative-risk (RR)
  curve, converts the RR swing into total life-minutes with a
  metric-specific scaling factor, then spreads it over the remaining
  lifespan to get minutes per day.
* ``LinearDeviationCalculator`` skips the RR step and maps the distance
  from a reference value straight to minutes per day.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from lifeimpact.impact.models import CalculationMethod
from lifeimpact.metrics.types import METRIC_SPECS, MetricType, UserProfile, clamp_to_bounds

logger = logging.getLogger(__name__)

LIFE_EXPECTANCY_YEARS = 78.0
DAYS_PER_YEAR = 365.25
BASELINE_LIFE_MINUTES = LIFE_EXPECTANCY_YEARS * DAYS_PER_YEAR * 24 * 60


@dataclass(frozen=True)
class RemainingYearsPolicy:
    """How many years a total life-minutes effect is spread across.

    Either a fixed number of years, or ``max(1, 78 - age)`` with a default
    age used when the profile has none.
    """

    name: str
    default_age: int = 40
    fixed_years: Optional[float] = None

    def remaining_years(self, profile: UserProfile) -> float:
        if self.fixed_years is not None:
            return self.fixed_years
        age = profile.age if profile.age is not None else self.default_age
        return max(1.0, LIFE_EXPECTANCY_YEARS - age)


AGE_DERIVED = RemainingYearsPolicy("age_derived", default_age=40)
AGE_DERIVED_DEFAULT_35 = RemainingYearsPolicy("age_derived_default_35", default_age=35)
FIXED_45_YEARS = RemainingYearsPolicy("fixed_45_years", fixed_years=45.0)


def relative_risk_to_daily_minutes(
    relative_risk: float,
    scaling_factor: float,
    remaining_years: float,
) -> float:
    """Convert a relative risk into minutes of life gained (+) or lost (-) per day.

    Args:
        relative_risk: Mortality risk relative to the reference (1.0 = neutral)
        scaling_factor: Fraction of a maximal life-years effect this RR swing represents
        remaining_years: Years the total effect is spread across

    Returns:
        Daily impact in minutes
    """
    total_life_minutes = BASELINE_LIFE_MINUTES * (1.0 - relative_risk) * scaling_factor
    return total_life_minutes / (remaining_years * DAYS_PER_YEAR)


@dataclass(frozen=True)
class ImpactResult:
    """Numeric output of a single calculator run."""

    daily_minutes: float
    baseline_value: float
    calculation_method: CalculationMethod
    recommendation: str
    relative_risk: Optional[float] = None


class MetricCalculator:
    """Computes the daily impact of one metric type."""

    metric_type: MetricType
    calculation_method: CalculationMethod = CalculationMethod.EXPERT_CONSENSUS

    def baseline_value(self, profile: UserProfile) -> float:
        return METRIC_SPECS[self.metric_type].baseline_value

    def recommendation(self, value: float, profile: UserProfile) -> str:
        return ""

    def compute(self, value: float, profile: UserProfile) -> ImpactResult:
        raise NotImplementedError


class RelativeRiskCalculator(MetricCalculator):
    """Calculator driven by a piecewise relative-risk curve."""

    scaling_factor: float
    default_policy: RemainingYearsPolicy = AGE_DERIVED

    def __init__(self, policy: Optional[RemainingYearsPolicy] = None):
        """Initialize the calculator.

        Args:
            policy: Remaining-years policy. Defaults to the calculator's own.
        """
        self.policy = policy or self.default_policy

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        """Evaluate the RR curve for an already-clamped value."""
        raise NotImplementedError

    def compute(self, value: float, profile: UserProfile) -> ImpactResult:
        clamped = clamp_to_bounds(self.metric_type, value)
        rr = self.relative_risk(clamped, profile)
        remaining = self.policy.remaining_years(profile)
        minutes = relative_risk_to_daily_minutes(rr, self.scaling_factor, remaining)

        logger.debug(
            "%s: %.2f -> RR %.3f -> %.2f min/day (%.0f remaining years, %s)",
            self.metric_type.value,
            clamped,
            rr,
            minutes,
            remaining,
            self.policy.name,
        )

        return ImpactResult(
            daily_minutes=minutes,
            baseline_value=self.baseline_value(profile),
            calculation_method=self.calculation_method,
            recommendation=self.recommendation(clamped, profile),
            relative_risk=rr,
        )


class LinearDeviationCalculator(MetricCalculator):
    """Calculator mapping distance from a reference value to minutes per day.

    Deviation is measured in the metric's preferred direction, so values
    on the "worse" side of the reference always give a negative impact.
    """

    unit_size: float
    minutes_per_unit: float
    deviation_cap: Optional[float] = None

    def compute(self, value: float, profile: UserProfile) -> ImpactResult:
        spec = METRIC_SPECS[self.metric_type]
        clamped = clamp_to_bounds(self.metric_type, value)
        reference = self.baseline_value(profile)

        deviation = clamped - reference
        if not spec.higher_is_better:
            deviation = -deviation
        if self.deviation_cap is not None:
            deviation = max(-self.deviation_cap, min(deviation, self.deviation_cap))

        minutes = (deviation / self.unit_size) * self.minutes_per_unit

        logger.debug(
            "%s: %.2f (reference %.1f) -> %.2f min/day",
            self.metric_type.value,
            clamped,
            reference,
            minutes,
        )

        return ImpactResult(
            daily_minutes=minutes,
            baseline_value=reference,
            calculation_method=self.calculation_method,
            recommendation=self.recommendation(clamped, profile),
        )
