"""Life-expectancy projection from daily impact rates.

Projects the cumulative effect of today's daily impacts over the user's
remaining lifespan. The baseline comes from WHO life tables by sex.
Behaviour is assumed to drift back toward baseline (2% per year, evaluated
at half the horizon), and the result is weighted by how strong the
evidence behind each impact is.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

import numpy as np

from lifeimpact.impact.models import CalculationMethod, MetricImpactDetail
from lifeimpact.metrics.types import Sex, UserProfile

logger = logging.getLogger(__name__)

DEFAULT_AGE = 30
BEHAVIOR_DECAY_RATE = 0.02  # per year
MAX_PROJECTED_YEARS = 120.0
CONFIDENCE_INTERVAL_YEARS = 2.0
BATTERY_FULL_REMAINING_YEARS = 60.0

# Remaining years at exact ages, WHO global 2023
REMAINING_LIFE_TABLE: dict[Sex, dict[int, float]] = {
    Sex.MALE: {
        0: 71.4, 10: 62.1, 20: 52.3, 30: 42.8, 40: 33.5,
        50: 24.7, 60: 16.8, 70: 10.1, 80: 5.5, 90: 3.0,
    },
    Sex.FEMALE: {
        0: 76.8, 10: 67.4, 20: 57.5, 30: 47.7, 40: 38.1,
        50: 28.8, 60: 20.1, 70: 12.5, 80: 6.8, 90: 3.5,
    },
}

EVIDENCE_WEIGHTS: dict[CalculationMethod, float] = {
    CalculationMethod.DIRECT_STUDY_MAPPING: 0.90,
    CalculationMethod.META_ANALYSIS_SYNTHESIS: 0.85,
    CalculationMethod.INTERPOLATED_DOSE_RESPONSE: 0.75,
    CalculationMethod.EXPERT_CONSENSUS: 0.60,
}


def remaining_life_expectancy(age: float, sex: Sex) -> float:
    """Remaining years at ``age``, interpolated linearly between table ages.

    Ages past either end of the table take the nearest entry. Unspecified
    sex uses the male table.
    """
    table = REMAINING_LIFE_TABLE.get(sex, REMAINING_LIFE_TABLE[Sex.MALE])
    ages = sorted(table)
    return float(np.interp(age, ages, [table[a] for a in ages]))


def baseline_life_expectancy(profile: UserProfile) -> float:
    """Total life expectancy in years before any behaviour adjustment."""
    age = profile.age if profile.age is not None else DEFAULT_AGE
    total = age + remaining_life_expectancy(age, profile.sex)
    logger.debug("Baseline life expectancy for age %s (%s): %.1f", age, profile.sex.value, total)
    return total


def evidence_quality(impacts: Sequence[MetricImpactDetail]) -> float:
    """Mean evidence weight of the impacts, or 0.0 for an empty set."""
    if not impacts:
        return 0.0
    return sum(EVIDENCE_WEIGHTS[i.calculation_method] for i in impacts) / len(impacts)


@dataclass(frozen=True)
class LifeProjection:
    """Projected total life expectancy compared with the baseline."""

    baseline_life_expectancy_years: float
    adjusted_life_expectancy_years: float
    current_age: float
    confidence: float
    confidence_interval_years: float = CONFIDENCE_INTERVAL_YEARS
    calculation_date: date = field(default_factory=date.today)

    @classmethod
    def from_impacts(
        cls,
        impacts: Sequence[MetricImpactDetail],
        profile: UserProfile,
    ) -> "LifeProjection":
        """Project life expectancy from daily (unscaled) impacts.

        Args:
            impacts: Per-metric daily impacts, typically after interactions
            profile: User the projection is for

        Returns:
            Projection bounded to [age + 1, 120] years
        """
        age = float(profile.age if profile.age is not None else DEFAULT_AGE)
        baseline = baseline_life_expectancy(profile)
        horizon = max(1.0, baseline - age)

        daily_minutes = sum(impact.lifespan_impact_minutes for impact in impacts)
        quality = evidence_quality(impacts)

        decay = math.exp(-BEHAVIOR_DECAY_RATE * horizon / 2.0)
        total_minutes = daily_minutes * horizon * 365.25 * decay
        impact_years = total_minutes / (365.25 * 24 * 60) * quality

        adjusted = max(age + 1.0, min(MAX_PROJECTED_YEARS, baseline + impact_years))
        logger.info(
            "Projection: %.1f min/day over %.1f years -> %.2f years (baseline %.1f)",
            daily_minutes,
            horizon,
            impact_years,
            baseline,
        )

        return cls(
            baseline_life_expectancy_years=baseline,
            adjusted_life_expectancy_years=adjusted,
            current_age=age,
            confidence=quality,
        )

    @property
    def net_impact_years(self) -> float:
        return self.adjusted_life_expectancy_years - self.baseline_life_expectancy_years

    @property
    def net_impact_days(self) -> float:
        return self.net_impact_years * 365.25

    @property
    def remaining_years(self) -> float:
        return max(0.0, self.adjusted_life_expectancy_years - self.current_age)

    @property
    def lower_bound_years(self) -> float:
        return self.adjusted_life_expectancy_years - self.confidence_interval_years / 2

    @property
    def upper_bound_years(self) -> float:
        return self.adjusted_life_expectancy_years + self.confidence_interval_years / 2

    @property
    def formatted_net_impact(self) -> str:
        """Signed net impact, in days under a year and in years otherwise."""
        sign = "+" if self.net_impact_years >= 0 else ""
        if abs(self.net_impact_years) < 1.0:
            return f"{sign}{self.net_impact_days:.0f} days"
        return f"{sign}{self.net_impact_years:.1f} years"

    @property
    def interpretation(self) -> str:
        years = self.net_impact_years
        if years > 5.0:
            return "Significantly extending life expectancy"
        if years > 2.0:
            return "Moderately extending life expectancy"
        if years > 0.5:
            return "Slightly extending life expectancy"
        if years > -0.5:
            return "Maintaining baseline life expectancy"
        if years > -2.0:
            return "Slightly reducing life expectancy"
        if years > -5.0:
            return "Moderately reducing life expectancy"
        return "Significantly reducing life expectancy"

    @property
    def confidence_description(self) -> str:
        percent = int(self.confidence * 100)
        if self.confidence >= 0.8:
            label = "High"
        elif self.confidence >= 0.6:
            label = "Moderate"
        elif self.confidence >= 0.4:
            label = "Limited"
        else:
            label = "Low"
        return f"{label} confidence ({percent}% evidence quality)"

    @property
    def battery_percentage(self) -> float:
        """Remaining years as a charge level, where 60 years is a full battery."""
        return min(100.0, max(0.0, self.remaining_years / BATTERY_FULL_REMAINING_YEARS * 100))

    @property
    def battery_display(self) -> str:
        return (
            f"{self.remaining_years:.1f} years remaining "
            f"(projected total: {self.adjusted_life_expectancy_years:.1f} years)"
        )

    def to_dict(self) -> dict:
        return {
            "calculation_date": self.calculation_date.isoformat(),
            "current_age": self.current_age,
            "baseline_life_expectancy_years": self.baseline_life_expectancy_years,
            "adjusted_life_expectancy_years": self.adjusted_life_expectancy_years,
            "net_impact_years": self.net_impact_years,
            "confidence": self.confidence,
            "interpretation": self.interpretation,
            "remaining_years": self.remaining_years,
            "battery_percentage": self.battery_percentage,
        }
