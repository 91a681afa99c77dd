"""Lifestyle calculators for questionnaire metrics: alcohol, smoking,
stress, nutrition quality and social connections.

All inputs are 1-10 questionnaire answers. Alcohol and smoking answers
are first mapped to drinks per day and a smoking status code.
"""

from __future__ import annotations

from lifeimpact.calculators.base import FIXED_45_YEARS, RelativeRiskCalculator
from lifeimpact.impact.models import CalculationMethod
from lifeimpact.metrics.types import MetricType, UserProfile

MODERATE_DRINKS_PER_DAY = 1.0
MAX_DRINKS_PER_DAY = 10.0

NEVER_SMOKER = 0
FORMER_SMOKER = 1
LIGHT_SMOKER = 2
HEAVY_SMOKER = 3

SMOKING_RELATIVE_RISK: dict[int, float] = {
    NEVER_SMOKER: 1.0,
    FORMER_SMOKER: 1.3,
    LIGHT_SMOKER: 2.0,
    HEAVY_SMOKER: 3.0,
}

SMOKING_STATUS_LABELS: dict[int, str] = {
    NEVER_SMOKER: "Never smoker",
    FORMER_SMOKER: "Former smoker",
    LIGHT_SMOKER: "Current light smoker (<1 pack/day)",
    HEAVY_SMOKER: "Current heavy smoker (>=1 pack/day)",
}


def alcohol_drinks_per_day(answer: float) -> float:
    """Map the 1-10 alcohol answer (10 = never) to drinks per day."""
    if answer >= 9:
        return 0.0
    if answer >= 7:
        return 0.2
    if answer >= 3:
        return 0.7
    # Daily or heavy drinking, including answers between 2 and 3
    return 2.5


def alcohol_relative_risk(drinks_per_day: float) -> float:
    """Relative risk for daily alcohol intake.

    +5% per drink up to one drink, +10% per drink up to two, +15% per
    drink beyond that. Intake above 10 drinks is treated as 10.
    """
    drinks = max(0.0, min(drinks_per_day, MAX_DRINKS_PER_DAY))

    if drinks < 0.1:
        return 1.0
    if drinks <= MODERATE_DRINKS_PER_DAY:
        return 1.0 + drinks * 0.05
    if drinks <= 2.0:
        return 1.05 + (drinks - 1.0) * 0.10
    return 1.15 + (drinks - 2.0) * 0.15


def smoking_status_code(answer: float) -> int:
    """Map the 0-10 smoking answer (10 = never) to a status code 0-3."""
    if answer >= 9:
        return NEVER_SMOKER
    if answer >= 6:
        return FORMER_SMOKER
    if answer >= 2:
        return LIGHT_SMOKER
    return HEAVY_SMOKER


def stress_relative_risk(level: float) -> float:
    """Relative risk for self-reported stress (optimum 3, moderate 6, high 8)."""
    if level <= 3.0:
        return 1.0
    if level <= 6.0:
        return 1.0 + 0.03 * (level - 3.0)
    if level <= 8.0:
        return 1.09 + 0.05 * (level - 6.0)
    return 1.19 + 0.08 * (level - 8.0)


def nutrition_relative_risk(quality: float) -> float:
    """Relative risk for diet quality (optimum 8, moderate 6, poor 4).

    A high-quality diet is protective (RR 0.85 at 8, 2% lower per point
    above). Below the optimum the risk climbs 5%, 8% and 10% per point in
    successive bands.
    """
    if quality >= 8.0:
        return 0.85 - 0.02 * (quality - 8.0)
    if quality >= 6.0:
        return 0.85 + 0.05 * (8.0 - quality)
    if quality >= 4.0:
        return 0.95 + 0.08 * (6.0 - quality)
    return 1.11 + 0.10 * (4.0 - quality)


def social_relative_risk(quality: float) -> float:
    """Relative risk for social connection quality (thresholds 8, 5, 3).

    Same banded shape as nutrition: protective at 8 and above (3% per
    point), then 4%, 6% and 8% per point worse in successive bands.
    """
    if quality >= 8.0:
        return 0.85 - 0.03 * (quality - 8.0)
    if quality >= 5.0:
        return 0.85 + 0.04 * (8.0 - quality)
    if quality >= 3.0:
        return 0.97 + 0.06 * (5.0 - quality)
    return 1.09 + 0.08 * (3.0 - quality)


class AlcoholCalculator(RelativeRiskCalculator):
    metric_type = MetricType.ALCOHOL_CONSUMPTION
    calculation_method = CalculationMethod.DIRECT_STUDY_MAPPING
    scaling_factor = 0.08

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return alcohol_relative_risk(alcohol_drinks_per_day(value))

    def recommendation(self, value: float, profile: UserProfile) -> str:
        drinks = alcohol_drinks_per_day(value)
        if drinks <= 0.1:
            return "Excellent! No alcohol consumption supports optimal longevity."
        if drinks <= MODERATE_DRINKS_PER_DAY:
            return (
                "Consider reducing to minimize health risks. Even light "
                "drinking carries some mortality risk according to research."
            )
        if drinks <= 2.0:
            return (
                "Moderate drinking increases mortality risk. Consider reducing "
                "to 1 drink/day or less for better health outcomes."
            )
        return (
            "Heavy drinking significantly increases mortality risk. Consider "
            "seeking support to reduce consumption for optimal health."
        )


class SmokingCalculator(RelativeRiskCalculator):
    """Smoking is scored without the user's age (fixed 45 remaining years)."""

    metric_type = MetricType.SMOKING_STATUS
    calculation_method = CalculationMethod.META_ANALYSIS_SYNTHESIS
    scaling_factor = 0.15
    default_policy = FIXED_45_YEARS

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return SMOKING_RELATIVE_RISK[smoking_status_code(value)]

    def recommendation(self, value: float, profile: UserProfile) -> str:
        status = smoking_status_code(value)
        if status == NEVER_SMOKER:
            return "Excellent! Never smoking is the optimal choice for longevity."
        if status == FORMER_SMOKER:
            return (
                "Great job quitting! Former smokers still have elevated risk "
                "but much lower than current smokers."
            )
        return (
            "Quitting smoking is the single most impactful change for your "
            "health. Even light smoking significantly increases mortality risk."
        )


class StressCalculator(RelativeRiskCalculator):
    metric_type = MetricType.STRESS_LEVEL
    calculation_method = CalculationMethod.EXPERT_CONSENSUS
    scaling_factor = 0.04

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return stress_relative_risk(value)

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if value <= 3.0:
            return (
                "Good stress management! Maintain your current stress "
                "reduction practices."
            )
        if value <= 6.0:
            return (
                "Consider stress reduction techniques: meditation, exercise, "
                "adequate sleep, and social support."
            )
        if value <= 8.0:
            return (
                "High stress levels may impact health. Consider professional "
                "stress management counseling or therapy."
            )
        return (
            "Severe stress requires attention. Consider professional help and "
            "comprehensive stress management strategies."
        )


class NutritionCalculator(RelativeRiskCalculator):
    metric_type = MetricType.NUTRITION_QUALITY
    calculation_method = CalculationMethod.META_ANALYSIS_SYNTHESIS
    scaling_factor = 0.06

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return nutrition_relative_risk(value)

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if value >= 8.0:
            return (
                "Excellent nutrition! Maintain your healthy dietary patterns "
                "for optimal longevity benefits."
            )
        if value >= 6.0:
            return (
                "Good nutrition foundation. Consider adding more vegetables, "
                "fruits, whole grains, and healthy fats."
            )
        if value >= 4.0:
            return (
                "Moderate nutrition quality. Focus on reducing processed foods "
                "and increasing whole food consumption."
            )
        return (
            "Poor nutrition significantly impacts health. Consider consulting "
            "a nutritionist for a comprehensive dietary overhaul."
        )


class SocialConnectionsCalculator(RelativeRiskCalculator):
    """Social connections are scored without the user's age (fixed 45 years)."""

    metric_type = MetricType.SOCIAL_CONNECTIONS_QUALITY
    calculation_method = CalculationMethod.META_ANALYSIS_SYNTHESIS
    scaling_factor = 0.05
    default_policy = FIXED_45_YEARS

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return social_relative_risk(value)

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if value >= 8.0:
            return (
                "Excellent social connections! Continue nurturing these "
                "important relationships for optimal health benefits."
            )
        if value >= 6.0:
            return (
                "Good social connections. Consider joining community groups or "
                "scheduling regular social activities to strengthen bonds."
            )
        if value >= 3.0:
            return (
                "Limited social connections. Prioritize building meaningful "
                "relationships through shared activities or interests."
            )
        return (
            "Social isolation significantly impacts health. Consider reaching "
            "out to friends, joining clubs, or seeking support groups."
        )
