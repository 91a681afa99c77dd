"""Physical activity calculators: steps, exercise, active energy, body mass,
VO2 max and oxygen saturation.

Steps and exercise use relative-risk curves from cohort meta-analyses
(Paluch 2022, Saint-Maurice 2020, Zhao 2020). The remaining metrics use
reference-point linear models.
"""

from __future__ import annotations

import math

from lifeimpact.calculators.base import (
    LinearDeviationCalculator,
    RelativeRiskCalculator,
)
from lifeimpact.impact.models import CalculationMethod
from lifeimpact.metrics.types import MetricType, UserProfile

OPTIMAL_STEPS = 10000.0
WEEKLY_EXERCISE_GUIDELINE = 150.0
DAILY_EXERCISE_GUIDELINE = WEEKLY_EXERCISE_GUIDELINE / 7.0  # ~21.4 min


def steps_relative_risk(steps: float) -> float:
    """J-shaped relative risk for daily step count.

    Risk falls steeply up to 10,000 steps, bottoms out around 12,000 and
    climbs back above 20,000. Excess beyond 25,000 is capped at +10,000.
    """
    steps = max(0.0, steps)

    if steps < 2700:
        return 1.6 - 0.2 * (steps / 2700)
    if steps < 4000:
        return 1.4 - 0.1 * ((steps - 2700) / (4000 - 2700))
    if steps <= 10000:
        ratio = (steps - 4000) / (10000 - 4000)
        return 1.3 - 0.35 * math.log(1 + ratio * (math.e - 1))
    if steps <= 12000:
        return 0.95 - 0.05 * ((steps - 10000) / 2000)
    if steps <= 20000:
        return 0.90 + 0.03 * ((steps - 12000) / 8000)
    if steps <= 25000:
        return 0.93 + 0.07 * ((steps - 20000) / 5000)
    return 1.00 + 0.15 * min((steps - 25000) / 10000, 1.0)


def exercise_relative_risk(weekly_minutes: float) -> float:
    """Relative risk for weekly moderate exercise minutes.

    Logarithmic gain up to the 150 min/week guideline (RR 0.77), linear to
    0.65 at 300 min, then a slow slide to a 0.60 floor at 600 min.
    """
    weekly = max(0.0, weekly_minutes)

    if weekly <= 0:
        return 1.0
    if weekly <= 150:
        return 1 - 0.23 * math.log(1 + weekly / 150 * (math.e - 1))
    if weekly <= 300:
        return 0.77 - 0.12 * ((weekly - 150) / 150)
    return 0.65 - 0.05 * min((weekly - 300) / 300, 1.0)


class StepsCalculator(RelativeRiskCalculator):
    metric_type = MetricType.STEPS
    calculation_method = CalculationMethod.INTERPOLATED_DOSE_RESPONSE
    scaling_factor = 0.082  # 3.2 years for a 50% RR reduction

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return steps_relative_risk(value)

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if value >= 25000:
            return (
                "Very high activity level detected. Consider reducing to "
                "15,000-20,000 steps to prevent overuse injuries while "
                "maintaining health benefits."
            )
        if value >= 20000:
            return (
                "High activity level! You're getting great benefits, but "
                "consider injury prevention. Stay hydrated and listen to your body."
            )
        if value >= 12000:
            return (
                "Excellent! You're at optimal step levels. Maintain this "
                "activity level for maximum health benefits."
            )
        if value >= 8000:
            return (
                "Great job! You're in a healthy range. Try to reach "
                f"{int(OPTIMAL_STEPS):,} steps for maximum benefits."
            )
        if value >= 4000:
            difference = int(OPTIMAL_STEPS - value)
            return (
                f"Good progress! Aim for {difference:,} more steps daily to "
                f"reach the optimal {int(OPTIMAL_STEPS):,} steps."
            )
        if value >= 2700:
            return (
                "You're making progress from a sedentary baseline. Try adding "
                f"500-1000 steps daily towards {int(OPTIMAL_STEPS):,} steps."
            )
        return (
            "Start small with short 5-10 minute walks. Gradually build towards "
            f"4,000 steps daily, then work up to {int(OPTIMAL_STEPS):,} steps."
        )


class ExerciseCalculator(RelativeRiskCalculator):
    """Exercise minutes arrive as a daily average and are scored weekly."""

    metric_type = MetricType.EXERCISE_MINUTES
    calculation_method = CalculationMethod.META_ANALYSIS_SYNTHESIS
    scaling_factor = 0.126  # 3.4 years for a 35% RR reduction

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return exercise_relative_risk(value * 7.0)

    def recommendation(self, value: float, profile: UserProfile) -> str:
        weekly = value * 7.0
        if weekly >= 300:
            return (
                "Outstanding! You exceed WHO guidelines. Maintain this "
                "excellent exercise routine."
            )
        if weekly >= 150:
            return (
                "Perfect! You meet WHO guidelines for physical activity. "
                "Consider gradually increasing for additional benefits."
            )
        if weekly >= 75:
            return (
                f"Good progress! Aim for {int(150 - weekly)} more minutes "
                "weekly to meet WHO guidelines."
            )
        return (
            "Start gradually with 10-15 minutes daily. Build towards 150 "
            "minutes of moderate exercise per week."
        )


class ActiveEnergyCalculator(LinearDeviationCalculator):
    """Reference 400 kcal; 17.4 min per 100 kcal, deviation capped at 900 kcal."""

    metric_type = MetricType.ACTIVE_ENERGY_BURNED
    unit_size = 100.0
    minutes_per_unit = 17.4
    deviation_cap = 900.0

    def recommendation(self, value: float, profile: UserProfile) -> str:
        reference = self.baseline_value(profile)
        if value >= reference + 200:
            return (
                "Excellent active energy burn! Maintain this level for "
                "optimal health benefits."
            )
        if value >= reference:
            return (
                "Good active energy level. Consider increasing intensity or "
                "duration of activities for additional benefits."
            )
        deficit = int(reference - value)
        return (
            f"Aim to burn {deficit} more calories daily through increased "
            "physical activity."
        )


class BodyMassCalculator(LinearDeviationCalculator):
    """Reference 160 lb (about BMI 24.5); 17.4 min per 20 lb, uncapped."""

    metric_type = MetricType.BODY_MASS
    unit_size = 20.0
    minutes_per_unit = 17.4

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if 140.0 <= value <= 180.0:
            return (
                "Your body mass is in a healthy range. Maintain through "
                "balanced nutrition and regular exercise."
            )
        if value > 180.0:
            return (
                "Consider gradual weight loss through caloric reduction and "
                "increased physical activity. Consult a healthcare provider "
                "for personalized guidance."
            )
        return (
            "Consider gradual weight gain through increased caloric intake and "
            "strength training. Consult a healthcare provider if underweight "
            "concerns persist."
        )


class Vo2MaxCalculator(LinearDeviationCalculator):
    """Reference 40 ml/kg/min; 21.8 min per 5 units, deviation capped at 20."""

    metric_type = MetricType.VO2_MAX
    unit_size = 5.0
    minutes_per_unit = 21.8
    deviation_cap = 20.0

    def recommendation(self, value: float, profile: UserProfile) -> str:
        reference = self.baseline_value(profile)
        if value >= reference + 10:
            return (
                "Excellent cardiovascular fitness! Maintain with regular "
                "high-intensity exercise."
            )
        if value >= reference:
            return (
                "Good cardiovascular fitness. Consider adding interval "
                "training to improve further."
            )
        return (
            "Focus on improving cardiovascular fitness through regular aerobic "
            "exercise and interval training."
        )


class OxygenSaturationCalculator(LinearDeviationCalculator):
    """Reference 98%; 8.7 min per 2 percentage points."""

    metric_type = MetricType.OXYGEN_SATURATION
    unit_size = 2.0
    minutes_per_unit = 8.7

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if value >= self.baseline_value(profile):
            return (
                "Excellent oxygen saturation. Continue maintaining good "
                "respiratory health."
            )
        if value >= 95.0:
            return (
                "Good oxygen saturation. Practice deep breathing exercises to "
                "optimize respiratory function."
            )
        return (
            "Low oxygen saturation detected. Consider consulting a healthcare "
            "provider, especially if persistent."
        )
