"""Cardiovascular calculators: resting heart rate, sleep duration and HRV."""

from __future__ import annotations

from lifeimpact.calculators.base import (
    AGE_DERIVED_DEFAULT_35,
    RelativeRiskCalculator,
)
from lifeimpact.impact.models import CalculationMethod
from lifeimpact.metrics.types import MetricType, UserProfile

RHR_HEALTHY_LOW = 50.0
RHR_HEALTHY_HIGH = 70.0
RHR_OPTIMAL = 60.0

SLEEP_OPTIMAL_LOW = 7.0
SLEEP_OPTIMAL_HIGH = 8.0
SLEEP_OPTIMAL = 7.5

HRV_DEFAULT_AGE = 35
HRV_FLOOR = 15.0


def rhr_relative_risk(bpm: float) -> float:
    """Relative risk for resting heart rate.

    Inside the 50-70 bpm band the penalty is 2% per 10 bpm away from 60.
    Outside the band, risk rises 16% per 10 bpm above 70 and 8% per 10 bpm
    below 50, starting from the band-edge value.
    """
    edge_risk = 1.0 + ((RHR_HEALTHY_HIGH - RHR_OPTIMAL) / 10.0) * 0.02

    if bpm > RHR_HEALTHY_HIGH:
        return edge_risk + ((bpm - RHR_HEALTHY_HIGH) / 10.0) * 0.16
    if bpm < RHR_HEALTHY_LOW:
        return edge_risk + ((RHR_HEALTHY_LOW - bpm) / 10.0) * 0.08
    return 1.0 + (abs(bpm - RHR_OPTIMAL) / 10.0) * 0.02


def sleep_relative_risk(hours: float) -> float:
    """U-shaped relative risk for nightly sleep duration."""
    if SLEEP_OPTIMAL_LOW <= hours <= SLEEP_OPTIMAL_HIGH:
        # +2% per half hour away from 7.5 h
        deviation = min(abs(hours - SLEEP_OPTIMAL), 0.5)
        return 1.0 + (deviation / 0.5) * 0.02
    if hours < 6.0:
        return 1.0 + (6.0 - hours) * 0.08
    if hours < SLEEP_OPTIMAL_LOW:
        return 1.0 + (SLEEP_OPTIMAL_LOW - hours) * 0.06
    if hours <= 9.0:
        return 1.0 + (hours - SLEEP_OPTIMAL_HIGH) * 0.08
    return 1.0 + (hours - 9.0) * 0.10


def hrv_optimum(age: int) -> float:
    """Age-adjusted optimal HRV (SDNN, ms), never below 15 ms."""
    return max(HRV_FLOOR, 50.0 - 0.8 * (age - 20))


def hrv_relative_risk(hrv: float, age: int) -> float:
    """Relative risk for HRV as a ratio of the age-adjusted optimum.

    Ratios in [0.8, 1.2] are neutral. Below, risk rises 5% per 0.1 of
    deficit; above, it falls 2% per 0.1 of excess, up to a ratio of 2.0.
    """
    ratio = hrv / hrv_optimum(age)

    if ratio < 0.8:
        return 1.0 + ((0.8 - ratio) / 0.1) * 0.05
    if ratio > 1.2:
        excess = min(ratio - 1.2, 0.8)
        return 1.0 - (excess / 0.1) * 0.02
    return 1.0


class RestingHeartRateCalculator(RelativeRiskCalculator):
    metric_type = MetricType.RESTING_HEART_RATE
    calculation_method = CalculationMethod.DIRECT_STUDY_MAPPING
    scaling_factor = 0.04

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return rhr_relative_risk(value)

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if RHR_HEALTHY_LOW <= value <= RHR_HEALTHY_HIGH:
            return (
                "Great! Your resting heart rate is in the healthy range. "
                "Maintain your current fitness level."
            )
        if value > RHR_HEALTHY_HIGH:
            excess = int(value - RHR_HEALTHY_HIGH)
            return (
                "Your RHR is elevated. Regular cardio exercise can help lower "
                f"it by {excess}+ bpm. Consult your doctor if consistently "
                "above 90 bpm."
            )
        return (
            "Your RHR is quite low. If you're an athlete, this is normal. "
            "Otherwise, consult your doctor if you experience symptoms."
        )


class SleepCalculator(RelativeRiskCalculator):
    metric_type = MetricType.SLEEP_HOURS
    calculation_method = CalculationMethod.INTERPOLATED_DOSE_RESPONSE
    scaling_factor = 0.05

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return sleep_relative_risk(value)

    def recommendation(self, value: float, profile: UserProfile) -> str:
        if SLEEP_OPTIMAL_LOW <= value <= SLEEP_OPTIMAL_HIGH:
            return (
                "Perfect! You're getting optimal sleep duration. Maintain good "
                "sleep hygiene for best quality."
            )
        if value < SLEEP_OPTIMAL_LOW:
            deficit = SLEEP_OPTIMAL_LOW - value
            return (
                f"Try to get {deficit:.1f} more hours of sleep. Aim for "
                f"{int(SLEEP_OPTIMAL)} hours nightly for optimal health."
            )
        return (
            "You're sleeping longer than optimal. If you feel refreshed, this "
            "may be normal. Consider sleep quality factors."
        )


class HeartRateVariabilityCalculator(RelativeRiskCalculator):
    """HRV scored against an age-adjusted optimum (default age 35)."""

    metric_type = MetricType.HEART_RATE_VARIABILITY
    calculation_method = CalculationMethod.INTERPOLATED_DOSE_RESPONSE
    scaling_factor = 0.04
    default_policy = AGE_DERIVED_DEFAULT_35

    @staticmethod
    def _age(profile: UserProfile) -> int:
        return profile.age if profile.age is not None else HRV_DEFAULT_AGE

    def baseline_value(self, profile: UserProfile) -> float:
        return hrv_optimum(self._age(profile))

    def relative_risk(self, value: float, profile: UserProfile) -> float:
        return hrv_relative_risk(value, self._age(profile))

    def recommendation(self, value: float, profile: UserProfile) -> str:
        ratio = value / self.baseline_value(profile)
        if 0.8 <= ratio <= 1.2:
            return (
                "Your HRV is in a healthy range for your age. Maintain stress "
                "management and recovery practices."
            )
        if ratio < 0.8:
            return (
                "Consider stress reduction, better sleep, and adequate recovery "
                "between workouts to improve HRV."
            )
        return (
            "Excellent HRV! Your autonomic nervous system shows good balance "
            "and recovery capacity."
        )
