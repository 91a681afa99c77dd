"""Cross-metric interaction rules.

A rule fires when its trigger metrics are present and its condition holds
over the raw metric values; it then multiplies the impact of each target
metric by its coefficient. ``DEFAULT_RULES`` order matters: the engine
applies rules one after another to a running list of impacts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from lifeimpact.metrics.types import MetricType

MetricValues = Mapping[MetricType, float]

SLEEP_EXERCISE_SYNERGY = 1.15
ALCOHOL_HRV_ANTAGONISM = 0.75
STRESS_SLEEP_ANTAGONISM = 0.85
BODY_MASS_ACTIVITY_THRESHOLD = 200.0  # lb
BODY_MASS_ACTIVITY_REDUCTION = 0.90  # per 20 lb over threshold


def constant(value: float) -> Callable[[MetricValues], float]:
    """Coefficient that ignores the metric values."""
    return lambda values: value


@dataclass(frozen=True)
class InteractionRule:
    """A trigger condition plus a multiplicative correction."""

    name: str
    title: str
    description: str
    requires: tuple[MetricType, ...]
    targets: tuple[MetricType, ...]
    condition: Callable[[MetricValues], bool]
    coefficient: Callable[[MetricValues], float]
    is_positive: bool = False
    requires_any: tuple[MetricType, ...] = ()

    def is_triggered(self, values: MetricValues) -> bool:
        if not all(metric_type in values for metric_type in self.requires):
            return False
        if self.requires_any and not any(m in values for m in self.requires_any):
            return False
        return self.condition(values)


def _sleep_exercise_condition(values: MetricValues) -> bool:
    sleep = values[MetricType.SLEEP_HOURS]
    exercise = values[MetricType.EXERCISE_MINUTES]
    # 20 min/day is a proxy for ~150 min/week
    return 7.0 <= sleep <= 8.5 and exercise >= 20.0


def _body_mass_activity_coefficient(values: MetricValues) -> float:
    excess = values[MetricType.BODY_MASS] - BODY_MASS_ACTIVITY_THRESHOLD
    return BODY_MASS_ACTIVITY_REDUCTION ** (excess / 20.0)


SLEEP_EXERCISE_RULE = InteractionRule(
    name="sleep_exercise_synergy",
    title="Sleep-Exercise Synergy",
    description="Your good sleep and regular exercise are amplifying each other's benefits",
    requires=(MetricType.SLEEP_HOURS, MetricType.EXERCISE_MINUTES),
    targets=(MetricType.SLEEP_HOURS, MetricType.EXERCISE_MINUTES),
    condition=_sleep_exercise_condition,
    coefficient=constant(SLEEP_EXERCISE_SYNERGY),
    is_positive=True,
)

ALCOHOL_HRV_RULE = InteractionRule(
    name="alcohol_hrv_antagonism",
    title="Alcohol-HRV Impact",
    description="Alcohol consumption is reducing your heart rate variability benefits",
    requires=(MetricType.ALCOHOL_CONSUMPTION, MetricType.HEART_RATE_VARIABILITY),
    targets=(MetricType.HEART_RATE_VARIABILITY,),
    # Any answer below 9 means the user drinks at least occasionally
    condition=lambda values: values[MetricType.ALCOHOL_CONSUMPTION] < 9.0,
    coefficient=constant(ALCOHOL_HRV_ANTAGONISM),
)

BODY_MASS_ACTIVITY_RULE = InteractionRule(
    name="body_mass_activity",
    title="Body Mass-Activity Impact",
    description="Higher body mass is reducing the benefits of your activity",
    requires=(MetricType.BODY_MASS,),
    requires_any=(MetricType.STEPS, MetricType.EXERCISE_MINUTES),
    targets=(MetricType.STEPS, MetricType.EXERCISE_MINUTES),
    condition=lambda values: values[MetricType.BODY_MASS] > BODY_MASS_ACTIVITY_THRESHOLD,
    coefficient=_body_mass_activity_coefficient,
)

STRESS_SLEEP_RULE = InteractionRule(
    name="stress_sleep_antagonism",
    title="Stress-Sleep Impact",
    description="High stress is reducing the restorative benefits of your sleep",
    requires=(MetricType.STRESS_LEVEL, MetricType.SLEEP_HOURS),
    targets=(MetricType.SLEEP_HOURS,),
    condition=lambda values: values[MetricType.STRESS_LEVEL] > 6.0,
    coefficient=constant(STRESS_SLEEP_ANTAGONISM),
)

DEFAULT_RULES: tuple[InteractionRule, ...] = (
    SLEEP_EXERCISE_RULE,
    ALCOHOL_HRV_RULE,
    BODY_MASS_ACTIVITY_RULE,
    STRESS_SLEEP_RULE,
)
