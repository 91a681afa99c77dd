"""Health metric types, measurements and the user profile.

Every metric the engine understands is a member of ``MetricType``. Fixed
attributes such as the reference value, the preferred direction and the
physiological clamp bounds live in ``METRIC_SPECS`` so that calculators
and presentation code read them from one place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class MetricType(Enum):
    """Health metrics supported by the scoring engine."""

    # Device metrics
    STEPS = "steps"
    EXERCISE_MINUTES = "exerciseMinutes"
    ACTIVE_ENERGY_BURNED = "activeEnergyBurned"
    RESTING_HEART_RATE = "restingHeartRate"
    HEART_RATE_VARIABILITY = "heartRateVariability"
    SLEEP_HOURS = "sleepHours"
    VO2_MAX = "vo2Max"
    OXYGEN_SATURATION = "oxygenSaturation"
    BODY_MASS = "bodyMass"

    # Questionnaire metrics (1-10 scales)
    NUTRITION_QUALITY = "nutritionQuality"
    STRESS_LEVEL = "stressLevel"
    SMOKING_STATUS = "smokingStatus"
    ALCOHOL_CONSUMPTION = "alcoholConsumption"
    SOCIAL_CONNECTIONS_QUALITY = "socialConnectionsQuality"

    @property
    def spec(self) -> "MetricSpec":
        return METRIC_SPECS[self]

    @property
    def display_name(self) -> str:
        return METRIC_SPECS[self].display_name


class Sex(Enum):
    """Sex category used for evidence applicability and life tables."""

    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Sex":
        """Parse a sex string, treating empty values as unspecified.

        Raises:
            ValueError: If the string is not a known category
        """
        if value is None or value == "":
            return cls.UNSPECIFIED
        normalized = value.strip().lower()
        if normalized in ("prefer_not_to_say", "prefernottosay", "other"):
            return cls.UNSPECIFIED
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(
                f"sex must be 'male', 'female' or 'unspecified', got '{value}'"
            ) from None


@dataclass(frozen=True)
class MetricSpec:
    """Fixed attributes of a metric type."""

    display_name: str
    unit: str
    baseline_value: float
    target_value: Optional[float]
    higher_is_better: bool
    lower_bound: float
    upper_bound: float
    is_questionnaire: bool = False

    @property
    def bounds(self) -> tuple[float, float]:
        return (self.lower_bound, self.upper_bound)


METRIC_SPECS: dict[MetricType, MetricSpec] = {
    MetricType.STEPS: MetricSpec(
        "Steps", "steps", 10000.0, 10000.0, True, 0.0, 100000.0
    ),
    MetricType.EXERCISE_MINUTES: MetricSpec(
        "Exercise", "min", 150.0 / 7.0, 30.0, True, 0.0, 720.0
    ),
    MetricType.ACTIVE_ENERGY_BURNED: MetricSpec(
        "Active Energy", "kcal", 400.0, 500.0, True, 0.0, 1300.0
    ),
    MetricType.RESTING_HEART_RATE: MetricSpec(
        "Resting Heart Rate", "bpm", 60.0, 60.0, False, 40.0, 120.0
    ),
    # Baseline is age-adjusted at calculation time; 40 ms is the display default
    MetricType.HEART_RATE_VARIABILITY: MetricSpec(
        "Heart Rate Variability", "ms", 40.0, 50.0, True, 5.0, 150.0
    ),
    MetricType.SLEEP_HOURS: MetricSpec(
        "Sleep", "h", 7.5, 8.0, True, 3.0, 12.0
    ),
    MetricType.VO2_MAX: MetricSpec(
        "VO2 Max", "ml/kg/min", 40.0, 45.0, True, 15.0, 80.0
    ),
    MetricType.OXYGEN_SATURATION: MetricSpec(
        "Oxygen Saturation", "%", 98.0, 100.0, True, 80.0, 100.0
    ),
    MetricType.BODY_MASS: MetricSpec(
        "Weight", "lb", 160.0, None, False, 80.0, 400.0
    ),
    MetricType.NUTRITION_QUALITY: MetricSpec(
        "Nutrition", "/10", 8.0, 8.0, True, 1.0, 10.0, is_questionnaire=True
    ),
    MetricType.STRESS_LEVEL: MetricSpec(
        "Stress Level", "/10", 3.0, 2.0, False, 1.0, 10.0, is_questionnaire=True
    ),
    # Questionnaire scale: 10 = never smoked, 0-1 = daily smoker
    MetricType.SMOKING_STATUS: MetricSpec(
        "Smoking", "/10", 0.0, 0.0, True, 0.0, 10.0, is_questionnaire=True
    ),
    # Questionnaire scale: 10 = never drinks; baseline is zero drinks/day
    MetricType.ALCOHOL_CONSUMPTION: MetricSpec(
        "Alcohol", "/10", 0.0, 0.0, True, 1.0, 10.0, is_questionnaire=True
    ),
    MetricType.SOCIAL_CONNECTIONS_QUALITY: MetricSpec(
        "Social Connections", "/10", 8.0, 8.0, True, 1.0, 10.0, is_questionnaire=True
    ),
}


def clamp_to_bounds(metric_type: MetricType, value: float) -> float:
    """Clamp a raw value to the metric's physiological bounds."""
    spec = METRIC_SPECS[metric_type]
    return max(spec.lower_bound, min(value, spec.upper_bound))


def get_metric_type(name: str) -> MetricType:
    """Look up a metric type by value ("sleepHours") or member name ("sleep_hours").

    Raises:
        KeyError: If the name matches no metric type
    """
    for metric_type in MetricType:
        if name == metric_type.value:
            return metric_type
    normalized = name.strip().lower().replace("-", "_").replace(" ", "_")
    for metric_type in MetricType:
        if normalized in (metric_type.name.lower(), metric_type.value.lower()):
            return metric_type
    raise KeyError(
        f"Unknown metric: {name}. "
        f"Available metrics: {', '.join(m.value for m in MetricType)}"
    )


@dataclass(frozen=True)
class UserProfile:
    """User attributes the engine reads. Supplied by an external profile store."""

    age: Optional[int] = None
    sex: Sex = Sex.UNSPECIFIED
    region: Optional[str] = None
    health_status: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.sex, str):
            object.__setattr__(self, "sex", Sex.parse(self.sex))
        if self.age is not None and self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age}")


@dataclass(frozen=True)
class HealthMetric:
    """A single daily metric value for one metric type."""

    type: MetricType
    value: float
    date: date = field(default_factory=date.today)
    source: str = "manual"
