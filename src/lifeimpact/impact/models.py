"""Impact records produced by the scoring engine."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from lifeimpact.evidence.models import StudyReference
from lifeimpact.metrics.types import MetricType

MINUTES_PER_HOUR = 60.0
MINUTES_PER_DAY = 1440.0
MINUTES_PER_WEEK = 10080.0
MINUTES_PER_MONTH = 43200.0  # 30 days
MINUTES_PER_YEAR = 525600.0  # 365 days

# Impacts closer to zero than this are reported as "same" as baseline
COMPARISON_DEAD_BAND = 0.5


class CalculationMethod(Enum):
    """How an impact figure was derived from the literature."""

    DIRECT_STUDY_MAPPING = "directStudyMapping"
    INTERPOLATED_DOSE_RESPONSE = "interpolatedDoseResponse"
    META_ANALYSIS_SYNTHESIS = "metaAnalysisSynthesis"
    EXPERT_CONSENSUS = "expertConsensus"


class ComparisonResult(Enum):
    """Where a metric sits relative to its baseline."""

    BETTER = "better"
    SAME = "same"
    WORSE = "worse"


class PowerLevel(Enum):
    """Battery charge level shown for an impact."""

    FULL = "full"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    CRITICAL = "critical"

    @property
    def fill_percent(self) -> float:
        return {
            PowerLevel.FULL: 1.0,
            PowerLevel.HIGH: 0.75,
            PowerLevel.MEDIUM: 0.5,
            PowerLevel.LOW: 0.25,
            PowerLevel.CRITICAL: 0.1,
        }[self]


class PeriodType(Enum):
    """Aggregation period for impact totals."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


def describe_minutes(minutes: float) -> str:
    """Describe a signed impact, e.g. "2.5 hours gained" or "3 weeks lost"."""
    magnitude = abs(minutes)
    direction = "gained" if minutes >= 0 else "lost"

    units = (
        (MINUTES_PER_YEAR, "year"),
        (MINUTES_PER_MONTH, "month"),
        (MINUTES_PER_WEEK, "week"),
        (MINUTES_PER_DAY, "day"),
        (MINUTES_PER_HOUR, "hour"),
    )
    for size, name in units:
        if magnitude >= size:
            amount = magnitude / size
            if amount >= 2:
                return f"{amount:.0f} {name}s {direction}"
            return f"{amount:.1f} {name} {direction}"

    whole = int(magnitude)
    return f"{whole} minute{'' if whole == 1 else 's'} {direction}"


@dataclass(frozen=True)
class MetricImpactDetail:
    """Impact of one metric on life expectancy, in minutes per day.

    Records are never modified in place; adjustments such as interaction
    effects produce a new record via ``with_impact``.
    """

    metric_type: MetricType
    current_value: float
    baseline_value: float
    lifespan_impact_minutes: float
    calculation_method: CalculationMethod
    recommendation: str = ""
    study_references: tuple[StudyReference, ...] = ()
    relative_risk: Optional[float] = None

    def with_impact(self, minutes: float) -> "MetricImpactDetail":
        """Return a copy with a different impact value."""
        return dataclasses.replace(self, lifespan_impact_minutes=minutes)

    @property
    def study_count(self) -> int:
        return len(self.study_references)

    @property
    def lifespan_impact_hours(self) -> float:
        return self.lifespan_impact_minutes / MINUTES_PER_HOUR

    @property
    def lifespan_impact_days(self) -> float:
        return self.lifespan_impact_minutes / MINUTES_PER_DAY

    @property
    def comparison_to_baseline(self) -> ComparisonResult:
        if self.lifespan_impact_minutes > COMPARISON_DEAD_BAND:
            return ComparisonResult.BETTER
        if self.lifespan_impact_minutes < -COMPARISON_DEAD_BAND:
            return ComparisonResult.WORSE
        return ComparisonResult.SAME

    @property
    def power_level(self) -> PowerLevel:
        minutes = self.lifespan_impact_minutes
        if minutes > 120:
            return PowerLevel.FULL
        if minutes > 60:
            return PowerLevel.HIGH
        if minutes > -60:
            return PowerLevel.MEDIUM
        if minutes > -120:
            return PowerLevel.LOW
        return PowerLevel.CRITICAL

    @property
    def impact_description(self) -> str:
        return describe_minutes(self.lifespan_impact_minutes)

    def to_dict(self) -> dict:
        return {
            "metric_type": self.metric_type.value,
            "current_value": self.current_value,
            "baseline_value": self.baseline_value,
            "lifespan_impact_minutes": self.lifespan_impact_minutes,
            "relative_risk": self.relative_risk,
            "calculation_method": self.calculation_method.value,
            "comparison_to_baseline": self.comparison_to_baseline.value,
            "recommendation": self.recommendation,
            "studies": [study.id for study in self.study_references],
        }


@dataclass(frozen=True)
class ImpactDataPoint:
    """Aggregated impact for one period.

    ``total_impact_minutes`` is scaled to the period; ``metric_impacts``
    holds the unscaled daily value per metric type.
    """

    date: date
    period_type: PeriodType
    total_impact_minutes: float
    metric_impacts: dict[MetricType, float] = field(default_factory=dict)

    @property
    def formatted_impact(self) -> str:
        """Compact signed total, e.g. "+12 min", "-3.5 hrs", "+2.1 days"."""
        total = self.total_impact_minutes
        sign = "+" if total >= 0 else "-"
        if abs(total) < MINUTES_PER_HOUR:
            return f"{sign}{int(abs(total))} min"
        hours = abs(total) / MINUTES_PER_HOUR
        if hours < 24:
            return f"{sign}{hours:.1f} hrs"
        return f"{sign}{hours / 24:.1f} days"

    @property
    def top_contributing_metric(self) -> Optional[MetricType]:
        if not self.metric_impacts:
            return None
        return max(self.metric_impacts, key=lambda m: abs(self.metric_impacts[m]))

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "period_type": self.period_type.value,
            "total_impact_minutes": self.total_impact_minutes,
            "metric_impacts": {
                metric_type.value: minutes
                for metric_type, minutes in self.metric_impacts.items()
            },
        }
