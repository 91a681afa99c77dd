"""Health impact scoring engine.

Turns daily health measurements into an estimated impact on life
expectancy, expressed in minutes gained or lost per day.
"""

from __future__ import annotations

from lifeimpact.aggregation.service import LifeImpactService
from lifeimpact.impact.facade import ImpactCalculator
from lifeimpact.impact.models import ImpactDataPoint, MetricImpactDetail, PeriodType
from lifeimpact.metrics.types import HealthMetric, MetricType, Sex, UserProfile

__version__ = "0.1.0"

__all__ = [
    "HealthMetric",
    "ImpactCalculator",
    "ImpactDataPoint",
    "LifeImpactService",
    "MetricImpactDetail",
    "MetricType",
    "PeriodType",
    "Sex",
    "UserProfile",
]
