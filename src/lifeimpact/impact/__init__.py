"""Impact records and the per-metric impact facade.

The facade lives in ``lifeimpact.impact.facade``; it is not re-exported
here because the calculators import these models.
"""

from __future__ import annotations

from lifeimpact.impact.models import (
    CalculationMethod,
    ComparisonResult,
    ImpactDataPoint,
    MetricImpactDetail,
    PeriodType,
    PowerLevel,
)

__all__ = [
    "CalculationMethod",
    "ComparisonResult",
    "ImpactDataPoint",
    "MetricImpactDetail",
    "PeriodType",
    "PowerLevel",
]
