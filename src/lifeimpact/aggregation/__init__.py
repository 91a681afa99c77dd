"""Period totals and life-expectancy projection."""

from __future__ import annotations

from lifeimpact.aggregation.optimal import optimal_metrics
from lifeimpact.aggregation.projection import LifeProjection
from lifeimpact.aggregation.service import (
    LifeImpactService,
    PeriodScaler,
    calendar_period_scaler,
    legacy_period_scaler,
)

__all__ = [
    "LifeImpactService",
    "LifeProjection",
    "PeriodScaler",
    "calendar_period_scaler",
    "legacy_period_scaler",
    "optimal_metrics",
]
