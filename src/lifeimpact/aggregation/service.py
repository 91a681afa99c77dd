"""Aggregation of per-metric impacts into period totals."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Callable, Iterable, Optional

from lifeimpact.aggregation.optimal import optimal_metrics
from lifeimpact.aggregation.projection import LifeProjection
from lifeimpact.calculators import (
    RemainingYearsPolicy,
    build_calculators,
    unified_policies,
)
from lifeimpact.impact.facade import ImpactCalculator
from lifeimpact.impact.models import ImpactDataPoint, MetricImpactDetail, PeriodType
from lifeimpact.interactions.engine import InteractionEffectEngine
from lifeimpact.metrics.types import HealthMetric, MetricType, UserProfile

logger = logging.getLogger(__name__)

PeriodScaler = Callable[[float, PeriodType], float]

LEGACY_PERIOD_DAYS: dict[PeriodType, float] = {
    PeriodType.DAY: 1.0,
    PeriodType.MONTH: 30.0,
    PeriodType.YEAR: 365.0,
}

CALENDAR_PERIOD_DAYS: dict[PeriodType, float] = {
    PeriodType.DAY: 1.0,
    PeriodType.MONTH: 365.25 / 12,
    PeriodType.YEAR: 365.25,
}


def legacy_period_scaler(daily_total: float, period_type: PeriodType) -> float:
    """Scale a daily total using 30-day months and 365-day years."""
    return daily_total * LEGACY_PERIOD_DAYS[period_type]


def calendar_period_scaler(daily_total: float, period_type: PeriodType) -> float:
    """Scale a daily total using average Gregorian month and year lengths."""
    return daily_total * CALENDAR_PERIOD_DAYS[period_type]


PERIOD_SCALERS: dict[str, PeriodScaler] = {
    "legacy": legacy_period_scaler,
    "calendar": calendar_period_scaler,
}


class LifeImpactService:
    """Computes per-metric impacts and period totals for one user.

    Per-metric impacts come from the impact facade, then the interaction
    engine adjusts them as a set. Only the period total is scaled; the
    per-metric breakdown always holds daily minutes.
    """

    def __init__(
        self,
        profile: UserProfile,
        calculator: Optional[ImpactCalculator] = None,
        engine: Optional[InteractionEffectEngine] = None,
        period_scaler: PeriodScaler = legacy_period_scaler,
    ):
        self.profile = profile
        self.calculator = calculator or ImpactCalculator(profile)
        self.engine = engine or InteractionEffectEngine()
        self.period_scaler = period_scaler

    @classmethod
    def from_settings(cls, profile: UserProfile, settings) -> "LifeImpactService":
        """Build a service from ``lifeimpact.config.settings.Settings``."""
        engine_config = settings.engine
        policies = None
        if engine_config.remaining_years == "unified":
            policies = unified_policies(
                RemainingYearsPolicy(
                    name=f"unified_age_{engine_config.unified_default_age}",
                    default_age=engine_config.unified_default_age,
                )
            )
        calculator = ImpactCalculator(profile, calculators=build_calculators(policies))
        return cls(
            profile,
            calculator=calculator,
            period_scaler=PERIOD_SCALERS[engine_config.period_scaling],
        )

    def calculate_impact(self, metric: HealthMetric) -> MetricImpactDetail:
        """Impact of a single metric, without interaction effects."""
        return self.calculator.calculate_impact(metric)

    def calculate_impacts(self, metrics: Iterable[HealthMetric]) -> list[MetricImpactDetail]:
        """Per-metric impacts for a set of metrics, with interactions applied."""
        metrics = list(metrics)
        impacts = [self.calculator.calculate_impact(metric) for metric in metrics]
        return self.engine.apply_interactions(impacts, metrics)

    def calculate_total_impact(
        self,
        metrics: Iterable[HealthMetric],
        period_type: PeriodType = PeriodType.DAY,
        on_date: Optional[date] = None,
    ) -> ImpactDataPoint:
        """Aggregate impacts into one data point for the period.

        Args:
            metrics: Metrics for the day being scored
            period_type: Period the total is scaled to
            on_date: Date stamped on the data point. Defaults to today.

        Returns:
            Data point with the scaled total and the daily breakdown
        """
        impacts = self.calculate_impacts(metrics)

        breakdown: dict[MetricType, float] = defaultdict(float)
        for impact in impacts:
            breakdown[impact.metric_type] += impact.lifespan_impact_minutes

        daily_total = sum(impact.lifespan_impact_minutes for impact in impacts)
        total = self.period_scaler(daily_total, period_type)
        logger.debug(
            "Total impact %.2f min/day -> %.2f min/%s",
            daily_total,
            total,
            period_type.value,
        )

        return ImpactDataPoint(
            date=on_date or date.today(),
            period_type=period_type,
            total_impact_minutes=total,
            metric_impacts=dict(breakdown),
        )

    def project_lifespan(self, metrics: Iterable[HealthMetric]) -> LifeProjection:
        """Life-expectancy projection from the metrics' daily impacts."""
        return LifeProjection.from_impacts(self.calculate_impacts(metrics), self.profile)

    def project_potential_lifespan(self, on_date: Optional[date] = None) -> LifeProjection:
        """Projection if every metric sat at its optimal value for this profile."""
        return self.project_lifespan(optimal_metrics(self.profile, on_date))
