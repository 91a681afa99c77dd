"""Per-metric impact facade.

Dispatches a metric value to its calculator, attaches the applicable
evidence and returns a ``MetricImpactDetail``. This is the only place the
evidence registry and the numeric calculators meet; study metadata never
feeds back into the numbers.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping, Optional

from lifeimpact.calculators import MetricCalculator, build_calculators
from lifeimpact.evidence.registry import EvidenceRegistry, get_registry
from lifeimpact.impact.models import CalculationMethod, MetricImpactDetail
from lifeimpact.metrics.types import METRIC_SPECS, HealthMetric, MetricType, UserProfile

logger = logging.getLogger(__name__)

NO_DATA_RECOMMENDATION = "Not enough data to estimate an impact for this metric."


class ImpactCalculator:
    """Turns individual metric values into impact records."""

    def __init__(
        self,
        profile: UserProfile,
        calculators: Optional[Mapping[MetricType, MetricCalculator]] = None,
        registry: Optional[EvidenceRegistry] = None,
    ):
        """Initialize the facade.

        Args:
            profile: User profile applied to every calculation
            calculators: Lookup table of calculators. Defaults to the
                standard set with legacy remaining-years policies.
            registry: Evidence registry. Defaults to the shared registry.
        """
        self.profile = profile
        self.calculators = dict(calculators) if calculators is not None else build_calculators()
        self.registry = registry or get_registry()

    def compute_impact(self, metric_type: MetricType, value: float) -> MetricImpactDetail:
        """Compute the daily impact of one metric value.

        Never raises for odd numeric input: out-of-range values are clamped
        by the calculator, and NaN or an unregistered metric type yields a
        neutral zero-impact record.
        """
        calculator = self.calculators.get(metric_type)
        if calculator is None:
            logger.warning("No calculator registered for %s", metric_type)
            return self._neutral(metric_type, value)

        if math.isnan(value):
            logger.warning("Ignoring NaN value for %s", metric_type.value)
            return self._neutral(metric_type, value)

        result = calculator.compute(value, self.profile)
        minutes = result.daily_minutes
        if not math.isfinite(minutes):
            logger.warning(
                "Non-finite impact for %s=%r; using zero", metric_type.value, value
            )
            minutes = 0.0

        return MetricImpactDetail(
            metric_type=metric_type,
            current_value=value,
            baseline_value=result.baseline_value,
            lifespan_impact_minutes=minutes,
            calculation_method=result.calculation_method,
            recommendation=result.recommendation,
            study_references=self.registry.get_applicable_studies(metric_type, self.profile),
            relative_risk=result.relative_risk,
        )

    def calculate_impact(self, metric: HealthMetric) -> MetricImpactDetail:
        return self.compute_impact(metric.type, metric.value)

    def _neutral(self, metric_type: MetricType, value: float) -> MetricImpactDetail:
        spec = METRIC_SPECS.get(metric_type)
        return MetricImpactDetail(
            metric_type=metric_type,
            current_value=value,
            baseline_value=spec.baseline_value if spec else 0.0,
            lifespan_impact_minutes=0.0,
            calculation_method=CalculationMethod.EXPERT_CONSENSUS,
            recommendation=NO_DATA_RECOMMENDATION,
        )
