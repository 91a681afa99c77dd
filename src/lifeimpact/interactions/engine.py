"""Applies interaction rules across a full set of per-metric impacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from lifeimpact.impact.models import MetricImpactDetail
from lifeimpact.interactions.rules import DEFAULT_RULES, InteractionRule
from lifeimpact.metrics.types import HealthMetric, MetricType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InteractionDescription:
    """Display details for an interaction that is currently active."""

    name: str
    title: str
    description: str
    impact_modifier: str  # e.g. "+15%"
    is_positive: bool
    coefficient: float


def metric_values(metrics: Iterable[HealthMetric]) -> dict[MetricType, float]:
    """Index raw metric values by type. A later metric of the same type wins."""
    return {metric.type: metric.value for metric in metrics}


def format_modifier(coefficient: float) -> str:
    percent = round((coefficient - 1.0) * 100)
    return f"{percent:+d}%"


class InteractionEffectEngine:
    """Runs an ordered list of interaction rules over impact records.

    Rules run in list order against a running copy of the impacts, so the
    corrections of several rules on the same metric compound.
    """

    def __init__(self, rules: Sequence[InteractionRule] = DEFAULT_RULES):
        self.rules: tuple[InteractionRule, ...] = tuple(rules)

    def apply_interactions(
        self,
        impacts: Sequence[MetricImpactDetail],
        metrics: Iterable[HealthMetric],
    ) -> list[MetricImpactDetail]:
        """Return adjusted copies of the impacts; the inputs are not modified.

        Args:
            impacts: Complete set of per-metric impacts
            metrics: Raw metrics the impacts were computed from

        Returns:
            Impacts in the same order, with interaction corrections applied
        """
        values = metric_values(metrics)
        adjusted = list(impacts)

        for rule in self.rules:
            if not rule.is_triggered(values):
                continue
            factor = rule.coefficient(values)
            adjusted = [
                impact.with_impact(impact.lifespan_impact_minutes * factor)
                if impact.metric_type in rule.targets
                else impact
                for impact in adjusted
            ]
            logger.info("Applied %s (x%.3f)", rule.name, factor)

        return adjusted

    def get_active_interactions(
        self,
        metrics: Iterable[HealthMetric],
    ) -> list[InteractionDescription]:
        """Describe which rules would fire for these metrics, without applying them."""
        values = metric_values(metrics)
        active = []
        for rule in self.rules:
            if not rule.is_triggered(values):
                continue
            coefficient = rule.coefficient(values)
            active.append(
                InteractionDescription(
                    name=rule.name,
                    title=rule.title,
                    description=rule.description,
                    impact_modifier=format_modifier(coefficient),
                    is_positive=rule.is_positive,
                    coefficient=coefficient,
                )
            )
        return active
