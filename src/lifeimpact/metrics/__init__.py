"""Metric types, measurements and the user profile."""

from __future__ import annotations

from lifeimpact.metrics.types import (
    METRIC_SPECS,
    HealthMetric,
    MetricSpec,
    MetricType,
    Sex,
    UserProfile,
    clamp_to_bounds,
    get_metric_type,
)

__all__ = [
    "METRIC_SPECS",
    "HealthMetric",
    "MetricSpec",
    "MetricType",
    "Sex",
    "UserProfile",
    "clamp_to_bounds",
    "get_metric_type",
]
