"""Health data sources and daily sample aggregation."""

from __future__ import annotations

from lifeimpact.sources.samples import (
    HealthDataSource,
    HealthSample,
    InMemoryHealthDataSource,
    aggregate_daily,
    fetch_daily_metrics,
)

__all__ = [
    "HealthDataSource",
    "HealthSample",
    "InMemoryHealthDataSource",
    "aggregate_daily",
    "fetch_daily_metrics",
]
