"""Raw health samples and their reduction to daily metrics.

A health data source hands back timestamped samples (one per reading).
``aggregate_daily`` reduces the samples of one calendar day to a single
``HealthMetric`` per metric type, which is what the scoring engine
consumes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterable, Optional, Protocol, Sequence

import numpy as np

from lifeimpact.metrics.types import HealthMetric, MetricType

logger = logging.getLogger(__name__)


class Reduction(Enum):
    """How a day's samples collapse into one value."""

    SUM = "sum"
    MEAN = "mean"
    LATEST = "latest"


# Metrics not listed use the most recent reading of the day
DAILY_REDUCTIONS: dict[MetricType, Reduction] = {
    MetricType.STEPS: Reduction.SUM,
    MetricType.EXERCISE_MINUTES: Reduction.SUM,
    MetricType.ACTIVE_ENERGY_BURNED: Reduction.SUM,
    MetricType.SLEEP_HOURS: Reduction.SUM,
    MetricType.RESTING_HEART_RATE: Reduction.MEAN,
    MetricType.HEART_RATE_VARIABILITY: Reduction.MEAN,
}


@dataclass(frozen=True)
class HealthSample:
    """One timestamped reading from a device or questionnaire."""

    metric_type: MetricType
    value: float
    timestamp: datetime
    source: str = "device"


class HealthDataSource(Protocol):
    """Anything that can supply samples for a time window."""

    def fetch_samples(self, start: datetime, end: datetime) -> list[HealthSample]:
        ...


class InMemoryHealthDataSource:
    """Health data source backed by a list, for imports and tests."""

    def __init__(self, samples: Optional[Iterable[HealthSample]] = None):
        self._samples: list[HealthSample] = list(samples or [])

    def add(self, sample: HealthSample) -> None:
        self._samples.append(sample)

    def fetch_samples(self, start: datetime, end: datetime) -> list[HealthSample]:
        """Samples with ``start <= timestamp < end``, oldest first."""
        selected = [s for s in self._samples if start <= s.timestamp < end]
        return sorted(selected, key=lambda s: s.timestamp)

    def __len__(self) -> int:
        return len(self._samples)


def _reduce(samples: Sequence[HealthSample], reduction: Reduction) -> float:
    values = np.array([s.value for s in samples], dtype=float)
    if reduction is Reduction.SUM:
        return float(np.nansum(values))
    if reduction is Reduction.MEAN:
        return float(np.nanmean(values))
    timestamps = np.array([s.timestamp.timestamp() for s in samples])
    return float(values[int(np.argmax(timestamps))])


def aggregate_daily(samples: Iterable[HealthSample], day: date) -> list[HealthMetric]:
    """Reduce one day's samples to one metric per type.

    Samples from other days are ignored. Steps, exercise minutes, active
    energy and sleep hours are summed; resting heart rate and HRV are
    averaged; everything else takes the latest reading.

    Args:
        samples: Samples, in any order
        day: Calendar day to aggregate

    Returns:
        Metrics in ``MetricType`` declaration order
    """
    by_type: dict[MetricType, list[HealthSample]] = {}
    for sample in samples:
        if sample.timestamp.date() != day:
            continue
        by_type.setdefault(sample.metric_type, []).append(sample)

    metrics = []
    for metric_type in MetricType:
        day_samples = by_type.get(metric_type)
        if not day_samples:
            continue
        reduction = DAILY_REDUCTIONS.get(metric_type, Reduction.LATEST)
        value = _reduce(day_samples, reduction)
        sources = {s.source for s in day_samples}
        metrics.append(
            HealthMetric(
                type=metric_type,
                value=value,
                date=day,
                source=sources.pop() if len(sources) == 1 else "mixed",
            )
        )
        logger.debug(
            "%s: %d samples -> %.2f (%s)",
            metric_type.value,
            len(day_samples),
            value,
            reduction.value,
        )
    return metrics


def fetch_daily_metrics(source: HealthDataSource, day: date) -> list[HealthMetric]:
    """Fetch a day's samples from a source and aggregate them."""
    start = datetime.combine(day, datetime.min.time())
    end = start + timedelta(days=1)
    return aggregate_daily(source.fetch_samples(start, end), day)
