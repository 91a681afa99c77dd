"""Tests for health samples and daily aggregation."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from lifeimpact.metrics.types import MetricType
from lifeimpact.sources import (
    HealthSample,
    InMemoryHealthDataSource,
    aggregate_daily,
    fetch_daily_metrics,
)

DAY = date(2024, 3, 1)


def sample(metric_type: MetricType, value: float, hour: int, day: date = DAY, source: str = "watch"):
    return HealthSample(
        metric_type=metric_type,
        value=value,
        timestamp=datetime(day.year, day.month, day.day, hour),
        source=source,
    )


def by_type(metrics):
    return {m.type: m for m in metrics}


class TestAggregateDaily:
    """Tests for aggregate_daily."""

    def test_steps_summed(self) -> None:
        """Step samples add up over the day."""
        samples = [sample(MetricType.STEPS, 3000, 8), sample(MetricType.STEPS, 4500, 18)]
        metrics = by_type(aggregate_daily(samples, DAY))
        assert metrics[MetricType.STEPS].value == pytest.approx(7500)
        assert metrics[MetricType.STEPS].date == DAY

    def test_sleep_segments_summed(self) -> None:
        """Sleep segments add up over the day."""
        samples = [sample(MetricType.SLEEP_HOURS, 5.0, 6), sample(MetricType.SLEEP_HOURS, 1.5, 14)]
        assert aggregate_daily(samples, DAY)[0].value == pytest.approx(6.5)

    def test_heart_rate_averaged(self) -> None:
        """Heart rate and HRV are averaged."""
        samples = [
            sample(MetricType.RESTING_HEART_RATE, 58, 6),
            sample(MetricType.RESTING_HEART_RATE, 62, 12),
            sample(MetricType.HEART_RATE_VARIABILITY, 30, 6),
            sample(MetricType.HEART_RATE_VARIABILITY, 50, 22),
        ]
        metrics = by_type(aggregate_daily(samples, DAY))
        assert metrics[MetricType.RESTING_HEART_RATE].value == pytest.approx(60)
        assert metrics[MetricType.HEART_RATE_VARIABILITY].value == pytest.approx(40)

    def test_body_mass_latest(self) -> None:
        """Body mass takes the latest reading."""
        samples = [sample(MetricType.BODY_MASS, 171, 20), sample(MetricType.BODY_MASS, 170, 7)]
        assert aggregate_daily(samples, DAY)[0].value == pytest.approx(171)

    def test_questionnaire_latest(self) -> None:
        """Questionnaire metrics take the latest answer."""
        samples = [
            sample(MetricType.STRESS_LEVEL, 7, 9, source="manual"),
            sample(MetricType.STRESS_LEVEL, 4, 21, source="manual"),
        ]
        metric = aggregate_daily(samples, DAY)[0]
        assert metric.value == pytest.approx(4)
        assert metric.source == "manual"

    def test_other_days_ignored(self) -> None:
        """Samples from other days are ignored."""
        samples = [
            sample(MetricType.STEPS, 1000, 10),
            sample(MetricType.STEPS, 9000, 10, day=date(2024, 3, 2)),
        ]
        assert aggregate_daily(samples, DAY)[0].value == pytest.approx(1000)

    def test_mixed_sources(self) -> None:
        """Several sources are reported as mixed."""
        samples = [
            sample(MetricType.STEPS, 1000, 10, source="phone"),
            sample(MetricType.STEPS, 2000, 11, source="watch"),
        ]
        assert aggregate_daily(samples, DAY)[0].source == "mixed"

    def test_declaration_order(self) -> None:
        """Metrics come back in declaration order."""
        samples = [sample(MetricType.SLEEP_HOURS, 7, 6), sample(MetricType.STEPS, 100, 9)]
        assert [m.type for m in aggregate_daily(samples, DAY)] == [
            MetricType.STEPS,
            MetricType.SLEEP_HOURS,
        ]

    def test_no_samples(self) -> None:
        """No samples give no metrics."""
        assert aggregate_daily([], DAY) == []


class TestInMemoryHealthDataSource:
    """Tests for the in-memory source."""

    def test_window_is_half_open(self) -> None:
        """The fetch window excludes its end."""
        source = InMemoryHealthDataSource([
            sample(MetricType.STEPS, 1, 0),
            sample(MetricType.STEPS, 2, 12),
            sample(MetricType.STEPS, 3, 0, day=date(2024, 3, 2)),
        ])
        found = source.fetch_samples(datetime(2024, 3, 1), datetime(2024, 3, 2))
        assert [s.value for s in found] == [1, 2]

    def test_fetch_daily_metrics(self) -> None:
        """fetch_daily_metrics aggregates one day from a source."""
        source = InMemoryHealthDataSource()
        source.add(sample(MetricType.STEPS, 4000, 9))
        source.add(sample(MetricType.STEPS, 5000, 23))
        source.add(sample(MetricType.STEPS, 7000, 1, day=date(2024, 3, 2)))
        assert len(source) == 3

        metrics = fetch_daily_metrics(source, DAY)
        assert len(metrics) == 1
        assert metrics[0].value == pytest.approx(9000)
