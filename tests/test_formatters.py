"""Tests for report formatters."""

from __future__ import annotations

import json

import pytest
from rich.console import Console

from conftest import SCORING_DATE, make_metrics
from lifeimpact import LifeImpactService, PeriodType, UserProfile
from lifeimpact.aggregation.projection import LifeProjection
from lifeimpact.export import ImpactReport, format_report
from lifeimpact.export.formatters import _format_value


@pytest.fixture
def report() -> ImpactReport:
    profile = UserProfile(age=40, sex="male")
    metrics = make_metrics(
        steps=6000, sleep_hours=7.5, exercise_minutes=30, alcohol_consumption=5,
        heart_rate_variability=30,
    )
    service = LifeImpactService(profile)
    impacts = service.calculate_impacts(metrics)
    return ImpactReport(
        profile=profile,
        data_point=service.calculate_total_impact(metrics, PeriodType.MONTH, SCORING_DATE),
        impacts=impacts,
        interactions=service.engine.get_active_interactions(metrics),
        projection=LifeProjection.from_impacts(impacts, profile),
        potential=service.project_potential_lifespan(SCORING_DATE),
    )


class TestJSONFormatter:
    """Tests for JSON output."""

    def test_structure(self, report: ImpactReport) -> None:
        """JSON output holds profile, total and impacts."""
        data = json.loads(format_report(report, "json"))
        assert data["profile"] == {"age": 40, "sex": "male"}
        assert data["total"]["period_type"] == "month"
        assert data["total"]["date"] == "2024-03-01"
        assert {i["metric_type"] for i in data["impacts"]} == {
            "steps", "sleepHours", "exerciseMinutes", "alcoholConsumption", "heartRateVariability",
        }
        assert [i["name"] for i in data["interactions"]] == [
            "sleep_exercise_synergy",
            "alcohol_hrv_antagonism",
        ]
        assert data["projection"]["current_age"] == 40

    def test_without_projection(self, report: ImpactReport) -> None:
        """A report without projection has a null projection."""
        report.projection = None
        data = json.loads(format_report(report, "json"))
        assert data["projection"] is None


class TestMarkdownFormatter:
    """Tests for Markdown output."""

    def test_sections(self, report: ImpactReport) -> None:
        """Markdown has the metric table and both sections."""
        text = format_report(report, "markdown")
        assert text.startswith("# Life Impact Report")
        assert "**Period:** month" in text
        assert "| Steps |" in text
        assert "## Interactions" in text
        assert "Sleep-Exercise Synergy" in text
        assert "## Projection" in text


class TestTableFormatter:
    """Tests for Rich table output."""

    def test_prints_to_console(self, report: ImpactReport) -> None:
        """Table output prints to the console and returns None."""
        console = Console(record=True, width=140)
        assert format_report(report, "table", console) is None
        text = console.export_text()
        assert "Life Impact" in text
        assert "Steps" in text
        assert "Projection" in text


def test_unknown_format(report: ImpactReport) -> None:
    """Unknown formats raise ValueError."""
    with pytest.raises(ValueError):
        format_report(report, "csv")


class TestValueFormatting:
    """Tests for metric value display."""

    @pytest.mark.parametrize(
        "value, text",
        [(6000.0, "6000"), (7.5, "7.5"), (float("nan"), "nan"), (float("inf"), "inf")],
    )
    def test_format_value(self, value: float, text: str) -> None:
        """Whole numbers drop decimals and non-finite values print as-is."""
        assert _format_value(value) == text


class TestPotentialProjection:
    """Tests for the optimal-habit comparison in reports."""

    def test_json_potential(self, report: ImpactReport) -> None:
        """JSON carries the potential projection and the battery level."""
        data = json.loads(format_report(report, "json"))
        assert data["potential"]["current_age"] == 40
        assert "battery_percentage" in data["projection"]

    def test_markdown_potential(self, report: ImpactReport) -> None:
        """Markdown lists the battery and the potential with optimal habits."""
        text = format_report(report, "markdown")
        assert "- Battery:" in text
        assert "- Potential with optimal habits:" in text
        assert "vs current" in text

    def test_without_potential(self, report: ImpactReport) -> None:
        """A report without potential leaves it out."""
        report.potential = None
        assert "Potential" not in format_report(report, "markdown")
        assert json.loads(format_report(report, "json"))["potential"] is None
