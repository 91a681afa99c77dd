"""Output formatters for impact reports."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from lifeimpact.aggregation.projection import LifeProjection
from lifeimpact.impact.models import ComparisonResult, ImpactDataPoint, MetricImpactDetail
from lifeimpact.interactions.engine import InteractionDescription
from lifeimpact.metrics.types import UserProfile

COMPARISON_STYLES = {
    ComparisonResult.BETTER: "green",
    ComparisonResult.SAME: "yellow",
    ComparisonResult.WORSE: "red",
}


@dataclass
class ImpactReport:
    """Everything one scoring run produces."""

    profile: UserProfile
    data_point: ImpactDataPoint
    impacts: list[MetricImpactDetail]
    interactions: list[InteractionDescription] = field(default_factory=list)
    projection: Optional[LifeProjection] = None
    potential: Optional[LifeProjection] = None


def _format_value(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    if value == int(value):
        return f"{value:.0f}"
    return f"{value:.1f}"


def _potential_gain(report: ImpactReport) -> str:
    """Years the optimal-habit projection adds over the current one."""
    if report.projection is None or report.potential is None:
        return "n/a"
    gain = (
        report.potential.adjusted_life_expectancy_years
        - report.projection.adjusted_life_expectancy_years
    )
    return f"{gain:+.1f} years vs current"


def _profile_label(profile: UserProfile) -> str:
    age = str(profile.age) if profile.age is not None else "unknown"
    return f"Age: {age} | Sex: {profile.sex.value}"


class TableFormatter:
    """Format reports as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, report: ImpactReport) -> None:
        """Print formatted tables to console."""
        point = report.data_point
        total_color = "green" if point.total_impact_minutes >= 0 else "red"
        header_lines = [
            f"[bold]LIFE IMPACT[/bold] - {point.date.isoformat()} ({point.period_type.value})",
            _profile_label(report.profile),
            f"Total: [{total_color}]{point.formatted_impact}[/{total_color}]",
        ]
        self.console.print(Panel("\n".join(header_lines), title="Life Impact"))

        table = Table(title="Impact by Metric (minutes/day)")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_column("Baseline", justify="right")
        table.add_column("Impact", justify="right")
        table.add_column("Studies", justify="right")

        for impact in report.impacts:
            spec = impact.metric_type.spec
            style = COMPARISON_STYLES[impact.comparison_to_baseline]
            table.add_row(
                spec.display_name,
                f"{_format_value(impact.current_value)} {spec.unit}".strip(),
                _format_value(impact.baseline_value),
                f"[{style}]{impact.lifespan_impact_minutes:+.1f}[/{style}]",
                str(impact.study_count),
            )

        self.console.print(table)

        if report.interactions:
            self.console.print("\n[bold]Interactions[/bold]")
            for interaction in report.interactions:
                color = "green" if interaction.is_positive else "red"
                self.console.print(
                    f"  [{color}]{interaction.impact_modifier}[/{color}] "
                    f"{interaction.title}: {interaction.description}"
                )

        if report.projection:
            projection = report.projection
            self.console.print(
                f"\n[bold]Projection:[/bold] {projection.adjusted_life_expectancy_years:.1f} "
                f"years ({projection.formatted_net_impact}, {projection.interpretation.lower()})"
            )
            self.console.print(
                f"Battery: {projection.battery_percentage:.0f}% - {projection.battery_display}"
            )
            self.console.print(f"[dim]{projection.confidence_description}[/dim]")

        if report.potential:
            self.console.print(
                f"[bold]Potential:[/bold] {report.potential.adjusted_life_expectancy_years:.1f} "
                f"years with optimal habits ({_potential_gain(report)})"
            )


class JSONFormatter:
    """Format reports as JSON for programmatic use."""

    def format(self, report: ImpactReport) -> str:
        """Return JSON string."""
        data = {
            "timestamp": datetime.now().isoformat(),
            "profile": {
                "age": report.profile.age,
                "sex": report.profile.sex.value,
            },
            "total": report.data_point.to_dict(),
            "impacts": [impact.to_dict() for impact in report.impacts],
            "interactions": [
                {
                    "name": i.name,
                    "title": i.title,
                    "description": i.description,
                    "impact_modifier": i.impact_modifier,
                    "coefficient": round(i.coefficient, 4),
                    "is_positive": i.is_positive,
                }
                for i in report.interactions
            ],
            "projection": report.projection.to_dict() if report.projection else None,
            "potential": report.potential.to_dict() if report.potential else None,
        }
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format reports as Markdown for sharing or documentation."""

    def format(self, report: ImpactReport) -> str:
        """Return Markdown string."""
        point = report.data_point
        lines = [
            "# Life Impact Report",
            "",
            f"**Date:** {point.date.isoformat()}",
            f"**Period:** {point.period_type.value}",
            f"**Total impact:** {point.formatted_impact}",
            "",
            "## Metrics",
            "",
            "| Metric | Value | Impact (min/day) | Recommendation |",
            "|--------|-------|------------------|----------------|",
        ]

        for impact in report.impacts:
            spec = impact.metric_type.spec
            lines.append(
                f"| {spec.display_name} | {_format_value(impact.current_value)} {spec.unit} "
                f"| {impact.lifespan_impact_minutes:+.1f} | {impact.recommendation} |"
            )

        if report.interactions:
            lines.extend(["", "## Interactions", ""])
            for i in report.interactions:
                lines.append(f"- **{i.title}** ({i.impact_modifier}): {i.description}")

        if report.projection:
            projection = report.projection
            lines.extend(
                [
                    "",
                    "## Projection",
                    "",
                    f"- Baseline: {projection.baseline_life_expectancy_years:.1f} years",
                    f"- Projected: {projection.adjusted_life_expectancy_years:.1f} years",
                    f"- Net impact: {projection.formatted_net_impact}",
                    f"- Battery: {projection.battery_percentage:.0f}% ({projection.battery_display})",
                ]
            )

        if report.potential:
            lines.append(
                f"- Potential with optimal habits: "
                f"{report.potential.adjusted_life_expectancy_years:.1f} years "
                f"({_potential_gain(report)})"
            )

        return "\n".join(lines)


def format_report(
    report: ImpactReport,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format an impact report in the specified format.

    Args:
        report: Report to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format(report)
        return None
    elif output_format == "json":
        return JSONFormatter().format(report)
    elif output_format == "markdown":
        return MarkdownFormatter().format(report)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
