"""CLI interface using Typer."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from lifeimpact.aggregation.projection import LifeProjection
from lifeimpact.aggregation.service import LifeImpactService
from lifeimpact.config.logging import configure_logging
from lifeimpact.config.settings import OUTPUT_FORMATS, Settings, default_config_path
from lifeimpact.evidence.registry import get_registry
from lifeimpact.export.formatters import ImpactReport, format_report
from lifeimpact.impact.models import PeriodType
from lifeimpact.interactions.engine import InteractionEffectEngine
from lifeimpact.metrics.types import (
    METRIC_SPECS,
    HealthMetric,
    MetricType,
    Sex,
    UserProfile,
    get_metric_type,
)

app = typer.Typer(
    help="Estimate how daily health metrics affect life expectancy",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show or create the settings file")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def fail(message: str, command: str, json_output: bool = False) -> None:
    """Report an error and exit with status 1."""
    if json_output:
        output_json({"success": False, "command": command, "errors": [message]})
    else:
        console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def get_context_settings(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


def parse_metric_pairs(pairs: Optional[list[str]]) -> dict[MetricType, float]:
    """Parse repeated ``NAME=VALUE`` options.

    Raises:
        KeyError: If a metric name is unknown
        ValueError: If a pair is malformed or the value is not a number
    """
    values: dict[MetricType, float] = {}
    for pair in pairs or []:
        name, sep, raw = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected NAME=VALUE, got '{pair}'")
        values[get_metric_type(name.strip())] = float(raw)
    return values


def load_metrics_file(path: Path) -> tuple[dict[MetricType, float], dict]:
    """Load metric values and an optional profile from a YAML file.

    The file either has ``metrics`` and ``profile`` sections, or is a flat
    mapping of metric names to values.

    Returns:
        Tuple of (metric values, raw profile mapping)
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping")

    profile_data = data.get("profile") or {}
    metric_data = data["metrics"] if "metrics" in data else {
        k: v for k, v in data.items() if k != "profile"
    }

    values = {get_metric_type(str(name)): float(value) for name, value in metric_data.items()}
    return values, profile_data


def resolve_profile(
    settings: Settings,
    age: Optional[int] = None,
    sex: Optional[str] = None,
    file_profile: Optional[dict] = None,
) -> UserProfile:
    """Build the profile from settings, then the metrics file, then CLI options."""
    file_profile = file_profile or {}
    resolved_age = settings.profile.age
    resolved_sex = settings.profile.sex
    if file_profile.get("age") is not None:
        resolved_age = int(file_profile["age"])
    if file_profile.get("sex") is not None:
        resolved_sex = Sex.parse(file_profile["sex"])
    if age is not None:
        resolved_age = age
    if sex is not None:
        resolved_sex = Sex.parse(sex)
    return UserProfile(age=resolved_age, sex=resolved_sex)


def to_health_metrics(values: dict[MetricType, float], on_date: date) -> list[HealthMetric]:
    return [HealthMetric(type=t, value=v, date=on_date) for t, v in values.items()]


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", help="Settings file (default: ~/.lifeimpact/config.yaml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load settings and configure logging for every command."""
    try:
        settings = Settings.load(config)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid settings file: {e}[/red]")
        raise typer.Exit(1)

    configure_logging("DEBUG" if verbose else settings.logging.level)
    ctx.obj = {"settings": settings, "config_path": config or default_config_path()}


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def score(
    ctx: typer.Context,
    steps: Optional[float] = typer.Option(None, "--steps", help="Daily step count"),
    exercise: Optional[float] = typer.Option(
        None, "--exercise", help="Exercise minutes per day"
    ),
    active_energy: Optional[float] = typer.Option(
        None, "--active-energy", help="Active energy burned (kcal)"
    ),
    resting_hr: Optional[float] = typer.Option(
        None, "--resting-hr", help="Resting heart rate (bpm)"
    ),
    hrv: Optional[float] = typer.Option(None, "--hrv", help="Heart rate variability (ms)"),
    sleep: Optional[float] = typer.Option(None, "--sleep", help="Sleep hours"),
    vo2max: Optional[float] = typer.Option(None, "--vo2max", help="VO2 max (ml/kg/min)"),
    spo2: Optional[float] = typer.Option(None, "--spo2", help="Oxygen saturation (%)"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Body mass (lb)"),
    nutrition: Optional[float] = typer.Option(
        None, "--nutrition", help="Nutrition quality (1-10)"
    ),
    stress: Optional[float] = typer.Option(None, "--stress", help="Stress level (1-10)"),
    smoking: Optional[float] = typer.Option(
        None, "--smoking", help="Smoking answer (0-10, 10 = never)"
    ),
    alcohol: Optional[float] = typer.Option(
        None, "--alcohol", help="Alcohol answer (1-10, 10 = never)"
    ),
    social: Optional[float] = typer.Option(
        None, "--social", help="Social connections quality (1-10)"
    ),
    metric: Optional[list[str]] = typer.Option(
        None, "--metric", "-m", help="Any metric as NAME=VALUE (repeatable)"
    ),
    from_file: Optional[Path] = typer.Option(
        None, "--from-file", "-f", help="YAML file with metrics and profile"
    ),
    age: Optional[int] = typer.Option(None, "--age", help="Age in years"),
    sex: Optional[str] = typer.Option(None, "--sex", help="male, female or unspecified"),
    period: Optional[str] = typer.Option(
        None, "--period", "-p", help="Period for the total: day, month or year"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format: table, json, markdown"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Score a day of health metrics."""
    settings = get_context_settings(ctx)

    try:
        values: dict[MetricType, float] = {}
        file_profile: dict = {}
        if from_file:
            values, file_profile = load_metrics_file(from_file)
        values.update(parse_metric_pairs(metric))

        options = {
            MetricType.STEPS: steps,
            MetricType.EXERCISE_MINUTES: exercise,
            MetricType.ACTIVE_ENERGY_BURNED: active_energy,
            MetricType.RESTING_HEART_RATE: resting_hr,
            MetricType.HEART_RATE_VARIABILITY: hrv,
            MetricType.SLEEP_HOURS: sleep,
            MetricType.VO2_MAX: vo2max,
            MetricType.OXYGEN_SATURATION: spo2,
            MetricType.BODY_MASS: weight,
            MetricType.NUTRITION_QUALITY: nutrition,
            MetricType.STRESS_LEVEL: stress,
            MetricType.SMOKING_STATUS: smoking,
            MetricType.ALCOHOL_CONSUMPTION: alcohol,
            MetricType.SOCIAL_CONNECTIONS_QUALITY: social,
        }
        values.update({t: v for t, v in options.items() if v is not None})

        profile = resolve_profile(settings, age, sex, file_profile)
        period_type = PeriodType(period) if period else settings.defaults.period
    except FileNotFoundError as e:
        fail(f"File not found: {e.filename}", "score", json_output)
    except (KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        fail(f"Invalid input: {e}", "score", json_output)

    if not values:
        fail("No metrics given. Use --steps, --sleep, ... or --from-file.", "score", json_output)

    output_format = "json" if json_output else (output or settings.defaults.output_format)
    if output_format not in OUTPUT_FORMATS:
        fail(f"Unknown output format: {output_format}", "score")

    today = date.today()
    metrics = to_health_metrics(values, today)
    service = LifeImpactService.from_settings(profile, settings)
    impacts = service.calculate_impacts(metrics)

    report = ImpactReport(
        profile=profile,
        data_point=service.calculate_total_impact(metrics, period_type, today),
        impacts=impacts,
        interactions=service.engine.get_active_interactions(metrics),
        projection=LifeProjection.from_impacts(impacts, profile),
        potential=service.project_potential_lifespan(today),
    )

    text = format_report(report, output_format, console)
    if text is not None:
        print(text)


@app.command()
def metrics(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List supported metrics with baselines and bounds."""
    if json_output:
        output_json({
            "success": True,
            "command": "metrics",
            "data": [
                {
                    "name": metric_type.value,
                    "display_name": spec.display_name,
                    "unit": spec.unit,
                    "baseline": spec.baseline_value,
                    "target": spec.target_value,
                    "higher_is_better": spec.higher_is_better,
                    "bounds": list(spec.bounds),
                    "questionnaire": spec.is_questionnaire,
                }
                for metric_type, spec in METRIC_SPECS.items()
            ],
        })
        return

    table = Table(title="Supported Metrics")
    table.add_column("Name", style="cyan")
    table.add_column("Display Name")
    table.add_column("Unit")
    table.add_column("Baseline", justify="right")
    table.add_column("Bounds", justify="right")
    table.add_column("Better", justify="center")

    for metric_type, spec in METRIC_SPECS.items():
        table.add_row(
            metric_type.value,
            spec.display_name,
            spec.unit,
            f"{spec.baseline_value:g}",
            f"{spec.lower_bound:g} - {spec.upper_bound:g}",
            "higher" if spec.higher_is_better else "lower",
        )

    console.print(table)


@app.command()
def studies(
    ctx: typer.Context,
    metric: str = typer.Argument(..., help="Metric name, e.g. steps or sleepHours"),
    age: Optional[int] = typer.Option(None, "--age", help="Age in years"),
    sex: Optional[str] = typer.Option(None, "--sex", help="male, female or unspecified"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the studies that apply to a metric for a profile."""
    settings = get_context_settings(ctx)
    try:
        metric_type = get_metric_type(metric)
        profile = resolve_profile(settings, age, sex)
    except (KeyError, ValueError) as e:
        fail(str(e).strip("'\""), "studies", json_output)

    applicable = get_registry().get_applicable_studies(metric_type, profile)

    if json_output:
        output_json({
            "success": True,
            "command": "studies",
            "data": [study.to_dict() for study in applicable],
            "human_summary": f"{len(applicable)} studies for {metric_type.display_name}",
        })
        return

    if not applicable:
        console.print(f"[yellow]No studies apply to {metric_type.display_name} for this profile[/yellow]")
        return

    table = Table(title=f"Studies: {metric_type.display_name}")
    table.add_column("ID", style="cyan")
    table.add_column("Citation")
    table.add_column("Strength", justify="right")
    table.add_column("N", justify="right")

    for study in applicable:
        table.add_row(
            study.id,
            study.short_citation,
            f"{study.evidence_strength:.0f}",
            f"{study.sample_size:,}" if study.sample_size else "-",
        )

    console.print(table)


@app.command()
def interactions(
    ctx: typer.Context,
    metric: Optional[list[str]] = typer.Option(
        None, "--metric", "-m", help="Metric as NAME=VALUE (repeatable)"
    ),
    from_file: Optional[Path] = typer.Option(
        None, "--from-file", "-f", help="YAML file with metrics"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show which interaction effects are active for a set of metrics."""
    try:
        values: dict[MetricType, float] = {}
        if from_file:
            values, _ = load_metrics_file(from_file)
        values.update(parse_metric_pairs(metric))
    except FileNotFoundError as e:
        fail(f"File not found: {e.filename}", "interactions", json_output)
    except (KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        fail(f"Invalid input: {e}", "interactions", json_output)

    active = InteractionEffectEngine().get_active_interactions(
        to_health_metrics(values, date.today())
    )

    if json_output:
        output_json({
            "success": True,
            "command": "interactions",
            "data": [
                {
                    "name": i.name,
                    "title": i.title,
                    "description": i.description,
                    "impact_modifier": i.impact_modifier,
                    "coefficient": i.coefficient,
                    "is_positive": i.is_positive,
                }
                for i in active
            ],
        })
        return

    if not active:
        console.print("[dim]No interaction effects are active[/dim]")
        return

    for interaction in active:
        color = "green" if interaction.is_positive else "red"
        console.print(
            f"[{color}]{interaction.impact_modifier:>5}[/{color}] "
            f"[bold]{interaction.title}[/bold]: {interaction.description}"
        )


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Print the effective settings as YAML."""
    settings = get_context_settings(ctx)
    console.print(f"[dim]# {ctx.obj['config_path']}[/dim]")
    console.print(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a settings file with default values."""
    config_path: Path = ctx.obj["config_path"]
    if config_path.exists() and not force:
        console.print(f"[yellow]{config_path} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    Settings().save(config_path)
    console.print(f"[green]Wrote default settings to {config_path}[/green]")


if __name__ == "__main__":
    app()
