"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lifeimpact.cli import app

runner = CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path to a settings file that does not exist yet."""
    return tmp_path / "config.yaml"


def invoke(config_path: Path, *args: str):
    return runner.invoke(app, ["--config", str(config_path), *args])


class TestMainCommands:
    """Tests for main CLI commands."""

    def test_help(self) -> None:
        """Top-level help describes the tool."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "life expectancy" in result.output.lower()

    def test_metrics_json(self, config_path: Path) -> None:
        """metrics --json lists all metric types."""
        result = invoke(config_path, "metrics", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        names = [m["name"] for m in data["data"]]
        assert len(names) == 14
        assert "sleepHours" in names

    def test_metrics_table(self, config_path: Path) -> None:
        """metrics prints a table."""
        result = invoke(config_path, "metrics")
        assert result.exit_code == 0
        assert "steps" in result.output


class TestScoreCommand:
    """Tests for the score command."""

    def test_score_json(self, config_path: Path) -> None:
        """score --json reports profile, total and impacts."""
        result = invoke(
            config_path, "score", "--steps", "10000", "--sleep", "7.5", "--age", "40", "--json"
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["profile"]["age"] == 40
        assert data["total"]["period_type"] == "day"
        assert {i["metric_type"] for i in data["impacts"]} == {"steps", "sleepHours"}

    def test_score_period(self, config_path: Path) -> None:
        """A month total is thirty daily totals."""
        day = json.loads(invoke(config_path, "score", "--steps", "6000", "--json").output)
        month = json.loads(
            invoke(config_path, "score", "--steps", "6000", "--period", "month", "--json").output
        )
        assert month["total"]["total_impact_minutes"] == pytest.approx(
            30 * day["total"]["total_impact_minutes"]
        )

    def test_score_metric_pairs(self, config_path: Path) -> None:
        """NAME=VALUE pairs accept any metric name spelling."""
        result = invoke(config_path, "score", "-m", "stressLevel=7", "-m", "vo2_max=45", "--json")
        assert result.exit_code == 0, result.output
        types = {i["metric_type"] for i in json.loads(result.output)["impacts"]}
        assert types == {"stressLevel", "vo2Max"}

    def test_score_from_file(self, config_path: Path, tmp_path: Path) -> None:
        """Metrics and profile can come from a YAML file."""
        metrics_file = tmp_path / "day.yaml"
        metrics_file.write_text(
            "profile:\n  age: 50\n  sex: female\nmetrics:\n  steps: 8000\n  sleepHours: 7\n"
        )
        result = invoke(config_path, "score", "--from-file", str(metrics_file), "--json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["profile"] == {"age": 50, "sex": "female"}
        assert len(data["impacts"]) == 2

    def test_score_table(self, config_path: Path) -> None:
        """score prints a Rich report by default."""
        result = invoke(config_path, "score", "--steps", "8000", "--weight", "210")
        assert result.exit_code == 0, result.output
        assert "Life Impact" in result.output

    def test_score_markdown(self, config_path: Path) -> None:
        """score can print Markdown."""
        result = invoke(config_path, "score", "--steps", "8000", "--output", "markdown")
        assert result.exit_code == 0, result.output
        assert "# Life Impact Report" in result.output

    @pytest.mark.parametrize("output", ["table", "markdown"])
    @pytest.mark.parametrize("raw", ["nan", "inf"])
    def test_score_non_finite_steps(self, config_path: Path, raw: str, output: str) -> None:
        """Non-finite readings are shown as given instead of crashing."""
        result = invoke(config_path, "score", "--steps", raw, "--age", "40", "--output", output)
        assert result.exit_code == 0, result.output
        assert result.exception is None
        assert raw in result.output

    def test_score_non_finite_json(self, config_path: Path) -> None:
        """NaN steps still produce a JSON report with a neutral impact."""
        result = invoke(config_path, "score", "--steps", "nan", "--json")
        assert result.exit_code == 0, result.output
        assert "NaN" in result.output

    def test_score_shows_potential(self, config_path: Path) -> None:
        """The table report includes the battery and optimal-habit projection."""
        result = invoke(config_path, "score", "--steps", "6000", "--age", "40")
        assert result.exit_code == 0, result.output
        assert "Battery" in result.output
        assert "Potential" in result.output

    def test_score_json_potential(self, config_path: Path) -> None:
        """JSON output carries the potential projection next to the current one."""
        data = json.loads(
            invoke(config_path, "score", "--steps", "6000", "--age", "40", "--json").output
        )
        assert data["potential"]["current_age"] == 40
        assert 0 <= data["projection"]["battery_percentage"] <= 100
        assert (
            data["potential"]["adjusted_life_expectancy_years"]
            > data["projection"]["adjusted_life_expectancy_years"]
        )

    def test_score_uses_settings_defaults(self, config_path: Path) -> None:
        """Period and profile defaults come from settings."""
        config_path.write_text("defaults:\n  period: year\nprofile:\n  age: 30\n")
        data = json.loads(invoke(config_path, "score", "--steps", "6000", "--json").output)
        assert data["total"]["period_type"] == "year"
        assert data["profile"]["age"] == 30

    def test_score_requires_metrics(self, config_path: Path) -> None:
        """score without metrics exits with an error."""
        result = invoke(config_path, "score")
        assert result.exit_code == 1

    def test_score_unknown_metric(self, config_path: Path) -> None:
        """Unknown metric names exit with an error."""
        result = invoke(config_path, "score", "-m", "mood=3")
        assert result.exit_code == 1
        assert "Unknown metric" in result.output

    def test_score_bad_sex(self, config_path: Path) -> None:
        """An invalid sex exits with an error."""
        result = invoke(config_path, "score", "--steps", "5000", "--sex", "robot")
        assert result.exit_code == 1

    def test_score_bad_period(self, config_path: Path) -> None:
        """An invalid period exits with an error."""
        result = invoke(config_path, "score", "--steps", "5000", "--period", "week")
        assert result.exit_code == 1

    def test_invalid_settings_file(self, config_path: Path) -> None:
        """A bad settings file stops every command."""
        config_path.write_text("engine:\n  period_scaling: lunar\n")
        result = invoke(config_path, "score", "--steps", "5000")
        assert result.exit_code == 1
        assert "Invalid settings" in result.output


class TestStudiesCommand:
    """Tests for the studies command."""

    def test_studies_json(self, config_path: Path) -> None:
        """studies filters by the profile and sorts by strength."""
        result = invoke(config_path, "studies", "steps", "--age", "30", "--json")
        assert result.exit_code == 0, result.output
        ids = [s["id"] for s in json.loads(result.output)["data"]]
        assert ids[0] == "paluch-2022-steps"
        assert "lee-2019-steps" not in ids

    def test_studies_table(self, config_path: Path) -> None:
        """studies prints a table."""
        result = invoke(config_path, "studies", "sleepHours")
        assert result.exit_code == 0
        assert "Sleep" in result.output

    def test_studies_unknown_metric(self, config_path: Path) -> None:
        """studies rejects unknown metrics."""
        result = invoke(config_path, "studies", "mood")
        assert result.exit_code == 1


class TestInteractionsCommand:
    """Tests for the interactions command."""

    def test_active(self, config_path: Path) -> None:
        """interactions lists the triggered rules."""
        result = invoke(
            config_path, "interactions", "-m", "sleepHours=7.5", "-m", "exerciseMinutes=30", "--json"
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert [i["name"] for i in data] == ["sleep_exercise_synergy"]

    def test_none_active(self, config_path: Path) -> None:
        """interactions says so when nothing triggers."""
        result = invoke(config_path, "interactions", "-m", "steps=5000")
        assert result.exit_code == 0
        assert "No interaction" in result.output


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_init_then_show(self, config_path: Path) -> None:
        """config init writes defaults that config show reads back."""
        result = invoke(config_path, "config", "init")
        assert result.exit_code == 0, result.output
        assert config_path.exists()

        result = invoke(config_path, "config", "show")
        assert result.exit_code == 0
        assert "remaining_years" in result.output

    def test_init_refuses_overwrite(self, config_path: Path) -> None:
        """config init keeps an existing file."""
        config_path.write_text("defaults:\n  period: month\n")
        result = invoke(config_path, "config", "init")
        assert result.exit_code == 1
        assert "month" in config_path.read_text()

    def test_init_force(self, config_path: Path) -> None:
        """config init --force replaces an existing file."""
        config_path.write_text("defaults:\n  period: month\n")
        result = invoke(config_path, "config", "init", "--force")
        assert result.exit_code == 0
        assert "period: day" in config_path.read_text()
