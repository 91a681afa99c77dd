"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from lifeimpact.impact.models import PeriodType
from lifeimpact.metrics.types import Sex

REMAINING_YEARS_MODES = ("legacy", "unified")
PERIOD_SCALING_MODES = ("legacy", "calendar")
OUTPUT_FORMATS = ("table", "json", "markdown")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".lifeimpact"


def default_config_path() -> Path:
    return _default_config_dir() / "config.yaml"


def _check_choice(name: str, value: str, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got '{value}'")
    return value


@dataclass
class EngineConfig:
    """Scoring engine configuration."""

    remaining_years: str = "legacy"  # "legacy" or "unified"
    unified_default_age: int = 40
    period_scaling: str = "legacy"  # "legacy" or "calendar"


@dataclass
class ProfileConfig:
    """Default user profile for CLI scoring."""

    age: Optional[int] = None
    sex: Sex = Sex.UNSPECIFIED


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    period: PeriodType = PeriodType.DAY
    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.lifeimpact/config.yaml

        Returns:
            Settings instance

        Raises:
            ValueError: If a setting has an invalid value
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse engine config
        if "engine" in data:
            engine_data = data["engine"] or {}
            if "remaining_years" in engine_data:
                settings.engine.remaining_years = _check_choice(
                    "engine.remaining_years",
                    engine_data["remaining_years"],
                    REMAINING_YEARS_MODES,
                )
            if "unified_default_age" in engine_data:
                age = int(engine_data["unified_default_age"])
                if age < 0:
                    raise ValueError(
                        f"engine.unified_default_age must be non-negative, got {age}"
                    )
                settings.engine.unified_default_age = age
            if "period_scaling" in engine_data:
                settings.engine.period_scaling = _check_choice(
                    "engine.period_scaling",
                    engine_data["period_scaling"],
                    PERIOD_SCALING_MODES,
                )

        # Parse profile
        if "profile" in data:
            profile_data = data["profile"] or {}
            if profile_data.get("age") is not None:
                settings.profile.age = int(profile_data["age"])
            if "sex" in profile_data:
                settings.profile.sex = Sex.parse(profile_data["sex"])

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "period" in def_data:
                try:
                    settings.defaults.period = PeriodType(def_data["period"])
                except ValueError:
                    raise ValueError(
                        f"defaults.period must be day, month or year, "
                        f"got '{def_data['period']}'"
                    ) from None
            if "output_format" in def_data:
                settings.defaults.output_format = _check_choice(
                    "defaults.output_format",
                    def_data["output_format"],
                    OUTPUT_FORMATS,
                )

        if "logging" in data:
            log_data = data["logging"] or {}
            if "level" in log_data:
                settings.logging.level = _check_choice(
                    "logging.level", str(log_data["level"]).upper(), LOG_LEVELS
                )

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.lifeimpact/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        return {
            "engine": {
                "remaining_years": self.engine.remaining_years,
                "unified_default_age": self.engine.unified_default_age,
                "period_scaling": self.engine.period_scaling,
            },
            "profile": {
                "age": self.profile.age,
                "sex": self.profile.sex.value,
            },
            "defaults": {
                "period": self.defaults.period.value,
                "output_format": self.defaults.output_format,
            },
            "logging": {
                "level": self.logging.level,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
