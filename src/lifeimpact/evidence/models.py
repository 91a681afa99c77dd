"""Data models for study references."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from lifeimpact.metrics.types import MetricType, Sex, UserProfile


class EffectType(Enum):
    """Shape of the dose-response relationship a study reports."""

    LOGARITHMIC = "logarithmic"
    U_SHAPED = "u_shaped"
    LINEAR_CUMULATIVE = "linear_cumulative"
    THRESHOLD_BASED = "threshold_based"
    DIMINISHING_RETURNS = "diminishing_returns"


@dataclass(frozen=True)
class PopulationCriteria:
    """Who a study's findings apply to.

    ``None`` bounds and an empty ``health_status`` mean "no restriction".
    A ``region`` of ``None`` or ``"global"`` applies everywhere.
    """

    min_age: Optional[int] = None
    max_age: Optional[int] = None
    gender: str = "all"  # 'all', 'male' or 'female'
    health_status: tuple[str, ...] = ()
    region: Optional[str] = None

    def __post_init__(self) -> None:
        if self.gender not in ("all", "male", "female"):
            raise ValueError(
                f"gender must be 'all', 'male' or 'female', got '{self.gender}'"
            )

    def matches(self, profile: UserProfile) -> bool:
        """Check whether the profile falls inside this population.

        Unknown profile attributes (missing age, no region) never exclude
        a study; an unspecified sex only matches studies open to all.
        """
        if profile.age is not None:
            if self.min_age is not None and profile.age < self.min_age:
                return False
            if self.max_age is not None and profile.age > self.max_age:
                return False

        if self.gender != "all":
            if profile.sex is Sex.UNSPECIFIED or profile.sex.value != self.gender:
                return False

        if self.health_status:
            if not set(self.health_status) & set(profile.health_status):
                return False

        if self.region not in (None, "global") and profile.region is not None:
            if self.region.lower() != profile.region.lower():
                return False

        return True


@dataclass(frozen=True)
class StudyReference:
    """Read-only metadata for a published study."""

    id: str
    metric_type: MetricType
    title: str
    authors: str
    journal: str
    year: int
    effect_type: EffectType
    quality_score: float
    evidence_strength: int
    summary: str = ""
    doi: Optional[str] = None
    sample_size: Optional[int] = None
    criteria: PopulationCriteria = field(default_factory=PopulationCriteria)

    @property
    def citation(self) -> str:
        return f"{self.authors} ({self.year}). {self.title}. {self.journal}."

    @property
    def short_citation(self) -> str:
        """First author plus year, e.g. "Paluch AE et al., 2022"."""
        parts = [p.strip() for p in self.authors.split(",") if p.strip()]
        first = parts[0] if parts else "Unknown"
        if len(parts) > 1:
            return f"{first} et al., {self.year}"
        return f"{first}, {self.year}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "metric_type": self.metric_type.value,
            "title": self.title,
            "authors": self.authors,
            "journal": self.journal,
            "year": self.year,
            "doi": self.doi,
            "effect_type": self.effect_type.value,
            "quality_score": self.quality_score,
            "evidence_strength": self.evidence_strength,
            "sample_size": self.sample_size,
        }
