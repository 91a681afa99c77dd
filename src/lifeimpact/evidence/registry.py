"""Lookup and applicability filtering over the static study list."""

from __future__ import annotations

from typing import Mapping, Optional

from lifeimpact.evidence.models import StudyReference
from lifeimpact.evidence.studies import STUDIES_BY_METRIC
from lifeimpact.metrics.types import MetricType, UserProfile


class EvidenceRegistry:
    """Read-only index of study references keyed by metric type."""

    def __init__(
        self,
        studies: Optional[Mapping[MetricType, tuple[StudyReference, ...]]] = None,
    ):
        """Initialize the registry.

        Args:
            studies: Studies per metric type. Defaults to the curated list.
        """
        source = STUDIES_BY_METRIC if studies is None else studies
        self._studies: dict[MetricType, tuple[StudyReference, ...]] = {
            metric_type: tuple(
                sorted(refs, key=lambda s: s.evidence_strength, reverse=True)
            )
            for metric_type, refs in source.items()
        }
        self._by_id: dict[str, StudyReference] = {
            study.id: study for refs in self._studies.values() for study in refs
        }

    def get_applicable_studies(
        self,
        metric_type: MetricType,
        profile: UserProfile,
    ) -> tuple[StudyReference, ...]:
        """Return studies for a metric whose population includes the profile.

        Args:
            metric_type: Metric to look up
            profile: User profile to match against population criteria

        Returns:
            Matching studies, strongest evidence first. Empty if none match.
        """
        return tuple(
            study
            for study in self._studies.get(metric_type, ())
            if study.criteria.matches(profile)
        )

    def get_primary_study(self, metric_type: MetricType) -> Optional[StudyReference]:
        """Return the study with the highest evidence strength, if any."""
        studies = self._studies.get(metric_type, ())
        return studies[0] if studies else None

    def get_study(self, study_id: str) -> StudyReference:
        """Look up a study by id.

        Raises:
            KeyError: If no study has this id
        """
        if study_id not in self._by_id:
            raise KeyError(f"Unknown study: {study_id}")
        return self._by_id[study_id]

    def study_count(self, metric_type: MetricType) -> int:
        return len(self._studies.get(metric_type, ()))

    def all_studies(self) -> list[StudyReference]:
        return [study for refs in self._studies.values() for study in refs]


# Shared registry instance (lazy loaded)
_registry: Optional[EvidenceRegistry] = None


def get_registry() -> EvidenceRegistry:
    """Get the shared registry built from the curated study list."""
    global _registry
    if _registry is None:
        _registry = EvidenceRegistry()
    return _registry
