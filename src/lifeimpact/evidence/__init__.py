"""Evidence registry: curated study metadata per metric type."""

from __future__ import annotations

from lifeimpact.evidence.models import EffectType, PopulationCriteria, StudyReference
from lifeimpact.evidence.registry import EvidenceRegistry, get_registry

__all__ = [
    "EffectType",
    "EvidenceRegistry",
    "PopulationCriteria",
    "StudyReference",
    "get_registry",
]
