"""Tests for the evidence registry."""

from __future__ import annotations

import pytest

from lifeimpact.evidence import (
    EffectType,
    EvidenceRegistry,
    PopulationCriteria,
    StudyReference,
    get_registry,
)
from lifeimpact.metrics.types import MetricType, Sex, UserProfile


def make_study(study_id: str, strength: int, criteria: PopulationCriteria) -> StudyReference:
    return StudyReference(
        id=study_id,
        metric_type=MetricType.STEPS,
        title="Test study",
        authors="Doe J, Roe R",
        journal="Test Journal",
        year=2020,
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.8,
        evidence_strength=strength,
        criteria=criteria,
    )


class TestPopulationCriteria:
    """Tests for study applicability matching."""

    def test_age_range(self) -> None:
        """Age must fall inside the study range."""
        criteria = PopulationCriteria(min_age=40, max_age=60)
        assert criteria.matches(UserProfile(age=50))
        assert not criteria.matches(UserProfile(age=30))
        assert not criteria.matches(UserProfile(age=70))

    def test_unknown_age_never_excludes(self) -> None:
        """A missing age matches any age range."""
        assert PopulationCriteria(min_age=65).matches(UserProfile())

    def test_gender(self) -> None:
        """Sex-specific studies need a matching sex."""
        criteria = PopulationCriteria(gender="female")
        assert criteria.matches(UserProfile(sex=Sex.FEMALE))
        assert not criteria.matches(UserProfile(sex=Sex.MALE))
        assert not criteria.matches(UserProfile())

    def test_health_status_requires_overlap(self) -> None:
        """Health-status studies need a shared condition."""
        criteria = PopulationCriteria(health_status=("diabetes",))
        assert criteria.matches(UserProfile(health_status=("diabetes", "obesity")))
        assert not criteria.matches(UserProfile(health_status=("asthma",)))
        assert not criteria.matches(UserProfile())

    def test_region(self) -> None:
        """Region matches case-insensitively and a missing region matches."""
        criteria = PopulationCriteria(region="US")
        assert criteria.matches(UserProfile(region="us"))
        assert criteria.matches(UserProfile())
        assert not criteria.matches(UserProfile(region="UK"))

    def test_global_region_matches_everyone(self) -> None:
        """Global studies match any region."""
        assert PopulationCriteria(region="global").matches(UserProfile(region="Japan"))

    def test_invalid_gender_rejected(self) -> None:
        """Unknown gender criteria are rejected."""
        with pytest.raises(ValueError):
            PopulationCriteria(gender="men")


class TestEvidenceRegistry:
    """Tests for EvidenceRegistry."""

    def test_sorted_by_strength(self) -> None:
        """Studies come back strongest first."""
        registry = EvidenceRegistry({
            MetricType.STEPS: (
                make_study("weak", 3, PopulationCriteria()),
                make_study("strong", 9, PopulationCriteria()),
                make_study("medium", 6, PopulationCriteria()),
            )
        })
        ids = [s.id for s in registry.get_applicable_studies(MetricType.STEPS, UserProfile())]
        assert ids == ["strong", "medium", "weak"]

    def test_filters_by_profile(self) -> None:
        """Studies that exclude the profile are dropped."""
        registry = EvidenceRegistry({
            MetricType.STEPS: (
                make_study("older", 9, PopulationCriteria(min_age=60)),
                make_study("everyone", 5, PopulationCriteria()),
            )
        })
        studies = registry.get_applicable_studies(MetricType.STEPS, UserProfile(age=30))
        assert [s.id for s in studies] == ["everyone"]

    def test_no_match_returns_empty(self) -> None:
        """Lookups with no match return empty results."""
        registry = EvidenceRegistry({MetricType.STEPS: ()})
        assert registry.get_applicable_studies(MetricType.STEPS, UserProfile()) == ()
        assert registry.get_applicable_studies(MetricType.SLEEP_HOURS, UserProfile()) == ()
        assert registry.get_primary_study(MetricType.SLEEP_HOURS) is None

    def test_primary_study_ignores_profile(self) -> None:
        """The primary study is the strongest regardless of profile."""
        registry = get_registry()
        assert registry.get_primary_study(MetricType.STEPS).id == "paluch-2022-steps"
        assert registry.get_primary_study(MetricType.SMOKING_STATUS).id == "jha-2013-smoking"

    def test_get_study(self) -> None:
        """Studies can be fetched by id."""
        study = get_registry().get_study("cappuccio-2010-sleep")
        assert study.metric_type is MetricType.SLEEP_HOURS

    def test_get_unknown_study(self) -> None:
        """Unknown ids raise KeyError."""
        with pytest.raises(KeyError):
            get_registry().get_study("nope")

    def test_curated_list_covers_every_metric(self) -> None:
        """Every metric has at least one study."""
        registry = get_registry()
        for metric_type in MetricType:
            assert registry.study_count(metric_type) >= 1, metric_type

    def test_study_ids_unique(self) -> None:
        """Study ids are unique."""
        ids = [s.id for s in get_registry().all_studies()]
        assert len(ids) == len(set(ids))

    def test_older_us_woman_sees_restricted_study(self, us_woman_65: UserProfile) -> None:
        """Restricted studies match their population."""
        ids = {s.id for s in get_registry().get_applicable_studies(MetricType.STEPS, us_woman_65)}
        assert "lee-2019-steps" in ids

    def test_young_man_excluded_from_restricted_study(self) -> None:
        """Restricted studies exclude other populations."""
        profile = UserProfile(age=30, sex=Sex.MALE)
        ids = {s.id for s in get_registry().get_applicable_studies(MetricType.STEPS, profile)}
        assert "lee-2019-steps" not in ids
        assert "paluch-2022-steps" in ids


class TestStudyReference:
    """Tests for citation formatting."""

    def test_short_citation(self) -> None:
        """Short citation uses the first author and year."""
        study = make_study("s", 5, PopulationCriteria())
        assert study.short_citation == "Doe J et al., 2020"

    def test_to_dict(self) -> None:
        """to_dict uses the metric's string value."""
        data = make_study("s", 5, PopulationCriteria()).to_dict()
        assert data["id"] == "s"
        assert data["metric_type"] == "steps"
