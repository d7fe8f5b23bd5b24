"""Tests for the suggestion catalog."""

from dataclasses import replace
from types import MappingProxyType

import pytest

from advisor.catalog import (
    DEFAULT_SUGGESTIONS,
    FIXED_TEMPLATES,
    GENERIC_SUGGESTIONS,
    MOOD_SUGGESTIONS,
    MoodSuggestionSet,
    validate_catalog,
)
from mood.lexicon import LexiconError
from shared_types import MoodType, Theme


class TestCatalog:
    def test_every_mood_has_candidates(self):
        assert set(MOOD_SUGGESTIONS) == set(MoodType)
        assert all(len(s.candidates) == 3 for s in MOOD_SUGGESTIONS.values())

    def test_only_joyful_has_variants(self):
        with_variants = [m for m, s in MOOD_SUGGESTIONS.items() if s.contextual_variants]
        assert with_variants == [MoodType.JOYFUL]
        assert set(MOOD_SUGGESTIONS[MoodType.JOYFUL].contextual_variants) == {
            Theme.WORK,
            Theme.RELATIONSHIP,
            Theme.ACHIEVEMENT,
        }

    def test_fixed_tables(self):
        assert [s.title for s in DEFAULT_SUGGESTIONS] == [
            "Mindful Check-In",
            "Three Deep Breaths",
            "Gratitude Moment",
        ]
        assert [s.base_relevance for s in GENERIC_SUGGESTIONS] == [0.6, 0.7, 0.6]


class TestValidateCatalog:
    def test_default_catalog_valid(self):
        validate_catalog()

    def test_missing_mood(self):
        tables = {m: s for m, s in MOOD_SUGGESTIONS.items() if m != MoodType.ANXIOUS}
        with pytest.raises(LexiconError, match="anxious"):
            validate_catalog(tables)

    def test_relevance_out_of_range(self):
        bad = replace(DEFAULT_SUGGESTIONS[0], base_relevance=1.2)
        with pytest.raises(LexiconError, match="relevance"):
            validate_catalog(fixed=(*FIXED_TEMPLATES, bad))

    def test_variant_theme_mismatch(self):
        joyful = MOOD_SUGGESTIONS[MoodType.JOYFUL]
        work = joyful.contextual_variants[Theme.WORK]
        broken = MoodSuggestionSet(
            candidates=joyful.candidates,
            contextual_variants=MappingProxyType({Theme.HEALTH: work}),
        )
        with pytest.raises(LexiconError, match="mismatched theme"):
            validate_catalog({**MOOD_SUGGESTIONS, MoodType.JOYFUL: broken})
