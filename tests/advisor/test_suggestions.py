"""Tests for mindful suggestion generation."""

from datetime import date, datetime

import pytest

from advisor.catalog import DEFAULT_SUGGESTIONS, GENERIC_SUGGESTIONS, SuggestionTemplate
from advisor.suggestions import (
    MindfulSuggestion,
    SuggestionGenerator,
    calculate_relevance,
    dominant_mood,
)
from shared_types import MoodType, SuggestionType, Theme

SUNDAY = date(2026, 10, 18)
MONDAY = date(2026, 10, 19)


@pytest.fixture
def generator():
    return SuggestionGenerator()


class TestSuggestForHistory:
    def test_empty_history_returns_defaults(self, generator, user):
        suggestions = generator.suggest_for_history([], user)

        assert [s.title for s in suggestions] == [t.title for t in DEFAULT_SUGGESTIONS]
        assert [s.relevance_score for s in suggestions] == [0.7, 0.8, 0.6]

    @pytest.mark.parametrize("mood", list(MoodType))
    def test_always_three_sorted(self, generator, user, make_entry, mood):
        entries = [make_entry(d, mood=mood, content="An ordinary day at home.") for d in range(3)]
        suggestions = generator.suggest_for_history(entries, user)

        assert len(suggestions) == 3
        scores = [s.relevance_score for s in suggestions]
        assert scores == sorted(scores, reverse=True)
        assert all(0.0 <= s <= 1.0 and round(s, 2) == s for s in scores)

    def test_anxious_history(self, generator, user, make_entry):
        entries = [
            make_entry(d, mood="anxious", sentiment="negative", content="So worried, can't sleep.")
            for d in range(7)
        ]
        suggestions = generator.suggest_for_history(entries, user)

        assert [s.title for s in suggestions] == [
            "4-7-8 Breathing",
            "Grounding Technique",
            "Progressive Muscle Relaxation",
        ]
        assert all(s.relevance_score == 1.0 for s in suggestions)

    def test_joyful_contextual_variant(self, generator, user, make_entry):
        entries = [
            make_entry(d, mood="joyful", sentiment="positive", content="Great day at work.")
            for d in range(2)
        ]
        suggestions = generator.suggest_for_history(entries, user)
        career = [s for s in suggestions if s.title == "Career Momentum Building"]

        assert len(career) == 1
        assert career[0].reason.endswith("(based on work themes in your entries)")

    def test_stress_pattern_candidate(self, generator, user, make_entry):
        entries = [
            make_entry(d, mood="neutral", sentiment="negative", content="Ordinary day.")
            for d in range(3)
        ]
        titles = [s.title for s in generator.suggest_for_history(entries, user)]

        assert titles == ["Curiosity Practice", "Weekly Stress Reset", "Gentle Check-In"]

    def test_only_recent_window_sets_dominant_mood(self, generator, user, make_entry):
        entries = [make_entry(d, mood="anxious") for d in range(10)] + [
            make_entry(10 + d, mood="peaceful") for d in range(7)
        ]
        titles = {s.title for s in generator.suggest_for_history(entries, user)}
        assert "Mindful Meditation" in titles

    def test_user_is_optional(self, generator, make_entry):
        assert len(generator.suggest_for_history([make_entry(0)])) == 3


class TestPatternCandidates:
    def test_positive_momentum(self, make_entry):
        recent = [make_entry(d, sentiment="positive") for d in range(4)]
        titles = [s.title for s in SuggestionGenerator._pattern_candidates(recent, [])]
        assert titles == ["Positive Momentum Amplification"]

    def test_relationship_theme(self, make_entry):
        titles = [s.title for s in SuggestionGenerator._pattern_candidates([], [Theme.FAMILY])]
        assert titles == ["Relationship Appreciation Practice"]

    def test_stress_counts_stress_moods(self, make_entry):
        recent = [make_entry(d, mood="frustrated") for d in range(3)]
        titles = [s.title for s in SuggestionGenerator._pattern_candidates(recent, [])]
        assert titles == ["Weekly Stress Reset"]


class TestRelevance:
    template = SuggestionTemplate(
        SuggestionType.GROWTH, "T", "D", "5 minutes", "R", keywords=("garden", "walk"), theme=Theme.NATURE
    )

    def test_components(self, make_entry):
        entry = make_entry(0, content="A short walk.", sentiment="neutral")
        assert calculate_relevance(self.template, entry, [], None, MoodType.NEUTRAL) == pytest.approx(0.65)

    def test_theme_bonus(self, make_entry):
        entry = make_entry(0, content="Nothing.", sentiment="neutral")
        score = calculate_relevance(self.template, entry, [Theme.NATURE], None, MoodType.NEUTRAL)
        assert score == pytest.approx(0.9)

    def test_keyword_from_entry_keywords(self, make_entry):
        entry = make_entry(0, content="Nothing.", keywords=["garden"], sentiment="neutral")
        assert calculate_relevance(self.template, entry, [], None, MoodType.NEUTRAL) == pytest.approx(0.65)

    def test_clamped(self, make_entry):
        entry = make_entry(0, content="garden walk", sentiment="positive")
        score = calculate_relevance(self.template, entry, [Theme.NATURE], MoodType.JOYFUL, MoodType.JOYFUL)
        assert score == 1.0

    def test_sentiment_alignment(self, make_entry):
        relief = SuggestionTemplate(SuggestionType.STRESS_RELIEF, "T", "D", "d", "R")
        entry = make_entry(0, sentiment="negative")
        assert calculate_relevance(relief, entry, [], None, MoodType.NEUTRAL) == pytest.approx(0.9)


class TestDominantMood:
    def test_most_frequent(self, make_entry):
        entries = [make_entry(0, mood="joyful"), make_entry(1, mood="anxious"), make_entry(2, mood="anxious")]
        assert dominant_mood(entries) == MoodType.ANXIOUS

    def test_tie_goes_to_first_seen(self, make_entry):
        entries = [make_entry(0, mood="melancholy"), make_entry(1, mood="joyful")]
        assert dominant_mood(entries) == MoodType.MELANCHOLY

    def test_empty(self):
        assert dominant_mood([]) == MoodType.NEUTRAL


class TestSuggestForDate:
    def test_sunday_morning_work(self, generator, user, make_entry):
        assert SUNDAY.weekday() == 6
        entries = [
            make_entry(
                SUNDAY, mood="anxious", sentiment="negative", content="Deadline at the office."
            )
        ]
        suggestions = generator.suggest_for_date(SUNDAY, entries, user, now=datetime(2026, 10, 18, 8, 0))

        assert [s.title for s in suggestions] == [
            "Sunday Soul Reset",
            "Morning Anxiety Ease",
            "Work-Life Balance Check",
        ]

    def test_sunday_without_negative_history(self, generator, user):
        suggestions = generator.suggest_for_date(SUNDAY, [], user, now=datetime(2026, 10, 18, 15, 0))
        assert suggestions[0].title == "Weekly Wisdom Gathering"
        assert len(suggestions) == 3

    def test_afternoon_weekday_is_generic(self, generator, user):
        suggestions = generator.suggest_for_date(MONDAY, [], user, now=datetime(2026, 10, 19, 14, 0))
        assert [s.title for s in suggestions] == [t.title for t in GENERIC_SUGGESTIONS]

    def test_morning_pads_cyclically(self, generator, user, make_entry):
        entries = [make_entry(MONDAY, content="Quiet.")]
        suggestions = generator.suggest_for_date(MONDAY, entries, user, now=datetime(2026, 10, 19, 7, 30))

        assert [s.title for s in suggestions] == [
            "Morning Power Hour",
            GENERIC_SUGGESTIONS[1].title,
            GENERIC_SUGGESTIONS[2].title,
        ]


class TestMindfulSuggestion:
    def test_to_dict(self):
        suggestion = MindfulSuggestion.from_template(DEFAULT_SUGGESTIONS[0])
        data = suggestion.to_dict()
        assert data["type"] == "reflection"
        assert data["relevance_score"] == 0.7
        assert data["keywords"] == []
