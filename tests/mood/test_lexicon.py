"""Tests for lexicon tables and validation."""

from dataclasses import replace

import pytest

from mood.lexicon import DEFAULT_LEXICON, LexiconError, MoodPattern, WeightedWords
from shared_types import MoodType, SentimentPolarity


class TestDefaultLexicon:
    def test_validates(self):
        assert DEFAULT_LEXICON.validate() is DEFAULT_LEXICON

    def test_every_mood_has_a_pattern(self):
        assert set(DEFAULT_LEXICON.moods) == set(MoodType)

    def test_sentiment_weights(self):
        assert DEFAULT_LEXICON.sentiment_weight("ecstatic") == 3.0
        assert DEFAULT_LEXICON.sentiment_weight("terrible") == -2.0
        assert DEFAULT_LEXICON.sentiment_weight("not bad") == 0.5
        assert DEFAULT_LEXICON.sentiment_weight("could be better") == -0.5
        assert DEFAULT_LEXICON.sentiment_weight("table") is None

    def test_sentiment_words_by_polarity(self):
        assert "happy" in DEFAULT_LEXICON.sentiment_words(SentimentPolarity.POSITIVE)
        assert "sad" in DEFAULT_LEXICON.sentiment_words(SentimentPolarity.NEGATIVE)
        assert DEFAULT_LEXICON.sentiment_words(SentimentPolarity.NEUTRAL) == frozenset()

    def test_intensifier_tiers(self):
        assert DEFAULT_LEXICON.intensifier_multiplier("absolutely") == 2.0
        assert DEFAULT_LEXICON.intensifier_multiplier("very") == 1.5
        assert DEFAULT_LEXICON.intensifier_multiplier("kind of") == 0.8
        assert DEFAULT_LEXICON.intensifier_multiplier("table") is None

    def test_high_value_words_include_growth_vocabulary(self):
        assert "breakthrough" in DEFAULT_LEXICON.high_value_words
        assert "love" in DEFAULT_LEXICON.high_value_words

    def test_weighted_words_membership(self):
        tier = WeightedWords("t", ("a", "b"), 1.0)
        assert "a" in tier
        assert "c" not in tier


class TestValidation:
    """Malformed tables fail fast."""

    def test_missing_mood(self):
        moods = {m: p for m, p in DEFAULT_LEXICON.moods.items() if m != MoodType.CONTENT}
        with pytest.raises(LexiconError, match="missing moods"):
            replace(DEFAULT_LEXICON, moods=moods).validate()

    def test_bad_confidence(self):
        bad = replace(DEFAULT_LEXICON.pattern(MoodType.JOYFUL), confidence=1.5)
        moods = {**DEFAULT_LEXICON.moods, MoodType.JOYFUL: bad}
        with pytest.raises(LexiconError, match="confidence"):
            replace(DEFAULT_LEXICON, moods=moods).validate()

    def test_empty_keywords(self):
        bad = MoodPattern((), (), (), (), 0.5, 0.0, 0.5)
        moods = {**DEFAULT_LEXICON.moods, MoodType.NEUTRAL: bad}
        with pytest.raises(LexiconError, match="no keywords"):
            replace(DEFAULT_LEXICON, moods=moods).validate()

    def test_uppercase_term(self):
        bad = replace(DEFAULT_LEXICON.pattern(MoodType.NEUTRAL), keywords=("Okay",))
        moods = {**DEFAULT_LEXICON.moods, MoodType.NEUTRAL: bad}
        with pytest.raises(LexiconError, match="lower-case"):
            replace(DEFAULT_LEXICON, moods=moods).validate()

    def test_wrong_tier_sign(self):
        tiers = (WeightedWords("oops", ("meh",), 1.0),)
        with pytest.raises(LexiconError, match="non-negative"):
            replace(DEFAULT_LEXICON, negative_tiers=tiers).validate()

    def test_long_sentiment_term(self):
        tiers = (WeightedWords("long", ("far far too long",), 1.0),)
        with pytest.raises(LexiconError, match="longer than 3 words"):
            replace(DEFAULT_LEXICON, positive_tiers=tiers).validate()

    def test_conditional_multiplier_range(self):
        with pytest.raises(LexiconError, match="conditional_multiplier"):
            replace(DEFAULT_LEXICON, conditional_multiplier=1.5).validate()

    def test_replace_rebuilds_weights(self):
        tiers = (WeightedWords("only", ("splendid",), 2.0),)
        custom = replace(DEFAULT_LEXICON, positive_tiers=tiers).validate()
        assert custom.sentiment_weight("splendid") == 2.0
        assert custom.sentiment_weight("happy") is None
