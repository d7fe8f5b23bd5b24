"""Rule-based mood and sentiment analysis of journal text."""

from dataclasses import dataclass, field
from typing import Optional

import structlog

from observability import metrics
from shared_types import MoodType, SentimentPolarity

from .keywords import KeywordExtractor
from .lexicon import DEFAULT_LEXICON, Lexicon, MoodPattern
from .sentiment import SentimentResult, SentimentScorer
from .text import contains_term, count_words, find_term, nearby_terms, normalize, preceded_by, split_sentences, tokenize
from .tuning import AnalyzerTuning

logger = structlog.get_logger()


@dataclass(frozen=True)
class MoodAnalysis:
    mood: MoodType
    sentiment: SentimentPolarity
    sentiment_score: float  # -1 to 1
    keywords: tuple[str, ...]
    confidence: float  # 0 to 0.98

    def to_dict(self) -> dict:
        return {
            "mood": self.mood.value,
            "sentiment": self.sentiment.value,
            "sentiment_score": self.sentiment_score,
            "keywords": list(self.keywords),
            "confidence": self.confidence,
        }


@dataclass
class MoodScore:
    score: float = 0.0
    confidence: float = 0.0
    matches: list[str] = field(default_factory=list)


def neutral_analysis(confidence: float = 0.5) -> MoodAnalysis:
    return MoodAnalysis(
        mood=MoodType.NEUTRAL,
        sentiment=SentimentPolarity.NEUTRAL,
        sentiment_score=0.0,
        keywords=(),
        confidence=confidence,
    )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class MoodAnalyzer:
    """Infers a mood, sentiment and keywords from free text.

    Pure and deterministic: the lexicon and tuning are fixed at construction and
    nothing is cached between calls, so one instance can serve any caller.
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, tuning: Optional[AnalyzerTuning] = None):
        self.lexicon = lexicon
        self.tuning = tuning or AnalyzerTuning()
        self.sentiment_scorer = SentimentScorer(lexicon, self.tuning)
        self.keyword_extractor = KeywordExtractor(lexicon, self.tuning)

    def analyze(self, text: Optional[str]) -> MoodAnalysis:
        """Analyze one journal entry.

        Never raises. Empty, whitespace-only or wordless text yields a neutral
        analysis with confidence ``neutral_confidence``.
        """
        text = text or ""
        if not tokenize(text):
            return neutral_analysis(self.tuning.neutral_confidence)

        metrics.counter("mood.analyses")
        with metrics.timer("mood.analyze"):
            scores = self.score_moods(text)
            mood, mood_confidence = self._select_mood(scores)

            sentiment_result = self.sentiment_scorer.score(text)
            sentiment = self._label(sentiment_result)
            sentiment_score = self._normalize_score(sentiment_result, self.lexicon.pattern(mood))

            keywords = self.keyword_extractor.extract(text, mood, sentiment, scores[mood].matches)
            confidence = _clamp(
                mood_confidence * 0.6
                + sentiment_result.confidence * 0.3
                + min(len(keywords) / 8, 1.0) * 0.1,
                0.0,
                self.tuning.max_confidence,
            )

        logger.debug(
            "mood_analyzed",
            mood=mood.value,
            sentiment=sentiment.value,
            score=round(sentiment_score, 3),
            confidence=round(confidence, 3),
            words=count_words(text),
        )
        return MoodAnalysis(
            mood=mood,
            sentiment=sentiment,
            sentiment_score=sentiment_score,
            keywords=tuple(keywords),
            confidence=confidence,
        )

    def score_moods(self, text: str) -> dict[MoodType, MoodScore]:
        """Per-mood scores after negation and conditional dampening."""
        lowered = normalize(text)
        word_count = max(count_words(text), 1)
        scores = {
            mood: self._score_pattern(lowered, pattern, word_count)
            for mood, pattern in self.lexicon.moods.items()
        }

        t = self.tuning
        for sentence in split_sentences(lowered):
            for negation in self.lexicon.negation_words:
                if not contains_term(sentence, negation):
                    continue
                for mood, pattern in self.lexicon.moods.items():
                    for keyword in pattern.keywords:
                        if self._negated(sentence, negation, keyword):
                            scores[mood].score *= t.negation_dampening
                            scores[mood].confidence *= t.negation_confidence_penalty

            for conditional in self.lexicon.conditional_words:
                if contains_term(sentence, conditional):
                    for mood_score in scores.values():
                        mood_score.score *= t.conditional_dampening
                        mood_score.confidence *= t.conditional_confidence_penalty
        return scores

    def _score_pattern(self, text: str, pattern: MoodPattern, word_count: int) -> MoodScore:
        t = self.tuning
        result = MoodScore()
        match_count = 0

        for keyword in pattern.keywords:
            for index in find_term(text, keyword):
                score = pattern.weight
                if preceded_by(text, index, pattern.intensifiers):
                    score *= t.intensifier_boost
                boosts = nearby_terms(
                    text, index, len(keyword), t.keyword_context_radius, pattern.contextual_boosts
                )
                score *= t.keyword_context_boost ** len(boosts)
                result.score += score
                result.matches.append(keyword)
                match_count += 1

        for phrase in pattern.phrases:
            index = text.find(phrase)
            if index == -1:
                continue
            score = pattern.weight * t.phrase_weight
            boosts = nearby_terms(
                text, index, len(phrase), t.phrase_context_radius, pattern.contextual_boosts
            )
            score *= t.phrase_context_boost ** len(boosts)
            result.score += score
            result.matches.append(phrase)
            match_count += 1

        for boost in pattern.contextual_boosts:
            if contains_term(text, boost):
                result.score += pattern.weight * t.ambient_boost_weight
                match_count += 1

        density = match_count / word_count
        result.confidence = _clamp(density * 3 + match_count * 0.1 + pattern.confidence, 0.0, 1.0)
        return result

    def _negated(self, sentence: str, negation: str, keyword: str) -> bool:
        """Keyword follows the negation word with at most ``negation_scope`` words between."""
        for index in find_term(sentence, keyword):
            if preceded_by(sentence, index, (negation,), gap=self.tuning.negation_scope):
                return True
        return False

    def _select_mood(self, scores: dict[MoodType, MoodScore]) -> tuple[MoodType, float]:
        t = self.tuning
        ranked = sorted(
            ((mood, s) for mood, s in scores.items() if s.score > 0),
            key=lambda item: item[1].score,
            reverse=True,
        )
        if not ranked or ranked[0][1].score < t.min_mood_score:
            return MoodType.NEUTRAL, t.neutral_confidence

        mood, top = ranked[0]
        second = ranked[1][1].score if len(ranked) > 1 else 0.0
        gap = top.score - second
        relative_strength = top.score / max(top.score + second, 1.0)
        confidence = (
            relative_strength * 0.4
            + top.confidence * 0.4
            + min(gap / top.score, 1.0) * 0.2
        )
        return mood, _clamp(confidence, 0.0, t.max_confidence)

    def _label(self, result: SentimentResult) -> SentimentPolarity:
        # Thresholds apply to the aggregate before it is scaled to [-1, 1].
        threshold = self.tuning.sentiment_threshold
        if result.score > threshold:
            return SentimentPolarity.POSITIVE
        if result.score < -threshold:
            return SentimentPolarity.NEGATIVE
        return SentimentPolarity.NEUTRAL

    def _normalize_score(self, result: SentimentResult, pattern: MoodPattern) -> float:
        t = self.tuning
        score = _clamp(result.score / t.sentiment_range, -1.0, 1.0)
        score += pattern.sentiment_multiplier * t.mood_nudge
        return _clamp(score, -1.0, 1.0)


_default_analyzer: Optional[MoodAnalyzer] = None


def get_analyzer() -> MoodAnalyzer:
    """Shared analyzer built from the default lexicon and tuning."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = MoodAnalyzer()
    return _default_analyzer


def analyze(text: Optional[str]) -> MoodAnalysis:
    """Analyze text with the default analyzer."""
    return get_analyzer().analyze(text)
