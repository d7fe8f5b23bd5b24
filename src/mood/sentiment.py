"""Sentence-level sentiment scoring against a tiered lexicon."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .lexicon import DEFAULT_LEXICON, MAX_TERM_WORDS, Lexicon
from .text import contains_term, count_words, normalize, split_sentences, tokenize
from .tuning import AnalyzerTuning


@dataclass(frozen=True)
class SentimentResult:
    score: float  # aggregate, clamped to +/- sentiment_range
    confidence: float  # 0.1-1
    breakdown: Counter = field(default_factory=Counter)


@dataclass
class _SentenceScore:
    score: float = 0.0
    matches: int = 0
    adjustments: int = 0
    emotional: float = 0.0
    length: int = 0


class SentimentScorer:
    """Scores text sentence by sentence, then averages.

    Each sentiment term is weighted by its tier, then adjusted by a preceding
    intensifier or diminisher and by temporal words in the same sentence.
    Negation shifts the first sentiment term after the negation word;
    conditional words damp the whole sentence.
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, tuning: Optional[AnalyzerTuning] = None):
        self.lexicon = lexicon
        self.tuning = tuning or AnalyzerTuning()

    def score(self, text: str) -> SentimentResult:
        sentences = split_sentences(text)
        if not sentences:
            return SentimentResult(score=0.0, confidence=0.1)

        breakdown: Counter = Counter()
        total_score = 0.0
        total_confidence = 0.0
        for sentence in sentences:
            result = self._score_sentence(sentence, breakdown)
            total_score += result.score + result.emotional
            total_confidence += self._sentence_confidence(result)

        avg_score = total_score / len(sentences)
        avg_confidence = total_confidence / len(sentences)

        length_factor = min(count_words(text) / self.tuning.length_norm_words, 1.0)
        confidence = max(0.1, min(1.0, avg_confidence * length_factor))
        limit = self.tuning.sentiment_range
        return SentimentResult(
            score=max(-limit, min(limit, avg_score)),
            confidence=confidence,
            breakdown=breakdown,
        )

    def _score_sentence(self, sentence: str, breakdown: Counter) -> _SentenceScore:
        lowered = normalize(sentence)
        tokens = tokenize(sentence)
        result = _SentenceScore(length=len(tokens))
        if not tokens:
            return result

        temporal = [t.weight for t in self.lexicon.temporal_tiers if any(w in tokens for w in t.words)]

        for i, _, weight in self._terms(tokens):
            word_score = weight
            breakdown["positive" if weight > 0 else "negative"] += 1

            multiplier = self._intensifier_before(tokens, i)
            if multiplier is not None:
                word_score *= multiplier
                result.adjustments += 1
                breakdown["intensified"] += 1

            if i > 0 and tokens[i - 1] in self.lexicon.diminishers:
                word_score *= self.lexicon.diminishers.weight
                result.adjustments += 1

            for factor in temporal:
                word_score *= factor
                result.adjustments += 1

            result.score += word_score
            result.matches += 1

        for negation in self.lexicon.negation_words:
            if negation not in tokens:
                continue
            start = tokens.index(negation)
            first = next(self._terms(tokens, start=start), None)
            if first is not None and first[0] == start:
                # "not bad", "not great": the term already carries the negation
                continue
            for _, _, weight in self._terms(tokens, start=start + 1):
                if weight > 0:
                    result.score += self.tuning.negated_positive_shift
                else:
                    result.score += self.tuning.negated_negative_shift
                result.adjustments += 1
                breakdown["negated"] += 1
                break

        for conditional in self.lexicon.conditional_words:
            if conditional in tokens:
                result.score *= self.lexicon.conditional_multiplier
                result.adjustments += 1

        for cues in self.lexicon.emotion_cues.values():
            for cue in cues:
                if contains_term(lowered, cue):
                    result.emotional += self.tuning.emotional_cue_weight
                    breakdown["emotional"] += 1

        return result

    def _terms(self, tokens: list[str], start: int = 0):
        """Yield (index, term, weight) for lexicon terms, longest match first."""
        i = start
        while i < len(tokens):
            for size in range(min(MAX_TERM_WORDS, len(tokens) - i), 0, -1):
                term = " ".join(tokens[i:i + size])
                weight = self.lexicon.sentiment_weight(term)
                if weight is not None:
                    yield i, term, weight
                    i += size
                    break
            else:
                i += 1

    def _intensifier_before(self, tokens: list[str], i: int) -> Optional[float]:
        if i == 0:
            return None
        multiplier = self.lexicon.intensifier_multiplier(tokens[i - 1])
        if multiplier is None and i > 1:
            multiplier = self.lexicon.intensifier_multiplier(f"{tokens[i - 2]} {tokens[i - 1]}")
        return multiplier

    @staticmethod
    def _sentence_confidence(result: _SentenceScore) -> float:
        match_ratio = result.matches / max(result.length, 1)
        contextual_ratio = result.adjustments / max(result.matches, 1)
        emotional_ratio = result.emotional / max(result.length, 1)
        return min(match_ratio * 2 + contextual_ratio * 0.3 + emotional_ratio * 0.2 + 0.1, 1.0)
