"""Relevance-ranked keyword extraction for journal text."""

import math
from collections import Counter
from typing import Iterable, Optional

from shared_types import MoodType, SentimentPolarity

from .lexicon import DEFAULT_LEXICON, Lexicon
from .tuning import AnalyzerTuning

_EDGE_PUNCTUATION = "\"'.,;:!?()[]{}<>-_*/\\`~“”‘’…"

# (word set attribute on Lexicon, multiplier)
_SEMANTIC_BOOSTS = (
    ("emotional_words", 2.5),
    ("contextual_words", 2.0),
    ("psychological_words", 2.2),
    ("relationship_words", 1.8),
    ("temporal_significance_words", 1.5),
)


class KeywordExtractor:
    """Scores candidate words by mood, sentiment and semantic category, then picks a diverse top-N."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, tuning: Optional[AnalyzerTuning] = None):
        self.lexicon = lexicon
        self.tuning = tuning or AnalyzerTuning()

    def candidates(self, text: str) -> list[str]:
        """Whitespace tokens with edge punctuation stripped, minus stop words and short/non-alpha tokens."""
        words = []
        for raw in (text or "").lower().split():
            word = raw.strip(_EDGE_PUNCTUATION)
            if len(word) <= 2 or not word.isalpha() or not word.isascii():
                continue
            if word in self.lexicon.stop_words:
                continue
            words.append(word)
        return words

    def score_words(
        self,
        text: str,
        mood: MoodType,
        sentiment: SentimentPolarity,
        matches: Iterable[str] = (),
    ) -> dict[str, float]:
        words = self.candidates(text)
        frequency = Counter(words)
        mood_keywords = set(self.lexicon.pattern(mood).keywords)
        sentiment_words = self.lexicon.sentiment_words(sentiment)
        matched = set(matches)

        scores: dict[str, float] = {}
        for word in words:
            if word in scores:
                continue
            score = 1.0
            if word in mood_keywords:
                score *= 4
            if word in sentiment_words:
                score *= 3
            if word in matched:
                score *= 3.5
            for attr, boost in _SEMANTIC_BOOSTS:
                if word in getattr(self.lexicon, attr):
                    score *= boost
            count = frequency[word]
            if count > 1:
                score *= math.log(count) + 1
            scores[word] = score

        for word in words:
            if word in self.lexicon.high_value_words and word not in scores:
                scores[word] = 2.0

        return scores

    def extract(
        self,
        text: str,
        mood: MoodType,
        sentiment: SentimentPolarity,
        matches: Iterable[str] = (),
    ) -> list[str]:
        """Top keywords in descending score order.

        A word whose leading root (first 4 letters) was already taken is
        skipped unless its score clears the diversity override.
        """
        scores = self.score_words(text, mood, sentiment, matches)
        ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)

        root_len = self.tuning.keyword_root_length
        selected: list[str] = []
        used_roots: set[str] = set()
        for word, score in ranked:
            if len(selected) >= self.tuning.max_keywords:
                break
            root = word[:root_len]
            if root not in used_roots or score > self.tuning.keyword_diversity_override:
                selected.append(word)
                used_roots.add(root)
        return selected
