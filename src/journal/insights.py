"""Emotional pattern and sentiment insight aggregation over journal entries.

All functions are pure reads over an entry window ordered oldest to newest;
nothing is cached or persisted, results are recomputed per call.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import structlog

from shared_types import InsightType, MoodType, SentimentPolarity, STRESS_MOODS, TrendDirection

from .models import JournalEntry

logger = structlog.get_logger()

ISOLATION_KEYWORDS = frozenset({"alone", "lonely", "isolated", "disconnected", "empty"})


@dataclass(frozen=True)
class EmotionalPattern:
    dominant_mood: MoodType
    frequency: float  # share of recent entries, 0-1
    trend: TrendDirection
    consistency: float  # 0-1, regularity of recurrence
    triggers: tuple[str, ...] = ()


@dataclass(frozen=True)
class SentimentInsight:
    type: InsightType
    title: str
    description: str
    confidence: float
    actionable: bool
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class SentimentTrend:
    direction: str  # positive, negative, neutral
    significance: float


@dataclass
class InsightWindows:
    pattern_window: int = 14
    insight_window: int = 10
    max_insights: int = 6
    min_entries: int = 5


def analyze_emotional_patterns(entries: Sequence[JournalEntry], window: int = 14) -> list[EmotionalPattern]:
    """Top-3 moods of the recent window with trend against the window before it."""
    if len(entries) < 3:
        return []

    recent = list(entries[-window:])
    older = list(entries[-2 * window:-window]) if len(entries) > window else []

    counts = Counter(e.mood for e in recent)
    older_counts = Counter(e.mood for e in older)

    patterns = []
    for mood, count in counts.most_common(3):
        recent_freq = count / len(recent)
        older_freq = older_counts[mood] / max(len(older), 1)

        if recent_freq > older_freq + 0.1:
            trend = TrendDirection.IMPROVING if mood.is_positive else TrendDirection.DECLINING
        elif recent_freq < older_freq - 0.1:
            trend = TrendDirection.DECLINING if mood.is_positive else TrendDirection.IMPROVING
        else:
            trend = TrendDirection.STABLE

        patterns.append(
            EmotionalPattern(
                dominant_mood=mood,
                frequency=recent_freq,
                trend=trend,
                consistency=calculate_mood_consistency(recent, mood),
                triggers=tuple(extract_mood_triggers([e for e in recent if e.mood == mood])),
            )
        )
    return patterns


def calculate_mood_consistency(entries: Sequence[JournalEntry], mood: MoodType) -> float:
    """How evenly a mood's occurrences are spaced in time (1.0 = perfectly regular)."""
    days = [e.date.toordinal() for e in entries if e.mood == mood]
    if len(days) < 2:
        return 0.0

    span = max(days) - min(days)
    if span == 0:
        return 1.0
    expected = span / (len(days) - 1)
    intervals = np.diff(np.array(days, dtype=float))
    deviation = np.abs(intervals - expected) / expected
    return float(np.mean(np.clip(1.0 - deviation, 0.0, None)))


def extract_mood_triggers(entries: Sequence[JournalEntry], limit: int = 5) -> list[str]:
    """Keywords that recur (2+ times) across the given entries, most frequent first."""
    counts = Counter(k for e in entries for k in e.keywords)
    return [k for k, c in counts.most_common() if c >= 2][:limit]


def analyze_sentiment_trend(entries: Sequence[JournalEntry]) -> SentimentTrend:
    """Compare mean sentiment of the first and second half of the window."""
    if len(entries) < 3:
        return SentimentTrend(direction="neutral", significance=0.0)

    scores = np.array([e.sentiment_score for e in entries], dtype=float)
    half = len(scores) // 2
    first_avg = float(scores[:half].mean())
    second_avg = float(scores[half:].mean())

    difference = second_avg - first_avg
    significance = abs(difference) / max(abs(first_avg), abs(second_avg), 0.1)
    if difference > 0.1:
        direction = "positive"
    elif difference < -0.1:
        direction = "negative"
    else:
        direction = "neutral"
    return SentimentTrend(direction=direction, significance=min(significance, 1.0))


def calculate_volatility(entries: Sequence[JournalEntry]) -> float:
    """Population standard deviation of sentiment scores, capped at 1."""
    if len(entries) < 3:
        return 0.0
    scores = np.array([e.sentiment_score for e in entries], dtype=float)
    return float(min(np.std(scores), 1.0))


def analyze_keyword_patterns(entries: Sequence[JournalEntry]) -> list[SentimentInsight]:
    """Insights for keywords that recur 3+ times with a clearly signed mean sentiment."""
    if not entries:
        return []
    counts = Counter(k for e in entries for k in e.keywords)
    frequent = [(k, c) for k, c in counts.most_common() if c >= 3][:3]

    insights = []
    for keyword, count in frequent:
        related = [e.sentiment_score for e in entries if keyword in e.keywords]
        avg = sum(related) / len(related)
        if abs(avg) <= 0.3:
            continue
        tone = "positive" if avg > 0 else "negative"
        insights.append(
            SentimentInsight(
                type=InsightType.PATTERN,
                title=f'"{keyword}" Pattern Detected',
                description=(
                    f'The theme "{keyword}" appears frequently in your entries '
                    f"and is associated with {tone} emotions."
                ),
                confidence=min(count / len(entries) * 2, 0.9),
                actionable=True,
                suggestion=(
                    f'"{keyword}" seems to be a positive influence in your life. '
                    "Consider how to cultivate more of this."
                    if avg > 0
                    else f'"{keyword}" appears to be challenging for you. '
                    "Consider strategies to address or reframe this area."
                ),
            )
        )
    return insights


def detect_concerning_patterns(entries: Sequence[JournalEntry]) -> list[SentimentInsight]:
    """Fixed-confidence concerns: persistent negativity, stress, isolation."""
    if not entries:
        return []
    insights = []
    total = len(entries)

    negative = sum(1 for e in entries if e.sentiment == SentimentPolarity.NEGATIVE)
    if negative >= total * 0.7:
        insights.append(
            SentimentInsight(
                type=InsightType.CONCERN,
                title="Persistent Negative Emotions",
                description=f"{round(negative / total * 100)}% of your recent entries reflect negative emotions.",
                confidence=0.9,
                actionable=True,
                suggestion="Consider reaching out to a mental health professional or trusted friend for support.",
            )
        )

    stressed = sum(1 for e in entries if e.mood in STRESS_MOODS)
    if stressed >= total * 0.6:
        insights.append(
            SentimentInsight(
                type=InsightType.CONCERN,
                title="High Stress/Anxiety Pattern",
                description="Your recent entries frequently mention stress, anxiety, or frustration.",
                confidence=0.8,
                actionable=True,
                suggestion="Consider stress management techniques like deep breathing, meditation, or regular exercise.",
            )
        )

    isolation = sum(1 for e in entries for k in e.keywords if k in ISOLATION_KEYWORDS)
    if isolation >= 3:
        insights.append(
            SentimentInsight(
                type=InsightType.CONCERN,
                title="Social Connection Concerns",
                description="Your entries frequently mention feelings of loneliness or isolation.",
                confidence=0.7,
                actionable=True,
                suggestion="Consider reaching out to friends, family, or joining social activities to build connections.",
            )
        )
    return insights


def generate_sentiment_insights(
    entries: Sequence[JournalEntry],
    windows: Optional[InsightWindows] = None,
) -> list[SentimentInsight]:
    """All insights for an entry history, highest confidence first."""
    windows = windows or InsightWindows()
    if len(entries) < windows.min_entries:
        return [
            SentimentInsight(
                type=InsightType.PATTERN,
                title="Building Your Emotional Awareness",
                description=(
                    "You're just starting your mindful journey. "
                    "Keep writing to discover your emotional patterns."
                ),
                confidence=0.8,
                actionable=True,
                suggestion="Try to journal daily for at least a week to establish baseline patterns.",
            )
        ]

    recent = list(entries[-windows.insight_window:])
    insights: list[SentimentInsight] = []

    trend = analyze_sentiment_trend(recent)
    if trend.significance > 0.6:
        positive = trend.direction == "positive"
        insights.append(
            SentimentInsight(
                type=InsightType.STRENGTH if positive else InsightType.CONCERN,
                title=f"{'Positive' if positive else 'Concerning'} Emotional Trend",
                description=(
                    f"Your recent entries show a {trend.direction} emotional trend "
                    f"with {trend.significance * 100:.0f}% consistency."
                ),
                confidence=trend.significance,
                actionable=True,
                suggestion=(
                    "Consider what factors are contributing to this positive trend and how to maintain them."
                    if positive
                    else "This pattern suggests you might benefit from additional emotional support "
                    "or stress management techniques."
                ),
            )
        )

    for pattern in analyze_emotional_patterns(entries, window=windows.pattern_window):
        if pattern.frequency > 0.4 and pattern.consistency > 0.7:
            mood = pattern.dominant_mood
            insights.append(
                SentimentInsight(
                    type=InsightType.STRENGTH if mood.is_positive else InsightType.CONCERN,
                    title=f"Consistent {mood.value.capitalize()} Pattern",
                    description=(
                        f"You've been experiencing {mood.value} feelings in "
                        f"{pattern.frequency * 100:.0f}% of recent entries with high consistency."
                    ),
                    confidence=pattern.consistency,
                    actionable=True,
                    suggestion=(
                        f"Your consistent {mood.value} state is a strength. "
                        "Consider what maintains this positive pattern."
                        if mood.is_positive
                        else "This consistent pattern might indicate an area needing attention. "
                        "Consider exploring what triggers these feelings."
                    ),
                )
            )

    volatility = calculate_volatility(recent)
    if volatility > 0.7:
        insights.append(
            SentimentInsight(
                type=InsightType.CONCERN,
                title="High Emotional Variability",
                description=(
                    "Your recent entries show significant emotional ups and downs, "
                    "which might indicate stress or major life changes."
                ),
                confidence=volatility,
                actionable=True,
                suggestion=(
                    "Consider incorporating grounding techniques or speaking with a counselor "
                    "about managing emotional fluctuations."
                ),
            )
        )
    elif volatility < 0.3:
        insights.append(
            SentimentInsight(
                type=InsightType.PATTERN,
                title="Emotional Stability",
                description="Your emotions have been relatively stable recently, showing good emotional regulation.",
                confidence=1 - volatility,
                actionable=False,
            )
        )

    insights.extend(analyze_keyword_patterns(recent))
    insights.extend(detect_concerning_patterns(recent))

    insights.sort(key=lambda i: i.confidence, reverse=True)
    logger.debug("insights_generated", total=len(insights), entries=len(entries))
    return insights[: windows.max_insights]
