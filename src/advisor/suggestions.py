"""Mindful practice suggestions ranked against a user's recent entries."""

from collections import Counter
from dataclasses import asdict, dataclass, replace
from datetime import date, datetime
from typing import Optional, Sequence

import structlog

from journal.models import JournalEntry, UserProfile
from shared_types import MoodType, SentimentPolarity, STRESS_MOODS, SuggestionType, Theme

from .catalog import (
    DEFAULT_SUGGESTIONS,
    GENERIC_SUGGESTIONS,
    MOOD_SUGGESTIONS,
    MORNING_ANXIETY_EASE,
    MORNING_POWER_HOUR,
    POSITIVE_MOMENTUM,
    RELATIONSHIP_APPRECIATION,
    STRESS_RESET,
    SUNDAY_SOUL_RESET,
    WEEKLY_WISDOM,
    WORK_LIFE_BALANCE,
    SuggestionTemplate,
)
from .themes import detect_themes

logger = structlog.get_logger()

SUGGESTION_COUNT = 3

# Sentiment alignment bonus by (suggestion type, last entry sentiment)
ALIGNMENT_BONUS = {
    (SuggestionType.MOOD_BOOST, SentimentPolarity.NEGATIVE): 0.3,
    (SuggestionType.STRESS_RELIEF, SentimentPolarity.NEGATIVE): 0.4,
    (SuggestionType.GROWTH, SentimentPolarity.POSITIVE): 0.3,
}


@dataclass(frozen=True)
class MindfulSuggestion:
    type: SuggestionType
    title: str
    description: str
    duration: str
    reason: str
    relevance_score: float
    keywords: tuple[str, ...] = ()

    @classmethod
    def from_template(
        cls, template: SuggestionTemplate, relevance: Optional[float] = None, reason: Optional[str] = None
    ) -> "MindfulSuggestion":
        return cls(
            type=template.type,
            title=template.title,
            description=template.description,
            duration=template.duration,
            reason=reason or template.reason,
            relevance_score=template.base_relevance if relevance is None else relevance,
            keywords=template.keywords,
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.type.value
        data["keywords"] = list(self.keywords)
        return data


def calculate_relevance(
    template: SuggestionTemplate,
    entry: JournalEntry,
    themes: Sequence[Theme],
    mood: Optional[MoodType],
    dominant_mood: MoodType,
) -> float:
    """Score a candidate against the most recent entry, clamped to [0, 1].

    Args:
        template: Candidate suggestion
        entry: Most recent journal entry
        themes: Themes detected across recent entries
        mood: Mood whose table the candidate came from (None for fixed tables)
        dominant_mood: Most frequent mood in the recent window
    """
    relevance = 0.5

    if template.keywords:
        content = entry.content.lower()
        matching = [k for k in template.keywords if k in entry.keywords or k in content]
        relevance += len(matching) / len(template.keywords) * 0.3

    if template.theme is not None and template.theme in themes:
        relevance += 0.4

    relevance += ALIGNMENT_BONUS.get((template.type, entry.sentiment), 0.0)

    if mood is not None and mood == dominant_mood:
        relevance += 0.2

    return max(0.0, min(relevance, 1.0))


def dominant_mood(entries: Sequence[JournalEntry]) -> MoodType:
    """Most frequent mood; ties go to the mood seen first."""
    counts = Counter(e.mood for e in entries)
    if not counts:
        return MoodType.NEUTRAL
    return counts.most_common(1)[0][0]


def _pad(suggestions: list[MindfulSuggestion], fillers: Sequence[SuggestionTemplate]) -> list[MindfulSuggestion]:
    while len(suggestions) < SUGGESTION_COUNT:
        suggestions.append(MindfulSuggestion.from_template(fillers[len(suggestions) % len(fillers)]))
    return suggestions


class SuggestionGenerator:
    """Pick exactly three mindful practices for a user's situation."""

    def __init__(self, history_window: int = 7, theme_window: int = 5):
        self.history_window = history_window
        self.theme_window = theme_window

    def suggest_for_history(
        self, entries: Sequence[JournalEntry], user: Optional[UserProfile] = None
    ) -> list[MindfulSuggestion]:
        """Rank mood and pattern candidates against the recent history."""
        if not entries:
            return [MindfulSuggestion.from_template(t) for t in DEFAULT_SUGGESTIONS]

        recent = list(entries[-self.history_window:])
        last = recent[-1]
        themes = detect_themes(entries, self.theme_window)
        mood = dominant_mood(recent)
        suggestion_set = MOOD_SUGGESTIONS[mood]

        candidates: list[MindfulSuggestion] = []
        for template in suggestion_set.candidates:
            relevance = calculate_relevance(template, last, themes, mood, mood)
            candidates.append(MindfulSuggestion.from_template(template, relevance))

        for theme in themes:
            variant = suggestion_set.contextual_variants.get(theme)
            if variant is None:
                continue
            relevance = calculate_relevance(variant, last, themes, mood, mood)
            reason = f"{variant.reason} (based on {theme.value} themes in your entries)"
            candidates.append(MindfulSuggestion.from_template(variant, relevance, reason))

        candidates.extend(self._pattern_candidates(recent, themes))

        candidates.sort(key=lambda s: s.relevance_score, reverse=True)
        selected = _pad(candidates[:SUGGESTION_COUNT], DEFAULT_SUGGESTIONS)
        selected = [replace(s, relevance_score=round(s.relevance_score, 2)) for s in selected]

        logger.debug(
            "suggestions_generated",
            user_id=user.id if user else None,
            dominant_mood=mood.value,
            themes=[t.value for t in themes],
            candidates=len(candidates),
        )
        return selected

    @staticmethod
    def _pattern_candidates(recent: Sequence[JournalEntry], themes: Sequence[Theme]) -> list[MindfulSuggestion]:
        patterns = []
        stressful = sum(
            1 for e in recent if e.mood in STRESS_MOODS or e.sentiment == SentimentPolarity.NEGATIVE
        )
        if stressful >= 3:
            patterns.append(STRESS_RESET)

        positive = sum(1 for e in recent if e.sentiment == SentimentPolarity.POSITIVE)
        if positive >= 4:
            patterns.append(POSITIVE_MOMENTUM)

        if Theme.RELATIONSHIP in themes or Theme.FAMILY in themes:
            patterns.append(RELATIONSHIP_APPRECIATION)

        return [MindfulSuggestion.from_template(t) for t in patterns]

    def suggest_for_date(
        self,
        day: date,
        entries: Sequence[JournalEntry],
        user: Optional[UserProfile] = None,
        now: Optional[datetime] = None,
    ) -> list[MindfulSuggestion]:
        """Day-of-week and time-of-day practices, kept in the order generated."""
        now = now or datetime.now()
        themes = detect_themes(entries, self.theme_window)
        last = entries[-1] if entries else None

        templates: list[SuggestionTemplate] = []
        if day.weekday() == 6:  # Sunday
            if last is not None and last.sentiment == SentimentPolarity.NEGATIVE:
                templates.append(SUNDAY_SOUL_RESET)
            else:
                templates.append(WEEKLY_WISDOM)

        if now.hour < 10:
            if last is not None and last.mood == MoodType.ANXIOUS:
                templates.append(MORNING_ANXIETY_EASE)
            else:
                templates.append(MORNING_POWER_HOUR)

        if Theme.WORK in themes:
            templates.append(WORK_LIFE_BALANCE)

        suggestions = _pad([MindfulSuggestion.from_template(t) for t in templates], GENERIC_SUGGESTIONS)
        logger.debug(
            "date_suggestions_generated",
            user_id=user.id if user else None,
            day=day.isoformat(),
            themes=[t.value for t in themes],
        )
        return suggestions[:SUGGESTION_COUNT]
