"""Shared enums and types for stillpoint."""

from enum import StrEnum


class MoodType(StrEnum):
    JOYFUL = "joyful"
    EXCITED = "excited"
    CONTENT = "content"
    PEACEFUL = "peaceful"
    NEUTRAL = "neutral"
    MELANCHOLY = "melancholy"
    ANXIOUS = "anxious"
    FRUSTRATED = "frustrated"

    @property
    def valence(self) -> int:
        """Chart position, 1 (frustrated) through 8 (excited). Not used in analysis."""
        return _VALENCE[self]

    @property
    def is_positive(self) -> bool:
        return self in POSITIVE_MOODS


_VALENCE = {
    MoodType.FRUSTRATED: 1,
    MoodType.ANXIOUS: 2,
    MoodType.MELANCHOLY: 3,
    MoodType.NEUTRAL: 4,
    MoodType.PEACEFUL: 5,
    MoodType.CONTENT: 6,
    MoodType.JOYFUL: 7,
    MoodType.EXCITED: 8,
}

POSITIVE_MOODS = frozenset(
    {MoodType.JOYFUL, MoodType.EXCITED, MoodType.CONTENT, MoodType.PEACEFUL}
)
STRESS_MOODS = frozenset({MoodType.ANXIOUS, MoodType.FRUSTRATED})


class SentimentPolarity(StrEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SuggestionType(StrEnum):
    MOOD_BOOST = "mood-boost"
    STRESS_RELIEF = "stress-relief"
    REFLECTION = "reflection"
    GROWTH = "growth"


class InsightType(StrEnum):
    PATTERN = "pattern"
    TREND = "trend"
    CONCERN = "concern"
    STRENGTH = "strength"


class TrendDirection(StrEnum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class Theme(StrEnum):
    WORK = "work"
    RELATIONSHIP = "relationship"
    FAMILY = "family"
    ACHIEVEMENT = "achievement"
    LOSS = "loss"
    OPPORTUNITY = "opportunity"
    NATURE = "nature"
    HEALTH = "health"
