"""Journal entry and user profile value objects."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Optional

from mood.analyzer import MoodAnalysis
from shared_types import MoodType, SentimentPolarity


@dataclass(frozen=True)
class UserProfile:
    id: str
    name: str = ""
    email: str = ""
    preferences: dict[str, Any] = field(default_factory=dict)  # display only, never scored


@dataclass(frozen=True)
class JournalEntry:
    id: str
    user_id: str
    date: date
    content: str
    mood: MoodType = MoodType.NEUTRAL
    sentiment: SentimentPolarity = SentimentPolarity.NEUTRAL
    sentiment_score: float = 0.0
    keywords: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_analysis(
        cls,
        user_id: str,
        day: date,
        content: str,
        analysis: MoodAnalysis,
        entry_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> "JournalEntry":
        now = datetime.now()
        return cls(
            id=entry_id or f"{user_id}_{day.isoformat()}",
            user_id=user_id,
            date=day,
            content=content,
            mood=analysis.mood,
            sentiment=analysis.sentiment,
            sentiment_score=analysis.sentiment_score,
            keywords=tuple(analysis.keywords),
            created_at=created_at or now,
            updated_at=now,
        )

    def with_analysis(self, content: str, analysis: MoodAnalysis) -> "JournalEntry":
        """Copy with new content and analysis; keeps identity and created_at."""
        return replace(
            self,
            content=content,
            mood=analysis.mood,
            sentiment=analysis.sentiment,
            sentiment_score=analysis.sentiment_score,
            keywords=tuple(analysis.keywords),
            updated_at=datetime.now(),
        )

    def to_metadata(self) -> dict:
        """Frontmatter fields (everything but content)."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date.isoformat(),
            "mood": self.mood.value,
            "sentiment": self.sentiment.value,
            "sentiment_score": round(self.sentiment_score, 4),
            "keywords": list(self.keywords),
            "created": self.created_at.isoformat(),
            "updated": self.updated_at.isoformat(),
        }

    @classmethod
    def from_post(cls, post) -> "JournalEntry":
        """Build from a frontmatter.Post.

        Raises:
            ValueError: if required fields are missing or malformed
        """
        meta = post.metadata
        try:
            return cls(
                id=str(meta["id"]),
                user_id=str(meta["user_id"]),
                date=_as_date(meta["date"]),
                content=post.content,
                mood=MoodType(meta.get("mood", "neutral")),
                sentiment=SentimentPolarity(meta.get("sentiment", "neutral")),
                sentiment_score=float(meta.get("sentiment_score", 0.0)),
                keywords=tuple(meta.get("keywords") or ()),
                created_at=_as_datetime(meta.get("created")),
                updated_at=_as_datetime(meta.get("updated")),
            )
        except KeyError as e:
            raise ValueError(f"Entry missing field: {e}") from e


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value:
        return datetime.now()
    return datetime.fromisoformat(str(value))
