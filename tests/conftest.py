"""Shared test fixtures for Stillpoint."""

import sys
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from journal.models import JournalEntry, UserProfile  # noqa: E402
from shared_types import MoodType, SentimentPolarity  # noqa: E402


@pytest.fixture
def temp_dirs(tmp_path):
    """Create temp directory for the journal."""
    journal_dir = tmp_path / "journal"
    journal_dir.mkdir()
    return {"journal_dir": journal_dir}


@pytest.fixture
def user():
    return UserProfile(id="alice", name="Alice", email="alice@example.com")


@pytest.fixture
def make_entry():
    """Factory for JournalEntry values; ``day`` may be a date or an offset from 2026-01-01."""
    start = date(2026, 1, 1)

    def _make(
        day=0,
        content="Just an ordinary day.",
        mood=MoodType.NEUTRAL,
        sentiment=SentimentPolarity.NEUTRAL,
        sentiment_score=0.0,
        keywords=(),
        user_id="alice",
    ) -> JournalEntry:
        entry_date = day if isinstance(day, date) else start + timedelta(days=day)
        stamp = datetime.combine(entry_date, datetime.min.time())
        return JournalEntry(
            id=f"{user_id}_{entry_date.isoformat()}",
            user_id=user_id,
            date=entry_date,
            content=content,
            mood=MoodType(mood),
            sentiment=SentimentPolarity(sentiment),
            sentiment_score=sentiment_score,
            keywords=tuple(keywords),
            created_at=stamp,
            updated_at=stamp,
        )

    return _make
