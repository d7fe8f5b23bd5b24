"""Summary statistics over a user's entries: distribution, valence, streak."""

from collections import Counter
from datetime import date, timedelta
from typing import Optional, Sequence

from shared_types import MoodType

from .models import JournalEntry


def mood_distribution(entries: Sequence[JournalEntry]) -> dict[MoodType, int]:
    """Entry count per mood, in MoodType order, omitting moods never seen."""
    counts = Counter(e.mood for e in entries)
    return {mood: counts[mood] for mood in MoodType if counts[mood]}


def average_valence(entries: Sequence[JournalEntry]) -> float:
    if not entries:
        return 0.0
    return round(sum(e.mood.valence for e in entries) / len(entries), 1)


def most_common_mood(entries: Sequence[JournalEntry]) -> Optional[MoodType]:
    distribution = mood_distribution(entries)
    if not distribution:
        return None
    return max(distribution, key=distribution.get)


def entries_this_week(entries: Sequence[JournalEntry], today: Optional[date] = None) -> int:
    today = today or date.today()
    week_ago = today - timedelta(days=7)
    return sum(1 for e in entries if week_ago <= e.date <= today)


def current_streak(entries: Sequence[JournalEntry], today: Optional[date] = None) -> int:
    """Consecutive journaling days ending today.

    If there is no entry today yet, the run ending yesterday still counts;
    otherwise the streak is 0.
    """
    today = today or date.today()
    days = {e.date for e in entries}
    if today in days:
        cursor = today
    elif today - timedelta(days=1) in days:
        cursor = today - timedelta(days=1)
    else:
        return 0

    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def summarize(entries: Sequence[JournalEntry], today: Optional[date] = None) -> dict:
    most_common = most_common_mood(entries)
    return {
        "total_entries": len(entries),
        "average_valence": average_valence(entries),
        "most_common_mood": most_common.value if most_common else None,
        "entries_this_week": entries_this_week(entries, today),
        "streak": current_streak(entries, today),
        "distribution": {m.value: c for m, c in mood_distribution(entries).items()},
    }
