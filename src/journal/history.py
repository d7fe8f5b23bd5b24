"""Mood timeline over stored journal entries."""

from datetime import date, timedelta
from typing import Optional


def get_mood_history(journal_storage, user_id: str, days: int = 30, today: Optional[date] = None) -> list[dict]:
    """Get mood timeline from journal entries.

    Returns list of {date, mood, sentiment, score, keywords} sorted by date.
    """
    today = today or date.today()
    cutoff = today - timedelta(days=days)

    timeline = []
    for entry in journal_storage.list_entries(user_id):
        if entry.date < cutoff or entry.date > today:
            continue
        timeline.append({
            "date": entry.date.isoformat(),
            "mood": entry.mood.value,
            "sentiment": entry.sentiment.value,
            "score": round(entry.sentiment_score, 2),
            "keywords": list(entry.keywords[:3]),
        })

    timeline.sort(key=lambda x: x["date"])
    return timeline
