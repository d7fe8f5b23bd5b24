"""Tests for the mood timeline."""

from datetime import date

from journal.history import get_mood_history
from journal.storage import JournalStorage


class TestMoodHistory:
    def test_window_and_order(self, temp_dirs):
        storage = JournalStorage(temp_dirs["journal_dir"])
        for day in [date(2026, 3, 10), date(2026, 1, 1), date(2026, 3, 5), date(2026, 3, 20)]:
            storage.upsert("alice", "I am so happy and grateful!", day=day)

        timeline = get_mood_history(storage, "alice", days=30, today=date(2026, 3, 15))

        assert [row["date"] for row in timeline] == ["2026-03-05", "2026-03-10"]
        row = timeline[0]
        assert set(row) == {"date", "mood", "sentiment", "score", "keywords"}
        assert row["mood"] == "joyful"
        assert len(row["keywords"]) <= 3

    def test_empty(self, temp_dirs):
        storage = JournalStorage(temp_dirs["journal_dir"])
        assert get_mood_history(storage, "alice") == []
