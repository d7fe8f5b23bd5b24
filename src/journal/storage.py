"""Markdown journal store: one frontmatter file per (user, date)."""

import re
from datetime import date
from pathlib import Path
from typing import Optional

import frontmatter
import structlog
import yaml

from mood.analyzer import MoodAnalyzer, get_analyzer

from .models import JournalEntry

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000  # 100KB


USER_ID_PATTERN = re.compile(r"^[a-z0-9-]{1,50}$")


def _validate_user_id(user_id: str) -> str:
    """User ids go into file names verbatim, so only [a-z0-9-] is allowed."""
    if not USER_ID_PATTERN.match(user_id or ""):
        raise ValueError(f"Invalid user id: {user_id!r} (use lower-case letters, digits and '-')")
    return user_id


class JournalStorage:
    """Manages markdown journal files with YAML frontmatter.

    Each user has at most one entry per calendar date; writing a second entry
    for the same date replaces the first.
    """

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _entry_path(self, user_id: str, day: date) -> Path:
        slug = _validate_user_id(user_id)
        return self._validate_path(self.journal_dir / f"{slug}_{day.isoformat()}.md")

    def _validate_path(self, filepath: Path) -> Path:
        """Ensure resolved path is inside journal_dir."""
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise ValueError(f"Path escapes journal directory: {filepath}")
        return resolved

    def upsert(
        self,
        user_id: str,
        content: str,
        day: Optional[date] = None,
        analyzer: Optional[MoodAnalyzer] = None,
    ) -> JournalEntry:
        """Analyze content and create or replace the entry for (user, day).

        Args:
            user_id: Owning user
            content: Entry text
            day: Calendar date (defaults to today)
            analyzer: Analyzer to use (defaults to the shared one)

        Returns:
            The stored entry

        Raises:
            ValueError: If content is blank or too long, the user id is invalid,
                or the file for (user, day) belongs to another user
        """
        if not content or not content.strip():
            raise ValueError("Entry content is empty")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

        day = day or date.today()
        filepath = self._entry_path(user_id, day)
        existing = self.get(user_id, day)
        if existing is None and filepath.exists():
            raise ValueError(f"Refusing to overwrite {filepath.name}: unreadable or owned by another user")

        analysis = (analyzer or get_analyzer()).analyze(content)
        if existing:
            entry = existing.with_analysis(content, analysis)
        else:
            entry = JournalEntry.from_analysis(user_id, day, content, analysis)

        post = frontmatter.Post(content, **entry.to_metadata())
        with open(filepath, "w") as f:
            f.write(frontmatter.dumps(post))

        logger.debug(
            "entry_saved",
            user_id=user_id,
            date=day.isoformat(),
            updated=existing is not None,
            mood=entry.mood.value,
        )
        return entry

    def get(self, user_id: str, day: date) -> Optional[JournalEntry]:
        filepath = self._entry_path(user_id, day)
        if not filepath.exists():
            return None
        entry = self._load(filepath)
        if entry is not None and entry.user_id != user_id:
            logger.warning("entry_owner_mismatch", path=str(filepath), user_id=user_id)
            return None
        return entry

    def delete(self, user_id: str, day: date) -> bool:
        filepath = self._entry_path(user_id, day)
        if filepath.exists():
            filepath.unlink()
            return True
        return False

    def list_entries(self, user_id: str, limit: Optional[int] = None) -> list[JournalEntry]:
        """Entries for one user, oldest first. ``limit`` keeps the most recent N."""
        slug = _validate_user_id(user_id)
        entries = []
        for f in sorted(self.journal_dir.glob(f"{slug}_*.md")):
            entry = self._load(f)
            if entry is not None and entry.user_id == user_id:
                entries.append(entry)

        entries.sort(key=lambda e: e.date)
        if limit is not None:
            entries = entries[-limit:] if limit > 0 else []
        return entries

    def _load(self, filepath: Path) -> Optional[JournalEntry]:
        try:
            return JournalEntry.from_post(frontmatter.load(filepath))
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning("entry_unreadable", path=str(filepath), error=str(e))
            return None
