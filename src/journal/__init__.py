from .models import JournalEntry, UserProfile

__all__ = ["JournalEntry", "UserProfile"]
