"""CLI command modules."""

from .analyze import analyze
from .insights import insights
from .journal import journal
from .mood import mood
from .stats import stats
from .suggest import suggest

__all__ = [
    "analyze",
    "journal",
    "mood",
    "stats",
    "suggest",
    "insights",
]
