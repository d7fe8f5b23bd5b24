"""Life-theme detection over recent journal entries."""

import re
from typing import Sequence

from journal.models import JournalEntry
from shared_types import Theme

# (content regex, keyword set) per theme, checked in Theme order
THEME_RULES: dict[Theme, tuple[re.Pattern, frozenset[str]]] = {
    Theme.WORK: (
        re.compile(r"\b(work|job|career|boss|colleague|office|meeting|project|deadline|promotion)\b"),
        frozenset({"work", "job", "career", "office", "meeting"}),
    ),
    Theme.RELATIONSHIP: (
        re.compile(r"\b(relationship|partner|spouse|boyfriend|girlfriend|marriage|love|date|romantic)\b"),
        frozenset({"love", "relationship", "partner", "romantic"}),
    ),
    Theme.FAMILY: (
        re.compile(r"\b(family|mother|father|parent|child|sibling|brother|sister|mom|dad)\b"),
        frozenset({"family", "mother", "father", "parent", "child"}),
    ),
    Theme.ACHIEVEMENT: (
        re.compile(r"\b(achievement|success|accomplish|goal|win|victory|proud|celebration)\b"),
        frozenset({"success", "achievement", "goal", "victory", "proud"}),
    ),
    Theme.LOSS: (
        re.compile(r"\b(loss|death|grief|goodbye|ended|lost|missing|departed)\b"),
        frozenset({"loss", "grief", "death", "goodbye", "missing"}),
    ),
    Theme.OPPORTUNITY: (
        re.compile(r"\b(opportunity|future|new|beginning|start|chance|possibility)\b"),
        frozenset({"opportunity", "future", "new", "beginning", "chance"}),
    ),
    Theme.NATURE: (
        re.compile(r"\b(nature|outdoors|garden|trees|flowers|beach|mountains|hiking|walk)\b"),
        frozenset({"nature", "outdoors", "garden", "trees", "beach"}),
    ),
    Theme.HEALTH: (
        re.compile(r"\b(health|exercise|fitness|diet|medical|doctor|therapy|wellness)\b"),
        frozenset({"health", "exercise", "fitness", "medical", "wellness"}),
    ),
}


def detect_themes(entries: Sequence[JournalEntry], window: int = 5) -> list[Theme]:
    """Themes present in the last ``window`` entries' text or keywords."""
    if window <= 0:
        return []
    recent = list(entries[-window:])
    if not recent:
        return []

    content = " ".join(e.content.lower() for e in recent)
    keywords = {k for e in recent for k in e.keywords}

    return [
        theme
        for theme, (pattern, theme_keywords) in THEME_RULES.items()
        if pattern.search(content) or keywords & theme_keywords
    ]
