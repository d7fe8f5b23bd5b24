"""Tokenizing, sentence splitting and term search helpers."""

import re
from functools import lru_cache
from typing import Iterable

_TOKEN_RE = re.compile(r"[a-z]+(?:['-][a-z]+)*")
_SENTENCE_RE = re.compile(r"[.!?]+")
_APOSTROPHES = str.maketrans({"’": "'", "‘": "'"})


def normalize(text: str) -> str:
    """Lower-case text and fold curly apostrophes."""
    return (text or "").translate(_APOSTROPHES).lower()


def tokenize(text: str) -> list[str]:
    """Lower-case word tokens (letters, inner apostrophes and hyphens)."""
    return _TOKEN_RE.findall(normalize(text))


def split_sentences(text: str) -> list[str]:
    """Split on sentence punctuation, dropping blank pieces."""
    return [s for s in _SENTENCE_RE.split(text or "") if s.strip()]


def count_words(text: str) -> int:
    return len((text or "").split())


@lru_cache(maxsize=4096)
def _term_pattern(term: str) -> re.Pattern:
    words = [re.escape(w) for w in term.split()]
    return re.compile(r"\b" + r"\s+".join(words) + r"\b")


def find_term(text: str, term: str) -> list[int]:
    """Start offsets of whole-word matches of ``term`` in already-normalized text."""
    return [m.start() for m in _term_pattern(term).finditer(text)]


def contains_term(text: str, term: str) -> bool:
    return _term_pattern(term).search(text) is not None


def nearby_terms(text: str, index: int, length: int, radius: int, terms: Iterable[str]) -> list[str]:
    """Terms found within ``radius`` characters either side of ``text[index:index + length]``.

    Plain substring test on the surrounding windows; the match itself is excluded.
    """
    before = text[max(0, index - radius):index]
    after = text[index + length:index + length + radius]
    return [t for t in terms if t in before or t in after]


def preceded_by(text: str, index: int, words: Iterable[str], gap: int = 1) -> bool:
    """True if one of ``words`` appears before ``index`` with at most ``gap`` words between."""
    head = text[:index]
    return any(_preceding_pattern(word, gap).search(head) for word in words)


@lru_cache(maxsize=1024)
def _preceding_pattern(word: str, gap: int) -> re.Pattern:
    return re.compile(r"\b" + re.escape(word) + r"\s+(?:\S+\s+){0,%d}$" % gap)


def has_nearby_term(text: str, index: int, length: int, radius: int, terms: Iterable[str]) -> bool:
    return bool(nearby_terms(text, index, length, radius, terms))
