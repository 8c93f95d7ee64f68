"""
Text helpers shared by the extractors and the document models.

Provides truncation, sentence splitting, case conversion for the
camelCase document shape, and an insertion-ordered deduplicator.
"""

import re
import uuid
from typing import Iterable, List, Optional, Set


SENTENCE_TERMINATORS = re.compile(r'[.!?]')
SENTENCE_BREAKS = re.compile(r'[.!?]+')


def generate_request_id() -> str:
    """
    Generate a short identifier for one refinement request.

    Returns:
        12-character hex string
    """
    return uuid.uuid4().hex[:12]


def truncate(text: str, limit: int) -> str:
    """Cut text to at most ``limit`` characters."""
    return text[:limit]


def normalize_key(text: str) -> str:
    """Dedup key for free-text candidates: trimmed and lowercased."""
    return text.strip().lower()


def first_sentence(text: str) -> str:
    """Text up to the first sentence terminator (whole text if none)."""
    return SENTENCE_TERMINATORS.split(text, maxsplit=1)[0]


def split_sentences(text: str) -> List[str]:
    """
    Split text on runs of sentence terminators.

    Fragments are returned untrimmed, in order, including empty ones.
    """
    return SENTENCE_BREAKS.split(text)


def to_camel_case(text: str) -> str:
    """
    Convert snake_case to camelCase.

    Args:
        text: snake_case identifier (e.g. "target_audience")

    Returns:
        camelCase identifier (e.g. "targetAudience")
    """
    if not text:
        return ""

    head, *rest = text.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class OrderedDeduper:
    """
    Insertion-ordered set of normalized keys.

    Tracks which candidates have been seen (by ``normalize_key``) so
    callers keep the first occurrence and preserve text order.
    """

    def __init__(self, seen: Optional[Iterable[str]] = None):
        self._seen: Set[str] = set()
        self._order: List[str] = []
        for item in seen or ():
            self.add(item)

    def add(self, text: str) -> bool:
        """Record ``text``; return False if an equal key was already seen."""
        key = normalize_key(text)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._order.append(key)
        return True

    def __contains__(self, text: str) -> bool:
        return normalize_key(text) in self._seen

    def __len__(self) -> int:
        return len(self._order)

    @property
    def keys(self) -> List[str]:
        return list(self._order)
