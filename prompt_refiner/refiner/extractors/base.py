"""
Base Extractor - Abstract base class for refined prompt field extractors.

All extractors inherit from this class and implement the extract method
for their section of the document (intent, requirements, constraints, ...).
Extractors are pure: the same text and tables always give the same
result, and a missing match is a normal outcome rather than an error.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Sequence
import re

from ..patterns import DEFAULT_TABLES, PatternTables, word_pattern


class BaseExtractor(ABC):
    """
    Abstract base class for field extractors.

    Each extractor is responsible for one section of the refined
    document and reads its patterns and vocabularies from ``tables``.
    """

    def __init__(self, tables: Optional[PatternTables] = None):
        """
        Initialize the extractor.

        Args:
            tables: Pattern tables to use (defaults to DEFAULT_TABLES)
        """
        self.tables = tables or DEFAULT_TABLES

    @property
    @abstractmethod
    def component_name(self) -> str:
        """Name of the document section this extractor produces."""
        pass

    @abstractmethod
    def extract(self, text: str, **kwargs) -> Any:
        """
        Extract a document section from combined text.

        Args:
            text: Combined, already gate-checked input text
            **kwargs: Additional inputs (e.g., image data)

        Returns:
            Extracted section - type depends on implementation
        """
        pass

    def _first_match(self, text: str, patterns: Sequence[re.Pattern]) -> Optional[re.Match]:
        """Return the match of the first pattern that matches anywhere."""
        for pattern in patterns:
            match = pattern.search(text)
            if match:
                return match
        return None

    def _all_matches(self, text: str, patterns: Sequence[re.Pattern]) -> Iterator[re.Match]:
        """Yield every match of every pattern, pattern by pattern."""
        for pattern in patterns:
            yield from pattern.finditer(text)

    def _has_word(self, text: str, word: str) -> bool:
        """Case-insensitive whole-word test."""
        return word_pattern(word).search(text) is not None
