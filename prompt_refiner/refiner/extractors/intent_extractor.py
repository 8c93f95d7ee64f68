"""
Intent Extractor - Extract the core intent of a request.

Extracts:
- Purpose (what should be built)
- Description (the first substantial sentences)
- Target audience
"""

from typing import Optional

from .base import BaseExtractor
from ..models import CoreIntent, UNSPECIFIED_PURPOSE
from ...utils.text import first_sentence, split_sentences
from ...utils.logger import get_logger

logger = get_logger(__name__)

PURPOSE_FALLBACK_LENGTH = 100
DESCRIPTION_SENTENCES = 3
DESCRIPTION_MAX_LENGTH = 500
DESCRIPTION_FALLBACK_LENGTH = 300
MIN_SENTENCE_LENGTH = 10


class IntentExtractor(BaseExtractor):
    """
    Extractor for the core intent.

    Purpose patterns are tried in order and the first one that matches
    anywhere in the text wins; later patterns are not consulted.
    """

    @property
    def component_name(self) -> str:
        return "coreIntent"

    def extract(self, text: str, **kwargs) -> CoreIntent:
        """
        Extract core intent from combined text.

        Args:
            text: Combined input text

        Returns:
            CoreIntent object
        """
        purpose = self._extract_purpose(text)
        intent = CoreIntent(
            purpose=purpose,
            description=self._extract_description(text),
            target_audience=self._extract_audience(text),
        )
        logger.debug(f"Purpose: {intent.purpose!r}")
        return intent

    def _extract_purpose(self, text: str) -> str:
        match = self._first_match(text, self.tables.purpose_patterns)
        if match:
            purpose = match.group(1).strip()
            if purpose:
                return purpose

        return first_sentence(text)[:PURPOSE_FALLBACK_LENGTH].strip() or UNSPECIFIED_PURPOSE

    def _extract_description(self, text: str) -> str:
        """Join the first few substantial sentences."""
        sentences = [s for s in split_sentences(text) if len(s.strip()) > MIN_SENTENCE_LENGTH]
        description = '. '.join(sentences[:DESCRIPTION_SENTENCES])[:DESCRIPTION_MAX_LENGTH].strip()
        return description or text[:DESCRIPTION_FALLBACK_LENGTH]

    def _extract_audience(self, text: str) -> Optional[str]:
        match = self._first_match(text, self.tables.audience_patterns)
        if match:
            return match.group(1).strip()
        return None
