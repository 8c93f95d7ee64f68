"""
Relevance Gate - Reject combined text that is not worth refining.

Runs once per request, before any extractor. Extractors assume the
text has passed this gate and never reject anything themselves.
"""

import re
from typing import Iterable, Optional

from ..core.config import GateConfig
from ..errors import InvalidInput, IrrelevantInput
from ..utils.logger import get_logger

logger = get_logger(__name__)

NO_LETTERS_PATTERN = re.compile(r'^[^a-zA-Z]*$')


def build_placeholder_pattern(
    tokens: Iterable[str],
    whole_word: bool = False,
) -> Optional[re.Pattern]:
    """
    Pattern matching text that begins with a placeholder token.

    A plain prefix match by default, so "Testing ..." counts as starting
    with "test". With ``whole_word`` the token must end at a word boundary.
    """
    alternation = '|'.join(re.escape(t) for t in tokens if t)
    if not alternation:
        return None
    boundary = r'\b' if whole_word else ''
    return re.compile(rf'^(?:{alternation}){boundary}', re.IGNORECASE)


class RelevanceGate:
    """
    Pass/reject decision over combined text.

    Junk heuristics are checked before length, so a short placeholder
    such as "hi" raises IrrelevantInput (itself a kind of InvalidInput).
    """

    def __init__(self, config: Optional[GateConfig] = None):
        self.config = config or GateConfig()
        self._placeholder_pattern = build_placeholder_pattern(
            self.config.placeholder_tokens,
            whole_word=self.config.whole_word_placeholders,
        )

    def check(self, text: Optional[str]) -> str:
        """
        Validate combined text.

        Args:
            text: Combined input text

        Returns:
            The text, unchanged

        Raises:
            IrrelevantInput: Text has no letters or starts with a placeholder token
            InvalidInput: Trimmed text is shorter than the configured minimum
        """
        trimmed = (text or "").strip()

        if self.is_irrelevant(trimmed):
            logger.info("Rejected irrelevant input")
            raise IrrelevantInput()

        if len(trimmed) < self.config.min_length:
            logger.info(f"Rejected short input ({len(trimmed)} chars)")
            raise InvalidInput()

        return text

    def is_irrelevant(self, trimmed: str) -> bool:
        """Whether trimmed text matches one of the junk heuristics."""
        if NO_LETTERS_PATTERN.match(trimmed):
            return True
        return bool(self._placeholder_pattern and self._placeholder_pattern.match(trimmed))
