"""
Technical Extractor - Extract technical constraints.

Extracts:
- Target platform (single value)
- Known technologies
- Performance requirement
- Limitations
"""

from typing import List, Optional

from .base import BaseExtractor
from ..models import Platform, TechnicalConstraints
from ...utils.logger import get_logger

logger = get_logger(__name__)

LIMITATION_MAX_LENGTH = 150


class TechnicalExtractor(BaseExtractor):
    """
    Extractor for technical constraints.

    Platform and performance keep the LAST match (by vocabulary order and
    by pattern order respectively), unlike the core intent purpose which
    keeps the first.
    """

    @property
    def component_name(self) -> str:
        return "technicalConstraints"

    def extract(self, text: str, **kwargs) -> TechnicalConstraints:
        """
        Extract technical constraints from combined text.

        Args:
            text: Combined input text

        Returns:
            TechnicalConstraints object
        """
        constraints = TechnicalConstraints(
            platform=self._extract_platform(text),
            technologies=self._extract_technologies(text),
            performance=self._extract_performance(text),
            compatibility=[],
            limitations=self._extract_limitations(text),
        )
        logger.debug(
            f"Platform: {constraints.platform}, technologies: {list(constraints.technologies)}"
        )
        return constraints

    def _extract_platform(self, text: str) -> Optional[Platform]:
        platform = None
        for name in self.tables.platforms:
            if self._has_word(text, name):
                platform = Platform.from_string(name)
        return platform

    def _extract_technologies(self, text: str) -> List[str]:
        return [tech for tech in self.tables.technologies if self._has_word(text, tech)]

    def _extract_performance(self, text: str) -> Optional[str]:
        performance = None
        for pattern in self.tables.performance_patterns:
            match = pattern.search(text)
            if match:
                performance = match.group(1).strip()
        return performance

    def _extract_limitations(self, text: str) -> List[str]:
        return [
            match.group(1).strip()[:LIMITATION_MAX_LENGTH]
            for match in self._all_matches(text, self.tables.limitation_patterns)
        ]
