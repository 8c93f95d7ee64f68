"""
Functional Extractor - Extract functional requirements.

Extracts:
- Primary features (with a keyword-based priority)
- User interactions
- Expected behaviors

Each list is built from three independent passes over the whole text
that collect every match, not just the first.
"""

from typing import List

from .base import BaseExtractor
from ..models import Feature, FunctionalRequirements, Priority
from ..patterns import DEFAULT_TABLES, PatternTables
from ...utils.text import OrderedDeduper
from ...utils.logger import get_logger

logger = get_logger(__name__)

FEATURE_MIN_LENGTH = 5
FEATURE_MAX_LENGTH = 200
INTERACTION_MIN_LENGTH = 3
INTERACTION_MAX_LENGTH = 150
BEHAVIOR_MIN_LENGTH = 10
BEHAVIOR_MAX_LENGTH = 200


def determine_priority(text: str, tables: PatternTables = DEFAULT_TABLES) -> Priority:
    """
    Classify a feature's priority from keywords in its text.

    High-priority keywords take precedence over low-priority ones.

    Args:
        text: Feature text
        tables: Pattern tables holding the keyword lists

    Returns:
        Priority.HIGH, Priority.LOW or Priority.MEDIUM
    """
    text_lower = text.lower()

    if any(kw in text_lower for kw in tables.high_priority_keywords):
        return Priority.HIGH
    elif any(kw in text_lower for kw in tables.low_priority_keywords):
        return Priority.LOW
    return Priority.MEDIUM


class FunctionalExtractor(BaseExtractor):
    """
    Extractor for features, user interactions and expected behaviors.

    Features and interactions are deduplicated on their lowercased,
    trimmed text across all pattern families; the first occurrence wins
    and text order is preserved. Behaviors are not deduplicated.
    """

    @property
    def component_name(self) -> str:
        return "functionalRequirements"

    def extract(self, text: str, **kwargs) -> FunctionalRequirements:
        """
        Extract functional requirements from combined text.

        Args:
            text: Combined input text

        Returns:
            FunctionalRequirements object
        """
        requirements = FunctionalRequirements(
            primary_features=self._extract_features(text),
            user_interactions=self._extract_interactions(text),
            expected_behaviors=self._extract_behaviors(text),
        )
        logger.debug(
            f"Found {len(requirements.primary_features)} features, "
            f"{len(requirements.user_interactions)} interactions, "
            f"{len(requirements.expected_behaviors)} behaviors"
        )
        return requirements

    def _extract_features(self, text: str) -> List[Feature]:
        features = []
        seen = OrderedDeduper()

        for match in self._all_matches(text, self.tables.feature_patterns):
            candidate = match.group(1).strip()
            feature = candidate[:FEATURE_MAX_LENGTH]
            if len(candidate) > FEATURE_MIN_LENGTH and seen.add(feature):
                features.append(Feature(
                    feature=feature,
                    description="",
                    priority=determine_priority(candidate, self.tables),
                ))

        return features

    def _extract_interactions(self, text: str) -> List[str]:
        interactions = []
        seen = OrderedDeduper()

        for match in self._all_matches(text, self.tables.interaction_patterns):
            candidate = match.group(1).strip()
            interaction = candidate[:INTERACTION_MAX_LENGTH]
            if len(candidate) > INTERACTION_MIN_LENGTH and seen.add(interaction):
                interactions.append(interaction)

        return interactions

    def _extract_behaviors(self, text: str) -> List[str]:
        behaviors = []

        # The full matched span is kept, not just the captured clause
        for match in self._all_matches(text, self.tables.behavior_patterns):
            behavior = match.group(0).strip()
            if len(behavior) > BEHAVIOR_MIN_LENGTH:
                behaviors.append(behavior[:BEHAVIOR_MAX_LENGTH])

        return behaviors
