"""
Deliverables Extractor - Extract expected outputs and milestones.
"""

from typing import List

from .base import BaseExtractor
from ..models import Complexity, Deliverables, Milestone, Output, OutputType
from ...utils.logger import get_logger

logger = get_logger(__name__)

MILESTONE_NAME_MAX_LENGTH = 100
MILESTONE_DESCRIPTION_MAX_LENGTH = 200


class DeliverablesExtractor(BaseExtractor):
    """
    Extractor for deliverables.

    One Output is appended per (type, keyword) pair whose keyword occurs
    as a whole word, so a type with several matching synonyms appears
    several times. "prototype" is a synonym of both design and prototype.
    """

    @property
    def component_name(self) -> str:
        return "deliverables"

    def extract(self, text: str, **kwargs) -> Deliverables:
        """
        Extract deliverables from combined text.

        Args:
            text: Combined input text

        Returns:
            Deliverables object
        """
        deliverables = Deliverables(
            outputs=self._extract_outputs(text),
            milestones=self._extract_milestones(text),
        )
        logger.debug(
            f"Found {len(deliverables.outputs)} outputs, {len(deliverables.milestones)} milestones"
        )
        return deliverables

    def _extract_outputs(self, text: str) -> List[Output]:
        outputs = []
        for output_type, keywords in self.tables.output_keywords:
            for keyword in keywords:
                if self._has_word(text, keyword):
                    outputs.append(Output(
                        type=OutputType.from_string(output_type, OutputType.OTHER),
                        description=f"Deliver {output_type}",
                        format="standard",
                    ))
        return outputs

    def _extract_milestones(self, text: str) -> List[Milestone]:
        return [
            Milestone(
                name=match.group(0)[:MILESTONE_NAME_MAX_LENGTH],
                description=match.group(1).strip()[:MILESTONE_DESCRIPTION_MAX_LENGTH],
                estimated_complexity=Complexity.MEDIUM,
            )
            for match in self._all_matches(text, self.tables.milestone_patterns)
        ]
