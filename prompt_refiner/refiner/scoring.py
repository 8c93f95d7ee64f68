"""
Scoring Engine - Confidence and completeness of a refined prompt.

Scores start from the configured base values and each completeness
signal adds a fixed amount. No term is negative, so only the upper
bound of 1.0 needs clamping.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .models import CoreIntent, Deliverables, FunctionalRequirements, TechnicalConstraints
from ..core.config import ScoringConfig
from ..utils.logger import get_logger

logger = get_logger(__name__)

MAX_SCORE = 1.0


@dataclass
class ScoreResult:
    """Result of scoring a refined prompt."""
    confidence_score: float
    completeness_score: float
    missing_information: List[str] = field(default_factory=list)


class ScoringEngine:
    """
    Deterministic additive scorer.

    | Signal                               | completeness | confidence | missing label              |
    |--------------------------------------|--------------|------------|----------------------------|
    | purpose present, not the placeholder | +0.20        | +0.10      | Core purpose               |
    | description longer than threshold    | +0.10        |            | Detailed description       |
    | at least one primary feature         | +0.15        | +0.10      | Primary features           |
    | platform or technologies present     | +0.10        | +0.05      | Technical specifications   |
    | at least one output                  | +0.10        |            | Expected deliverables      |
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def score(
        self,
        core_intent: CoreIntent,
        functional: FunctionalRequirements,
        technical: TechnicalConstraints,
        deliverables: Deliverables,
    ) -> ScoreResult:
        """
        Score extractor outputs.

        Args:
            core_intent: Extracted core intent
            functional: Extracted functional requirements
            technical: Extracted technical constraints
            deliverables: Extracted deliverables

        Returns:
            ScoreResult with both scores and the missing-information list
        """
        confidence = self.config.base_confidence
        completeness = self.config.base_completeness
        missing = []

        if core_intent.has_purpose:
            completeness += 0.2
            confidence += 0.1
        else:
            missing.append("Core purpose")

        if core_intent.description and len(core_intent.description) > self.config.min_description_length:
            completeness += 0.1
        else:
            missing.append("Detailed description")

        if functional.primary_features:
            completeness += 0.15
            confidence += 0.1
        else:
            missing.append("Primary features")

        if technical.is_specified:
            completeness += 0.1
            confidence += 0.05
        else:
            missing.append("Technical specifications")

        if deliverables.outputs:
            completeness += 0.1
        else:
            missing.append("Expected deliverables")

        result = ScoreResult(
            confidence_score=round(min(MAX_SCORE, confidence), 2),
            completeness_score=round(min(MAX_SCORE, completeness), 2),
            missing_information=missing,
        )
        logger.debug(
            f"Scores: confidence={result.confidence_score}, "
            f"completeness={result.completeness_score}, missing={missing}"
        )
        return result
