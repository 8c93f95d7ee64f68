"""Unit tests for the scoring engine."""

import pytest
from prompt_refiner.core.config import ScoringConfig
from prompt_refiner.refiner.models import (
    UNSPECIFIED_PURPOSE,
    CoreIntent,
    Deliverables,
    Feature,
    FunctionalRequirements,
    Output,
    TechnicalConstraints,
)
from prompt_refiner.refiner.scoring import ScoringEngine


LONG_DESCRIPTION = "A delivery tracking app where drivers share their live location with customers."


class TestScoringEngine:
    """Tests for ScoringEngine."""

    @pytest.fixture
    def engine(self):
        return ScoringEngine()

    def test_complete_document(self, engine):
        result = engine.score(
            CoreIntent(purpose="build a delivery app", description=LONG_DESCRIPTION),
            FunctionalRequirements(primary_features=[Feature(feature="live map")]),
            TechnicalConstraints(platform="mobile"),
            Deliverables(outputs=[Output(type="code", description="Deliver code")]),
        )
        assert result.completeness_score == 1.0
        assert result.confidence_score == pytest.approx(0.75)
        assert result.missing_information == []

    def test_empty_document(self, engine):
        result = engine.score(
            CoreIntent(purpose=UNSPECIFIED_PURPOSE, description="short"),
            FunctionalRequirements(),
            TechnicalConstraints(),
            Deliverables(),
        )
        assert result.confidence_score == 0.5
        assert result.completeness_score == 0.5
        assert result.missing_information == [
            "Core purpose",
            "Detailed description",
            "Primary features",
            "Technical specifications",
            "Expected deliverables",
        ]

    def test_partial_document(self, engine):
        result = engine.score(
            CoreIntent(purpose="build a delivery app", description="short"),
            FunctionalRequirements(),
            TechnicalConstraints(technologies=["react"]),
            Deliverables(),
        )
        assert result.completeness_score == pytest.approx(0.8)
        assert result.confidence_score == pytest.approx(0.65)
        assert result.missing_information == [
            "Detailed description",
            "Primary features",
            "Expected deliverables",
        ]

    def test_description_must_exceed_threshold(self, engine):
        result = engine.score(
            CoreIntent(purpose="x", description="d" * 50),
            FunctionalRequirements(),
            TechnicalConstraints(),
            Deliverables(),
        )
        assert "Detailed description" in result.missing_information

    def test_scores_are_clamped(self):
        engine = ScoringEngine(ScoringConfig(base_confidence=0.9, base_completeness=0.9))
        result = engine.score(
            CoreIntent(purpose="build a delivery app", description=LONG_DESCRIPTION),
            FunctionalRequirements(primary_features=[Feature(feature="live map")]),
            TechnicalConstraints(platform="mobile"),
            Deliverables(outputs=[Output(type="code", description="Deliver code")]),
        )
        assert result.confidence_score == 1.0
        assert result.completeness_score == 1.0

    def test_base_scores_validated(self):
        with pytest.raises(ValueError):
            ScoringConfig(base_confidence=1.5)
        with pytest.raises(ValueError):
            ScoringConfig(base_completeness=-0.1)
