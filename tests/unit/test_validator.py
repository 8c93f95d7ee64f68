"""Unit tests for the document validator."""

import pytest
from prompt_refiner.refiner.models import CoreIntent, RefinedPrompt
from prompt_refiner.validator import (
    DocumentValidator,
    ValidationSeverity,
    validate_document,
)


def codes(result):
    return [issue.code for issue in result.issues]


class TestDocumentValidator:
    """Tests for DocumentValidator."""

    @pytest.fixture
    def validator(self):
        return DocumentValidator()

    @pytest.fixture
    def document(self):
        prompt = RefinedPrompt(
            core_intent=CoreIntent(purpose="build a todo app", description="A todo app for teams"),
        )
        return prompt.to_dict()

    def test_valid_document(self, validator, document):
        result = validator.validate(document)
        assert result.valid
        assert result.issues == []

    def test_not_a_mapping(self, validator):
        result = validator.validate(["coreIntent"])
        assert not result.valid
        assert codes(result) == ["INVALID_DOCUMENT"]

    def test_missing_section(self, validator, document):
        del document["metadata"]
        result = validator.validate(document)
        assert not result.valid
        assert result.errors[0].code == "MISSING_SECTION"
        assert result.errors[0].path == "metadata"

    def test_empty_purpose(self, validator, document):
        document["coreIntent"]["purpose"] = "   "
        assert "EMPTY_PURPOSE" in codes(validator.validate(document))

    def test_description_too_long(self, validator, document):
        document["coreIntent"]["description"] = "x" * 501
        assert "DESCRIPTION_TOO_LONG" in codes(validator.validate(document))

    @pytest.mark.parametrize("score", [-0.1, 1.01, "high", None])
    def test_score_out_of_range(self, validator, document, score):
        document["metadata"]["confidenceScore"] = score
        result = validator.validate(document)
        assert not result.valid
        assert result.errors[0].path == "metadata.confidenceScore"

    def test_duplicate_features(self, validator, document):
        document["functionalRequirements"]["primaryFeatures"] = [
            {"feature": "Dark mode", "description": "", "priority": "medium"},
            {"feature": " dark mode ", "description": "", "priority": "low"},
        ]
        result = validator.validate(document)
        assert codes(result) == ["DUPLICATE_ENTRY"]
        assert result.errors[0].path == "functionalRequirements.primaryFeatures[1]"

    def test_duplicate_interactions(self, validator, document):
        document["functionalRequirements"]["userInteractions"] = ["share photos", "Share Photos"]
        assert codes(validator.validate(document)) == ["DUPLICATE_ENTRY"]

    def test_invalid_enums(self, validator, document):
        document["technicalConstraints"]["platform"] = "amiga"
        document["deliverables"]["outputs"] = [{"type": "video", "description": "", "format": "standard"}]
        document["functionalRequirements"]["primaryFeatures"] = [
            {"feature": "search", "description": "", "priority": "urgent"},
        ]
        result = validator.validate(document)
        assert {"INVALID_PLATFORM", "INVALID_OUTPUT_TYPE", "INVALID_PRIORITY"} <= set(codes(result))

    def test_entry_too_long(self, validator, document):
        document["technicalConstraints"]["limitations"] = ["x" * 151]
        result = validator.validate(document)
        assert codes(result) == ["ENTRY_TOO_LONG"]
        assert result.errors[0].path == "technicalConstraints.limitations[0]"

    def test_unknown_design_style_is_warning(self, validator, document):
        document["visualElements"]["designStyle"] = "brutalist"
        result = validator.validate(document)
        assert result.valid
        assert result.warnings[0].severity == ValidationSeverity.WARNING

    def test_strict_mode_fails_on_warnings(self, document):
        document["visualElements"]["layout"] = "masonry"
        assert not DocumentValidator(strict_mode=True).validate(document).valid

    def test_result_to_dict(self, validator, document):
        document["coreIntent"]["purpose"] = ""
        data = validator.validate(document).to_dict()
        assert data["valid"] is False
        assert data["error_count"] == 1
        assert data["issues"][0]["severity"] == "error"


class TestValidateDocument:
    """Tests for validate_document."""

    def test_accepts_model(self):
        prompt = RefinedPrompt(core_intent=CoreIntent(purpose="build a todo app", description=""))
        assert validate_document(prompt).valid

    def test_accepts_dict(self):
        assert not validate_document({}).valid
