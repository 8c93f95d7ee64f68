"""
Document Validator - Validates refined prompt documents.

Works on the camelCase dictionary form, so it can check both freshly
refined documents and documents read back from storage.

Performs multiple validation passes:
1. Schema validation - Required sections and field types
2. Value validation - Enum membership, score ranges, length caps
3. Uniqueness validation - Feature and interaction deduplication
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from ..refiner.models import (
    Complexity,
    DesignStyle,
    Layout,
    OutputType,
    Platform,
    Priority,
    SourceType,
)
from ..utils.text import normalize_key
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    ERROR = "error"       # Document breaks an invariant
    WARNING = "warning"   # Document is usable but suspicious
    INFO = "info"         # Informational


@dataclass
class ValidationIssue:
    """A single validation issue."""
    code: str
    message: str
    severity: ValidationSeverity
    path: str = ""  # Dotted path to the offending field

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "path": self.path,
        }


@dataclass
class ValidationResult:
    """Result of validation process."""
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "issues": [i.to_dict() for i in self.issues],
        }


def _values(enum_cls) -> set:
    return {member.value for member in enum_cls}


class DocumentValidator:
    """
    Validator for refined prompt documents.

    Validates:
    - Required sections present
    - Purpose non-empty, description within its cap
    - Scores within [0, 1]
    - Enum fields hold known values
    - Feature and interaction text unique (case-insensitive)
    """

    REQUIRED_SECTIONS = [
        "coreIntent",
        "functionalRequirements",
        "technicalConstraints",
        "deliverables",
        "visualElements",
        "metadata",
        "sourceInputs",
    ]

    # Maximum lengths of list entries, by section and field
    LENGTH_CAPS = {
        ("functionalRequirements", "userInteractions"): 150,
        ("functionalRequirements", "expectedBehaviors"): 200,
        ("technicalConstraints", "limitations"): 150,
    }

    DESCRIPTION_MAX_LENGTH = 500
    FEATURE_MAX_LENGTH = 200
    TEXT_CONTENT_MAX_LENGTH = 1000

    def __init__(self, strict_mode: bool = False):
        """
        Initialize validator.

        Args:
            strict_mode: If True, warnings are treated as errors
        """
        self.strict_mode = strict_mode

    def validate(self, document: Dict[str, Any]) -> ValidationResult:
        """
        Validate a refined prompt document.

        Args:
            document: Document in camelCase dictionary form

        Returns:
            ValidationResult with all issues found
        """
        issues: List[ValidationIssue] = []

        issues.extend(self._validate_schema(document))
        if not any(i.severity == ValidationSeverity.ERROR for i in issues):
            issues.extend(self._validate_values(document))
            issues.extend(self._validate_uniqueness(document))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        has_warnings = any(i.severity == ValidationSeverity.WARNING for i in issues)
        valid = not has_errors and not (self.strict_mode and has_warnings)

        logger.debug(f"Validation complete: valid={valid}, issues={len(issues)}")
        return ValidationResult(valid=valid, issues=issues)

    def _validate_schema(self, document: Dict[str, Any]) -> List[ValidationIssue]:
        issues = []

        if not isinstance(document, dict):
            return [ValidationIssue(
                code="INVALID_DOCUMENT",
                message="Document must be a JSON object",
                severity=ValidationSeverity.ERROR,
            )]

        for section in self.REQUIRED_SECTIONS:
            if not isinstance(document.get(section), dict):
                issues.append(ValidationIssue(
                    code="MISSING_SECTION",
                    message=f"Missing or invalid section: {section}",
                    severity=ValidationSeverity.ERROR,
                    path=section,
                ))

        return issues

    def _validate_values(self, document: Dict[str, Any]) -> List[ValidationIssue]:
        issues = []

        intent = document["coreIntent"]
        if not isinstance(intent.get("purpose"), str) or not intent["purpose"].strip():
            issues.append(self._error("EMPTY_PURPOSE", "Purpose must be non-empty", "coreIntent.purpose"))
        description = intent.get("description") or ""
        if len(description) > self.DESCRIPTION_MAX_LENGTH:
            issues.append(self._error(
                "DESCRIPTION_TOO_LONG",
                f"Description exceeds {self.DESCRIPTION_MAX_LENGTH} characters",
                "coreIntent.description",
            ))

        functional = document["functionalRequirements"]
        for i, feature in enumerate(functional.get("primaryFeatures", [])):
            path = f"functionalRequirements.primaryFeatures[{i}]"
            if len(feature.get("feature", "")) > self.FEATURE_MAX_LENGTH:
                issues.append(self._error("FEATURE_TOO_LONG", "Feature text too long", f"{path}.feature"))
            if feature.get("priority") not in _values(Priority):
                issues.append(self._error("INVALID_PRIORITY", f"Unknown priority: {feature.get('priority')}", f"{path}.priority"))

        for (section, name), cap in self.LENGTH_CAPS.items():
            for i, entry in enumerate(document[section].get(name, [])):
                if len(entry) > cap:
                    issues.append(self._error(
                        "ENTRY_TOO_LONG",
                        f"Entry exceeds {cap} characters",
                        f"{section}.{name}[{i}]",
                    ))

        technical = document["technicalConstraints"]
        platform = technical.get("platform")
        if platform is not None and platform not in _values(Platform):
            issues.append(self._error("INVALID_PLATFORM", f"Unknown platform: {platform}", "technicalConstraints.platform"))

        deliverables = document["deliverables"]
        for i, output in enumerate(deliverables.get("outputs", [])):
            if output.get("type") not in _values(OutputType):
                issues.append(self._error("INVALID_OUTPUT_TYPE", f"Unknown output type: {output.get('type')}", f"deliverables.outputs[{i}].type"))
        for i, milestone in enumerate(deliverables.get("milestones", [])):
            if milestone.get("estimatedComplexity") not in _values(Complexity):
                issues.append(self._error("INVALID_COMPLEXITY", "Unknown complexity", f"deliverables.milestones[{i}].estimatedComplexity"))

        visual = document["visualElements"]
        if visual.get("designStyle") is not None and visual["designStyle"] not in _values(DesignStyle):
            issues.append(self._warning("UNKNOWN_DESIGN_STYLE", f"Unknown design style: {visual['designStyle']}", "visualElements.designStyle"))
        if visual.get("layout") is not None and visual["layout"] not in _values(Layout):
            issues.append(self._warning("UNKNOWN_LAYOUT", f"Unknown layout: {visual['layout']}", "visualElements.layout"))

        metadata = document["metadata"]
        for name in ("confidenceScore", "completenessScore"):
            score = metadata.get(name)
            if not isinstance(score, (int, float)) or not 0.0 <= score <= 1.0:
                issues.append(self._error("SCORE_OUT_OF_RANGE", f"{name} must be within [0, 1], got {score}", f"metadata.{name}"))
        for source in metadata.get("sourceTypes", []):
            if source not in _values(SourceType):
                issues.append(self._error("INVALID_SOURCE_TYPE", f"Unknown source type: {source}", "metadata.sourceTypes"))

        text_content = document["sourceInputs"].get("textContent") or ""
        if len(text_content) > self.TEXT_CONTENT_MAX_LENGTH:
            issues.append(self._warning("TEXT_CONTENT_TOO_LONG", "Stored text content exceeds 1000 characters", "sourceInputs.textContent"))

        return issues

    def _validate_uniqueness(self, document: Dict[str, Any]) -> List[ValidationIssue]:
        issues = []
        functional = document["functionalRequirements"]

        checks = [
            ("primaryFeatures", [f.get("feature", "") for f in functional.get("primaryFeatures", [])]),
            ("userInteractions", list(functional.get("userInteractions", []))),
        ]
        for name, entries in checks:
            seen = set()
            for i, entry in enumerate(entries):
                key = normalize_key(entry)
                if key in seen:
                    issues.append(self._error(
                        "DUPLICATE_ENTRY",
                        f"Duplicate entry: {entry!r}",
                        f"functionalRequirements.{name}[{i}]",
                    ))
                seen.add(key)

        return issues

    def _error(self, code: str, message: str, path: str) -> ValidationIssue:
        return ValidationIssue(code=code, message=message, severity=ValidationSeverity.ERROR, path=path)

    def _warning(self, code: str, message: str, path: str) -> ValidationIssue:
        return ValidationIssue(code=code, message=message, severity=ValidationSeverity.WARNING, path=path)


def validate_document(document, strict_mode: bool = False) -> ValidationResult:
    """
    Convenience function to validate a RefinedPrompt or its dictionary form.

    Args:
        document: RefinedPrompt instance or camelCase dictionary
        strict_mode: If True, treat warnings as errors

    Returns:
        ValidationResult
    """
    data: Optional[Dict[str, Any]] = document.to_dict() if hasattr(document, "to_dict") else document
    return DocumentValidator(strict_mode=strict_mode).validate(data)
