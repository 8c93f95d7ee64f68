"""
Validator module - Validate refined prompt documents.

Provides:
- DocumentValidator: Checks a document against its invariants
- validate_document: Convenience wrapper accepting models or dictionaries
"""

from .document_validator import (
    DocumentValidator,
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_document,
)

__all__ = [
    'DocumentValidator',
    'ValidationResult',
    'ValidationIssue',
    'ValidationSeverity',
    'validate_document',
]
