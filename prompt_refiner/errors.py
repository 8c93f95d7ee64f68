"""
Error types raised by the refinement pipeline.

Every error here is terminal for the current request: nothing is
retried and no partial document is produced.
"""

from typing import Optional


class RefinerError(Exception):
    """Base class for all prompt refiner errors."""


class InvalidInput(RefinerError):
    """Combined text is too short to refine."""

    def __init__(self, message: str = "Input is too short or irrelevant. Please provide more detailed information."):
        super().__init__(message)


class IrrelevantInput(InvalidInput):
    """Combined text looks like placeholder or junk content."""

    def __init__(self, message: str = "Input appears to be irrelevant or test content. Please provide meaningful project requirements."):
        super().__init__(message)


class DecodingFailure(RefinerError):
    """
    A decoding collaborator could not turn an input into text.

    Attributes:
        kind: Input kind that failed (text, image, pdf, word)
        cause: Underlying exception, if any
    """

    def __init__(self, kind: str, message: str, cause: Optional[BaseException] = None):
        self.kind = kind
        self.cause = cause
        super().__init__(f"{kind} processing error: {message}")


class InvariantViolation(RefinerError):
    """The assembled document failed its own consistency checks."""

    def __init__(self, issues):
        self.issues = list(issues)
        details = "; ".join(f"{i.path}: {i.message}" for i in self.issues[:5])
        super().__init__(f"Refined document violates {len(self.issues)} invariant(s): {details}")
