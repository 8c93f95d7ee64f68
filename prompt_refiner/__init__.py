"""
Prompt Refiner - Turn free-form requests into structured prompt documents.

Main modules:
- ingest: Decode inputs and combine them into one text blob
- refiner: Relevance gate, field extractors, scoring and orchestration
- validator: Invariant checks over refined documents
- cli: Command-line interface
"""

from .errors import (
    RefinerError,
    InvalidInput,
    IrrelevantInput,
    DecodingFailure,
    InvariantViolation,
)
from .refiner import PromptRefiner, RefinedPrompt, refine
from .cli import run_pipeline

__version__ = "1.0.0"

__all__ = [
    'RefinerError',
    'InvalidInput',
    'IrrelevantInput',
    'DecodingFailure',
    'InvariantViolation',
    'PromptRefiner',
    'RefinedPrompt',
    'refine',
    'run_pipeline',
    '__version__',
]
