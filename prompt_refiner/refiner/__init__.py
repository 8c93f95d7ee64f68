"""
Refiner module - Turn combined input text into a RefinedPrompt.

Components:
- RelevanceGate: Rejects short or junk input
- Field extractors: One per document section
- ScoringEngine: Confidence and completeness heuristics
- PromptRefiner: Orchestrates the pipeline
"""

from .models import RefinedPrompt
from .patterns import PatternTables, DEFAULT_TABLES
from .engine import PromptRefiner, refine
from .gate import RelevanceGate
from .scoring import ScoringEngine, ScoreResult

__all__ = [
    'RefinedPrompt',
    'PatternTables',
    'DEFAULT_TABLES',
    'PromptRefiner',
    'refine',
    'RelevanceGate',
    'ScoringEngine',
    'ScoreResult',
]
