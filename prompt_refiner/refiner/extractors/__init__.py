"""
Field extractors - One extractor per section of the refined document.

Each extractor handles a specific section:
- IntentExtractor: Purpose, description, target audience
- FunctionalExtractor: Features, user interactions, expected behaviors
- TechnicalExtractor: Platform, technologies, performance, limitations
- DeliverablesExtractor: Outputs and milestones
- VisualExtractor: Colors, design style and layout from the first image
"""

from .base import BaseExtractor
from .intent_extractor import IntentExtractor
from .functional_extractor import FunctionalExtractor, determine_priority
from .technical_extractor import TechnicalExtractor
from .deliverables_extractor import DeliverablesExtractor
from .visual_extractor import VisualExtractor

__all__ = [
    'BaseExtractor',
    'IntentExtractor',
    'FunctionalExtractor',
    'determine_priority',
    'TechnicalExtractor',
    'DeliverablesExtractor',
    'VisualExtractor',
]
