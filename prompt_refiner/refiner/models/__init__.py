"""
Refined prompt models - Data structures for the refined document.
"""

from .refined_prompt import (
    # Constants
    EXTRACTION_METHOD,
    UNSPECIFIED_PURPOSE,
    # Enums
    Priority,
    Complexity,
    OutputType,
    Platform,
    DesignStyle,
    Layout,
    SourceType,
    # Data classes
    CoreIntent,
    Feature,
    FunctionalRequirements,
    TechnicalConstraints,
    Output,
    Milestone,
    Deliverables,
    VisualElements,
    Metadata,
    SourceInputs,
    RefinedPrompt,
)

__all__ = [
    # Constants
    'EXTRACTION_METHOD',
    'UNSPECIFIED_PURPOSE',
    # Enums
    'Priority',
    'Complexity',
    'OutputType',
    'Platform',
    'DesignStyle',
    'Layout',
    'SourceType',
    # Data classes
    'CoreIntent',
    'Feature',
    'FunctionalRequirements',
    'TechnicalConstraints',
    'Output',
    'Milestone',
    'Deliverables',
    'VisualElements',
    'Metadata',
    'SourceInputs',
    'RefinedPrompt',
]
