"""
Core module - Application configuration.
"""

from .config import (
    GateConfig,
    ExtractionConfig,
    ScoringConfig,
    OutputConfig,
    LoggingConfig,
    AppConfig,
    get_default_config,
    load_config,
)

__all__ = [
    'GateConfig',
    'ExtractionConfig',
    'ScoringConfig',
    'OutputConfig',
    'LoggingConfig',
    'AppConfig',
    'get_default_config',
    'load_config',
]
