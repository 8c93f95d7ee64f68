"""
Utilities module - Common helper functions and classes.
"""

from .text import (
    generate_request_id,
    truncate,
    normalize_key,
    first_sentence,
    split_sentences,
    to_camel_case,
    OrderedDeduper,
)
from .logger import (
    setup_logging,
    get_logger,
    LogContext,
    log_exception,
    log_json,
)

__all__ = [
    # Text helpers
    'generate_request_id',
    'truncate',
    'normalize_key',
    'first_sentence',
    'split_sentences',
    'to_camel_case',
    'OrderedDeduper',
    # Logging
    'setup_logging',
    'get_logger',
    'LogContext',
    'log_exception',
    'log_json',
]
