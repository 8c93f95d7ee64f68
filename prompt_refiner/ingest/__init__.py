"""
Ingest module - Decode inputs and combine them into one text blob.
"""

from .decoders import (
    RawInput,
    DecodedInput,
    BaseDecoder,
    TextDecoder,
    PrecomputedDecoder,
    DecoderRegistry,
    create_registry,
)
from .combiner import CombinedInput, combine_inputs

__all__ = [
    'RawInput',
    'DecodedInput',
    'BaseDecoder',
    'TextDecoder',
    'PrecomputedDecoder',
    'DecoderRegistry',
    'create_registry',
    'CombinedInput',
    'combine_inputs',
]
