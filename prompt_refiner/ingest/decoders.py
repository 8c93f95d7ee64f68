"""
Decoders - Boundary to the collaborators that turn inputs into text.

Per-format decoding (OCR, PDF and Word text extraction) happens outside
this package. Decoders here validate and normalize what those
collaborators produce so the combiner always receives DecodedInput
objects. Any failure is raised as DecodingFailure tagged with the
input's kind, and aborts the whole request.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import DecodingFailure
from ..utils.logger import get_logger

logger = get_logger(__name__)

INPUT_KINDS = ("text", "image", "pdf", "word")
MAX_CHANNEL_MEAN = 255
DOCUMENT_KINDS = ("pdf", "word")


@dataclass
class RawInput:
    """
    One un-decoded input of a refinement request.

    Attributes:
        type: Input kind (text, image, pdf, word)
        content: Typed text for text inputs
        path: Original file path, kept for traceability
        data: Payload from an external decoding service, e.g.
            ``{"ocrText": ..., "dominantColors": [...]}`` for images or
            ``{"content": ...}`` for PDF/Word documents
    """
    type: str
    content: Optional[str] = None
    path: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RawInput':
        """Build a RawInput from a loosely shaped dictionary."""
        kind = str(data.get('type', '')).lower().strip()
        payload = dict(data.get('data') or {})
        for key in ('ocrText', 'dominantColors'):
            if key in data and key not in payload:
                payload[key] = data[key]
        if kind in DOCUMENT_KINDS and 'content' in data and 'content' not in payload:
            payload['content'] = data['content']
        return cls(
            type=kind,
            content=data.get('content') if kind == 'text' else None,
            path=data.get('path'),
            data=payload,
        )


@dataclass
class DecodedInput:
    """Text (and image statistics) decoded from one input."""
    kind: str
    text: str
    path: Optional[str] = None
    dominant_colors: List[Dict[str, Any]] = field(default_factory=list)
    word_count: int = 0

    @property
    def ocr_text(self) -> Optional[str]:
        """OCR text for image inputs, None otherwise."""
        return self.text if self.kind == "image" else None

    @property
    def is_document(self) -> bool:
        return self.kind in DOCUMENT_KINDS


def count_words(text: str) -> int:
    """Number of whitespace-separated words."""
    return len(text.split())


class BaseDecoder(ABC):
    """
    Abstract base class for decoders.

    Subclasses implement ``_decode``; ``decode`` wraps anything they
    raise into a DecodingFailure for the decoder's kind.
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Input kind this decoder accepts."""
        pass

    @abstractmethod
    def _decode(self, raw: RawInput) -> DecodedInput:
        pass

    def decode(self, raw: RawInput) -> DecodedInput:
        """
        Decode one input.

        Args:
            raw: Input to decode

        Returns:
            DecodedInput

        Raises:
            DecodingFailure: If the input cannot be decoded
        """
        try:
            decoded = self._decode(raw)
        except DecodingFailure:
            raise
        except Exception as e:
            raise DecodingFailure(self.kind, str(e), cause=e) from e

        logger.debug(f"Decoded {self.kind} input ({decoded.word_count} words)")
        return decoded


class TextDecoder(BaseDecoder):
    """Decoder for typed text: the content is trimmed and otherwise kept as-is."""

    @property
    def kind(self) -> str:
        return "text"

    def _decode(self, raw: RawInput) -> DecodedInput:
        if not isinstance(raw.content, str) or not raw.content:
            raise DecodingFailure(self.kind, "Invalid text content")

        content = raw.content.strip()
        return DecodedInput(
            kind=self.kind,
            text=content,
            path=raw.path,
            word_count=count_words(raw.content),
        )


class PrecomputedDecoder(BaseDecoder):
    """
    Decoder for payloads already produced by an external service.

    Images need ``ocrText`` (and may carry ``dominantColors``, a list of
    ``{"channel", "mean"}`` entries); PDF and Word documents need
    ``content``.
    """

    def __init__(self, kind: str):
        if kind not in INPUT_KINDS or kind == "text":
            raise ValueError(f"Unsupported precomputed input kind: {kind}")
        self._kind = kind

    @property
    def kind(self) -> str:
        return self._kind

    def _decode(self, raw: RawInput) -> DecodedInput:
        data = raw.data or {}

        if self._kind == "image":
            text = data.get("ocrText")
            if not isinstance(text, str):
                raise DecodingFailure(self.kind, "missing OCR text")
            colors = self._parse_colors(data.get("dominantColors"))
        else:
            text = data.get("content")
            if not isinstance(text, str):
                raise DecodingFailure(self.kind, "missing document content")
            colors = []

        return DecodedInput(
            kind=self._kind,
            text=text.strip() if self._kind == "image" else text,
            path=raw.path,
            dominant_colors=colors,
            word_count=count_words(text),
        )

    def _parse_colors(self, colors: Any) -> List[Dict[str, Any]]:
        if not colors:
            return []
        if not isinstance(colors, list):
            raise DecodingFailure(self.kind, "dominantColors must be a list")

        parsed = []
        for entry in colors:
            if not isinstance(entry, dict) or "mean" not in entry:
                raise DecodingFailure(self.kind, f"invalid color channel entry: {entry!r}")
            parsed.append({"channel": entry.get("channel"), "mean": self._parse_mean(entry["mean"])})
        return parsed

    def _parse_mean(self, value: Any) -> float:
        if isinstance(value, bool):
            raise DecodingFailure(self.kind, f"invalid color mean: {value!r}")
        try:
            mean = float(value)
        except (TypeError, ValueError) as e:
            raise DecodingFailure(self.kind, f"invalid color mean: {value!r}", cause=e) from e
        if not math.isfinite(mean) or not 0 <= mean <= MAX_CHANNEL_MEAN:
            raise DecodingFailure(self.kind, f"color mean out of range 0-{MAX_CHANNEL_MEAN}: {value!r}")
        return mean


class DecoderRegistry:
    """Maps input kinds to the decoder responsible for them."""

    def __init__(self, decoders: Optional[List[BaseDecoder]] = None):
        self._decoders: Dict[str, BaseDecoder] = {}
        for decoder in decoders or []:
            self.register(decoder)

    def register(self, decoder: BaseDecoder) -> None:
        """Register (or replace) the decoder for ``decoder.kind``."""
        self._decoders[decoder.kind] = decoder

    @property
    def kinds(self) -> List[str]:
        return list(self._decoders)

    def decode(self, raw: RawInput) -> DecodedInput:
        """
        Decode an input with the decoder registered for its kind.

        Raises:
            DecodingFailure: Unknown kind, or the decoder failed
        """
        decoder = self._decoders.get(raw.type)
        if decoder is None:
            raise DecodingFailure(raw.type or "unknown", f"Unsupported input type. Available: {self.kinds}")
        return decoder.decode(raw)


def create_registry() -> DecoderRegistry:
    """
    Registry with the default decoders.

    Returns:
        DecoderRegistry handling text plus precomputed image/pdf/word payloads
    """
    return DecoderRegistry([
        TextDecoder(),
        PrecomputedDecoder("image"),
        PrecomputedDecoder("pdf"),
        PrecomputedDecoder("word"),
    ])
