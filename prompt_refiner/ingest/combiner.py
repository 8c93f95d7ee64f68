"""
Input Combiner - Merge decoded inputs into one text blob.

Image and document text is appended in arrival order, each fragment
prefixed with a marker naming its kind; typed text goes last. Extractors
use first-match-wins rules, so this order affects what they find.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .decoders import DecodedInput, count_words
from ..utils.logger import get_logger

logger = get_logger(__name__)

SECTION_MARKERS = {
    "image": "[Image OCR]: ",
    "pdf": "[PDF Content]: ",
    "word": "[Word Content]: ",
}

FRAGMENT_SEPARATOR = "\n\n"


@dataclass
class CombinedInput:
    """
    Result of combining the decoded inputs of one request.

    Attributes:
        combined_text: Image/document fragments in arrival order, then typed text
        text_content: Typed-text bucket
        images: Decoded image inputs in arrival order
        documents: Decoded PDF/Word inputs in arrival order
        source_types: Distinct input kinds in the order first encountered
    """
    combined_text: str = ""
    text_content: str = ""
    images: List[DecodedInput] = field(default_factory=list)
    documents: List[DecodedInput] = field(default_factory=list)
    source_types: List[str] = field(default_factory=list)

    @property
    def first_image(self) -> Optional[DecodedInput]:
        return self.images[0] if self.images else None

    @property
    def image_paths(self) -> List[str]:
        return [img.path or "" for img in self.images]

    @property
    def document_paths(self) -> List[str]:
        return [doc.path or "" for doc in self.documents]

    @classmethod
    def from_text(cls, text: str) -> 'CombinedInput':
        """Combined input made of a single typed text."""
        return combine_inputs([DecodedInput(kind="text", text=text.strip(), word_count=count_words(text))])


def combine_inputs(decoded: Iterable[DecodedInput]) -> CombinedInput:
    """
    Combine decoded inputs.

    Args:
        decoded: Decoded inputs in arrival order

    Returns:
        CombinedInput
    """
    result = CombinedInput()
    fragments = []
    text_parts = []

    for item in decoded:
        if item.kind not in result.source_types:
            result.source_types.append(item.kind)

        if item.kind == "text":
            text_parts.append(item.text + FRAGMENT_SEPARATOR)
            continue

        marker = SECTION_MARKERS.get(item.kind)
        if marker is None:
            raise ValueError(f"Unsupported input kind: {item.kind}")

        if item.kind == "image":
            result.images.append(item)
        else:
            result.documents.append(item)
        fragments.append(marker + item.text + FRAGMENT_SEPARATOR)

    result.text_content = "".join(text_parts)
    result.combined_text = "".join(fragments) + result.text_content

    logger.debug(
        f"Combined {len(result.images)} images, {len(result.documents)} documents, "
        f"{len(text_parts)} text inputs into {len(result.combined_text)} chars"
    )
    return result
