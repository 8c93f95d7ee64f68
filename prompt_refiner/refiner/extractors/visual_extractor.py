"""
Visual Extractor - Extract visual hints from the first image input.
"""

import math
from typing import Any, Dict, List, Optional, Sequence

from .base import BaseExtractor
from ..models import DesignStyle, Layout, VisualElements
from ...utils.logger import get_logger

logger = get_logger(__name__)


class VisualExtractor(BaseExtractor):
    """
    Extractor for visual elements.

    Works on the decoded data of a single image (the first one in the
    request); the combined text is not consulted.
    """

    @property
    def component_name(self) -> str:
        return "visualElements"

    def extract(self, text: str = "", image=None, **kwargs) -> VisualElements:
        """
        Extract visual elements from decoded image data.

        Args:
            text: Combined input text (unused)
            image: DecodedInput of the first image, or None

        Returns:
            VisualElements object (empty when there is no image)
        """
        if image is None:
            return VisualElements()

        ocr_text = (image.ocr_text or "").lower()
        visual = VisualElements(
            colors=self._extract_colors(image.dominant_colors),
            design_style=self._match_category(ocr_text, self.tables.style_keywords, DesignStyle),
            layout=self._match_category(ocr_text, self.tables.layout_keywords, Layout),
            components=[],
        )
        logger.debug(f"Visual elements: style={visual.design_style}, layout={visual.layout}")
        return visual

    def _extract_colors(self, dominant_colors: Optional[Sequence[Dict[str, Any]]]) -> List[str]:
        """Render the first three channel means as one rgb() string."""
        if not dominant_colors or len(dominant_colors) < 3:
            return []
        means = [c.get("mean") for c in dominant_colors[:3]]
        if not all(isinstance(m, (int, float)) and math.isfinite(m) for m in means):
            return []
        red, green, blue = (int(round(m)) for m in means)
        return [f"rgb({red}, {green}, {blue})"]

    def _match_category(self, ocr_text: str, categories, enum_cls):
        """First category with a keyword contained in the OCR text."""
        if not ocr_text:
            return None
        for name, keywords in categories:
            if any(kw in ocr_text for kw in keywords):
                return enum_cls.from_string(name)
        return None
