"""
Page text and layout layers.
"""

from .models import (
    InclusionMode,
    LayoutBlock,
    NormalizedPoint,
    NormalizedRect,
    TextFragment,
)
from .layout_registry import LayoutRegistry
from .text_layer import PageTextLayer
from .page_model import TextPage

__all__ = [
    "TextPage",
    "PageTextLayer",
    "LayoutRegistry",
    "LayoutBlock",
    "TextFragment",
    "NormalizedPoint",
    "NormalizedRect",
    "InclusionMode",
]
