"""
readflow: block-aware text selection for multi-column document pages.
"""

from .core import (
    BlockLocator,
    InclusionMode,
    LayoutBlock,
    LayoutRegistry,
    NormalizedPoint,
    NormalizedRect,
    PageTextLayer,
    ReadingOrderAssembler,
    SelectionArea,
    SelectionResolver,
    SelectionSettings,
    TextFragment,
    TextPage,
    TextSelection,
)

__version__ = "0.1.0"

__all__ = [
    "BlockLocator",
    "InclusionMode",
    "LayoutBlock",
    "LayoutRegistry",
    "NormalizedPoint",
    "NormalizedRect",
    "PageTextLayer",
    "ReadingOrderAssembler",
    "SelectionArea",
    "SelectionResolver",
    "SelectionSettings",
    "TextFragment",
    "TextPage",
    "TextSelection",
]
