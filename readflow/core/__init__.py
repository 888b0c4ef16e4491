"""
Core selection logic for readflow.
"""

from .page import (
    InclusionMode,
    LayoutBlock,
    LayoutRegistry,
    NormalizedPoint,
    NormalizedRect,
    PageTextLayer,
    TextFragment,
    TextPage,
)
from .config import DEFAULT_SETTINGS, SelectionSettings
from .selection import (
    BlockLocator,
    BlockPartition,
    ReadingOrderAssembler,
    SelectionArea,
    SelectionManager,
    SelectionResolver,
    TextSelection,
)

__all__ = [
    "TextPage",
    "PageTextLayer",
    "LayoutRegistry",
    "LayoutBlock",
    "TextFragment",
    "NormalizedPoint",
    "NormalizedRect",
    "InclusionMode",
    "SelectionSettings",
    "DEFAULT_SETTINGS",
    "BlockLocator",
    "BlockPartition",
    "SelectionResolver",
    "ReadingOrderAssembler",
    "SelectionArea",
    "TextSelection",
    "SelectionManager",
]
