"""
Block-aware text selection.
"""

from .assembler import ReadingOrderAssembler
from .block_locator import BlockLocator
from .models import BlockPartition, SelectionArea, TextSelection
from .resolver import SelectionResolver
from .selection_manager import SelectionAnchor, SelectionManager

__all__ = [
    "BlockLocator",
    "SelectionResolver",
    "ReadingOrderAssembler",
    "SelectionArea",
    "BlockPartition",
    "TextSelection",
    "SelectionManager",
    "SelectionAnchor",
]
