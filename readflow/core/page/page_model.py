"""
Page model combining the text layer with the page's reading blocks.
"""

import logging
from typing import Iterable, List, Optional

import fitz

from ..config import DEFAULT_SETTINGS, SelectionSettings
from .layout_registry import LayoutRegistry
from .models import (
    InclusionMode,
    LayoutBlock,
    NormalizedPoint,
    NormalizedRect,
    TextFragment,
)
from .text_layer import PageTextLayer

logger = logging.getLogger(__name__)


class TextPage:
    """
    Selection entry point for a single page.

    Provides:
    - Block-aware selection resolution (falls back to geometric selection)
    - Reading-order text extraction for a selection area
    - Block IDs covered by a selection

    The page owns its fragment sequence and its LayoutRegistry. Each call
    works on the registry snapshot taken when it starts.
    """

    def __init__(
        self,
        fragments: Iterable[TextFragment] = (),
        blocks: Iterable[LayoutBlock] = (),
        page_index: int = 0,
        settings: SelectionSettings = DEFAULT_SETTINGS,
    ):
        self.page_index = page_index
        self.settings = settings
        self.text_layer = PageTextLayer(fragments, settings=settings)
        self.registry = LayoutRegistry(blocks)

    @classmethod
    def from_fitz_page(
        cls,
        page: fitz.Page,
        blocks: Iterable[LayoutBlock] = (),
        settings: SelectionSettings = DEFAULT_SETTINGS,
    ) -> "TextPage":
        """Build a page from a PyMuPDF page's words."""
        text_page = cls(blocks=blocks, page_index=page.number, settings=settings)
        text_page.text_layer = PageTextLayer.from_fitz_page(page, settings=settings)
        return text_page

    # ------------------------------------------------------------------
    # Layout blocks
    # ------------------------------------------------------------------

    @property
    def fragments(self) -> List[TextFragment]:
        return self.text_layer.fragments

    @property
    def layout_blocks(self):
        return self.registry.blocks

    def has_layout_blocks(self) -> bool:
        return self.registry.has_layout_blocks()

    def set_layout_blocks(self, blocks: Iterable[LayoutBlock]):
        """Replace the page's reading blocks; an empty list disables block awareness."""
        self.registry.set_layout_blocks(blocks)
        logger.debug(
            "Page %d: %d layout blocks (v%d)",
            self.page_index,
            len(self.registry),
            self.registry.version,
        )

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def _resolver(self):
        # readflow.core.selection depends on this package
        from readflow.core.selection.resolver import SelectionResolver

        return SelectionResolver(self.text_layer, self.registry.blocks)

    def text_area(self, selection):
        """
        Resolve a drag into a selection area.

        Args:
            selection: TextSelection with start and end points

        Returns:
            SelectionArea, or None if nothing is selected
        """
        return self._resolver().resolve(selection)

    def selection_partition(self, selection):
        """Leading/full/trailing block split, or None for geometric selections."""
        return self._resolver().partition(selection)

    def block_ids_for_selection(
        self, start: NormalizedPoint, end: NormalizedPoint
    ) -> List[str]:
        """IDs of the blocks a drag from start to end spans, in reading order."""
        from readflow.core.selection.models import TextSelection

        return self._resolver().block_ids_for_selection(TextSelection(start, end))

    def text(self, area, mode: Optional[InclusionMode] = None) -> str:
        """
        Get the text of a selection area.

        With layout blocks the text follows block reading order; without,
        it follows the fragment sequence.
        """
        if area is None:
            return ""
        if mode is None:
            mode = self.settings.default_inclusion

        blocks = self.registry.blocks
        if not blocks:
            return self.text_layer.plain_text(
                f for f in self.text_layer.fragments if area.matches(f, mode)
            )

        from readflow.core.selection.assembler import ReadingOrderAssembler

        return ReadingOrderAssembler(blocks, settings=self.settings).assemble(
            self.text_layer.fragments, area, mode
        )

    def text_in_rect(self, rect: NormalizedRect) -> str:
        """
        Get the text of every fragment overlapping a rubber-band rectangle.
        """
        from readflow.core.selection.models import SelectionArea

        area = SelectionArea(fragments=[TextFragment("", rect)])
        return self.text(area, InclusionMode.ANY_PIXEL)

    def __len__(self) -> int:
        return len(self.text_layer)

    def __repr__(self) -> str:
        return (
            f"TextPage(page={self.page_index}, fragments={len(self.text_layer)}, "
            f"blocks={len(self.registry)})"
        )
