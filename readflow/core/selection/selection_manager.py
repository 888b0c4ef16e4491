"""
Drag-driven text selection state for block-aware pages.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from readflow.core.page.models import NormalizedPoint, NormalizedRect
from readflow.core.page.page_model import TextPage

from .models import SelectionArea, TextSelection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionAnchor:
    """Represents a selection anchor point."""

    page_index: int
    point: NormalizedPoint


class SelectionManager(QObject):
    """
    Manages the text selection of a drag on one page.

    Supports:
    - Re-resolving the selection on every drag update
    - Reading-order text for copy
    - Selection rect generation for painting

    Selections stay on the page where the drag started; a caller that wants
    multi-page selection composes pages itself.
    """

    # Signals
    selection_changed = pyqtSignal()
    selection_cleared = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        # Selection state
        self.anchor: Optional[SelectionAnchor] = None  # Start of selection
        self.focus: Optional[SelectionAnchor] = None  # Current end of selection

        # Computed selection area, if any
        self._area: Optional[SelectionArea] = None

        # Pages reference (set by parent)
        self._pages: Dict[int, TextPage] = {}

        self.is_selecting: bool = False

    def set_pages(self, pages: Dict[int, TextPage]):
        """Set reference to pages for selection computation."""
        self._pages = pages

    def start_selection(self, page_index: int, point: NormalizedPoint):
        """
        Begin a new selection at the specified point.

        Args:
            page_index: Page where selection starts
            point: Drag start in normalized page coordinates
        """
        self.clear()

        self.anchor = SelectionAnchor(page_index, point)
        self.focus = SelectionAnchor(page_index, point)
        self.is_selecting = True

        self._update_selection()
        self.selection_changed.emit()

    def extend_selection(self, page_index: int, point: NormalizedPoint):
        """
        Extend selection to the specified point.

        Args:
            page_index: Page of the drag update
            point: Current drag position in normalized page coordinates
        """
        if self.anchor is None:
            return

        if page_index != self.anchor.page_index:
            logger.debug(
                "Ignoring focus on page %d; selection is on page %d",
                page_index,
                self.anchor.page_index,
            )
            return

        self.focus = SelectionAnchor(page_index, point)
        self._update_selection()
        self.selection_changed.emit()

    def finish_selection(self):
        """Complete the current selection operation."""
        self.is_selecting = False

    def _update_selection(self):
        """Recalculate the selection area from anchor and focus."""
        self._area = None

        if self.anchor is None or self.focus is None:
            return

        page = self._pages.get(self.anchor.page_index)
        if page is None:
            return

        self._area = page.text_area(TextSelection(self.anchor.point, self.focus.point))

    @property
    def selection(self) -> Optional[SelectionArea]:
        return self._area

    @property
    def page_index(self) -> Optional[int]:
        return self.anchor.page_index if self.anchor else None

    def get_selection_rects(
        self, page_index: int, width: float = 1.0, height: float = 1.0
    ) -> List[Tuple[float, float, float, float]]:
        """
        Get selection rectangles for a page (for painting).

        Args:
            page_index: Page being painted
            width: Page width to scale to
            height: Page height to scale to
        """
        if self._area is None or page_index != self.page_index:
            return []

        page = self._pages[page_index]
        rects: List[NormalizedRect] = page.text_layer.get_selection_rects(
            self._area.fragments
        )
        return [tuple(r.to_fitz(width, height)) for r in rects]

    def get_selected_text(self) -> str:
        """Get the selected text in reading order."""
        if self._area is None:
            return ""
        return self._pages[self.page_index].text(self._area)

    def get_selected_block_ids(self) -> List[str]:
        """Reading blocks touched by the current drag."""
        if self.anchor is None or self.focus is None:
            return []
        page = self._pages.get(self.anchor.page_index)
        if page is None:
            return []
        return page.block_ids_for_selection(self.anchor.point, self.focus.point)

    def copy_selected_text(self) -> str:
        """
        Copy selected text to clipboard.

        Returns:
            The copied text, empty if nothing was selected
        """
        text = self.get_selected_text()
        if text:
            import pyperclip

            pyperclip.copy(text)
        return text

    def has_selection(self) -> bool:
        """Check if there is any selection."""
        return self._area is not None and not self._area.is_empty

    def clear(self):
        """Clear all selection state."""
        had_selection = self.has_selection()

        self.anchor = None
        self.focus = None
        self.is_selecting = False
        self._area = None

        if had_selection:
            self.selection_cleared.emit()

    def select_all(self, page_index: int):
        """Select all text on a page."""
        page = self._pages.get(page_index)
        if page is None or not page.fragments:
            return

        self.anchor = SelectionAnchor(page_index, page.fragments[0].area.center)
        self.focus = SelectionAnchor(page_index, page.fragments[-1].area.center)
        self._area = SelectionArea(fragments=list(page.fragments))
        self.selection_changed.emit()
