"""
Fragment-level text layer and pure geometric selection for a page.
"""

import logging
from typing import Iterable, List, Optional

import fitz

from ..config import DEFAULT_SETTINGS, SelectionSettings
from .models import NormalizedPoint, NormalizedRect, TextFragment

logger = logging.getLogger(__name__)


def _distance_to_center(fragment: TextFragment, point: NormalizedPoint) -> float:
    center = fragment.center
    return ((point.x - center.x) ** 2 + (point.y - center.y) ** 2) ** 0.5


class PageTextLayer:
    """
    Ordered text fragments of a page.

    The fragment order is the extraction layer's reading flow and is what
    the geometric selection walks. It is independent of any layout blocks.
    """

    def __init__(
        self,
        fragments: Iterable[TextFragment] = (),
        settings: SelectionSettings = DEFAULT_SETTINGS,
    ):
        self.fragments: List[TextFragment] = list(fragments)
        self.settings = settings

    @classmethod
    def from_fitz_page(
        cls, page: fitz.Page, settings: SelectionSettings = DEFAULT_SETTINGS
    ) -> "PageTextLayer":
        """
        Build the layer from a PyMuPDF page's words.

        Words keep PyMuPDF's (block, line, word) order. Each word gets a
        trailing space, or a newline if it ends its line.
        """
        try:
            words = page.get_text("words", sort=False)
        except Exception as e:
            logger.error("Failed to extract words: %s", e)
            return cls(settings=settings)

        width, height = page.rect.width, page.rect.height
        words = sorted(words, key=lambda w: (w[5], w[6], w[7]))

        fragments = []
        for i, word in enumerate(words):
            x0, y0, x1, y1, text = word[:5]
            next_line = words[i + 1][5:7] if i + 1 < len(words) else None
            suffix = " " if next_line == word[5:7] else "\n"

            area = NormalizedRect.from_fitz(fitz.Rect(x0, y0, x1, y1), width, height)
            fragments.append(TextFragment(text + suffix, area))

        return cls(fragments, settings=settings)

    # ------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------

    def get_fragment_at_point(self, point: NormalizedPoint) -> Optional[TextFragment]:
        """
        Find the fragment under a point.

        If fragment boxes overlap (tight line spacing), the one whose center
        is closest wins.
        """
        hits = [f for f in self.fragments if f.contains_point(point.x, point.y)]
        if not hits:
            return None
        return min(hits, key=lambda f: _distance_to_center(f, point))

    def get_nearest_fragment(
        self, point: NormalizedPoint, max_distance: Optional[float] = None
    ) -> Optional[TextFragment]:
        """
        Find the fragment under a point, or else the one with the nearest center.

        Useful when a drag endpoint lands between words.
        """
        exact = self.get_fragment_at_point(point)
        if exact:
            return exact

        best = None
        best_dist = float("inf")
        for fragment in self.fragments:
            dist = _distance_to_center(fragment, point)
            if dist < best_dist and (max_distance is None or dist <= max_distance):
                best_dist = dist
                best = fragment
        return best

    def index_of(self, fragment: TextFragment) -> int:
        """Position of a fragment (by identity) in the sequence."""
        for i, candidate in enumerate(self.fragments):
            if candidate is fragment:
                return i
        raise ValueError("fragment is not part of this text layer")

    # ------------------------------------------------------------------
    # Geometric selection
    # ------------------------------------------------------------------

    def get_fragments_in_range(
        self, start: TextFragment, end: TextFragment
    ) -> List[TextFragment]:
        """
        Get all fragments between start and end (inclusive).

        Uses sequence position for ordering, so the endpoints may be given
        in either order.
        """
        start_idx = self.index_of(start)
        end_idx = self.index_of(end)

        if start_idx > end_idx:
            start_idx, end_idx = end_idx, start_idx

        return self.fragments[start_idx : end_idx + 1]

    def select_between(
        self, start: NormalizedPoint, end: NormalizedPoint
    ) -> List[TextFragment]:
        """
        Pure geometric selection between two drag endpoints.

        Each endpoint snaps to the fragment under it (or the nearest one),
        then the sequence slice between them is returned.
        """
        start_fragment = self.get_nearest_fragment(start)
        end_fragment = self.get_nearest_fragment(end)
        if start_fragment is None or end_fragment is None:
            return []
        return self.get_fragments_in_range(start_fragment, end_fragment)

    # ------------------------------------------------------------------
    # Line-precision ordering
    # ------------------------------------------------------------------

    def same_line(self, a: float, b: float) -> bool:
        """Whether two vertical centers belong to the same text line."""
        return abs(a - b) <= self.settings.line_tolerance

    def precedes_point(self, fragment: TextFragment, point: NormalizedPoint) -> bool:
        """
        Whether a fragment comes strictly before a cursor in line order.

        The fragment under the cursor never precedes it.
        """
        if fragment.contains_point(point.x, point.y):
            return False
        cy = fragment.center.y
        if self.same_line(cy, point.y):
            return fragment.area.right < point.x
        return cy < point.y

    def follows_point(self, fragment: TextFragment, point: NormalizedPoint) -> bool:
        """Whether a fragment comes strictly after a cursor in line order."""
        if fragment.contains_point(point.x, point.y):
            return False
        cy = fragment.center.y
        if self.same_line(cy, point.y):
            return fragment.area.left > point.x
        return cy > point.y

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def get_selection_rects(self, selected: List[TextFragment]) -> List[NormalizedRect]:
        """
        Generate selection rectangles for painting.

        Merges consecutive fragments on the same line.
        """
        rects: List[NormalizedRect] = []
        current: Optional[NormalizedRect] = None

        for fragment in selected:
            area = fragment.area
            if current is None:
                current = area
            elif (
                self.same_line(current.center.y, area.center.y)
                and area.left >= current.left
                and area.left - current.right <= self.settings.same_line_merge_gap
            ):
                current = current.united(area)
            else:
                rects.append(current)
                current = area

        if current is not None:
            rects.append(current)

        return rects

    @staticmethod
    def plain_text(fragments: Iterable[TextFragment]) -> str:
        """Concatenate fragment text in the given order."""
        return "".join(f.text for f in fragments)

    @property
    def full_text(self) -> str:
        """Get all text on the page."""
        return self.plain_text(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self):
        return iter(self.fragments)
