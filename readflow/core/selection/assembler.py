"""
Reading-order transcription of a selection area.
"""

from functools import cmp_to_key
from typing import Dict, Iterable, List, Sequence, Union

from readflow.core.config import DEFAULT_SETTINGS, SelectionSettings
from readflow.core.page.models import InclusionMode, LayoutBlock, TextFragment

from .models import SelectionArea

# Group key for fragments outside every in-flow block; sorts after all orders
OUT_OF_FLOW_GROUP = float("inf")


class ReadingOrderAssembler:
    """
    Flattens the fragments matched by a selection area into one string.

    Fragments are grouped by the first block (list order) containing their
    center, groups are emitted by ascending reading order, and fragments
    inside a group run top to bottom, then left to right. Fragments with no
    in-flow block come last.
    """

    def __init__(
        self,
        blocks: Sequence[LayoutBlock],
        settings: SelectionSettings = DEFAULT_SETTINGS,
    ):
        self.blocks = tuple(blocks)
        self.settings = settings
        self._sort_key = cmp_to_key(self._compare)

    def _compare(self, a: TextFragment, b: TextFragment) -> int:
        ay, by = a.center.y, b.center.y
        if abs(ay - by) > self.settings.line_tolerance:
            return -1 if ay < by else 1
        if a.area.left != b.area.left:
            return -1 if a.area.left < b.area.left else 1
        return 0

    def group_order(self, fragment: TextFragment) -> Union[int, float]:
        """Reading order of the fragment's owning block, or the trailing group."""
        for block in self.blocks:
            if block.contains(fragment.area):
                return block.reading_order if block.in_flow else OUT_OF_FLOW_GROUP
        return OUT_OF_FLOW_GROUP

    def group(
        self, fragments: Iterable[TextFragment]
    ) -> Dict[Union[int, float], List[TextFragment]]:
        """Group fragments by owning block order, each group sorted in line order."""
        groups: Dict[Union[int, float], List[TextFragment]] = {}
        for fragment in fragments:
            groups.setdefault(self.group_order(fragment), []).append(fragment)

        for order in groups:
            groups[order].sort(key=self._sort_key)
        return groups

    def assemble(
        self,
        fragments: Iterable[TextFragment],
        area: SelectionArea,
        mode: InclusionMode = InclusionMode.CENTRAL_PIXEL,
    ) -> str:
        """
        Extract the text of an area in reading order.

        Args:
            fragments: The page's fragment sequence
            area: Selection area to match fragments against
            mode: Boundary intersection or center containment

        Returns:
            Concatenated fragment text, no separators added
        """
        matched = [f for f in fragments if area.matches(f, mode)]
        groups = self.group(matched)

        return "".join(
            fragment.text
            for order in sorted(groups)
            for fragment in groups[order]
        )
