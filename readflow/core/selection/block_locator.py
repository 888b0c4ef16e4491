"""
Point-to-block lookups and reading-order navigation.
"""

from typing import Iterable, List, Optional, Sequence

from readflow.core.page.models import LayoutBlock, NormalizedPoint, NormalizedRect


class BlockLocator:
    """
    Answers "which block" questions over one snapshot of a page's blocks.

    Returned blocks are the snapshot's own objects. Scans run in list order,
    not reading order.
    """

    def __init__(self, blocks: Sequence[LayoutBlock]):
        self.blocks = tuple(blocks)

    def find_block_containing(self, point: NormalizedPoint) -> Optional[LayoutBlock]:
        """First block whose bbox contains the point."""
        for block in self.blocks:
            if block.contains(point):
                return block
        return None

    def find_block_containing_rect(self, rect: NormalizedRect) -> Optional[LayoutBlock]:
        """First block containing the rect's center."""
        for block in self.blocks:
            if block.contains(rect):
                return block
        return None

    def _find_by_order(self, order: int) -> Optional[LayoutBlock]:
        if order < 0:
            return None
        for block in self.blocks:
            if block.reading_order == order:
                return block
        return None

    def get_next_block(self, current: Optional[LayoutBlock]) -> Optional[LayoutBlock]:
        """
        Block whose reading order is exactly one higher.

        A gap in the numbering means there is no successor.
        """
        if current is None or not current.in_flow:
            return None
        return self._find_by_order(current.reading_order + 1)

    def get_previous_block(self, current: Optional[LayoutBlock]) -> Optional[LayoutBlock]:
        """Block whose reading order is exactly one lower."""
        if current is None or not current.in_flow:
            return None
        return self._find_by_order(current.reading_order - 1)

    @staticmethod
    def has_passed(block: LayoutBlock, point: NormalizedPoint) -> bool:
        """
        Whether a cursor is past a block in reading terms.

        True when the cursor is below the block, or level with it and to its
        right.
        """
        bbox = block.bbox
        if point.y > bbox.bottom:
            return True
        return bbox.top <= point.y <= bbox.bottom and point.x > bbox.right

    def find_block_for_cursor(self, point: NormalizedPoint) -> Optional[LayoutBlock]:
        """
        Find the block a cursor belongs to in the reading flow.

        Inside a block, that block. In dead space, the successor of the
        furthest block the cursor has passed (or that block itself at the end
        of the flow). If nothing was passed, the first block in reading order.
        """
        direct = self.find_block_containing(point)
        if direct:
            return direct

        best_block = None
        best_order = -1
        for block in self.blocks:
            if self.has_passed(block, point) and block.reading_order > best_order:
                best_order = block.reading_order
                best_block = block

        if best_block:
            return self.get_next_block(best_block) or best_block

        first_block = None
        for block in self.blocks:
            if block.in_flow and (
                first_block is None or block.reading_order < first_block.reading_order
            ):
                first_block = block
        return first_block

    def blocks_in_reading_order_range(
        self, min_order: int, max_order: int
    ) -> List[LayoutBlock]:
        """All blocks with min_order <= reading_order <= max_order, in list order."""
        return [
            block
            for block in self.blocks
            if min_order <= block.reading_order <= max_order
        ]

    @staticmethod
    def is_rect_in_any_block(
        rect: NormalizedRect, blocks: Iterable[Optional[LayoutBlock]]
    ) -> bool:
        """Whether the rect's center falls in any of the blocks; no blocks means yes."""
        blocks = list(blocks)
        if not blocks:
            return True
        return any(block is not None and block.contains(rect) for block in blocks)
