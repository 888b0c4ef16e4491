"""
Block-aware resolution of a drag into selected text fragments.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from readflow.core.page.models import LayoutBlock, NormalizedPoint, TextFragment
from readflow.core.page.text_layer import PageTextLayer

from .block_locator import BlockLocator
from .models import BlockPartition, SelectionArea, TextSelection

logger = logging.getLogger(__name__)


class SelectionResolver:
    """
    Turns a drag on one page into an ordered SelectionArea.

    Without blocks, or when an endpoint cannot be placed in the reading
    flow, the pure geometric selection of the text layer is used. When both
    endpoints fall in the same reading slot, the geometric selection is kept
    to the fragments of the endpoint blocks. Otherwise the selection
    is stitched from a partial leading block, the fully covered blocks in
    between, and a partial trailing block.
    """

    def __init__(self, text_layer: PageTextLayer, blocks: Sequence[LayoutBlock]):
        self.text_layer = text_layer
        self.locator = BlockLocator(blocks)

    def resolve(self, selection: TextSelection) -> Optional[SelectionArea]:
        """
        Compute the selection area for a drag.

        Returns:
            SelectionArea, or None if no fragment is selected
        """
        ends = self._endpoint_blocks(selection)
        plan = self._plan(selection, ends)
        if plan is not None:
            fragments = self._stitch(*plan)
        else:
            fragments = self.text_layer.select_between(selection.start, selection.end)
            if ends is not None:
                fragments = self._restrict_to(fragments, ends)

        if not fragments:
            return None
        return SelectionArea(fragments=fragments)

    def partition(self, selection: TextSelection) -> Optional[BlockPartition]:
        """Block split of a cross-block selection, or None if geometric selection applies."""
        plan = self._plan(selection, self._endpoint_blocks(selection))
        return plan[0] if plan else None

    def block_ids_for_selection(self, selection: TextSelection) -> List[str]:
        """
        IDs of the blocks a selection spans, in reading order.

        Empty when an endpoint cannot be placed in the reading flow.
        """
        ends = self._endpoint_blocks(selection)
        if ends is None:
            return []
        orders = sorted(b.reading_order for b in ends)
        blocks = self.locator.blocks_in_reading_order_range(orders[0], orders[1])
        return [b.id for b in sorted(blocks, key=lambda b: b.reading_order)]

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def _endpoint_blocks(
        self, selection: TextSelection
    ) -> Optional[Tuple[LayoutBlock, LayoutBlock]]:
        if not self.locator.blocks:
            return None

        start_block = self.locator.find_block_for_cursor(selection.start)
        end_block = self.locator.find_block_for_cursor(selection.end)

        if start_block is None or end_block is None:
            logger.debug("Endpoint outside reading flow, using geometric selection")
            return None
        if not start_block.in_flow or not end_block.in_flow:
            logger.debug(
                "Endpoint in out-of-flow block (%s, %s), using geometric selection",
                start_block.id,
                end_block.id,
            )
            return None

        return start_block, end_block

    def _plan(
        self,
        selection: TextSelection,
        ends: Optional[Tuple[LayoutBlock, LayoutBlock]],
    ) -> Optional[Tuple[BlockPartition, NormalizedPoint, NormalizedPoint]]:
        if ends is None:
            return None

        start_block, end_block = ends
        if start_block.reading_order == end_block.reading_order:
            return None

        if start_block.reading_order < end_block.reading_order:
            leading, trailing = start_block, end_block
            leading_point, trailing_point = selection.start, selection.end
        else:
            leading, trailing = end_block, start_block
            leading_point, trailing_point = selection.end, selection.start

        full = sorted(
            (
                block
                for block in self.locator.blocks
                if leading.reading_order < block.reading_order < trailing.reading_order
            ),
            key=lambda b: b.reading_order,
        )

        partition = BlockPartition(leading=leading, full=full, trailing=trailing)
        return partition, leading_point, trailing_point

    # ------------------------------------------------------------------
    # Stitching
    # ------------------------------------------------------------------

    def _stitch(
        self,
        partition: BlockPartition,
        leading_point: NormalizedPoint,
        trailing_point: NormalizedPoint,
    ) -> List[TextFragment]:
        by_block: Dict[int, List[TextFragment]] = {id(b): [] for b in partition.blocks}

        for fragment in self.text_layer.fragments:
            owner = self.locator.find_block_containing_rect(fragment.area)
            if owner is not None and id(owner) in by_block:
                by_block[id(owner)].append(fragment)

        result = self._leading_part(
            partition.leading, by_block[id(partition.leading)], leading_point
        )
        for block in partition.full:
            result.extend(by_block[id(block)])
        result.extend(
            self._trailing_part(
                partition.trailing, by_block[id(partition.trailing)], trailing_point
            )
        )

        logger.debug(
            "Cross-block selection over %s: %d fragments",
            partition.block_ids,
            len(result),
        )
        return result

    def _leading_part(
        self, block: LayoutBlock, fragments: List[TextFragment], point: NormalizedPoint
    ) -> List[TextFragment]:
        """From the cursor to the block's trailing edge."""
        if block.contains(point):
            return [f for f in fragments if not self.text_layer.precedes_point(f, point)]
        if self.locator.has_passed(block, point):
            return []
        return list(fragments)

    def _trailing_part(
        self, block: LayoutBlock, fragments: List[TextFragment], point: NormalizedPoint
    ) -> List[TextFragment]:
        """From the block's leading edge up to the cursor."""
        if block.contains(point):
            return [f for f in fragments if not self.text_layer.follows_point(f, point)]
        if self.locator.has_passed(block, point):
            return list(fragments)
        return []

    def _restrict_to(
        self, fragments: List[TextFragment], blocks: Tuple[LayoutBlock, LayoutBlock]
    ) -> List[TextFragment]:
        """Keep only fragments owned by one of the given blocks."""
        owners = {id(b) for b in blocks}
        kept = []
        for fragment in fragments:
            owner = self.locator.find_block_containing_rect(fragment.area)
            if owner is not None and id(owner) in owners:
                kept.append(fragment)
        return kept
