"""
Per-page registry of reading blocks.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, Tuple, Union

from .models import LayoutBlock, NormalizedPoint, NormalizedRect

logger = logging.getLogger(__name__)


class LayoutRegistry:
    """
    Ordered, read-only collection of the reading blocks on one page.

    Iteration order is insertion order. Containment scans return the first
    matching block in that order, so overlapping blocks resolve to whichever
    was supplied first.

    The only mutator is set_layout_blocks(), which swaps the whole tuple.
    Callers that hold ``blocks`` keep a consistent snapshot even if the
    registry is replaced afterwards.
    """

    def __init__(self, blocks: Iterable[LayoutBlock] = ()):
        self._blocks: Tuple[LayoutBlock, ...] = ()
        self._version = 0
        self.set_layout_blocks(blocks)

    @staticmethod
    def contains(block: LayoutBlock, target: Union[NormalizedPoint, NormalizedRect]) -> bool:
        """Point or rect-center containment for a block."""
        return block.contains(target)

    @property
    def blocks(self) -> Tuple[LayoutBlock, ...]:
        """Current immutable snapshot."""
        return self._blocks

    @property
    def version(self) -> int:
        """Incremented on every replacement."""
        return self._version

    def set_layout_blocks(self, blocks: Iterable[LayoutBlock]):
        """Replace the block list atomically."""
        snapshot = tuple(blocks)
        self._warn_on_duplicate_orders(snapshot)
        self._blocks = snapshot
        self._version += 1

    def load_blocks(self, items: Iterable[Dict[str, Any]]):
        """Replace the block list from plain mappings (see LayoutBlock.from_dict)."""
        self.set_layout_blocks(LayoutBlock.from_dict(item) for item in items)

    def has_layout_blocks(self) -> bool:
        return bool(self._blocks)

    def _warn_on_duplicate_orders(self, blocks: Tuple[LayoutBlock, ...]):
        counts = Counter(b.reading_order for b in blocks if b.in_flow)
        duplicates = sorted(order for order, n in counts.items() if n > 1)
        if duplicates:
            logger.warning(
                "Duplicate reading orders %s; first block in list order wins ties",
                duplicates,
            )

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[LayoutBlock]:
        return iter(self._blocks)

    def __repr__(self) -> str:
        return f"LayoutRegistry(blocks={len(self._blocks)}, version={self._version})"
