from dataclasses import dataclass, field
from typing import List, Optional

from readflow.core.page.models import (
    InclusionMode,
    LayoutBlock,
    NormalizedPoint,
    NormalizedRect,
    TextFragment,
)


@dataclass(frozen=True)
class TextSelection:
    """A drag gesture: where it started and where it currently ends."""

    start: NormalizedPoint
    end: NormalizedPoint


@dataclass
class BlockPartition:
    """How a cross-block selection splits over the reading blocks."""

    leading: Optional[LayoutBlock] = None
    full: List[LayoutBlock] = field(default_factory=list)
    trailing: Optional[LayoutBlock] = None

    @property
    def blocks(self) -> List[LayoutBlock]:
        """All involved blocks in reading order."""
        result = [self.leading] if self.leading else []
        result.extend(self.full)
        if self.trailing:
            result.append(self.trailing)
        return result

    @property
    def block_ids(self) -> List[str]:
        return [b.id for b in self.blocks]


@dataclass
class SelectionArea:
    """
    Result of resolving a selection on one page.

    Holds the selected fragments in selection order and the area they
    cover, one rect per fragment.
    """

    fragments: List[TextFragment] = field(default_factory=list)

    @property
    def rects(self) -> List[NormalizedRect]:
        return [f.area for f in self.fragments]

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def contains(self, x: float, y: float) -> bool:
        return any(r.contains(x, y) for r in self.rects)

    def intersects(self, rect: NormalizedRect) -> bool:
        return any(r.intersects(rect) for r in self.rects)

    def matches(self, fragment: TextFragment, mode: InclusionMode) -> bool:
        """Apply an inclusion test to a page fragment."""
        if mode == InclusionMode.ANY_PIXEL:
            return self.intersects(fragment.area)
        center = fragment.center
        return self.contains(center.x, center.y)

    def __len__(self) -> int:
        return len(self.fragments)
