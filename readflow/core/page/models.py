from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union

import fitz

# ==============================================================================
# Types
# ==============================================================================


class InclusionMode(Enum):
    """How a text fragment is matched against a selection area."""

    ANY_PIXEL = "any_pixel"  # Fragment rect intersects the area
    CENTRAL_PIXEL = "central_pixel"  # Fragment center lies inside the area


# ==============================================================================
# Geometry Objects
# ==============================================================================


@dataclass(frozen=True)
class NormalizedPoint:
    """A point in page-normalized coordinates ([0,1] x [0,1])."""

    x: float
    y: float


@dataclass(frozen=True)
class NormalizedRect:
    """An axis-aligned rectangle in page-normalized coordinates."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> NormalizedPoint:
        return NormalizedPoint(
            (self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0
        )

    @property
    def is_valid(self) -> bool:
        return self.left <= self.right and self.top <= self.bottom

    def contains(self, x: float, y: float) -> bool:
        """Check if a point is within this rect, boundaries inclusive."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def intersects(self, other: "NormalizedRect") -> bool:
        """Check for a real overlap; rects that only touch do not intersect."""
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )

    def united(self, other: "NormalizedRect") -> "NormalizedRect":
        """Bounding box of both rects."""
        return NormalizedRect(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def to_fitz(self, width: float, height: float) -> fitz.Rect:
        """Scale to page coordinates for painting."""
        return fitz.Rect(
            self.left * width,
            self.top * height,
            self.right * width,
            self.bottom * height,
        )

    @classmethod
    def from_fitz(cls, rect: fitz.Rect, width: float, height: float) -> "NormalizedRect":
        """Normalize a page-space rect against the page dimensions."""
        if width <= 0 or height <= 0:
            return cls()
        return cls(rect.x0 / width, rect.y0 / height, rect.x1 / width, rect.y1 / height)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)


# ==============================================================================
# Layout Objects
# ==============================================================================


@dataclass(frozen=True)
class LayoutBlock:
    """
    A rectangular reading region with an externally assigned reading order.

    A reading order of -1 marks the block as out of the reading flow.
    """

    id: str = ""
    page: int = -1
    bbox: NormalizedRect = field(default_factory=NormalizedRect)
    block_type: str = ""
    reading_order: int = -1
    confidence: float = 0.0  # Informational only

    @property
    def in_flow(self) -> bool:
        return self.reading_order >= 0

    def contains(self, target: Union[NormalizedPoint, NormalizedRect]) -> bool:
        """
        Check if a point or rect belongs to this block.

        Points use inclusive bbox containment. Rects are tested by their
        center, so a rect straddling the block edge lands on exactly one side.
        """
        if isinstance(target, NormalizedRect):
            target = target.center
        return self.bbox.contains(target.x, target.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "page": self.page,
            "bbox": list(self.bbox.to_tuple()),
            "block_type": self.block_type,
            "reading_order": self.reading_order,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutBlock":
        """
        Build a block from a plain mapping.

        Accepts ``bbox`` as a 4-item sequence (left, top, right, bottom) and
        the camelCase keys ``blockType`` / ``readingOrder`` used by layout
        metadata writers.
        """
        raw_bbox = data.get("bbox", (0.0, 0.0, 0.0, 0.0))
        if len(raw_bbox) != 4:
            raise ValueError(f"bbox must have 4 values, got {len(raw_bbox)}")

        bbox = NormalizedRect(*(float(v) for v in raw_bbox))
        if not bbox.is_valid:
            raise ValueError(f"bbox edges out of order: {bbox.to_tuple()}")

        return cls(
            id=str(data.get("id", "")),
            page=int(data.get("page", -1)),
            bbox=bbox,
            block_type=str(data.get("block_type", data.get("blockType", ""))),
            reading_order=int(data.get("reading_order", data.get("readingOrder", -1))),
            confidence=float(data.get("confidence", 0.0)),
        )


# ==============================================================================
# Text Layer Objects
# ==============================================================================


@dataclass(frozen=True)
class TextFragment:
    """An atomic piece of extracted text (usually a word) with its area."""

    text: str
    area: NormalizedRect

    @property
    def center(self) -> NormalizedPoint:
        return self.area.center

    def contains_point(self, x: float, y: float) -> bool:
        """Check if point is within fragment bounds."""
        return self.area.contains(x, y)
