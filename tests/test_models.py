from __future__ import annotations

import pytest

from readflow import LayoutBlock, NormalizedPoint, NormalizedRect, SelectionArea, TextFragment

from conftest import make_block


def test_layout_block_defaults():
    block = LayoutBlock()

    assert block.id == ""
    assert block.page == -1
    assert block.reading_order == -1
    assert block.confidence == 0.0
    assert block.block_type == ""
    assert not block.in_flow


def test_layout_block_parameterized():
    block = LayoutBlock("test_block_1", 0, NormalizedRect(0.1, 0.2, 0.5, 0.8), "TEXT", 0, 0.95)

    assert block.id == "test_block_1"
    assert block.page == 0
    assert block.block_type == "TEXT"
    assert block.reading_order == 0
    assert block.confidence == 0.95
    assert block.bbox.to_tuple() == (0.1, 0.2, 0.5, 0.8)


def test_contains_point_inside_outside_and_corners():
    block = make_block("left", (0.0, 0.0, 0.45, 1.0), 0)

    assert block.contains(NormalizedPoint(0.2, 0.5))
    assert not block.contains(NormalizedPoint(0.7, 0.5))
    assert block.contains(NormalizedPoint(0.0, 0.0))
    assert block.contains(NormalizedPoint(0.45, 1.0))


def test_contains_point_edges_inclusive():
    block = make_block("b", (0.25, 0.25, 0.75, 0.75), 0)

    for point in [(0.25, 0.5), (0.75, 0.5), (0.5, 0.25), (0.5, 0.75)]:
        assert block.contains(NormalizedPoint(*point))

    for point in [(0.24, 0.5), (0.76, 0.5), (0.5, 0.24), (0.5, 0.76)]:
        assert not block.contains(NormalizedPoint(*point))


def test_contains_rect_uses_center():
    block = make_block("b", (0.0, 0.0, 0.5, 1.0), 0)

    assert block.contains(NormalizedRect(0.1, 0.3, 0.3, 0.7))
    assert not block.contains(NormalizedRect(0.6, 0.3, 0.9, 0.7))


def test_contains_rect_spanning_boundary():
    block = make_block("b", (0.0, 0.0, 0.5, 1.0), 0)

    # Center (0.45, 0.5) inside even though the rect sticks out
    assert block.contains(NormalizedRect(0.3, 0.3, 0.6, 0.7))
    # Center (0.6, 0.5) outside even though the rect overlaps
    assert not block.contains(NormalizedRect(0.4, 0.3, 0.8, 0.7))
    # Center exactly on the right edge
    assert block.contains(NormalizedRect(0.4, 0.3, 0.6, 0.7))


def test_rect_intersects_excludes_touching_edges():
    a = NormalizedRect(0.1, 0.1, 0.2, 0.2)

    assert a.intersects(NormalizedRect(0.15, 0.15, 0.3, 0.3))
    assert not a.intersects(NormalizedRect(0.2, 0.1, 0.3, 0.2))
    assert not a.intersects(NormalizedRect(0.5, 0.5, 0.6, 0.6))


def test_rect_fitz_round_trip_scaling():
    rect = NormalizedRect(0.1, 0.2, 0.5, 0.4)

    page_rect = rect.to_fitz(200, 100)
    assert tuple(page_rect) == pytest.approx((20, 20, 100, 40))
    assert NormalizedRect.from_fitz(page_rect, 200, 100).to_tuple() == pytest.approx(
        rect.to_tuple()
    )


def test_block_from_dict_accepts_camel_case_keys():
    block = LayoutBlock.from_dict(
        {
            "id": "col",
            "page": 2,
            "bbox": [0.0, 0.1, 0.5, 0.9],
            "blockType": "TEXT",
            "readingOrder": 3,
            "confidence": 0.7,
        }
    )

    assert block.id == "col"
    assert block.page == 2
    assert block.block_type == "TEXT"
    assert block.reading_order == 3
    assert LayoutBlock.from_dict(block.to_dict()) == block


@pytest.mark.parametrize(
    "bbox",
    [
        [0.5, 0.0, 0.1, 1.0],
        [0.0, 0.9, 0.5, 0.1],
        [0.0, 0.0, 0.5],
    ],
)
def test_block_from_dict_rejects_malformed_bbox(bbox):
    with pytest.raises(ValueError):
        LayoutBlock.from_dict({"id": "bad", "bbox": bbox, "readingOrder": 0})


def test_fragment_center():
    fragment = TextFragment("word", NormalizedRect(0.1, 0.2, 0.3, 0.4))

    assert fragment.center.x == pytest.approx(0.2)
    assert fragment.center.y == pytest.approx(0.3)


def test_selection_area_emptiness():
    fragment = TextFragment("word", NormalizedRect(0.1, 0.1, 0.2, 0.2))

    assert SelectionArea().is_empty
    assert not SelectionArea([fragment]).is_empty
    assert len(SelectionArea([fragment])) == 1
