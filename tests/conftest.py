from __future__ import annotations

import pytest

from readflow import LayoutBlock, NormalizedRect, TextFragment, TextPage


def make_block(block_id, bbox, order, block_type="TEXT", confidence=1.0):
    return LayoutBlock(
        id=block_id,
        page=0,
        bbox=NormalizedRect(*bbox),
        block_type=block_type,
        reading_order=order,
        confidence=confidence,
    )


def make_fragment(text, left, top, right, bottom):
    return TextFragment(text, NormalizedRect(left, top, right, bottom))


@pytest.fixture
def two_column_page():
    """Left column (order 0) and right column (order 1), three words each."""
    fragments = [
        make_fragment("Left", 0.1, 0.1, 0.2, 0.15),
        make_fragment("Column", 0.1, 0.2, 0.25, 0.25),
        make_fragment("Text", 0.1, 0.3, 0.2, 0.35),
        make_fragment("Right", 0.6, 0.1, 0.7, 0.15),
        make_fragment("Column", 0.6, 0.2, 0.75, 0.25),
        make_fragment("Content", 0.6, 0.3, 0.75, 0.35),
    ]
    blocks = [
        make_block("left", (0.0, 0.0, 0.45, 1.0), 0),
        make_block("right", (0.55, 0.0, 1.0, 1.0), 1),
    ]
    return TextPage(fragments, blocks)


@pytest.fixture
def full_width_page():
    """
    header(0)
    left_top(1)  right_top(3)
    left_bot(2)  right_bot(4)
    footer(5)
    """
    fragments = [
        make_fragment("Header", 0.1, 0.02, 0.9, 0.08),
        make_fragment("LeftTop", 0.1, 0.15, 0.35, 0.25),
        make_fragment("LeftBot", 0.1, 0.35, 0.35, 0.45),
        make_fragment("RightTop", 0.6, 0.15, 0.85, 0.25),
        make_fragment("RightBot", 0.6, 0.35, 0.85, 0.45),
        make_fragment("Footer", 0.1, 0.55, 0.9, 0.65),
    ]
    blocks = [
        make_block("header", (0.0, 0.0, 1.0, 0.1), 0),
        make_block("left_top", (0.0, 0.1, 0.45, 0.3), 1),
        make_block("left_bot", (0.0, 0.3, 0.45, 0.5), 2),
        make_block("right_top", (0.55, 0.1, 1.0, 0.3), 3),
        make_block("right_bot", (0.55, 0.3, 1.0, 0.5), 4),
        make_block("footer", (0.0, 0.5, 1.0, 0.7), 5),
    ]
    return TextPage(fragments, blocks)


@pytest.fixture
def column_jump_page():
    """Two columns of three lines each, then a footer."""
    fragments = [
        make_fragment("L1", 0.1, 0.1, 0.2, 0.2),
        make_fragment("L2", 0.1, 0.25, 0.2, 0.35),
        make_fragment("L3", 0.1, 0.4, 0.2, 0.5),
        make_fragment("R1", 0.6, 0.1, 0.7, 0.2),
        make_fragment("R2", 0.6, 0.25, 0.7, 0.35),
        make_fragment("R3", 0.6, 0.4, 0.7, 0.5),
        make_fragment("Footer", 0.1, 0.6, 0.9, 0.7),
    ]
    blocks = [
        make_block("left", (0.0, 0.0, 0.45, 0.55), 0),
        make_block("right", (0.55, 0.0, 1.0, 0.55), 1),
        make_block("footer", (0.0, 0.55, 1.0, 0.75), 2),
    ]
    return TextPage(fragments, blocks)


@pytest.fixture
def tight_lines_page():
    """Two closely spaced lines on the left, one line on the right."""
    fragments = [
        make_fragment("L1", 0.1, 0.100, 0.2, 0.110),
        make_fragment("L2", 0.1, 0.119, 0.2, 0.129),
        make_fragment("R1", 0.6, 0.150, 0.7, 0.160),
    ]
    blocks = [
        make_block("left", (0.0, 0.0, 0.45, 1.0), 0),
        make_block("right", (0.55, 0.0, 1.0, 1.0), 1),
    ]
    return TextPage(fragments, blocks)
