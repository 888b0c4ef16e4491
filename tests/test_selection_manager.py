from __future__ import annotations

import pyperclip
import pytest

from readflow import NormalizedPoint, TextPage
from readflow.core.selection import SelectionManager


@pytest.fixture
def manager(column_jump_page):
    manager = SelectionManager()
    manager.set_pages({0: column_jump_page})
    return manager


def test_drag_updates_selection_and_emits(manager):
    events = []
    manager.selection_changed.connect(lambda: events.append("changed"))

    manager.start_selection(0, NormalizedPoint(0.1, 0.4))
    manager.extend_selection(0, NormalizedPoint(0.9, 0.7))
    manager.finish_selection()

    assert events == ["changed", "changed"]
    assert manager.has_selection()
    assert not manager.is_selecting
    assert manager.get_selected_text() == "L3R1R2R3Footer"
    assert manager.get_selected_block_ids() == ["left", "right", "footer"]


def test_focus_on_other_page_is_ignored(manager):
    manager.start_selection(0, NormalizedPoint(0.1, 0.1))
    manager.extend_selection(0, NormalizedPoint(0.15, 0.3))
    before = manager.get_selected_text()

    manager.extend_selection(1, NormalizedPoint(0.9, 0.9))

    assert manager.get_selected_text() == before == "L1L2"
    assert manager.focus.page_index == 0


def test_selection_rects_are_scaled_to_page(manager):
    manager.start_selection(0, NormalizedPoint(0.15, 0.15))

    rects = manager.get_selection_rects(0, width=200, height=100)

    assert rects == [pytest.approx((20.0, 10.0, 40.0, 20.0))]
    assert manager.get_selection_rects(3) == []


def test_copy_selected_text_uses_clipboard(manager, monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    manager.start_selection(0, NormalizedPoint(0.1, 0.4))
    manager.extend_selection(0, NormalizedPoint(0.65, 0.15))

    assert manager.copy_selected_text() == "L3R1"
    assert copied == ["L3R1"]


def test_copy_without_selection_leaves_clipboard_alone(manager, monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    assert manager.copy_selected_text() == ""
    assert copied == []


def test_clear_emits_only_when_something_was_selected(manager):
    cleared = []
    manager.selection_cleared.connect(lambda: cleared.append(True))

    manager.clear()
    assert cleared == []

    manager.start_selection(0, NormalizedPoint(0.15, 0.15))
    manager.clear()

    assert cleared == [True]
    assert not manager.has_selection()
    assert manager.get_selected_text() == ""


def test_select_all(manager, column_jump_page):
    manager.select_all(0)

    assert manager.get_selected_text() == "L1L2L3R1R2R3Footer"
    assert len(manager.selection) == len(column_jump_page.fragments)


def test_drag_on_page_without_text_is_not_a_selection():
    manager = SelectionManager()
    manager.set_pages({0: TextPage()})

    manager.start_selection(0, NormalizedPoint(0.1, 0.1))
    manager.extend_selection(0, NormalizedPoint(0.9, 0.9))

    assert manager.selection is None
    assert not manager.has_selection()
