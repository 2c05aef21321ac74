"""Unit tests for ListBox: selection, scrolling, listeners and its input loop."""

from __future__ import annotations

from typing import List

import pytest

from carrion_manager.drawable import Rect
from carrion_manager.list_box import ListBox
from carrion_manager.navigable import SelectionChangedEvent
from carrion_manager.tui_state import Command, SelectionStatus, TUIContext

from fake_terminal import DOWN, ENTER, ESCAPE, PAGE_DOWN, PAGE_UP, UP, FakeTerminal


@pytest.fixture
def list_box(ctx: TUIContext) -> ListBox:
    box = ListBox(ctx, Rect(0, 0, 20, 3), ctx.theme.content_bg, ctx.theme.content_fg)
    box.set_items([f"item {i}" for i in range(5)])
    return box


def test_set_items_starts_deselected(list_box: ListBox) -> None:
    assert list_box.selected_index == -1
    assert list_box.selected_item is None
    assert not list_box.is_active
    assert list_box.can_navigate


def test_navigating_down_scrolls_the_viewport(list_box: ListBox, terminal: FakeTerminal) -> None:
    """Five items in a three row viewport: selecting the last one shows items 2 to 4."""
    list_box.select_first_item()
    for _ in range(4):
        list_box.navigate_down()

    assert list_box.selected_index == 4
    assert list_box.scroll_offset == 2
    assert [item.visible for item in list_box.items] == [False, False, True, True, True]
    assert "item 2" in terminal.row(0)
    assert "item 4" in terminal.row(2)
    assert terminal.row(2).startswith("[item 4")


def test_navigating_up_scrolls_back(list_box: ListBox) -> None:
    list_box.select_last_item()
    list_box.select(1)

    assert list_box.scroll_offset == 1
    assert list_box.items[1].rect.top == 0


def test_select_clamps_index(list_box: ListBox) -> None:
    list_box.select(42)
    assert list_box.selected_index == 4

    list_box.select(-7)
    assert list_box.selected_index == 0


def test_select_only_updates_statuses(list_box: ListBox) -> None:
    list_box.select(1)
    list_box.select(3)

    statuses = [item.status for item in list_box.items]
    assert statuses == [SelectionStatus.NONE] * 3 + [SelectionStatus.SELECTED, SelectionStatus.NONE]


def test_listeners_get_previous_and_new_selection(list_box: ListBox) -> None:
    events: List[SelectionChangedEvent] = []
    list_box.on_selection_changed(events.append)

    list_box.select(0)
    list_box.select(2)

    assert [(e.previous_index, e.selected_index) for e in events] == [(-1, 0), (0, 2)]
    assert events[1].previous_item is list_box.items[0]
    assert events[1].selected_item is list_box.items[2]


def test_selecting_the_same_index_again_does_not_notify(list_box: ListBox) -> None:
    events: List[SelectionChangedEvent] = []
    list_box.select(2)
    list_box.on_selection_changed(events.append)

    list_box.select(2)
    list_box.select_current_item()

    assert events == []
    assert list_box.items[2].status == SelectionStatus.SELECTED


def test_reentering_after_deactivate_notifies(list_box: ListBox) -> None:
    events: List[SelectionChangedEvent] = []
    list_box.on_selection_changed(events.append)
    list_box.select(0)

    list_box.deactivate()
    list_box.select(0)

    assert list_box.items[0].status == SelectionStatus.SELECTED
    assert len(events) == 2


def test_scroll_is_clamped(list_box: ListBox) -> None:
    list_box.scroll(100)
    assert list_box.scroll_offset == list_box.max_scroll == 2

    list_box.scroll(-100)
    assert list_box.scroll_offset == 0


def test_scroll_without_overflow_stays_put(ctx: TUIContext) -> None:
    box = ListBox(ctx, Rect(0, 0, 20, 5), ctx.theme.content_bg, ctx.theme.content_fg)
    box.set_items(["a", "b"])

    box.scroll(3)

    assert box.scroll_offset == 0
    assert box.max_scroll == 0


def test_page_navigation_moves_by_height(list_box: ListBox) -> None:
    list_box.select(0)
    list_box.page_down()
    assert list_box.selected_index == 3

    list_box.page_down()
    assert list_box.selected_index == 4

    list_box.page_up()
    assert list_box.selected_index == 1


def test_edge_guards(list_box: ListBox) -> None:
    list_box.select(0)
    assert not list_box.can_navigate_up
    assert list_box.can_navigate_down
    assert not list_box.can_navigate_left and not list_box.can_navigate_right

    list_box.select_last_item()
    assert list_box.can_navigate_up
    assert not list_box.can_navigate_down


def test_empty_list_cannot_navigate(ctx: TUIContext) -> None:
    box = ListBox(ctx, Rect(0, 0, 20, 3), ctx.theme.content_bg, ctx.theme.content_fg)

    box.select(0)

    assert not box.can_navigate
    assert box.selected_item is None


def test_items_carry_payloads(ctx: TUIContext) -> None:
    box = ListBox(ctx, Rect(0, 0, 20, 3), ctx.theme.content_bg, ctx.theme.content_fg)
    box.add_items([("first", 1), "second"])

    assert [item.payload for item in box.items] == [1, None]


def test_check_box_toggles(ctx: TUIContext, terminal: FakeTerminal) -> None:
    box = ListBox(ctx, Rect(0, 0, 20, 3), ctx.theme.content_bg, ctx.theme.content_fg)
    check_box = box.add_check_box("WIP only")
    separator = box.add_separator()

    assert check_box.toggle() is True
    assert "[x] WIP only" in terminal.row(0)
    assert not separator.enabled


def test_prompt_selection_returns_confirmed_row(list_box: ListBox, terminal: FakeTerminal) -> None:
    """The loop starts on the default row, consumes navigation and hands Confirm back."""
    terminal.feed(DOWN, DOWN, UP, DOWN, ENTER)

    selection = list_box.prompt_selection()

    assert selection.command == Command.CONFIRM
    assert selection.row == 2
    assert selection.list is list_box
    assert selection.text == "item 2"


def test_prompt_selection_ignores_moves_past_the_ends(list_box: ListBox, terminal: FakeTerminal) -> None:
    terminal.feed(UP, PAGE_UP, *([DOWN] * 10), PAGE_DOWN, "x", ESCAPE)

    selection = list_box.prompt_selection()

    assert selection.command == Command.CANCEL
    assert selection.row == 4


def test_prompt_selection_hands_back_window_switch(list_box: ListBox, terminal: FakeTerminal) -> None:
    terminal.feed("3")

    selection = list_box.prompt_selection()

    assert selection.command == Command.SHOW_MAP_EDITOR
    assert selection.row == 0
