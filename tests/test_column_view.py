"""Unit tests for ColumnView focus movement between columns."""

from __future__ import annotations

import pytest

from carrion_manager.column_view import ColumnView
from carrion_manager.drawable import Rect
from carrion_manager.tui_state import Command, TUIContext

from fake_terminal import DOWN, ENTER, LEFT, RIGHT, FakeTerminal


@pytest.fixture
def view(ctx: TUIContext) -> ColumnView:
    """Four columns: empty, three items, empty, five items."""
    column_view = ColumnView(ctx, Rect(0, 0, 80, 10), ctx.theme.content_bg, ctx.theme.content_fg, 4)
    for column in range(4):
        column_view.add_list_box(column, f"Column {column}")
    column_view.columns[1].set_items(["a", "b", "c"])
    column_view.columns[3].set_items(["v", "w", "x", "y", "z"])
    return column_view


def test_default_focus_skips_empty_columns(view: ColumnView) -> None:
    view.navigate_to_default()

    assert view.current_column == 1
    assert view.current_row == 0
    assert view.is_active


def test_navigate_right_skips_to_next_eligible_column_on_same_row(view: ColumnView) -> None:
    view.navigate_to_default()
    view.navigate_down()
    view.navigate_down()

    view.navigate_right()

    assert view.current_column == 3
    assert view.current_row == 2
    assert view.columns[1].selected_index == -1


def test_navigate_left_clamps_row_to_shorter_column(view: ColumnView) -> None:
    view.navigate_to_last_column(4)
    assert view.current_column == 3
    assert view.current_row == 4

    view.navigate_left()

    assert view.current_column == 1
    assert view.current_row == 2


def test_horizontal_guards(view: ColumnView) -> None:
    view.navigate_to_default()
    assert view.can_navigate_right
    assert not view.can_navigate_left

    view.navigate_right()
    assert view.can_navigate_left
    assert not view.can_navigate_right


def test_navigate_right_at_last_column_does_nothing(view: ColumnView) -> None:
    view.navigate_to_last_column(0)
    view.navigate_right()

    assert view.current_column == 3


def test_text_box_columns_never_take_focus(ctx: TUIContext) -> None:
    view = ColumnView(ctx, Rect(0, 0, 80, 10), ctx.theme.content_bg, ctx.theme.content_fg, 2)
    view.add_text_box(0, "Details").write_line("hello")
    view.add_list_box(1).set_items(["only"])

    view.navigate_to_default()

    assert view.current_column == 1
    assert not view.can_navigate_left


def test_nothing_to_focus(ctx: TUIContext) -> None:
    view = ColumnView(ctx, Rect(0, 0, 80, 10), ctx.theme.content_bg, ctx.theme.content_fg, 3)
    view.add_list_box(0)

    view.navigate_to_default()

    assert not view.can_navigate
    assert not view.is_active
    assert view.focused is None
    assert view.current_row == -1


def test_deactivate_drops_focus(view: ColumnView) -> None:
    view.navigate_to_default()
    view.deactivate()

    assert view.current_column == -1
    assert not view.columns[1].is_active


def test_headers_are_painted(view: ColumnView, terminal: FakeTerminal) -> None:
    view.paint()

    assert "Column 0" in terminal.row(0)[:20]
    assert "Column 3" in terminal.row(0)[60:]


def test_prompt_selection_reports_column_list_and_item(view: ColumnView, terminal: FakeTerminal) -> None:
    terminal.feed(RIGHT, DOWN, LEFT, ENTER)

    selection = view.prompt_selection()

    assert selection.command == Command.CONFIRM
    assert selection.column == 1
    assert selection.row == 1
    assert selection.list is view.columns[1]
    assert selection.text == "b"
