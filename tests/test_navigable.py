"""Unit tests for the shared Navigable input loop."""

from __future__ import annotations

from typing import List

from carrion_manager.navigable import Navigable
from carrion_manager.tui_state import Command, TUIContext

from fake_terminal import DOWN, ENTER, LEFT, PAGE_DOWN, PAGE_UP, RIGHT, UP, FakeTerminal


class Grid(Navigable):
    """A width x height grid of cells, only recording where the focus is."""

    def __init__(self, ctx: TUIContext, width: int, height: int) -> None:
        self.ctx = ctx
        self.width = width
        self.height = height
        self.row = -1
        self.column = -1
        self.calls: List[str] = []

    @property
    def can_navigate(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def can_navigate_up(self) -> bool:
        return self.row > 0

    @property
    def can_navigate_down(self) -> bool:
        return 0 <= self.row < self.height - 1

    @property
    def can_navigate_left(self) -> bool:
        return self.column > 0

    @property
    def can_navigate_right(self) -> bool:
        return 0 <= self.column < self.width - 1

    @property
    def is_active(self) -> bool:
        return self.row >= 0

    @property
    def current_row(self) -> int:
        return self.row

    @property
    def current_column(self) -> int:
        return self.column

    def deactivate(self) -> None:
        self.row = self.column = -1

    def navigate_up(self) -> None:
        self.calls.append("up")
        self.row -= 1

    def navigate_down(self) -> None:
        self.calls.append("down")
        self.row += 1

    def navigate_left(self) -> None:
        self.calls.append("left")
        self.column -= 1

    def navigate_right(self) -> None:
        self.calls.append("right")
        self.column += 1

    def page_up(self) -> None:
        self.calls.append("page_up")
        self.row = 0

    def page_down(self) -> None:
        self.calls.append("page_down")
        self.row = self.height - 1

    def navigate_to_default(self) -> None:
        self.calls.append("default")
        self.row = self.column = 0

    def navigate_to_first_row(self, _column: int) -> None:
        self.row, self.column = 0, _column

    def navigate_to_last_row(self, _column: int) -> None:
        self.row, self.column = self.height - 1, _column

    def navigate_to_first_column(self, _row: int) -> None:
        self.row, self.column = _row, 0

    def navigate_to_last_column(self, _row: int) -> None:
        self.row, self.column = _row, self.width - 1

    def paint(self) -> None:
        pass


def test_inactive_navigable_is_activated_first(ctx: TUIContext, terminal: FakeTerminal) -> None:
    grid = Grid(ctx, 2, 2)
    terminal.feed(ENTER)

    result = grid.prompt_input()

    assert grid.calls == ["default"]
    assert result.navigable is grid
    assert (result.column, result.row, result.command) == (0, 0, Command.CONFIRM)


def test_active_navigable_keeps_its_position(ctx: TUIContext, terminal: FakeTerminal) -> None:
    grid = Grid(ctx, 3, 3)
    grid.navigate_to_last_row(2)
    terminal.feed(ENTER)

    result = grid.prompt_input()

    assert "default" not in grid.calls
    assert (result.column, result.row) == (2, 2)


def test_blocked_directions_are_not_dispatched(ctx: TUIContext, terminal: FakeTerminal) -> None:
    grid = Grid(ctx, 2, 2)
    terminal.feed(UP, LEFT, PAGE_UP, RIGHT, RIGHT, DOWN, DOWN, PAGE_DOWN, ENTER)

    grid.prompt_input()

    assert grid.calls == ["default", "right", "down"]


def test_page_commands_use_vertical_guards(ctx: TUIContext, terminal: FakeTerminal) -> None:
    grid = Grid(ctx, 1, 5)
    terminal.feed(PAGE_DOWN, PAGE_UP, ENTER)

    grid.prompt_input()

    assert grid.calls == ["default", "page_down", "page_up"]


def test_unmapped_keys_are_ignored(ctx: TUIContext, terminal: FakeTerminal) -> None:
    grid = Grid(ctx, 1, 1)
    terminal.feed("q", "z", "2")

    result = grid.prompt_input()

    assert result.command == Command.SHOW_MAP_INSTALLER
