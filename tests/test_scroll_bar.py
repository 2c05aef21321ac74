"""Unit tests for the ScrollBar thumb geometry and painting."""

from __future__ import annotations

import pytest

from carrion_manager.drawable import Rect
from carrion_manager.scroll_bar import ScrollBar
from carrion_manager.tui_state import TUIContext

from fake_terminal import FakeTerminal


def _bar(ctx: TUIContext, height: int, scroll: int, max_scroll: int, force_show: bool = False) -> ScrollBar:
    bar = ScrollBar(ctx, Rect(10, 0, 1, height), force_show)
    bar.scroll = scroll
    bar.max_scroll = max_scroll
    return bar


@pytest.mark.parametrize(
    ("scroll", "expected"),
    [
        (0, (0, 1, 2)),
        (1, (1, 1, 1)),
        (2, (2, 1, 0)),
    ],
)
def test_segments_for_small_list(ctx: TUIContext, scroll: int, expected: tuple) -> None:
    assert _bar(ctx, 3, scroll, 2).segments() == expected


def test_thumb_never_shrinks_below_one_cell(ctx: TUIContext) -> None:
    assert _bar(ctx, 10, 0, 1000).thumb_height() == 1


def test_thumb_fills_bar_without_scrolling(ctx: TUIContext) -> None:
    bar = _bar(ctx, 5, 0, 0)
    assert bar.thumb_height() == 5
    assert bar.thumb_top() == 0


def test_thumb_only_touches_the_ends_at_the_ends(ctx: TUIContext) -> None:
    """Scrolled a little keeps a gap at the top, almost at the end keeps a gap at the bottom."""
    assert _bar(ctx, 10, 1, 100).thumb_top() == 1
    assert _bar(ctx, 10, 99, 100).thumb_top() == 8
    assert _bar(ctx, 10, 100, 100).thumb_top() == 9


def test_segments_always_sum_to_height(ctx: TUIContext) -> None:
    for max_scroll in range(1, 30):
        for scroll in range(max_scroll + 1):
            above, thumb, below = _bar(ctx, 7, scroll, max_scroll).segments()
            assert above >= 0 and thumb >= 1 and below >= 0
            assert above + thumb + below == 7


def test_paint_draws_thumb_in_thumb_color(ctx: TUIContext, terminal: FakeTerminal) -> None:
    bar = ScrollBar(ctx, Rect(10, 0, 1, 3))
    bar.update(2, 2)

    assert terminal.fill_at(10, 2) == ctx.theme.scroll_bar_fg
    assert terminal.fill_at(10, 0) == ctx.theme.scroll_bar_bg


def test_paint_hidden_without_scrolling(ctx: TUIContext, terminal: FakeTerminal) -> None:
    bar = ScrollBar(ctx, Rect(10, 0, 1, 3))
    bar.update(0, 0)

    assert not bar.is_shown
    assert terminal.fill_at(10, 1) == ctx.theme.content_bg


def test_force_shown_bar_draws_empty_track(ctx: TUIContext, terminal: FakeTerminal) -> None:
    bar = ScrollBar(ctx, Rect(10, 0, 1, 3), True)
    bar.update(0, 0)

    assert bar.is_shown
    assert all(terminal.fill_at(10, y) == ctx.theme.scroll_bar_bg for y in range(3))
