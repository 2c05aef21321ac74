"""Unit tests for the horizontal SelectionPrompt."""

from __future__ import annotations

import pytest

from carrion_manager.drawable import Rect
from carrion_manager.errors import InvalidStateError
from carrion_manager.selection_prompt import SelectionPrompt
from carrion_manager.tui_state import TUIContext

from fake_terminal import ENTER, ESCAPE, LEFT, RIGHT, FakeTerminal


@pytest.fixture
def prompt(ctx: TUIContext) -> SelectionPrompt:
    return SelectionPrompt(ctx, Rect(0, 5, 80, 1), ctx.theme.content_bg, ctx.theme.content_fg)


def test_confirming_the_cancel_choice_answers_minus_one(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    """With cancel allowed the prompt shows Install and Cancel, moving right onto Cancel and confirming gives -1."""
    terminal.feed(RIGHT, ENTER)

    assert prompt.prompt_selection(["Install"], SelectionPrompt.Options(allow_cancel=True)) == -1


def test_initial_choice_is_first_enabled(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    terminal.feed(ENTER)

    assert prompt.prompt_selection(["Install"], SelectionPrompt.Options(allow_cancel=True)) == 0


def test_moving_and_confirming(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    terminal.feed(RIGHT, RIGHT, RIGHT, LEFT, ENTER)

    assert prompt.prompt_selection(["A", "B", "C"]) == 1


def test_disabled_choices_are_skipped_at_start_and_refused(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    terminal.feed(LEFT, ENTER, RIGHT, ENTER)

    answer = prompt.prompt_selection(["A", "B"], SelectionPrompt.Options(disabled_items={0}))

    assert answer == 1


def test_explicit_start_index(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    terminal.feed(ENTER)

    assert prompt.prompt_selection(["A", "B", "C"], SelectionPrompt.Options(index=2)) == 2


def test_cancel_command(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    terminal.feed(ESCAPE)

    assert prompt.prompt_selection(["A"], SelectionPrompt.Options(allow_cancel=True)) == -1


def test_cancel_command_ignored_unless_allowed(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    terminal.feed(ESCAPE, ENTER)

    assert prompt.prompt_selection(["A"]) == 0


def test_cancel_choice_stays_enabled(prompt: SelectionPrompt, terminal: FakeTerminal) -> None:
    terminal.feed(ENTER)

    options = SelectionPrompt.Options(allow_cancel=True, disabled_items={0, 1})

    assert prompt.prompt_selection(["A"], options) == -1


def test_no_enabled_choice_is_an_error(prompt: SelectionPrompt) -> None:
    with pytest.raises(InvalidStateError):
        prompt.prompt_selection(["A", "B"], SelectionPrompt.Options(disabled_items={0, 1}))


def test_choices_are_laid_out_and_cleared(
    prompt: SelectionPrompt, terminal: FakeTerminal, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Choices sit side by side with one blank cell between them, and the row is blank again afterwards."""
    seen = []
    read_key = terminal.read_key

    def _read_key_after_snapshot():
        seen.append(terminal.row(5))
        return read_key()

    monkeypatch.setattr(terminal, "read_key", _read_key_after_snapshot)
    terminal.feed(RIGHT, ENTER)

    assert prompt.prompt_selection(["Yes", "No"]) == 1

    assert seen[0].startswith("[Yes]  No ")
    assert seen[1].startswith(" Yes  [No]")
    assert terminal.row(5).strip() == ""
