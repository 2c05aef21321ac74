"""Shared fixtures for the widget and window tests."""

from __future__ import annotations

import logging

import pytest

from carrion_manager.key_bindings import KeyBindings
from carrion_manager.tui_state import TUIContext

from fake_terminal import FakeTerminal


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def ctx(terminal: FakeTerminal) -> TUIContext:
    return TUIContext(terminal, KeyBindings.default())


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("carrion_manager.tests")
