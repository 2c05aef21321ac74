"""Unit tests for the carrion-manager command line entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator, List

import pytest

import carrion_manager
from carrion_manager.log_helper import LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    yield
    for handler in logger.handlers:
        if handler not in saved:
            handler.close()
    logger.handlers = saved


def _run(monkeypatch: pytest.MonkeyPatch, args: List[str]) -> int:
    monkeypatch.setattr(sys, "argv", ["carrion-manager", *args])
    with pytest.raises(SystemExit) as excinfo:
        carrion_manager.main()
    return excinfo.value.code


def test_main_builds_catalog_and_runs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    started = []
    monkeypatch.setattr(carrion_manager.MapManager, "run", lambda self: started.append(self.catalog))
    (tmp_path / "maps").mkdir()

    code = _run(monkeypatch, ["--maps-path", str(tmp_path / "maps"),
                              "--game-path", str(tmp_path),
                              "--registry", str(tmp_path / "installed.json"),
                              "--log-file", str(tmp_path / "cm.log"),
                              "--log-level", "DEBUG"])

    assert code == 0
    assert len(started) == 1
    assert started[0].custom_maps_path == str(tmp_path / "maps")
    assert (tmp_path / "cm.log").is_file()


def test_main_exits_on_broken_registry(monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
                                       capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "installed.json").write_text("[{]", encoding="utf-8")
    monkeypatch.setattr(carrion_manager.MapManager, "run", lambda self: pytest.fail("should not start"))

    code = _run(monkeypatch, ["--game-path", str(tmp_path),
                              "--registry", str(tmp_path / "installed.json"),
                              "--log-file", str(tmp_path / "cm.log")])

    assert code == 1
    assert "installed.json" in capsys.readouterr().err


def test_version_flag(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, ["--version"]) == 0
    assert carrion_manager.__version__ in capsys.readouterr().out
