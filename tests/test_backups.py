"""Unit tests for FolderBackupStore: save backups, the auto backup setting and backups of overwritten game files."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from carrion_manager.backups import FolderBackupStore
from carrion_manager.content import Map, read_info_file
from carrion_manager.errors import BackupError


@pytest.fixture
def saves(tmp_path: Path) -> Path:
    path = tmp_path / "Saves"
    path.mkdir()
    (path / "slot1.crn").write_text("progress", encoding="utf-8")
    return path


@pytest.fixture
def game(tmp_path: Path) -> Path:
    path = tmp_path / "Carrion"
    (path / "Content" / "Levels").mkdir(parents=True)
    (path / "Content" / "Scripts").mkdir(parents=True)
    return path


def _store(tmp_path: Path, saves: Path, game: Path, logger: logging.Logger) -> FolderBackupStore:
    return FolderBackupStore(str(saves), str(tmp_path / "Backups"), str(game), logger)


def test_save_without_info_file_belongs_to_the_main_game(tmp_path: Path, saves: Path, game: Path,
                                                         logger: logging.Logger) -> None:
    store = _store(tmp_path, saves, game, logger)

    assert store.current_save_name() == "Main Game"
    assert store.backed_up_save_names() == []


def test_back_up_current_save_copies_saves_and_info(tmp_path: Path, saves: Path, game: Path,
                                                    logger: logging.Logger) -> None:
    (saves / "SaveInfo.txt").write_text("MapName=Deep Tunnels\n", encoding="utf-8")
    store = _store(tmp_path, saves, game, logger)

    name = store.back_up_current_save()

    backup = tmp_path / "Backups" / "Saves" / "Deep Tunnels"
    assert name == "Deep Tunnels"
    assert (backup / "slot1.crn").read_text(encoding="utf-8") == "progress"
    assert read_info_file(str(backup / "SaveInfo.txt")) == {"MapName": "Deep Tunnels"}
    assert store.backed_up_save_names() == ["Deep Tunnels"]


def test_backing_up_the_main_game_writes_its_info_file(tmp_path: Path, saves: Path, game: Path,
                                                       logger: logging.Logger) -> None:
    store = _store(tmp_path, saves, game, logger)

    assert store.back_up_current_save() == "Main Game"
    assert store.current_save_name() == "Main Game"
    assert (saves / "SaveInfo.txt").is_file()


def test_info_file_without_a_map_name_gets_a_timestamped_backup(tmp_path: Path, saves: Path, game: Path,
                                                                logger: logging.Logger) -> None:
    (saves / "SaveInfo.txt").write_text("Other=1\n", encoding="utf-8")
    store = _store(tmp_path, saves, game, logger)

    assert store.current_save_name() == "Unknown"
    assert store.back_up_current_save().endswith(" - Unknown")


def test_swap_saves_keeps_the_current_save(tmp_path: Path, saves: Path, game: Path, logger: logging.Logger) -> None:
    (saves / "SaveInfo.txt").write_text("MapName=Caves\n", encoding="utf-8")
    store = _store(tmp_path, saves, game, logger)
    store.back_up_current_save()

    (saves / "SaveInfo.txt").write_text("MapName=Tunnels\n", encoding="utf-8")
    (saves / "slot1.crn").write_text("tunnels progress", encoding="utf-8")
    store.swap_saves("Caves")

    assert store.current_save_name() == "Caves"
    assert (saves / "slot1.crn").read_text(encoding="utf-8") == "progress"
    assert store.backed_up_save_names() == ["Caves", "Tunnels"]
    tunnels = tmp_path / "Backups" / "Saves" / "Tunnels" / "slot1.crn"
    assert tunnels.read_text(encoding="utf-8") == "tunnels progress"


def test_loading_a_save_that_was_never_backed_up_starts_it_fresh(tmp_path: Path, saves: Path, game: Path,
                                                                 logger: logging.Logger) -> None:
    store = _store(tmp_path, saves, game, logger)

    store.load_backed_up_save("Brand New")

    assert store.current_save_name() == "Brand New"


def test_auto_backup_setting_is_persisted(tmp_path: Path, saves: Path, game: Path, logger: logging.Logger) -> None:
    store = _store(tmp_path, saves, game, logger)
    assert store.auto_backup

    assert store.toggle_auto_backup() is False

    settings = tmp_path / "Backups" / "BackupSettings.txt"
    assert read_info_file(str(settings)) == {"ManageSaves": "false"}
    assert not _store(tmp_path, saves, game, logger).auto_backup


def test_map_files_are_backed_up_and_restored(tmp_path: Path, saves: Path, game: Path,
                                              logger: logging.Logger) -> None:
    levels = game / "Content" / "Levels"
    (levels / "a1.json").write_text("game copy", encoding="utf-8")
    the_map = Map(name="Tunnels", levels=["a1.json", "new.json"], scripts=["s1.cgs"])
    store = _store(tmp_path, saves, game, logger)

    store.back_up_map_files(the_map)
    (levels / "a1.json").write_text("from the map", encoding="utf-8")

    assert store.backed_up_level_names() == ["a1.json"]
    assert store.backed_up_script_names() == []
    assert store.restore_map_files(the_map)
    assert (levels / "a1.json").read_text(encoding="utf-8") == "game copy"
    assert store.backed_up_level_names() == []
    assert not store.restore_map_files(the_map)


def test_unwritable_backup_folder_raises(tmp_path: Path, saves: Path, game: Path, logger: logging.Logger) -> None:
    (tmp_path / "Backups").write_text("not a folder", encoding="utf-8")
    (saves / "SaveInfo.txt").write_text("MapName=Caves\n", encoding="utf-8")
    store = _store(tmp_path, saves, game, logger)

    with pytest.raises(BackupError, match="Caves"):
        store.back_up_current_save()
