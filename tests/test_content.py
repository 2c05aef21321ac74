"""Unit tests for Map, MapInfo.txt handling and FolderMapCatalog."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

from carrion_manager.content import FolderMapCatalog, Map, read_info_file, remove_level_extension, write_info_file
from carrion_manager.errors import CatalogError


def _make_map(root: Path, folder: str, levels=("a1.json",), scripts=("s1.cgs",), info: str | None = None) -> Path:
    map_path = root / folder
    (map_path / "Levels").mkdir(parents=True)
    if scripts is not None:
        (map_path / "Scripts").mkdir()
        for script in scripts:
            (map_path / "Scripts" / script).write_text("script", encoding="utf-8")
    for level in levels:
        (map_path / "Levels" / level).write_text("{}", encoding="utf-8")
    if info is not None:
        (map_path / "MapInfo.txt").write_text(info, encoding="utf-8")
    return map_path


@pytest.fixture
def maps_root(tmp_path: Path) -> Path:
    root = tmp_path / "CustomMaps"
    root.mkdir()
    return root


@pytest.fixture
def game(tmp_path: Path) -> Path:
    path = tmp_path / "Carrion"
    path.mkdir()
    return path


def _catalog(maps_root: Path, game: Path, logger: logging.Logger) -> FolderMapCatalog:
    return FolderMapCatalog(str(maps_root), str(game), str(game / "installed.json"), logger)


def test_read_info_file(tmp_path: Path) -> None:
    path = tmp_path / "MapInfo.txt"
    path.write_text('MapName="Deep Tunnels"\r\nAuthor = Someone\nVersion=\nLongDescription=line one\\nline two\n',
                    encoding="utf-8")

    info = read_info_file(str(path))

    assert info["MapName"] == "Deep Tunnels"
    assert info["Author"] == "Someone"
    assert "Version" not in info
    assert info["LongDescription"] == "line one\nline two"


def test_write_info_file_round_trips_newlines(tmp_path: Path) -> None:
    path = tmp_path / "MapInfo.txt"

    write_info_file(str(path), {"MapName": "X", "LongDescription": "a\nb", "Author": None})

    assert path.read_text(encoding="utf-8").splitlines()[1] == "LongDescription=a\\nb"
    assert read_info_file(str(path)) == {"MapName": "X", "LongDescription": "a\nb"}


def test_remove_level_extension() -> None:
    assert remove_level_extension("start.json") == "start"
    with pytest.raises(CatalogError):
        remove_level_extension("start.cgs")


def test_map_verify_reports_missing_folders_and_bad_startup(tmp_path: Path) -> None:
    the_map = Map(name="Broken", startup_level="nope", levels=["a.json"], path=str(tmp_path))

    issues = the_map.verify()

    assert len(issues) == 3
    assert not the_map.is_valid
    assert the_map.display_name == "[!] Broken"


def test_map_dict_round_trip_drops_issues() -> None:
    the_map = Map(name="M", author="A", levels=["x.json"], startup_level="x", is_wip=True)

    values = the_map.to_dict()
    restored = Map.from_dict(dict(values, unknown_key=1))

    assert "issues" not in values
    assert restored == the_map


def test_scan_finds_nested_maps_and_reads_info(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    _make_map(maps_root, "Tunnels", info='MapName="Deep Tunnels"\nAuthor=Someone\nIsWIP=True\nStartupLevel=a1\n')
    _make_map(maps_root / "pack", "Caves", levels=("c1.json", "c2.json"))

    catalog = _catalog(maps_root, game, logger)
    maps = {m.name: m for m in catalog.available_maps()}

    assert set(maps) == {"Deep Tunnels", "Caves"}
    assert maps["Deep Tunnels"].author == "Someone"
    assert maps["Deep Tunnels"].is_wip
    assert maps["Deep Tunnels"].is_valid
    assert maps["Caves"].levels == ["c1.json", "c2.json"]


def test_map_without_scripts_folder_has_an_issue(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    _make_map(maps_root, "NoScripts", scripts=None)

    the_map = _catalog(maps_root, game, logger).available_maps()[0]

    assert not the_map.is_valid
    assert "Scripts" in the_map.issues[0]


def test_missing_maps_folder_is_empty(tmp_path: Path, game: Path, logger: logging.Logger) -> None:
    catalog = _catalog(tmp_path / "does-not-exist", game, logger)

    assert catalog.available_maps() == []
    assert catalog.installed_maps() == []


def test_install_copies_files_and_records_map(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    _make_map(maps_root, "Tunnels")
    catalog = _catalog(maps_root, game, logger)

    installed = catalog.install(catalog.available_maps()[0])

    assert (game / "Content" / "Levels" / "a1.json").is_file()
    assert (game / "Content" / "Scripts" / "s1.cgs").is_file()
    assert installed.path is None
    assert installed.startup_level == "a1"
    assert catalog.find_installed("Tunnels") is installed
    assert json.loads((game / "installed.json").read_text(encoding="utf-8"))[0]["name"] == "Tunnels"
    assert [m.name for m in _catalog(maps_root, game, logger).installed_maps()] == ["Tunnels"]


def test_install_twice_is_refused(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    _make_map(maps_root, "Tunnels")
    catalog = _catalog(maps_root, game, logger)
    catalog.install(catalog.available_maps()[0])

    with pytest.raises(CatalogError) as excinfo:
        catalog.install(catalog.available_maps()[0])

    assert excinfo.value.map_name == "Tunnels"


def test_conflicts_need_overwrite(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    _make_map(maps_root, "Tunnels")
    (game / "Content" / "Levels").mkdir(parents=True)
    (game / "Content" / "Levels" / "a1.json").write_text("old", encoding="utf-8")
    catalog = _catalog(maps_root, game, logger)
    the_map = catalog.available_maps()[0]

    assert catalog.conflicting_files(the_map) == ["a1.json"]
    with pytest.raises(CatalogError):
        catalog.install(the_map)

    catalog.install(the_map, True)
    assert (game / "Content" / "Levels" / "a1.json").read_text(encoding="utf-8") == "{}"


def test_uninstall_removes_files_and_record(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    _make_map(maps_root, "Tunnels")
    catalog = _catalog(maps_root, game, logger)
    installed = catalog.install(catalog.available_maps()[0])

    catalog.uninstall(installed)

    assert not (game / "Content" / "Levels" / "a1.json").exists()
    assert catalog.installed_maps() == []
    assert json.loads((game / "installed.json").read_text(encoding="utf-8")) == []


def test_save_map_info_writes_info_file(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    map_path = _make_map(maps_root, "Tunnels")
    catalog = _catalog(maps_root, game, logger)
    the_map = catalog.available_maps()[0]
    the_map.author = "Me"
    the_map.long_description = "two\nlines"

    catalog.save_map_info(the_map)

    info = read_info_file(str(map_path / "MapInfo.txt"))
    assert info["Author"] == "Me"
    assert info["LongDescription"] == "two\nlines"
    assert info["IsWIP"] == "false"
    assert catalog.load_map(str(map_path)).author == "Me"


def test_save_map_info_updates_registry_for_installed(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    _make_map(maps_root, "Tunnels")
    catalog = _catalog(maps_root, game, logger)
    installed = catalog.install(catalog.available_maps()[0])
    installed.version = "2.0"

    catalog.save_map_info(installed)

    assert json.loads((game / "installed.json").read_text(encoding="utf-8"))[0]["version"] == "2.0"


def test_unreadable_registry_raises(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    (game / "installed.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogError):
        _catalog(maps_root, game, logger)


def test_read_info_file_accepts_windows_encodings(tmp_path: Path) -> None:
    cp1252 = tmp_path / "cp1252.txt"
    cp1252.write_bytes(b"MapName=Caf\xe9\r\n")
    bom = tmp_path / "bom.txt"
    bom.write_bytes("\ufeffMapName=Café\n".encode("utf-8"))

    assert read_info_file(str(cp1252)) == {"MapName": "Café"}
    assert read_info_file(str(bom)) == {"MapName": "Café"}


def test_undecodable_info_file_is_a_map_issue(maps_root: Path, game: Path, logger: logging.Logger) -> None:
    """0x81 is undefined in cp1252 too, the map still loads and the rest of the catalog with it."""
    broken = _make_map(maps_root, "Broken")
    (broken / "MapInfo.txt").write_bytes(b"MapName=\x81\x81\n")
    _make_map(maps_root, "Fine", info="MapName=Fine\n")

    maps = {m.name: m for m in _catalog(maps_root, game, logger).available_maps()}

    assert set(maps) == {"Broken", "Fine"}
    assert not maps["Broken"].is_valid
    assert "MapInfo.txt" in maps["Broken"].issues[-1]
    assert maps["Fine"].is_valid


def test_saving_over_an_unreadable_info_file_clears_the_issue(maps_root: Path, game: Path,
                                                              logger: logging.Logger) -> None:
    broken = _make_map(maps_root, "Broken")
    (broken / "MapInfo.txt").write_bytes(b"MapName=\x81\n")
    catalog = _catalog(maps_root, game, logger)
    the_map = catalog.available_maps()[0]

    catalog.save_map_info(the_map)

    assert the_map.is_valid
    assert catalog.load_map(str(broken)).is_valid
    assert "info_error" not in the_map.to_dict()


def test_unlistable_maps_folder_raises(maps_root: Path, game: Path, logger: logging.Logger,
                                       monkeypatch: pytest.MonkeyPatch) -> None:
    def _denied(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("carrion_manager.content.os.scandir", _denied)

    with pytest.raises(CatalogError, match="Could not list custom maps"):
        _catalog(maps_root, game, logger)


@pytest.fixture
def templates(tmp_path: Path) -> Path:
    path = tmp_path / "Templates"
    path.mkdir()
    (path / "EmptyLevel.json").write_text('{"empty": true}', encoding="utf-8")
    (path / "EmptyScript.cgs").write_text("// empty", encoding="utf-8")
    return path


def _editing_catalog(maps_root: Path, game: Path, templates: Path, logger: logging.Logger) -> FolderMapCatalog:
    return FolderMapCatalog(str(maps_root), str(game), str(game / "installed.json"), logger, str(templates))


def test_create_map_records_an_empty_wip_map(maps_root: Path, game: Path, templates: Path,
                                             logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)

    new_map = catalog.create_map("Lab")

    assert new_map.is_wip
    assert new_map.levels == []
    assert json.loads((game / "installed.json").read_text(encoding="utf-8"))[0]["name"] == "Lab"
    with pytest.raises(CatalogError, match="already installed"):
        catalog.create_map("Lab")


def test_add_level_copies_the_templates(maps_root: Path, game: Path, templates: Path,
                                        logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)
    lab = catalog.create_map("Lab")

    catalog.add_level(lab, "entrance")

    assert (game / "Content" / "Levels" / "entrance.json").read_text(encoding="utf-8") == '{"empty": true}'
    assert (game / "Content" / "Scripts" / "entrance.cgs").read_text(encoding="utf-8") == "// empty"
    assert lab.levels == ["entrance.json"]
    assert lab.scripts == ["entrance.cgs"]
    assert catalog.installed_level_names() == ["entrance.json"]
    assert catalog.level_owner("entrance.json") is lab


def test_add_level_refuses_existing_files(maps_root: Path, game: Path, templates: Path,
                                          logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)
    lab = catalog.create_map("Lab")
    catalog.add_level(lab, "entrance")

    with pytest.raises(CatalogError, match="already exists"):
        catalog.add_level(lab, "entrance")

    assert lab.levels == ["entrance.json"]


def test_add_level_needs_the_templates(maps_root: Path, game: Path, tmp_path: Path, logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, tmp_path / "nowhere", logger)
    lab = catalog.create_map("Lab")

    with pytest.raises(CatalogError, match="Template"):
        catalog.add_level(lab, "entrance")

    assert not (game / "Content" / "Levels" / "entrance.json").exists()


def test_rename_level_moves_files_and_startup_level(maps_root: Path, game: Path, templates: Path,
                                                    logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)
    lab = catalog.create_map("Lab")
    catalog.add_level(lab, "entrance")
    lab.startup_level = "entrance"

    catalog.rename_level(lab, "entrance.json", "hall")

    levels = game / "Content" / "Levels"
    assert not (levels / "entrance.json").exists()
    assert (levels / "hall.json").is_file()
    assert (game / "Content" / "Scripts" / "hall.cgs").is_file()
    assert lab.levels == ["hall.json"]
    assert lab.scripts == ["hall.cgs"]
    assert lab.startup_level == "hall"
    assert lab.is_valid


def test_failed_rename_moves_the_level_back(maps_root: Path, game: Path, templates: Path, logger: logging.Logger,
                                            monkeypatch: pytest.MonkeyPatch) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)
    lab = catalog.create_map("Lab")
    catalog.add_level(lab, "entrance")
    real_replace = os.replace

    def _script_locked(source, destination):
        if str(source).endswith(".cgs"):
            raise PermissionError(13, "Permission denied", source)
        real_replace(source, destination)

    monkeypatch.setattr("carrion_manager.content.os.replace", _script_locked)

    with pytest.raises(CatalogError, match="Renaming level"):
        catalog.rename_level(lab, "entrance.json", "hall")

    assert (game / "Content" / "Levels" / "entrance.json").is_file()
    assert not (game / "Content" / "Levels" / "hall.json").exists()
    assert lab.levels == ["entrance.json"]


def test_delete_level_removes_files_and_clears_startup(maps_root: Path, game: Path, templates: Path,
                                                       logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)
    lab = catalog.create_map("Lab")
    catalog.add_level(lab, "entrance")
    lab.startup_level = "entrance"

    catalog.delete_level(lab, "entrance.json")

    assert catalog.installed_level_names() == []
    assert not (game / "Content" / "Scripts" / "entrance.cgs").exists()
    assert lab.levels == []
    assert lab.scripts == []
    assert lab.startup_level is None


def test_assign_and_unassign_keep_the_files(maps_root: Path, game: Path, templates: Path,
                                            logger: logging.Logger) -> None:
    _make_map(maps_root, "Tunnels", levels=("t1.json",), scripts=("t1.cgs",))
    catalog = _editing_catalog(maps_root, game, templates, logger)
    tunnels = catalog.install(catalog.available_maps()[0])
    lab = catalog.create_map("Lab")
    catalog.add_level(lab, "spare")
    catalog.unassign_level(lab, "spare.json")

    assert lab.levels == []
    assert catalog.level_owner("spare.json") is None
    assert (game / "Content" / "Levels" / "spare.json").is_file()

    catalog.assign_level(lab, "spare.json")
    assert lab.levels == ["spare.json"]
    assert lab.scripts == ["spare.cgs"]

    with pytest.raises(CatalogError, match="already belongs to map Tunnels"):
        catalog.assign_level(lab, "t1.json")
    assert catalog.level_owner("t1.json") is tunnels


def test_export_copies_files_and_lists_the_map(maps_root: Path, game: Path, templates: Path,
                                               logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)
    lab = catalog.create_map("Lab")
    catalog.add_level(lab, "entrance")
    lab.author = "Me"

    assert not catalog.export_exists(lab)
    exported = catalog.export_map(lab)

    assert (maps_root / "Lab" / "Levels" / "entrance.json").is_file()
    assert (maps_root / "Lab" / "Scripts" / "entrance.cgs").is_file()
    assert read_info_file(str(maps_root / "Lab" / "MapInfo.txt"))["Author"] == "Me"
    assert exported.path == str(maps_root / "Lab")
    assert exported in catalog.available_maps()
    assert catalog.export_exists(lab)


def test_export_over_an_earlier_export(maps_root: Path, game: Path, templates: Path, logger: logging.Logger) -> None:
    catalog = _editing_catalog(maps_root, game, templates, logger)
    lab = catalog.create_map("Lab")
    catalog.add_level(lab, "entrance")
    catalog.export_map(lab)

    with pytest.raises(CatalogError, match="already exists"):
        catalog.export_map(lab)

    catalog.export_map(lab, _overwrite=True)
    stamped = catalog.export_map(lab, _timestamped=True)

    assert [m.path for m in catalog.available_maps()].count(str(maps_root / "Lab")) == 1
    assert Path(stamped.path).name.startswith("Lab_")
    assert (Path(stamped.path) / "Levels" / "entrance.json").is_file()
