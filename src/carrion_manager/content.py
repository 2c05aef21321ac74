"""
Filename:       content.py
Author:         jole
Created:        07.10.2025

Description:    Maps and the catalog that finds, installs and uninstalls them, and edits the levels of installed ones.
                This is the content provider the windows fill their lists from. The widget framework never touches
                any of it.

Notes:          A map folder is any folder with a "Levels" sub folder, found at most MAX_SUBFOLDER_DEPTH levels below
                the custom maps folder. Installed maps are kept in a JSON registry, map metadata in MapInfo.txt
                (key=value lines, newlines in values stored as a literal \\n).
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import json
import logging
import os
import re
import shutil

from abc            import ABC, abstractmethod
from dataclasses    import asdict, dataclass, field, replace
from datetime       import datetime
from typing         import Any, Dict, List, Optional, Tuple

# --- Project defined
from .defs          import (CONTENT_FOLDER_NAME, EMPTY_LEVEL_TEMPLATE, EMPTY_SCRIPT_TEMPLATE, EXPORT_TIMESTAMP_FORMAT,
                            LEVEL_FILE_EXTENSION, LEVEL_FOLDER_NAME, MAP_HAS_ISSUES_INDICATOR, MAP_INFO_FILE_NAME,
                            MAP_INFO_KEY_AUTHOR, MAP_INFO_KEY_IS_WIP, MAP_INFO_KEY_LONG_DESCRIPTION, MAP_INFO_KEY_NAME,
                            MAP_INFO_KEY_SHORT_DESCRIPTION, MAP_INFO_KEY_STARTUP_LEVEL, MAP_INFO_KEY_VERSION,
                            MAX_SUBFOLDER_DEPTH, SCRIPT_FILE_EXTENSION, SCRIPT_FOLDER_NAME)
from .errors        import CatalogError
# --- END OF Import section --------------------------------------------------------------------------------------------



INFO_LINE_PATTERN = re.compile(r'^(.+?)=[ ]*"?(.+?)"?$', re.MULTILINE)



def read_info_file(_path: str) -> Dict[str, str]:
    """
    Reads a key=value file. Values may be wrapped in double quotes, lines without a value are skipped.
    Files saved by Windows editors come as UTF-8 with a BOM or as cp1252, both are accepted.

    :param _path:   File to read
    :return:        The keys and values, newlines in values restored

    :raises OSError:            The file can't be read
    :raises UnicodeDecodeError: The file is in neither encoding
    """
    with open(_path, "rb") as f:
        raw = f.read()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = raw.decode("cp1252")
    text = text.replace("\r", "")
    return {match.group(1).strip(): match.group(2).replace("\\n", "\n") for match in INFO_LINE_PATTERN.finditer(text)}
# --- END OF read_info_file() ------------------------------------------------------------------------------------------



def write_info_file(_path: str, _values: Dict[str, Optional[str]]) -> None:
    with open(_path, "w", encoding="utf-8") as f:
        for key, value in _values.items():
            value = (value or "").replace("\n", "\\n")
            f.write(f"{key}={value}\n")
# --- END OF write_info_file() -----------------------------------------------------------------------------------------



def remove_level_extension(_level: str) -> str:
    if not _level.endswith(LEVEL_FILE_EXTENSION):
        raise CatalogError(f"\"{_level}\" is not a level file name")
    return _level[: -len(LEVEL_FILE_EXTENSION)]
# --- END OF remove_level_extension() ----------------------------------------------------------------------------------



@dataclass
class Map:
    """
    A custom map, either available in the custom maps folder (path set) or installed into the game (path None).
    info_error is set when MapInfo.txt exists but can't be read, verify() reports it as an issue.
    """
    name:               str
    author:             Optional[str]   = None
    version:            Optional[str]   = None
    short_description:  Optional[str]   = None
    long_description:   Optional[str]   = None
    startup_level:      Optional[str]   = None
    is_wip:             bool            = False
    levels:             List[str]       = field(default_factory=list)
    scripts:            List[str]       = field(default_factory=list)
    path:               Optional[str]   = None
    issues:             List[str]       = field(default_factory=list)
    info_error:         Optional[str]   = None



    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def display_name(self) -> str:
        return self.name if self.is_valid else MAP_HAS_ISSUES_INDICATOR + self.name



    def verify(self) -> List[str]:
        """
        Re-checks the map and stores what's wrong with it in self.issues.

        :return:    The issues found, empty if the map is fine
        """
        self.issues = []
        if self.path is not None:
            if not os.path.isdir(os.path.join(self.path, LEVEL_FOLDER_NAME)):
                self.issues.append(f"Map doesn't contain \"{LEVEL_FOLDER_NAME}\" folder!")
            if not os.path.isdir(os.path.join(self.path, SCRIPT_FOLDER_NAME)):
                self.issues.append(f"Map doesn't contain \"{SCRIPT_FOLDER_NAME}\" folder!")
        if self.startup_level and self.startup_level + LEVEL_FILE_EXTENSION not in self.levels:
            self.issues.append(f"Startup Level \"{self.startup_level}\" is invalid!")
        if self.info_error:
            self.issues.append(self.info_error)
        return self.issues
    # --- END OF verify() ----------------------------------------------------------------------------------------------



    def to_dict(self) -> Dict[str, Any]:
        values = asdict(self)
        values.pop("issues")
        values.pop("info_error")
        return values

    @staticmethod
    def from_dict(_values: Dict[str, Any]) -> "Map":
        known = {k: v for k, v in _values.items() if k in Map.__dataclass_fields__ and k not in ("issues", "info_error")}
        the_map = Map(**known)
        the_map.verify()
        return the_map
    # --- END OF from_dict() -------------------------------------------------------------------------------------------
# --- END OF class Map -------------------------------------------------------------------------------------------------



class MapCatalog(ABC):
    """
    What the windows need from wherever maps come from.
    """

    @abstractmethod
    def installed_maps(self) -> List[Map]: ...

    @abstractmethod
    def available_maps(self) -> List[Map]: ...

    @abstractmethod
    def refresh(self) -> None:
        """
        Looks for available maps again, maps added or removed on disk since the last look show up.
        """
        ...

    @abstractmethod
    def conflicting_files(self, _map: Map) -> List[str]:
        """
        :return:    Level and script files of _map already present in the game folder
        """
        ...

    @abstractmethod
    def install(self, _map: Map, _overwrite: bool = False) -> Map: ...

    @abstractmethod
    def uninstall(self, _map: Map) -> None: ...

    @abstractmethod
    def save_map_info(self, _map: Map) -> None: ...

    # --- Editing installed maps
    @abstractmethod
    def create_map(self, _name: str) -> Map:
        """
        Records a new, empty work in progress map as installed.
        """
        ...

    @abstractmethod
    def installed_level_names(self) -> List[str]:
        """
        :return:    Every level file in the game folder, whether a map owns it or not
        """
        ...

    @abstractmethod
    def add_level(self, _map: Map, _name: str) -> None:
        """
        Creates the level _name (and its script) from the empty templates and gives it to _map.
        """
        ...

    @abstractmethod
    def rename_level(self, _map: Map, _level: str, _new_name: str) -> None: ...

    @abstractmethod
    def delete_level(self, _map: Map, _level: str) -> None: ...

    @abstractmethod
    def assign_level(self, _map: Map, _level: str) -> None: ...

    @abstractmethod
    def unassign_level(self, _map: Map, _level: str) -> None: ...

    @abstractmethod
    def export_path(self, _map: Map) -> str:
        """
        :return:    Folder _map is exported to
        """
        ...

    @abstractmethod
    def export_map(self, _map: Map, _overwrite: bool = False, _timestamped: bool = False) -> Map:
        """
        Copies an installed map's files back into the custom maps folder, with a MapInfo.txt.

        :param _overwrite:      Replace files of an earlier export
        :param _timestamped:    Append the current time to the folder name instead

        :return:                The exported map, now listed as available
        """
        ...



    def level_owner(self, _level: str) -> Optional[Map]:
        """
        :return:    The installed map _level belongs to, None if no map claims it
        """
        for installed in self.installed_maps():
            if _level in installed.levels:
                return installed
        return None
    # --- END OF level_owner() -----------------------------------------------------------------------------------------



    def export_exists(self, _map: Map) -> bool:
        return os.path.exists(self.export_path(_map))



    def find_installed(self, _name: str) -> Optional[Map]:
        for installed in self.installed_maps():
            if installed.name == _name:
                return installed
        return None
    # --- END OF find_installed() --------------------------------------------------------------------------------------
# --- END OF class MapCatalog ------------------------------------------------------------------------------------------



class FolderMapCatalog(MapCatalog):
    """
    Maps in a folder tree, installed by copying their level and script files into the game's Content folder.
    """

    def __init__(self,
                 _custom_maps_path: str,
                 _game_path:        str,
                 _registry_path:    str,
                 _logger:           logging.Logger,
                 _templates_path:   Optional[str] = None
                 ) -> None:
        """
        :param _custom_maps_path:   Folder holding the extracted custom maps
        :param _game_path:          Folder the game is installed in (the one containing "Content")
        :param _registry_path:      JSON file keeping track of installed maps
        :param _logger:             Logger object, we're logging to a file
        :param _templates_path:     Folder holding the empty level and script templates new levels start from
        """
        self.custom_maps_path               = _custom_maps_path
        self.levels_path                    = os.path.join(_game_path, CONTENT_FOLDER_NAME, LEVEL_FOLDER_NAME)
        self.scripts_path                   = os.path.join(_game_path, CONTENT_FOLDER_NAME, SCRIPT_FOLDER_NAME)
        self.registry_path                  = _registry_path
        self.templates_path                 = _templates_path
        self.logger                         = _logger
        self._installed:    List[Map]       = self._load_registry()
        self._available:    List[Map]       = self._scan(self.custom_maps_path, 0)
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    # --- Reading ------------------------------------------------------------------------------------------------------

    def _load_registry(self) -> List[Map]:
        if not os.path.isfile(self.registry_path):
            return []
        try:
            with open(self.registry_path, encoding="utf-8") as f:
                return [Map.from_dict(values) for values in json.load(f)]
        except (OSError, ValueError, TypeError) as e:
            raise CatalogError(f"Could not read installed maps from {self.registry_path}: {e}") from e
    # --- END OF _load_registry() --------------------------------------------------------------------------------------



    def _save_registry(self) -> None:
        try:
            with open(self.registry_path, "w", encoding="utf-8") as f:
                json.dump([m.to_dict() for m in self._installed], f, indent=2)
        except OSError as e:
            raise CatalogError(f"Could not save installed maps to {self.registry_path}: {e}") from e
    # --- END OF _save_registry() --------------------------------------------------------------------------------------



    def _scan(self, _folder: str, _depth: int) -> List[Map]:
        """
        Recursively collects map folders below _folder.
        """
        if not os.path.isdir(_folder):
            self.logger.warning(f"Custom maps folder {_folder} does not exist")
            return []

        if os.path.isdir(os.path.join(_folder, LEVEL_FOLDER_NAME)):
            return [self.load_map(_folder)]

        maps: List[Map] = []
        if _depth < MAX_SUBFOLDER_DEPTH:
            try:
                entries = sorted(os.scandir(_folder), key=lambda e: e.name.lower())
            except OSError as e:
                raise CatalogError(f"Could not list custom maps in {_folder}: {e}") from e
            for entry in entries:
                if entry.is_dir():
                    maps.extend(self._scan(entry.path, _depth + 1))
        return maps
    # --- END OF _scan() -----------------------------------------------------------------------------------------------



    def load_map(self, _folder: str) -> Map:
        """
        Builds a Map from a map folder: file lists from Levels/ and Scripts/, metadata from MapInfo.txt if present.
        """
        def _files(_sub_folder: str) -> List[str]:
            path = os.path.join(_folder, _sub_folder)
            if not os.path.isdir(path):
                return []
            try:
                return sorted(e.name for e in os.scandir(path) if e.is_file())
            except OSError as e:
                raise CatalogError(f"Could not list {path}: {e}") from e

        the_map = Map(name      = os.path.basename(os.path.normpath(_folder)),
                      levels    = _files(LEVEL_FOLDER_NAME),
                      scripts   = _files(SCRIPT_FOLDER_NAME),
                      path      = _folder)

        info_path = os.path.join(_folder, MAP_INFO_FILE_NAME)
        if os.path.isfile(info_path):
            try:
                info = read_info_file(info_path)
            except (OSError, UnicodeDecodeError) as e:
                self.logger.warning(f"Could not read {info_path}: {e}")
                the_map.info_error = f"Map info file \"{MAP_INFO_FILE_NAME}\" can't be read!"
                info = {}

            the_map.name                = info.get(MAP_INFO_KEY_NAME, the_map.name)
            the_map.author              = info.get(MAP_INFO_KEY_AUTHOR)
            the_map.version             = info.get(MAP_INFO_KEY_VERSION)
            the_map.short_description   = info.get(MAP_INFO_KEY_SHORT_DESCRIPTION)
            the_map.long_description    = info.get(MAP_INFO_KEY_LONG_DESCRIPTION)
            the_map.startup_level       = info.get(MAP_INFO_KEY_STARTUP_LEVEL)
            the_map.is_wip              = info.get(MAP_INFO_KEY_IS_WIP, "").lower() == "true"

        the_map.verify()
        self.logger.debug(f"Found map {the_map.name} in {_folder}, {len(the_map.issues)} issue(s)")
        return the_map
    # --- END OF load_map() --------------------------------------------------------------------------------------------



    def installed_maps(self) -> List[Map]:
        return self._installed

    def available_maps(self) -> List[Map]:
        return self._available



    def refresh(self) -> None:
        self._available = self._scan(self.custom_maps_path, 0)



    def conflicting_files(self, _map: Map) -> List[str]:
        conflicts = [level for level in _map.levels if os.path.exists(os.path.join(self.levels_path, level))]
        conflicts += [script for script in _map.scripts if os.path.exists(os.path.join(self.scripts_path, script))]
        return conflicts
    # --- END OF conflicting_files() -----------------------------------------------------------------------------------
    # --- END OF Reading -----------------------------------------------------------------------------------------------



    # --- Writing ------------------------------------------------------------------------------------------------------

    def install(self, _map: Map, _overwrite: bool = False) -> Map:
        """
        Copies the map's levels and scripts into the game and records it as installed.

        :param _map:        An available map
        :param _overwrite:  Replace files already present in the game folder

        :return:            The installed map record
        """
        if self.find_installed(_map.name) is not None:
            raise CatalogError(f"Map {_map.name} is already installed!", _map.name)
        if _map.path is None:
            raise CatalogError(f"Map {_map.name} has no folder to install from", _map.name)
        if not _overwrite and self.conflicting_files(_map):
            raise CatalogError(f"Map {_map.name} would overwrite existing files", _map.name)

        try:
            os.makedirs(self.levels_path, exist_ok=True)
            os.makedirs(self.scripts_path, exist_ok=True)
            for level in _map.levels:
                shutil.copyfile(os.path.join(_map.path, LEVEL_FOLDER_NAME, level),
                                os.path.join(self.levels_path, level))
            for script in _map.scripts:
                shutil.copyfile(os.path.join(_map.path, SCRIPT_FOLDER_NAME, script),
                                os.path.join(self.scripts_path, script))
        except OSError as e:
            raise CatalogError(f"Installing map {_map.name} failed: {e}", _map.name) from e

        installed = Map(name                = _map.name,
                        author              = _map.author,
                        version             = _map.version,
                        short_description   = _map.short_description,
                        long_description    = _map.long_description,
                        startup_level       = _map.startup_level,
                        is_wip              = _map.is_wip,
                        levels              = list(_map.levels),
                        scripts             = list(_map.scripts))
        if not installed.startup_level and len(installed.levels) == 1:
            installed.startup_level = remove_level_extension(installed.levels[0])
        installed.verify()

        self._installed.append(installed)
        self._save_registry()
        self.logger.info(f"Installed map {installed.name}: {len(installed.levels)} level(s), "
                         f"{len(installed.scripts)} script(s)")
        return installed
    # --- END OF install() ---------------------------------------------------------------------------------------------



    def uninstall(self, _map: Map) -> None:
        try:
            for level in _map.levels:
                path = os.path.join(self.levels_path, level)
                if os.path.exists(path):
                    os.remove(path)
            for script in _map.scripts:
                path = os.path.join(self.scripts_path, script)
                if os.path.exists(path):
                    os.remove(path)
        except OSError as e:
            raise CatalogError(f"Uninstalling map {_map.name} failed: {e}", _map.name) from e

        self._installed = [m for m in self._installed if m is not _map]
        self._save_registry()
        self.logger.info(f"Uninstalled map {_map.name}")
    # --- END OF uninstall() -------------------------------------------------------------------------------------------



    def save_map_info(self, _map: Map) -> None:
        """
        Persists edited metadata: the registry for installed maps, MapInfo.txt for maps with a folder.
        """
        if _map.path is not None:
            values = {MAP_INFO_KEY_NAME:                _map.name,
                      MAP_INFO_KEY_VERSION:             _map.version,
                      MAP_INFO_KEY_AUTHOR:              _map.author,
                      MAP_INFO_KEY_SHORT_DESCRIPTION:   _map.short_description,
                      MAP_INFO_KEY_LONG_DESCRIPTION:    _map.long_description,
                      MAP_INFO_KEY_STARTUP_LEVEL:       _map.startup_level,
                      MAP_INFO_KEY_IS_WIP:              "true" if _map.is_wip else "false"}
            try:
                write_info_file(os.path.join(_map.path, MAP_INFO_FILE_NAME), values)
            except OSError as e:
                raise CatalogError(f"Saving map info for {_map.name} failed: {e}", _map.name) from e
            _map.info_error = None

        _map.verify()
        if any(m is _map for m in self._installed):
            self._save_registry()
        self.logger.info(f"Saved map info for {_map.name}")
    # --- END OF save_map_info() ---------------------------------------------------------------------------------------
    # --- END OF Writing -----------------------------------------------------------------------------------------------



    # --- Editing installed maps ---------------------------------------------------------------------------------------

    def _level_paths(self, _name: str) -> Tuple[str, str]:
        """
        :return:    Game paths of the level called _name (no extension) and of its script
        """
        return (os.path.join(self.levels_path, _name + LEVEL_FILE_EXTENSION),
                os.path.join(self.scripts_path, _name + SCRIPT_FILE_EXTENSION))



    def _free_level_paths(self, _map: Map, _name: str) -> Tuple[str, str]:
        if not _name:
            raise CatalogError("Level name can't be empty!", _map.name)
        level_path, script_path = self._level_paths(_name)
        if os.path.exists(level_path) or os.path.exists(script_path):
            raise CatalogError(f"Level \"{_name}{LEVEL_FILE_EXTENSION}\" or script \"{_name}{SCRIPT_FILE_EXTENSION}\" "
                               f"already exists!", _map.name)
        return level_path, script_path
    # --- END OF _free_level_paths() -----------------------------------------------------------------------------------



    @staticmethod
    def _drop_level(_map: Map, _level: str) -> None:
        """
        Takes _level and its script away from _map. A startup level pointing at it is cleared.
        """
        name            = remove_level_extension(_level)
        _map.levels     = [level for level in _map.levels if level != _level]
        _map.scripts    = [script for script in _map.scripts if script != name + SCRIPT_FILE_EXTENSION]
        if _map.startup_level == name:
            _map.startup_level = None
    # --- END OF _drop_level() -----------------------------------------------------------------------------------------



    def _commit(self, _map: Map) -> None:
        _map.verify()
        self._save_registry()



    def create_map(self, _name: str) -> Map:
        if not _name:
            raise CatalogError("Map name can't be empty!")
        if self.find_installed(_name) is not None:
            raise CatalogError(f"Map {_name} is already installed!", _name)

        new_map = Map(name=_name, is_wip=True)
        self._installed.append(new_map)
        self._save_registry()
        self.logger.info(f"Created map {_name}")
        return new_map
    # --- END OF create_map() ------------------------------------------------------------------------------------------



    def installed_level_names(self) -> List[str]:
        if not os.path.isdir(self.levels_path):
            return []
        try:
            return sorted(e.name for e in os.scandir(self.levels_path)
                          if e.is_file() and e.name.endswith(LEVEL_FILE_EXTENSION))
        except OSError as e:
            raise CatalogError(f"Could not list {self.levels_path}: {e}") from e
    # --- END OF installed_level_names() -------------------------------------------------------------------------------



    def add_level(self, _map: Map, _name: str) -> None:
        level_path, script_path = self._free_level_paths(_map, _name)

        if self.templates_path is None:
            raise CatalogError("No templates folder to create levels from", _map.name)
        templates = (os.path.join(self.templates_path, EMPTY_LEVEL_TEMPLATE),
                     os.path.join(self.templates_path, EMPTY_SCRIPT_TEMPLATE))
        for template in templates:
            if not os.path.isfile(template):
                raise CatalogError(f"Template {template} is missing!", _map.name)

        try:
            os.makedirs(self.levels_path, exist_ok=True)
            os.makedirs(self.scripts_path, exist_ok=True)
            shutil.copyfile(templates[0], level_path)
            shutil.copyfile(templates[1], script_path)
        except OSError as e:
            raise CatalogError(f"Adding level {_name} failed: {e}", _map.name) from e

        _map.levels.append(_name + LEVEL_FILE_EXTENSION)
        _map.scripts.append(_name + SCRIPT_FILE_EXTENSION)
        self._commit(_map)
        self.logger.info(f"Added level {_name} to map {_map.name}")
    # --- END OF add_level() -------------------------------------------------------------------------------------------



    def rename_level(self, _map: Map, _level: str, _new_name: str) -> None:
        """
        Renames the level file and its script. If the second move fails the first one is moved back.

        :param _level:      Level file name, with extension
        :param _new_name:   New level name, without extension
        """
        old_name = remove_level_extension(_level)
        if _new_name == old_name:
            return

        new_paths   = self._free_level_paths(_map, _new_name)
        old_paths   = self._level_paths(old_name)
        moved       = []
        try:
            for source, destination in zip(old_paths, new_paths):
                if os.path.exists(source):
                    os.replace(source, destination)
                    moved.append((source, destination))
        except OSError as e:
            for source, destination in reversed(moved):
                try:
                    os.replace(destination, source)
                except OSError as revert_error:
                    self.logger.error(f"Could not move {destination} back to {source}: {revert_error}")
            raise CatalogError(f"Renaming level {_level} failed: {e}", _map.name) from e

        old_script      = old_name + SCRIPT_FILE_EXTENSION
        _map.levels     = [_new_name + LEVEL_FILE_EXTENSION if level == _level else level for level in _map.levels]
        _map.scripts    = [_new_name + SCRIPT_FILE_EXTENSION if script == old_script else script
                           for script in _map.scripts]
        if _map.startup_level == old_name:
            _map.startup_level = _new_name
        self._commit(_map)
        self.logger.info(f"Renamed level {old_name} of map {_map.name} to {_new_name}")
    # --- END OF rename_level() ----------------------------------------------------------------------------------------



    def delete_level(self, _map: Map, _level: str) -> None:
        try:
            for path in self._level_paths(remove_level_extension(_level)):
                if os.path.exists(path):
                    os.remove(path)
        except OSError as e:
            raise CatalogError(f"Deleting level {_level} failed: {e}", _map.name) from e

        self._drop_level(_map, _level)
        self._commit(_map)
        self.logger.info(f"Deleted level {_level} of map {_map.name}")
    # --- END OF delete_level() ----------------------------------------------------------------------------------------



    def assign_level(self, _map: Map, _level: str) -> None:
        """
        Gives an existing game level (and its script, if there is one) to _map.
        """
        owner = self.level_owner(_level)
        if owner is not None and owner is not _map:
            raise CatalogError(f"Level {_level} already belongs to map {owner.name}", _map.name)

        if _level not in _map.levels:
            _map.levels.append(_level)
        script = remove_level_extension(_level) + SCRIPT_FILE_EXTENSION
        if script not in _map.scripts and os.path.exists(os.path.join(self.scripts_path, script)):
            _map.scripts.append(script)
        self._commit(_map)
    # --- END OF assign_level() ----------------------------------------------------------------------------------------



    def unassign_level(self, _map: Map, _level: str) -> None:
        self._drop_level(_map, _level)
        self._commit(_map)



    def export_path(self, _map: Map) -> str:
        return os.path.join(self.custom_maps_path, _map.name)



    def export_map(self, _map: Map, _overwrite: bool = False, _timestamped: bool = False) -> Map:
        destination = self.export_path(_map)
        if _timestamped:
            destination += datetime.now().strftime(EXPORT_TIMESTAMP_FORMAT)
        elif not _overwrite and os.path.exists(destination):
            raise CatalogError(f"{destination} already exists!", _map.name)

        try:
            for files, source_folder, sub_folder in ((_map.levels, self.levels_path, LEVEL_FOLDER_NAME),
                                                     (_map.scripts, self.scripts_path, SCRIPT_FOLDER_NAME)):
                target = os.path.join(destination, sub_folder)
                os.makedirs(target, exist_ok=True)
                for name in files:
                    shutil.copyfile(os.path.join(source_folder, name), os.path.join(target, name))
        except OSError as e:
            raise CatalogError(f"Exporting map {_map.name} failed: {e}", _map.name) from e

        exported = replace(_map, levels=list(_map.levels), scripts=list(_map.scripts), path=destination, issues=[],
                           info_error=None)
        self.save_map_info(exported)

        normalized      = os.path.normpath(destination)
        self._available = [m for m in self._available if m.path is None or os.path.normpath(m.path) != normalized]
        self._available.append(exported)
        self.logger.info(f"Exported map {_map.name} to {destination}")
        return exported
    # --- END OF export_map() ------------------------------------------------------------------------------------------
    # --- END OF Editing installed maps --------------------------------------------------------------------------------
# --- END OF class FolderMapCatalog ------------------------------------------------------------------------------------
