"""
Filename:       backups.py
Author:         jole
Created:        14.10.2025

Description:    Backups of save files and of game files a map installation overwrote. The save manager window swaps
                whole saves in and out, the installer backs up the files it's about to overwrite and puts them back
                when the map that overwrote them is uninstalled.

Notes:          A save backup is a folder below <backups>/Saves named after the map the save belongs to, holding the
                *.crn files and the SaveInfo.txt that names the map. File backups are flat copies in <backups>/Levels
                and <backups>/Scripts.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import os
import shutil

from abc            import ABC, abstractmethod
from datetime       import datetime
from typing         import Dict, List

# --- Project defined
from .content       import Map, read_info_file, write_info_file
from .defs          import (BACKUP_SETTINGS_FILE_NAME, BACKUP_SETTINGS_KEY_MANAGE, CONTENT_FOLDER_NAME,
                            LEVEL_FILE_EXTENSION, LEVEL_FOLDER_NAME, SAVE_BACKUP_TIMESTAMP_FORMAT, SAVE_FILE_EXTENSION,
                            SAVE_INFO_FILE_NAME, SAVE_INFO_KEY_MAP_NAME, SAVES_BACKUP_FOLDER_NAME,
                            SCRIPT_FILE_EXTENSION, SCRIPT_FOLDER_NAME, TEXT_MAIN_GAME, TEXT_UNKNOWN)
from .errors        import BackupError
# --- END OF Import section --------------------------------------------------------------------------------------------



class BackupStore(ABC):
    """
    What the save manager, backups and installer windows need from wherever backups are kept.
    """

    # --- Save files
    @abstractmethod
    def current_save_name(self) -> str:
        """
        :return:    Name of the map the current save belongs to
        """
        ...

    @abstractmethod
    def backed_up_save_names(self) -> List[str]: ...

    @abstractmethod
    def back_up_current_save(self) -> str:
        """
        :return:    Name the current save was backed up under
        """
        ...

    @abstractmethod
    def load_backed_up_save(self, _name: str) -> None: ...

    def swap_saves(self, _name: str) -> None:
        """
        Backs up the current save, then replaces it with the backup called _name.
        """
        self.back_up_current_save()
        self.load_backed_up_save(_name)

    @property
    @abstractmethod
    def auto_backup(self) -> bool: ...

    @abstractmethod
    def toggle_auto_backup(self) -> bool:
        """
        :return:    The new value of auto_backup
        """
        ...

    # --- Game files overwritten by an installation
    @abstractmethod
    def back_up_map_files(self, _map: Map) -> None: ...

    @abstractmethod
    def restore_map_files(self, _map: Map) -> bool:
        """
        :return:    True if at least one backed up file of _map was put back
        """
        ...

    @abstractmethod
    def backed_up_level_names(self) -> List[str]: ...

    @abstractmethod
    def backed_up_script_names(self) -> List[str]: ...
# --- END OF class BackupStore -----------------------------------------------------------------------------------------



class FolderBackupStore(BackupStore):
    """
    Backups kept in a folder next to the manager.
    """

    def __init__(self, _saves_path: str, _backups_path: str, _game_path: str, _logger: logging.Logger) -> None:
        """
        :param _saves_path:     Folder Carrion keeps its *.crn save files in
        :param _backups_path:   Folder backups are written to
        :param _game_path:      Folder the game is installed in (the one containing "Content")
        :param _logger:         Logger object, we're logging to a file
        """
        self.saves_path             = _saves_path
        self.save_info_path         = os.path.join(_saves_path, SAVE_INFO_FILE_NAME)
        self.saves_backup_path      = os.path.join(_backups_path, SAVES_BACKUP_FOLDER_NAME)
        self.levels_backup_path     = os.path.join(_backups_path, LEVEL_FOLDER_NAME)
        self.scripts_backup_path    = os.path.join(_backups_path, SCRIPT_FOLDER_NAME)
        self.settings_path          = os.path.join(_backups_path, BACKUP_SETTINGS_FILE_NAME)
        self.levels_path            = os.path.join(_game_path, CONTENT_FOLDER_NAME, LEVEL_FOLDER_NAME)
        self.scripts_path           = os.path.join(_game_path, CONTENT_FOLDER_NAME, SCRIPT_FOLDER_NAME)
        self.logger                 = _logger
        self._auto_backup           = self._load_auto_backup()
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    # --- Helpers ------------------------------------------------------------------------------------------------------

    def _read_info(self, _path: str) -> Dict[str, str]:
        try:
            return read_info_file(_path)
        except (OSError, UnicodeDecodeError) as e:
            raise BackupError(f"Could not read {_path}: {e}") from e



    def _write_info(self, _path: str, _values: Dict[str, str]) -> None:
        try:
            os.makedirs(os.path.dirname(_path), exist_ok=True)
            write_info_file(_path, _values)
        except OSError as e:
            raise BackupError(f"Could not write {_path}: {e}") from e



    @staticmethod
    def _files_with_extension(_folder: str, _extension: str) -> List[str]:
        if not os.path.isdir(_folder):
            return []
        try:
            return sorted(e.name for e in os.scandir(_folder) if e.is_file() and e.name.endswith(_extension))
        except OSError as e:
            raise BackupError(f"Could not list {_folder}: {e}") from e



    @staticmethod
    def _copy_files(_source: str, _destination: str, _extension: str) -> None:
        """
        Copies every *_extension file from _source into _destination, replacing files already there.
        """
        os.makedirs(_destination, exist_ok=True)
        for name in FolderBackupStore._files_with_extension(_source, _extension):
            shutil.copyfile(os.path.join(_source, name), os.path.join(_destination, name))
    # --- END OF _copy_files() -----------------------------------------------------------------------------------------
    # --- END OF Helpers -----------------------------------------------------------------------------------------------



    # --- Save files ---------------------------------------------------------------------------------------------------

    def current_save_name(self) -> str:
        if not os.path.isfile(self.save_info_path):
            return TEXT_MAIN_GAME
        return self._read_info(self.save_info_path).get(SAVE_INFO_KEY_MAP_NAME, TEXT_UNKNOWN)



    def backed_up_save_names(self) -> List[str]:
        if not os.path.isdir(self.saves_backup_path):
            return []

        names: List[str] = []
        try:
            folders = sorted(e.path for e in os.scandir(self.saves_backup_path) if e.is_dir())
        except OSError as e:
            raise BackupError(f"Could not list save backups in {self.saves_backup_path}: {e}") from e

        for folder in folders:
            info_path = os.path.join(folder, SAVE_INFO_FILE_NAME)
            if os.path.isfile(info_path):
                name = self._read_info(info_path).get(SAVE_INFO_KEY_MAP_NAME)
                if name:
                    names.append(name)
        return names
    # --- END OF backed_up_save_names() --------------------------------------------------------------------------------



    def back_up_current_save(self) -> str:
        """
        Copies the current save into a folder named after its map. A save without a SaveInfo.txt belongs to the main
        game, one whose SaveInfo.txt doesn't name a map gets a timestamped name.

        :return:    Name the save was backed up under
        """
        if os.path.isfile(self.save_info_path):
            info = self._read_info(self.save_info_path)
        else:
            info = {SAVE_INFO_KEY_MAP_NAME: TEXT_MAIN_GAME}
            self._write_info(self.save_info_path, info)

        if not info.get(SAVE_INFO_KEY_MAP_NAME):
            info[SAVE_INFO_KEY_MAP_NAME] = f"{datetime.now().strftime(SAVE_BACKUP_TIMESTAMP_FORMAT)} - {TEXT_UNKNOWN}"

        name        = info[SAVE_INFO_KEY_MAP_NAME]
        destination = os.path.join(self.saves_backup_path, name)
        try:
            self._copy_files(self.saves_path, destination, SAVE_FILE_EXTENSION)
        except OSError as e:
            raise BackupError(f"Backing up save \"{name}\" failed: {e}") from e
        self._write_info(os.path.join(destination, SAVE_INFO_FILE_NAME), info)

        self.logger.info(f"Backed up save \"{name}\" to {destination}")
        return name
    # --- END OF back_up_current_save() --------------------------------------------------------------------------------



    def load_backed_up_save(self, _name: str) -> None:
        """
        Copies the backup called _name over the current save. Without such a backup only SaveInfo.txt is rewritten,
        the game then starts that map from scratch.
        """
        source = os.path.join(self.saves_backup_path, _name)
        if not os.path.isdir(source):
            self._write_info(self.save_info_path, {SAVE_INFO_KEY_MAP_NAME: _name})
            return

        try:
            self._copy_files(source, self.saves_path, SAVE_FILE_EXTENSION)
            shutil.copyfile(os.path.join(source, SAVE_INFO_FILE_NAME), self.save_info_path)
        except OSError as e:
            raise BackupError(f"Loading save \"{_name}\" failed: {e}") from e
        self.logger.info(f"Loaded backed up save \"{_name}\"")
    # --- END OF load_backed_up_save() ---------------------------------------------------------------------------------



    def _load_auto_backup(self) -> bool:
        if not os.path.isfile(self.settings_path):
            return True
        return self._read_info(self.settings_path).get(BACKUP_SETTINGS_KEY_MANAGE, "true").lower() == "true"

    @property
    def auto_backup(self) -> bool:
        return self._auto_backup

    def toggle_auto_backup(self) -> bool:
        enabled = not self._auto_backup
        self._write_info(self.settings_path, {BACKUP_SETTINGS_KEY_MANAGE: "true" if enabled else "false"})
        self._auto_backup = enabled
        self.logger.info(f"Auto backup of save files {'enabled' if enabled else 'disabled'}")
        return enabled
    # --- END OF toggle_auto_backup() ----------------------------------------------------------------------------------
    # --- END OF Save files --------------------------------------------------------------------------------------------



    # --- Map files ----------------------------------------------------------------------------------------------------

    def back_up_map_files(self, _map: Map) -> None:
        """
        Copies the game files _map is about to overwrite into the backup folders. Files the game doesn't have are
        skipped.
        """
        pairs = ([(self.levels_path, self.levels_backup_path, level) for level in _map.levels] +
                 [(self.scripts_path, self.scripts_backup_path, script) for script in _map.scripts])
        try:
            for source_folder, backup_folder, name in pairs:
                source = os.path.join(source_folder, name)
                if os.path.isfile(source):
                    os.makedirs(backup_folder, exist_ok=True)
                    shutil.copyfile(source, os.path.join(backup_folder, name))
        except OSError as e:
            raise BackupError(f"Backing up files of map {_map.name} failed: {e}") from e
        self.logger.info(f"Backed up game files overwritten by map {_map.name}")
    # --- END OF back_up_map_files() -----------------------------------------------------------------------------------



    def restore_map_files(self, _map: Map) -> bool:
        """
        Moves backed up files of _map back into the game, replacing whatever is there now.
        """
        pairs = ([(self.levels_backup_path, self.levels_path, level) for level in _map.levels] +
                 [(self.scripts_backup_path, self.scripts_path, script) for script in _map.scripts])
        restored = False
        try:
            for backup_folder, game_folder, name in pairs:
                backup = os.path.join(backup_folder, name)
                if not os.path.isfile(backup):
                    continue
                os.makedirs(game_folder, exist_ok=True)
                os.replace(backup, os.path.join(game_folder, name))
                restored = True
        except OSError as e:
            raise BackupError(f"Restoring files of map {_map.name} failed: {e}") from e

        if restored:
            self.logger.info(f"Restored game files backed up for map {_map.name}")
        return restored
    # --- END OF restore_map_files() -----------------------------------------------------------------------------------



    def backed_up_level_names(self) -> List[str]:
        return self._files_with_extension(self.levels_backup_path, LEVEL_FILE_EXTENSION)

    def backed_up_script_names(self) -> List[str]:
        return self._files_with_extension(self.scripts_backup_path, SCRIPT_FILE_EXTENSION)
    # --- END OF Map files ---------------------------------------------------------------------------------------------
# --- END OF class FolderBackupStore -----------------------------------------------------------------------------------
