# --- file: __init__.py

# --- Import section ---------------------------------------------------------------------------------------------------
import argparse
import logging
import os
import sys

from .backups       import BackupStore, FolderBackupStore
from .content       import FolderMapCatalog, Map, MapCatalog
from .defs          import (ARGUMENT_DESCRIPTION, ARGUMENT_EPILOG, ARGUMENT_FORMATTER_CLASS, BACKUP_FOLDER_NAME,
                            DEFAULT_LOG_FILE, DEFAULT_REGISTRY_FILE, SAVE_FOLDER_NAME, TEMPLATES_FOLDER_NAME)
from .errors        import BackupError, CarrionManagerError, CatalogError, InvalidStateError
from .log_helper    import setup_logger
from .map_manager   import MapManager
# --- END OF Import section --------------------------------------------------------------------------------------------



# --- Version (managed by setuptools-scm)
try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0"



# --- Main entry point (used by pyproject.toml [project.scripts])
def main() -> None:
    """
    CLI entry point.

    Possible command line arguments:
        * --maps-path   {folder holding your extracted custom maps}, defaults to ./CustomMaps
        * --game-path   {folder Carrion is installed in}, defaults to the current folder
        * --registry    {file keeping track of installed maps}, defaults to ./installed.json
        * --saves-path  {folder Carrion keeps its saves in}, defaults to ./Saves
        * --backups-path {folder backups are written to}, defaults to ./Backups
        * --templates-path {folder holding the empty level and script templates}, defaults to ./Templates
        * --log-file    {where to log}, defaults to ./carrion_manager.log
        * --log-level   {DEBUG, INFO, NOTICE, WARNING, ERROR}, defaults to INFO
    """

    # --- Define an argument parser for the user's command line args
    arg_parser = argparse.ArgumentParser(description     = ARGUMENT_DESCRIPTION,
                                         epilog          = ARGUMENT_EPILOG,
                                         formatter_class = ARGUMENT_FORMATTER_CLASS)

    arg_parser.add_argument("--maps-path",
                            type    = str,
                            default = os.path.join(os.getcwd(), "CustomMaps"),
                            help    = "Folder containing the extracted custom maps (default: ./CustomMaps)")

    arg_parser.add_argument("--game-path",
                            type    = str,
                            default = os.getcwd(),
                            help    = "Folder Carrion is installed in, the one containing Content (default: .)")

    arg_parser.add_argument("--registry",
                            type    = str,
                            default = DEFAULT_REGISTRY_FILE,
                            help    = f"File keeping track of installed maps (default: {DEFAULT_REGISTRY_FILE})")

    arg_parser.add_argument("--saves-path",
                            type    = str,
                            default = os.path.join(os.getcwd(), SAVE_FOLDER_NAME),
                            help    = f"Folder Carrion keeps its save files in (default: ./{SAVE_FOLDER_NAME})")

    arg_parser.add_argument("--backups-path",
                            type    = str,
                            default = os.path.join(os.getcwd(), BACKUP_FOLDER_NAME),
                            help    = f"Folder backups are written to (default: ./{BACKUP_FOLDER_NAME})")

    arg_parser.add_argument("--templates-path",
                            type    = str,
                            default = os.path.join(os.getcwd(), TEMPLATES_FOLDER_NAME),
                            help    = f"Folder holding the empty level and script templates "
                                      f"(default: ./{TEMPLATES_FOLDER_NAME})")

    arg_parser.add_argument("--log-file",
                            type    = str,
                            default = DEFAULT_LOG_FILE,
                            help    = f"Log file (default: {DEFAULT_LOG_FILE})")

    arg_parser.add_argument("--log-level",
                            choices = ("DEBUG", "INFO", "NOTICE", "WARNING", "ERROR"),
                            default = "INFO",
                            help    = "Lowest level written to the log file (default: INFO)")

    arg_parser.add_argument("--version",
                            action  = "version",
                            version = f"%(prog)s {__version__}")

    args = arg_parser.parse_args()

    logger = setup_logger(filename = args.log_file, file_level = logging.getLevelName(args.log_level))
    logger.info(f"Started, maps: {args.maps_path}, game: {args.game_path}")

    try:
        catalog = FolderMapCatalog(_custom_maps_path = args.maps_path,
                                   _game_path        = args.game_path,
                                   _registry_path    = args.registry,
                                   _logger           = logger,
                                   _templates_path   = args.templates_path)
        backups = FolderBackupStore(_saves_path      = args.saves_path,
                                    _backups_path    = args.backups_path,
                                    _game_path       = args.game_path,
                                    _logger          = logger)
    except (CatalogError, BackupError) as e:
        logger.error(str(e))
        print(e, file = sys.stderr)
        sys.exit(1)

    MapManager(_catalog = catalog, _backups = backups, _logger = logger).run()

    sys.exit(0)
# --- END OF main() ----------------------------------------------------------------------------------------------------

__all__ = [
    "__version__",
    "main",
    "MapManager",
    "MapCatalog",
    "FolderMapCatalog",
    "BackupStore",
    "FolderBackupStore",
    "Map",
    "BackupError",
    "CarrionManagerError",
    "CatalogError",
    "InvalidStateError",
]
