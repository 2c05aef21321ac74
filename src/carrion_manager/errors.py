"""
Filename:       errors.py
Author:         jole
Created:        02.10.2025

Description:    Exceptions raised across the project.

Notes:          InvalidStateError flags programmer errors in the widget framework and is never caught by it.
                CatalogError and BackupError wrap failures in the map catalog and the backup store, windows catch them
                and write them to the log box.
"""



class CarrionManagerError(Exception):
    """
    Base class for all errors raised by carrion_manager.
    """
    pass
# --- END OF class CarrionManagerError ---------------------------------------------------------------------------------



class InvalidStateError(CarrionManagerError):
    """
    A widget was asked to do something its current state cannot support, e.g. formatting text into a width of zero,
    or prompting a selection where every choice is disabled.
    """
    pass
# --- END OF class InvalidStateError -----------------------------------------------------------------------------------



class CatalogError(CarrionManagerError):
    """
    The map catalog failed to read, install, uninstall or save a map.
    """

    def __init__(self, _message: str, _map_name: str | None = None) -> None:
        super().__init__(_message)
        self.map_name = _map_name
    # --- END OF __init__() --------------------------------------------------------------------------------------------
# --- END OF class CatalogError ----------------------------------------------------------------------------------------



class BackupError(CarrionManagerError):
    """
    The backup store failed to copy, move or read save files or backed up map files.
    """
    pass
# --- END OF class BackupError -----------------------------------------------------------------------------------------
