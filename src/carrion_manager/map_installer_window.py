"""
Filename:       map_installer_window.py
Author:         jole
Created:        09.10.2025

Description:    Installed maps on the left, available custom maps on the right. Confirming an installed map offers to
                uninstall it, confirming an available one offers to install (or reinstall, or overwrite) it.
                Game files a map overwrites can be backed up first, they're put back when the map is uninstalled.

Notes:          Installing and uninstalling rebuild the lists. Re-selecting the row afterwards would fire a
                selection change and overwrite the log with map info, so listeners are muted while we do that.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import TYPE_CHECKING, List

# --- Project defined
from .backups           import BackupStore
from .content           import Map, MapCatalog
from .default_window    import DefaultWindow
from .defs              import (AVAILABLE_MAPS_HEADER, INSTALLED_MAPS_HEADER, MAP_INSTALLER_WINDOW_TITLE,
                                TEXT_BACKUP_AND_INSTALL, TEXT_INSTALL, TEXT_OVERWRITE, TEXT_REINSTALL, TEXT_SHOW_ISSUES,
                                TEXT_UNINSTALL)
from .errors            import BackupError, CatalogError
from .navigable         import Selection, SelectionChangedEvent
from .selection_prompt  import SelectionPrompt

if TYPE_CHECKING:
    from .map_manager   import MapManager
# --- END OF Import section --------------------------------------------------------------------------------------------



INSTALLED_COLUMN = 0
AVAILABLE_COLUMN = 1



class MapInstallerWindow(DefaultWindow):

    def __init__(self, _manager: "MapManager", _catalog: MapCatalog, _backups: BackupStore) -> None:
        theme = _manager.ctx.theme
        super().__init__(_manager, MAP_INSTALLER_WINDOW_TITLE, theme.installer_title_bg, theme.installer_title_fg)

        self.catalog        = _catalog
        self.backups        = _backups

        self.installed_list = self.menu.add_list_box(INSTALLED_COLUMN, INSTALLED_MAPS_HEADER, True)
        self.available_list = self.menu.add_list_box(AVAILABLE_COLUMN, AVAILABLE_MAPS_HEADER, True)
        self.installed_list.on_selection_changed(self._map_selection_changed)
        self.available_list.on_selection_changed(self._map_selection_changed)

        self.refresh_lists()
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def _map_selection_changed(self, _event: SelectionChangedEvent) -> None:
        if self._muted or _event.selected_item is None:
            return
        self.write_short_map_info(_event.selected_item.payload)
    # --- END OF _map_selection_changed() ------------------------------------------------------------------------------



    def refresh_lists(self) -> None:
        self.installed_list.set_items((m.display_name, m) for m in self.catalog.installed_maps())
        self.available_list.set_items((m.display_name, m) for m in self.catalog.available_maps())
    # --- END OF refresh_lists() ---------------------------------------------------------------------------------------



    def pre_show(self) -> None:
        try:
            self.catalog.refresh()
        except CatalogError as e:
            self.report_error(str(e))
        self.refresh_lists()



    def _prompt(self, _action: str, _map: Map) -> int:
        """
        Asks for _action (or, for a broken map, to look at its issues first).

        :return:    0 for the action, 1 for show issues, -1 for cancel
        """
        labels: List[str]   = [_action]
        options             = SelectionPrompt.Options(allow_cancel=True)
        if not _map.is_valid:
            labels.append(TEXT_SHOW_ISSUES)
            options.index = 1
        return self.selection_prompt.prompt_selection(labels, options)
    # --- END OF _prompt() ---------------------------------------------------------------------------------------------



    def selected(self, _selection: Selection) -> None:
        _selection.item.highlight()
        selected_map: Map = _selection.item.payload

        if _selection.column == INSTALLED_COLUMN:
            self.log.clear_content()
            match self._prompt(TEXT_UNINSTALL, selected_map):
                case 0:
                    self.uninstall_map(selected_map)
                case 1:
                    self.write_map_issues(selected_map)

        elif _selection.column == AVAILABLE_COLUMN:
            already_installed = self.catalog.find_installed(selected_map.name)
            if already_installed is not None:
                self.log.clear_content()
                self.log.write_line(f"Map \"{already_installed.name}\" is already installed. Reinstall?")
                match self._prompt(TEXT_REINSTALL, selected_map):
                    case 0:
                        self.reinstall_map(already_installed, selected_map)
                    case 1:
                        self.write_map_issues(selected_map)
                    case _:
                        self.write_short_map_info(selected_map)
            else:
                self._prompt_install(selected_map)

        # --- Put focus back where it was, if that row still exists
        with self._quiet():
            if _selection.list.can_navigate:
                _selection.list.select(_selection.row)
            else:
                self.menu.navigate_to_default()
    # --- END OF selected() --------------------------------------------------------------------------------------------



    def _prompt_install(self, _map: Map) -> None:
        """
        Install flow for a map that isn't installed yet. If some of its files are already in the game folder the
        user has to agree to overwrite them.
        """
        self.log.clear_content()
        conflicts = self.catalog.conflicting_files(_map)
        if not conflicts:
            match self._prompt(TEXT_INSTALL, _map):
                case 0:
                    self.install_map(_map, False)
                case 1:
                    self.write_map_issues(_map)
                case _:
                    self.write_short_map_info(_map)
            return

        self.log.write_line("Map is not marked as installed, but one or more files already exist. Overwrite?")
        self.log.write_line(f"Files: {', '.join(conflicts)}")

        labels  = [TEXT_OVERWRITE, TEXT_BACKUP_AND_INSTALL]
        if not _map.is_valid:
            labels.append(TEXT_SHOW_ISSUES)
        # --- Start on Cancel, overwriting should take a deliberate move
        options = SelectionPrompt.Options(allow_cancel=True, index=len(labels))
        match self.selection_prompt.prompt_selection(labels, options):
            case 0:
                self.log.clear_content()
                self.install_map(_map, True)
            case 1:
                self.log.clear_content()
                if self.back_up_map_files(_map):
                    self.install_map(_map, True)
            case 2:
                self.write_map_issues(_map)
            case _:
                self.write_short_map_info(_map)
    # --- END OF _prompt_install() -------------------------------------------------------------------------------------



    def install_map(self, _map: Map, _overwrite: bool) -> bool:
        self.log.write_line(f"Installing map {_map.name}...")
        try:
            self.catalog.install(_map, _overwrite)
        except CatalogError as e:
            self.report_error(str(e))
            return False

        self.refresh_lists()
        self.menu.paint()
        self.log.append_last_line(" installed!")
        return True
    # --- END OF install_map() -----------------------------------------------------------------------------------------



    def uninstall_map(self, _map: Map, _restore_backups: bool = True) -> bool:
        self.log.write_line(f"Uninstalling map {_map.name}...")
        try:
            self.catalog.uninstall(_map)
        except CatalogError as e:
            self.report_error(str(e))
            return False

        self.refresh_lists()
        self.menu.paint()
        self.log.append_last_line(" uninstalled!")
        if _restore_backups:
            self.restore_map_files(_map)
        return True
    # --- END OF uninstall_map() ---------------------------------------------------------------------------------------



    def reinstall_map(self, _installed: Map, _to_install: Map) -> None:
        if self.uninstall_map(_installed, False):
            self.install_map(_to_install, False)
    # --- END OF reinstall_map() ---------------------------------------------------------------------------------------



    def back_up_map_files(self, _map: Map) -> bool:
        """
        Backs up the game files _map would overwrite.

        :return:    True if the backup worked and installing can go ahead
        """
        self.log.write_line(f"Backing up files overwritten by map {_map.name}...")
        try:
            self.backups.back_up_map_files(_map)
        except BackupError as e:
            self.report_error(str(e))
            return False
        self.log.append_last_line(" backed up!")
        return True
    # --- END OF back_up_map_files() -----------------------------------------------------------------------------------



    def restore_map_files(self, _map: Map) -> None:
        try:
            if self.backups.restore_map_files(_map):
                self.log.write_line("Backed up files restored!")
        except BackupError as e:
            self.report_error(str(e))
    # --- END OF restore_map_files() -----------------------------------------------------------------------------------
# --- END OF class MapInstallerWindow ----------------------------------------------------------------------------------
