"""
Filename:       backups_window.py
Author:         jole
Created:        14.10.2025

Description:    Shows which game levels and scripts are backed up because an installed map overwrote them. They go
                back into the game by themselves when that map is uninstalled, so this window only lists them.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import TYPE_CHECKING, Callable, List

# --- Project defined
from .backups           import BackupStore
from .default_window    import DefaultWindow
from .defs              import (BACKUP_DETAILS_HEADER, BACKUPS_WINDOW_TITLE, COMMANDS_HEADER, LEVEL_BACKUPS_COUNT,
                                SCRIPT_BACKUPS_COUNT, TEXT_BACKED_UP_LEVELS, TEXT_BACKED_UP_SCRIPTS)
from .drawable          import Rect
from .errors            import BackupError
from .list_box          import ListBox
from .navigable         import Selection
from .tui_state         import Command

if TYPE_CHECKING:
    from .map_manager   import MapManager
# --- END OF Import section --------------------------------------------------------------------------------------------



COMMAND_COLUMN  = 0
DETAILS_COLUMN  = 1

LEVELS_ROW      = 0
SCRIPTS_ROW     = 1



class BackupsWindow(DefaultWindow):

    def __init__(self, _manager: "MapManager", _backups: BackupStore) -> None:
        theme = _manager.ctx.theme
        super().__init__(_manager, BACKUPS_WINDOW_TITLE, theme.backups_title_bg, theme.backups_title_fg)

        self.backups        = _backups

        self.command_list   = self.menu.add_list_box(COMMAND_COLUMN, COMMANDS_HEADER)
        self.command_list.set_items([TEXT_BACKED_UP_LEVELS, TEXT_BACKED_UP_SCRIPTS])
        self.details        = self.menu.add_text_box(DETAILS_COLUMN, BACKUP_DETAILS_HEADER)

        details_rect        = self.details.rect
        self.file_list      = ListBox(self.ctx, Rect(details_rect.left, details_rect.top, details_rect.width,
                                                     details_rect.height),
                                      theme.content_bg, theme.content_fg, True)
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def write_summary(self) -> None:
        try:
            levels  = len(self.backups.backed_up_level_names())
            scripts = len(self.backups.backed_up_script_names())
        except BackupError as e:
            self.details.clear_content()
            self.report_error(str(e))
            return
        self.details.set_lines([f"{LEVEL_BACKUPS_COUNT} {levels}", f"{SCRIPT_BACKUPS_COUNT} {scripts}"])
    # --- END OF write_summary() ---------------------------------------------------------------------------------------



    def pre_show(self) -> None:
        self.log.clear_content()
        self.write_summary()



    def selected(self, _selection: Selection) -> None:
        self.command_list.highlight_current_item()
        self.log.clear_content()

        match _selection.row:
            case row if row == LEVELS_ROW:
                self.view_files(self.backups.backed_up_level_names, "levels")
            case row if row == SCRIPTS_ROW:
                self.view_files(self.backups.backed_up_script_names, "scripts")

        self.write_summary()
        self.command_list.select_current_item()
    # --- END OF selected() --------------------------------------------------------------------------------------------



    def view_files(self, _names: Callable[[], List[str]], _kind: str) -> None:
        """
        Lists the backed up files over the summary until the user cancels.

        :param _names:  Where the file names come from
        :param _kind:   "levels" or "scripts", for the log
        """
        try:
            names = _names()
        except BackupError as e:
            self.report_error(str(e))
            return

        if not names:
            self.log.write_line(f"No backed up {_kind}.")
            return

        self.file_list.set_items(names)
        self.file_list.clear()
        self.file_list.navigate_to_default()
        self.file_list.paint()

        while self.file_list.prompt_selection().command != Command.CANCEL:
            pass

        self.file_list.deactivate()
        self.file_list.clear()
    # --- END OF view_files() ------------------------------------------------------------------------------------------
# --- END OF class BackupsWindow ---------------------------------------------------------------------------------------
