"""
Filename:       save_manager_window.py
Author:         jole
Created:        14.10.2025

Description:    Back up the current save, swap it for a backed up one, and switch the automatic backup of saves on
                or off. The left column holds the commands, the right one a summary of the save situation.

Notes:          The list of backed up saves is laid over the summary while the user picks one. Loading a backup
                always backs up the current save first, so nothing is lost by swapping.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import TYPE_CHECKING

# --- Project defined
from .backups           import BackupStore
from .default_window    import DefaultWindow
from .defs              import (COMMANDS_HEADER, SAVE_DETAILS_HEADER, SAVE_MANAGER_WINDOW_TITLE,
                                SAVE_SUMMARY_AUTO_BACKUP, SAVE_SUMMARY_BACKUPS_COUNT, SAVE_SUMMARY_CURRENT_SAVE,
                                TEXT_BACK_UP_SAVE, TEXT_DISABLED, TEXT_ENABLED, TEXT_LOAD_BACKUP,
                                TEXT_TOGGLE_AUTO_BACKUP, TEXT_VIEW_BACKUPS)
from .drawable          import Rect
from .errors            import BackupError
from .list_box          import ListBox
from .navigable         import Selection
from .selection_prompt  import SelectionPrompt
from .tui_state         import Command

if TYPE_CHECKING:
    from .map_manager   import MapManager
# --- END OF Import section --------------------------------------------------------------------------------------------



COMMAND_COLUMN          = 0
DETAILS_COLUMN          = 1

BACK_UP_ROW             = 0
VIEW_BACKUPS_ROW        = 1
TOGGLE_AUTO_BACKUP_ROW  = 2



class SaveManagerWindow(DefaultWindow):

    def __init__(self, _manager: "MapManager", _backups: BackupStore) -> None:
        theme = _manager.ctx.theme
        super().__init__(_manager, SAVE_MANAGER_WINDOW_TITLE, theme.save_manager_title_bg,
                         theme.save_manager_title_fg)

        self.backups        = _backups

        self.command_list   = self.menu.add_list_box(COMMAND_COLUMN, COMMANDS_HEADER)
        self.command_list.set_items([TEXT_BACK_UP_SAVE, TEXT_VIEW_BACKUPS, TEXT_TOGGLE_AUTO_BACKUP])
        self.details        = self.menu.add_text_box(DETAILS_COLUMN, SAVE_DETAILS_HEADER)

        # --- Backed up saves are listed on top of the summary
        details_rect        = self.details.rect
        self.backup_list    = ListBox(self.ctx, Rect(details_rect.left, details_rect.top, details_rect.width,
                                                     details_rect.height),
                                      theme.content_bg, theme.content_fg, True)
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def write_summary(self) -> None:
        try:
            current = self.backups.current_save_name()
            count   = len(self.backups.backed_up_save_names())
        except BackupError as e:
            self.details.clear_content()
            self.report_error(str(e))
            return

        auto_backup = TEXT_ENABLED if self.backups.auto_backup else TEXT_DISABLED
        self.details.set_lines([f"{SAVE_SUMMARY_CURRENT_SAVE} {current}",
                                f"{SAVE_SUMMARY_BACKUPS_COUNT} {count}",
                                f"{SAVE_SUMMARY_AUTO_BACKUP} {auto_backup}"])
    # --- END OF write_summary() ---------------------------------------------------------------------------------------



    def pre_show(self) -> None:
        self.log.clear_content()
        self.write_summary()



    def selected(self, _selection: Selection) -> None:
        self.command_list.highlight_current_item()
        self.log.clear_content()

        match _selection.row:
            case row if row == BACK_UP_ROW:
                self.back_up_current_save()
            case row if row == VIEW_BACKUPS_ROW:
                self.view_backups()
            case row if row == TOGGLE_AUTO_BACKUP_ROW:
                self.toggle_auto_backup()

        self.write_summary()
        self.command_list.select_current_item()
    # --- END OF selected() --------------------------------------------------------------------------------------------



    def back_up_current_save(self) -> None:
        self.log.write_line("Backing up current save...")
        try:
            name = self.backups.back_up_current_save()
        except BackupError as e:
            self.report_error(str(e))
            return
        self.log.append_last_line(f" backed up as \"{name}\"!")
    # --- END OF back_up_current_save() --------------------------------------------------------------------------------



    def view_backups(self) -> None:
        """
        Backed up saves loop. Confirm offers to load the selected backup, Cancel goes back to the commands.
        """
        try:
            names = self.backups.backed_up_save_names()
        except BackupError as e:
            self.report_error(str(e))
            return

        if not names:
            self.log.write_line("No backups of save files available.")
            return

        self.backup_list.set_items(names)
        self.backup_list.clear()
        self.backup_list.navigate_to_default()
        self.backup_list.paint()

        while True:
            selection = self.backup_list.prompt_selection()
            if selection.command == Command.CANCEL:
                break
            if selection.command != Command.CONFIRM or selection.item is None:
                continue

            self.backup_list.highlight_current_item()
            options = SelectionPrompt.Options(allow_cancel=True)
            if self.selection_prompt.prompt_selection([TEXT_LOAD_BACKUP], options) == 0:
                self.load_backup(selection.item.text)
                break
            self.backup_list.select_current_item()
        # --- END OF while True ----------------------------------------------------------------------------------------

        self.backup_list.deactivate()
        self.backup_list.clear()
    # --- END OF view_backups() ----------------------------------------------------------------------------------------



    def load_backup(self, _name: str) -> None:
        self.log.write_line(f"Loading save \"{_name}\"...")
        try:
            self.backups.swap_saves(_name)
        except BackupError as e:
            self.report_error(str(e))
            return
        self.log.append_last_line(" loaded!")
    # --- END OF load_backup() -----------------------------------------------------------------------------------------



    def toggle_auto_backup(self) -> None:
        try:
            enabled = self.backups.toggle_auto_backup()
        except BackupError as e:
            self.report_error(str(e))
            return
        self.log.write_line(f"Auto-backups {TEXT_ENABLED if enabled else TEXT_DISABLED}.")
    # --- END OF toggle_auto_backup() ----------------------------------------------------------------------------------
# --- END OF class SaveManagerWindow -----------------------------------------------------------------------------------
