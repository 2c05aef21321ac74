"""
Filename:       map_editor_window.py
Author:         jole
Created:        10.10.2025

Description:    Create and edit installed maps. Left column lists the maps (with a "show only WIP maps" check box and
                an "add new map" row on top), right column shows the details of the selected one. Editing the info
                swaps the details pane for a list of fields, each edited in place with a TextInput. Editing the levels
                swaps the map list for the map's levels. A finished map can be exported back into the custom maps
                folder.

Notes:          Every confirmed field edit is saved through the catalog straight away, and rolled back if saving fails.
                Level names are shown without their extension, the list items carry the level file name.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import os

from typing         import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

# --- Project defined
from .content           import Map, MapCatalog
from .default_window    import DefaultWindow, map_info_lines
from .defs              import (INSTALLED_MAPS_HEADER, LEVELS_HEADER, MAP_DETAILS_HEADER, MAP_EDITOR_WINDOW_TITLE,
                                MAP_INFO_AUTHOR, MAP_INFO_IS_WIP, MAP_INFO_LONG_DESCRIPTION, MAP_INFO_NAME,
                                MAP_INFO_NO_AUTHOR, MAP_INFO_NO_STARTUP_LEVEL, MAP_INFO_NO_VERSION,
                                MAP_INFO_SHORT_DESCRIPTION, MAP_INFO_STARTUP_LEVEL, MAP_INFO_VERSION,
                                MULTILINE_EDITOR_HINT, SCRIPT_FILE_EXTENSION, TEXT_ADD_LEVEL, TEXT_ADD_MAP,
                                TEXT_ASSIGN_LEVELS, TEXT_DELETE, TEXT_EDIT_LEVELS, TEXT_EDIT_MAP_INFO, TEXT_EXPORT,
                                TEXT_EXPORT_TIMESTAMPED, TEXT_LEVEL_NAME, TEXT_MAP_NAME, TEXT_OVERWRITE, TEXT_RENAME,
                                TEXT_SHOW_ISSUES, TEXT_SHOW_ONLY_WIP)
from .drawable          import Rect
from .errors            import CatalogError
from .list_box          import ListBox
from .navigable         import Selection, SelectionChangedEvent
from .selectable        import CheckBox
from .selection_prompt  import SelectionPrompt
from .text_input        import PromptOptions, TextInput
from .tui_state         import Command

if TYPE_CHECKING:
    from .map_manager   import MapManager
# --- END OF Import section --------------------------------------------------------------------------------------------



MAP_LIST_COLUMN     = 0
DETAILS_COLUMN      = 1
WIP_CHECK_BOX_ROW   = 0
ADD_MAP_ROW         = 1
SEPARATOR_ROW       = 2
FIRST_MAP_ROW       = 3

# --- Rows of the level list
ADD_LEVEL_ROW           = 0
ASSIGN_LEVELS_ROW       = 1
LEVEL_SEPARATOR_ROW     = 2
FIRST_LEVEL_ROW         = 3

# --- Rows of the field list while editing
NAME_ROW                = 0
VERSION_ROW             = 1
AUTHOR_ROW              = 2
STARTUP_LEVEL_ROW       = 3
IS_WIP_ROW              = 4
SHORT_DESCRIPTION_ROW   = 5
LONG_DESCRIPTION_ROW    = 6

# --- (row, label prefix, Map attribute, placeholder when empty, allow empty)
SINGLE_LINE_FIELDS: List[Tuple[int, str, str, str, bool]] = [
    (NAME_ROW,              MAP_INFO_NAME,              "name",                 "",                         False),
    (VERSION_ROW,           MAP_INFO_VERSION,           "version",              MAP_INFO_NO_VERSION,        True),
    (AUTHOR_ROW,            MAP_INFO_AUTHOR,            "author",               MAP_INFO_NO_AUTHOR,         True),
    (STARTUP_LEVEL_ROW,     MAP_INFO_STARTUP_LEVEL,     "startup_level",        MAP_INFO_NO_STARTUP_LEVEL,  True),
    (SHORT_DESCRIPTION_ROW, MAP_INFO_SHORT_DESCRIPTION, "short_description",    "",                         True),
]



class MapEditorWindow(DefaultWindow):

    def __init__(self, _manager: "MapManager", _catalog: MapCatalog) -> None:
        theme = _manager.ctx.theme
        super().__init__(_manager, MAP_EDITOR_WINDOW_TITLE, theme.editor_title_bg, theme.editor_title_fg)

        self.catalog                                = _catalog
        self.show_only_wip: Optional[CheckBox]      = None

        self.map_list = self.menu.add_list_box(MAP_LIST_COLUMN, INSTALLED_MAPS_HEADER, True)
        self.map_list.on_selection_changed(self._map_selection_changed)
        self.details = self.menu.add_text_box(DETAILS_COLUMN, MAP_DETAILS_HEADER)

        # --- Name inputs are drawn over the row they were opened from. Items start one cell in (the "[")
        map_rect            = self.map_list.rect
        input_width         = max(1, self.map_list.item_width - 2)
        name_options        = PromptOptions(allow_empty=False, can_cancel=True)
        self.new_map_input  = TextInput(self.ctx, Rect(map_rect.left + 1, map_rect.top, input_width, 1),
                                        theme.text_input_bg, theme.text_input_fg, _preview_text=TEXT_MAP_NAME,
                                        _default_options=name_options)

        # --- The level list sits on top of the map list while editing levels, the assign list on the details
        self.level_list     = ListBox(self.ctx, Rect(map_rect.left, map_rect.top, map_rect.width, map_rect.height),
                                      theme.content_bg, theme.content_fg, True)
        self.level_name_input = TextInput(self.ctx, Rect(map_rect.left + 1, map_rect.top, input_width, 1),
                                          theme.text_input_bg, theme.text_input_fg, _preview_text=TEXT_LEVEL_NAME,
                                          _default_options=name_options)
        self.level_rename_input = TextInput(self.ctx, Rect(map_rect.left + 1, map_rect.top, input_width, 1),
                                            theme.text_input_bg, theme.text_input_fg, _preview_text=TEXT_LEVEL_NAME,
                                            _default_options=name_options)

        # --- The field list sits on top of the details pane while editing
        details_rect        = self.details.rect
        self.field_list     = ListBox(self.ctx, Rect(details_rect.left, details_rect.top, details_rect.width,
                                                     details_rect.height),
                                      theme.content_bg, theme.content_fg, True)
        self.assign_list    = ListBox(self.ctx, Rect(details_rect.left, details_rect.top, details_rect.width,
                                                     details_rect.height),
                                      theme.content_bg, theme.content_fg, True)

        # --- One single line input per field, right after the field's label. Items start one cell in (the "[")
        self.field_inputs: Dict[int, TextInput] = {}
        for row, prefix, _attribute, _placeholder, allow_empty in SINGLE_LINE_FIELDS:
            left = details_rect.left + 1 + len(prefix)
            self.field_inputs[row] = TextInput(self.ctx,
                                               Rect(left, details_rect.top + row,
                                                    max(1, self.field_list.item_width - 2 - len(prefix)), 1),
                                               theme.text_input_bg,
                                               theme.text_input_fg,
                                               _default_options=PromptOptions(allow_empty            = allow_empty,
                                                                              can_cancel             = True,
                                                                              pre_write_current_text = True))

        long_top    = details_rect.top + LONG_DESCRIPTION_ROW + 1
        long_height = max(1, details_rect.bottom - long_top + 1)
        self.long_description_input = TextInput(self.ctx,
                                                Rect(details_rect.left + 1, min(long_top, details_rect.bottom),
                                                     max(1, self.field_list.item_width - 2), long_height),
                                                theme.text_input_bg,
                                                theme.text_input_fg,
                                                _default_options=PromptOptions(allow_empty            = True,
                                                                               can_cancel             = True,
                                                                               pre_write_current_text = True),
                                                _multiline=True)
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    # --- Map list -----------------------------------------------------------------------------------------------------

    def refresh_map_list(self) -> None:
        """
        Rebuilds the map list: the WIP check box, the add map row, a separator, then the (possibly filtered) installed
        maps.
        """
        only_wip = self.show_only_wip is not None and self.show_only_wip.checked

        self.map_list.set_items([])
        self.show_only_wip = self.map_list.add_check_box(TEXT_SHOW_ONLY_WIP, only_wip)
        self.map_list.add_item(TEXT_ADD_MAP)
        self.map_list.add_separator()
        for installed in self.catalog.installed_maps():
            if installed.is_wip or not only_wip:
                self.map_list.add_item(installed.display_name, installed)
        self.map_list.paint()
    # --- END OF refresh_map_list() ------------------------------------------------------------------------------------



    def _map_selection_changed(self, _event: SelectionChangedEvent) -> None:
        if self._muted:
            return
        if _event.selected_index < FIRST_MAP_ROW or _event.selected_item is None:
            self.details.clear_content()
            return

        selected_map: Map = _event.selected_item.payload
        self.details.set_lines(map_info_lines(selected_map, self.details.rect.width))
        self.write_map_issues(selected_map)
    # --- END OF _map_selection_changed() ------------------------------------------------------------------------------



    def pre_show(self) -> None:
        self.refresh_map_list()
        self.details.clear_content()
    # --- END OF pre_show() --------------------------------------------------------------------------------------------



    def selected(self, _selection: Selection) -> None:
        match _selection.row:
            case row if row == WIP_CHECK_BOX_ROW:
                self.show_only_wip.toggle()
                self.refresh_map_list()
                self.map_list.select(WIP_CHECK_BOX_ROW)

            case row if row == ADD_MAP_ROW:
                self.map_list.highlight_current_item()
                self._reselect(self.add_map(), ADD_MAP_ROW)

            case row if row == SEPARATOR_ROW:
                pass

            case _:
                self.map_list.highlight_current_item()
                selected_map: Map = _selection.item.payload

                labels  = [TEXT_EDIT_MAP_INFO, TEXT_EDIT_LEVELS, TEXT_EXPORT]
                options = SelectionPrompt.Options(allow_cancel=True)
                if not selected_map.is_valid:
                    labels.append(TEXT_SHOW_ISSUES)
                    options.index = 3

                match self.selection_prompt.prompt_selection(labels, options):
                    case 0:
                        self.edit_map_info(selected_map)
                    case 1:
                        self.edit_levels(selected_map)
                    case 2:
                        self.export_map(selected_map)
                    case 3:
                        self.write_map_issues(selected_map)

                self._reselect(selected_map, _selection.row)
    # --- END OF selected() --------------------------------------------------------------------------------------------



    def _reselect(self, _map: Optional[Map], _fallback_row: int) -> None:
        """
        Rebuilds the list (names may have changed) and selects _map again, or the closest row if it's gone.
        The log is left alone, it holds the outcome of whatever the user just did.
        """
        self.refresh_map_list()
        rows = [i for i, item in enumerate(self.map_list.items) if _map is not None and item.payload is _map]
        with self._quiet():
            self.map_list.select(rows[0] if rows else _fallback_row)

        if rows:
            self.details.set_lines(map_info_lines(_map, self.details.rect.width))
        else:
            self.details.clear_content()
        self.menu.paint()
    # --- END OF _reselect() -------------------------------------------------------------------------------------------



    def add_map(self) -> Optional[Map]:
        """
        Asks for a name in place of the add map row and creates an empty WIP map with it.

        :return:    The new map, None if the user cancelled or the catalog refused
        """
        self.new_map_input.rect.top = self.map_list.rect.top + ADD_MAP_ROW - self.map_list.scroll_offset
        self.new_map_input.text     = ""
        if not self.new_map_input.prompt_text():
            return None

        self.log.clear_content()
        try:
            new_map = self.catalog.create_map(self.new_map_input.text)
        except CatalogError as e:
            self.report_error(str(e))
            return None
        self.log.write_line(f"Created map {new_map.name}.")
        return new_map
    # --- END OF add_map() ---------------------------------------------------------------------------------------------
    # --- END OF Map list ----------------------------------------------------------------------------------------------



    # --- Field editing ------------------------------------------------------------------------------------------------

    @staticmethod
    def _field_text(_map: Map, _row: int) -> str:
        for row, prefix, attribute, placeholder, _allow_empty in SINGLE_LINE_FIELDS:
            if row == _row:
                return prefix + (getattr(_map, attribute) or placeholder)
        if _row == IS_WIP_ROW:
            return MAP_INFO_IS_WIP + str(_map.is_wip)
        return MAP_INFO_LONG_DESCRIPTION
    # --- END OF _field_text() -----------------------------------------------------------------------------------------



    def _edit_single_line(self, _map: Map, _row: int) -> bool:
        attribute               = next(a for r, _p, a, _ph, _e in SINGLE_LINE_FIELDS if r == _row)
        text_input              = self.field_inputs[_row]
        text_input.text         = getattr(_map, attribute) or ""
        if not text_input.prompt_text():
            return False
        setattr(_map, attribute, text_input.text or None)
        return True
    # --- END OF _edit_single_line() -----------------------------------------------------------------------------------



    def _edit_long_description(self, _map: Map) -> bool:
        self.log.clear_content()
        self.log.write_lines(MULTILINE_EDITOR_HINT)

        self.long_description_input.text = _map.long_description or ""
        confirmed = self.long_description_input.prompt_text()
        if confirmed:
            _map.long_description = self.long_description_input.text or None

        self.long_description_input.clear()
        self.log.clear_content()
        return confirmed
    # --- END OF _edit_long_description() ------------------------------------------------------------------------------



    def edit_map_info(self, _map: Map) -> None:
        """
        Field list loop. Confirm edits the selected field, Cancel goes back to the map list.
        """
        self.field_list.set_items([(self._field_text(_map, row), row) for row in range(LONG_DESCRIPTION_ROW + 1)])
        self.field_list.clear()
        self.field_list.navigate_to_default()
        self.field_list.paint()

        edits: Dict[int, Callable[[], bool]] = {row: (lambda r=row: self._edit_single_line(_map, r))
                                                for row, *_rest in SINGLE_LINE_FIELDS}
        edits[IS_WIP_ROW]           = lambda: self._toggle_wip(_map)
        edits[LONG_DESCRIPTION_ROW] = lambda: self._edit_long_description(_map)

        while True:
            selection = self.field_list.prompt_selection()
            if selection.command == Command.CANCEL:
                break
            if selection.command != Command.CONFIRM or selection.row not in edits:
                continue

            self.field_list.highlight_current_item()
            before = _map.to_dict()
            if edits[selection.row]() and not self._save(_map):
                # --- The edit didn't make it to disk, don't pretend it did
                for attribute, value in before.items():
                    setattr(_map, attribute, value)
                _map.verify()
            selection.item.text = self._field_text(_map, selection.row)
            self.field_list.paint()
            self.field_list.select_current_item()
        # --- END OF while True ----------------------------------------------------------------------------------------

        self.field_list.deactivate()
        self.field_list.clear()
    # --- END OF edit_map_info() ---------------------------------------------------------------------------------------



    @staticmethod
    def _toggle_wip(_map: Map) -> bool:
        _map.is_wip = not _map.is_wip
        return True



    def _save(self, _map: Map) -> bool:
        """
        :return:    False if the catalog refused, the error is already reported
        """
        try:
            self.catalog.save_map_info(_map)
        except CatalogError as e:
            self.report_error(str(e))
            return False
        return True
    # --- END OF _save() -----------------------------------------------------------------------------------------------
    # --- END OF Field editing -----------------------------------------------------------------------------------------



    # --- Levels -------------------------------------------------------------------------------------------------------

    def refresh_level_list(self, _map: Map) -> None:
        self.level_list.set_items([])
        self.level_list.add_item(TEXT_ADD_LEVEL)
        self.level_list.add_item(TEXT_ASSIGN_LEVELS)
        self.level_list.add_separator()
        for level in _map.levels:
            self.level_list.add_item(os.path.splitext(level)[0], level)
        self.level_list.paint()
    # --- END OF refresh_level_list() ----------------------------------------------------------------------------------



    def _input_row_top(self, _row: int) -> int:
        return self.level_list.rect.top + _row - self.level_list.scroll_offset



    def edit_levels(self, _map: Map) -> None:
        """
        Level list loop. Confirm on a level offers to rename or delete it, Cancel goes back to the map list.
        """
        self.log.clear_content()
        self.menu.set_header(MAP_LIST_COLUMN, LEVELS_HEADER)
        self.menu.headers[MAP_LIST_COLUMN].paint()
        self.level_list.clear()
        self.refresh_level_list(_map)
        self.level_list.navigate_to_default()

        while True:
            selection = self.level_list.prompt_selection()
            if selection.command == Command.CANCEL:
                break
            if selection.command != Command.CONFIRM or selection.item is None:
                continue

            self.level_list.highlight_current_item()
            match selection.row:
                case row if row == ADD_LEVEL_ROW:
                    self.add_level(_map)
                case row if row == ASSIGN_LEVELS_ROW:
                    self.assign_levels(_map)
                case row if row == LEVEL_SEPARATOR_ROW:
                    pass
                case _:
                    self._prompt_level_command(_map, selection.item.payload, selection.row)

            self.refresh_level_list(_map)
            self.level_list.select(selection.row)
        # --- END OF while True ----------------------------------------------------------------------------------------

        self.level_list.deactivate()
        self.level_list.clear()
        self.menu.set_header(MAP_LIST_COLUMN, INSTALLED_MAPS_HEADER)
    # --- END OF edit_levels() -----------------------------------------------------------------------------------------



    def add_level(self, _map: Map) -> None:
        self.level_name_input.rect.top  = self._input_row_top(ADD_LEVEL_ROW)
        self.level_name_input.text      = ""
        if not self.level_name_input.prompt_text():
            return

        name = self.level_name_input.text
        self.log.clear_content()
        try:
            self.catalog.add_level(_map, name)
        except CatalogError as e:
            self.report_error(str(e))
            return
        self.log.write_line(f"Added level {name}.")
    # --- END OF add_level() -------------------------------------------------------------------------------------------



    def assign_levels(self, _map: Map) -> None:
        """
        Check box list of every level in the game, over the details pane. Levels another map owns can't be ticked.
        """
        self.log.clear_content()
        try:
            levels = self.catalog.installed_level_names()
        except CatalogError as e:
            self.report_error(str(e))
            return
        if not levels:
            self.log.write_line("There are no levels in the game folder.")
            return

        self.assign_list.set_items([])
        for level in levels:
            owner = self.catalog.level_owner(level)
            self.assign_list.add_check_box(os.path.splitext(level)[0], owner is _map, owner is None or owner is _map,
                                           level)
        self.assign_list.clear()
        self.assign_list.navigate_to_default()
        self.assign_list.paint()

        while True:
            selection = self.assign_list.prompt_selection()
            if selection.command == Command.CANCEL:
                break
            if selection.command != Command.CONFIRM or selection.item is None or not selection.item.enabled:
                continue

            check_box: CheckBox = selection.item
            try:
                if check_box.checked:
                    self.catalog.unassign_level(_map, check_box.payload)
                else:
                    self.catalog.assign_level(_map, check_box.payload)
            except CatalogError as e:
                self.report_error(str(e))
                continue

            check_box.toggle()
            self.refresh_level_list(_map)
        # --- END OF while True ----------------------------------------------------------------------------------------

        self.assign_list.deactivate()
        self.assign_list.clear()
        self.details.paint()
    # --- END OF assign_levels() ---------------------------------------------------------------------------------------



    def _prompt_level_command(self, _map: Map, _level: str, _row: int) -> None:
        self.log.clear_content()
        match self.selection_prompt.prompt_selection([TEXT_RENAME, TEXT_DELETE],
                                                     SelectionPrompt.Options(allow_cancel=True)):
            case 0:
                self.rename_level(_map, _level, _row)
            case 1:
                self.delete_level(_map, _level)
    # --- END OF _prompt_level_command() -------------------------------------------------------------------------------



    def rename_level(self, _map: Map, _level: str, _row: int) -> None:
        """
        Edits the level name in place of its row.
        """
        self.level_rename_input.rect.top = self._input_row_top(_row)
        options = PromptOptions(allow_empty=False, can_cancel=True, pre_written_text=os.path.splitext(_level)[0])
        if not self.level_rename_input.prompt_text(options):
            return

        self.log.write_line(f"Renaming level {_level}...")
        try:
            self.catalog.rename_level(_map, _level, self.level_rename_input.text)
        except CatalogError as e:
            self.report_error(str(e))
            return
        self.log.append_last_line(" renamed!")
    # --- END OF rename_level() ----------------------------------------------------------------------------------------



    def delete_level(self, _map: Map, _level: str) -> None:
        script = os.path.splitext(_level)[0] + SCRIPT_FILE_EXTENSION
        self.log.write_line(f"This deletes {_level} and {script} from the game folder. Are you sure?")
        self.log.write_line("Assign existing levels lets you unassign the level and keep its files instead.")

        # --- Start on Cancel, nothing brings the files back
        options = SelectionPrompt.Options(allow_cancel=True, index=1)
        if self.selection_prompt.prompt_selection([TEXT_DELETE], options) != 0:
            self.log.clear_content()
            return

        self.log.clear_content()
        self.log.write_line(f"Deleting level {_level}...")
        try:
            self.catalog.delete_level(_map, _level)
        except CatalogError as e:
            self.report_error(str(e))
            return
        self.log.append_last_line(" deleted!")
    # --- END OF delete_level() ----------------------------------------------------------------------------------------
    # --- END OF Levels ------------------------------------------------------------------------------------------------



    def export_map(self, _map: Map) -> None:
        """
        Copies the map back into the custom maps folder. An earlier export is only replaced if the user says so,
        otherwise the new one can get a timestamped folder.
        """
        self.log.clear_content()
        overwrite = timestamped = False

        if self.catalog.export_exists(_map):
            self.log.write_line(f"{self.catalog.export_path(_map)} already exists. Overwrite?")
            options = SelectionPrompt.Options(allow_cancel=True, index=2)
            match self.selection_prompt.prompt_selection([TEXT_OVERWRITE, TEXT_EXPORT_TIMESTAMPED], options):
                case 0:
                    overwrite = True
                case 1:
                    timestamped = True
                case _:
                    self.log.clear_content()
                    return

        self.log.write_line(f"Exporting map {_map.name}...")
        try:
            self.catalog.export_map(_map, overwrite, timestamped)
        except CatalogError as e:
            self.report_error(str(e))
            return
        self.log.append_last_line(" exported!")
        if _map.is_wip:
            self.log.write_line("The map is still marked as work in progress, unmark it before sharing.")
    # --- END OF export_map() ------------------------------------------------------------------------------------------
# --- END OF class MapEditorWindow -------------------------------------------------------------------------------------
