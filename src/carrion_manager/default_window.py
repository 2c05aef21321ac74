"""
Filename:       default_window.py
Author:         jole
Created:        08.10.2025

Description:    Base layout shared by the map windows, top to bottom:

                    title
                    two column menu
                    separator
                    selection prompt row
                    separator
                    log (4 lines)
                    (blank)
                    controls

Notes:          show() is the window's event loop. Confirm on a list item goes to selected(), Cancel goes back to the
                navigation window, the window switch commands go through the manager's registry.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from abc            import ABC, abstractmethod
from contextlib     import contextmanager
from typing         import TYPE_CHECKING, Iterator, List

# --- Project defined
from .column_view       import ColumnView
from .content           import Map
from .defs              import (CONTROLS_TEXT, MAP_HAS_ISSUES_INDICATOR, MAP_INFO_AUTHOR, MAP_INFO_LONG_DESCRIPTION,
                                MAP_INFO_NAME, MAP_INFO_NO_AUTHOR, MAP_INFO_NO_STARTUP_LEVEL, MAP_INFO_NO_VERSION,
                                MAP_INFO_SEPARATOR, MAP_INFO_SHORT_DESCRIPTION, MAP_INFO_STARTUP_LEVEL,
                                MAP_INFO_VERSION, MAP_INFO_IS_WIP)
from .drawable          import Box, Label, Rect
from .navigable         import Selection
from .selection_prompt  import SelectionPrompt
from .text_box          import TextBox
from .tui_state         import Color, Command, HorizontalAlignment
from .word_wrap         import split_into_lines

if TYPE_CHECKING:
    from .map_manager   import MapManager
# --- END OF Import section --------------------------------------------------------------------------------------------



TITLE_HEIGHT                    = 1
MENU_COMMAND_SEPARATOR_HEIGHT   = 1
SELECTION_PROMPT_HEIGHT         = 1
COMMAND_LOG_SEPARATOR_HEIGHT    = 1
LOG_HEIGHT                      = 4
LOG_CONTROLS_DISTANCE           = 1
CONTROLS_HEIGHT                 = 1

BOTTOM_ALIGNED_HEIGHT = (MENU_COMMAND_SEPARATOR_HEIGHT + SELECTION_PROMPT_HEIGHT + COMMAND_LOG_SEPARATOR_HEIGHT +
                         LOG_HEIGHT + LOG_CONTROLS_DISTANCE + CONTROLS_HEIGHT)



def short_map_info(_map: Map) -> str:
    """
    One line summary: name | author | version
    """
    return MAP_INFO_SEPARATOR.join([MAP_INFO_NAME + _map.name,
                                    MAP_INFO_AUTHOR + (_map.author or MAP_INFO_NO_AUTHOR),
                                    MAP_INFO_VERSION + (_map.version or MAP_INFO_NO_VERSION)])
# --- END OF short_map_info() ------------------------------------------------------------------------------------------



def map_info_lines(_map: Map, _width: int) -> List[str]:
    """
    Everything we know about a map, wrapped to _width, for the details pane.
    """
    lines = [MAP_INFO_NAME + _map.name,
             MAP_INFO_VERSION + (_map.version or MAP_INFO_NO_VERSION),
             MAP_INFO_AUTHOR + (_map.author or MAP_INFO_NO_AUTHOR),
             MAP_INFO_STARTUP_LEVEL + (_map.startup_level or MAP_INFO_NO_STARTUP_LEVEL),
             MAP_INFO_IS_WIP + str(_map.is_wip)]
    lines += split_into_lines(MAP_INFO_SHORT_DESCRIPTION + (_map.short_description or ""), _width)
    lines.append(MAP_INFO_LONG_DESCRIPTION)
    lines += split_into_lines(_map.long_description or "", _width)
    return lines
# --- END OF map_info_lines() ------------------------------------------------------------------------------------------



class DefaultWindow(ABC):

    def __init__(self, _manager: "MapManager", _title: str, _title_bg: Color, _title_fg: Color) -> None:
        self.manager    = _manager
        self.ctx        = _manager.ctx
        self.logger     = _manager.logger
        self._muted     = False
        theme           = self.ctx.theme

        width, height   = self.ctx.terminal.size()

        self.title = Label(self.ctx, Rect(0, 0, width, TITLE_HEIGHT), _title_bg, _title_fg, _title,
                           HorizontalAlignment.CENTER)

        self.controls_label = Label(self.ctx, Rect(0, height - CONTROLS_HEIGHT, width, CONTROLS_HEIGHT),
                                    theme.controls_bg, theme.controls_fg, CONTROLS_TEXT)

        self.log = TextBox(self.ctx,
                           Rect(0, self.controls_label.rect.top - LOG_CONTROLS_DISTANCE - LOG_HEIGHT, width,
                                LOG_HEIGHT),
                           theme.content_bg,
                           theme.content_fg)

        self.command_log_separator = Box(self.ctx,
                                         Rect(0, self.log.rect.top - COMMAND_LOG_SEPARATOR_HEIGHT, width,
                                              COMMAND_LOG_SEPARATOR_HEIGHT),
                                         theme.separator_bg,
                                         theme.separator_fg)

        self.selection_prompt = SelectionPrompt(self.ctx,
                                                Rect(0, self.command_log_separator.rect.top - SELECTION_PROMPT_HEIGHT,
                                                     width, SELECTION_PROMPT_HEIGHT),
                                                theme.content_bg,
                                                theme.content_fg)

        self.menu_command_separator = Box(self.ctx,
                                          Rect(0, self.selection_prompt.rect.top - MENU_COMMAND_SEPARATOR_HEIGHT, width,
                                               MENU_COMMAND_SEPARATOR_HEIGHT),
                                          theme.separator_bg,
                                          theme.separator_fg)

        self.menu = ColumnView(self.ctx,
                               Rect(0, TITLE_HEIGHT, width, height - TITLE_HEIGHT - BOTTOM_ALIGNED_HEIGHT),
                               theme.content_bg,
                               theme.content_fg,
                               2)
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def paint_all(self) -> None:
        width, height = self.ctx.terminal.size()
        self.ctx.terminal.clear(Rect(0, 0, width, height), self.ctx.theme.content_bg, self.ctx.theme.content_fg)
        self.title.paint()
        self.menu.paint()
        self.menu_command_separator.paint()
        self.command_log_separator.paint()
        self.log.paint()
        self.controls_label.paint()
    # --- END OF paint_all() -------------------------------------------------------------------------------------------



    def write_short_map_info(self, _map: Map) -> None:
        self.log.clear_content()
        self.log.write_line(short_map_info(_map))
        if _map.short_description:
            self.log.write_wrapped(_map.short_description)
        self.write_map_issues(_map, _clear=False)
    # --- END OF write_short_map_info() --------------------------------------------------------------------------------



    def write_map_issues(self, _map: Map, _clear: bool = True) -> None:
        """
        Lists the map's issues in the log. If they don't all fit, the last line says how many were left out.
        """
        if _clear:
            self.log.clear_content()
        if not _map.issues:
            return

        room = max(1, self.log.rect.height - len(self.log.lines))
        if len(_map.issues) <= room:
            self.log.write_lines(MAP_HAS_ISSUES_INDICATOR + issue for issue in _map.issues)
        else:
            self.log.write_lines(MAP_HAS_ISSUES_INDICATOR + issue for issue in _map.issues[: room - 1])
            self.log.write_line(f"{MAP_HAS_ISSUES_INDICATOR}{len(_map.issues) - room + 1} more issues...")
    # --- END OF write_map_issues() ------------------------------------------------------------------------------------



    @contextmanager
    def _quiet(self) -> Iterator[None]:
        """
        Mutes the window's selection listeners while it re-selects rows itself, so the log isn't overwritten.
        """
        self._muted = True
        try:
            yield
        finally:
            self._muted = False
    # --- END OF _quiet() ----------------------------------------------------------------------------------------------



    def report_error(self, _message: str) -> None:
        """
        Surfaces a collaborator failure to the user (log box) and to the log file.
        """
        self.log.write_line(f"ERROR: {_message}")
        self.logger.error(_message)
    # --- END OF report_error() ----------------------------------------------------------------------------------------



    def pre_show(self) -> None:
        pass



    @abstractmethod
    def selected(self, _selection: Selection) -> None:
        """
        Called when the user confirms a list item in the menu.
        """
        ...



    def show(self) -> None:
        """
        Runs the window until the user leaves it.

        :return: None
        """
        self.pre_show()
        self.menu.navigate_to_default()
        self.paint_all()

        window_quit = False
        while not window_quit:
            selection = self.menu.prompt_selection()

            match selection.command:
                case Command.CONFIRM:
                    if selection.list is not None and selection.item is not None:
                        self.selected(selection)
                case Command.CANCEL:
                    self.manager.change_window(Command.SHOW_NAVIGATION)
                    window_quit = True
                case _:
                    window_quit = self.manager.change_window(selection.command)
            # --- END OF match selection.command -----------------------------------------------------------------------
        # --- END OF while not window_quit -----------------------------------------------------------------------------
    # --- END OF show() ------------------------------------------------------------------------------------------------
# --- END OF class DefaultWindow ---------------------------------------------------------------------------------------
