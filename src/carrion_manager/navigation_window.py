"""
Filename:       navigation_window.py
Author:         jole
Created:        08.10.2025

Description:    Start window, a single list of the other windows. Escape here quits the application.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import TYPE_CHECKING

# --- Project defined
from .column_view   import ColumnView
from .defs          import (BACKUPS_WINDOW_TITLE, CONTROLS_TEXT, MAP_EDITOR_WINDOW_TITLE, MAP_INSTALLER_WINDOW_TITLE,
                            NAVIGATION_LIST_HEADER, NAVIGATION_WINDOW_TITLE, SAVE_MANAGER_WINDOW_TITLE)
from .drawable      import Label, Rect
from .tui_state     import Command, HorizontalAlignment

if TYPE_CHECKING:
    from .map_manager   import MapManager
# --- END OF Import section --------------------------------------------------------------------------------------------



LIST_LEFT   = 2
LIST_TOP    = 2
LIST_WIDTH  = 40
LIST_HEIGHT = 10



class NavigationWindow:

    def __init__(self, _manager: "MapManager") -> None:
        self.manager    = _manager
        self.ctx        = _manager.ctx
        theme           = self.ctx.theme

        width, height   = self.ctx.terminal.size()

        self.title = Label(self.ctx, Rect(0, 0, width, 1), theme.navigation_title_bg, theme.navigation_title_fg,
                           NAVIGATION_WINDOW_TITLE, HorizontalAlignment.CENTER)

        self.controls_label = Label(self.ctx, Rect(0, height - 1, width, 1), theme.controls_bg, theme.controls_fg,
                                    CONTROLS_TEXT)

        # --- Leave a blank row above the controls
        list_height = max(2, min(LIST_HEIGHT, height - LIST_TOP - 2))
        self.menu = ColumnView(self.ctx,
                               Rect(LIST_LEFT, LIST_TOP, min(LIST_WIDTH, width - LIST_LEFT), list_height),
                               theme.content_bg,
                               theme.content_fg,
                               1)
        self.windows_list = self.menu.add_list_box(0, NAVIGATION_LIST_HEADER)
        self.windows_list.set_items([(f"1. {NAVIGATION_WINDOW_TITLE}",   Command.SHOW_NAVIGATION),
                                     (f"2. {MAP_INSTALLER_WINDOW_TITLE}", Command.SHOW_MAP_INSTALLER),
                                     (f"3. {MAP_EDITOR_WINDOW_TITLE}",    Command.SHOW_MAP_EDITOR),
                                     (f"4. {SAVE_MANAGER_WINDOW_TITLE}",  Command.SHOW_SAVE_MANAGER),
                                     (f"5. {BACKUPS_WINDOW_TITLE}",       Command.SHOW_BACKUPS)])
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def paint_all(self) -> None:
        width, height = self.ctx.terminal.size()
        self.ctx.terminal.clear(Rect(0, 0, width, height), self.ctx.theme.content_bg, self.ctx.theme.content_fg)
        self.title.paint()
        self.menu.paint()
        self.controls_label.paint()
    # --- END OF paint_all() -------------------------------------------------------------------------------------------



    def show(self) -> None:
        self.menu.navigate_to_default()
        self.paint_all()

        window_quit = False
        while not window_quit:
            selection = self.menu.prompt_selection()

            match selection.command:
                case Command.CONFIRM if selection.item is not None:
                    window_quit = self.manager.change_window(selection.item.payload)
                case Command.CANCEL:
                    self.manager.quit = True
                    window_quit = True
                case _:
                    window_quit = self.manager.change_window(selection.command)
            # --- END OF match selection.command -----------------------------------------------------------------------
        # --- END OF while not window_quit -----------------------------------------------------------------------------
    # --- END OF show() ------------------------------------------------------------------------------------------------
# --- END OF class NavigationWindow ------------------------------------------------------------------------------------
