"""
Filename:       map_manager.py
Author:         jole
Created:        11.10.2025

Description:    MapManager holds the logic for the whole application, it keeps everything together!

Notes:          Owns the key bindings, the theme, the window registry and the quit flag. Nothing of this lives in
                module globals, the windows reach it through the manager they're constructed with.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses
import logging

from typing         import Dict, Optional, Protocol

# --- Project defined
from .backups               import BackupStore
from .backups_window        import BackupsWindow
from .content               import MapCatalog
from .defs                  import MIN_TERMINAL_HEIGHT, MIN_TERMINAL_WIDTH
from .key_bindings          import KeyBindings
from .log_helper            import SILENT, set_stdout_threshold
from .map_editor_window     import MapEditorWindow
from .map_installer_window  import MapInstallerWindow
from .navigation_window     import NavigationWindow
from .save_manager_window   import SaveManagerWindow
from .terminal              import CursesTerminal, Terminal
from .tui_state             import Command, TUIContext, TUITheme
# --- END OF Import section --------------------------------------------------------------------------------------------



class Window(Protocol):
    def show(self) -> None: ...



class MapManager:
    """
    Application execution steps:
        - Lay out every window for the current terminal size.
        - Show the current window until it hands over to another one (or the user quits).
    """

    def __init__(self,
                 _catalog:  MapCatalog,
                 _backups:  BackupStore,
                 _logger:   logging.Logger,
                 _bindings: Optional[KeyBindings] = None,
                 _theme:    Optional[TUITheme] = None
                 ) -> None:
        self.catalog                                = _catalog
        self.backups                                = _backups
        self.logger                                 = _logger
        self.bindings                               = _bindings or KeyBindings.default()
        self.theme                                  = _theme or TUITheme()
        self.ctx:               Optional[TUIContext]        = None
        self.windows:           Dict[Command, Window]       = {}
        self.current_window:    Optional[Window]            = None
        self.quit:              bool                        = False
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def change_window(self, _command: Command) -> bool:
        """
        Switches to the window registered for _command.

        :return:    True if the current window changed
        """
        next_window = self.windows.get(_command)
        if next_window is None or next_window is self.current_window:
            return False
        self.logger.debug(f"Switching to window {_command.name}")
        self.current_window = next_window
        return True
    # --- END OF change_window() ---------------------------------------------------------------------------------------



    def _terminal_too_small(self) -> bool:
        width, height = self.ctx.terminal.size()
        if width >= MIN_TERMINAL_WIDTH and height >= MIN_TERMINAL_HEIGHT:
            return False

        message = f"Terminal is {width}x{height}, needs at least {MIN_TERMINAL_WIDTH}x{MIN_TERMINAL_HEIGHT}."
        self.logger.warning(message)
        self.ctx.terminal.paint(0, 0, message, self.theme.error_bg, self.theme.error_fg)
        self.ctx.terminal.paint(0, 1, "Press any key to quit...", self.theme.content_bg, self.theme.content_fg)
        self.ctx.terminal.read_key()
        return True
    # --- END OF _terminal_too_small() ---------------------------------------------------------------------------------



    def run_with(self, _terminal: Terminal) -> None:
        """
        The main loop, on any terminal. run() calls it with a curses terminal.
        """
        self.ctx = TUIContext(_terminal, self.bindings, self.theme)
        if self._terminal_too_small():
            return

        self.windows = {Command.SHOW_NAVIGATION:    NavigationWindow(self),
                        Command.SHOW_MAP_INSTALLER: MapInstallerWindow(self, self.catalog, self.backups),
                        Command.SHOW_MAP_EDITOR:    MapEditorWindow(self, self.catalog),
                        Command.SHOW_SAVE_MANAGER:  SaveManagerWindow(self, self.backups),
                        Command.SHOW_BACKUPS:       BackupsWindow(self, self.backups)}
        self.current_window = self.windows[Command.SHOW_NAVIGATION]
        self.quit           = False

        self.logger.info("Main loop started")
        while not self.quit:
            self.current_window.show()
        self.logger.info("Main loop ended")
    # --- END OF run_with() --------------------------------------------------------------------------------------------



    def _curses_main(self, _stdscr) -> None:
        self.run_with(CursesTerminal(_stdscr))



    def run(self) -> None:
        """
        Starting point for the application.

        :return: None
        """

        # --- Keep stdout quiet while curses draws, the log file still gets everything
        previous = set_stdout_threshold(self.logger, SILENT)
        try:
            curses.wrapper(self._curses_main)
        finally:
            set_stdout_threshold(self.logger, previous)
    # --- END OF run() -------------------------------------------------------------------------------------------------
# --- END OF class MapManager ------------------------------------------------------------------------------------------
