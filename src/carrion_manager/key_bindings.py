"""
Filename:       key_bindings.py
Author:         jole
Created:        02.10.2025

Description:    Key -> Command tables. One table is used while navigating lists and columns, the other while editing
                text. Swapping a table is the only supported way of rebinding input.

Notes:          Curses can't report Shift+Enter. CursesTerminal turns Alt+Enter (ESC directly followed by Enter) into a
                KeyEvent with shift=True, which is what TextInput treats as "insert newline".
                Printable characters and curses special keys overlap as integers (ord("ą") == KEY_RIGHT), so the
                tables bind special keys by int and printable keys by str.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses

from dataclasses    import dataclass, field
from typing         import Dict, Optional, Union

# --- Project defined
from .tui_state     import Command
# --- END OF Import section --------------------------------------------------------------------------------------------



ENTER_KEYS      = (10, 13, curses.KEY_ENTER)
ESCAPE_KEY      = 27
BACKSPACE_KEYS  = (8, 127, curses.KEY_BACKSPACE)

# --- int: curses key code or control character, str: printable character
Key             = Union[int, str]



@dataclass(frozen=True)
class KeyEvent:
    """
    One key read from the terminal.

    key:    curses key code (ord(char) for printable keys)
    char:   printable character, empty for special keys
    shift:  set for the shifted Enter combination
    """
    key:    int
    char:   str     = ""
    shift:  bool    = False

    @property
    def binding(self) -> Key:
        """
        What the key tables are indexed by: the character for printable keys, the key code for everything else.
        """
        return self.char if self.char else self.key

    @property
    def is_enter(self) -> bool:
        return not self.char and self.key in ENTER_KEYS

    @staticmethod
    def from_char(_char: str) -> "KeyEvent":
        return KeyEvent(ord(_char), _char if _char.isprintable() else "")
# --- END OF class KeyEvent --------------------------------------------------------------------------------------------



def default_navigation_keys() -> Dict[Key, Command]:
    """
    Arrow keys and page keys navigate, Enter/Space confirm, Escape cancels and the digit keys switch windows.
    """
    table: Dict[Key, Command] = {
             curses.KEY_UP:     Command.NAVIGATE_UP,
             curses.KEY_DOWN:   Command.NAVIGATE_DOWN,
             curses.KEY_LEFT:   Command.NAVIGATE_LEFT,
             curses.KEY_RIGHT:  Command.NAVIGATE_RIGHT,
             curses.KEY_PPAGE:  Command.PAGE_UP,
             curses.KEY_NPAGE:  Command.PAGE_DOWN,
             " ":               Command.CONFIRM,
             ESCAPE_KEY:        Command.CANCEL,
             "1":               Command.SHOW_NAVIGATION,
             "2":               Command.SHOW_MAP_INSTALLER,
             "3":               Command.SHOW_MAP_EDITOR,
             "4":               Command.SHOW_SAVE_MANAGER,
             "5":               Command.SHOW_BACKUPS,
             }
    for key in ENTER_KEYS:
        table[key] = Command.CONFIRM
    return table
# --- END OF default_navigation_keys() ---------------------------------------------------------------------------------



def default_text_input_keys() -> Dict[Key, Command]:
    """
    Enter confirms and Escape cancels, the navigation keys move the cursor. Space is deliberately absent, it's text.
    """
    table: Dict[Key, Command] = {
             curses.KEY_UP:     Command.NAVIGATE_UP,
             curses.KEY_DOWN:   Command.NAVIGATE_DOWN,
             curses.KEY_LEFT:   Command.NAVIGATE_LEFT,
             curses.KEY_RIGHT:  Command.NAVIGATE_RIGHT,
             curses.KEY_PPAGE:  Command.PAGE_UP,
             curses.KEY_NPAGE:  Command.PAGE_DOWN,
             curses.KEY_HOME:   Command.GO_TO_START,
             curses.KEY_END:    Command.GO_TO_END,
             curses.KEY_DC:     Command.DELETE_CURRENT_CHARACTER,
             ESCAPE_KEY:        Command.CANCEL,
             }
    for key in ENTER_KEYS:
        table[key] = Command.CONFIRM
    for key in BACKSPACE_KEYS:
        table[key] = Command.DELETE_PREVIOUS_CHARACTER
    return table
# --- END OF default_text_input_keys() ---------------------------------------------------------------------------------



@dataclass
class KeyBindings:
    """
    Value object holding both key tables. Built once by the controller and handed to every widget via TUIContext.
    """
    navigation: Dict[Key, Command] = field(default_factory=default_navigation_keys)
    text_input: Dict[Key, Command] = field(default_factory=default_text_input_keys)



    @staticmethod
    def default() -> "KeyBindings":
        return KeyBindings()
    # --- END OF default() ---------------------------------------------------------------------------------------------



    def navigation_command(self, _event: KeyEvent) -> Optional[Command]:
        """
        :param _event:  The key read from the terminal
        :return:        The mapped command, None for unmapped keys
        """
        return self.navigation.get(_event.binding)
    # --- END OF navigation_command() ----------------------------------------------------------------------------------



    def text_input_command(self, _event: KeyEvent) -> Optional[Command]:
        return self.text_input.get(_event.binding)
    # --- END OF text_input_command() ----------------------------------------------------------------------------------
# --- END OF class KeyBindings -----------------------------------------------------------------------------------------
