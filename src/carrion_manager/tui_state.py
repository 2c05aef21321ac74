"""
Filename:       tui_state.py
Author:         jole
Created:        02.10.2025

Description:    Enums and small dataclasses shared by every widget: commands, selection status, alignment, colors,
                the theme and the context object handed to each widget at construction.

Notes:          Colors are numbered the way curses numbers them, the bright variants are the base color + 8.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from dataclasses    import dataclass, field
from enum           import Enum, IntEnum, auto
from typing         import TYPE_CHECKING

if TYPE_CHECKING:
    from .key_bindings  import KeyBindings
    from .terminal      import Terminal
# --- END OF Import section --------------------------------------------------------------------------------------------



class Command(Enum):
    """
    Device independent input tokens. Keys are mapped onto these by the tables in KeyBindings.
    """
    CONFIRM                     = auto()
    CANCEL                      = auto()
    NAVIGATE_UP                 = auto()
    NAVIGATE_RIGHT              = auto()
    NAVIGATE_DOWN               = auto()
    NAVIGATE_LEFT               = auto()
    PAGE_UP                     = auto()
    PAGE_DOWN                   = auto()
    GO_TO_START                 = auto()
    GO_TO_END                   = auto()
    DELETE_CURRENT_CHARACTER    = auto()
    DELETE_PREVIOUS_CHARACTER   = auto()
    SHOW_NAVIGATION             = auto()
    SHOW_MAP_INSTALLER          = auto()
    SHOW_MAP_EDITOR             = auto()
    SHOW_SAVE_MANAGER           = auto()
    SHOW_BACKUPS                = auto()
# --- END OF class Command ---------------------------------------------------------------------------------------------



class SelectionStatus(Enum):
    NONE        = auto()
    SELECTED    = auto()
    HIGHLIGHTED = auto()    # container lost focus to a nested prompt, focus returns here
# --- END OF class SelectionStatus -------------------------------------------------------------------------------------



class HorizontalAlignment(Enum):
    LEFT    = auto()
    CENTER  = auto()
    RIGHT   = auto()
# --- END OF class HorizontalAlignment ---------------------------------------------------------------------------------



class Color(IntEnum):
    BLACK           = 0
    DARK_RED        = 1
    DARK_GREEN      = 2
    DARK_YELLOW     = 3
    DARK_BLUE       = 4
    DARK_MAGENTA    = 5
    DARK_CYAN       = 6
    GRAY            = 7
    DARK_GRAY       = 8
    RED             = 9
    GREEN           = 10
    YELLOW          = 11
    BLUE            = 12
    MAGENTA         = 13
    CYAN            = 14
    WHITE           = 15
# --- END OF class Color -----------------------------------------------------------------------------------------------



@dataclass(frozen=True)
class TUITheme:
    """
    Background/foreground pairs for every kind of region the windows draw. The widget framework never interprets
    these, it only passes them through to the terminal.
    """
    error_bg:               Color = Color.BLACK
    error_fg:               Color = Color.RED
    empty_bg:               Color = Color.BLACK
    empty_fg:               Color = Color.WHITE
    major_header_bg:        Color = Color.CYAN
    major_header_fg:        Color = Color.BLACK
    minor_header_bg:        Color = Color.GRAY
    minor_header_fg:        Color = Color.BLACK
    separator_bg:           Color = Color.GRAY
    separator_fg:           Color = Color.BLACK
    content_bg:             Color = Color.BLACK
    content_fg:             Color = Color.WHITE
    selected_bg:            Color = Color.DARK_GRAY
    selected_fg:            Color = Color.WHITE
    highlight_bg:           Color = Color.BLACK
    highlight_fg:           Color = Color.WHITE
    disabled_bg:            Color = Color.BLACK
    disabled_fg:            Color = Color.DARK_GRAY
    selected_disabled_bg:   Color = Color.WHITE
    selected_disabled_fg:   Color = Color.DARK_GRAY
    controls_bg:            Color = Color.BLACK
    controls_fg:            Color = Color.WHITE
    scroll_bar_bg:          Color = Color.DARK_GRAY
    scroll_bar_fg:          Color = Color.WHITE
    text_input_bg:          Color = Color.DARK_GRAY
    text_input_fg:          Color = Color.WHITE
    preview_text_fg:        Color = Color.GRAY
    navigation_title_bg:    Color = Color.DARK_BLUE
    navigation_title_fg:    Color = Color.WHITE
    installer_title_bg:     Color = Color.DARK_CYAN
    installer_title_fg:     Color = Color.WHITE
    editor_title_bg:        Color = Color.DARK_MAGENTA
    editor_title_fg:        Color = Color.WHITE
    save_manager_title_bg:  Color = Color.DARK_YELLOW
    save_manager_title_fg:  Color = Color.BLACK
    backups_title_bg:       Color = Color.DARK_GREEN
    backups_title_fg:       Color = Color.WHITE
# --- END OF class TUITheme --------------------------------------------------------------------------------------------



@dataclass
class TUIContext:
    """
    Everything a widget needs besides its geometry: where to draw, how to read keys and which colors to use.
    Passed explicitly to every widget instead of living in module globals.
    """
    terminal:   "Terminal"
    bindings:   "KeyBindings"
    theme:      TUITheme = field(default_factory=TUITheme)
# --- END OF class TUIContext ------------------------------------------------------------------------------------------
