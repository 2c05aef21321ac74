"""
Filename:       terminal.py
Author:         jole
Created:        02.10.2025

Description:    The render surface the widgets draw on. Terminal is the contract (paint a string, clear a rectangle,
                read a key), CursesTerminal implements it on top of a curses window.

Notes:          Widgets never talk to curses directly, so tests can swap in a headless terminal that just records
                what was painted.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses

from abc            import ABC, abstractmethod
from typing         import Dict, Tuple

# --- Project defined
from .drawable      import Rect
from .key_bindings  import KeyEvent, ENTER_KEYS, ESCAPE_KEY
from .tui_state     import Color
# --- END OF Import section --------------------------------------------------------------------------------------------



class Terminal(ABC):
    """
    Minimal set of primitives the widget framework needs from a terminal.
    """

    @abstractmethod
    def paint(self, _left: int, _top: int, _text: str, _fill: Color, _content: Color) -> None:
        """
        Writes _text at (_left, _top) with background _fill and foreground _content. Text running off the right edge
        is clipped, nothing wraps.
        """
        ...



    @abstractmethod
    def read_key(self) -> KeyEvent:
        """
        Blocks until the user presses a key. The only suspension point of the whole application.
        """
        ...



    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """
        :return: (width, height) in cells
        """
        ...



    @abstractmethod
    def move_cursor(self, _left: int, _top: int) -> None:
        ...



    @abstractmethod
    def show_cursor(self, _visible: bool) -> None:
        ...



    def clear(self, _rect: Rect, _fill: Color, _content: Color) -> None:
        """
        Fills _rect with blank cells.
        """
        blank = " " * _rect.width
        for y in range(_rect.top, _rect.top + _rect.height):
            self.paint(_rect.left, y, blank, _fill, _content)
    # --- END OF clear() -----------------------------------------------------------------------------------------------



    def flush(self) -> None:
        pass
# --- END OF class Terminal --------------------------------------------------------------------------------------------



class CursesTerminal(Terminal):
    """
    Terminal on top of a curses window, normally the stdscr handed over by curses.wrapper.
    Color pairs are allocated lazily the first time a (foreground, background) combination is painted.
    """

    def __init__(self, _stdscr) -> None:
        self.stdscr                                 = _stdscr
        self.has_colors                             = curses.has_colors()
        self.pairs: Dict[Tuple[int, int], int]      = {}

        self.stdscr.keypad(True)
        curses.noecho()

        if self.has_colors:
            curses.start_color()

        # --- Escape is also the first byte of every Alt+key sequence, don't wait the default second for the rest
        try:
            curses.set_escdelay(25)
        except curses.error:
            pass

        self.show_cursor(False)
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def _curses_color(self, _color: Color) -> int:
        """
        Maps our 16 colors onto what the terminal supports, 8-color terminals lose the bright variants.

        :param _color:  One of the 16 colors
        :return:        Color number for curses.init_pair
        """
        if curses.COLORS >= 16:
            return int(_color)
        return int(_color) % 8
    # --- END OF _curses_color() ---------------------------------------------------------------------------------------



    def _attr(self, _fill: Color, _content: Color) -> int:
        """
        Finds (or allocates) the color pair for _content on _fill.

        :return:    Attribute to pass to addstr
        """

        # --- Monochrome terminals: anything not drawn on black is drawn reversed
        if not self.has_colors:
            return curses.A_REVERSE if _fill != Color.BLACK else curses.A_NORMAL

        key = (int(_content), int(_fill))
        if key not in self.pairs:
            pair_number = len(self.pairs) + 1
            if pair_number >= curses.COLOR_PAIRS:
                return curses.A_NORMAL
            curses.init_pair(pair_number, self._curses_color(_content), self._curses_color(_fill))
            self.pairs[key] = pair_number

        attr = curses.color_pair(self.pairs[key])
        if curses.COLORS < 16 and _content >= Color.DARK_GRAY:
            attr |= curses.A_BOLD
        return attr
    # --- END OF _attr() -----------------------------------------------------------------------------------------------



    def paint(self, _left: int, _top: int, _text: str, _fill: Color, _content: Color) -> None:
        max_y, max_x = self.stdscr.getmaxyx()
        if _top < 0 or _top >= max_y or _left < 0 or _left >= max_x:
            return

        text = _text[: max_x - _left]
        if not text:
            return

        try:
            self.stdscr.addstr(_top, _left, text, self._attr(_fill, _content))
        except curses.error:
            # --- addstr raises after writing the bottom right cell, the text is on screen anyway
            pass
    # --- END OF paint() -----------------------------------------------------------------------------------------------



    def read_key(self) -> KeyEvent:
        """
        Reads one key. Alt+Enter is reported as a shifted Enter, a lone Escape as Escape.

        :return:    The key as a KeyEvent
        """
        ch = self.stdscr.get_wch()

        if isinstance(ch, int):
            return KeyEvent(ch)

        if ch == "\x1b":
            self.stdscr.nodelay(True)
            try:
                follow_up = self.stdscr.get_wch()
            except curses.error:
                follow_up = None
            finally:
                self.stdscr.nodelay(False)

            match follow_up:
                case None:
                    return KeyEvent(ESCAPE_KEY)
                case str() if ord(follow_up) in ENTER_KEYS:
                    return KeyEvent(ENTER_KEYS[0], shift=True)
                case _:
                    # --- Some other Alt+key, hand the second key back and report the Escape on its own
                    curses.unget_wch(follow_up)
                    return KeyEvent(ESCAPE_KEY)

        return KeyEvent.from_char(ch)
    # --- END OF read_key() --------------------------------------------------------------------------------------------



    def size(self) -> Tuple[int, int]:
        max_y, max_x = self.stdscr.getmaxyx()
        return max_x, max_y
    # --- END OF size() ------------------------------------------------------------------------------------------------



    def move_cursor(self, _left: int, _top: int) -> None:
        try:
            self.stdscr.move(_top, _left)
        except curses.error:
            pass
    # --- END OF move_cursor() -----------------------------------------------------------------------------------------



    def show_cursor(self, _visible: bool) -> None:
        try:
            curses.curs_set(1 if _visible else 0)
        except curses.error:
            # --- Not every terminal lets us hide or show the cursor
            pass
    # --- END OF show_cursor() -----------------------------------------------------------------------------------------



    def flush(self) -> None:
        self.stdscr.refresh()
    # --- END OF flush() -----------------------------------------------------------------------------------------------
# --- END OF class CursesTerminal --------------------------------------------------------------------------------------
