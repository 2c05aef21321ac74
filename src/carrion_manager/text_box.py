"""
Filename:       text_box.py
Author:         jole
Created:        05.10.2025

Description:    Read only, multi line text region. Used for the log at the bottom of each window, where collaborators
                report what they did (or what went wrong), and for the map details pane.

Notes:          Once the box is full, write_line() drops the oldest line and scrolls the rest up.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import Iterable, List

# --- Project defined
from .drawable      import Rect, fixed_width
from .tui_state     import Color, TUIContext
from .word_wrap     import split_into_lines
# --- END OF Import section --------------------------------------------------------------------------------------------



class TextBox:

    def __init__(self, _ctx: TUIContext, _rect: Rect, _fill: Color, _content: Color) -> None:
        self.ctx                = _ctx
        self.rect               = _rect
        self.fill               = _fill
        self.content            = _content
        self.lines: List[str]   = []
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def _paint_line(self, _index: int) -> None:
        text = self.lines[_index] if _index < len(self.lines) else ""
        self.ctx.terminal.paint(self.rect.left, self.rect.top + _index, fixed_width(text, self.rect.width),
                                self.fill, self.content)
    # --- END OF _paint_line() -----------------------------------------------------------------------------------------



    def paint(self) -> None:
        for i in range(self.rect.height):
            self._paint_line(i)
    # --- END OF paint() -----------------------------------------------------------------------------------------------



    def clear(self) -> None:
        self.ctx.terminal.clear(self.rect, self.fill, self.content)



    def write_line(self, _text: str) -> None:
        """
        Adds a line at the bottom. A full box scrolls up by one line first.

        :param _text:   Line to add, clipped to the box width when painted
        """
        if len(self.lines) >= self.rect.height:
            self.lines = self.lines[len(self.lines) - self.rect.height + 1:]
            self.lines.append(_text)
            self.paint()
        else:
            self.lines.append(_text)
            self._paint_line(len(self.lines) - 1)
    # --- END OF write_line() ------------------------------------------------------------------------------------------



    def write_lines(self, _lines: Iterable[str]) -> None:
        for line in _lines:
            self.write_line(line)



    def write_wrapped(self, _text: str) -> None:
        """
        Word wraps _text to the box width and writes the result line by line.
        """
        self.write_lines(split_into_lines(_text, self.rect.width))
    # --- END OF write_wrapped() ---------------------------------------------------------------------------------------



    def append_last_line(self, _text: str) -> None:
        """
        Appends _text to the last line written, e.g. "Installing map X..." + " installed!"
        """
        if not self.lines:
            self.write_line(_text)
            return
        self.lines[-1] += _text
        self._paint_line(len(self.lines) - 1)
    # --- END OF append_last_line() ------------------------------------------------------------------------------------



    def set_lines(self, _lines: Iterable[str]) -> None:
        """
        Replaces the content. Lines that don't fit below the box are dropped.
        """
        self.lines = list(_lines)[: self.rect.height]
        self.paint()
    # --- END OF set_lines() -------------------------------------------------------------------------------------------



    def clear_content(self) -> None:
        self.lines = []
        self.paint()
    # --- END OF clear_content() ---------------------------------------------------------------------------------------
# --- END OF class TextBox ---------------------------------------------------------------------------------------------
