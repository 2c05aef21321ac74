"""
Filename:       text_input.py
Author:         jole
Created:        04.10.2025

Description:    In place text editor, single line or word wrapped multi line.

Notes:          The cursor is an absolute offset into the text. Row and column are derived from it by _reconcile(),
                and nothing else writes them. Every structural edit goes text -> _rewrap() -> _reconcile().

                A row owns the offsets from its start up to the next row's start, so the highest column of a row is
                the last offset it owns (the space swallowed by a soft break, or the "\n" ending a paragraph). The last
                row owns everything up to and including len(text). Up/Down clamp against this one rule on every row.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from bisect         import bisect_right
from dataclasses    import dataclass
from typing         import List, Optional, Tuple

# --- Project defined
from .drawable      import Rect, fixed_width
from .tui_state     import Color, Command, TUIContext
from .word_wrap     import WrappedLine, wrap_spans
# --- END OF Import section --------------------------------------------------------------------------------------------



@dataclass
class PromptOptions:
    """
    How a prompt_text() session behaves.

    allow_empty:            Confirm is accepted with an empty text
    can_cancel:             Escape ends the session and reverts the text
    pre_write_current_text: Start editing from the current text instead of an empty one
    pre_written_text:       Start editing from this text, wins over pre_write_current_text
    """
    allow_empty:            bool = True
    can_cancel:             bool = False
    pre_write_current_text: bool = False
    pre_written_text:       Optional[str] = None
# --- END OF class PromptOptions ---------------------------------------------------------------------------------------



class TextInput:

    def __init__(self,
                 _ctx:              TUIContext,
                 _rect:             Rect,
                 _fill:             Color,
                 _content:          Color,
                 _text:             str = "",
                 _preview_text:     str = "",
                 _default_options:  Optional[PromptOptions] = None,
                 _multiline:        bool = False
                 ) -> None:
        self.ctx                                = _ctx
        self.rect                               = _rect
        self.fill                               = _fill
        self.content                            = _content
        self.preview_text                       = _preview_text
        self.default_options                    = _default_options or PromptOptions()
        self.multiline                          = _multiline

        self._text:     str                     = ""
        self.offset:    int                     = 0
        self.row:       int                     = 0
        self.column:    int                     = 0
        self.scroll:    int                     = 0
        self.lines:     List[WrappedLine]       = [WrappedLine(0, 0)]

        self.text = _text
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, _value: str) -> None:
        """
        Replaces the whole text, puts the cursor at its end and scrolls back to the start.
        """
        self._text  = _value or ""
        self.offset = len(self._text)
        self.scroll = 0
        self._rewrap()
        self._reconcile()



    @property
    def display_lines(self) -> List[str]:
        return [line.text(self._text) for line in self.lines]



    # --- Cursor bookkeeping -------------------------------------------------------------------------------------------

    def _rewrap(self) -> None:
        if self.multiline:
            self.lines = wrap_spans(self._text, self.rect.width)
        else:
            self.lines = [WrappedLine(0, len(self._text))]
    # --- END OF _rewrap() ---------------------------------------------------------------------------------------------



    def _reconcile(self) -> None:
        """
        Derives (row, column) from the absolute offset. The only place row and column are written.
        """
        starts      = [line.start for line in self.lines]
        self.row    = max(0, bisect_right(starts, self.offset) - 1)
        self.column = self.offset - starts[self.row]
    # --- END OF _reconcile() ------------------------------------------------------------------------------------------



    def _row_limit(self, _row: int) -> int:
        """
        :return:    The highest offset _row owns
        """
        if _row >= len(self.lines) - 1:
            return len(self._text)
        return self.lines[_row + 1].start - 1
    # --- END OF _row_limit() ------------------------------------------------------------------------------------------



    def max_column(self, _row: int) -> int:
        return self._row_limit(_row) - self.lines[_row].start



    def move_cursor_to(self, _offset: int) -> None:
        self.offset = min(max(0, _offset), len(self._text))
        self._reconcile()
    # --- END OF move_cursor_to() --------------------------------------------------------------------------------------



    def _replace(self, _text: str, _offset: int) -> None:
        self._text  = _text
        self.offset = _offset
        self._rewrap()
        self._reconcile()
    # --- END OF _replace() --------------------------------------------------------------------------------------------
    # --- END OF Cursor bookkeeping ------------------------------------------------------------------------------------



    # --- Movement -----------------------------------------------------------------------------------------------------

    def move_left(self) -> None:
        self.move_cursor_to(self.offset - 1)

    def move_right(self) -> None:
        self.move_cursor_to(self.offset + 1)



    def move_up(self) -> None:
        """
        Moves to the same column one row up, or that row's last column if it's shorter.
        """
        if self.row > 0:
            target_row = self.row - 1
            self.move_cursor_to(self.lines[target_row].start + min(self.column, self.max_column(target_row)))
    # --- END OF move_up() ---------------------------------------------------------------------------------------------



    def move_down(self) -> None:
        if self.row < len(self.lines) - 1:
            target_row = self.row + 1
            self.move_cursor_to(self.lines[target_row].start + min(self.column, self.max_column(target_row)))
    # --- END OF move_down() -------------------------------------------------------------------------------------------



    def page_up(self) -> None:
        for _ in range(self.rect.height):
            self.move_up()

    def page_down(self) -> None:
        for _ in range(self.rect.height):
            self.move_down()

    def go_to_start(self) -> None:
        self.move_cursor_to(self.lines[self.row].start)

    def go_to_end(self) -> None:
        self.move_cursor_to(self._row_limit(self.row))
    # --- END OF Movement ----------------------------------------------------------------------------------------------



    # --- Editing ------------------------------------------------------------------------------------------------------

    def insert_text(self, _text: str) -> None:
        self._replace(self._text[:self.offset] + _text + self._text[self.offset:], self.offset + len(_text))



    def insert_newline(self) -> None:
        self.insert_text("\n")



    def delete_previous_character(self) -> None:
        if self.offset > 0:
            self._replace(self._text[:self.offset - 1] + self._text[self.offset:], self.offset - 1)
    # --- END OF delete_previous_character() ---------------------------------------------------------------------------



    def delete_current_character(self) -> None:
        if self.offset < len(self._text):
            self._replace(self._text[:self.offset] + self._text[self.offset + 1:], self.offset)
    # --- END OF delete_current_character() ----------------------------------------------------------------------------
    # --- END OF Editing -----------------------------------------------------------------------------------------------



    # --- Scrolling and drawing ----------------------------------------------------------------------------------------

    def scroll_to_cursor(self) -> bool:
        """
        Keeps the cursor inside the visible window. Horizontally on the offset for a single line editor, vertically
        on the row for a multi line one. If we're scrolled but the end would now fit, snap back so it's shown.

        :return:    True if the scroll offset changed
        """
        if self.multiline:
            position, last_position, size = self.row, len(self.lines) - 1, self.rect.height
        else:
            position, last_position, size = self.offset, len(self._text), self.rect.width

        previous = self.scroll

        if self.scroll > 0 and last_position - self.scroll + 1 < size:
            self.scroll = max(0, last_position - size + 1)

        if position - self.scroll >= size:
            self.scroll = position - size + 1
        elif position < self.scroll:
            self.scroll = position

        return self.scroll != previous
    # --- END OF scroll_to_cursor() ------------------------------------------------------------------------------------



    def cursor_position(self) -> Tuple[int, int]:
        """
        A row that fills the whole width owns one more position than it can show (the swallowed space or the "\n").
        That position is drawn at the start of the next screen row, or on the last cell when no row is left below.

        :return:    Screen (left, top) of the cursor, kept inside the widget
        """
        if self.multiline:
            left, top = self.column, self.row - self.scroll
            if left >= self.rect.width:
                if top + 1 < self.rect.height:
                    left, top = 0, top + 1
                else:
                    left = self.rect.width - 1
            return self.rect.left + left, self.rect.top + top
        return self.rect.left + min(self.offset - self.scroll, self.rect.width - 1), self.rect.top
    # --- END OF cursor_position() -------------------------------------------------------------------------------------



    def paint(self) -> None:
        terminal    = self.ctx.terminal
        width       = self.rect.width

        if not self._text:
            preview = self.preview_text.split("\n")
            for i in range(self.rect.height):
                line = preview[i] if i < len(preview) else ""
                terminal.paint(self.rect.left, self.rect.top + i, fixed_width(line, width), self.fill,
                               self.ctx.theme.preview_text_fg)
            return

        if not self.multiline:
            terminal.paint(self.rect.left, self.rect.top, fixed_width(self._text[self.scroll:], width), self.fill,
                           self.content)
            return

        lines = self.display_lines
        for i in range(self.rect.height):
            row     = self.scroll + i
            line    = lines[row] if row < len(lines) else ""
            terminal.paint(self.rect.left, self.rect.top + i, fixed_width(line, width), self.fill, self.content)
    # --- END OF paint() -----------------------------------------------------------------------------------------------



    def clear(self) -> None:
        self.ctx.terminal.clear(self.rect, self.fill, self.content)
    # --- END OF clear() -----------------------------------------------------------------------------------------------
    # --- END OF Scrolling and drawing ---------------------------------------------------------------------------------



    def prompt_text(self, _options: Optional[PromptOptions] = None) -> bool:
        """
        Lets the user edit the text until Confirm, or Cancel when the options allow it.

        :param _options:    Overrides default_options for this session

        :return:            True if the text was confirmed, False if the session was cancelled and the text reverted
        """
        options     = _options or self.default_options
        terminal    = self.ctx.terminal
        snapshot    = self._text

        if options.pre_written_text:
            self.text = options.pre_written_text
        elif options.pre_write_current_text:
            self.text = snapshot
        else:
            self.text = ""

        terminal.show_cursor(True)
        try:
            while True:
                self.scroll_to_cursor()
                self.paint()
                terminal.move_cursor(*self.cursor_position())

                event = terminal.read_key()

                # --- Shifted Enter also maps to Confirm, so it has to be caught before the table lookup
                if event.is_enter and event.shift:
                    if self.multiline:
                        self.insert_newline()
                    continue

                match self.ctx.bindings.text_input_command(event):
                    case Command.CONFIRM:
                        if self._text or options.allow_empty:
                            return True
                    case Command.CANCEL:
                        if options.can_cancel:
                            self.text = snapshot
                            return False
                    case Command.NAVIGATE_LEFT:
                        self.move_left()
                    case Command.NAVIGATE_RIGHT:
                        self.move_right()
                    case Command.NAVIGATE_UP:
                        self.move_up()
                    case Command.NAVIGATE_DOWN:
                        self.move_down()
                    case Command.PAGE_UP:
                        self.page_up()
                    case Command.PAGE_DOWN:
                        self.page_down()
                    case Command.GO_TO_START:
                        self.go_to_start()
                    case Command.GO_TO_END:
                        self.go_to_end()
                    case Command.DELETE_PREVIOUS_CHARACTER:
                        self.delete_previous_character()
                    case Command.DELETE_CURRENT_CHARACTER:
                        self.delete_current_character()
                    case None if event.char:
                        self.insert_text(event.char)
                    case _:
                        pass
                # --- END OF match command -----------------------------------------------------------------------------
            # --- END OF while True ------------------------------------------------------------------------------------
        finally:
            terminal.show_cursor(False)
            self.scroll = 0
            self.paint()
    # --- END OF prompt_text() -----------------------------------------------------------------------------------------
# --- END OF class TextInput -------------------------------------------------------------------------------------------
