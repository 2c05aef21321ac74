"""
Filename:       column_view.py
Author:         jole
Created:        05.10.2025

Description:    Lays out N widgets side by side, each with an optional header, and moves focus between them with
                left/right. Up/down and paging go to the focused column.

Notes:          Columns that are empty or can't take focus (text boxes) are skipped when moving left/right. The
                current column is -1 when nothing has focus.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import List, Optional, Union

# --- Project defined
from .drawable      import Label, Rect
from .list_box      import ListBox
from .navigable     import Navigable, Selection
from .text_box      import TextBox
from .tui_state     import Color, HorizontalAlignment, TUIContext
# --- END OF Import section --------------------------------------------------------------------------------------------



Column = Union[Navigable, TextBox]



class ColumnView(Navigable):

    def __init__(self, _ctx: TUIContext, _rect: Rect, _fill: Color, _content: Color, _column_count: int) -> None:
        self.ctx                                    = _ctx
        self.rect                                   = _rect
        self.fill                                   = _fill
        self.content                                = _content
        self.column_count                           = _column_count
        self.column_width                           = _rect.width // _column_count
        self.columns:   List[Optional[Column]]      = [None] * _column_count
        self.headers:   List[Optional[Label]]       = [None] * _column_count
        self._column:   int                         = -1
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    # --- Layout -------------------------------------------------------------------------------------------------------

    def column_rect(self, _column: int, _has_header: bool) -> Rect:
        """
        Region available to the widget in _column, below its header if it has one.
        """
        header_height = 1 if _has_header else 0
        return Rect(self.rect.left + _column * self.column_width,
                    self.rect.top + header_height,
                    self.column_width,
                    self.rect.height - header_height)
    # --- END OF column_rect() -----------------------------------------------------------------------------------------



    def set_header(self, _column: int, _title: Optional[str]) -> None:
        if _title is None:
            self.headers[_column] = None
            return

        theme = self.ctx.theme
        self.headers[_column] = Label(self.ctx,
                                      Rect(self.rect.left + _column * self.column_width, self.rect.top,
                                           self.column_width, 1),
                                      theme.minor_header_bg,
                                      theme.minor_header_fg,
                                      _title,
                                      HorizontalAlignment.CENTER)
    # --- END OF set_header() ------------------------------------------------------------------------------------------



    def add_list_box(self, _column: int, _title: Optional[str] = None, _force_show_scroll_bar: bool = False) -> ListBox:
        self.set_header(_column, _title)
        list_box = ListBox(self.ctx, self.column_rect(_column, _title is not None), self.fill, self.content,
                           _force_show_scroll_bar)
        self.columns[_column] = list_box
        return list_box
    # --- END OF add_list_box() ----------------------------------------------------------------------------------------



    def add_text_box(self, _column: int, _title: Optional[str] = None) -> TextBox:
        self.set_header(_column, _title)
        text_box = TextBox(self.ctx, self.column_rect(_column, _title is not None), self.fill, self.content)
        self.columns[_column] = text_box
        return text_box
    # --- END OF add_text_box() ----------------------------------------------------------------------------------------



    def add_navigable(self, _column: int, _navigable: Navigable, _title: Optional[str] = None) -> Navigable:
        """
        Puts an already built navigable into _column. The caller is responsible for sizing it with column_rect().
        """
        self.set_header(_column, _title)
        self.columns[_column] = _navigable
        return _navigable
    # --- END OF add_navigable() ---------------------------------------------------------------------------------------
    # --- END OF Layout ------------------------------------------------------------------------------------------------



    # --- Focus helpers ------------------------------------------------------------------------------------------------

    def _eligible(self, _column: int) -> bool:
        column = self.columns[_column]
        return isinstance(column, Navigable) and column.can_navigate



    @property
    def focused(self) -> Optional[Navigable]:
        if 0 <= self._column < self.column_count:
            column = self.columns[self._column]
            if isinstance(column, Navigable):
                return column
        return None



    def _switch_to(self, _column: int) -> Navigable:
        if self.focused is not None:
            self.focused.deactivate()
        self._column = _column
        return self.columns[_column]
    # --- END OF _switch_to() ------------------------------------------------------------------------------------------



    def selection_valid(self) -> bool:
        """
        :return:    True if the current column is in range and its widget has focus
        """
        return self.focused is not None and self.focused.is_active
    # --- END OF selection_valid() -------------------------------------------------------------------------------------
    # --- END OF Focus helpers -----------------------------------------------------------------------------------------



    # --- Navigable capabilities ---------------------------------------------------------------------------------------

    @property
    def can_navigate(self) -> bool:
        return any(self._eligible(i) for i in range(self.column_count))

    @property
    def can_navigate_up(self) -> bool:
        return self.focused is not None and self.focused.can_navigate_up

    @property
    def can_navigate_down(self) -> bool:
        return self.focused is not None and self.focused.can_navigate_down

    @property
    def can_navigate_left(self) -> bool:
        if self.focused is not None and self.focused.can_navigate_left:
            return True
        return any(self._eligible(i) for i in range(0, max(0, self._column)))

    @property
    def can_navigate_right(self) -> bool:
        if self.focused is not None and self.focused.can_navigate_right:
            return True
        return any(self._eligible(i) for i in range(self._column + 1, self.column_count))

    @property
    def is_active(self) -> bool:
        return self.selection_valid()

    @property
    def current_row(self) -> int:
        return self.focused.current_row if self.focused is not None else -1

    @property
    def current_column(self) -> int:
        return self._column
    # --- END OF Navigable capabilities --------------------------------------------------------------------------------



    # --- Navigation ---------------------------------------------------------------------------------------------------

    def navigate_up(self) -> None:
        if self.focused is not None:
            self.focused.navigate_up()

    def navigate_down(self) -> None:
        if self.focused is not None:
            self.focused.navigate_down()

    def page_up(self) -> None:
        if self.focused is not None:
            self.focused.page_up()

    def page_down(self) -> None:
        if self.focused is not None:
            self.focused.page_down()



    def navigate_left(self) -> None:
        """
        Moves focus into the nearest eligible column on the left, landing on the same row. Stops at the first
        eligible column, does nothing if there is none.
        """
        if self.focused is not None and self.focused.can_navigate_left:
            self.focused.navigate_left()
            return

        row = self.current_row
        for column in range(self._column - 1, -1, -1):
            if self._eligible(column):
                self._switch_to(column).navigate_to_last_column(row)
                return
    # --- END OF navigate_left() ---------------------------------------------------------------------------------------



    def navigate_right(self) -> None:
        if self.focused is not None and self.focused.can_navigate_right:
            self.focused.navigate_right()
            return

        row = self.current_row
        for column in range(self._column + 1, self.column_count):
            if self._eligible(column):
                self._switch_to(column).navigate_to_first_column(row)
                return
    # --- END OF navigate_right() --------------------------------------------------------------------------------------



    def navigate_to_default(self) -> None:
        """
        Drops focus and gives it to the first eligible column from the left.
        """
        self.deactivate()
        for column in range(self.column_count):
            if self._eligible(column):
                self._switch_to(column).navigate_to_default()
                return
    # --- END OF navigate_to_default() ---------------------------------------------------------------------------------



    def navigate_to_first_row(self, _column: int) -> None:
        if 0 <= _column < self.column_count and self._eligible(_column):
            self._switch_to(_column).navigate_to_first_row(0)
        else:
            self.navigate_to_default()
    # --- END OF navigate_to_first_row() -------------------------------------------------------------------------------



    def navigate_to_last_row(self, _column: int) -> None:
        if 0 <= _column < self.column_count and self._eligible(_column):
            self._switch_to(_column).navigate_to_last_row(0)
        else:
            self.navigate_to_default()
    # --- END OF navigate_to_last_row() --------------------------------------------------------------------------------



    def navigate_to_first_column(self, _row: int) -> None:
        for column in range(self.column_count):
            if self._eligible(column):
                self._switch_to(column).navigate_to_first_column(_row)
                return
    # --- END OF navigate_to_first_column() ----------------------------------------------------------------------------



    def navigate_to_last_column(self, _row: int) -> None:
        for column in range(self.column_count - 1, -1, -1):
            if self._eligible(column):
                self._switch_to(column).navigate_to_last_column(_row)
                return
    # --- END OF navigate_to_last_column() -----------------------------------------------------------------------------



    def deactivate(self) -> None:
        if self.focused is not None:
            self.focused.deactivate()
        self._column = -1
    # --- END OF deactivate() ------------------------------------------------------------------------------------------
    # --- END OF Navigation --------------------------------------------------------------------------------------------



    def prompt_selection(self) -> Selection:
        """
        Runs the input loop and packs the result up with the list (and item) that had focus, if any.

        :return:    The selection
        """
        result  = self.prompt_input()
        focused = self.focused
        if isinstance(focused, ListBox):
            return Selection(result.command, self._column, focused.current_row, focused, focused.selected_item)
        return Selection(result.command, self._column, result.row)
    # --- END OF prompt_selection() ------------------------------------------------------------------------------------



    def paint(self) -> None:
        self.ctx.terminal.clear(self.rect, self.fill, self.content)
        for header in self.headers:
            if header is not None:
                header.paint()
        for column in self.columns:
            if column is not None:
                column.paint()
    # --- END OF paint() -----------------------------------------------------------------------------------------------
# --- END OF class ColumnView ------------------------------------------------------------------------------------------
