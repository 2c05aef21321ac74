"""
Filename:       list_box.py
Author:         jole
Created:        03.10.2025

Description:    Scrollable, single selection list of SelectableText items with a scrollbar in its rightmost column.

Notes:          selected_index is -1 whenever the list is deselected, so entering the list again always notifies
                listeners. The scroll offset is kept within [0, max(0, item count - height)] at all times.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import Any, Callable, Iterable, List, Optional, Tuple, Union

# --- Project defined
from .drawable      import Rect
from .navigable     import Navigable, Selection, SelectionChangedEvent
from .scroll_bar    import ScrollBar
from .selectable    import CheckBox, SelectableText
from .tui_state     import Color, TUIContext
# --- END OF Import section --------------------------------------------------------------------------------------------



SelectionChangedListener    = Callable[[SelectionChangedEvent], None]
ListItem                    = Union[str, Tuple[str, Any]]



class ListBox(Navigable):
    """
    A vertical list navigated with up/down and page up/down. Owns a ScrollBar and clips its items to the viewport.
    Listeners registered with on_selection_changed() are called every time the selected index changes.
    """

    def __init__(self,
                 _ctx:                      TUIContext,
                 _rect:                     Rect,
                 _fill:                     Color,
                 _content:                  Color,
                 _force_show_scroll_bar:    bool = False
                 ) -> None:
        self.ctx                                        = _ctx
        self.rect                                       = _rect
        self.fill                                       = _fill
        self.content                                    = _content
        self.items:             List[SelectableText]    = []
        self.selected_index:    int                     = -1
        self.scroll_offset:     int                     = 0
        self.scroll_bar                                 = ScrollBar(_ctx,
                                                                    Rect(_rect.right, _rect.top, 1, _rect.height),
                                                                    _force_show_scroll_bar)
        self._listeners:        List[SelectionChangedListener] = []
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    # --- Properties ---------------------------------------------------------------------------------------------------

    @property
    def item_width(self) -> int:
        # --- The last column belongs to the scrollbar
        return self.rect.width - 1

    @property
    def height(self) -> int:
        return self.rect.height

    @property
    def max_scroll(self) -> int:
        return max(0, len(self.items) - self.rect.height)

    @property
    def selected_item(self) -> Optional[SelectableText]:
        if 0 <= self.selected_index < len(self.items):
            return self.items[self.selected_index]
        return None

    @property
    def can_navigate(self) -> bool:
        return len(self.items) > 0

    @property
    def can_navigate_up(self) -> bool:
        return self.selected_index > 0

    @property
    def can_navigate_down(self) -> bool:
        return 0 <= self.selected_index < len(self.items) - 1

    @property
    def can_navigate_left(self) -> bool:
        return False

    @property
    def can_navigate_right(self) -> bool:
        return False

    @property
    def is_active(self) -> bool:
        return self.selected_item is not None

    @property
    def current_row(self) -> int:
        return self.selected_index

    @property
    def current_column(self) -> int:
        return 0
    # --- END OF Properties --------------------------------------------------------------------------------------------



    def on_selection_changed(self, _listener: SelectionChangedListener) -> None:
        self._listeners.append(_listener)
    # --- END OF on_selection_changed() --------------------------------------------------------------------------------



    # --- Content ------------------------------------------------------------------------------------------------------

    def _place(self, _item: SelectableText) -> SelectableText:
        """
        Positions a freshly created item below the current last one and works out whether it's inside the viewport.
        """
        index           = len(self.items)
        _item.rect      = Rect(self.rect.left, self.rect.top + index - self.scroll_offset, self.item_width, 1)
        _item.visible   = self.rect.top <= _item.rect.top <= self.rect.bottom
        self.items.append(_item)
        return _item
    # --- END OF _place() ----------------------------------------------------------------------------------------------



    def add_item(self, _text: str, _payload: Optional[Any] = None, _enabled: bool = True) -> SelectableText:
        return self._place(SelectableText(self.ctx, Rect(0, 0, self.item_width, 1), _text, _payload, _enabled))



    def add_items(self, _items: Iterable[ListItem]) -> None:
        for entry in _items:
            if isinstance(entry, tuple):
                text, payload = entry
                self.add_item(text, payload)
            else:
                self.add_item(entry)
    # --- END OF add_items() -------------------------------------------------------------------------------------------



    def add_check_box(self,
                      _text:    str,
                      _checked: bool = False,
                      _enabled: bool = True,
                      _payload: Optional[Any] = None
                      ) -> CheckBox:
        check_box           = CheckBox(self.ctx, Rect(0, 0, self.item_width, 1), _text, _checked, _payload)
        check_box.enabled   = _enabled
        self._place(check_box)
        return check_box
    # --- END OF add_check_box() ---------------------------------------------------------------------------------------



    def add_separator(self) -> SelectableText:
        """
        Adds a blank, disabled row.
        """
        return self.add_item("", _enabled=False)
    # --- END OF add_separator() ---------------------------------------------------------------------------------------



    def set_items(self, _items: Iterable[ListItem]) -> None:
        """
        Replaces the whole content. Selection and scroll go back to their defaults, nothing is selected.

        :param _items:  Display strings, or (display string, payload) pairs
        """
        self.items          = []
        self.selected_index = -1
        self.scroll_offset  = 0
        self.add_items(_items)
    # --- END OF set_items() -------------------------------------------------------------------------------------------
    # --- END OF Content -----------------------------------------------------------------------------------------------



    # --- Selection ----------------------------------------------------------------------------------------------------

    def select(self, _index: int) -> None:
        """
        Selects the item at _index, clamped into range, and scrolls it into view. Listeners are notified when the
        index actually changed. Selecting the current index again only repaints the item.

        :param _index:  Item to select
        """
        if not self.items:
            return

        index = min(max(0, _index), len(self.items) - 1)

        if index == self.selected_index:
            self.items[index].select()
            self.scroll_to_selected()
            return

        previous_index  = self.selected_index
        previous_item   = self.selected_item
        if previous_item is not None:
            previous_item.deselect()

        self.selected_index = index
        self.items[index].select()

        event = SelectionChangedEvent(previous_index, previous_item, index, self.items[index])
        for listener in list(self._listeners):
            listener(event)

        self.scroll_to_selected()
    # --- END OF select() ----------------------------------------------------------------------------------------------



    def select_first_item(self) -> None:
        self.select(0)

    def select_last_item(self) -> None:
        self.select(len(self.items) - 1)



    def select_current_item(self) -> None:
        """
        Marks the current item as selected again, typically after a nested prompt highlighted it.
        """
        if self.selected_item is not None:
            self.select(self.selected_index)
    # --- END OF select_current_item() ---------------------------------------------------------------------------------



    def highlight_current_item(self) -> None:
        if self.selected_item is not None:
            self.selected_item.highlight()
    # --- END OF highlight_current_item() ------------------------------------------------------------------------------



    def deactivate(self) -> None:
        if self.selected_item is not None:
            self.selected_item.deselect()
        self.selected_index = -1
    # --- END OF deactivate() ------------------------------------------------------------------------------------------
    # --- END OF Selection ---------------------------------------------------------------------------------------------



    # --- Scrolling ----------------------------------------------------------------------------------------------------

    def scroll_to_selected(self) -> None:
        """
        Scrolls by exactly as much as needed to bring the selected item into the viewport.
        """
        if self.selected_index < 0:
            return

        if self.selected_index < self.scroll_offset:
            self.scroll(self.selected_index - self.scroll_offset)
        elif self.selected_index >= self.scroll_offset + self.rect.height:
            self.scroll(self.selected_index - (self.scroll_offset + self.rect.height) + 1)
    # --- END OF scroll_to_selected() ----------------------------------------------------------------------------------



    def scroll(self, _delta: int) -> None:
        """
        Moves the viewport _delta rows down (negative: up). The resulting offset is clamped into range.

        :param _delta:  Rows to scroll
        """
        new_offset  = min(max(0, self.scroll_offset + _delta), self.max_scroll)
        delta       = new_offset - self.scroll_offset
        self.scroll_offset = new_offset

        for item in self.items:
            item.rect.top   -= delta
            item.visible    = self.rect.top <= item.rect.top <= self.rect.bottom

        self.paint()
    # --- END OF scroll() ----------------------------------------------------------------------------------------------
    # --- END OF Scrolling ---------------------------------------------------------------------------------------------



    # --- Navigation ---------------------------------------------------------------------------------------------------

    def navigate_up(self) -> None:
        self.select(self.selected_index - 1)

    def navigate_down(self) -> None:
        self.select(self.selected_index + 1)

    def navigate_left(self) -> None:
        pass

    def navigate_right(self) -> None:
        pass

    def page_up(self) -> None:
        self.select(self.selected_index - self.rect.height)

    def page_down(self) -> None:
        self.select(self.selected_index + self.rect.height)

    def navigate_to_default(self) -> None:
        self.select(0)

    def navigate_to_first_row(self, _column: int) -> None:
        self.select(0)

    def navigate_to_last_row(self, _column: int) -> None:
        self.select(len(self.items) - 1)

    def navigate_to_first_column(self, _row: int) -> None:
        self.select(_row)

    def navigate_to_last_column(self, _row: int) -> None:
        self.select(_row)
    # --- END OF Navigation --------------------------------------------------------------------------------------------



    def prompt_selection(self) -> Selection:
        """
        Runs the input loop until something other than navigation happens.

        :return:    The command along with the row and item that had focus
        """
        result = self.prompt_input()
        return Selection(result.command, 0, result.row, self, self.selected_item)
    # --- END OF prompt_selection() ------------------------------------------------------------------------------------



    def paint(self) -> None:
        self.ctx.terminal.clear(Rect(self.rect.left, self.rect.top, self.item_width, self.rect.height),
                                self.fill,
                                self.content)
        for item in self.items:
            item.paint()
        self.scroll_bar.update(self.scroll_offset, self.max_scroll)
    # --- END OF paint() -----------------------------------------------------------------------------------------------



    def clear(self) -> None:
        self.ctx.terminal.clear(self.rect, self.fill, self.content)
    # --- END OF clear() -----------------------------------------------------------------------------------------------
# --- END OF class ListBox ---------------------------------------------------------------------------------------------
