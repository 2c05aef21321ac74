"""
Filename:       navigable.py
Author:         jole
Created:        03.10.2025

Description:    The focus model. Navigable is the capability every interactive widget implements (lists, text boxes,
                the column view), and prompt_input() is the blocking input loop they all share.

Notes:          Directional and page commands are consumed inside the loop, everything else is handed back to the
                caller. Keys without a mapping are ignored.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from abc            import ABC, abstractmethod
from dataclasses    import dataclass
from typing         import TYPE_CHECKING, Optional

# --- Project defined
from .tui_state     import Command, TUIContext

if TYPE_CHECKING:
    from .list_box      import ListBox
    from .selectable    import SelectableText
# --- END OF Import section --------------------------------------------------------------------------------------------



@dataclass
class NavigationInput:
    """
    Returned from prompt_input() for every command the navigable didn't consume itself.
    """
    navigable:  "Navigable"
    column:     int
    row:        int
    command:    Command
# --- END OF class NavigationInput -------------------------------------------------------------------------------------



@dataclass
class Selection:
    """
    What the user confirmed (or cancelled) in a list, and where.
    """
    command:    Command
    column:     int
    row:        int
    list:       Optional["ListBox"]         = None
    item:       Optional["SelectableText"]  = None

    @property
    def text(self) -> str:
        return self.item.text if self.item is not None else ""
# --- END OF class Selection -------------------------------------------------------------------------------------------



@dataclass(frozen=True)
class SelectionChangedEvent:
    """
    Delivered synchronously to every listener of a ListBox, before ListBox.select() returns.
    """
    previous_index: int
    previous_item:  Optional["SelectableText"]
    selected_index: int
    selected_item:  Optional["SelectableText"]
# --- END OF class SelectionChangedEvent -------------------------------------------------------------------------------



class Navigable(ABC):
    """
    Capability set for widgets that can hold focus and be moved around in with the keyboard.
    The edge entry methods (navigate_to_first_row() and friends) are used when focus enters from a neighbour and
    should land on the matching row or column.
    """

    ctx: TUIContext

    @property
    @abstractmethod
    def can_navigate(self) -> bool: ...

    @property
    @abstractmethod
    def can_navigate_up(self) -> bool: ...

    @property
    @abstractmethod
    def can_navigate_down(self) -> bool: ...

    @property
    @abstractmethod
    def can_navigate_left(self) -> bool: ...

    @property
    @abstractmethod
    def can_navigate_right(self) -> bool: ...

    @property
    @abstractmethod
    def is_active(self) -> bool: ...

    @property
    @abstractmethod
    def current_row(self) -> int: ...

    @property
    @abstractmethod
    def current_column(self) -> int: ...

    @abstractmethod
    def deactivate(self) -> None: ...

    @abstractmethod
    def navigate_up(self) -> None: ...

    @abstractmethod
    def navigate_down(self) -> None: ...

    @abstractmethod
    def navigate_left(self) -> None: ...

    @abstractmethod
    def navigate_right(self) -> None: ...

    @abstractmethod
    def page_up(self) -> None: ...

    @abstractmethod
    def page_down(self) -> None: ...

    @abstractmethod
    def navigate_to_default(self) -> None: ...

    @abstractmethod
    def navigate_to_first_row(self, _column: int) -> None: ...

    @abstractmethod
    def navigate_to_last_row(self, _column: int) -> None: ...

    @abstractmethod
    def navigate_to_first_column(self, _row: int) -> None: ...

    @abstractmethod
    def navigate_to_last_column(self, _row: int) -> None: ...

    @abstractmethod
    def paint(self) -> None: ...



    def prompt_input(self) -> NavigationInput:
        """
        Blocks on key reads until a command arrives that this navigable doesn't handle itself.

        :return:    The command together with the row and column that had focus when it arrived
        """
        if not self.is_active:
            self.navigate_to_default()

        while True:
            event   = self.ctx.terminal.read_key()
            command = self.ctx.bindings.navigation_command(event)

            match command:
                case None:
                    continue
                case Command.NAVIGATE_UP:
                    if self.can_navigate_up:
                        self.navigate_up()
                case Command.NAVIGATE_DOWN:
                    if self.can_navigate_down:
                        self.navigate_down()
                case Command.NAVIGATE_LEFT:
                    if self.can_navigate_left:
                        self.navigate_left()
                case Command.NAVIGATE_RIGHT:
                    if self.can_navigate_right:
                        self.navigate_right()
                case Command.PAGE_UP:
                    if self.can_navigate_up:
                        self.page_up()
                case Command.PAGE_DOWN:
                    if self.can_navigate_down:
                        self.page_down()
                case _:
                    return NavigationInput(self, self.current_column, self.current_row, command)
            # --- END OF match command ---------------------------------------------------------------------------------
        # --- END OF while True ----------------------------------------------------------------------------------------
    # --- END OF prompt_input() ----------------------------------------------------------------------------------------
# --- END OF class Navigable -------------------------------------------------------------------------------------------
