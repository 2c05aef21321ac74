"""
Filename:       selection_prompt.py
Author:         jole
Created:        05.10.2025

Description:    Modal, one shot horizontal choice. Lays the labels out left to right, blocks until the user confirms
                one (or cancels) and returns its index.

Notes:          Nothing is kept between two prompts. Disabled choices can be moved onto but not confirmed.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from dataclasses    import dataclass, field
from typing         import List, Optional, Sequence, Set

# --- Project defined
from .defs          import TEXT_CANCEL
from .drawable      import Rect
from .errors        import InvalidStateError
from .selectable    import SelectableText
from .tui_state     import Color, Command, TUIContext
# --- END OF Import section --------------------------------------------------------------------------------------------



CHOICE_GAP = 1



class SelectionPrompt:

    @dataclass
    class Options:
        """
        allow_cancel:   Append a "Cancel" choice and accept the Cancel command, both answer -1
        index:          Initially selected choice, None picks the first enabled one
        disabled_items: Indices of choices that can't be confirmed
        """
        allow_cancel:   bool            = False
        index:          Optional[int]   = None
        disabled_items: Set[int]        = field(default_factory=set)
    # --- END OF class Options -----------------------------------------------------------------------------------------



    def __init__(self, _ctx: TUIContext, _rect: Rect, _fill: Color, _content: Color) -> None:
        self.ctx        = _ctx
        self.rect       = _rect
        self.fill       = _fill
        self.content    = _content
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def _layout(self, _labels: Sequence[str], _disabled: Set[int]) -> List[SelectableText]:
        """
        One SelectableText per label, each two cells wider than its label for the selection markers.
        """
        items   = []
        left    = self.rect.left
        for i, label in enumerate(_labels):
            width = len(label) + 2
            items.append(SelectableText(self.ctx, Rect(left, self.rect.top, width, 1), label, i, i not in _disabled))
            left += width + CHOICE_GAP
        return items
    # --- END OF _layout() ---------------------------------------------------------------------------------------------



    def prompt_selection(self, _labels: Sequence[str], _options: Optional["SelectionPrompt.Options"] = None) -> int:
        """
        Shows the choices and blocks until one is confirmed.

        :param _labels:     Choice labels, left to right
        :param _options:    See SelectionPrompt.Options

        :return:            Index of the confirmed label, -1 if the prompt was cancelled
        """
        options         = _options or SelectionPrompt.Options()
        labels          = list(_labels)
        cancel_index    = len(labels) if options.allow_cancel else None
        if options.allow_cancel:
            labels.append(TEXT_CANCEL)

        # --- The cancel choice can always be confirmed
        disabled = {i for i in options.disabled_items if i != cancel_index}

        if options.index is not None and labels:
            index = min(max(0, options.index), len(labels) - 1)
        else:
            index = next((i for i in range(len(labels)) if i not in disabled), None)
            if index is None:
                raise InvalidStateError("Selection prompt has no enabled choice to start on")

        items = self._layout(labels, disabled)
        items[index].select()

        try:
            while True:
                for item in items:
                    item.paint()

                match self.ctx.bindings.navigation_command(self.ctx.terminal.read_key()):
                    case Command.NAVIGATE_LEFT if index > 0:
                        items[index].deselect()
                        index -= 1
                        items[index].select()
                    case Command.NAVIGATE_RIGHT if index < len(items) - 1:
                        items[index].deselect()
                        index += 1
                        items[index].select()
                    case Command.CONFIRM:
                        if index == cancel_index:
                            return -1
                        if items[index].enabled:
                            return index
                    case Command.CANCEL if options.allow_cancel:
                        return -1
                    case _:
                        pass
                # --- END OF match command -----------------------------------------------------------------------------
            # --- END OF while True ------------------------------------------------------------------------------------
        finally:
            self.clear()
    # --- END OF prompt_selection() ------------------------------------------------------------------------------------



    def clear(self) -> None:
        self.ctx.terminal.clear(self.rect, self.fill, self.content)
    # --- END OF clear() -----------------------------------------------------------------------------------------------
# --- END OF class SelectionPrompt -------------------------------------------------------------------------------------
