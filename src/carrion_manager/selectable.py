"""
Filename:       selectable.py
Author:         jole
Created:        03.10.2025

Description:    The single line, focusable atom lists and prompts are made of, plus a check box variant.

Notes:          Every status is handled explicitly when rendering. Adding a SelectionStatus without teaching paint()
                about it makes assert_never fail loudly instead of silently painting it as unselected.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import Any, Optional, Tuple, assert_never

# --- Project defined
from .defs          import SELECTED_SYMBOLS, HIGHLIGHTED_SYMBOLS, UNSELECTED_SYMBOLS
from .drawable      import Rect, fixed_width
from .tui_state     import Color, SelectionStatus, TUIContext
# --- END OF Import section --------------------------------------------------------------------------------------------



class SelectableText:
    """
    One line of text with a selection status and an enabled flag. Carries an optional payload, e.g. the map record
    a list entry stands for.
    """

    def __init__(self,
                 _ctx:      TUIContext,
                 _rect:     Rect,
                 _text:     str,
                 _payload:  Optional[Any] = None,
                 _enabled:  bool = True
                 ) -> None:
        self.ctx                        = _ctx
        self.rect                       = _rect
        self.text                       = _text
        self.payload                    = _payload
        self.enabled                    = _enabled
        self.visible                    = True
        self.status: SelectionStatus    = SelectionStatus.NONE
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @property
    def display_text(self) -> str:
        return self.text



    def _style(self) -> Tuple[str, str, Color, Color]:
        """
        Picks the selection markers and colors for the current status.

        :return:    (left symbol, right symbol, fill, content)
        """
        theme = self.ctx.theme

        match self.status:
            case SelectionStatus.NONE:
                left, right = UNSELECTED_SYMBOLS
                if self.enabled:
                    return left, right, theme.content_bg, theme.content_fg
                return left, right, theme.disabled_bg, theme.disabled_fg

            case SelectionStatus.SELECTED:
                left, right = SELECTED_SYMBOLS
                if self.enabled:
                    return left, right, theme.selected_bg, theme.selected_fg
                return left, right, theme.selected_disabled_bg, theme.selected_disabled_fg

            case SelectionStatus.HIGHLIGHTED:
                left, right = HIGHLIGHTED_SYMBOLS
                if self.enabled:
                    return left, right, theme.highlight_bg, theme.highlight_fg
                return left, right, theme.disabled_bg, theme.disabled_fg

            case _:
                assert_never(self.status)
    # --- END OF _style() ----------------------------------------------------------------------------------------------



    def paint(self) -> None:
        if not self.visible:
            return

        left, right, fill, content = self._style()
        line = left + fixed_width(self.display_text, self.rect.width - len(left) - len(right)) + right
        self.ctx.terminal.paint(self.rect.left, self.rect.top, line, fill, content)
    # --- END OF paint() -----------------------------------------------------------------------------------------------



    def clear(self) -> None:
        theme = self.ctx.theme
        self.ctx.terminal.paint(self.rect.left, self.rect.top, " " * self.rect.width, theme.content_bg,
                                theme.content_fg)
    # --- END OF clear() -----------------------------------------------------------------------------------------------



    def select(self) -> None:
        self.status = SelectionStatus.SELECTED
        self.paint()



    def deselect(self) -> None:
        self.status = SelectionStatus.NONE
        self.paint()



    def highlight(self) -> None:
        self.status = SelectionStatus.HIGHLIGHTED
        self.paint()
# --- END OF class SelectableText --------------------------------------------------------------------------------------



class CheckBox(SelectableText):
    """
    SelectableText with a checked flag, rendered as "[x] text" / "[ ] text".
    """

    def __init__(self,
                 _ctx:      TUIContext,
                 _rect:     Rect,
                 _text:     str,
                 _checked:  bool = False,
                 _payload:  Optional[Any] = None
                 ) -> None:
        super().__init__(_ctx, _rect, _text, _payload)
        self.checked = _checked
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @property
    def display_text(self) -> str:
        return ("[x] " if self.checked else "[ ] ") + self.text



    def toggle(self) -> bool:
        """
        Flips the checked flag and repaints.

        :return:    The new value of checked
        """
        self.checked = not self.checked
        self.paint()
        return self.checked
    # --- END OF toggle() ----------------------------------------------------------------------------------------------
# --- END OF class CheckBox --------------------------------------------------------------------------------------------
