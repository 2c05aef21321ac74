"""
Filename:       scroll_bar.py
Author:         jole
Created:        03.10.2025

Description:    Vertical scrollbar owned by a ListBox. Paints three segments: track above the thumb, the thumb, and
                track below it.

Notes:          The thumb only touches the top row when fully scrolled up, and only touches the bottom row when fully
                scrolled down, so the user can always tell whether there is more to see.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import math

from typing         import Tuple

# --- Project defined
from .drawable      import Rect
from .tui_state     import TUIContext
# --- END OF Import section --------------------------------------------------------------------------------------------



class ScrollBar:

    def __init__(self, _ctx: TUIContext, _rect: Rect, _force_show: bool = False) -> None:
        self.ctx            = _ctx
        self.rect           = _rect
        self.force_show     = _force_show
        self.scroll         = 0
        self.max_scroll     = 0
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @property
    def is_shown(self) -> bool:
        return self.max_scroll > 0 or self.force_show



    def thumb_height(self) -> int:
        """
        Thumb size proportional to how much of the content fits in the viewport, never smaller than one cell.

        :return:    Height of the thumb in cells
        """
        height = self.rect.height
        if self.max_scroll <= 0:
            return height
        return max(1, math.floor(height / (height + self.max_scroll) * height))
    # --- END OF thumb_height() ----------------------------------------------------------------------------------------



    def thumb_top(self) -> int:
        """
        Position of the thumb, relative to the top of the bar.

        :return:    Row offset of the thumb's first cell
        """
        if self.max_scroll <= 0:
            return 0

        height          = self.rect.height
        thumb_height    = self.thumb_height()

        top = math.floor(self.scroll / self.max_scroll * (height - thumb_height + 1))
        top = min(top, height - thumb_height)

        # --- Keep a gap at the bottom until we're scrolled all the way down
        if self.scroll < self.max_scroll and top + thumb_height >= height:
            top -= 1

        # --- ... and a gap at the top as soon as we've scrolled at all
        if self.scroll > 0:
            top = max(1, top)

        return max(0, top)
    # --- END OF thumb_top() -------------------------------------------------------------------------------------------



    def segments(self) -> Tuple[int, int, int]:
        """
        :return:    (track above thumb, thumb, track below thumb) heights, summing to the bar height
        """
        thumb_height    = self.thumb_height()
        thumb_top       = self.thumb_top()
        return thumb_top, thumb_height, self.rect.height - thumb_top - thumb_height
    # --- END OF segments() --------------------------------------------------------------------------------------------



    def update(self, _scroll: int, _max_scroll: int) -> None:
        self.scroll     = _scroll
        self.max_scroll = max(0, _max_scroll)
        self.paint()
    # --- END OF update() ----------------------------------------------------------------------------------------------



    def paint(self) -> None:
        theme       = self.ctx.theme
        terminal    = self.ctx.terminal
        left        = self.rect.left
        top         = self.rect.top

        if self.max_scroll <= 0:
            if self.force_show:
                # --- Nothing to scroll, draw the empty track so the layout doesn't jump
                terminal.clear(self.rect, theme.scroll_bar_bg, theme.scroll_bar_fg)
            else:
                terminal.clear(self.rect, theme.content_bg, theme.content_fg)
            return

        above, thumb, below = self.segments()
        for y in range(top, top + above):
            terminal.paint(left, y, " ", theme.scroll_bar_bg, theme.scroll_bar_fg)
        for y in range(top + above, top + above + thumb):
            terminal.paint(left, y, " ", theme.scroll_bar_fg, theme.scroll_bar_bg)
        for y in range(top + above + thumb, top + above + thumb + below):
            terminal.paint(left, y, " ", theme.scroll_bar_bg, theme.scroll_bar_fg)
    # --- END OF paint() -----------------------------------------------------------------------------------------------
# --- END OF class ScrollBar -------------------------------------------------------------------------------------------
