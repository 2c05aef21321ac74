"""
Filename:       drawable.py
Author:         jole
Created:        02.10.2025

Description:    Rectangular paintable regions. Rect holds the geometry, Box paints a blank region and Label paints one
                line of aligned text. Every other widget owns one or more of these rather than inheriting from them.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from dataclasses    import dataclass

# --- Project defined
from .errors        import InvalidStateError
from .tui_state     import Color, HorizontalAlignment, TUIContext
# --- END OF Import section --------------------------------------------------------------------------------------------



@dataclass
class Rect:
    left:   int
    top:    int
    width:  int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1
# --- END OF class Rect ------------------------------------------------------------------------------------------------



def fixed_width(_text: str, _width: int, _alignment: HorizontalAlignment = HorizontalAlignment.LEFT) -> str:
    """
    Pads or truncates _text so it is exactly _width characters wide.

    :param _text:       Text to format
    :param _width:      Target width, must be positive
    :param _alignment:  Where the text goes inside the padding

    :return:            The formatted text
    """
    if _width <= 0:
        raise InvalidStateError(f"Cannot format text into width {_width}")

    if len(_text) >= _width:
        return _text[:_width]

    match _alignment:
        case HorizontalAlignment.LEFT:
            return _text.ljust(_width)
        case HorizontalAlignment.RIGHT:
            return _text.rjust(_width)
        case HorizontalAlignment.CENTER:
            pad_left = _width // 2 + len(_text) // 2
            return _text.rjust(pad_left).ljust(_width)
# --- END OF fixed_width() ---------------------------------------------------------------------------------------------



class Box:
    """
    A blank rectangle. Used as is for separators, and as the region every other widget paints inside.
    """

    def __init__(self, _ctx: TUIContext, _rect: Rect, _fill: Color, _content: Color) -> None:
        self.ctx        = _ctx
        self.rect       = _rect
        self.fill       = _fill
        self.content    = _content
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def paint(self) -> None:
        self.clear()
    # --- END OF paint() -----------------------------------------------------------------------------------------------



    def clear(self) -> None:
        self.ctx.terminal.clear(self.rect, self.fill, self.content)
    # --- END OF clear() -----------------------------------------------------------------------------------------------
# --- END OF class Box -------------------------------------------------------------------------------------------------



class Label(Box):
    """
    Single line of text, padded to the box width. Rows below the first are left blank.
    """

    def __init__(self,
                 _ctx:          TUIContext,
                 _rect:         Rect,
                 _fill:         Color,
                 _content:      Color,
                 _text:         str = "",
                 _alignment:    HorizontalAlignment = HorizontalAlignment.LEFT
                 ) -> None:
        super().__init__(_ctx, _rect, _fill, _content)
        self.text       = _text
        self.alignment  = _alignment
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def paint(self) -> None:
        self.clear()
        self.ctx.terminal.paint(self.rect.left,
                                self.rect.top,
                                fixed_width(self.text, self.rect.width, self.alignment),
                                self.fill,
                                self.content)
    # --- END OF paint() -----------------------------------------------------------------------------------------------
# --- END OF class Label -----------------------------------------------------------------------------------------------
