"""
Filename:       word_wrap.py
Author:         jole
Created:        04.10.2025

Description:    Greedy word wrapping, in two flavours.

                split_into_lines() produces display strings with whitespace collapsed, for read only text boxes.
                wrap_spans() produces (start, end) offsets into the raw text, for the text editor, which needs to map
                every offset of the buffer onto a wrapped row.

Notes:          Both wrap paragraph by paragraph ("\n" always breaks a line). A word longer than the width is hard
                split into width sized chunks.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import re

from dataclasses    import dataclass
from typing         import List

# --- Project defined
from .errors        import InvalidStateError
# --- END OF Import section --------------------------------------------------------------------------------------------



WORD_PATTERN = re.compile(r"\S+")



def split_into_lines(_text: str, _width: int) -> List[str]:
    """
    Wraps _text into lines no wider than _width. Runs of whitespace collapse to a single space.

    :param _text:   Text to wrap, may contain "\n"
    :param _width:  Maximum line width

    :return:        The wrapped lines, at least one per paragraph
    """
    if _width <= 0:
        raise InvalidStateError(f"Cannot wrap text into width {_width}")

    lines: List[str] = []
    for paragraph in _text.split("\n"):
        current = ""
        for word in paragraph.split():
            # --- Hard split words that can never fit
            while len(word) > _width:
                if current:
                    lines.append(current)
                    current = ""
                lines.append(word[:_width])
                word = word[_width:]

            if not word:
                continue
            if not current:
                current = word
            elif len(current) + 1 + len(word) <= _width:
                current += " " + word
            else:
                lines.append(current)
                current = word

        lines.append(current)
    return lines
# --- END OF split_into_lines() ----------------------------------------------------------------------------------------



@dataclass(frozen=True)
class WrappedLine:
    """
    One display row of the text editor. The row shows _text[start:end]. It owns every buffer offset from start up to
    the next row's start, the whitespace swallowed by a soft break included.
    """
    start:  int
    end:    int

    def text(self, _text: str) -> str:
        return _text[self.start:self.end]
# --- END OF class WrappedLine -----------------------------------------------------------------------------------------



def wrap_spans(_text: str, _width: int) -> List[WrappedLine]:
    """
    Greedy wrap on raw offsets. Unlike split_into_lines() whitespace inside a line is kept as typed.

        * A soft break swallows the whole whitespace run between the two words.
        * "\n" swallows itself and starts the next paragraph.
        * A hard split swallows nothing.
        * Trailing whitespace stays on the last row while it fits, otherwise it moves onto a new, empty row, so the
          cursor after a typed space lands where the next word will appear.

    Row starts are strictly increasing, which is what lets the editor find a row by bisecting them.

    :param _text:   Raw text buffer
    :param _width:  Width of the editor

    :return:        The rows, never empty
    """
    if _width <= 0:
        raise InvalidStateError(f"Cannot wrap text into width {_width}")

    rows: List[WrappedLine] = []
    base = 0

    for paragraph in _text.split("\n"):
        paragraph_end   = base + len(paragraph)
        line_start      = base
        line_end        = base
        has_words       = False

        for match in WORD_PATTERN.finditer(paragraph):
            word_start  = base + match.start()
            word_end    = base + match.end()

            if has_words and word_end - line_start > _width:
                # --- Soft break, the whitespace between the words belongs to the row we're closing
                rows.append(WrappedLine(line_start, line_end))
                line_start  = word_start
                has_words   = False

            if not has_words and word_end - line_start > _width and line_start < word_start:
                # --- Leading whitespace of the paragraph pushes the first word over the edge
                rows.append(WrappedLine(line_start, min(word_start, line_start + _width)))
                line_start = word_start

            # --- Hard split whatever still doesn't fit
            while word_end - line_start > _width:
                rows.append(WrappedLine(line_start, line_start + _width))
                line_start += _width

            line_end    = word_end
            has_words   = True

        if paragraph_end - line_start <= _width:
            rows.append(WrappedLine(line_start, paragraph_end))
        else:
            # --- Trailing whitespace overflows, give the cursor a fresh row after it
            rows.append(WrappedLine(line_start, max(line_end, line_start)))
            rows.append(WrappedLine(paragraph_end, paragraph_end))

        # --- Skip the "\n"
        base = paragraph_end + 1

    return rows
# --- END OF wrap_spans() ----------------------------------------------------------------------------------------------
