from __future__ import annotations

"""
Source Beautifier.

Re-emits scanned source text with normalized indentation: one statement,
brace or list item per line, nested blocks indented by a fixed number of
spaces per brace level. String and pattern literals are copied verbatim and
never inspected for structural characters.

If the rendering fails, or its literals no longer match the input's, the
input is returned unchanged.
"""

import logging
import re
from enum import Enum
from typing import Final, List, Optional, Sequence

from scriptfmt.core.scanning.scanner import literal_texts, scan
from scriptfmt.domain.constants import CLOSE_BRACKETS, DEFAULT_INDENT_SIZE
from scriptfmt.domain.segments import Segment

logger = logging.getLogger(__name__)

_STRUCTURAL_CHARS: Final[str] = "{};,"
_LINE_BREAK_PATTERN: Final[re.Pattern] = re.compile(r"\r\n|\r|\n")

# -----------------------------------------------------------------------------
# LINE STATE MACHINE
# -----------------------------------------------------------------------------

class LineState(str, Enum):
    """Position of the builder relative to the line being assembled."""
    AT_LINE_START = "at_line_start"
    MID_LINE = "mid_line"


class LineBuilder:
    """
    Assembles indented output lines.

    A line records its indentation depth when its first piece arrives.
    Whitespace between pieces is held back as a single pending space and is
    only written once more content follows, so lines never end in spaces
    produced from code.
    """

    def __init__(self, indent_size: int = DEFAULT_INDENT_SIZE) -> None:
        self.indent_size = max(0, int(indent_size))
        self.state = LineState.AT_LINE_START
        self._lines: List[str] = []
        self._parts: List[str] = []
        self._line_depth = 0
        self._pending_space = False
        self._opaque_tail = False

    def append(self, text: str, depth: int, *, opaque: bool = False) -> None:
        """
        Add a piece to the current line.

        Args:
            text: Piece to add.
            depth: Indentation depth to use if this piece starts the line.
            opaque: True when the piece is a literal whose trailing
                characters must survive line trimming.
        """
        if self.state is LineState.AT_LINE_START:
            self._line_depth = depth
            self.state = LineState.MID_LINE
        elif self._pending_space:
            self._parts.append(" ")
        self._pending_space = False
        self._parts.append(text)
        self._opaque_tail = opaque

    def space(self) -> None:
        """Register whitespace; ignored at the start of a line."""
        if self.state is LineState.MID_LINE:
            self._pending_space = True

    def break_line(self) -> None:
        """Close the current line, if it holds anything."""
        if self.state is LineState.AT_LINE_START:
            return

        content = "".join(self._parts)
        if not self._opaque_tail:
            content = strip_trailing_whitespace(content)
        indent = " " * (self.indent_size * self._line_depth)
        self._lines.append(indent + content)

        self._parts = []
        self._pending_space = False
        self._opaque_tail = False
        self.state = LineState.AT_LINE_START

    def blank_line(self) -> None:
        """Close the current line and add an empty one after it."""
        self.break_line()
        if self._lines:
            self._lines.append("")

    def render(self) -> str:
        """Close any pending line and join the collected lines."""
        self.break_line()
        return "\n".join(collapse_blank_lines(self._lines))


def strip_trailing_whitespace(line: str) -> str:
    return line.rstrip()


def collapse_blank_lines(lines: Sequence[str]) -> List[str]:
    """
    Keep at most one blank line between content lines.

    Leading and trailing blank lines are dropped. Only whole logical lines are
    considered, so line breaks inside a multi-line literal are untouched.
    """
    result: List[str] = []
    for line in lines:
        if not line.strip():
            if not result or not result[-1]:
                continue
            result.append("")
        else:
            result.append(line)

    while result and not result[-1]:
        result.pop()
    return result


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def beautify(text: str, indent_size: int = DEFAULT_INDENT_SIZE) -> str:
    """
    Render source text with one structural unit per line and brace indentation.

    Args:
        text: Raw source text.
        indent_size: Spaces per brace level.

    Returns:
        str: Beautified text, or the input unchanged if rendering could not
             be completed safely.
    """
    result = beautify_or_none(text, indent_size)
    return text if result is None else result


def beautify_or_none(text: str, indent_size: int = DEFAULT_INDENT_SIZE) -> Optional[str]:
    """Beautify, returning None instead of the input when the rendering is unsafe."""
    if not text:
        return ""

    try:
        segments = scan(text)
        result = _render(segments, indent_size)
    except Exception as e:
        logger.warning(f"Beautify aborted, returning input unchanged: {e}", exc_info=True)
        return None

    expected = [seg.text for seg in segments if seg.is_literal]
    if literal_texts(result) != expected:
        logger.warning("Beautify self-check failed: literal spans differ. Returning input unchanged.")
        return None

    logger.debug(f"Beautified {len(text)} chars into {len(result.splitlines())} lines")
    return result


# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def _render(segments: Sequence[Segment], indent_size: int) -> str:
    builder = LineBuilder(indent_size)
    depth = 0

    for index, seg in enumerate(segments):
        if seg.is_literal:
            builder.append(seg.text, depth, opaque=True)
        elif seg.is_comment:
            builder.append(seg.text, depth)
            builder.break_line()
        else:
            depth = _render_code(segments, index, builder, depth)

    return builder.render()


def _render_code(
        segments: Sequence[Segment],
        index: int,
        builder: LineBuilder,
        depth: int,
) -> int:
    """Feed one code segment into the builder and return the updated depth."""
    code = segments[index].text
    length = len(code)
    i = 0

    while i < length:
        ch = code[i]

        if ch.isspace():
            j = i
            while j < length and code[j].isspace():
                j += 1
            _render_whitespace(code[i:j], builder)
            i = j
            continue

        if ch == "{":
            builder.append(ch, depth)
            builder.break_line()
            depth += 1
        elif ch == "}":
            builder.break_line()
            depth = max(0, depth - 1)
            builder.append(ch, depth)
        elif ch == ";":
            builder.append(ch, depth)
            builder.break_line()
        elif ch == ",":
            builder.append(ch, depth)
            if _next_significant_char(segments, index, i + 1) not in CLOSE_BRACKETS:
                builder.break_line()
        else:
            j = i
            while j < length and code[j] not in _STRUCTURAL_CHARS and not code[j].isspace():
                j += 1
            builder.append(code[i:j], depth)
            i = j
            continue

        i += 1

    return depth


def _render_whitespace(run: str, builder: LineBuilder) -> None:
    breaks = len(_LINE_BREAK_PATTERN.findall(run))
    if not breaks:
        builder.space()
        return

    builder.break_line()
    # collapse_blank_lines folds these into one
    for _ in range(min(breaks - 1, 2)):
        builder.blank_line()


def _next_significant_char(segments: Sequence[Segment], index: int, offset: int) -> str:
    """Return the next non-whitespace character, looking across segment boundaries."""
    text = segments[index].text
    for pos in range(offset, len(text)):
        if not text[pos].isspace():
            return text[pos]

    for seg in segments[index + 1:]:
        for ch in seg.text:
            if not ch.isspace():
                return ch
    return ""
