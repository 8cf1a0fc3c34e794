from __future__ import annotations

"""
Source Text Scanner.

Walks the input once, left to right, partitioning it into classified
segments: structural code, string literals, pattern literals, line comments
and block comments. The scanner never fails: an unterminated literal simply
extends to the end of the input.

Scan state is threaded through small pure helpers that take the text and a
start offset and return the end offset of the literal they recognize.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from scriptfmt.core.scanning.pattern_rules import categorize_preceding, slash_opens_pattern
from scriptfmt.domain.constants import ESCAPE_CHAR, LINE_TERMINATORS, QUOTE_CHARS, is_word_char
from scriptfmt.domain.segments import Segment, SegmentKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan(text: str) -> List[Segment]:
    """
    Partition the source text into an ordered list of segments.

    Concatenating the `text` of every returned segment reproduces the input
    exactly.

    Args:
        text: Raw source text.

    Returns:
        List[Segment]: Classified segments, in input order.
    """
    segments = list(iter_segments(text))
    logger.debug(f"Scanned {len(text or '')} chars into {len(segments)} segments")
    return segments


def iter_segments(text: str) -> Iterator[Segment]:
    """
    Lazily yield the classified segments of the source text.

    Args:
        text: Raw source text.

    Yields:
        Segment: Next classified run of characters.
    """
    if not text:
        return

    length = len(text)
    pos = 0
    code_start = 0

    # Lookbehind state for the pattern-literal decision. Comments do not
    # update it.
    last_significant: Optional[int] = None
    after_literal = False

    while pos < length:
        match = _match_literal(text, pos, last_significant, after_literal)

        if match is None:
            if not text[pos].isspace():
                last_significant = pos
                after_literal = False
            pos += 1
            continue

        kind, end = match
        if pos > code_start:
            yield Segment(SegmentKind.CODE, text[code_start:pos])
        yield Segment(kind, text[pos:end])

        if kind in (SegmentKind.STRING, SegmentKind.PATTERN):
            after_literal = True
        pos = code_start = end

    if code_start < length:
        yield Segment(SegmentKind.CODE, text[code_start:])


def literal_texts(text: str) -> List[str]:
    """
    Return the string and pattern literal texts of the source, in order.

    Used by the renderers to check that a rendering left every literal
    untouched.
    """
    return [seg.text for seg in iter_segments(text) if seg.is_literal]


# -----------------------------------------------------------------------------
# LITERAL RECOGNITION
# -----------------------------------------------------------------------------

def _match_literal(
        text: str,
        pos: int,
        last_significant: Optional[int],
        after_literal: bool,
) -> Optional[Tuple[SegmentKind, int]]:
    """Recognize a literal opening at `pos`, returning its kind and end offset."""
    ch = text[pos]

    if ch in QUOTE_CHARS:
        return SegmentKind.STRING, scan_string(text, pos)

    if ch != "/":
        return None

    nxt = text[pos + 1] if pos + 1 < len(text) else ""
    if nxt == "/":
        return SegmentKind.LINE_COMMENT, scan_line_comment(text, pos)
    if nxt == "*":
        return SegmentKind.BLOCK_COMMENT, scan_block_comment(text, pos)

    category = categorize_preceding(text, last_significant, after_literal=after_literal)
    if not slash_opens_pattern(category):
        return None

    end = scan_pattern(text, pos)
    if end is None:
        return None
    return SegmentKind.PATTERN, end


def scan_string(text: str, start: int) -> int:
    """Return the offset just past the quote closing the string opened at `start`."""
    quote = text[start]
    length = len(text)
    i = start + 1
    while i < length:
        ch = text[i]
        if ch == ESCAPE_CHAR:
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return length


def scan_line_comment(text: str, start: int) -> int:
    """Return the offset of the line terminator ending the comment (exclusive)."""
    length = len(text)
    i = start + 2
    while i < length and text[i] not in LINE_TERMINATORS:
        i += 1
    return i


def scan_block_comment(text: str, start: int) -> int:
    """Return the offset just past the first '*/' after `start`."""
    close = text.find("*/", start + 2)
    if close == -1:
        return len(text)
    return close + 2


def scan_pattern(text: str, start: int) -> Optional[int]:
    """
    Return the offset just past the pattern literal opened at `start`.

    The literal ends at the first unescaped '/' outside a character class,
    followed by its flag letters. Returns None when a line terminator comes
    first, meaning the '/' was not a pattern opener after all.
    """
    length = len(text)
    in_class = False
    i = start + 1
    while i < length:
        ch = text[i]
        if ch in LINE_TERMINATORS:
            return None
        if ch == ESCAPE_CHAR:
            if i + 1 < length and text[i + 1] in LINE_TERMINATORS:
                return None
            i += 2
            continue
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "/":
            i += 1
            while i < length and is_word_char(text[i]):
                i += 1
            return i
        i += 1
    return length
