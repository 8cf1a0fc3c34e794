from __future__ import annotations

"""
Source Minifier.

Produces a size-reduced rendering of scanned source text: comments are
dropped and whitespace between tokens is removed, or collapsed to a single
space where removing it would fuse two tokens into one. String and pattern
literals are copied verbatim.

The output is never longer than the input. If rendering fails, or the
literals of the result do not match the input's, the input is returned
unchanged.
"""

import logging
import re
from typing import Final, FrozenSet, List, Optional, Sequence

from scriptfmt.core.scanning.scanner import literal_texts, scan
from scriptfmt.domain.constants import is_word_char
from scriptfmt.domain.segments import Segment, SegmentKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TOKEN FUSION RULES
# -----------------------------------------------------------------------------

_RUN_PATTERN: Final[re.Pattern] = re.compile(r"\s+|\S+")

# Adjacent characters that read as a different token once the space between
# them is gone: '+ +' vs '++', '/ /' vs a line comment, and so on.
_FUSING_PAIRS: Final[FrozenSet[str]] = frozenset({"++", "--", "//", "/*"})


def needs_space(prev: str, nxt: str, *, after_pattern: bool = False) -> bool:
    """
    Decide whether a whitespace run between two characters must survive.

    Args:
        prev: Last character already emitted ('' at the start of output).
        nxt: First character about to be emitted.
        after_pattern: True when `prev` closes a pattern literal, whose flag
            letters would absorb a following word.

    Returns:
        bool: True if a single space has to be kept.
    """
    if not prev or not nxt:
        return False
    if is_word_char(nxt) and (after_pattern or is_word_char(prev)):
        return True
    if prev + nxt in _FUSING_PAIRS:
        return True
    if prev.isdigit() and nxt == ".":
        return True
    return False


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def minify(text: str) -> str:
    """
    Strip comments and redundant whitespace from source text.

    Args:
        text: Raw source text.

    Returns:
        str: Minified text, or the input unchanged if minification could not
             be completed safely.
    """
    result = minify_or_none(text)
    return text if result is None else result


def minify_or_none(text: str) -> Optional[str]:
    """Minify, returning None instead of the input when the result is unsafe."""
    if not text:
        return ""

    try:
        segments = scan(text)
        result = _render(segments)
    except Exception as e:
        logger.warning(f"Minify aborted, returning input unchanged: {e}", exc_info=True)
        return None

    expected = [seg.text for seg in segments if seg.is_literal]
    if len(result) > len(text) or literal_texts(result) != expected:
        logger.warning("Minify self-check failed. Returning input unchanged.")
        return None

    original_len = len(text)
    reduction = 100 - (len(result) * 100 / original_len)
    logger.debug(f"Minified: {original_len} -> {len(result)} chars ({reduction:.1f}% reduction)")
    return result


# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def _render(segments: Sequence[Segment]) -> str:
    out: List[str] = []
    prev = ""
    pending_space = False
    after_pattern = False

    for seg in segments:
        if seg.is_comment:
            # A dropped comment still separates the tokens around it
            pending_space = True
            continue

        pieces = [seg.text] if seg.is_literal else _RUN_PATTERN.findall(seg.text)
        for piece in pieces:
            if not seg.is_literal and piece[0].isspace():
                pending_space = True
                continue

            if pending_space and needs_space(prev, piece[0], after_pattern=after_pattern):
                out.append(" ")
            out.append(piece)

            pending_space = False
            prev = piece[-1]
            after_pattern = seg.kind is SegmentKind.PATTERN

    return "".join(out)
