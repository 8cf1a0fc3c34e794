from __future__ import annotations

"""
Segment Domain Data Models.

Defines the atomic unit produced by the scanner: a classified run of the
source text. Segments partition the input losslessly, so the renderers can
treat literal spans as opaque while re-emitting the structural code around
them.
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

class SegmentKind(str, Enum):
    """Category of a scanned run of characters."""
    CODE = "code"
    STRING = "string"
    PATTERN = "pattern"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"


# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Segment:
    """
    A maximal substring of the input classified as exactly one kind.

    Attributes:
        kind: Classification assigned by the scanner.
        text: Exact source text covered, delimiters included.
    """
    kind: SegmentKind
    text: str

    @property
    def is_literal(self) -> bool:
        """True for strings and pattern literals, whose bytes are opaque."""
        return self.kind in (SegmentKind.STRING, SegmentKind.PATTERN)

    @property
    def is_comment(self) -> bool:
        return self.kind in (SegmentKind.LINE_COMMENT, SegmentKind.BLOCK_COMMENT)
