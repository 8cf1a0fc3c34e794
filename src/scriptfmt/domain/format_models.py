from __future__ import annotations

"""
Formatting Domain Data Models.

Defines the data structures used to communicate formatting results between
the formatting service and the interface layer (CLI / library callers).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# -----------------------------------------------------------------------------
# MODES
# -----------------------------------------------------------------------------

class FormatMode(str, Enum):
    """Rendering strategy applied to the source text."""
    BEAUTIFY = "beautify"
    MINIFY = "minify"

    @classmethod
    def parse(cls, value: Union[str, FormatMode]) -> FormatMode:
        """
        Resolve a mode from its name, case-insensitively.

        Raises:
            ValueError: If the value names no known mode.
        """
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for mode in cls:
            if mode.value == key:
                return mode
        raise ValueError(f"Unknown format mode: {value!r}")


# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatStats:
    """
    Size metrics comparing a source text with its formatted rendering.

    Attributes:
        input_bytes: UTF-8 size of the source.
        output_bytes: UTF-8 size of the rendering.
        input_lines: Number of newline-separated lines in the source.
        output_lines: Number of newline-separated lines in the rendering.
        compression_ratio: Percentage saved, reported for minification only.
        input_tokens: Estimated LLM tokens of the source.
        output_tokens: Estimated LLM tokens of the rendering.
    """
    input_bytes: int
    output_bytes: int
    input_lines: int
    output_lines: int
    compression_ratio: Optional[float] = None
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of a single formatting request.

    Attributes:
        ok: False only when the request itself was unusable (e.g. bad mode).
        mode: Mode that was applied.
        output: Rendered text (the input itself on fallback).
        changed: Whether the output differs from the input.
        fallback: True when the formatter kept the input unchanged because
            its own result failed the literal self-check.
        error: Descriptive message when ok is False.
        stats: Optional size metrics.
    """
    ok: bool
    mode: FormatMode
    output: str
    changed: bool = False
    fallback: bool = False
    error: str = ""
    stats: Optional[FormatStats] = None
