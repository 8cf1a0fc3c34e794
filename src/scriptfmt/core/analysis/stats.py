from __future__ import annotations

"""
Formatting Statistics.

Compares a source text with its formatted rendering: UTF-8 sizes, line
counts, the compression ratio achieved by minification, and estimated LLM
token counts.
"""

import logging
from typing import Optional, Union

from scriptfmt.core.processing.tokenizer import count_tokens
from scriptfmt.domain.constants import DEFAULT_MODEL
from scriptfmt.domain.format_models import FormatMode, FormatStats

logger = logging.getLogger(__name__)


def compute_stats(
        source: str,
        output: str,
        mode: Union[str, FormatMode],
        target_model: str = DEFAULT_MODEL,
) -> Optional[FormatStats]:
    """
    Measure a formatting run.

    Args:
        source: Text that was formatted.
        output: Rendering produced from it.
        mode: Mode that produced the rendering; the compression ratio is only
            reported for minification.
        target_model: Model whose tokenizer is used for the token estimate.

    Returns:
        Optional[FormatStats]: Metrics, or None if either text is empty.
    """
    if not source or not output:
        return None

    input_bytes = byte_size(source)
    output_bytes = byte_size(output)

    ratio: Optional[float] = None
    if FormatMode.parse(mode) is FormatMode.MINIFY:
        ratio = compression_ratio(input_bytes, output_bytes)

    stats = FormatStats(
        input_bytes=input_bytes,
        output_bytes=output_bytes,
        input_lines=line_count(source),
        output_lines=line_count(output),
        compression_ratio=ratio,
        input_tokens=count_tokens(source, target_model),
        output_tokens=count_tokens(output, target_model),
    )
    logger.debug(f"Stats computed: {stats}")
    return stats


def byte_size(text: str) -> int:
    return len(text.encode("utf-8"))


def line_count(text: str) -> int:
    """Number of '\\n'-separated lines; an empty string counts as one line."""
    return text.count("\n") + 1


def compression_ratio(input_bytes: int, output_bytes: int) -> float:
    """Percentage of the input size saved, rounded to one decimal."""
    if input_bytes <= 0:
        return 0.0
    return round((input_bytes - output_bytes) / input_bytes * 100, 1)
