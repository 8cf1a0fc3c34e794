from __future__ import annotations

"""
Formatting Service.

Single dispatch point between the interface layer and the two renderers.
Resolves the requested mode, runs the matching renderer, and packages the
outcome (with optional statistics) into a FormatResult.
"""

import logging
from typing import Union

from scriptfmt.core.analysis.stats import compute_stats
from scriptfmt.core.formatting.beautifier import beautify_or_none
from scriptfmt.core.formatting.minifier import minify_or_none
from scriptfmt.domain.constants import DEFAULT_INDENT_SIZE, DEFAULT_MODEL
from scriptfmt.domain.format_models import FormatMode, FormatResult

logger = logging.getLogger(__name__)


def format_source(
        source: str,
        mode: Union[str, FormatMode] = FormatMode.BEAUTIFY,
        *,
        indent_size: int = DEFAULT_INDENT_SIZE,
        with_stats: bool = False,
        target_model: str = DEFAULT_MODEL,
) -> FormatResult:
    """
    Format source text in the requested mode.

    Args:
        source: Raw source text.
        mode: 'beautify' or 'minify' (or the FormatMode member).
        indent_size: Spaces per brace level when beautifying.
        with_stats: Attach size and token metrics to the result.
        target_model: Model used for token estimation.

    Returns:
        FormatResult: Rendering and metadata. `ok` is False only when the
                      mode cannot be resolved.
    """
    text = source or ""

    try:
        resolved = FormatMode.parse(mode)
    except ValueError as e:
        logger.error(str(e))
        return FormatResult(ok=False, mode=FormatMode.BEAUTIFY, output=text, error=str(e))

    if resolved is FormatMode.MINIFY:
        rendered = minify_or_none(text)
    else:
        rendered = beautify_or_none(text, indent_size)

    fallback = rendered is None
    output = text if rendered is None else rendered
    if fallback:
        logger.warning(f"Could not {resolved.value} the input safely; keeping it unchanged.")

    stats = compute_stats(text, output, resolved, target_model) if with_stats else None

    return FormatResult(
        ok=True,
        mode=resolved,
        output=output,
        changed=output != text,
        fallback=fallback,
        stats=stats,
    )
