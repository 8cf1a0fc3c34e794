from __future__ import annotations

"""
scriptfmt: tokenizing beautifier and minifier for script source text.
"""

from scriptfmt.core.analysis.stats import compute_stats
from scriptfmt.core.formatting.beautifier import beautify
from scriptfmt.core.formatting.minifier import minify
from scriptfmt.core.formatting.service import format_source
from scriptfmt.core.scanning.scanner import iter_segments, scan
from scriptfmt.domain.format_models import FormatMode, FormatResult, FormatStats
from scriptfmt.domain.segments import Segment, SegmentKind

__version__ = "1.0.0"

__all__ = [
    "beautify",
    "minify",
    "scan",
    "iter_segments",
    "format_source",
    "compute_stats",
    "FormatMode",
    "FormatResult",
    "FormatStats",
    "Segment",
    "SegmentKind",
]
