from __future__ import annotations

"""
Heuristic Tokenization Strategy.

Character-density estimate used when the BPE encoder cannot be loaded
(for instance, offline with no cached encoding files).
"""

import math

from scriptfmt.core.processing.strategies.base import TokenizerStrategy

# Roughly 4 characters per token for source code
CHARS_PER_TOKEN_AVG: int = 4


class HeuristicStrategy(TokenizerStrategy):

    def count(self, text: str, model_id: str) -> int:
        """Estimate tokens as ceil(len / CHARS_PER_TOKEN_AVG); 0 for empty text."""
        if not text:
            return 0
        return math.ceil(len(text) / CHARS_PER_TOKEN_AVG)
