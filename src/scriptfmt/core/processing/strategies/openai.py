from __future__ import annotations

"""
OpenAI Tokenization Strategy.

Local BPE (Byte Pair Encoding) counting with the tiktoken library. Modern
model ids use 'o200k_base'; legacy GPT-3.5 / GPT-4 ids use 'cl100k_base'.
"""

import logging
from typing import Dict

import tiktoken

from scriptfmt.core.processing.strategies.base import TokenizerStrategy

logger = logging.getLogger(__name__)

MODERN_ENCODING = "o200k_base"
LEGACY_ENCODING = "cl100k_base"

_LEGACY_MARKERS = ("gpt-4-", "gpt-3.5", "legacy")


class TiktokenStrategy(TokenizerStrategy):
    """
    Encoder backed by tiktoken, caching one Encoding object per name.
    """

    def __init__(self) -> None:
        self._encodings: Dict[str, "tiktoken.Encoding"] = {}

    def count(self, text: str, model_id: str) -> int:
        """
        Execute local BPE encoding via tiktoken.

        Args:
            text: Input string to tokenize.
            model_id: Model identifier to determine the encoding version.

        Returns:
            int: Calculated token count.
        """
        if not text:
            return 0
        encoding = self._get_encoding(resolve_encoding_name(model_id))
        return len(encoding.encode(text, disallowed_special=()))

    def _get_encoding(self, name: str) -> "tiktoken.Encoding":
        if name not in self._encodings:
            try:
                self._encodings[name] = tiktoken.get_encoding(name)
            except ValueError:
                logger.debug(f"Encoding '{name}' not found, falling back to {LEGACY_ENCODING}.")
                self._encodings[name] = tiktoken.get_encoding(LEGACY_ENCODING)
        return self._encodings[name]


def resolve_encoding_name(model_id: str) -> str:
    """Map a model identifier to the tiktoken encoding it uses."""
    lowered = (model_id or "").lower()
    if any(marker in lowered for marker in _LEGACY_MARKERS):
        return LEGACY_ENCODING
    return MODERN_ENCODING
