from __future__ import annotations

"""
Token Counting Service.

Estimates the LLM token footprint of source text so that formatting
statistics can report what a minification saves in model context. Routes
counting to the tiktoken encoder and falls back to a character heuristic
whenever the encoder fails.
"""

import logging
from typing import Optional

from scriptfmt.core.processing.strategies import (
    DEFAULT_MODEL,
    HeuristicStrategy,
    TiktokenStrategy,
    TokenizerStrategy,
)

logger = logging.getLogger(__name__)


class TokenizerService:
    """
    Model-aware token estimation with a heuristic safety net.
    """

    def __init__(self, primary: Optional[TokenizerStrategy] = None) -> None:
        self.heuristic = HeuristicStrategy()
        self._tiktoken: Optional[TokenizerStrategy] = primary or TiktokenStrategy()

    def count(self, text: str, model: str = DEFAULT_MODEL) -> int:
        """
        Count tokens for the given model, never raising.

        Args:
            text: Raw input text.
            model: Target model identifier.

        Returns:
            int: Precise or estimated token count.
        """
        if not text:
            return 0

        if self._tiktoken is None:
            return self.heuristic.count(text, model)

        try:
            return self._tiktoken.count(text, model)
        except Exception as e:
            logger.warning(f"Token encoder failed: {e}. Using heuristic fallback.")
            return self.heuristic.count(text, model)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

_SERVICE_INSTANCE = TokenizerService()


def count_tokens(text: str, model: str = DEFAULT_MODEL) -> int:
    """Estimate the number of tokens via the shared TokenizerService."""
    return _SERVICE_INSTANCE.count(text, model)
