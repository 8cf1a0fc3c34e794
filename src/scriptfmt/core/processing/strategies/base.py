from __future__ import annotations

"""
Base Definitions for Tokenization Strategies.

Provides the abstract interface used by the statistics layer to estimate how
many LLM tokens a source text occupies before and after formatting.
"""

from abc import ABC, abstractmethod

from scriptfmt.domain.constants import DEFAULT_MODEL


class TokenizerStrategy(ABC):
    """
    Abstract base class for model-specific tokenization algorithms.
    """

    @abstractmethod
    def count(self, text: str, model_id: str) -> int:
        """
        Calculate the token count for a given text.

        Args:
            text: Input string to be tokenized.
            model_id: Model identifier used to select an encoding.

        Returns:
            int: Total token count.
        """
        pass


__all__ = ["DEFAULT_MODEL", "TokenizerStrategy"]
