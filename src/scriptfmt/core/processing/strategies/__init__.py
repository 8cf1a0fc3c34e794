from __future__ import annotations

from .base import DEFAULT_MODEL, TokenizerStrategy
from .heuristic import HeuristicStrategy
from .openai import TiktokenStrategy

__all__ = [
    "TokenizerStrategy",
    "DEFAULT_MODEL",
    "HeuristicStrategy",
    "TiktokenStrategy",
]
