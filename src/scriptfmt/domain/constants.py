from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the character classes and keyword sets shared by the scanner and
the renderers, together with formatting defaults and versioning.
"""

from typing import FrozenSet

CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_INDENT_SIZE = 2
MAX_INDENT_SIZE = 8
DEFAULT_MODEL = "gpt-4o"

# -----------------------------------------------------------------------------
# LEXICAL CHARACTER CLASSES
# -----------------------------------------------------------------------------

QUOTE_CHARS: FrozenSet[str] = frozenset({'"', "'", "`"})
ESCAPE_CHAR = "\\"
LINE_TERMINATORS: FrozenSet[str] = frozenset({"\n", "\r"})

OPERATOR_CHARS: FrozenSet[str] = frozenset("=+-*/%^<>!&|?:~")
OPEN_BRACKETS: FrozenSet[str] = frozenset("([{")
CLOSE_BRACKETS: FrozenSet[str] = frozenset(")]}")
SEPARATOR_CHARS: FrozenSet[str] = frozenset(",;")

# Words after which an expression (and so a pattern literal) may start
EXPRESSION_KEYWORDS: FrozenSet[str] = frozenset({
    "return", "typeof", "instanceof", "in", "of", "new", "delete",
    "void", "throw", "case", "do", "else", "yield", "await",
})


def is_word_char(ch: str) -> bool:
    """Return True for characters that can belong to an identifier or number."""
    return bool(ch) and (ch.isalnum() or ch == "_" or ch == "$")
