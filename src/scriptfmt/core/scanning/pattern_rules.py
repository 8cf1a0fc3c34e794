from __future__ import annotations

"""
Pattern Literal Disambiguation Rules.

A '/' in code is either a division operator or the opener of a pattern
(regular expression) literal. The decision depends only on the category of
the nearest significant token before it. This module holds that decision as
an explicit rule table so it can be audited and tested on its own.
"""

from enum import Enum
from typing import Dict, Final, Optional

from scriptfmt.domain.constants import (
    CLOSE_BRACKETS,
    EXPRESSION_KEYWORDS,
    OPEN_BRACKETS,
    OPERATOR_CHARS,
    SEPARATOR_CHARS,
    is_word_char,
)

# -----------------------------------------------------------------------------
# TOKEN CATEGORIES
# -----------------------------------------------------------------------------

class TokenCategory(str, Enum):
    """Class of the significant token preceding a '/'."""
    START = "start"
    OPERATOR = "operator"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    SEPARATOR = "separator"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    POSTFIX = "postfix"
    LITERAL = "literal"
    OTHER = "other"


# True: '/' opens a pattern literal. False: '/' divides.
PATTERN_OPENERS: Final[Dict[TokenCategory, bool]] = {
    TokenCategory.START: True,
    TokenCategory.OPERATOR: True,
    TokenCategory.OPEN_BRACKET: True,
    TokenCategory.SEPARATOR: True,
    TokenCategory.KEYWORD: True,
    TokenCategory.IDENTIFIER: False,
    TokenCategory.CLOSE_BRACKET: False,
    TokenCategory.POSTFIX: False,
    TokenCategory.LITERAL: False,
    TokenCategory.OTHER: False,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def slash_opens_pattern(category: TokenCategory) -> bool:
    """Look up whether a '/' after the given category starts a pattern literal."""
    return PATTERN_OPENERS.get(category, False)


def categorize_preceding(
        text: str,
        index: Optional[int],
        *,
        after_literal: bool = False,
) -> TokenCategory:
    """
    Classify the significant code character at `index`.

    Args:
        text: Full source text.
        index: Position of the last non-whitespace code character, or None
            when nothing significant precedes.
        after_literal: True when the last significant token was a string or
            pattern literal rather than a code character.

    Returns:
        TokenCategory: Category used to key the rule table.
    """
    if after_literal:
        return TokenCategory.LITERAL
    if index is None or index < 0:
        return TokenCategory.START

    ch = text[index]

    if ch in "+-" and index > 0 and text[index - 1] == ch:
        return TokenCategory.POSTFIX
    if ch in OPERATOR_CHARS:
        return TokenCategory.OPERATOR
    if ch in OPEN_BRACKETS:
        return TokenCategory.OPEN_BRACKET
    if ch in CLOSE_BRACKETS:
        return TokenCategory.CLOSE_BRACKET
    if ch in SEPARATOR_CHARS:
        return TokenCategory.SEPARATOR
    if is_word_char(ch):
        word = _word_ending_at(text, index)
        if word in EXPRESSION_KEYWORDS:
            return TokenCategory.KEYWORD
        return TokenCategory.IDENTIFIER
    return TokenCategory.OTHER


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _word_ending_at(text: str, index: int) -> str:
    start = index
    while start > 0 and is_word_char(text[start - 1]):
        start -= 1
    # obj.return / 2 is a property access, not the keyword
    before = start - 1
    while before >= 0 and text[before] in " \t":
        before -= 1
    if before >= 0 and text[before] == ".":
        return ""
    return text[start:index + 1]
