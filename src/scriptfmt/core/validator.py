from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration dictionaries coming from the CLI or the persisted
JSON file. Every known field has a coercer; in lenient mode a bad value is
replaced (or converted) and a warning is recorded, in strict mode it raises.
"""

import logging
from typing import Any, Callable, Dict, List, Tuple

from scriptfmt.domain.config import get_default_config
from scriptfmt.domain.constants import MAX_INDENT_SIZE
from scriptfmt.domain.format_models import FormatMode

logger = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"true", "1", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "n", "off"})


class _Rejected(Exception):
    """Raised by a coercer for a value it cannot use; carries the strict error type."""

    def __init__(self, message: str, error_type: type = TypeError) -> None:
        super().__init__(message)
        self.error_type = error_type


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Unknown keys are dropped, missing or None values take the defaults.

    Args:
        config: Raw configuration data.
        strict: Raise instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          warnings produced on the way.

    Raises:
        TypeError: In strict mode, on a wrongly typed value.
        ValueError: In strict mode, on an unknown mode or an out-of-range
                    indentation.
    """
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        logger.warning(msg)
        return defaults, [f"{msg} Using defaults."]

    warnings: List[str] = []
    result: Dict[str, Any] = {}

    for field, fallback in defaults.items():
        value = config.get(field)
        if value is None:
            result[field] = fallback
            continue

        coercer = _COERCERS[field]
        try:
            result[field] = coercer(value, field, strict, warnings)
        except _Rejected as e:
            if strict:
                raise e.error_type(str(e)) from None
            warnings.append(f"{e} Using '{fallback}'.")
            result[field] = fallback

    return result, warnings


# -----------------------------------------------------------------------------
# FIELD COERCERS
# -----------------------------------------------------------------------------

def _to_str(value: Any, field: str, strict: bool, warnings: List[str]) -> str:
    if not isinstance(value, str):
        raise _Rejected(f"Field '{field}' expects text, got {type(value).__name__}.")
    return value.strip()


def _to_bool(value: Any, field: str, strict: bool, warnings: List[str]) -> bool:
    """Accept real booleans; leniently also 0/1 and yes/no style words."""
    if isinstance(value, bool):
        return value

    if not strict:
        word = str(value).strip().lower() if isinstance(value, (str, int, float)) else ""
        if word in _TRUE_WORDS or word in _FALSE_WORDS:
            converted = word in _TRUE_WORDS
            warnings.append(f"Field '{field}' converted from {value!r} to {converted}.")
            return converted

    raise _Rejected(f"Field '{field}' expects a boolean, got {type(value).__name__}.")


def _to_mode(value: Any, field: str, strict: bool, warnings: List[str]) -> str:
    try:
        return FormatMode.parse(value).value
    except ValueError as e:
        raise _Rejected(f"{e}.", ValueError) from None


def _to_indent(value: Any, field: str, strict: bool, warnings: List[str]) -> int:
    """Spaces per level, clamped to 0..MAX_INDENT_SIZE when lenient."""
    number = value
    if isinstance(value, str) and not strict and value.strip().isdigit():
        number = int(value.strip())

    if isinstance(number, bool) or not isinstance(number, int):
        raise _Rejected(f"Field '{field}' expects an integer, got {type(value).__name__}.")

    if 0 <= number <= MAX_INDENT_SIZE:
        return number

    msg = f"Field '{field}' out of range (0-{MAX_INDENT_SIZE}): {number}."
    if strict:
        raise _Rejected(msg, ValueError)
    clamped = min(max(number, 0), MAX_INDENT_SIZE)
    warnings.append(f"{msg} Clamped to {clamped}.")
    return clamped


_COERCERS: Dict[str, Callable[[Any, str, bool, List[str]], Any]] = {
    "input_path": _to_str,
    "output_path": _to_str,
    "target_model": _to_str,
    "show_stats": _to_bool,
    "mode": _to_mode,
    "indent_size": _to_indent,
}
