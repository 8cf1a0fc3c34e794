from __future__ import annotations

"""
Unit tests for configuration validation.

Verifies:
1. Non-strict coercion with warnings.
2. Strict mode raising on bad input.
3. Range clamping of the indentation size.
"""

import pytest

from scriptfmt.core.validator import validate_config
from scriptfmt.domain.config import get_default_config


def test_validate_accepts_complete_config(mock_config_dict):
    conf, warnings = validate_config(mock_config_dict)
    assert warnings == []
    assert conf == mock_config_dict


def test_validate_non_dict_returns_defaults():
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert len(warnings) == 1


def test_validate_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_validate_ignores_unknown_keys():
    conf, _ = validate_config({"mode": "minify", "colour": "blue"})
    assert "colour" not in conf
    assert conf["mode"] == "minify"


def test_validate_normalizes_mode():
    conf, warnings = validate_config({"mode": " MINIFY "})
    assert conf["mode"] == "minify"
    assert warnings == []


def test_validate_bad_mode_falls_back():
    conf, warnings = validate_config({"mode": "uglify"})
    assert conf["mode"] == "beautify"
    assert any("uglify" in w for w in warnings)


def test_validate_bad_mode_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"mode": "uglify"}, strict=True)


@pytest.mark.parametrize("raw, expected", [
    ("yes", True),
    ("off", False),
    (1, True),
    (0, False),
])
def test_validate_coerces_bools(raw, expected):
    conf, warnings = validate_config({"show_stats": raw})
    assert conf["show_stats"] is expected
    assert warnings


def test_validate_bad_bool_strict_raises():
    with pytest.raises(TypeError):
        validate_config({"show_stats": "maybe"}, strict=True)


def test_validate_bad_string_uses_fallback():
    conf, warnings = validate_config({"target_model": 42})
    assert conf["target_model"] == get_default_config()["target_model"]
    assert warnings


@pytest.mark.parametrize("raw, expected", [
    (4, 4),
    ("3", 3),
    (-1, 0),
    (99, 8),
    ("wide", 2),
    (True, 2),
])
def test_validate_indent_size(raw, expected):
    conf, _ = validate_config({"indent_size": raw})
    assert conf["indent_size"] == expected


def test_validate_indent_out_of_range_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"indent_size": 12}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"indent_size": "4"}, strict=True)
