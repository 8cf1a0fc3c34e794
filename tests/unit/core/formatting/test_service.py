from __future__ import annotations

"""
Unit tests for the formatting service facade.
"""

import pytest

from scriptfmt.core.formatting.service import format_source
from scriptfmt.domain.format_models import FormatMode


def test_format_source_beautifies_by_default():
    result = format_source("a;b;")

    assert result.ok is True
    assert result.mode is FormatMode.BEAUTIFY
    assert result.output == "a;\nb;"
    assert result.changed is True
    assert result.fallback is False
    assert result.stats is None


@pytest.mark.parametrize("mode", ["minify", "MINIFY", " Minify ", FormatMode.MINIFY])
def test_format_source_accepts_mode_spellings(mode):
    result = format_source("a = 1; // one", mode)
    assert result.mode is FormatMode.MINIFY
    assert result.output == "a=1;"


def test_format_source_passes_indent_size():
    result = format_source("if(x){y();}", "beautify", indent_size=4)
    assert result.output == "if(x){\n    y();\n}"


def test_format_source_unchanged_output():
    result = format_source("a=1;", "minify")
    assert result.changed is False


def test_format_source_rejects_unknown_mode():
    result = format_source("a = 1;", "uglify")

    assert result.ok is False
    assert "uglify" in result.error
    assert result.output == "a = 1;"


def test_format_source_none_input_is_empty():
    result = format_source(None, "minify")
    assert result.ok is True
    assert result.output == ""


def test_format_source_reports_fallback(monkeypatch):
    monkeypatch.setattr("scriptfmt.core.formatting.service.minify_or_none", lambda text: None)

    result = format_source("a = 1;", "minify")

    assert result.ok is True
    assert result.fallback is True
    assert result.changed is False
    assert result.output == "a = 1;"


def test_format_source_attaches_stats(fake_token_count):
    result = format_source("a = 1;\nb = 2;\n", "minify", with_stats=True)

    assert result.output == "a=1;b=2;"
    assert result.stats is not None
    assert result.stats.input_lines == 3
    assert result.stats.output_lines == 1
    assert result.stats.output_tokens == len("a=1;b=2;")
    assert result.stats.compression_ratio is not None
