from __future__ import annotations

"""
Unit tests for the Scanner.

Verifies:
1. Lossless partitioning of the input into segments.
2. Recognition of strings, pattern literals and both comment styles.
3. Division versus pattern-literal disambiguation.
4. Best-effort handling of unterminated literals.
"""

import inspect

from scriptfmt.core.scanning.scanner import iter_segments, literal_texts, scan, scan_pattern
from scriptfmt.domain.segments import Segment, SegmentKind

CODE = SegmentKind.CODE
STRING = SegmentKind.STRING
PATTERN = SegmentKind.PATTERN
LINE = SegmentKind.LINE_COMMENT
BLOCK = SegmentKind.BLOCK_COMMENT


def kinds_and_texts(text):
    """Helper returning (kind, text) pairs for compact assertions."""
    return [(seg.kind, seg.text) for seg in scan(text)]


def test_scan_empty_input_yields_no_segments():
    assert scan("") == []


def test_scan_is_lossless(source_sample):
    """Concatenating segment texts reproduces the input exactly."""
    assert "".join(seg.text for seg in scan(source_sample)) == source_sample


def test_iter_segments_is_lazy():
    assert inspect.isgenerator(iter_segments("a = 1;"))


def test_division_after_identifier_is_code():
    assert kinds_and_texts("a/b") == [(CODE, "a/b")]


def test_pattern_after_operator():
    assert kinds_and_texts("=/abc/") == [(CODE, "="), (PATTERN, "/abc/")]


def test_pattern_includes_flags_and_character_class():
    assert kinds_and_texts("x = /[/]/g;") == [(CODE, "x = "), (PATTERN, "/[/]/g"), (CODE, ";")]


def test_pattern_after_keyword():
    assert kinds_and_texts("return /ab+c/i.test(s)") == [
        (CODE, "return "),
        (PATTERN, "/ab+c/i"),
        (CODE, ".test(s)"),
    ]


def test_division_after_close_bracket_and_postfix():
    assert kinds_and_texts("(a)/2/3") == [(CODE, "(a)/2/3")]
    assert kinds_and_texts("i++ / 2") == [(CODE, "i++ / 2")]


def test_property_named_like_keyword_is_not_a_keyword():
    assert all(seg.kind is not PATTERN for seg in scan("obj.return / 2 / x"))


def test_slash_without_closing_before_newline_is_code():
    assert kinds_and_texts("x = / y\nz") == [(CODE, "x = / y\nz")]
    assert scan_pattern("/ab\n/", 0) is None


def test_comments_are_transparent_for_lookbehind():
    segments = scan("a /* c */ / b")
    assert [seg.kind for seg in segments] == [CODE, BLOCK, CODE]


def test_string_with_braces_is_one_segment():
    assert kinds_and_texts('const s = "{not a brace}";') == [
        (CODE, "const s = "),
        (STRING, '"{not a brace}"'),
        (CODE, ";"),
    ]


def test_escaped_quote_does_not_close_string():
    assert kinds_and_texts("'it\\'s'") == [(STRING, "'it\\'s'")]


def test_template_literal_is_opaque():
    text = "`a ${ {b: '}'} } c`"
    assert kinds_and_texts(text) == [(STRING, text)]


def test_adjacent_literals_are_not_merged():
    assert kinds_and_texts('"a""b"') == [(STRING, '"a"'), (STRING, '"b"')]


def test_line_comment_excludes_terminator():
    assert kinds_and_texts("// comment\ncodeLine();") == [
        (LINE, "// comment"),
        (CODE, "\ncodeLine();"),
    ]
    assert kinds_and_texts("a // c\r\nb") == [(CODE, "a "), (LINE, "// c"), (CODE, "\r\nb")]


def test_block_comments_do_not_nest():
    segments = scan("/* a /* b */ c */")
    assert segments[0] == Segment(BLOCK, "/* a /* b */")


def test_unterminated_literals_extend_to_end_of_input():
    assert kinds_and_texts('x = "abc') == [(CODE, "x = "), (STRING, '"abc')]
    assert kinds_and_texts("a /* never closed") == [(CODE, "a "), (BLOCK, "/* never closed")]
    assert kinds_and_texts("'trailing escape\\") == [(STRING, "'trailing escape\\")]


def test_literal_texts_lists_strings_and_patterns_only():
    assert literal_texts("a = 'x' + /y/ // z") == ["'x'", "/y/"]
