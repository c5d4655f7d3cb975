"""Unit tests for user-input sanitization."""

from __future__ import annotations

import pytest

from goaltracker.core.sanitize import sanitize_optional_string
from goaltracker.core.sanitize import sanitize_string


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("<script>alert(1)</script>hello", "alert(1)hello"),
        ("  onClick=evil javascript:void(0)  ", "evil void(0)"),
        ("<b>Run</b> a marathon", "Run a marathon"),
        ("JavaScript:alert(1)", "alert(1)"),
        ("img onerror = boom", "img  boom"),
        ("plain title", "plain title"),
    ],
)
def test_sanitize_string_strips_markup_and_script_patterns(raw: str, expected: str) -> None:
    assert sanitize_string(raw) == expected


def test_sanitize_string_removes_control_characters_but_keeps_whitespace_controls() -> None:
    assert sanitize_string("a\x00b\x07c\x7f") == "abc"
    assert sanitize_string("line one\nline\ttwo\r\n") == "line one\nline\ttwo"


def test_sanitize_string_can_empty_a_value() -> None:
    assert sanitize_string("<b></b>") == ""
    assert sanitize_string("   ") == ""


def test_sanitize_optional_string_collapses_empty_results_to_none() -> None:
    assert sanitize_optional_string(None) is None
    assert sanitize_optional_string("") is None
    assert sanitize_optional_string("   ") is None
    assert sanitize_optional_string("<i></i>") is None
    assert sanitize_optional_string("ok") == "ok"
    assert sanitize_optional_string("  <em>ok</em> ") == "ok"
