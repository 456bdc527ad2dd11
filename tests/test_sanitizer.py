"""Tests for content sanitization."""

import pytest

from app.utils.sanitizer import MAX_CONTENT_LENGTH, sanitize_content

SAMPLES = [
    "Plain journal entry",
    "<script>alert('x')</script>Hello",
    "<<script>script>alert(1)<</script>/script>",
    "<a href='javascript:alert(1)'>link</a>",
    "JaVaScRiPt:alert(1)",
    "jajavascript:vascript:alert(1)",
    "<img src=x onerror=alert(1)>",
    "text onclick=steal() more",
    "data:text/html;base64,PHNjcmlwdD4=",
    "VBScript:msgbox",
    "<<<>>>",
    "a < b and c > d",
    "<scr<script>ipt>alert(1)</script>",
    "java<b>script:</b>alert(1)",
    "   padded   ",
    "x" * (MAX_CONTENT_LENGTH + 50),
    ("word " * 500),
]


def test_plain_text_is_unchanged():
    assert sanitize_content("I walked by the river today.") == (
        "I walked by the river today."
    )


@pytest.mark.parametrize("value", [None, 42, [], {}, ""])
def test_non_string_or_empty_input_yields_empty_string(value):
    assert sanitize_content(value) == ""


def test_strips_all_tags_not_only_script():
    result = sanitize_content("<b>bold</b> <i>italic</i> <div>block</div>")
    assert result == "bold italic block"


def test_nested_tag_trick_is_defeated():
    result = sanitize_content("<<script>script>alert(1)<</script>/script>")
    assert "<" not in result
    assert ">" not in result
    assert "script>" not in result


def test_scheme_hidden_inside_tags_is_removed():
    result = sanitize_content("java<b>script:</b>alert(1)")
    assert "javascript:" not in result.lower()


def test_schemes_are_removed_case_insensitively():
    assert sanitize_content("JaVaScRiPt:alert(1)") == "alert(1)"
    assert sanitize_content("VBScript:msgbox") == "msgbox"
    assert "data:" not in sanitize_content("DATA:text/html,hi").lower()


def test_rebuilt_scheme_is_removed():
    assert "javascript:" not in sanitize_content(
        "jajavascript:vascript:alert(1)"
    ).lower()


def test_event_handlers_are_removed():
    result = sanitize_content("text onclick=steal() more OnMouseOver = x")
    assert "onclick=" not in result.lower()
    assert "onmouseover" not in result.lower()


def test_whitespace_is_trimmed():
    assert sanitize_content("   padded   ") == "padded"


def test_truncates_to_max_length():
    result = sanitize_content("x" * (MAX_CONTENT_LENGTH + 50))
    assert len(result) == MAX_CONTENT_LENGTH


def test_truncation_happens_after_stripping():
    # The markup is removed first, so the visible text fits the limit
    content = "<b>" * 100 + "y" * MAX_CONTENT_LENGTH
    result = sanitize_content(content)
    assert result == "y" * MAX_CONTENT_LENGTH


def test_truncation_does_not_leave_trailing_whitespace():
    content = "a" * (MAX_CONTENT_LENGTH - 1) + " b"
    result = sanitize_content(content)
    assert result == "a" * (MAX_CONTENT_LENGTH - 1)


@pytest.mark.parametrize("value", SAMPLES)
def test_output_guarantees(value):
    result = sanitize_content(value)
    assert "<" not in result and ">" not in result
    lowered = result.lower()
    for scheme in ("javascript:", "data:", "vbscript:"):
        assert scheme not in lowered
    assert len(result) <= MAX_CONTENT_LENGTH


@pytest.mark.parametrize("value", SAMPLES)
def test_sanitize_is_idempotent(value):
    once = sanitize_content(value)
    assert sanitize_content(once) == once
