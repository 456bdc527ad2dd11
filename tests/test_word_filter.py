"""Tests for word-filter matching."""

import pytest

from app.utils.word_filter import check_content

DEFAULTS = [
    ("damn", "high"),
    ("hell", "high"),
    ("hate", "high"),
    ("kill", "high"),
    ("die", "high"),
    ("suicide", "high"),
    ("death", "medium"),
    ("angry", "low"),
    ("mad", "low"),
    ("upset", "low"),
]


class FilterRow:
    def __init__(self, word, severity):
        self.word = word
        self.severity = severity


def test_clean_content():
    result = check_content("What a lovely morning", DEFAULTS)
    assert result.is_clean
    assert result.flagged_words == []
    assert result.highest_severity is None


@pytest.mark.parametrize("value", [None, "", 123, ["hate"]])
def test_empty_or_non_string_input_is_clean(value):
    result = check_content(value, DEFAULTS)
    assert result.is_clean
    assert result.highest_severity is None


def test_whole_word_only():
    assert check_content("hello there", DEFAULTS).is_clean
    assert check_content("Shellfish for dinner", DEFAULTS).is_clean
    assert check_content("a diet plan", DEFAULTS).is_clean

    result = check_content("what the hell", DEFAULTS)
    assert result.flagged_words == ["hell"]


def test_match_is_case_insensitive():
    result = check_content("I HATE Mondays", DEFAULTS)
    assert result.flagged_words == ["hate"]
    assert result.highest_severity == "high"


def test_punctuation_counts_as_boundary():
    result = check_content("so mad! really, mad.", DEFAULTS)
    assert result.flagged_words == ["mad"]


def test_highest_severity_low_and_high():
    result = check_content("I am angry and I hate this", DEFAULTS)
    assert result.highest_severity == "high"
    assert not result.is_clean


def test_highest_severity_low_and_medium():
    result = check_content("upset about the death of my plant", DEFAULTS)
    assert result.highest_severity == "medium"


def test_flagged_words_order_is_severity_then_word():
    result = check_content("upset angry death kill hate", DEFAULTS)
    assert result.flagged_words == ["hate", "kill", "death", "angry", "upset"]


def test_each_word_reported_once():
    result = check_content("mad mad mad", DEFAULTS)
    assert result.flagged_words == ["mad"]


@pytest.mark.parametrize(
    "word, matching, not_matching",
    [
        ("die.", "they say die. now", "they say dies now"),
        ("a+b", "compute a+b please", "compute aab please"),
        ("(x)", "the (x) marks", "the x marks"),
        ("c++", "I write c++ daily", "I write c daily"),
        ("[a-z]", "literal [a-z] here", "letters abc here"),
    ],
)
def test_metacharacters_match_literally(word, matching, not_matching):
    filters = [(word, "medium")]
    assert check_content(matching, filters).flagged_words == [word]
    assert check_content(not_matching, filters).is_clean


def test_pathological_filter_word_does_not_blow_up():
    filters = [("(a+)+$", "low")]
    result = check_content("a" * 5000 + "!", filters)
    assert result.is_clean


def test_accepts_orm_like_rows():
    rows = [FilterRow("hate", "high"), FilterRow("mad", "low")]
    result = check_content("mad but no hate", rows)
    assert result.flagged_words == ["hate", "mad"]


def test_malformed_filters_are_skipped():
    filters = [("", "high"), ("   ", "low"), ("mad", "extreme"), ("angry", "low")]
    result = check_content("angry and mad", filters)
    assert result.flagged_words == ["angry"]
    assert result.highest_severity == "low"


def test_matches_with_mixed_case_filter_word():
    result = check_content("so upset", [("  UPSET ", "low")])
    assert result.flagged_words == ["upset"]
