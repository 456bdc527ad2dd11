"""
Word-filter matching.

``check_content`` is a pure function of the text and a snapshot of the
configured filters; the caller is responsible for loading the snapshot.
"""

import re
from functools import lru_cache
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

SEVERITY_RANK = {"low": 1, "medium": 2, "high": 3}


class FilterResult(BaseModel):
    is_clean: bool = True
    flagged_words: List[str] = Field(default_factory=list)
    highest_severity: Optional[str] = None


@lru_cache(maxsize=1024)
def _word_pattern(word: str) -> re.Pattern:
    # Escaped so metacharacters match literally; lookarounds instead of \b so
    # a word ending in punctuation ("die.") is still bounded correctly.
    return re.compile(rf"(?<!\w){re.escape(word)}(?!\w)", re.IGNORECASE)


def _unpack(entry: Any) -> Tuple[str, str]:
    if isinstance(entry, tuple):
        word, severity = entry
    else:
        word, severity = entry.word, entry.severity
    return word, severity


def severity_sort_key(word: str, severity: str) -> Tuple[int, str]:
    """Sort key giving severity rank descending, then word ascending."""
    return -SEVERITY_RANK.get(severity, 0), word


def check_content(content, filters: Iterable[Any]) -> FilterResult:
    """
    Check content against the configured word filters.

    Args:
        content: Sanitized text to scan.
        filters: WordFilter rows or ``(word, severity)`` pairs.

    Returns:
        FilterResult with every distinct matched word (severity descending,
        then word ascending) and the highest matched severity.
    """
    if not content or not isinstance(content, str):
        return FilterResult()

    entries = {}
    for entry in filters:
        word, severity = _unpack(entry)
        if not isinstance(word, str) or severity not in SEVERITY_RANK:
            continue
        word = word.strip().lower()
        if not word:
            continue
        # keep the strongest severity if the snapshot repeats a word
        if word not in entries or SEVERITY_RANK[severity] > SEVERITY_RANK[entries[word]]:
            entries[word] = severity

    flagged_words = []
    highest_severity = None
    for word, severity in sorted(
        entries.items(), key=lambda item: severity_sort_key(*item)
    ):
        if not _word_pattern(word).search(content):
            continue
        flagged_words.append(word)
        if (
            highest_severity is None
            or SEVERITY_RANK[severity] > SEVERITY_RANK[highest_severity]
        ):
            highest_severity = severity

    return FilterResult(
        is_clean=not flagged_words,
        flagged_words=flagged_words,
        highest_severity=highest_severity,
    )
