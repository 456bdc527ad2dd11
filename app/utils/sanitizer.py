"""
Content sanitization for anonymous submissions.

Strips markup, inline event handlers and dangerous URL schemes from raw text
before it is matched against the word filters and stored.
"""

import re

MAX_CONTENT_LENGTH = 2000

# Minimum number of stripping passes; nested tricks like "<<script>script>"
# only surface their inner tag after the outer one is removed.
MIN_PASSES = 3

TAG_PATTERN = re.compile(r"<[^<>]*>")
SCHEME_PATTERN = re.compile(r"(?:javascript|data|vbscript)\s*:", re.IGNORECASE)
EVENT_HANDLER_PATTERN = re.compile(r"on\w+\s*=", re.IGNORECASE)
ANGLE_BRACKETS = re.compile(r"[<>]")


def _strip_once(text: str) -> str:
    # Schemes are stripped on both sides of tag removal: payloads hidden
    # inside a tag only show up once the tag is gone.
    text = SCHEME_PATTERN.sub("", text)
    text = TAG_PATTERN.sub("", text)
    text = SCHEME_PATTERN.sub("", text)
    text = EVENT_HANDLER_PATTERN.sub("", text)
    return text


def sanitize_content(content, max_length: int = MAX_CONTENT_LENGTH) -> str:
    """
    Sanitize content for safe storage and display.

    The stripping passes run at least ``MIN_PASSES`` times and keep running
    until the text stops changing, so the result is a fixed point:
    ``sanitize_content(sanitize_content(x)) == sanitize_content(x)``.
    Truncation is always the last step.

    Args:
        content: Raw submitted text. Anything that is not a string yields "".
        max_length: Maximum length of the returned string.

    Returns:
        Text without tag delimiters or dangerous scheme prefixes,
        at most ``max_length`` characters long.
    """
    if not content or not isinstance(content, str):
        return ""

    sanitized = content
    passes = 0
    while True:
        stripped = _strip_once(sanitized)
        passes += 1
        if stripped == sanitized and passes >= MIN_PASSES:
            break
        sanitized = stripped

    # Unbalanced delimiters left behind by malformed markup
    sanitized = ANGLE_BRACKETS.sub("", sanitized)
    # Removing a bracket can join the halves of a scheme or handler back together
    while True:
        stripped = _strip_once(sanitized)
        if stripped == sanitized:
            break
        sanitized = stripped

    sanitized = sanitized.strip()

    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length].rstrip()

    return sanitized
