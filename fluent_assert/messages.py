"""Message builder for assertion failures.

Renders the two-line "Expected / But was" text and displayable values.
"""

import math
from typing import Any, Optional

ELLIPSIS = "..."
MAX_STRING_LENGTH = 61
STRING_LEFT_START = math.ceil(MAX_STRING_LENGTH / 2.0)

NULL_TOKEN = "null"
EMPTY_STRING_TOKEN = "<empty string>"


def build_for(expected: str, actual: str) -> str:
    """Build the standard two-line failure message.

    Args:
        expected: Displayable text of the expected value.
        actual: Displayable text of the actual value.

    Returns:
        Message ending with a newline.
    """
    return f"  Expected: {expected}\n  But was:  {actual}\n"


def _quote(text: str) -> str:
    return f'"{text}"'


def shorten_string(text: str, difference_index: int = 0) -> str:
    """Truncate long strings so the point of difference stays visible."""
    if difference_index > MAX_STRING_LENGTH:
        start = difference_index - STRING_LEFT_START
        return ELLIPSIS + text[start:start + MAX_STRING_LENGTH]
    if len(text) > MAX_STRING_LENGTH:
        return text[:MAX_STRING_LENGTH] + ELLIPSIS
    return text


def first_difference(left: str, right: str) -> int:
    """Index of the first character where two strings differ.

    When one string is a prefix of the other, the shorter length is returned.
    """
    for index, (a, b) in enumerate(zip(left, right)):
        if a != b:
            return index
    return min(len(left), len(right))


def display_string(text: str, difference_index: int = 0) -> str:
    if len(text) == 0:
        return EMPTY_STRING_TOKEN
    return _quote(shorten_string(text, difference_index))


def to_displayable_string(value: Any, difference_index: Optional[int] = None) -> str:
    """Render any value for inclusion in a failure message.

    Args:
        value: Value to render.
        difference_index: Known index of the first mismatch, used to window
            long strings. Ignored for non-string values.

    Returns:
        ``null`` for None, ``<Name>`` for classes, quoted text for strings,
        ``str(value)`` otherwise.
    """
    if value is None:
        return NULL_TOKEN
    if isinstance(value, str):
        return display_string(value, difference_index or 0)
    if isinstance(value, type):
        return f"<{value.__name__}>"
    return str(value)
