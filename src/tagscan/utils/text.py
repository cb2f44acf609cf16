"""Whitespace and entity helpers shared by the scanner and normalizer.

Whitespace here means the ASCII set recognized by the C locale
(space, tab, newline, carriage return, form feed, vertical tab).

Example:
    >>> from tagscan.utils.text import collapse_whitespace
    >>> collapse_whitespace("  a \\t\\n b ")
    ' a b '
"""

from __future__ import annotations

import html as html_module
import re

WHITESPACE = " \t\n\r\f\v"

_WHITESPACE_RUN = re.compile(r"[ \t\n\r\f\v]+")


def collapse_whitespace(text: str) -> str:
    """Replace every maximal run of whitespace with a single space."""
    return _WHITESPACE_RUN.sub(" ", text)


def trim_leading(text: str) -> str:
    return text.lstrip(WHITESPACE)


def trim_trailing(text: str) -> str:
    return text.rstrip(WHITESPACE)


def trim_before_close(text: str) -> str:
    """Drop a trailing newline together with any spaces after it.

    Spaces are only removed when a newline precedes them; ``"ab  "`` is
    returned unchanged while ``"ab\\n  "`` becomes ``"ab"``.

    Examples:
        >>> trim_before_close("line\\n")
        'line'
        >>> trim_before_close("line\\n   ")
        'line'
        >>> trim_before_close("line   ")
        'line   '
    """
    stripped = text.rstrip(" ")
    if stripped.endswith("\n"):
        return stripped[:-1]
    return text


def expand_entities(text: str) -> str:
    """Default entity expander for text runs (``&auml;`` -> ``ä``).

    Unknown references are left untouched.
    """
    if "&" not in text:
        return text
    return html_module.unescape(text)
