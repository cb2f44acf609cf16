"""Character sets for O(1) classification.

All sets are frozensets of single characters. End of input is the empty
string, which is a member of none of them.

Usage:
    from tagscan.lexer.charsets import NAME_START

    if char in NAME_START:
        ...
"""

import string

ASCII_LETTERS: frozenset[str] = frozenset(string.ascii_letters)

ASCII_ALNUM: frozenset[str] = frozenset(string.ascii_letters + string.digits)

# Element and attribute names: a letter or "_", then letters, digits and -_:.
NAME_START: frozenset[str] = ASCII_LETTERS | {"_"}
NAME_CHARS: frozenset[str] = ASCII_ALNUM | frozenset("-_:.")

# Declaration keywords (<!DOCTYPE): letters, digits and "-"
DECLARATION_CHARS: frozenset[str] = ASCII_ALNUM | {"-"}

SPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

QUOTES: frozenset[str] = frozenset("\"'")

# A "<" followed by one of these ends a text run instead of being literal
MARKUP_FOLLOWERS: frozenset[str] = NAME_START | {"!", "/"}


def is_text_lead(char: str) -> bool:
    """Check if char may begin a text run (printable or newline)."""
    return char == "\n" or ord(char) >= 0x20
