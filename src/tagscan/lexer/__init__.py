"""Pull-based markup scanner for tagscan.

This package turns a byte stream of tag-delimited text into tokens for a
structural parser.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── source.py            # CharacterSource (UTF-8 decoding, pushback, position)
├── tags.py              # TagTable, TagDescriptor, Classification
├── charsets.py          # Character classes
├── modes.py             # ScanMode enum
├── core.py              # Scanner (mixin composition + dispatch)
├── normalizer.py        # TokenNormalizer (lookahead, whitespace, literal mode)
└── scanners/
    ├── markup.py        # Comments, <![...]>, <!DOCTYPE>
    ├── tag.py           # Tags and attributes
    ├── text.py          # Text runs
    └── raw.py           # RawTextReader (read_until)

Usage:
    >>> from tagscan.lexer import Scanner, TokenNormalizer
    >>> normalizer = TokenNormalizer(Scanner(b"<B> hello world </B>"))
    >>> for token in normalizer.tokens():
    ...     print(token)
Token(TAG_START, <B>, 1:1)
Token(TEXT, 'hello world', 1:4)
Token(TAG_END, </B>, 1:17)
Token(EOF, '', 1:21)

"""

from tagscan.lexer.core import Scanner
from tagscan.lexer.modes import ScanMode
from tagscan.lexer.normalizer import TokenNormalizer
from tagscan.lexer.source import CharacterSource
from tagscan.lexer.tags import (
    DEFAULT_TAG_TABLE,
    Classification,
    TagDescriptor,
    TagTable,
    build_tag_table,
)

__all__ = [
    "DEFAULT_TAG_TABLE",
    "CharacterSource",
    "Classification",
    "ScanMode",
    "Scanner",
    "TagDescriptor",
    "TagTable",
    "TokenNormalizer",
    "build_tag_table",
]
