"""Construct-specific scanners for the tagscan scanner.

Each scanner is a mixin that provides scanning logic for one family of
constructs (markup declarations, tags, text runs, raw text).
"""

from __future__ import annotations

from tagscan.lexer.scanners.markup import CommentState, MarkupScannerMixin
from tagscan.lexer.scanners.raw import RawTextReaderMixin
from tagscan.lexer.scanners.tag import TagScannerMixin
from tagscan.lexer.scanners.text import TextScannerMixin

__all__ = [
    "CommentState",
    "MarkupScannerMixin",
    "RawTextReaderMixin",
    "TagScannerMixin",
    "TextScannerMixin",
]
