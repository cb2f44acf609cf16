"""Utility modules for tagscan.

Provides:
- text: whitespace normalization and the default entity expander
- logger: get_logger and scan tracing (enable_debug, disable_debug)
"""

from tagscan.utils.logger import disable_debug, enable_debug, get_logger
from tagscan.utils.text import (
    collapse_whitespace,
    expand_entities,
    trim_before_close,
    trim_leading,
    trim_trailing,
)

__all__ = [
    "collapse_whitespace",
    "disable_debug",
    "enable_debug",
    "expand_entities",
    "get_logger",
    "trim_before_close",
    "trim_leading",
    "trim_trailing",
]
