"""Scanner operating modes.

Literal mode is entered on the preformatted start tag and left on its
matching end tag. In literal mode whitespace normalization is suspended.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Normalizer operating modes.

    - NORMAL: whitespace is trimmed at block boundaries and collapsed
    - LITERAL: inside a preformatted element, whitespace kept verbatim

    """

    NORMAL = auto()
    LITERAL = auto()
