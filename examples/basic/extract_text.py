"""Pull plain text out of markup with the token stream, zero config.

Run with --debug to trace what the scanner sees and skips.
"""

import sys

from tagscan import TokenType, tokenize
from tagscan.utils import enable_debug

BREAKS = {"P", "BR", "DIV", "LI", "TR", "H1", "H2", "H3"}

if "--debug" in sys.argv:
    enable_debug()

parts = []
for token in tokenize(b"<H1>Title</H1><P>Some   <B>bold</B> <BLINK>text.</P>"):
    if token.type is TokenType.TEXT:
        parts.append(token.value)
    elif token.is_tag and token.name in BREAKS:
        parts.append("\n")

print("".join(parts).strip())
