"""Raw-text reader mixin.

Reads the body of elements such as <SCRIPT> verbatim, bypassing tag
scanning entirely, until the element's end tag.
"""

from __future__ import annotations

from tagscan.lexer.source import CharacterSource


def _failure_table(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for each prefix of pattern."""
    table = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and pattern[i] != pattern[k]:
            k = table[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        table[i] = k
    return table


class RawTextReaderMixin:
    """Mixin providing read_until() for raw-text elements."""

    # These will be set by the Scanner class
    _source: CharacterSource

    def read_until(self, name: str) -> tuple[str, bool]:
        """Read verbatim content up to ``</name>`` (case-insensitive).

        Args:
            name: Element name whose end tag terminates the content

        Returns:
            (content, found). On a match the end tag is consumed and removed
            from content. At end of input found is False and content holds
            everything read; the caller decides whether that is fatal.
        """
        terminator = f"</{name.upper()}>"
        failure = _failure_table(terminator)
        source = self._source
        content: list[str] = []
        state = 0
        while True:
            char = source.next()
            if not char:
                return "".join(content), False
            content.append(char)

            upper = char.upper()
            while state and upper != terminator[state]:
                state = failure[state - 1]
            if upper == terminator[state]:
                state += 1
                if state == len(terminator):
                    del content[len(content) - len(terminator) :]
                    return "".join(content), True
