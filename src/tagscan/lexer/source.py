"""Character source: code points from UTF-8 code units.

The byte stream is assumed to be valid UTF-8 already (conversion happens
upstream), so multi-byte sequences are joined by their leading-bit pattern
without re-validation. Carriage returns are discarded before decoding,
which canonicalizes CRLF and CR-LF mixes to LF.

End of input is the empty string. Pushing back the empty string is allowed
and re-delivers end of input.
"""

from __future__ import annotations

from collections import deque

from tagscan.errors import PushbackOverflowError

_CR = 0x0D
_REPLACEMENT = 0xFFFD
_MAX_CODE_POINT = 0x10FFFF


class CharacterSource:
    """Pull-based code point reader with bounded pushback.

    Usage:
            >>> src = CharacterSource(b"a\\r\\nb")
            >>> src.next(), src.next(), src.next(), src.next()
            ('a', '\\n', 'b', '')

    Position:
        ``lineno`` starts at 1 and increments on every newline delivered;
        ``col`` resets to 0 on a newline and increments for any other
        character, so it is the column of the last character delivered.
        Pushing a character back rewinds the position to where it was
        before that character was delivered.

    """

    __slots__ = (
        "_data",
        "_pos",
        "_len",
        "_pending",
        "_marks",
        "_capacity",
        "lineno",
        "col",
    )

    def __init__(
        self,
        data: bytes | bytearray | memoryview | str,
        *,
        pushback_capacity: int = 4,
    ) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8", "surrogatepass")
        self._data = bytes(data)
        self._pos = 0
        self._len = len(self._data)
        self._pending: list[str] = []
        # Positions before the most recent deliveries, for rewinding on pushback
        self._marks: deque[tuple[int, int]] = deque(maxlen=pushback_capacity)
        self._capacity = pushback_capacity
        self.lineno = 1
        self.col = 0

    @property
    def pushback_capacity(self) -> int:
        return self._capacity

    @property
    def pending(self) -> int:
        """Number of pushed-back characters waiting to be re-delivered."""
        return len(self._pending)

    def next(self) -> str:
        """Return the next code point, or "" at end of input."""
        char = self._pending.pop() if self._pending else self._decode()
        if char:
            self._marks.append((self.lineno, self.col))
            if char == "\n":
                self.lineno += 1
                self.col = 0
            else:
                self.col += 1
        return char

    def pushback(self, char: str) -> None:
        """Return a consumed character to be delivered before fresh input.

        Raises:
            PushbackOverflowError: if the buffer already holds capacity items
        """
        if len(self._pending) >= self._capacity:
            raise PushbackOverflowError(self._capacity)
        self._pending.append(char)
        if char and self._marks:
            self.lineno, self.col = self._marks.pop()

    def _decode(self) -> str:
        data = self._data
        pos = self._pos
        end = self._len

        while pos < end and data[pos] == _CR:
            pos += 1
        if pos >= end:
            self._pos = pos
            return ""

        lead = data[pos]
        pos += 1
        if lead < 0x80:
            self._pos = pos
            return chr(lead)

        # Count continuation bytes from the leading one-bits after the first
        extra = 0
        mask = 0x40
        while lead & mask and extra < 3:
            extra += 1
            mask >>= 1

        if extra == 0:
            # Stray continuation byte
            self._pos = pos
            return chr(_REPLACEMENT)

        code = lead & (mask - 1)
        for _ in range(extra):
            if pos >= end:
                break
            code = (code << 6) | (data[pos] & 0x3F)
            pos += 1

        self._pos = pos
        if code > _MAX_CODE_POINT:
            code = _REPLACEMENT
        return chr(code)
