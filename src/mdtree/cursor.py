"""Character cursor over Markdown source.

The cursor is the only read head the parser has. It is backed by the source
``str`` itself, so every peek is a single index operation (O(1)); nothing ever
re-scans the text from the start.

Invariants:
- ``position`` never goes below 0
- ``position`` may run past ``len(text)`` via ``advance``; reads then return None

Thread Safety:
A Cursor belongs to exactly one Parser. Child parsers get their own Cursor
over their own string, so no cursor state is ever shared.

"""

from __future__ import annotations

_INDENT_CHARS = frozenset(" \t")


class Cursor:
    """Position-tracking read head over a text buffer.

    Usage:
        >>> cur = Cursor("**bold**")
        >>> cur.peek(), cur.peek(1)
        ('*', '*')
        >>> cur.starts_with("**")
        True
        >>> cur.advance(2)
        >>> cur.next_char()
        'b'

    """

    __slots__ = ("_text", "_pos", "_len")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._len = len(text)

    def __repr__(self) -> str:
        return f"Cursor(position={self._pos}, length={self._len})"

    @property
    def text(self) -> str:
        """The full text being scanned."""
        return self._text

    @property
    def position(self) -> int:
        """Current index into the text."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self._pos >= self._len

    @property
    def remaining(self) -> str:
        """Unconsumed text (empty at or past the end)."""
        return self._text[self._pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Return the character at position + offset without consuming it.

        Returns None when the absolute index falls outside the text, including
        negative indexes (no wrap-around).
        """
        pos = self._pos + offset
        if 0 <= pos < self._len:
            return self._text[pos]
        return None

    def advance(self, n: int = 1) -> None:
        """Move forward by ``n`` characters; never moves below 0."""
        self._pos = max(0, self._pos + n)

    def next_char(self) -> str | None:
        """Return the current character and consume it."""
        char = self.peek()
        self._pos += 1
        return char

    def retreat(self) -> None:
        """Un-consume the previous character."""
        if self._pos > 0:
            self._pos -= 1

    def starts_with(self, literal: str) -> bool:
        """Check whether the remaining input begins with ``literal``."""
        if self._pos > self._len:
            return False
        return self._text.startswith(literal, self._pos)

    def find(self, literal: str, offset: int = 0) -> int | None:
        """Find ``literal`` at or after position + offset.

        Returns:
            Offset relative to the current position, or None if absent
        """
        start = self._pos + offset
        if start > self._len:
            return None
        idx = self._text.find(literal, start)
        if idx == -1:
            return None
        return idx - self._pos

    def line_end(self) -> int:
        """Relative offset of the next newline, or of the end of input."""
        if self._pos >= self._len:
            return 0
        idx = self._text.find("\n", self._pos)
        if idx == -1:
            return self._len - self._pos
        return idx - self._pos

    def slice(self, start: int, end: int) -> str:
        """Text between two offsets relative to the current position."""
        return self._text[self._pos + start : self._pos + end]

    def at_line_start(self) -> bool:
        """True if only spaces/tabs separate the position from a line start."""
        pos = min(self._pos, self._len) - 1
        while pos >= 0 and self._text[pos] in _INDENT_CHARS:
            pos -= 1
        return pos < 0 or self._text[pos] == "\n"
