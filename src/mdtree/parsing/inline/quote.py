"""Blockquote recognizer for mdtree.

A ``>`` at the start of a line, followed by whitespace or the end of the
line, quotes the rest of that line. The quoted text is handed to a new
parser instance, so ``> > text`` nests through ordinary recursion.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdtree.nodes import Blockquote
from mdtree.parsing.charsets import INDENT
from mdtree.parsing.dispatch import opens_quote

if TYPE_CHECKING:
    from mdtree.cursor import Cursor


class QuoteParsingMixin:
    """Mixin for the blockquote recognizer.

    Required Host Attributes:
        - _cursor: Cursor

    Required Host Methods:
        - _parse_nested(text) -> tuple[Inline, ...]

    """

    _cursor: Cursor

    def _try_blockquote(self) -> Blockquote | None:
        """Recognize ``> text`` up to (not including) the end of the line."""
        cursor = self._cursor
        if not opens_quote(cursor):
            return None
        end = cursor.line_end()
        text = cursor.slice(1, end)
        if text[:1] in INDENT:
            text = text[1:]
        cursor.advance(end)
        return Blockquote(self._parse_nested(text))
