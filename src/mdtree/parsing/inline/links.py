"""Link and image recognizers for mdtree.

Both need the complete ``[label](destination)`` sequence. The recognizers
look ahead for ``]``, ``(`` and ``)`` first and only consume input once all
three are present, so a dangling ``[`` or ``![`` leaves the cursor untouched
and falls through to plain text.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdtree.nodes import Image, Link
from mdtree.parsing.charsets import TITLE_QUOTES
from mdtree.parsing.inline.core import fold_lines

if TYPE_CHECKING:
    from mdtree.cursor import Cursor


def split_destination(dest: str) -> tuple[str, str | None]:
    """Split ``url "title"`` into url and optional title.

    The title must be wrapped in matching quotes or parentheses; anything
    else after the first whitespace is treated as part of the url.

    Examples:
        >>> split_destination('https://x.com/ "Home"')
        ('https://x.com/', 'Home')
        >>> split_destination("a b")
        ('a b', None)
    """
    dest = dest.strip()
    parts = dest.split(None, 1)
    if len(parts) == 2:
        url, rest = parts
        rest = rest.strip()
        closer = TITLE_QUOTES.get(rest[0])
        if closer is not None and len(rest) >= 2 and rest.endswith(closer):
            return url, rest[1:-1]
    return dest, None


class LinkParsingMixin:
    """Mixin for link and image recognizers.

    Required Host Attributes:
        - _cursor: Cursor

    """

    _cursor: Cursor

    def _try_link(self) -> Link | None:
        """Recognize ``[label](url)``."""
        found = self._scan_link(0)
        if found is None:
            return None
        label, url, title, length = found
        self._cursor.advance(length)
        return Link(label, url, title)

    def _try_image(self) -> Image | None:
        """Recognize ``![alt](url)``."""
        cursor = self._cursor
        if cursor.peek() != "!":
            return None
        found = self._scan_link(1)
        if found is None:
            return None
        alt, url, title, length = found
        cursor.advance(length)
        return Image(alt, url, title)

    def _scan_link(self, offset: int) -> tuple[str, str, str | None, int] | None:
        """Look ahead for ``[label](destination)`` starting at ``offset``.

        Does not move the cursor.

        Returns:
            (label, url, title, total length from the cursor) or None
        """
        cursor = self._cursor
        if cursor.peek(offset) != "[":
            return None
        close = cursor.find("]", offset + 1)
        if close is None or cursor.peek(close + 1) != "(":
            return None
        paren = cursor.find(")", close + 2)
        if paren is None:
            return None
        label = fold_lines(cursor.slice(offset + 1, close))
        url, title = split_destination(cursor.slice(close + 2, paren))
        return label, url, title, paren + 1
