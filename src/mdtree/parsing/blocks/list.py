"""List parsing for mdtree.

An item starts on a line with a list marker; following lines indented by
three spaces or a tab continue it. Each item's text is parsed by a fresh
parser instance, independent of its siblings. A list ends at the first
blank line or the first line that neither continues the current item nor
starts a new item of the same list kind.

Markers:
- Unordered: ``- ``, ``* `` or ``+ ``
- Ordered: a digit run, ``.`` or ``)``, then a space (``1. ``, ``2) ``)

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from mdtree.nodes import Inline, OrderedList, UnorderedList
from mdtree.parsing.charsets import (
    CONTINUATION_INDENTS,
    INDENT,
    ORDERED_LIST_MARKER,
    UNORDERED_LIST_MARKERS,
)

if TYPE_CHECKING:
    from mdtree.cursor import Cursor


def unordered_marker_width(line: str) -> int:
    """Width of a ``- ``, ``* `` or ``+ `` marker at the start of ``line``, else 0."""
    if len(line) >= 2 and line[0] in UNORDERED_LIST_MARKERS and line[1] in INDENT:
        return 2
    return 0


def ordered_marker_width(line: str) -> int:
    """Width of a ``12. ``/``12) `` marker at the start of ``line``, else 0."""
    match = ORDERED_LIST_MARKER.match(line)
    if match is None:
        return 0
    return match.end()


class ListParsingMixin:
    """Mixin for ordered and unordered lists.

    Required Host Attributes:
        - _cursor: Cursor

    Required Host Methods:
        - _peek_line() -> str
        - _consume_line() -> None
        - _parse_nested(text) -> tuple[Inline, ...]

    """

    _cursor: Cursor

    def _try_ordered_list(self) -> OrderedList | None:
        """Ordered list; ``start`` is the number on the first item."""
        match = ORDERED_LIST_MARKER.match(self._peek_line())
        if match is None:
            return None
        start = int(match.group(1))
        return OrderedList(self._parse_list_items(ordered_marker_width), start)

    def _try_unordered_list(self) -> UnorderedList | None:
        """Unordered list."""
        if not unordered_marker_width(self._peek_line()):
            return None
        return UnorderedList(self._parse_list_items(unordered_marker_width))

    def _parse_list_items(
        self, marker_width: Callable[[str], int]
    ) -> tuple[tuple[Inline, ...], ...]:
        """Collect items while lines keep matching ``marker_width``."""
        cursor = self._cursor
        items: list[tuple[Inline, ...]] = []
        while not cursor.at_end:
            line = self._peek_line()
            width = marker_width(line)
            if not width:
                break
            self._consume_line()
            body = [line[width:].strip()]
            while not cursor.at_end:
                continuation = self._peek_line()
                if not continuation.strip() or not continuation.startswith(CONTINUATION_INDENTS):
                    break
                body.append(continuation.strip())
                self._consume_line()
            items.append(self._parse_nested("\n".join(body)))
        return tuple(items)
