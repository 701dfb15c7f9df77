"""Core inline parsing for mdtree.

Drives the inline loop: at each position it asks the dispatcher which
constructs may start here, tries their recognizers in priority order, and
falls back to plain text. Newlines inside a block fold into a single space
or, after two trailing spaces or a backslash, become a Newline node.

Thread Safety:
All methods use instance-local state only.
Safe when each parser instance is used by one thread.

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from mdtree.nodes import Inline, Newline, String
from mdtree.parsing.charsets import INDENT
from mdtree.parsing.dispatch import INLINE_RECOGNIZERS, inline_candidates
from mdtree.tokens import TRIGGER_CHARS
from mdtree.utils.logger import get_logger

if TYPE_CHECKING:
    from mdtree.config import ParseConfig
    from mdtree.cursor import Cursor

logger = get_logger(__name__)

_LINE_FOLD = re.compile(r"[ \t]*\n[ \t]*")


def fold_lines(text: str) -> str:
    """Collapse each newline and its surrounding indentation into one space."""
    if "\n" not in text:
        return text
    return _LINE_FOLD.sub(" ", text)


def strip_run_tail(run: list[str]) -> int:
    """Remove trailing spaces and tabs from a pending text run.

    Only the tail pieces are touched, so a long run is never copied.

    Returns:
        Number of characters removed
    """
    removed = 0
    while run:
        piece = run[-1]
        stripped = piece.rstrip(" \t")
        removed += len(piece) - len(stripped)
        if stripped:
            run[-1] = stripped
            break
        run.pop()
    return removed


class InlineParsingCoreMixin:
    """Inline loop, plain-text fallback and shared span helpers.

    Plain text is collected as a list of pieces and becomes a single String
    when a non-text node arrives or the input ends.

    Required Host Attributes:
        - _cursor: Cursor
        - _config: ParseConfig

    Required Host Methods (from other mixins):
        - _try_strikethrough() -> Strikethrough | None
        - _try_emphasis() -> Emphasis | Strong | None
        - _try_code() -> CodeInline | CodeBlock | None
        - _try_image() -> Image | None
        - _try_link() -> Link | None
        - _try_blockquote() -> Blockquote | None

    """

    _cursor: Cursor
    _config: ParseConfig

    def parse_inlines(self) -> list[Inline]:
        """Parse the whole source as inline content.

        Never fails: every character ends up in some node. Markers of an
        unclosed span run to the end of the source.

        Returns:
            List of inline nodes; adjacent text forms one String
        """
        cursor = self._cursor
        nodes: list[Inline] = []
        run: list[str] = []
        while not cursor.at_end:
            if cursor.peek() == "\n":
                self._fold_newline(nodes, run)
                continue
            node = self._dispatch_inline()
            if node is None:
                run.append(self._parse_text())
                continue
            _flush_run(nodes, run)
            nodes.append(node)
        _flush_run(nodes, run)
        return nodes

    def _dispatch_inline(self) -> Inline | None:
        """Try each candidate recognizer in priority order."""
        for kind in inline_candidates(self._cursor, self._config):
            recognizer = getattr(self, INLINE_RECOGNIZERS[kind])
            node = recognizer()
            if node is not None:
                return node
        return None

    def _parse_text(self) -> str:
        """Consume a plain text piece.

        Always consumes at least one character, so a trigger whose recognizer
        declined (``[unclosed``) still makes progress. Stops before a newline
        or before any character that would open another construct.
        """
        cursor = self._cursor
        config = self._config
        start = cursor.position
        cursor.advance()
        while not cursor.at_end:
            char = cursor.peek()
            if char == "\n":
                break
            if char in TRIGGER_CHARS and inline_candidates(cursor, config):
                break
            cursor.advance()
        return cursor.text[start : cursor.position]

    def _fold_newline(self, nodes: list[Inline], run: list[str]) -> None:
        """Handle a newline inside inline content.

        The pending ``run`` either gets a folding space or, for a hard
        break, is closed off and followed by a Newline node.
        """
        cursor = self._cursor
        cursor.advance()
        while cursor.peek() in INDENT:
            cursor.advance()
        if cursor.at_end or not (nodes or run):
            return

        if not run:
            run.append(" ")
            return

        if self._config.hard_breaks:
            if run[-1].endswith("\\"):
                run[-1] = run[-1][:-1]
                if not run[-1]:
                    run.pop()
                hard = True
            else:
                hard = strip_run_tail(run) >= 2
            if hard:
                _flush_run(nodes, run)
                nodes.append(Newline())
                return
        else:
            strip_run_tail(run)
        run.append(" ")

    def _take_delimited(self, marker: str) -> str:
        """Consume ``marker``, then text up to the matching closer.

        An unclosed span takes everything to the end of the source.
        """
        cursor = self._cursor
        cursor.advance(len(marker))
        close = cursor.find(marker)
        if close is None:
            text = cursor.remaining
            cursor.advance(len(text))
            logger.debug("Unclosed %r span treated as closed at end of input", marker)
        else:
            text = cursor.slice(0, close)
            cursor.advance(close + len(marker))
        return fold_lines(text)


def _flush_run(nodes: list[Inline], run: list[str]) -> None:
    """Emit the pending text run as one String and clear it."""
    if run:
        nodes.append(String("".join(run)))
        run.clear()
