"""Core block parsing for mdtree.

Provides the top-level block loop and the line-oriented recognizers
(headings, fenced code, blockquote lines, thematic breaks, paragraphs).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdtree.nodes import (
    Block,
    Blockquote,
    CodeBlock,
    Heading,
    Paragraph,
    ThematicBreak,
)
from mdtree.parsing.charsets import CODE_FENCE, INDENT, THEMATIC_BREAK_CHARS
from mdtree.parsing.dispatch import BLOCK_RECOGNIZERS

if TYPE_CHECKING:
    from mdtree.cursor import Cursor


def is_thematic_break(line: str) -> bool:
    """True for a line of three or more of the same ``-``, ``*`` or ``_``."""
    marker = line[:1]
    if marker not in THEMATIC_BREAK_CHARS:
        return False
    compact = "".join(line.split())
    return len(compact) >= 3 and compact == marker * len(compact)


class BlockParsingCoreMixin:
    """Top-level block loop and basic block recognizers.

    Required Host Attributes:
        - _cursor: Cursor

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]
        - _try_code_block() -> CodeBlock | None
        - _try_blockquote() -> Blockquote | None
        - _try_ordered_list() -> OrderedList | None
        - _try_unordered_list() -> UnorderedList | None

    """

    _cursor: Cursor

    def _parse_blocks(self) -> list[Block]:
        """Parse blocks until the input is exhausted.

        Blank lines between blocks are skipped. Every pass either produces a
        block or consumes at least one line, so the loop always terminates.
        """
        blocks: list[Block] = []
        cursor = self._cursor
        while True:
            self._skip_blank_lines()
            if cursor.at_end:
                break
            block = self._parse_block()
            if block is not None:
                blocks.append(block)
        return blocks

    def _parse_block(self) -> Block | None:
        """Try each block recognizer in priority order."""
        for name in BLOCK_RECOGNIZERS:
            block = getattr(self, name)()
            if block is not None:
                return block
        return None

    # =========================================================================
    # Line helpers
    # =========================================================================

    def _peek_line(self) -> str:
        """Current line without its newline; does not consume."""
        cursor = self._cursor
        return cursor.slice(0, cursor.line_end())

    def _consume_line(self) -> None:
        """Consume the current line and its newline."""
        cursor = self._cursor
        cursor.advance(cursor.line_end() + 1)

    def _consume_line_rest(self) -> None:
        """Skip trailing spaces and consume the newline, if nothing else is left."""
        cursor = self._cursor
        offset = 0
        while cursor.peek(offset) in INDENT:
            offset += 1
        if cursor.peek(offset) in (None, "\n"):
            cursor.advance(offset + 1)

    def _skip_blank_lines(self) -> None:
        """Skip empty and whitespace-only lines."""
        cursor = self._cursor
        while not cursor.at_end:
            if self._peek_line().strip():
                return
            self._consume_line()

    # =========================================================================
    # Recognizers
    # =========================================================================

    def _try_heading(self) -> Heading | None:
        """``#`` run (level) followed by inline content up to the newline."""
        cursor = self._cursor
        level = 0
        while cursor.peek(level) == "#":
            level += 1
        if level == 0:
            return None
        cursor.advance(level)
        text = self._peek_line().strip()
        self._consume_line()
        return Heading(self._parse_inline(text), level)

    def _try_fenced_code(self) -> CodeBlock | None:
        """Fenced code block starting a line."""
        if not self._cursor.starts_with(CODE_FENCE):
            return None
        block = self._try_code_block()
        if block is not None:
            self._consume_line_rest()
        return block

    def _try_quote_line(self) -> Blockquote | None:
        """``>`` line at block level; the newline is consumed."""
        block = self._try_blockquote()
        if block is not None:
            self._consume_line()
        return block

    def _try_thematic_break(self) -> ThematicBreak | None:
        """Three or more of the same ``-``, ``*`` or ``_``, spaces allowed."""
        if not is_thematic_break(self._peek_line()):
            return None
        self._consume_line()
        return ThematicBreak()

    def _parse_paragraph(self) -> Paragraph | None:
        """Lines up to the next blank line, thematic break or the end of input.

        Called last, on a non-blank line, so it always consumes input.
        """
        cursor = self._cursor
        lines: list[str] = []
        while not cursor.at_end:
            line = self._peek_line()
            if not line.strip() or (lines and is_thematic_break(line)):
                break
            lines.append(line)
            self._consume_line()
        text = "\n".join(lines).strip()
        if not text:
            return None
        return Paragraph(self._parse_inline(text))
