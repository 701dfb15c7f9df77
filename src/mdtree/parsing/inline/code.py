"""Inline code and fenced code recognizers for mdtree.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdtree.nodes import CodeBlock, CodeInline
from mdtree.parsing.charsets import CODE_FENCE
from mdtree.utils.logger import get_logger

if TYPE_CHECKING:
    from mdtree.cursor import Cursor

logger = get_logger(__name__)

_FENCE_LEN = len(CODE_FENCE)


class CodeParsingMixin:
    """Mixin for backtick recognizers.

    Required Host Attributes:
        - _cursor: Cursor

    """

    _cursor: Cursor

    def _try_code(self) -> CodeInline | CodeBlock | None:
        """Three backticks open a fenced block, one opens inline code."""
        if self._cursor.starts_with(CODE_FENCE):
            return self._try_code_block()
        return self._try_code_inline()

    def _try_code_inline(self) -> CodeInline | None:
        """Recognize `code`. Content is verbatim; unclosed runs to the end."""
        cursor = self._cursor
        if cursor.peek() != "`":
            return None
        close = cursor.find("`", 1)
        if close is None:
            content = cursor.slice(1, len(cursor.remaining))
            cursor.advance(len(content) + 1)
            logger.debug("Unclosed inline code treated as closed at end of input")
        else:
            content = cursor.slice(1, close)
            cursor.advance(close + 1)
        return CodeInline(content)

    def _try_code_block(self) -> CodeBlock | None:
        """Recognize a fenced code block.

        The rest of the opening line is the info string; its first word is
        the language. A fence closed on its own opening line (```x```)
        holds ``x`` and has no language. Content runs verbatim up to the
        closing fence or the end of input.
        """
        cursor = self._cursor
        if not cursor.starts_with(CODE_FENCE):
            return None

        newline = cursor.find("\n", _FENCE_LEN)
        close = cursor.find(CODE_FENCE, _FENCE_LEN)

        if close is not None and (newline is None or close < newline):
            content = cursor.slice(_FENCE_LEN, close)
            cursor.advance(close + _FENCE_LEN)
            return CodeBlock(content)

        if newline is None:
            info = cursor.slice(_FENCE_LEN, len(cursor.remaining))
            cursor.advance(len(cursor.remaining))
            return CodeBlock("", _language(info))

        info = cursor.slice(_FENCE_LEN, newline)
        body_start = newline + 1
        close = cursor.find(CODE_FENCE, body_start)
        if close is None:
            content = cursor.slice(body_start, len(cursor.remaining))
            cursor.advance(len(cursor.remaining))
            logger.debug("Unclosed code fence treated as closed at end of input")
        else:
            content = cursor.slice(body_start, close)
            cursor.advance(close + _FENCE_LEN)
        return CodeBlock(content, _language(info))


def _language(info: str) -> str | None:
    """First word of a fence info string, or None when blank."""
    words = info.split()
    return words[0] if words else None
