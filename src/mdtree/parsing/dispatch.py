"""Dispatch tables and lookahead for the recursive-descent parser.

Decides which recognizer may run at the current cursor position. Trigger
characters come from the token table; ambiguous characters are settled with
at most two characters of lookahead before any recognizer commits.

Inline priority (first match wins):
    strikethrough -> emphasis/strong -> code -> image -> link -> blockquote
    -> plain text (fallback, always succeeds)

Block priority (first match wins):
    heading -> fenced code -> blockquote -> thematic break -> ordered list
    -> unordered list -> paragraph (fallback on non-blank lines)

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdtree.parsing.charsets import (
    DASH_STRIKE,
    EMPHASIS_DELIMITERS,
    TILDE_STRIKE,
    WHITESPACE,
)
from mdtree.tokens import TokenKind, kinds_for

if TYPE_CHECKING:
    from mdtree.config import ParseConfig
    from mdtree.cursor import Cursor


INLINE_PRIORITY: tuple[TokenKind, ...] = (
    TokenKind.STRIKETHROUGH,
    TokenKind.EMPHASIS,
    TokenKind.CODE,
    TokenKind.IMAGE,
    TokenKind.LINK,
    TokenKind.QUOTE,
)

# Recognizer method names on the parser, keyed by construct kind
INLINE_RECOGNIZERS: dict[TokenKind, str] = {
    TokenKind.STRIKETHROUGH: "_try_strikethrough",
    TokenKind.EMPHASIS: "_try_emphasis",
    TokenKind.CODE: "_try_code",
    TokenKind.IMAGE: "_try_image",
    TokenKind.LINK: "_try_link",
    TokenKind.QUOTE: "_try_blockquote",
}

BLOCK_RECOGNIZERS: tuple[str, ...] = (
    "_try_heading",
    "_try_fenced_code",
    "_try_quote_line",
    "_try_thematic_break",
    "_try_ordered_list",
    "_try_unordered_list",
    "_parse_paragraph",
)


def _opens_span(char: str | None) -> bool:
    """A span marker must be followed by something other than whitespace."""
    return char is not None and char not in WHITESPACE


def strikethrough_marker(cursor: Cursor, config: ParseConfig) -> str | None:
    """Return the strikethrough marker that opens here, if any."""
    if not config.strikethrough_enabled:
        return None
    if cursor.starts_with(TILDE_STRIKE):
        marker = TILDE_STRIKE
    elif config.dash_strikethrough and cursor.starts_with(DASH_STRIKE):
        marker = DASH_STRIKE
    else:
        return None
    if not _opens_span(cursor.peek(len(marker))):
        return None
    return marker


def emphasis_marker(cursor: Cursor) -> str | None:
    """Return ``*``/``_`` (emphasis) or ``**``/``__`` (strong) if one opens here.

    An underscore directly after a letter or digit never opens, so
    ``snake_case_name`` stays plain text.
    """
    char = cursor.peek()
    if char not in EMPHASIS_DELIMITERS:
        return None
    if char == "_":
        before = cursor.peek(-1)
        if before is not None and before.isalnum():
            return None
    marker = char * 2 if cursor.peek(1) == char else char
    if not _opens_span(cursor.peek(len(marker))):
        return None
    return marker


def opens_quote(cursor: Cursor) -> bool:
    """``>`` at the start of a line, followed by whitespace or end of input."""
    if cursor.peek() != ">":
        return False
    after = cursor.peek(1)
    if after is not None and after not in WHITESPACE:
        return False
    return cursor.at_line_start()


def inline_candidates(cursor: Cursor, config: ParseConfig) -> tuple[TokenKind, ...]:
    """Construct kinds that may start at the cursor, in priority order.

    Uses the token table to find the kinds the current character triggers,
    then confirms each with lookahead. An empty result means the character
    is plain text here.
    """
    kinds = kinds_for(cursor.peek())
    if not kinds:
        return ()
    found: list[TokenKind] = []
    for kind in INLINE_PRIORITY:
        if kind not in kinds:
            continue
        if kind is TokenKind.STRIKETHROUGH:
            ok = strikethrough_marker(cursor, config) is not None
        elif kind is TokenKind.EMPHASIS:
            ok = emphasis_marker(cursor) is not None
        elif kind is TokenKind.IMAGE:
            ok = cursor.peek(1) == "["
        elif kind is TokenKind.QUOTE:
            ok = opens_quote(cursor)
        else:
            ok = True
        if ok:
            found.append(kind)
    return tuple(found)
