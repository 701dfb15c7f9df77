"""Token table for the mdtree parser.

Static configuration that maps each construct kind to the character(s) that
may open it. The parser never scans for constructs by name; it asks the table
"which kinds can start at this character" and then confirms with lookahead.

Some characters open more than one construct:
- ``*`` opens emphasis, strong, an unordered list item or a thematic break
- ``+`` opens only an unordered list item
- ``-`` opens strikethrough (``--``), an unordered list item or a thematic break
- ``_`` opens emphasis, strong or a thematic break

Thread Safety:
All tables are immutable module-level constants.

"""

from enum import Enum


class TokenKind(Enum):
    """Construct kinds that have a trigger character."""

    HEADING = "heading"
    LINK = "link"
    IMAGE = "image"
    CODE = "code"  # ` inline code, ``` fenced code
    EMPHASIS = "emphasis"  # * _ emphasis, ** __ strong
    STRIKETHROUGH = "strikethrough"  # ~~ --
    QUOTE = "quote"
    UNORDERED_LIST = "unordered_list"
    THEMATIC_BREAK = "thematic_break"
    NEWLINE = "newline"


MARKDOWN_TOKENS: tuple[tuple[TokenKind, str], ...] = (
    (TokenKind.HEADING, "#"),
    (TokenKind.LINK, "["),
    (TokenKind.IMAGE, "!"),
    (TokenKind.CODE, "`"),
    (TokenKind.EMPHASIS, "*"),
    (TokenKind.EMPHASIS, "_"),
    (TokenKind.STRIKETHROUGH, "~"),
    (TokenKind.STRIKETHROUGH, "-"),
    (TokenKind.QUOTE, ">"),
    (TokenKind.UNORDERED_LIST, "-"),
    (TokenKind.UNORDERED_LIST, "*"),
    (TokenKind.UNORDERED_LIST, "+"),
    (TokenKind.THEMATIC_BREAK, "-"),
    (TokenKind.THEMATIC_BREAK, "*"),
    (TokenKind.THEMATIC_BREAK, "_"),
    (TokenKind.NEWLINE, "\n"),
)


def _index_triggers(
    table: tuple[tuple[TokenKind, str], ...],
) -> dict[str, frozenset[TokenKind]]:
    """Invert the token table into char -> kinds for O(1) lookup."""
    index: dict[str, set[TokenKind]] = {}
    for kind, char in table:
        index.setdefault(char, set()).add(kind)
    return {char: frozenset(kinds) for char, kinds in index.items()}


_TRIGGERS: dict[str, frozenset[TokenKind]] = _index_triggers(MARKDOWN_TOKENS)

# Every character that may open some construct
TRIGGER_CHARS: frozenset[str] = frozenset(_TRIGGERS)

_NO_KINDS: frozenset[TokenKind] = frozenset()


def kinds_for(char: str | None) -> frozenset[TokenKind]:
    """Return the construct kinds that ``char`` may open.

    Args:
        char: A single character, or None (end of input)

    Returns:
        Possibly empty frozenset of TokenKind

    Example:
        >>> sorted(k.value for k in kinds_for("-"))
        ['strikethrough', 'thematic_break', 'unordered_list']
    """
    if char is None:
        return _NO_KINDS
    return _TRIGGERS.get(char, _NO_KINDS)


def is_trigger(char: str | None, kind: TokenKind | None = None) -> bool:
    """Check whether ``char`` triggers ``kind`` (or any kind when None)."""
    kinds = kinds_for(char)
    if kind is None:
        return bool(kinds)
    return kind in kinds


__all__ = [
    "MARKDOWN_TOKENS",
    "TRIGGER_CHARS",
    "TokenKind",
    "is_trigger",
    "kinds_for",
]
