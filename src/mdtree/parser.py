"""Recursive descent parser producing a typed AST.

Reads Markdown through a Cursor and builds immutable (frozen) dataclass
nodes in a single pass.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: inline loop and span/link/code/quote recognizers
- `BlockParsingMixin`: top-level block loop, headings, lists, paragraphs

Block bodies are parsed by child Parser instances over their own text:
headings and paragraphs at the same depth, blockquote and list item bodies
one level deeper. A child owns its string and cursor; nothing is shared
with the parent.

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from mdtree.config import ParseConfig, get_parse_config
from mdtree.cursor import Cursor
from mdtree.errors import ParseError
from mdtree.nodes import Block, Inline, String
from mdtree.parsing import BlockParsingMixin, InlineParsingMixin
from mdtree.utils.logger import get_logger

logger = get_logger(__name__)


def decode_source(source: str | bytes) -> str:
    """Turn parser input into text with ``\\n`` line endings.

    Raises:
        ParseError: bytes that are not UTF-8, or an object that is neither
            str nor bytes
    """
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"source is not valid UTF-8: {exc.reason}", offset=exc.start) from exc
    elif not isinstance(source, str):
        raise ParseError(f"expected str or bytes, got {type(source).__name__}")
    if "\r" in source:
        source = source.replace("\r\n", "\n").replace("\r", "\n")
    return source


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for Markdown.

    Usage:
            >>> parser = Parser("# Hello\\n\\nWorld")
            >>> parser.parse()
        [Heading(children=(String(text='Hello'),), level=1), Paragraph(...)]

            >>> Parser("**bold** text").parse_inlines()
        [Strong(text='bold'), String(text=' text')]

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting AST is immutable and thread-safe.

    """

    __slots__ = ("_source", "_cursor", "_depth")

    def __init__(self, source: str | bytes, *, depth: int = 0) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.

        Args:
            source: Markdown source (str, or UTF-8 encoded bytes)
            depth: Nesting depth; set by the parent for child parsers

        """
        self._source = decode_source(source)
        self._cursor = Cursor(self._source)
        self._depth = depth

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    @property
    def source(self) -> str:
        """Decoded source text."""
        return self._source

    @property
    def cursor(self) -> Cursor:
        """The parser's read head."""
        return self._cursor

    @property
    def depth(self) -> int:
        """Nesting depth (0 for a top-level parser)."""
        return self._depth

    def parse(self) -> list[Block]:
        """Parse source into top-level blocks.

        Never raises for text input; empty input gives an empty list.

        Returns:
            List of Block nodes in document order
        """
        return self._parse_blocks()

    def _parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Parse the inline content of a heading or paragraph."""
        if not text:
            return ()
        return tuple(Parser(text, depth=self._depth).parse_inlines())

    def _parse_nested(self, text: str) -> tuple[Inline, ...]:
        """Parse a blockquote or list item body with a child parser.

        Past ``max_nesting_depth`` the body is kept as a plain String instead
        of recursing further.
        """
        if not text:
            return ()
        depth = self._depth + 1
        if depth > self._config.max_nesting_depth:
            logger.debug("Nesting depth %d exceeds limit; keeping body as text", depth)
            return (String(text),)
        return tuple(Parser(text, depth=depth).parse_inlines())
