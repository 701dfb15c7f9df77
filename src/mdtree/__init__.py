"""
mdtree: recursive-descent Markdown parser producing a typed AST.

Reads Markdown text and returns an ordered tree of immutable nodes
(headings, paragraphs, emphasis, code, links, images, blockquotes, lists).
Parsing never fails on text input: unclosed markers degrade to the end of
their block and malformed links fall back to plain text.

Quick Start:
    >>> from mdtree import parse, render_text
    >>> doc = parse("# Hello, **World**!")
    >>> doc.children[0]
    Heading(children=(String(text='Hello, '), Strong(text='World'), String(text='!')), level=1)
    >>> render_text(doc)
    'Hello, World!\\n=============\\n'

    >>> # Or use the high-level Markdown class
    >>> from mdtree import Markdown, ParseConfig
    >>> md = Markdown(config=ParseConfig(dash_strikethrough=False))
    >>> md("--not struck--")
    '--not struck--\\n'

Installation:
    pip install mdtree              # zero runtime dependencies
    pip install mdtree[test]        # + pytest and hypothesis
"""

from collections.abc import Iterable, Sequence

from mdtree.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from mdtree.cursor import Cursor
from mdtree.errors import ConfigError, MdtreeError, ParseError, RenderError
from mdtree.nodes import (
    Block,
    Blockquote,
    CodeBlock,
    CodeInline,
    Document,
    Emphasis,
    Heading,
    Image,
    Inline,
    Link,
    Newline,
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    String,
    Strong,
    ThematicBreak,
    UnorderedList,
)
from mdtree.parser import Parser
from mdtree.renderers import ASTRenderer, TextRenderer, TreeRenderer
from mdtree.serialization import from_dict, from_json, to_dict, to_json
from mdtree.tokens import MARKDOWN_TOKENS, TokenKind
from mdtree.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse_blocks(source: str | bytes, *, config: ParseConfig | None = None) -> list[Block]:
    """Parse Markdown source into its top-level blocks.

    Args:
        source: Markdown source (str, or UTF-8 encoded bytes)
        config: Parse configuration for this call; when None the config of
            the current context is used

    Returns:
        List of Block nodes in document order (empty for empty input)

    Raises:
        ParseError: source is neither str nor valid UTF-8 bytes

    """
    if config is None:
        return Parser(source).parse()
    with parse_config_context(config):
        return Parser(source).parse()


def parse(source: str | bytes, *, config: ParseConfig | None = None) -> Document:
    """Parse Markdown source into a Document.

    Example:
        >>> parse("- a\\n- b").children
        (UnorderedList(items=((String(text='a'),), (String(text='b'),))),)
    """
    return Document(tuple(parse_blocks(source, config=config)))


def render_text(doc: Document | Sequence[Node]) -> str:
    """Render an AST as plain terminal text."""
    return TextRenderer().render(doc)


def render_tree(doc: Document | Sequence[Node]) -> str:
    """Render an AST as an indented debug tree."""
    return TreeRenderer().render(doc)


class Markdown:
    """High-level Markdown processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("Some *emphasis* here")
        'Some emphasis here\\n'

        >>> doc = md.parse("## Heading")
        >>> doc.children[0].level
        2

    Thread Safety:
        Config is applied via ContextVar for the duration of each call, so
        several Markdown instances may be used concurrently from different
        threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        config: ParseConfig | None = None,
        renderer: ASTRenderer | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            config: Parse configuration (defaults to ``ParseConfig()``)
            renderer: Renderer used by ``__call__``/``render`` (defaults to
                ``TextRenderer()``)
        """
        self._config = config or ParseConfig()
        self._renderer = renderer or TextRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str | bytes) -> str:
        """Parse and render Markdown in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str | bytes) -> Document:
        """Parse Markdown source into a Document using this instance's config."""
        return parse(source, config=self._config)

    def parse_many(self, sources: Iterable[str | bytes]) -> list[Document]:
        """Parse multiple Markdown sources into Documents.

        Sets the config once for the whole batch.

        Example:
            >>> docs = Markdown().parse_many(["# Doc 1", "# Doc 2"])
            >>> len(docs)
            2
        """
        with parse_config_context(self._config):
            return [Document(tuple(Parser(source).parse())) for source in sources]

    def render(self, doc: Document | Sequence[Node]) -> str:
        """Render an already parsed AST with this instance's renderer."""
        return self._renderer.render(doc)


__all__ = [
    # Main API
    "Markdown",
    "parse",
    "parse_blocks",
    "render_text",
    "render_tree",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ConfigError",
    "MdtreeError",
    "ParseError",
    "RenderError",
    # Parser internals
    "Cursor",
    "MARKDOWN_TOKENS",
    "Parser",
    "TokenKind",
    # Nodes
    "Block",
    "Blockquote",
    "CodeBlock",
    "CodeInline",
    "Document",
    "Emphasis",
    "Heading",
    "Image",
    "Inline",
    "Link",
    "Newline",
    "Node",
    "OrderedList",
    "Paragraph",
    "Strikethrough",
    "String",
    "Strong",
    "ThematicBreak",
    "UnorderedList",
    # Renderers
    "ASTRenderer",
    "TextRenderer",
    "TreeRenderer",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Visitor
    "BaseVisitor",
    "transform",
]
