"""Typed AST nodes for mdtree.

All AST nodes are frozen dataclasses with slots for:
- Immutability: a node never changes after the parser builds it
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: ``match`` statements work naturally

Node Hierarchy:
Node (base)
├── Document (root returned by mdtree.parse)
├── Block
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── Blockquote
│   ├── OrderedList
│   ├── UnorderedList
│   └── ThematicBreak
└── Inline
    ├── String
    ├── Emphasis
    ├── Strong
    ├── Strikethrough
    ├── CodeInline
    ├── CodeBlock (``` inside running text)
    ├── Link
    ├── Image
    ├── Blockquote (> at the start of a continuation line)
    └── Newline

Span nodes (Emphasis, Strong, Strikethrough) carry their raw text rather than
nested children: markers inside a span are not re-interpreted.

"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class String(Node):
    """Literal text run with no special meaning."""

    text: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized text.

    Markdown: *text* or _text_

    """

    text: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong text.

    Markdown: **text** or __text__

    """

    text: str


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Struck-through text.

    Markdown: ~~text~~ or --text--

    """

    text: str


@dataclass(frozen=True, slots=True)
class CodeInline(Node):
    """Inline code, content taken verbatim.

    Markdown: `code`

    """

    content: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [label](url) or [label](url "title")

    """

    label: str
    url: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url) or ![alt](url "title")

    """

    alt: str
    url: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Newline(Node):
    """Explicit line break.

    Markdown: two trailing spaces or a trailing backslash before a newline

    """


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """``#``-prefixed heading. Level is the number of ``#`` characters."""

    children: tuple[Inline, ...]
    level: int


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Inline content terminated by a blank line."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Markdown:
        ```rust
        fn main() {}
        ```

    The language is the first word of the opening fence line, or None.

    """

    content: str
    language: str | None = None


@dataclass(frozen=True, slots=True)
class Blockquote(Node):
    """``>``-prefixed line; its text is parsed by a nested parser."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class OrderedList(Node):
    """Numbered list. Each item is an independently parsed inline sequence."""

    items: tuple[tuple[Inline, ...], ...]
    start: int = 1


@dataclass(frozen=True, slots=True)
class UnorderedList(Node):
    """Bulleted list. Each item is an independently parsed inline sequence."""

    items: tuple[tuple[Inline, ...], ...]


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Horizontal rule.

    Markdown: ---, *** or ___ on a line of their own

    """


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node wrapping the top-level block sequence."""

    children: tuple[Block, ...]


type Inline = (
    String
    | Emphasis
    | Strong
    | Strikethrough
    | CodeInline
    | CodeBlock
    | Link
    | Image
    | Blockquote
    | Newline
)

type Block = (
    Heading
    | Paragraph
    | CodeBlock
    | Blockquote
    | OrderedList
    | UnorderedList
    | ThematicBreak
)

# Leaf nodes whose text comes straight from the source
TEXT_NODES: tuple[type[Node], ...] = (String, Emphasis, Strong, Strikethrough)


__all__ = [
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
    "TEXT_NODES",
    "ThematicBreak",
    "UnorderedList",
]
