"""Plain-text renderer for terminals.

Strips Markdown markers and lays blocks out for reading in a terminal:
underlined top-level headings, bulleted/numbered list items, ``> `` quote
prefixes and indented code blocks. Output is not escaped in any way.

Example:
    >>> from mdtree import parse
    >>> TextRenderer().render(parse("# Title\\n\\nSome **bold** text"))
    'Title\\n=====\\n\\nSome bold text\\n'
"""

from collections.abc import Sequence

from mdtree.errors import RenderError
from mdtree.nodes import (
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
from mdtree.renderers.protocol import top_level
from mdtree.stringbuilder import StringBuilder

_UNDERLINES = {1: "=", 2: "-"}


class TextRenderer:
    """Render AST to plain terminal text.

    Consecutive blockquote lines stay together; every other pair of blocks
    is separated by a blank line.
    """

    __slots__ = ("_bullet", "_code_indent", "_rule_width")

    def __init__(self, *, bullet: str = "*", code_indent: int = 4, rule_width: int = 40) -> None:
        self._bullet = bullet
        self._code_indent = " " * code_indent
        self._rule_width = rule_width

    def render(self, node: Document | Sequence[Node]) -> str:
        """Render a Document or top-level node sequence."""
        sb = StringBuilder()
        previous: Node | None = None
        for block in top_level(node):
            if previous is not None:
                both_quotes = isinstance(previous, Blockquote) and isinstance(block, Blockquote)
                sb.append("\n" if both_quotes else "\n\n")
            sb.append(self._render_block(block))
            previous = block
        if sb:
            sb.append("\n")
        return sb.build()

    def _render_block(self, block: Node) -> str:
        match block:
            case Heading():
                text = self.render_inlines(block.children)
                underline = _UNDERLINES.get(block.level)
                if underline is None:
                    return text
                return f"{text}\n{underline * len(text)}"
            case Paragraph():
                return self.render_inlines(block.children)
            case CodeBlock():
                lines = block.content.rstrip("\n").split("\n")
                return "\n".join(self._code_indent + line if line else line for line in lines)
            case Blockquote():
                return "> " + self.render_inlines(block.children)
            case UnorderedList():
                return "\n".join(
                    f"{self._bullet} {self.render_inlines(item)}" for item in block.items
                )
            case OrderedList():
                return "\n".join(
                    f"{block.start + i}. {self.render_inlines(item)}"
                    for i, item in enumerate(block.items)
                )
            case ThematicBreak():
                return "-" * self._rule_width
            case _:
                raise RenderError(f"Cannot render {type(block).__name__} as a block")

    def render_inlines(self, inlines: Sequence[Inline]) -> str:
        """Render a sequence of inline nodes to a single string."""
        return "".join(self._render_inline(inline) for inline in inlines)

    def _render_inline(self, inline: Node) -> str:
        match inline:
            case String() | Emphasis() | Strong() | Strikethrough():
                return inline.text
            case CodeInline():
                return inline.content
            case CodeBlock():
                return inline.content
            case Link():
                if inline.label and inline.label != inline.url:
                    return f"{inline.label} ({inline.url})"
                return inline.url
            case Image():
                return f"[image: {inline.alt}]" if inline.alt else "[image]"
            case Newline():
                return "\n"
            case Blockquote():
                return "> " + self.render_inlines(inline.children)
            case _:
                raise RenderError(f"Cannot render {type(inline).__name__} inline")
