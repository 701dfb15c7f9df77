"""Block parsing subsystem for mdtree.

Provides mixins for parsing block-level Markdown content:
- Headings
- Fenced code blocks
- Blockquote lines
- Thematic breaks
- Ordered and unordered lists
- Paragraphs

Architecture:
- core: top-level block loop and line-oriented blocks
- list: list items and continuation lines

"""

from mdtree.parsing.blocks.core import BlockParsingCoreMixin
from mdtree.parsing.blocks.list import ListParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Required Host Attributes:
        - _cursor: Cursor

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]
        - _parse_nested(text) -> tuple[Inline, ...]
        - _try_code_block() -> CodeBlock | None
        - _try_blockquote() -> Blockquote | None

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListParsingMixin",
]
