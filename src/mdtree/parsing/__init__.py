"""Parsing subsystem for the mdtree Markdown parser.

Provides mixin classes for modular parsing functionality:
- `InlineParsingMixin`: Inline content (emphasis, code, links, quotes, text)
- `BlockParsingMixin`: Block-level content (headings, lists, paragraphs)

Example:
    >>> from mdtree.parsing import BlockParsingMixin, InlineParsingMixin
    >>> class Parser(InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from mdtree.parsing.blocks import BlockParsingMixin
from mdtree.parsing.inline import InlineParsingMixin

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
]
