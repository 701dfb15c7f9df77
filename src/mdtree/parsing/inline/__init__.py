"""Inline parsing subsystem for mdtree.

Provides mixins for parsing inline Markdown content:
- Strikethrough (~~, --)
- Emphasis and strong (*, _, **, __)
- Inline code (`) and fenced code (```)
- Images and links
- Blockquotes at the start of a line
- Plain text (fallback)

"""

from __future__ import annotations

from mdtree.parsing.inline.code import CodeParsingMixin
from mdtree.parsing.inline.core import InlineParsingCoreMixin, fold_lines, strip_run_tail
from mdtree.parsing.inline.emphasis import EmphasisMixin
from mdtree.parsing.inline.links import LinkParsingMixin, split_destination
from mdtree.parsing.inline.quote import QuoteParsingMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    CodeParsingMixin,
    LinkParsingMixin,
    QuoteParsingMixin,
):
    """Combined inline parsing mixin.

    Required Host Attributes:
        - _cursor: Cursor
        - _config: ParseConfig

    Required Host Methods:
        - _parse_nested(text) -> tuple[Inline, ...]

    """

    pass


__all__ = [
    "CodeParsingMixin",
    "EmphasisMixin",
    "InlineParsingCoreMixin",
    "InlineParsingMixin",
    "LinkParsingMixin",
    "QuoteParsingMixin",
    "fold_lines",
    "split_destination",
    "strip_run_tail",
]
