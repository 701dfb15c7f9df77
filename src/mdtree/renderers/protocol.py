"""ASTRenderer protocol: the interface between the parser and its renderers.

A renderer accepts the parsed node sequence (or the Document wrapping it)
and returns a string. Anything with a matching ``render`` method conforms.

Example:
    from mdtree.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from collections.abc import Sequence
from typing import Protocol

from mdtree.nodes import Document, Node


class ASTRenderer(Protocol):
    """Protocol for AST renderers."""

    def render(self, node: Document | Sequence[Node]) -> str:
        """Render a Document or a top-level node sequence to a string."""
        ...


def top_level(node: Document | Sequence[Node]) -> tuple[Node, ...]:
    """Normalize renderer input to the top-level node tuple."""
    if isinstance(node, Document):
        return node.children
    return tuple(node)
