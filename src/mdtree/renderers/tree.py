"""Debug renderer that prints the AST as an indented tree.

Example:
    >>> from mdtree import parse
    >>> print(TreeRenderer().render(parse("- *a*\\n- b")), end="")
    UnorderedList
      item 1
        Emphasis(text='a')
      item 2
        String(text='b')
"""

from collections.abc import Sequence
from dataclasses import fields

from mdtree.errors import RenderError
from mdtree.nodes import Document, Node
from mdtree.renderers.protocol import top_level
from mdtree.stringbuilder import StringBuilder


class TreeRenderer:
    """Render AST as one line per node, children indented under parents."""

    __slots__ = ("_indent",)

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = " " * indent

    def render(self, node: Document | Sequence[Node]) -> str:
        sb = StringBuilder()
        for child in top_level(node):
            self._render_node(child, 0, sb)
        return sb.build()

    def _render_node(self, node: Node, depth: int, sb: StringBuilder) -> None:
        if not isinstance(node, Node):
            raise RenderError(f"Not an AST node: {node!r}")
        pad = self._indent * depth
        scalars = [
            f"{f.name}={getattr(node, f.name)!r}"
            for f in fields(node)
            if f.name not in ("children", "items")
        ]
        label = type(node).__name__
        if scalars:
            label += "(" + ", ".join(scalars) + ")"
        sb.append_line(pad + label)

        children = getattr(node, "children", ())
        for child in children:
            self._render_node(child, depth + 1, sb)
        for i, item in enumerate(getattr(node, "items", ()), start=1):
            sb.append_line(f"{pad}{self._indent}item {i}")
            for child in item:
                self._render_node(child, depth + 2, sb)
