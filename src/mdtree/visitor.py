"""AST Visitor and Transformer for mdtree.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen ASTs.

Example: collect all link targets:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.urls: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.urls.append(node.url)

    collector = LinkCollector()
    collector.visit(doc)

Example: drop every image:

    new_doc = transform(doc, lambda n: None if isinstance(n, Image) else n)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from mdtree.nodes import (
    Blockquote,
    CodeBlock,
    CodeInline,
    Document,
    Emphasis,
    Heading,
    Image,
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


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children (and the
    nodes of every list item) are walked automatically after the ``visit_*``
    call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without an overridden ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_blockquote(self, node: Blockquote) -> T:
        return self.visit_default(node)

    def visit_ordered_list(self, node: OrderedList) -> T:
        return self.visit_default(node)

    def visit_unordered_list(self, node: UnorderedList) -> T:
        return self.visit_default(node)

    def visit_thematic_break(self, node: ThematicBreak) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_string(self, node: String) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_strikethrough(self, node: Strikethrough) -> T:
        return self.visit_default(node)

    def visit_code_inline(self, node: CodeInline) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_newline(self, node: Newline) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case Blockquote():
                return self.visit_blockquote(node)
            case OrderedList():
                return self.visit_ordered_list(node)
            case UnorderedList():
                return self.visit_unordered_list(node)
            case ThematicBreak():
                return self.visit_thematic_break(node)
            case String():
                return self.visit_string(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case Strong():
                return self.visit_strong(node)
            case Strikethrough():
                return self.visit_strikethrough(node)
            case CodeInline():
                return self.visit_code_inline(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case Newline():
                return self.visit_newline(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Document(children=children) | Heading(children=children) | Paragraph(
                children=children
            ) | Blockquote(children=children):
                for child in children:
                    self.visit(child)
            case OrderedList(items=items) | UnorderedList(items=items):
                for item in items:
                    for child in item:
                        self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the AST, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent is transformed with its new children. Return ``None`` from ``fn``
    to remove a node. A list item whose nodes are all removed stays in the
    list as an empty item. The root Document cannot be removed; returning
    None (or a non-Document) for it raises TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove it.

    Returns:
        A new Document with the transformation applied. ``doc`` is untouched.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; removed nodes are filtered out."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(result for c in children if (result := _transform_node(c, fn)) is not None)

    match node:
        case Document(children=children) | Heading(children=children) | Paragraph(
            children=children
        ) | Blockquote(children=children):
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case OrderedList(items=items) | UnorderedList(items=items):
            new_items = tuple(_filtered(item) for item in items)
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case _:
            pass
    return node


__all__ = ["BaseVisitor", "transform"]
