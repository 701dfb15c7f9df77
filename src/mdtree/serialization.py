"""AST serialization: JSON round-trip for mdtree nodes.

Converts typed AST nodes to/from JSON-compatible dicts, for caching parsed
documents or handing them to tools written in other languages.

All output is deterministic (sorted keys) so equal trees give equal JSON.

Example:
    from mdtree import parse
    from mdtree.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

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

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        CodeBlock,
        Blockquote,
        OrderedList,
        UnorderedList,
        ThematicBreak,
        String,
        Emphasis,
        Strong,
        Strikethrough,
        CodeInline,
        Link,
        Image,
        Newline,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. List items
    (tuples of inline nodes) become nested lists.

    Args:
        node: Any mdtree AST node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or the fields do not
            fit the node class.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs = {f.name: _deserialize_value(data[f.name]) for f in fields(node_cls) if f.name in data}
    try:
        return node_cls(**kwargs)
    except TypeError as exc:
        msg = f"Invalid fields for {type_name}: {exc}"
        raise ValueError(msg) from exc


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document AST to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document AST from a JSON string.

    Raises:
        ValueError: If the JSON is malformed or doesn't represent a Document.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
