"""Tree serialization: JSON round-trip for orgtree nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed documents to disk
- Handing trees to tools written in other languages
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from orgtree import parse
    from orgtree.serialization import to_json, from_json

    doc = parse("* Hello *World*")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from orgtree.nodes import (
    Bold,
    Code,
    Dashed,
    DefinitionList,
    DefinitionListElement,
    Directive,
    Document,
    Drawer,
    Header,
    HorizontalRule,
    InlineContainer,
    Italic,
    Link,
    List,
    ListElement,
    Node,
    Paragraph,
    Preformatted,
    Table,
    TableCell,
    TableRow,
    Text,
    TodoItem,
    Underline,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Header,
        TodoItem,
        Paragraph,
        Preformatted,
        List,
        DefinitionList,
        ListElement,
        DefinitionListElement,
        Table,
        TableRow,
        TableCell,
        Directive,
        Drawer,
        HorizontalRule,
        Text,
        Link,
        InlineContainer,
        Bold,
        Italic,
        Underline,
        Code,
        Dashed,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes.

    Args:
        node: Any orgtree node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, frozenset):
        return sorted(value)
    if isinstance(value, Mapping):
        return {key: _serialize_value(item) for key, item in value.items()}
    # Primitives: str, int, float, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the node class.
    Recursively deserializes child nodes.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        # Mapping fields (Document.options, directive_values) hold plain data.
        kwargs[f.name] = dict(raw) if isinstance(raw, dict) else _deserialize_value(raw)

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        if "_type" in value:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document node.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
