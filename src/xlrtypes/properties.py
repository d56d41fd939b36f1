"""Helpers for property nodes of a parsed JSON syntax tree.

The parser itself is external. Anything exposing ``value`` and an ordered
``children`` sequence is accepted; :class:`JSONNode` is a plain record with
the shape jsonc-style parsers produce.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal, Protocol

_PROPERTY_CHILDREN = 2  # key, value


class SyntaxNode(Protocol):
    """Read-only view of a parser node."""

    @property
    def value(self) -> Any: ...

    @property
    def children(self) -> Sequence[SyntaxNode] | None: ...


@dataclass(frozen=True)
class JSONNode:
    """Node of a JSON syntax tree.

    Attributes:
        type: Kind of node (``object``, ``property``, ``string``, ...)
        value: Literal value for leaves, None for containers
        children: Child nodes; a property has exactly two (key, value)
        offset: Start offset in the source text
        length: Length of the node in the source text

    """

    type: Literal["object", "array", "property", "string", "number", "boolean", "null"]
    value: Any = None
    children: tuple[JSONNode, ...] | None = None
    offset: int = 0
    length: int = 0


@dataclass(frozen=True)
class PropertyNode:
    """Key/value pair extracted from a property node."""

    key: str
    value: SyntaxNode


def property_to_tuple(node: SyntaxNode) -> PropertyNode:
    """Split a property node into its key and value node.

    Keys containing a hyphen are wrapped in single quotes, since they are not
    valid bare identifiers and must be accessed with bracket syntax.

    Raises:
        ValueError: If the node does not have a key and a value child

    """
    children = node.children
    if children is None or len(children) < _PROPERTY_CHILDREN:
        msg = "Property node must have a key child and a value child"
        raise ValueError(msg)

    key = str(children[0].value)
    if "-" in key:
        key = f"'{key}'"

    return PropertyNode(key=key, value=children[1])


def make_property_map(node: SyntaxNode) -> dict[str, SyntaxNode]:
    """Map each property key of ``node`` to its value node.

    Later duplicates of a key replace earlier ones.
    """
    properties: dict[str, SyntaxNode] = {}
    for child in node.children or ():
        prop = property_to_tuple(child)
        properties[prop.key] = prop.value
    return properties
