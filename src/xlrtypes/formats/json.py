"""XLR JSON text format."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from xlrtypes.codecs import from_builtins, to_builtins

if TYPE_CHECKING:
    from xlrtypes.types import NodeType


def to_json(
    node: NodeType,
    *,
    indent: int | None = 2,
    sort_keys: bool = False,
) -> str:
    """Write a type node as XLR JSON.

    Args:
        node: The type node to write
        indent: Indentation level, None for a single line
        sort_keys: Sort object keys, giving byte-stable output for equal nodes
            regardless of property insertion order

    """
    return json.dumps(to_builtins(node), indent=indent, sort_keys=sort_keys)


def from_json(s: str | bytes) -> NodeType:
    """Read a type node from XLR JSON text.

    Raises:
        ValueError: If the text is not a JSON object describing a type node
        KeyError: If the top-level object has no 'type' key

    """
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = "Expected JSON object with 'type' field"
        raise ValueError(msg)
    return from_builtins(data)
