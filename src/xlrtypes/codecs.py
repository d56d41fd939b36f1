"""Conversion between XLR type nodes and JSON-compatible builtins.

The builtins form is the XLR wire shape: the variant tag lives under
``"type"``, field names are camelCase, a closed object carries
``"additionalProperties": false`` and unset optional fields are omitted.
An empty ``genericArguments`` list is kept, since it binds token defaults
where an absent one does not.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from xlrtypes.types import (
    BaseType,
    ConditionalCheck,
    ConditionalValue,
    GenericToken,
    NodeType,
    ObjectProperty,
    node_class,
)

_TAG_KEY = "type"

# Python field name -> wire key, where they differ
_WIRE_NAMES = {
    "generic_tokens": "genericTokens",
    "additional_properties": "additionalProperties",
    "generic_arguments": "genericArguments",
    "property_name": "property",
    "and_types": "and",
    "or_types": "or",
    "element_type": "elementType",
    "key_type": "keyType",
    "value_type": "valueType",
}

# Fields whose empty tuple means something different from an absent value
_KEEP_EMPTY = frozenset({"generic_arguments"})


def to_builtins(node: NodeType) -> dict[str, Any]:
    """Convert a type node to its JSON-compatible wire form."""
    result: dict[str, Any] = {_TAG_KEY: node.tag}
    for f in fields(node):
        value = getattr(node, f.name)
        if value is None or (value == () and f.name not in _KEEP_EMPTY):
            continue
        result[_WIRE_NAMES.get(f.name, f.name)] = _encode_value(value)
    return result


def _encode_value(value: Any) -> Any:
    match value:
        case BaseType():
            return to_builtins(value)
        case ObjectProperty(node=node, required=required):
            return {"required": required, "node": to_builtins(node)}
        case GenericToken(symbol=symbol, constraints=constraints, default=default):
            token: dict[str, Any] = {"symbol": symbol}
            if constraints is not None:
                token["constraints"] = to_builtins(constraints)
            if default is not None:
                token["default"] = to_builtins(default)
            return token
        case ConditionalCheck(left=left, right=right):
            return {"left": to_builtins(left), "right": to_builtins(right)}
        case ConditionalValue(true_type=true_type, false_type=false_type):
            return {"true": to_builtins(true_type), "false": to_builtins(false_type)}
        case tuple():
            return [_encode_value(item) for item in value]
        case Mapping():
            return {key: _encode_value(item) for key, item in value.items()}
        case _:
            # bool / str / number, including additionalProperties: false
            return value


def from_builtins(data: dict[str, Any]) -> NodeType:
    """Convert a wire-form dict back to a type node.

    Raises:
        KeyError: If the ``type`` key is missing
        ValueError: If the tag is unknown or the data is malformed

    """
    if _TAG_KEY not in data:
        msg = f"Missing required '{_TAG_KEY}' field"
        raise KeyError(msg)

    cls = node_class(data[_TAG_KEY])
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        key = _WIRE_NAMES.get(f.name, f.name)
        if key not in data:
            continue
        decode = _FIELD_DECODERS.get(f.name, _decode_plain)
        kwargs[f.name] = decode(data[key])

    try:
        return cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for '{cls.tag}' type: {e}"
        raise ValueError(msg) from e


def _decode_plain(raw: Any) -> Any:
    return raw


def _decode_node(raw: Any) -> NodeType:
    if not isinstance(raw, dict):
        msg = f"Expected a type node object, got {raw!r}"
        raise ValueError(msg)
    return from_builtins(raw)


def _decode_nodes(raw: Any) -> tuple[NodeType, ...]:
    return tuple(_decode_node(item) for item in raw)


def _decode_additional(raw: Any) -> Any:
    return False if raw is False else _decode_node(raw)


def _decode_properties(raw: Any) -> dict[str, ObjectProperty]:
    return {
        key: ObjectProperty(
            node=_decode_node(prop["node"]),
            required=bool(prop.get("required", False)),
        )
        for key, prop in raw.items()
    }


def _decode_tokens(raw: Any) -> tuple[GenericToken, ...]:
    return tuple(
        GenericToken(
            symbol=token["symbol"],
            constraints=(
                _decode_node(token["constraints"]) if "constraints" in token else None
            ),
            default=_decode_node(token["default"]) if "default" in token else None,
        )
        for token in raw
    )


def _decode_check(raw: Any) -> ConditionalCheck:
    return ConditionalCheck(
        left=_decode_node(raw["left"]),
        right=_decode_node(raw["right"]),
    )


def _decode_branches(raw: Any) -> ConditionalValue:
    return ConditionalValue(
        true_type=_decode_node(raw["true"]),
        false_type=_decode_node(raw["false"]),
    )


_FIELD_DECODERS = {
    "generic_tokens": _decode_tokens,
    "properties": _decode_properties,
    "additional_properties": _decode_additional,
    "generic_arguments": _decode_nodes,
    "and_types": _decode_nodes,
    "or_types": _decode_nodes,
    "element_type": _decode_node,
    "key_type": _decode_node,
    "value_type": _decode_node,
    "check": _decode_check,
    "value": _decode_branches,
}
