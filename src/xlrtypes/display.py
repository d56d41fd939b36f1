"""Human-readable rendering of XLR type nodes."""

from __future__ import annotations

import json
from typing import assert_never

from xlrtypes.types import (
    AndType,
    AnyType,
    ArrayType,
    BooleanType,
    ConditionalType,
    NeverType,
    NodeType,
    NullType,
    NumberType,
    ObjectType,
    OrType,
    RecordType,
    RefType,
    StringType,
    UndefinedType,
    UnknownType,
    VoidType,
)


def format_node_type(node: NodeType) -> str:
    """Format a type node in TypeScript-like syntax for diagnostics.

    Examples:
        >>> format_node_type(StringType(const="a"))
        '"a"'
        >>> format_node_type(RefType("Foo", generic_arguments=(NumberType(),)))
        'Foo<number>'

    """
    match node:
        case (
            AnyType()
            | UnknownType()
            | UndefinedType()
            | NullType()
            | VoidType()
            | NeverType()
            | StringType()
            | NumberType()
            | BooleanType()
        ):
            if node.const is not None:
                return json.dumps(node.const)
            return node.tag
        case RefType(ref=ref, generic_arguments=args, property_name=prop):
            text = ref
            if args:
                text += f"<{', '.join(format_node_type(a) for a in args)}>"
            if prop is not None:
                text += f"[{prop!r}]"
            return text
        case ObjectType(properties=properties, additional_properties=extra):
            members = [
                f"{key}{'' if prop.required else '?'}: {format_node_type(prop.node)}"
                for key, prop in properties.items()
            ]
            if extra is not False:
                members.append(f"[key: string]: {format_node_type(extra)}")
            if not members:
                return "{}"
            return "{ " + "; ".join(members) + " }"
        case ArrayType(element_type=element):
            return f"{_grouped(element)}[]"
        case RecordType(key_type=key, value_type=value):
            return f"Record<{format_node_type(key)}, {format_node_type(value)}>"
        case AndType(and_types=members):
            return " & ".join(_grouped(m) for m in members)
        case OrType(or_types=members):
            return " | ".join(_grouped(m) for m in members)
        case ConditionalType(check=check, value=value):
            return (
                f"{format_node_type(check.left)}"
                f" extends {format_node_type(check.right)}"
                f" ? {format_node_type(value.true_type)}"
                f" : {format_node_type(value.false_type)}"
            )
        case _:
            assert_never(node)


def _grouped(node: NodeType) -> str:
    """Format ``node``, parenthesized when it binds looser than its context."""
    text = format_node_type(node)
    if isinstance(node, AndType | OrType | ConditionalType):
        return f"({text})"
    return text
