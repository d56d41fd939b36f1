"""Capability checks over XLR type nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeGuard

from xlrtypes.types import ObjectType, PrimitiveType

if TYPE_CHECKING:
    from xlrtypes.types import NodeType


def is_primitive_type_node(node: NodeType) -> TypeGuard[PrimitiveType]:
    """Check whether ``node`` belongs to the primitive family."""
    return isinstance(node, PrimitiveType)


def is_generic_node_type(node: NodeType) -> bool:
    """Check whether ``node`` declares at least one generic token."""
    return bool(node.generic_tokens)


def is_object_type(node: NodeType) -> TypeGuard[ObjectType]:
    """Check whether ``node`` is an object shape."""
    return isinstance(node, ObjectType)
