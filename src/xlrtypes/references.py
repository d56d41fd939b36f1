"""Instantiation of generic references."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from xlrtypes.generics import fill_in_generics
from xlrtypes.predicates import is_generic_node_type, is_object_type
from xlrtypes.types import UndefinedType

if TYPE_CHECKING:
    from xlrtypes.types import NodeType, RefType


def resolve_reference_node(reference: RefType, target: NodeType) -> NodeType:
    """Instantiate ``target`` with the generic arguments of ``reference``.

    Arguments bind to the target's tokens by position. A token without an
    argument falls back to its default, then its constraint, and stays
    unbound when it has neither. Consumed tokens are removed from the result:
    the first N when N arguments are given for more tokens, all of them when
    the counts match.

    When ``reference`` indexes a property (``Ref<Args>['key']``) and the result
    is an object, the property's type is returned instead, falling back to the
    object's additional properties and finally to ``undefined``.

    Args:
        reference: The reference at the use site
        target: The type ``reference.ref`` names

    Returns:
        The instantiated type, or the indexed property type

    """
    args = reference.generic_arguments
    generic_map: dict[str, NodeType] = {}

    if args is not None and is_generic_node_type(target):
        for index, token in enumerate(target.generic_tokens):
            if index < len(args):
                generic_map[token.symbol] = args[index]
            elif token.default is not None:
                generic_map[token.symbol] = token.default
            elif token.constraints is not None:
                generic_map[token.symbol] = token.constraints

    filled = fill_in_generics(target, generic_map)

    if args and is_generic_node_type(filled):
        if len(args) < len(filled.generic_tokens):
            filled = replace(filled, generic_tokens=filled.generic_tokens[len(args) :])
        elif len(args) == len(filled.generic_tokens):
            filled = replace(filled, generic_tokens=())

    if reference.property_name is not None and is_object_type(filled):
        prop = filled.properties.get(reference.property_name)
        if prop is not None:
            return prop.node
        if filled.additional_properties is not False:
            return filled.additional_properties
        return UndefinedType()

    return filled
