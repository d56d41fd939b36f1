"""Generic token substitution over XLR type trees."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import assert_never

from xlrtypes.predicates import is_generic_node_type
from xlrtypes.types import (
    AndType,
    AnyType,
    ArrayType,
    BooleanType,
    ConditionalCheck,
    ConditionalType,
    ConditionalValue,
    NeverType,
    NodeType,
    NullType,
    NumberType,
    ObjectProperty,
    ObjectType,
    OrType,
    RecordType,
    RefType,
    StringType,
    UndefinedType,
    UnknownType,
    VoidType,
)

logger = logging.getLogger(__name__)

# Deeper trees are returned unchanged below this many levels of nesting.
MAX_SUBSTITUTION_DEPTH = 200


def default_generic_map(node: NodeType) -> dict[str, NodeType]:
    """Bind each of ``node``'s tokens to its default, constraint, or ``any``."""
    generic_map: dict[str, NodeType] = {}
    for token in node.generic_tokens:
        if token.default is not None:
            generic_map[token.symbol] = token.default
        elif token.constraints is not None:
            generic_map[token.symbol] = token.constraints
        else:
            generic_map[token.symbol] = AnyType()
    return generic_map


def fill_in_generics(
    node: NodeType,
    generic_map: Mapping[str, NodeType] | None = None,
    *,
    max_depth: int = MAX_SUBSTITUTION_DEPTH,
) -> NodeType:
    """Replace references to generic symbols with their bound types.

    Args:
        node: Type tree to rewrite
        generic_map: Symbol to bound type. When omitted, the node's own tokens
            are bound to their defaults (see :func:`default_generic_map`).
        max_depth: Nesting level below which subtrees are left untouched

    Returns:
        A new type tree. Symbols absent from the map stay as references, and
        conditionals whose operands become concrete are resolved.

    """
    if generic_map is None:
        generic_map = default_generic_map(node)
    return _Filler(generic_map, max_depth).fill(node, frozenset(), 0)


def fill_conditional_branch(
    conditional: ConditionalType,
    branch: NodeType,
    *,
    path: frozenset[int] = frozenset(),
    depth: int = 0,
    max_depth: int = MAX_SUBSTITUTION_DEPTH,
) -> NodeType:
    """Fill the conditional's own token defaults into its selected branch.

    ``path`` and ``depth`` continue the guard state of an enclosing fill, so a
    branch that leads back to the conditional is not expanded again.
    """
    return _Filler(default_generic_map(conditional), max_depth).fill(
        branch, path | {id(conditional)}, depth
    )


class _Filler:
    """Recursive rewrite with a path-identity and depth guard."""

    def __init__(self, generic_map: Mapping[str, NodeType], max_depth: int) -> None:
        self.generic_map = generic_map
        self.max_depth = max_depth

    def fill(self, node: NodeType, path: frozenset[int], depth: int) -> NodeType:
        if id(node) in path:
            logger.debug("Self-referential %s left unexpanded", node.tag)
            return node
        if depth > self.max_depth:
            logger.debug(
                "Substitution depth %d exceeded at %s", self.max_depth, node.tag
            )
            return node

        path = path | {id(node)}
        depth += 1

        def sub(child: NodeType) -> NodeType:
            return self.fill(child, path, depth)

        match node:
            case RefType(ref=ref) if ref in self.generic_map:
                return self.generic_map[ref]
            case RefType(generic_arguments=args) if args:
                return replace(node, generic_arguments=tuple(sub(a) for a in args))
            case RefType():
                return node
            case ObjectType(properties=properties, additional_properties=extra):
                return replace(
                    node,
                    properties={
                        key: ObjectProperty(node=sub(prop.node), required=prop.required)
                        for key, prop in properties.items()
                    },
                    additional_properties=sub(extra) if extra is not False else False,
                )
            case ArrayType(element_type=element):
                return replace(node, element_type=sub(element))
            case RecordType(key_type=key, value_type=value):
                return replace(node, key_type=sub(key), value_type=sub(value))
            case AndType(and_types=members):
                return replace(node, and_types=tuple(sub(m) for m in members))
            case OrType(or_types=members):
                return replace(node, or_types=tuple(sub(m) for m in members))
            case ConditionalType(check=check, value=value):
                filled = replace(
                    node,
                    check=ConditionalCheck(
                        left=sub(check.left),
                        right=sub(check.right),
                    ),
                    value=ConditionalValue(
                        true_type=sub(value.true_type),
                        false_type=sub(value.false_type),
                    ),
                )
                from xlrtypes.conditional import select_branch  # noqa: PLC0415

                branch = select_branch(filled)
                if branch is None:
                    return filled
                if not is_generic_node_type(filled):
                    return branch
                return fill_conditional_branch(
                    filled, branch, path=path, depth=depth, max_depth=self.max_depth
                )
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
                return node
            case _:
                assert_never(node)
