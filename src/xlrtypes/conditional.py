"""Evaluation of conditional types with primitive operands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from xlrtypes.display import format_node_type
from xlrtypes.generics import fill_conditional_branch
from xlrtypes.predicates import is_generic_node_type, is_primitive_type_node

if TYPE_CHECKING:
    from xlrtypes.types import ConditionalType, NodeType, PrimitiveType

logger = logging.getLogger(__name__)

_TOP_TAGS = frozenset({"any", "unknown"})
_EMPTY_TAGS = frozenset({"null", "undefined"})


def extends(left: PrimitiveType, right: PrimitiveType) -> bool:
    """Decide ``left extends right`` for two primitive types.

    ``any``/``unknown`` are interchangeable, as are ``null``/``undefined``.
    Otherwise the tags must match, and when both sides are literals their
    values must match too.
    """
    if left.tag in _TOP_TAGS and right.tag in _TOP_TAGS:
        return True
    if left.tag in _EMPTY_TAGS and right.tag in _EMPTY_TAGS:
        return True
    if left.tag != right.tag:
        return False
    if left.const is not None and right.const is not None:
        return left.const == right.const
    return True


def select_branch(conditional: ConditionalType) -> NodeType | None:
    """Pick the branch the check operands lead to, or None if undecidable."""
    left, right = conditional.check.left, conditional.check.right
    if not (is_primitive_type_node(left) and is_primitive_type_node(right)):
        return None
    if extends(left, right):
        return conditional.value.true_type
    return conditional.value.false_type


def resolve_conditional(conditional: ConditionalType) -> NodeType:
    """Select the branch of ``conditional`` its check operands lead to.

    Returns the conditional unchanged when either operand is not a primitive,
    since the check can't be decided until both are known. Generic tokens
    declared on the conditional itself are filled into the selected branch.
    """
    result = select_branch(conditional)
    if result is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Deferring conditional %s", format_node_type(conditional))
        return conditional

    if is_generic_node_type(conditional):
        return fill_conditional_branch(conditional, result)

    return result
