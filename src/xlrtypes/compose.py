"""Composition of object types."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Literal

from xlrtypes.errors import MergeConflictError
from xlrtypes.types import AndType

if TYPE_CHECKING:
    from xlrtypes.types import NodeType, ObjectProperty, ObjectType

logger = logging.getLogger(__name__)

_DEFAULT_OBJECT_NAME = "object literal"


def compute_effective_object(
    base: ObjectType,
    operand: ObjectType,
    error_on_overlap: bool = True,  # noqa: FBT001, FBT002
) -> ObjectType:
    """Compute the effective type of ``base`` extending ``operand``.

    Properties of ``operand`` override same-named properties of ``base``.
    Additional-property constraints declared on both sides are intersected.
    Generic tokens of both sides are concatenated, base first, without
    removing duplicate symbols.

    Args:
        base: The base interface
        operand: The interface that is extended
        error_on_overlap: Whether a property declared with different types on
            both sides raises, or silently takes the type from ``operand``

    Returns:
        A new object type; neither input is modified

    Raises:
        MergeConflictError: If ``error_on_overlap`` is set and a shared
            property has different types on the two sides

    """
    base_name = base.name if base.name is not None else _DEFAULT_OBJECT_NAME
    operand_name = operand.name if operand.name is not None else _DEFAULT_OBJECT_NAME

    properties: dict[str, ObjectProperty] = dict(base.properties)
    for key, prop in operand.properties.items():
        existing = properties.get(key)
        if existing is not None and existing.node.tag != prop.node.tag:
            if error_on_overlap:
                raise MergeConflictError(base_name, operand_name, key)
            logger.debug(
                "Property %s overridden from %s to %s",
                key,
                existing.node.tag,
                prop.node.tag,
            )
        properties[key] = prop

    base_extra = base.additional_properties
    operand_extra = operand.additional_properties
    additional_properties: NodeType | Literal[False] = base_extra
    if base_extra is not False and operand_extra is not False:
        additional_properties = AndType(and_types=(base_extra, operand_extra))
    elif operand_extra is not False:
        additional_properties = operand_extra

    return replace(
        base,
        name=f"{base_name} & {operand_name}",
        description=f"Effective type combining {base_name} and {operand_name}",
        generic_tokens=base.generic_tokens + operand.generic_tokens,
        properties=properties,
        additional_properties=additional_properties,
    )
