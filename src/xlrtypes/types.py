"""XLR type node model.

Every variant is a frozen dataclass registered under the tag it carries in the
``type`` field of the JSON form. ``NodeType`` is the closed union of all
concrete variants.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import KW_ONLY, dataclass, field
from types import MappingProxyType
from typing import ClassVar, Literal, dataclass_transform


@dataclass(frozen=True)
class GenericToken:
    """Declared generic parameter: ``T extends constraints = default``."""

    symbol: str
    constraints: NodeType | None = None
    default: NodeType | None = None


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class BaseType:
    """Base for XLR type nodes."""

    tag: ClassVar[str]
    registry: ClassVar[dict[str, type[BaseType]]] = {}

    _: KW_ONLY
    generic_tokens: tuple[GenericToken, ...] = ()
    name: str | None = None
    title: str | None = None
    description: str | None = None

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Register subclass under its wire tag.

        Subclasses declared without a tag are intermediate bases and are not
        registered.
        """
        dataclass(frozen=True)(cls)
        if tag is None:
            return
        cls.tag = tag

        if (existing := BaseType.registry.get(cls.tag)) and existing is not cls:
            msg = (
                f"Tag '{cls.tag}' already registered to {existing}. "
                "Choose a different tag."
            )
            raise ValueError(msg)

        BaseType.registry[cls.tag] = cls


class PrimitiveType(BaseType):
    """Base for primitive types. ``const`` narrows to a single literal."""

    const: str | int | float | bool | None = None


class AnyType(PrimitiveType, tag="any"):
    """Top type, interchangeable with ``unknown`` in conditionals."""


class UnknownType(PrimitiveType, tag="unknown"):
    """Top type, interchangeable with ``any`` in conditionals."""


class UndefinedType(PrimitiveType, tag="undefined"):
    """Empty type, interchangeable with ``null`` in conditionals."""


class NullType(PrimitiveType, tag="null"):
    """Empty type, interchangeable with ``undefined`` in conditionals."""


class VoidType(PrimitiveType, tag="void"):
    """Absence of a value."""


class NeverType(PrimitiveType, tag="never"):
    """Uninhabited type."""


class StringType(PrimitiveType, tag="string"):
    """String type: ``string`` or ``"literal"``."""


class NumberType(PrimitiveType, tag="number"):
    """Number type: ``number`` or ``42``."""


class BooleanType(PrimitiveType, tag="boolean"):
    """Boolean type: ``boolean`` or ``true``."""


@dataclass(frozen=True)
class ObjectProperty:
    """Property descriptor of an object type."""

    node: NodeType
    required: bool = False


class ObjectType(BaseType, tag="object"):
    """Object shape.

    ``properties`` is copied on construction and exposed read-only, so neither
    the caller's mapping nor a later consumer can change it in place.
    ``additional_properties`` is ``False`` for a closed (or unconstrained)
    shape, otherwise the type every extra property must satisfy.
    """

    properties: Mapping[str, ObjectProperty] = field(default_factory=dict)
    additional_properties: NodeType | Literal[False] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __hash__(self) -> int:
        return hash(
            (
                self.tag,
                self.generic_tokens,
                self.name,
                self.title,
                self.description,
                frozenset(self.properties.items()),
                self.additional_properties,
            )
        )


class RefType(BaseType, tag="ref"):
    """Reference to a named type: ``Ref<Args>['property_name']``."""

    ref: str
    generic_arguments: tuple[NodeType, ...] | None = None
    property_name: str | None = None


@dataclass(frozen=True)
class ConditionalCheck:
    """Operands of ``left extends right``."""

    left: NodeType
    right: NodeType


@dataclass(frozen=True)
class ConditionalValue:
    """Branches selected by a conditional check."""

    true_type: NodeType
    false_type: NodeType


class ConditionalType(BaseType, tag="conditional"):
    """Conditional type: ``left extends right ? true_type : false_type``."""

    check: ConditionalCheck
    value: ConditionalValue


class AndType(BaseType, tag="and"):
    """Intersection: every member must hold."""

    and_types: tuple[NodeType, ...]


class OrType(BaseType, tag="or"):
    """Union: at least one member must hold."""

    or_types: tuple[NodeType, ...]


class ArrayType(BaseType, tag="array"):
    """Array type: ``T[]``."""

    element_type: NodeType


class RecordType(BaseType, tag="record"):
    """Record type: ``Record<K, V>``."""

    key_type: NodeType
    value_type: NodeType


type NodeType = (
    AnyType
    | UnknownType
    | UndefinedType
    | NullType
    | VoidType
    | NeverType
    | StringType
    | NumberType
    | BooleanType
    | ObjectType
    | RefType
    | ConditionalType
    | AndType
    | OrType
    | ArrayType
    | RecordType
)


def node_class(tag: str) -> type[BaseType]:
    """Look up the node class registered for ``tag``.

    Raises:
        ValueError: If no node class is registered under ``tag``

    """
    try:
        return BaseType.registry[tag]
    except KeyError:
        available = sorted(BaseType.registry)
        msg = f"Unknown type tag '{tag}'. Available tags: {available}"
        raise ValueError(msg) from None

