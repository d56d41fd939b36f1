"""xlrtypes - Resolution and composition of XLR structural types."""

from xlrtypes.codecs import (
    from_builtins,
    to_builtins,
)
from xlrtypes.compose import compute_effective_object
from xlrtypes.conditional import extends, resolve_conditional
from xlrtypes.display import format_node_type
from xlrtypes.errors import MergeConflictError, XLRError
from xlrtypes.formats.json import (
    from_json,
    to_json,
)
from xlrtypes.generics import (
    MAX_SUBSTITUTION_DEPTH,
    default_generic_map,
    fill_in_generics,
)
from xlrtypes.predicates import (
    is_generic_node_type,
    is_object_type,
    is_primitive_type_node,
)
from xlrtypes.properties import (
    JSONNode,
    PropertyNode,
    SyntaxNode,
    make_property_map,
    property_to_tuple,
)
from xlrtypes.references import resolve_reference_node
from xlrtypes.types import (
    AndType,
    AnyType,
    ArrayType,
    BaseType,
    BooleanType,
    ConditionalCheck,
    ConditionalType,
    ConditionalValue,
    GenericToken,
    NeverType,
    NodeType,
    NullType,
    NumberType,
    ObjectProperty,
    ObjectType,
    OrType,
    PrimitiveType,
    RecordType,
    RefType,
    StringType,
    UndefinedType,
    UnknownType,
    VoidType,
)

__all__ = [
    "MAX_SUBSTITUTION_DEPTH",
    # Type model
    "AndType",
    "AnyType",
    "ArrayType",
    "BaseType",
    "BooleanType",
    "ConditionalCheck",
    "ConditionalType",
    "ConditionalValue",
    "GenericToken",
    # Syntax nodes
    "JSONNode",
    # Errors
    "MergeConflictError",
    "NeverType",
    "NodeType",
    "NullType",
    "NumberType",
    "ObjectProperty",
    "ObjectType",
    "OrType",
    "PrimitiveType",
    "PropertyNode",
    "RecordType",
    "RefType",
    "StringType",
    "SyntaxNode",
    "UndefinedType",
    "UnknownType",
    "VoidType",
    "XLRError",
    # Resolution
    "compute_effective_object",
    "default_generic_map",
    "extends",
    "fill_in_generics",
    "format_node_type",
    # Serialization
    "from_builtins",
    "from_json",
    "is_generic_node_type",
    "is_object_type",
    "is_primitive_type_node",
    "make_property_map",
    "property_to_tuple",
    "resolve_conditional",
    "resolve_reference_node",
    "to_builtins",
    "to_json",
]
