"""Text formats for XLR type nodes.

Each format module provides to_<format> and from_<format> functions built on
the to_builtins/from_builtins conversion.
"""

from xlrtypes.formats.json import from_json, to_json

__all__ = ["from_json", "to_json"]
