"""Error types raised by xlrtypes."""

from __future__ import annotations

from dataclasses import dataclass


class XLRError(Exception):
    """Base class for xlrtypes errors."""


@dataclass
class MergeConflictError(XLRError):
    """Two object types declare the same property with different types."""

    base_name: str
    operand_name: str
    property_name: str

    def __str__(self) -> str:
        return (
            f"Can't compute effective type for {self.base_name} and "
            f"{self.operand_name} because of conflicting properties "
            f"{self.property_name}"
        )
