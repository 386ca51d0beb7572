# instance_describer/core/domain/values.py
"""
Dynamic values read from a node.

Properties and attributes on a host node are untyped. Before comparing an
expected value with the value found on a node we tag both with a Luau-style
runtime type name, so a mismatch can be reported either as a *type*
mismatch ("number" vs "string") or as a *value* mismatch (5 vs 3).

Tags:

    None              -> "nil"
    bool              -> "boolean"
    int / float       -> "number"
    str               -> "string"
    enum.Enum member  -> "EnumItem"
    dict / list / ... -> "table"
    anything else     -> the Python class name (e.g. "Vector3", "Color3")
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Optional

NIL = "nil"
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
ENUM_ITEM = "EnumItem"
TABLE = "table"


def typeof(value: Any) -> str:
    """Return the runtime type tag of ``value``."""
    if value is None:
        return NIL
    # IntEnum and str-mixin members are still enum items
    if isinstance(value, Enum):
        return ENUM_ITEM
    # bool is a subclass of int; test it first
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, Real):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, (dict, list, tuple)):
        return TABLE
    return type(value).__name__


def format_value(value: Any) -> str:
    """Stringify a value for a failure reason."""
    if value is None:
        return NIL
    if isinstance(value, Enum):
        return f"Enum.{type(value).__name__}.{value.name}"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


@dataclass(frozen=True)
class DynamicValue:
    """A payload paired with its runtime type tag."""

    tag: str
    payload: Any

    @classmethod
    def of(cls, value: Any) -> "DynamicValue":
        return cls(tag=typeof(value), payload=value)

    def same_type(self, other: "DynamicValue") -> bool:
        return self.tag == other.tag

    def same_value(self, other: "DynamicValue") -> bool:
        return self.same_type(other) and self.payload == other.payload

    def __str__(self) -> str:
        return format_value(self.payload)


def mismatch_reason(label: str, name: str, expected: Any, actual: Any) -> Optional[str]:
    """
    Compare an expected value against the value found on a node.

    Returns None when they match, otherwise a reason naming either both
    types (tags differ) or both values (tags equal, payloads differ).
    ``label`` is "attribute" or "property".
    """
    want = DynamicValue.of(expected)
    got = DynamicValue.of(actual)

    if not want.same_type(got):
        return f'Expected {label} "{name}" to be of type "{want.tag}", got "{got.tag}"'

    if not want.same_value(got):
        return f'Expected {label} "{name}" to equal {want}, got {got}'

    return None
