# tests/test_values.py
from __future__ import annotations

from enum import Enum, IntEnum

import pytest

from instance_describer.core.domain.values import (
    DynamicValue,
    format_value,
    mismatch_reason,
    typeof,
)


class Material(Enum):
    Plastic = 256
    Neon = 288


class SurfaceType(IntEnum):
    Smooth = 0
    Studs = 3


class KeyCode(str, Enum):
    Space = "Space"


class Vector3:
    def __init__(self, x, y, z):
        self.x, self.y, self.z = x, y, z

    def __eq__(self, other):
        return isinstance(other, Vector3) and (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __str__(self):
        return f"{self.x}, {self.y}, {self.z}"


@pytest.mark.parametrize(
    "value, tag",
    [
        (None, "nil"),
        (True, "boolean"),
        (False, "boolean"),
        (0, "number"),
        (2.5, "number"),
        ("", "string"),
        (Material.Neon, "EnumItem"),
        ({"a": 1}, "table"),
        ([1, 2], "table"),
        (Vector3(0, 1, 0), "Vector3"),
    ],
)
def test_typeof(value, tag: str) -> None:
    assert typeof(value) == tag


@pytest.mark.parametrize(
    "value, text",
    [
        (None, "nil"),
        (True, "true"),
        (3.0, "3"),
        (0.25, "0.25"),
        ("Spawn", '"Spawn"'),
        (Material.Plastic, "Enum.Material.Plastic"),
        (Vector3(1, 2, 3), "1, 2, 3"),
    ],
)
def test_format_value(value, text: str) -> None:
    assert format_value(value) == text


def test_booleans_are_not_numbers() -> None:
    assert not DynamicValue.of(True).same_type(DynamicValue.of(1))
    assert mismatch_reason("attribute", "Flag", 1, True) == (
        'Expected attribute "Flag" to be of type "number", got "boolean"'
    )


def test_same_value_requires_same_type() -> None:
    assert DynamicValue.of(3).same_value(DynamicValue.of(3.0))
    assert not DynamicValue.of("3").same_value(DynamicValue.of(3))


def test_values_compare_by_equality_not_identity() -> None:
    assert mismatch_reason("property", "Position", Vector3(0, 5, 0), Vector3(0, 5, 0)) is None

    assert mismatch_reason("property", "Position", Vector3(0, 5, 0), Vector3(0, 6, 0)) == (
        'Expected property "Position" to equal 0, 5, 0, got 0, 6, 0'
    )


def test_enum_items_compare_by_member() -> None:
    assert mismatch_reason("property", "Material", Material.Plastic, Material.Plastic) is None
    assert mismatch_reason("property", "Material", Material.Plastic, Material.Neon) == (
        'Expected property "Material" to equal Enum.Material.Plastic, got Enum.Material.Neon'
    )


def test_nil_expected_against_present_value() -> None:
    assert mismatch_reason("attribute", "Owner", None, "Player1") == (
        'Expected attribute "Owner" to be of type "nil", got "string"'
    )


@pytest.mark.parametrize("item", [SurfaceType.Studs, SurfaceType.Smooth, KeyCode.Space])
def test_mixin_enum_members_are_enum_items(item) -> None:
    assert typeof(item) == "EnumItem"


def test_int_enum_items_do_not_match_bare_numbers() -> None:
    assert mismatch_reason("property", "TopSurface", SurfaceType.Studs, 3) == (
        'Expected property "TopSurface" to be of type "EnumItem", got "number"'
    )
    assert mismatch_reason("property", "TopSurface", SurfaceType.Studs, SurfaceType.Studs) is None


def test_mixin_enum_items_format_as_enum_paths() -> None:
    assert format_value(SurfaceType.Smooth) == "Enum.SurfaceType.Smooth"
    assert format_value(KeyCode.Space) == "Enum.KeyCode.Space"
