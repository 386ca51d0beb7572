# tests/adapters/test_object_host.py
from __future__ import annotations

import pytest

from instance_describer.adapters.hosts.object_host import ObjectInstanceHost
from instance_describer.adapters.tree import Instance
from instance_describer.core.domain import PropertyAccessError
from instance_describer.core.use_cases.describer_factory import DescriberFactory


class BareNode:
    """Only ClassName and plain attributes; no IsA, attributes or children."""

    ClassName = "Folder"
    Archivable = True


@pytest.fixture
def object_host() -> ObjectInstanceHost:
    return ObjectInstanceHost()


def test_missing_property_raises_property_access_error(object_host) -> None:
    with pytest.raises(PropertyAccessError) as exc_info:
        object_host.property_of(Instance("Part"), "CanCollide")

    error = exc_info.value
    assert error.class_name == "Part"
    assert error.property_name == "CanCollide"
    assert isinstance(error.cause, AttributeError)


def test_attributes_are_a_snapshot(object_host) -> None:
    part = Instance("Part", attributes={"Stage": 1})
    attributes = object_host.attributes_of(part)
    attributes["Stage"] = 2

    assert part.GetAttribute("Stage") == 1


def test_bare_objects_fall_back_to_safe_defaults(object_host) -> None:
    node = BareNode()

    assert object_host.class_name_of(node) == "Folder"
    assert object_host.is_a(node, "Folder")
    assert not object_host.is_a(node, "Instance")
    assert object_host.attributes_of(node) == {}
    assert object_host.find_child(node, "Anything") is None
    assert object_host.property_of(node, "Archivable") is True


def test_objects_without_class_name_use_type_name(object_host) -> None:
    assert object_host.class_name_of(object()) == "object"


def test_describers_work_against_bare_objects(object_host) -> None:
    factory = DescriberFactory(host=object_host)
    describer = factory.new(
        class_name="Folder",
        properties={"Archivable": True},
        children={"Obby": factory.optional(factory.of_class("Folder"))},
    )

    assert describer(BareNode()) == (True, None)
    assert describer(BareNode()) == describer(BareNode())
    assert factory.new(attributes={"Stage": 1})(BareNode()).reason == 'Expected attribute named "Stage"'


class Locked:
    ClassName = "Part"

    @property
    def Secret(self):
        raise RuntimeError("The current identity cannot access Secret")


def test_getter_errors_raise_property_access_error(object_host) -> None:
    with pytest.raises(PropertyAccessError) as exc_info:
        object_host.property_of(Locked(), "Secret")

    assert exc_info.value.class_name == "Part"
    assert isinstance(exc_info.value.cause, RuntimeError)


def test_inaccessible_property_is_a_mismatch(object_host) -> None:
    describer = DescriberFactory(host=object_host).new(properties={"Secret": 1})

    assert describer(Locked()) == (False, 'Expected instance of class "Part" to have property "Secret"')
