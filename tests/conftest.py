# tests/conftest.py
import pytest

from instance_describer.adapters.hosts.object_host import ObjectInstanceHost
from instance_describer.adapters.tree import Instance
from instance_describer.core.use_cases.describer_factory import DescriberFactory
from instance_describer.shared.container import container


class CountingHost(ObjectInstanceHost):
    """ObjectInstanceHost that records which reads a describer performed."""

    def __init__(self):
        self.attribute_reads = 0
        self.child_lookups = []

    def attributes_of(self, node):
        self.attribute_reads += 1
        return super().attributes_of(node)

    def find_child(self, node, name):
        self.child_lookups.append(name)
        return super().find_child(node, name)


@pytest.fixture(scope="function")
def host():
    return CountingHost()


@pytest.fixture(scope="function")
def factory(host):
    """A factory with its own caches, isolated from the shared container."""
    return DescriberFactory(host=host)


@pytest.fixture(scope="function")
def map_folder():
    """A Folder holding the three children of a typical obby map."""
    return Instance(
        "Folder",
        "Map",
        children=[
            Instance("Folder", "ClientObjectScripts"),
            Instance("Folder", "Obby"),
            Instance("Model", "Frame"),
        ],
    )


@pytest.fixture(scope="function")
def spawn_part():
    return Instance(
        "Part",
        "Spawn",
        properties={"Anchored": True, "Transparency": 0.5, "Material": "Plastic"},
        attributes={"Checkpoint": 3, "Enabled": False, "Label": ""},
    )


@pytest.fixture(scope="function")
def isolated_container(host):
    """
    Overrides the shared container's factory with a fresh one, so the
    module-level constructors do not share caches across tests.
    """
    container.factory.override(DescriberFactory(host=host))
    yield container
    container.factory.reset_override()
