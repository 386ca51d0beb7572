# instance_describer/core/ports/__init__.py
"""
Core Ports (Interfaces).

Describers never touch a node directly. Every read goes through an
InstanceHost, so the same describers can validate a live scene graph,
an in-memory test tree or any other object model that can answer these
five questions.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class InstanceHost(ABC):
    """
    Port for read-only access to nodes supplied by the host environment.
    Implementations must not mutate the nodes they are asked about.
    """

    @abstractmethod
    def class_name_of(self, node: Any) -> str:
        """The node's exact class (kind) identifier."""
        pass

    @abstractmethod
    def is_a(self, node: Any, class_name: str) -> bool:
        """True if the node's class is `class_name` or inherits from it."""
        pass

    @abstractmethod
    def attributes_of(self, node: Any) -> Mapping[str, Any]:
        """Snapshot of the node's attribute map (name -> value)."""
        pass

    @abstractmethod
    def property_of(self, node: Any, name: str) -> Any:
        """
        Read a named property.

        Raises:
            PropertyAccessError if the property does not exist or is not
            readable for this node's class.
        """
        pass

    @abstractmethod
    def find_child(self, node: Any, name: str) -> Optional[Any]:
        """The single child with exactly this name, or None."""
        pass


# =========================================================
# EXPORTS
# =========================================================
__all__ = [
    "InstanceHost",
]
