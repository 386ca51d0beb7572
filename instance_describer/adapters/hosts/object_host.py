# instance_describer/adapters/hosts/object_host.py
from typing import Any, Dict, Optional

from instance_describer.core.domain.exceptions import PropertyAccessError
from instance_describer.core.ports import InstanceHost


class ObjectInstanceHost(InstanceHost):
    """
    Implementation of InstanceHost for duck-typed objects exposing the
    Roblox Instance API: `ClassName`, `IsA(name)`, `GetAttributes()` and
    `FindFirstChild(name)`. Properties are plain attribute reads.

    Objects without `IsA` only satisfy is-a against their own class, and
    objects without `GetAttributes` have no attributes. Any error raised
    while reading a property becomes a PropertyAccessError.
    """

    def class_name_of(self, node: Any) -> str:
        return getattr(node, "ClassName", type(node).__name__)

    def is_a(self, node: Any, class_name: str) -> bool:
        is_a = getattr(node, "IsA", None)
        if callable(is_a):
            return bool(is_a(class_name))
        return self.class_name_of(node) == class_name

    def attributes_of(self, node: Any) -> Dict[str, Any]:
        get_attributes = getattr(node, "GetAttributes", None)
        if not callable(get_attributes):
            return {}
        return dict(get_attributes())

    def property_of(self, node: Any, name: str) -> Any:
        try:
            return getattr(node, name)
        except Exception as e:
            # Missing members raise AttributeError; inaccessible ones may raise anything
            raise PropertyAccessError(self.class_name_of(node), name, cause=e) from e

    def find_child(self, node: Any, name: str) -> Optional[Any]:
        find_first_child = getattr(node, "FindFirstChild", None)
        if not callable(find_first_child):
            return None
        return find_first_child(name)
