# instance_describer/adapters/tree/instance.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from instance_describer.adapters.tree.classes import ClassRegistry

_DEFAULT_REGISTRY = ClassRegistry.default()


class Instance:
    """
    In-memory node with the Roblox Instance surface the describers need.

    `ClassName`, `Name` and `Parent` are ordinary attributes; any other
    property is passed in `properties` and read as an attribute of the
    object. Reading a property that was never set raises AttributeError,
    like indexing an unknown member of a real Instance.

    Example:

        workspace = Instance("Folder", "Map", children=[
            Instance("Part", "Floor", properties={"Anchored": True}),
        ])
    """

    def __init__(
        self,
        class_name: str,
        name: Optional[str] = None,
        *,
        properties: Optional[Mapping[str, Any]] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        children: Iterable["Instance"] = (),
        registry: Optional[ClassRegistry] = None,
    ):
        self.ClassName = class_name
        self.Name = name if name is not None else class_name
        self.Parent: Optional[Instance] = None
        self._properties: Dict[str, Any] = dict(properties or {})
        self._attributes: Dict[str, Any] = dict(attributes or {})
        self._children: List[Instance] = []
        self._registry = registry or _DEFAULT_REGISTRY

        for child in children:
            self.add_child(child)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        properties = self.__dict__.get("_properties", {})
        if name in properties:
            return properties[name]
        raise AttributeError(f"{name} is not a valid member of {self.__dict__.get('ClassName', 'Instance')}")

    def __repr__(self) -> str:
        return f"<Instance {self.ClassName} {self.Name!r}>"

    # --- Tree ---

    def add_child(self, child: "Instance") -> "Instance":
        if child.Parent is not None:
            child.Parent._children.remove(child)
        child.Parent = self
        self._children.append(child)
        return child

    def Destroy(self) -> None:
        """Detach from the parent and drop all descendants."""
        if self.Parent is not None:
            self.Parent._children.remove(self)
            self.Parent = None
        for child in list(self._children):
            child.Destroy()

    def GetChildren(self) -> List["Instance"]:
        return list(self._children)

    def FindFirstChild(self, name: str) -> Optional["Instance"]:
        for child in self._children:
            if child.Name == name:
                return child
        return None

    # --- Class ---

    def IsA(self, class_name: str) -> bool:
        return self._registry.is_a(self.ClassName, class_name)

    # --- Attributes ---

    def GetAttributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    def GetAttribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def SetAttribute(self, name: str, value: Any) -> None:
        if value is None:
            self._attributes.pop(name, None)
        else:
            self._attributes[name] = value
