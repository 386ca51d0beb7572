# instance_describer/adapters/tree/classes.py
"""
Class hierarchy for the in-memory instance tree.

Maps each class name to its superclass so `Instance.IsA` can answer the
is-a question the same way a Roblox engine would. The default registry
covers the classes that usually appear in place files (parts, models,
folders, scripts, value objects, GUI containers). Anything not registered
is treated as a direct subclass of `Instance`.
"""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional

from instance_describer.core.domain.exceptions import UnknownClassError

ROOT_CLASS = "Instance"

DEFAULT_HIERARCHY: Mapping[str, Optional[str]] = {
    "Instance": None,
    # --- 3D ---
    "PVInstance": "Instance",
    "BasePart": "PVInstance",
    "FormFactorPart": "BasePart",
    "Part": "FormFactorPart",
    "WedgePart": "FormFactorPart",
    "SpawnLocation": "Part",
    "Seat": "Part",
    "TrussPart": "BasePart",
    "MeshPart": "BasePart",
    "PartOperation": "BasePart",
    "UnionOperation": "PartOperation",
    "Model": "PVInstance",
    "WorldRoot": "Model",
    "Workspace": "WorldRoot",
    "Attachment": "Instance",
    # --- Containers ---
    "Folder": "Instance",
    "Configuration": "Instance",
    "ServiceProvider": "Instance",
    "DataModel": "ServiceProvider",
    "ReplicatedStorage": "Instance",
    "ServerStorage": "Instance",
    "ServerScriptService": "Instance",
    # --- Scripts ---
    "LuaSourceContainer": "Instance",
    "BaseScript": "LuaSourceContainer",
    "Script": "BaseScript",
    "LocalScript": "Script",
    "ModuleScript": "LuaSourceContainer",
    # --- Values ---
    "ValueBase": "Instance",
    "StringValue": "ValueBase",
    "IntValue": "ValueBase",
    "NumberValue": "ValueBase",
    "BoolValue": "ValueBase",
    "ObjectValue": "ValueBase",
    # --- GUI ---
    "GuiBase": "Instance",
    "GuiBase2d": "GuiBase",
    "LayerCollector": "GuiBase2d",
    "ScreenGui": "LayerCollector",
    "GuiObject": "GuiBase2d",
    "Frame": "GuiObject",
    "GuiLabel": "GuiObject",
    "TextLabel": "GuiLabel",
    "GuiButton": "GuiObject",
    "TextButton": "GuiButton",
}


class ClassRegistry:
    """Superclass table with is-a lookups."""

    def __init__(self, hierarchy: Optional[Mapping[str, Optional[str]]] = None):
        self._superclasses: Dict[str, Optional[str]] = {ROOT_CLASS: None}
        if hierarchy:
            self._superclasses.update(hierarchy)

    @classmethod
    def default(cls) -> "ClassRegistry":
        return cls(DEFAULT_HIERARCHY)

    def register(self, class_name: str, superclass: str = ROOT_CLASS) -> None:
        """
        Add a class under an already registered superclass.

        Raises:
            UnknownClassError if `superclass` is not registered.
        """
        if superclass not in self._superclasses:
            raise UnknownClassError(superclass)
        self._superclasses[class_name] = superclass

    def superclass_of(self, class_name: str) -> Optional[str]:
        if class_name == ROOT_CLASS:
            return None
        return self._superclasses.get(class_name, ROOT_CLASS)

    def ancestry(self, class_name: str) -> Iterator[str]:
        """Yield the class itself, then each superclass up to Instance."""
        current: Optional[str] = class_name
        seen = set()
        while current is not None and current not in seen:
            seen.add(current)
            yield current
            current = self.superclass_of(current)

    def is_a(self, class_name: str, ancestor: str) -> bool:
        return any(name == ancestor for name in self.ancestry(class_name))

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._superclasses
