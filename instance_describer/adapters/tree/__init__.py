from .classes import DEFAULT_HIERARCHY, ClassRegistry
from .instance import Instance

__all__ = ["ClassRegistry", "DEFAULT_HIERARCHY", "Instance"]
