from .object_host import ObjectInstanceHost

__all__ = ["ObjectInstanceHost"]
