# instance_describer/core/domain/description.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional

# A child describer is anything callable on an optional node that returns
# a (matched, reason) pair. Every Describer variant qualifies.
ChildDescriber = Callable[[Any], Any]


@dataclass(frozen=True)
class Description:
    """
    The expected shape of a node.

    Every field is optional; an empty Description matches any present node.
    Nothing here is validated: a malformed description produces a describer
    that may report confusing reasons, never one that refuses to build.
    """

    class_name: Optional[str] = None
    is_a: Optional[str] = None
    properties: Optional[Mapping[str, Any]] = None
    attributes: Optional[Mapping[str, Any]] = None
    children: Optional[Mapping[str, ChildDescriber]] = None

    @classmethod
    def coerce(cls, value: Any = None, **overrides: Any) -> "Description":
        """
        Accept a Description, a plain mapping of its fields, or nothing,
        plus keyword fields that take precedence. Unknown keys are ignored.
        """
        if isinstance(value, Description) and not overrides:
            return value

        known = {f.name for f in fields(cls)}
        data = {}

        if isinstance(value, Description):
            data.update({name: getattr(value, name) for name in known})
        elif isinstance(value, Mapping):
            data.update({k: v for k, v in value.items() if k in known})

        data.update({k: v for k, v in overrides.items() if k in known})
        return cls(**data)
