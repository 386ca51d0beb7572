# instance_describer/core/domain/__init__.py
"""
Core Domain.

Describer variants, the Description they are built from, runtime value
tagging and the domain exceptions. Nothing in this package reads a node
directly; all access goes through `instance_describer.core.ports`.
"""

from .description import Description
from .describers import (
    MATCHED,
    NIL_INSTANCE,
    CompositeDescriber,
    Describer,
    ExactKindDescriber,
    InheritanceDescriber,
    MatchResult,
    OptionalDescriber,
)
from .exceptions import DomainError, InstanceMismatchError, PropertyAccessError, UnknownClassError

__all__ = [
    "Description",
    "Describer",
    "CompositeDescriber",
    "ExactKindDescriber",
    "InheritanceDescriber",
    "OptionalDescriber",
    "MatchResult",
    "MATCHED",
    "NIL_INSTANCE",
    "DomainError",
    "InstanceMismatchError",
    "PropertyAccessError",
    "UnknownClassError",
]
