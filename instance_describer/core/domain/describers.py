# instance_describer/core/domain/describers.py
"""
Describers: immutable, composable checks over an optional node.

Calling a describer with a node (or None) returns a MatchResult:

    MatchResult(True, None)           the node matches
    MatchResult(False, "reason...")   the node does not, and why

A reason is present if and only if the match failed. Describers never
raise for a mismatch and never mutate the node they inspect; every read
goes through the InstanceHost port they were built with.

Variants:

- CompositeDescriber    full Description (class, is-a, attributes,
                        properties, named children)
- ExactKindDescriber    class name equality only
- InheritanceDescriber  is-a relation only
- OptionalDescriber     lets a missing node pass, otherwise delegates
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple, Optional

from instance_describer.core.domain.description import Description
from instance_describer.core.domain.exceptions import PropertyAccessError
from instance_describer.core.domain.values import mismatch_reason
from instance_describer.core.ports import InstanceHost

NIL_INSTANCE = "Expected an instance, got nil"


class MatchResult(NamedTuple):
    matched: bool
    reason: Optional[str] = None

    @classmethod
    def failure(cls, reason: str) -> "MatchResult":
        return cls(False, reason)


MATCHED = MatchResult(True, None)


class Describer(ABC):
    """A check over an optional node."""

    @abstractmethod
    def evaluate(self, node: Any) -> MatchResult:
        pass

    def __call__(self, node: Any) -> MatchResult:
        return self.evaluate(node)


# ---------------------------------------------------------------------------
# Reasons shared by the leaf and composite describers
# ---------------------------------------------------------------------------

def _class_reason(host: InstanceHost, node: Any, expected: str) -> Optional[str]:
    actual = host.class_name_of(node)
    if actual != expected:
        return f'Expected instance of class "{expected}", got instance of class "{actual}"'
    return None


def _is_a_reason(host: InstanceHost, node: Any, ancestor: str) -> Optional[str]:
    if not host.is_a(node, ancestor):
        actual = host.class_name_of(node)
        return f'Expected instance which is a "{ancestor}", got instance of class "{actual}"'
    return None


def _malformed_reason(category: str, entries: Any) -> Optional[str]:
    if isinstance(entries, Mapping):
        return None
    return f"Cannot check {category}; the description gives {type(entries).__name__} instead of a mapping of names"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class ExactKindDescriber(Describer):
    host: InstanceHost
    class_name: str

    def evaluate(self, node: Any) -> MatchResult:
        if node is None:
            return MatchResult.failure(NIL_INSTANCE)

        reason = _class_reason(self.host, node, self.class_name)
        return MatchResult.failure(reason) if reason else MATCHED


@dataclass(frozen=True, eq=False)
class InheritanceDescriber(Describer):
    host: InstanceHost
    class_name: str

    def evaluate(self, node: Any) -> MatchResult:
        if node is None:
            return MatchResult.failure(NIL_INSTANCE)

        reason = _is_a_reason(self.host, node, self.class_name)
        return MatchResult.failure(reason) if reason else MATCHED


@dataclass(frozen=True, eq=False)
class OptionalDescriber(Describer):
    """The only describer for which a missing node is a match."""

    inner: Any

    def evaluate(self, node: Any) -> MatchResult:
        if node is None:
            return MATCHED

        matched, reason = self.inner(node)
        return MatchResult(matched, reason)


@dataclass(frozen=True, eq=False)
class CompositeDescriber(Describer):
    """
    Checks a node against a full Description.

    Checks run in a fixed order and stop at the first failure:
    presence, class, is-a, attributes, properties, children. Within a
    category, entries are visited in the mapping's iteration order.
    """

    host: InstanceHost
    description: Description

    def evaluate(self, node: Any) -> MatchResult:
        if node is None:
            return MatchResult.failure(NIL_INSTANCE)

        for check in (
            self._check_class,
            self._check_is_a,
            self._check_attributes,
            self._check_properties,
            self._check_children,
        ):
            reason = check(node)
            if reason is not None:
                return MatchResult.failure(reason)

        return MATCHED

    def _check_class(self, node: Any) -> Optional[str]:
        if self.description.class_name is None:
            return None
        return _class_reason(self.host, node, self.description.class_name)

    def _check_is_a(self, node: Any) -> Optional[str]:
        if self.description.is_a is None:
            return None
        return _is_a_reason(self.host, node, self.description.is_a)

    def _check_attributes(self, node: Any) -> Optional[str]:
        expected_attributes = self.description.attributes
        if not expected_attributes:
            return None

        malformed = _malformed_reason("attributes", expected_attributes)
        if malformed is not None:
            return malformed

        # One snapshot per call, not one per attribute
        actual_attributes = self.host.attributes_of(node)

        for name, expected in expected_attributes.items():
            if name not in actual_attributes:
                return f'Expected attribute named "{name}"'

            reason = mismatch_reason("attribute", name, expected, actual_attributes[name])
            if reason is not None:
                return reason

        return None

    def _check_properties(self, node: Any) -> Optional[str]:
        expected_properties = self.description.properties
        if not expected_properties:
            return None

        malformed = _malformed_reason("properties", expected_properties)
        if malformed is not None:
            return malformed

        for name, expected in expected_properties.items():
            try:
                actual = self.host.property_of(node, name)
            except PropertyAccessError:
                class_name = self.host.class_name_of(node)
                return f'Expected instance of class "{class_name}" to have property "{name}"'

            reason = mismatch_reason("property", name, expected, actual)
            if reason is not None:
                return reason

        return None

    def _check_children(self, node: Any) -> Optional[str]:
        expected_children = self.description.children
        if not expected_children:
            return None

        malformed = _malformed_reason("children", expected_children)
        if malformed is not None:
            return malformed

        for name, child_describer in expected_children.items():
            if not callable(child_describer):
                return f'Cannot check child named "{name}"; the description gives {type(child_describer).__name__} instead of a describer'

            child = self.host.find_child(node, name)
            matched, reason = child_describer(child)
            if matched:
                continue

            if child is None:
                return f'Cannot find child named "{name}" in instance'
            return f'Cannot match child named "{name}"; {reason}'

        return None
