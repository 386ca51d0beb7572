# instance_describer/core/domain/exceptions.py
"""
Domain Exceptions.

Describers never raise for a mismatch; a failed match is a value
(`MatchResult(False, reason)`). The exceptions here cover the few places
where raising is the right channel:

- a host that cannot read a property (caught by the composite describer),
- callers that explicitly ask for an assertion (`expect`, `assert_matches`),
- lookups against the class registry.
"""

from typing import Optional


class DomainError(Exception):
    """Root of every error raised by instance_describer."""


class PropertyAccessError(DomainError):
    """
    Raised by an InstanceHost when a named property does not exist on a node
    (or cannot be read for that node's class).
    """

    def __init__(self, class_name: str, property_name: str, cause: Optional[BaseException] = None):
        self.class_name = class_name
        self.property_name = property_name
        self.cause = cause
        super().__init__(f'"{property_name}" is not a valid member of "{class_name}"')


class InstanceMismatchError(DomainError):
    """Raised when a caller asserts that a node matches and it does not."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UnknownClassError(DomainError):
    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f'Class "{class_name}" is not registered.')
