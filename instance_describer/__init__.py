# instance_describer/__init__.py
"""
Instance Describer.

Declarative structural validation for trees of instances. Describe the
shape you expect once, then check any number of nodes against it:

    from instance_describer import new, of_class, optional

    is_map = new(
        class_name="Folder",
        children={
            "Obby": of_class("Folder"),
            "Frame": of_class("Model"),
            "Music": optional(of_class("Sound")),
        },
    )

    matched, reason = is_map(workspace.Map)

The module-level constructors use the describer factory from the shared
container (ObjectInstanceHost, cached leaf describers). Build a
`DescriberFactory` directly to use another host or isolated caches.

The package does not configure logging. Applications embedding it call
`instance_describer.shared.logging_setup.init_logging()` once at startup
to route its structlog events through stdlib logging.
"""

from typing import Any

from instance_describer.adapters.schema import DescriptionSchema, build_describer, load_describer
from instance_describer.adapters.tree import ClassRegistry, Instance
from instance_describer.core.domain import (
    Describer,
    Description,
    DomainError,
    InstanceMismatchError,
    MatchResult,
    PropertyAccessError,
)
from instance_describer.core.ports import InstanceHost
from instance_describer.core.use_cases.describer_factory import DescriberFactory
from instance_describer.shared.container import container


def new(description: Any = None, **fields: Any) -> Describer:
    """Build a describer from a Description, a mapping, or keyword fields."""
    return container.factory().new(description, **fields)


describe = new


def of_class(class_name: str) -> Describer:
    """Match present nodes whose class is exactly `class_name`."""
    return container.factory().of_class(class_name)


class_of = of_class


def which_is_a(class_name: str) -> Describer:
    """Match present nodes whose class is, or inherits from, `class_name`."""
    return container.factory().which_is_a(class_name)


def optional(inner: Describer) -> Describer:
    """Let a missing node pass; otherwise defer to `inner`."""
    return container.factory().optional(inner)


def check(describer: Describer, node: Any) -> MatchResult:
    return container.check_instance(describer=describer).execute(node)


def expect(describer: Describer, node: Any) -> None:
    """
    Raises:
        InstanceMismatchError if `node` does not match.
    """
    container.check_instance(describer=describer).assert_matches(node)


__all__ = [
    "new",
    "describe",
    "of_class",
    "class_of",
    "which_is_a",
    "optional",
    "check",
    "expect",
    "build_describer",
    "load_describer",
    "ClassRegistry",
    "Describer",
    "DescriberFactory",
    "Description",
    "DescriptionSchema",
    "DomainError",
    "Instance",
    "InstanceHost",
    "InstanceMismatchError",
    "MatchResult",
    "PropertyAccessError",
]
