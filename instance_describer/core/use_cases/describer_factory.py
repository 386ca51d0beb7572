# instance_describer/core/use_cases/describer_factory.py
import structlog
from typing import Any, Optional

from instance_describer.core.domain.cache import DescriberCache
from instance_describer.core.domain.description import Description
from instance_describer.core.domain.describers import (
    CompositeDescriber,
    Describer,
    ExactKindDescriber,
    InheritanceDescriber,
    OptionalDescriber,
)
from instance_describer.core.ports import InstanceHost

logger = structlog.get_logger()


class DescriberFactory:
    """
    Use Case: builds describers bound to one InstanceHost.

    The factory is the constructing context for describers. It owns the two
    identity caches (one for `of_class`, one for `which_is_a`), so separate
    factories never share cached describers.

    Args:
        host: The port every describer built here reads nodes through.
        cache: When False, leaf constructors build a fresh describer on
            every call instead of reusing one per class name.
    """

    def __init__(self, host: InstanceHost, cache: bool = True):
        self.host = host
        self._class_cache: Optional[DescriberCache[ExactKindDescriber]] = DescriberCache() if cache else None
        self._is_a_cache: Optional[DescriberCache[InheritanceDescriber]] = DescriberCache() if cache else None

    # -----------------------------------------------------------------
    # Composite
    # -----------------------------------------------------------------

    def new(self, description: Any = None, **fields: Any) -> CompositeDescriber:
        """
        Build a describer from a Description, a mapping of its fields, or
        keyword fields (class_name, is_a, properties, attributes, children).
        Never fails; the description is not validated.
        """
        return CompositeDescriber(host=self.host, description=Description.coerce(description, **fields))

    describe = new

    # -----------------------------------------------------------------
    # Leaves
    # -----------------------------------------------------------------

    def of_class(self, class_name: str) -> ExactKindDescriber:
        if self._class_cache is None:
            return ExactKindDescriber(host=self.host, class_name=class_name)
        return self._class_cache.get_or_create(class_name, self._build_class_describer)

    class_of = of_class

    def which_is_a(self, class_name: str) -> InheritanceDescriber:
        if self._is_a_cache is None:
            return InheritanceDescriber(host=self.host, class_name=class_name)
        return self._is_a_cache.get_or_create(class_name, self._build_is_a_describer)

    # -----------------------------------------------------------------
    # Modifiers
    # -----------------------------------------------------------------

    def optional(self, inner: Describer) -> OptionalDescriber:
        return OptionalDescriber(inner=inner)

    # -----------------------------------------------------------------
    # Cache builders
    # -----------------------------------------------------------------

    def _build_class_describer(self, class_name: str) -> ExactKindDescriber:
        logger.debug("describer_cached", kind="class", class_name=class_name)
        return ExactKindDescriber(host=self.host, class_name=class_name)

    def _build_is_a_describer(self, class_name: str) -> InheritanceDescriber:
        logger.debug("describer_cached", kind="is_a", class_name=class_name)
        return InheritanceDescriber(host=self.host, class_name=class_name)
