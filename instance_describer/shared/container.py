# instance_describer/shared/container.py
from dependency_injector import containers, providers

from instance_describer.shared.config import settings

# --- Adapters ---
from instance_describer.adapters.hosts.object_host import ObjectInstanceHost

# --- Use Cases ---
from instance_describer.core.use_cases.check_instance import CheckInstance
from instance_describer.core.use_cases.describer_factory import DescriberFactory


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Connects the host adapter to the describer factory and the check use case.
    """

    # 1. Host model
    host = providers.Singleton(ObjectInstanceHost)

    # 2. Describer construction (owns the identity caches)
    factory = providers.Singleton(
        DescriberFactory,
        host=host,
        cache=settings.CACHE_DESCRIBERS,
    )

    # 3. Use Cases
    check_instance = providers.Factory(
        CheckInstance,
        log_results=settings.LOG_CHECK_RESULTS,
    )


# Global Container Instance
container = Container()
