"""Provider registry for mapping `bulb_service` tags to provider classes.

Providers register themselves when they are defined with a `service` tag, so a new backend only needs a
`BulbStateProvider` subclass and a matching block in the configuration.

Example:
    ```python
    from typing import ClassVar

    from bulbosc.providers import BulbStateProvider


    class MyBackendProvider(BulbStateProvider):
        service: ClassVar[str] = "my_backend"

        @classmethod
        def from_config(cls, config):
            ...

        def fetch_bulb_state(self):
            ...
    ```
"""

import typing
from logging import getLogger

import bulbosc.exceptions as exc

if typing.TYPE_CHECKING:
    from bulbosc.config import BulbOscConfig
    from bulbosc.providers.base import BulbStateProvider

LOGGER = getLogger(__name__)


class ProviderRegistry:
    """Registry for mapping bulb service tags to their provider classes.

    The registry is a singleton, all access goes through the global instance.
    """

    def __init__(self) -> None:
        self._service_to_class: dict[str, type[BulbStateProvider]] = {}

    def register(self, provider_class: type["BulbStateProvider"]) -> None:
        """Register a provider class for its service tag.

        Args:
            provider_class: The BulbStateProvider subclass to register.

        Raises:
            DuplicateProviderError: If the service is already registered to a different class.
        """
        service = getattr(provider_class, "service", None)
        if not service:
            LOGGER.debug("Skipping registration for %s: no service tag", provider_class.__name__)
            return

        existing = self._service_to_class.get(service)
        if existing is not None and existing is not provider_class:
            raise exc.DuplicateProviderError(service, existing, provider_class)

        self._service_to_class[service] = provider_class
        LOGGER.debug("Registered %s for bulb service %r", provider_class.__name__, service)

    def unregister(self, service: str) -> None:
        self._service_to_class.pop(service, None)

    def get(self, service: str) -> type["BulbStateProvider"]:
        """Return the provider class for a service tag.

        Raises:
            UnknownBulbServiceError: If no provider is registered for the service.
        """
        try:
            return self._service_to_class[service]
        except KeyError:
            raise exc.UnknownBulbServiceError(service, self.services) from None

    @property
    def services(self) -> list[str]:
        return sorted(self._service_to_class)


_REGISTRY = ProviderRegistry()


def get_registry() -> ProviderRegistry:
    """Return the global provider registry."""
    return _REGISTRY


def register_provider(provider_class: type["BulbStateProvider"]) -> type["BulbStateProvider"]:
    """Register a provider class, usable as a class decorator."""
    _REGISTRY.register(provider_class)
    return provider_class


def get_provider_class(service: str) -> type["BulbStateProvider"]:
    return _REGISTRY.get(service)


def create_provider(config: "BulbOscConfig") -> "BulbStateProvider":
    """Build the provider selected by `config.bulb_service`.

    Raises:
        ConfigError: If the service is unknown or its settings block is missing.
    """
    provider_class = get_provider_class(config.bulb_service)
    LOGGER.info("Using %s for bulb service %r", provider_class.__name__, config.bulb_service)
    return provider_class.from_config(config)
