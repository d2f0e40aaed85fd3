import typing
from abc import ABC, abstractmethod
from typing import ClassVar

from bulbosc.providers.registry import register_provider

if typing.TYPE_CHECKING:
    from bulbosc.config import BulbOscConfig
    from bulbosc.models import BulbState


class BulbStateProvider(ABC):
    """Source of the current state of one bulb.

    Subclasses that set `service` are registered automatically and selected by the `bulb_service`
    configuration value.
    """

    service: ClassVar[str | None] = None
    """Tag used in `bulb_service` to select this provider."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "service" in cls.__dict__:
            register_provider(cls)

    @classmethod
    @abstractmethod
    def from_config(cls, config: "BulbOscConfig") -> "BulbStateProvider":
        """Build the provider from the application configuration.

        Raises:
            ConfigError: If the provider's settings are missing or invalid.
        """

    @abstractmethod
    def fetch_bulb_state(self) -> "BulbState":
        """Fetch and normalize the current bulb state.

        Raises:
            FetchError: If the state could not be fetched or parsed.
        """

    def close(self) -> None:
        """Release any resources held by the provider."""
