import typing
from logging import getLogger
from typing import ClassVar

import requests
from pydantic import ValidationError

from bulbosc.const import BRIGHTNESS_RANGE, HUE_RANGE, NORMALIZED_RANGE
from bulbosc.exceptions import (
    ConfigError,
    CouldNotReachBackendError,
    EntityNotFoundError,
    FetchError,
    InvalidAuthError,
    MalformedResponseError,
)
from bulbosc.models import BulbState, LightState
from bulbosc.providers.base import BulbStateProvider
from bulbosc.utils import build_state_url, translate

if typing.TYPE_CHECKING:
    from bulbosc.config import BulbOscConfig, HomeAssistantConfig

LOGGER = getLogger(__name__)


class HomeAssistantProvider(BulbStateProvider):
    """Reads a light entity from the Home Assistant REST API.

    One `requests.Session` is held for the life of the provider, carrying the bearer token.
    """

    service: ClassVar[str | None] = "home_assistant"

    def __init__(self, config: "HomeAssistantConfig", session: requests.Session | None = None):
        self.config = config
        self.url = build_state_url(config)
        self.session = session or requests.Session()
        self.session.headers.update(config.auth_headers)

    @classmethod
    def from_config(cls, config: "BulbOscConfig") -> "HomeAssistantProvider":
        if config.home_assistant is None:
            raise ConfigError("bulb_service is 'home_assistant' but no home_assistant settings were provided")
        return cls(config.home_assistant)

    def get_light_state(self) -> LightState:
        """Request the raw state of the configured entity.

        Raises:
            CouldNotReachBackendError: If the request could not be completed.
            InvalidAuthError: If Home Assistant rejects the token.
            EntityNotFoundError: If the entity does not exist.
            MalformedResponseError: If the body is not JSON.
            FetchError: For any other unsuccessful response.
        """
        try:
            response = self.session.get(self.url, timeout=self.config.request_timeout_seconds)
        except requests.RequestException as e:
            raise CouldNotReachBackendError(self.url, e) from e

        if response.status_code in (401, 403):
            raise InvalidAuthError(
                f"Home Assistant rejected token {self.config.truncated_token} (HTTP {response.status_code})"
            )
        if response.status_code == 404:
            raise EntityNotFoundError(f"Entity {self.config.entity_id!r} not found in Home Assistant")

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(f"Home Assistant returned HTTP {response.status_code} for {self.url}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"JSON from Home Assistant endpoint contained errors: {e}") from e

        try:
            return LightState.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected state from Home Assistant: {e}") from e

    def fetch_bulb_state(self) -> BulbState:
        light = self.get_light_state()
        try:
            hue = light.attributes.hue_degrees
            brightness = light.attributes.brightness_value
        except OverflowError as e:
            raise MalformedResponseError(f"Numeric value from Home Assistant is out of range: {e}") from e

        LOGGER.debug("Fetched %s: state=%r hue=%s brightness=%s", self.config.entity_id, light.value, hue, brightness)

        return BulbState(
            on=light.is_on,
            hue=translate(hue, *HUE_RANGE, *NORMALIZED_RANGE),
            brightness=translate(brightness, *BRIGHTNESS_RANGE, *NORMALIZED_RANGE),
        )

    def close(self) -> None:
        self.session.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r}, token={self.config.truncated_token!r})"
