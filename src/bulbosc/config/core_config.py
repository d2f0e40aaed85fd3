import logging
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
    YamlConfigSettingsSource,
)

from bulbosc.config.helpers import VERSION, find_config_file
from bulbosc.const import DEFAULT_HOME_ASSISTANT_PORT, DEFAULT_VRCHAT_IP, DEFAULT_VRCHAT_PORT, LOG_LEVELS
from bulbosc.exceptions import ConfigError
from bulbosc.utils.url_utils import normalize_host

LOGGER = logging.getLogger(__name__)


class HomeAssistantConfig(BaseModel):
    """Connection settings for the Home Assistant backend."""

    model_config = ConfigDict(frozen=True, extra="ignore", use_attribute_docstrings=True, validate_by_name=True)

    entity_id: str = Field(...)
    """Entity to read, e.g. 'light.bedroom'."""

    server_ip: str = Field(...)
    """Host name or IPv4 address of the Home Assistant instance."""

    server_port: int = Field(default=DEFAULT_HOME_ASSISTANT_PORT, gt=0, lt=65536)
    """Port of the Home Assistant instance."""

    bearer_token: str = Field(..., validation_alias=AliasChoices("bearer_token", "token"))
    """Long-lived access token for Home Assistant."""

    request_timeout_seconds: float | None = Field(default=None, gt=0)
    """Timeout for the state request. None waits indefinitely."""

    @field_validator("server_ip")
    @classmethod
    def _validate_server_ip(cls, value: str) -> str:
        return normalize_host(value)

    @property
    def auth_headers(self) -> dict[str, str]:
        """Return the headers required for authentication."""
        return {"Authorization": f"Bearer {self.bearer_token}"}

    @property
    def truncated_token(self) -> str:
        """Return a truncated version of the token for display purposes."""
        return f"{self.bearer_token[:6]}...{self.bearer_token[-6:]}"


class BulbOscConfig(BaseSettings):
    """Configuration for bulbosc."""

    model_config = SettingsConfigDict(
        env_prefix="bulbosc__",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        env_nested_delimiter="__",
        frozen=True,
        validate_by_name=True,
        use_attribute_docstrings=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type["BaseSettings"],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = (init_settings, env_settings, dotenv_settings, file_secret_settings)

        requested = getattr(init_settings, "init_kwargs", {}).get("config_file")
        config_file = find_config_file(requested)
        if config_file is None:
            LOGGER.debug("No settings file found, using environment only")
            return sources

        LOGGER.debug("Loading settings from %s", config_file)
        if config_file.suffix == ".toml":
            return (*sources, TomlConfigSettingsSource(settings_cls, toml_file=config_file))
        return (*sources, YamlConfigSettingsSource(settings_cls, yaml_file=config_file))

    config_file: Path | None = Field(default=None)
    """Path to the settings file. Searched for in the working and config directories when not set."""

    log_level: Annotated[LOG_LEVELS, BeforeValidator(str.upper)] = Field(default="INFO")
    """Logging level for bulbosc."""

    vrchat_ip: str = Field(default=DEFAULT_VRCHAT_IP)
    """Address VRChat listens on for OSC messages."""

    vrchat_port: int = Field(default=DEFAULT_VRCHAT_PORT, gt=0, lt=65536)
    """Port VRChat listens on for OSC messages."""

    max_updates_per_second: int = Field(..., gt=0)
    """Maximum number of state polls (and so updates) per second."""

    bulb_service: str = Field(default="home_assistant")
    """Which backend to read the bulb state from."""

    home_assistant: HomeAssistantConfig | None = Field(default=None)
    """Settings for the 'home_assistant' bulb service."""

    @model_validator(mode="after")
    def validate_bulbosc_config(self) -> "BulbOscConfig":
        LOGGER.info("bulbosc version: %s", VERSION)

        LOGGER.debug(
            "bulbosc configuration: %s",
            self.model_dump_json(indent=4, exclude={"home_assistant": {"bearer_token"}}),
        )

        if self.home_assistant is not None:
            LOGGER.debug("Home Assistant token: %s", self.home_assistant.truncated_token)

        return self


def load_config(
    config_file: str | Path | None = None, env_file: str | Path | None = None, **kwargs: Any
) -> BulbOscConfig:
    """Load and validate the configuration from all sources.

    Args:
        config_file: Settings file to read. Searched for when not provided.
        env_file: `.env` file to read instead of the default.
        **kwargs: Explicit values, taking priority over every other source.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the settings file is missing, cannot be parsed, or the values are invalid.
    """
    if config_file is not None:
        kwargs["config_file"] = config_file
    if env_file is not None:
        kwargs["_env_file"] = env_file

    try:
        return BulbOscConfig(**kwargs)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Error while parsing settings file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    except ValueError as e:
        # tomllib.TOMLDecodeError
        raise ConfigError(f"Error while parsing settings file: {e}") from e
