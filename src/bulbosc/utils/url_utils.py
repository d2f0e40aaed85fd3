"""URL utilities for constructing Home Assistant API endpoints."""

import typing

from yarl import URL

from bulbosc.exceptions import ConfigError

if typing.TYPE_CHECKING:
    from bulbosc.config import HomeAssistantConfig


def normalize_host(host: str) -> str:
    """Validate and return a Home Assistant host name or IPv4 address.

    Args:
        host: The configured `server_ip`.

    Returns:
        The host with surrounding whitespace removed.

    Raises:
        ValueError: If the host is empty, a URL, carries a port, is an IPv6 address or is not a valid host.
    """
    host = host.strip()

    if not host:
        raise ValueError("server_ip must be set in the configuration.")

    if "://" in host or "/" in host:
        raise ValueError(f"server_ip should be a host name or IP address, not a URL: {host!r}")

    if host.count(":") == 1:
        raise ValueError(f"server_ip should not include a port, set server_port instead: {host!r}")

    if ":" in host:
        raise ValueError(f"IPv6 addresses are not supported in server_ip: {host!r}")

    # yarl raises ValueError for hosts it cannot encode, e.g. ones containing spaces
    URL.build(scheme="http", host=host)

    return host


def build_state_url(config: "HomeAssistantConfig") -> str:
    """Construct the URL of the state endpoint for the configured entity.

    Args:
        config: Home Assistant configuration containing connection details and the entity ID.

    Returns:
        URL of the form `http://{server_ip}:{server_port}/api/states/{entity_id}`.

    Raises:
        ConfigError: If the host or entity ID cannot be used in a URL.
    """
    try:
        yurl = URL.build(
            scheme="http",
            host=normalize_host(config.server_ip),
            port=config.server_port,
            path=f"/api/states/{config.entity_id}",
        )
    except ValueError as e:
        raise ConfigError(f"Invalid home_assistant settings: {e}") from e
    return str(yurl)
