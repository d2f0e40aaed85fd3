from yarl import URL


class BulbOscError(Exception):
    """Base exception for all bulbosc errors."""


class FatalError(BulbOscError):
    """Custom exception to indicate a fatal error in the application.

    Exceptions that should terminate the process instead of being retried should inherit from this class.
    """


class ConfigError(FatalError):
    """Custom exception to indicate that the configuration could not be loaded or is invalid."""


class UnknownBulbServiceError(ConfigError):
    """Raised when the configured bulb service has no registered provider."""

    def __init__(self, service: str, known: list[str]) -> None:
        super().__init__(f"No provider registered for bulb service {service!r} (known: {', '.join(known) or 'none'})")
        self.service = service


class DuplicateProviderError(BulbOscError):
    """Raised when attempting to register a bulb service that's already registered."""

    def __init__(self, service: str, existing_class: type, new_class: type) -> None:
        super().__init__(
            f"Bulb service '{service}' is already registered to {existing_class.__name__}, "
            f"cannot register {new_class.__name__}"
        )
        self.service = service
        self.existing_class = existing_class
        self.new_class = new_class


class SenderUnavailableError(FatalError):
    """Custom exception to indicate that the OSC output could not be opened."""


class FetchError(FatalError):
    """Custom exception to indicate that the bulb state could not be fetched from the backend."""


class CouldNotReachBackendError(FetchError):
    """Custom exception to indicate that the state source could not be reached."""

    def __init__(self, url: str, reason: object):
        yurl = URL(url)
        msg = f"Could not reach {yurl.host} at {url} ({reason}), ensure it is running and accessible"
        if not yurl.explicit_port:
            msg += " and that the port is specified if necessary"
        super().__init__(msg)


class InvalidAuthError(FetchError):
    """Custom exception to indicate that the authentication token is invalid."""


class EntityNotFoundError(ValueError, FetchError):
    """Custom error for handling 404 from the state source."""


class MalformedResponseError(FetchError):
    """Custom exception to indicate that the response body could not be parsed."""


class DispatchError(BulbOscError):
    """Custom exception to indicate that an OSC message could not be delivered.

    These are absorbed by the sender and never propagate out of a dispatch.
    """
