from logging import getLogger

from pythonosc import udp_client
from pythonosc.osc_message_builder import BuildError

from bulbosc.exceptions import DispatchError, SenderUnavailableError
from bulbosc.types import OscValue

LOGGER = getLogger(__name__)


class OscSender:
    """Sends OSC messages over UDP to a single host and port.

    The underlying client is opened once and reused for every message. Delivery is fire and forget:
    failures are logged at debug level and never raised.
    """

    def __init__(self, host: str, port: int, client: udp_client.SimpleUDPClient | None = None):
        self.host = host
        self.port = port

        if client is None:
            try:
                client = udp_client.SimpleUDPClient(host, port)
            except OSError as e:
                raise SenderUnavailableError(f"Couldn't open OSC sender to {host}:{port}: {e}") from e

        self.client = client

    def send(self, address: str, value: OscValue) -> bool:
        """Send one message, returning whether it was handed to the socket."""
        try:
            self._deliver(address, value)
        except DispatchError as e:
            LOGGER.debug("%s", e)
            return False
        return True

    def _deliver(self, address: str, value: OscValue) -> None:
        try:
            self.client.send_message(address, value)
        except (OSError, BuildError) as e:
            raise DispatchError(f"Failed to send {address}={value!r} to {self.host}:{self.port}: {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host!r}, port={self.port})"
