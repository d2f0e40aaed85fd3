import typing
from logging import getLogger

from bulbosc.core.loop import cycle_period, run_forever
from bulbosc.osc import OscSender
from bulbosc.providers import create_provider

if typing.TYPE_CHECKING:
    from bulbosc.config import BulbOscConfig
    from bulbosc.providers import BulbStateProvider

LOGGER = getLogger(__name__)


class Bridge:
    """Main class for bulbosc.

    Owns the bulb state provider and the OSC sender for the life of the process and runs the loop between them.
    """

    provider: "BulbStateProvider"
    """Source of the bulb state."""

    sender: OscSender
    """Connection to VRChat."""

    def __init__(
        self,
        config: "BulbOscConfig",
        provider: "BulbStateProvider | None" = None,
        sender: OscSender | None = None,
    ) -> None:
        """
        Initialize the bridge.

        Args:
            config: Loaded configuration.
            provider: Provider to use instead of the one selected by `config.bulb_service`.
            sender: Sender to use instead of one opened to `config.vrchat_ip`.
        """
        self.config = config
        self.period = cycle_period(config.max_updates_per_second)
        self.provider = provider if provider is not None else create_provider(config)
        self.sender = sender if sender is not None else OscSender(config.vrchat_ip, config.vrchat_port)

    def run_forever(self) -> typing.NoReturn:
        """Run the loop until the process is stopped.

        Raises:
            FetchError: If a state could not be fetched.
        """
        LOGGER.info(
            "Forwarding %r to %s at up to %d updates per second",
            self.provider,
            self.sender,
            self.config.max_updates_per_second,
        )
        try:
            run_forever(self.provider, self.sender, self.period)
        finally:
            self.provider.close()
