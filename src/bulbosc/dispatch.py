"""Sending bulb state to the avatar when it changes."""

import typing
from logging import getLogger

from bulbosc.const import OSC_ADDRESS_BRIGHTNESS, OSC_ADDRESS_HUE, OSC_ADDRESS_ON

if typing.TYPE_CHECKING:
    from bulbosc.models import BulbState
    from bulbosc.types import OscSink

LOGGER = getLogger(__name__)


def update_avatar(sink: "OscSink", state: "BulbState") -> None:
    """Send every field of `state` to the avatar.

    Each message is sent independently; a failed send does not stop the others.
    """
    sink.send(OSC_ADDRESS_ON, state.on)
    sink.send(OSC_ADDRESS_HUE, state.hue)
    sink.send(OSC_ADDRESS_BRIGHTNESS, state.brightness)
    LOGGER.info("Sent updated state to VRChat")


def maybe_dispatch(previous: "BulbState", current: "BulbState", sink: "OscSink") -> bool:
    """Send `current` to the avatar if it differs from `previous` in any field.

    Returns:
        Whether the state was sent.
    """
    if current == previous:
        return False

    LOGGER.debug("State changed from %r to %r", previous, current)
    update_avatar(sink, current)
    return True
