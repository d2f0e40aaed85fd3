from typing import Any, Protocol

OscValue = bool | int | float | str
"""Values accepted as avatar parameters."""


class OscSink(Protocol):
    """Anything messages can be sent to, addressed by an OSC path."""

    def send(self, address: str, value: Any) -> Any: ...
