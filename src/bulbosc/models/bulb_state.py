from pydantic import BaseModel, ConfigDict, Field


class BulbState(BaseModel):
    """Normalized state of a single bulb, as sent to the avatar.

    Instances are immutable and compare equal only if every field is equal.
    """

    model_config = ConfigDict(frozen=True)

    on: bool = Field(...)
    """Whether the bulb is powered on."""

    hue: float = Field(...)
    """Hue, normally between 0.0 and 1.0."""

    brightness: float = Field(...)
    """Brightness, normally between 0.0 and 1.0."""
