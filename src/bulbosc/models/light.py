from logging import getLogger
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

LOGGER = getLogger(__name__)


def as_number(value: Any) -> float | None:
    """Return `value` as a float if it is a JSON number, otherwise None.

    Booleans are not numbers here, even though `bool` subclasses `int`.

    Raises:
        OverflowError: If `value` is an integer too large for a float.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return float(value)


class LightAttributes(BaseModel):
    """The subset of Home Assistant light attributes that bulbosc reads.

    Fields are stored as received; the properties decide how to read them.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    hs_color: Any = Field(default=None)
    """The hue and saturation color value, hue in degrees 0..360."""

    brightness: Any = Field(default=None)
    """The brightness of this light between 0..255."""

    @property
    def hue_degrees(self) -> float:
        """Hue from the first element of `hs_color`, or 0.0 if absent or not a number."""
        if not isinstance(self.hs_color, list | tuple) or not self.hs_color:
            return 0.0
        hue = as_number(self.hs_color[0])
        return 0.0 if hue is None else hue

    @property
    def brightness_value(self) -> float:
        """Brightness, or 0.0 if absent or not a number."""
        brightness = as_number(self.brightness)
        return 0.0 if brightness is None else brightness


class LightState(BaseModel):
    """Representation of a Home Assistant light state as returned by `/api/states/<entity_id>`.

    See: https://developers.home-assistant.io/docs/api/rest/
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    entity_id: Any = Field(default=None)
    """The full entity ID, e.g. 'light.living_room'."""

    value: Any = Field(default=None, validation_alias=AliasChoices("state", "value"))
    """The state value, 'on' or 'off' for lights, sometimes 'unavailable' or 'unknown'."""

    attributes: LightAttributes = Field(default_factory=LightAttributes)
    """The attributes of the state."""

    @property
    def is_on(self) -> bool:
        return self.value == "on"

    @model_validator(mode="before")
    @classmethod
    def _validate_payload(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            LOGGER.warning("Expected state to be an object, got %s", type(values).__name__)
            return {}

        if "attributes" in values and not isinstance(values["attributes"], dict):
            LOGGER.warning("Expected attributes to be an object, got %s", type(values["attributes"]).__name__)
            values = {k: v for k, v in values.items() if k != "attributes"}

        return values
