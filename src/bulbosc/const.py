from typing import Literal

LOG_LEVELS = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
"""Log levels accepted by the configuration."""

AVATAR_PARAMETER_PREFIX = "/avatar/parameters"

OSC_ADDRESS_ON = f"{AVATAR_PARAMETER_PREFIX}/on"
OSC_ADDRESS_HUE = f"{AVATAR_PARAMETER_PREFIX}/Color"
OSC_ADDRESS_BRIGHTNESS = f"{AVATAR_PARAMETER_PREFIX}/brightness"

HUE_RANGE = (0.0, 360.0)
"""Native hue range reported by Home Assistant `hs_color`, in degrees."""

BRIGHTNESS_RANGE = (0.0, 255.0)
"""Native brightness range reported by Home Assistant."""

NORMALIZED_RANGE = (0.0, 1.0)

DEFAULT_VRCHAT_IP = "127.0.0.1"
DEFAULT_VRCHAT_PORT = 9000
DEFAULT_HOME_ASSISTANT_PORT = 8123
DEFAULT_CONFIG_FILE = "settings.yaml"
