from .bulb_state import BulbState
from .light import LightAttributes, LightState

__all__ = ["BulbState", "LightAttributes", "LightState"]
