import logging

from .config import BulbOscConfig, HomeAssistantConfig, load_config
from .core import Bridge, LoopContext, run_cycle, run_forever
from .dispatch import maybe_dispatch, update_avatar
from .models import BulbState
from .osc import OscSender
from .providers import BulbStateProvider, HomeAssistantProvider, create_provider, register_provider
from .utils import translate

logging.getLogger("bulbosc").addHandler(logging.NullHandler())

__all__ = [
    "Bridge",
    "BulbOscConfig",
    "BulbState",
    "BulbStateProvider",
    "HomeAssistantConfig",
    "HomeAssistantProvider",
    "LoopContext",
    "OscSender",
    "create_provider",
    "load_config",
    "maybe_dispatch",
    "register_provider",
    "run_cycle",
    "run_forever",
    "translate",
    "update_avatar",
]
