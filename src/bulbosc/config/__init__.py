from .core_config import BulbOscConfig, HomeAssistantConfig, load_config

__all__ = ["BulbOscConfig", "HomeAssistantConfig", "load_config"]
