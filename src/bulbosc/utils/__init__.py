from .range_utils import translate
from .url_utils import build_state_url, normalize_host

__all__ = [
    "build_state_url",
    "normalize_host",
    "translate",
]
