"""Configuration module for corerpc."""

from corerpc.config.loader import get_config_path, load_settings
from corerpc.config.schema import DEFAULT_PORTS, RpcSettings
from corerpc.config.access import clear_settings_cache, get_settings

__all__ = [
    "RpcSettings",
    "DEFAULT_PORTS",
    "load_settings",
    "get_config_path",
    "get_settings",
    "clear_settings_cache",
]
