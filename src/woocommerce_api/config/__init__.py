"""Client configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_str
from .settings import WooCommerceConfig, load_config_from_env

__all__ = [
    "ConfigurationError",
    "WooCommerceConfig",
    "env_bool",
    "env_float",
    "env_str",
    "load_config_from_env",
]
