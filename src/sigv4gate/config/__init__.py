"""Configuration loading, schema, and defaults."""

from sigv4gate.config.loader import ConfigError, load_config
from sigv4gate.config.schema import Sigv4GateConfig

__all__ = [
    "ConfigError",
    "Sigv4GateConfig",
    "load_config",
]
