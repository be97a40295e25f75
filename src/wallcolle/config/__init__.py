"""Configuration models and loaders for wallcolle."""

from .loader import ConfigError, DEFAULT_CONFIG_NAME, OUTPUT_ROOT_ENV, dump_example_config, load_config
from .models import LoggingConfig, RenderConfig, RuntimeConfig, WallcolleConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_NAME",
    "LoggingConfig",
    "OUTPUT_ROOT_ENV",
    "RenderConfig",
    "RuntimeConfig",
    "WallcolleConfig",
    "dump_example_config",
    "load_config",
]
