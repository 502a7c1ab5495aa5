"""Configuration loading."""

from create_stylish.config.loader import get_home_config_path, load_config
from create_stylish.config.schema import DEFAULT_CONFIG, StylishConfig

__all__ = [
    "DEFAULT_CONFIG",
    "StylishConfig",
    "get_home_config_path",
    "load_config",
]
