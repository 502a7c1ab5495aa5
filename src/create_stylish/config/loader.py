"""Configuration file loading and merging."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from create_stylish.config.schema import DEFAULT_CONFIG, StylishConfig
from create_stylish.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"

# Environment variable -> config key
ENV_OVERRIDES: dict[str, str] = {
    "CREATE_STYLISH_KIT_REPOSITORY": "kit_repository",
    "CREATE_STYLISH_KIT_REF": "kit_ref",
    "CREATE_STYLISH_TEMPLATE": "default_template",
    "CREATE_STYLISH_TIMEOUT": "timeout",
}


def get_home_config_path() -> Path:
    """Get path to global config: ~/.create-stylish/config.yaml."""
    return Path.home() / ".create-stylish" / CONFIG_FILENAME


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found or empty.

    Raises ConfigError if the file cannot be read, is not valid YAML or
    is not a mapping.
    """
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    result: dict[str, object] = data
    return result


def load_env_config(environ: Mapping[str, str]) -> StylishConfig:
    """Build a config layer from CREATE_STYLISH_* environment variables."""
    data = {key: environ[var] for var, key in ENV_OVERRIDES.items() if environ.get(var)}
    return StylishConfig.from_dict(data)


def load_config(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> StylishConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.create-stylish/config.yaml)
    3. CREATE_STYLISH_* environment variables
    """
    config = DEFAULT_CONFIG

    config_path = path or get_home_config_path()
    file_data = load_yaml_config(config_path)
    if file_data:
        logger.debug("Loaded config from %s", config_path)
        config = config.merge(StylishConfig.from_dict(file_data))

    env = os.environ if environ is None else environ
    return config.merge(load_env_config(env))

