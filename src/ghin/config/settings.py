"""Configuration settings for the GHIN client."""

from pathlib import Path
from typing import Any

import pydantic
import yaml

from ghin.config.env import EnvConfig
from ghin.exceptions import ConfigError
from ghin.exceptions import validation_details
from ghin.models.config import ClientConfig


def _load_config_file(config_file: Path) -> dict[str, Any]:
    """Load configuration values from a YAML file."""
    try:
        with open(config_file, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}", {"error": str(e)}) from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            f"Configuration file {config_file} must contain a mapping",
            {"config_type": type(loaded).__name__}
        )

    # Allow the settings to live under a top-level "ghin" key
    section = loaded.get("ghin", loaded)
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid 'ghin' section in {config_file}")
    return dict(section)

def load_config(config_file: str | Path | None = None, **overrides: Any) -> ClientConfig:
    """
    Load client configuration.

    Values are layered: the YAML file (``config_file`` or $GHIN_CONFIG_FILE),
    then GHIN_* environment variables, then keyword overrides.

    Args:
        config_file: Optional path to a YAML configuration file
        **overrides: Explicit ClientConfig field values

    Returns:
        Validated ClientConfig

    Raises:
        ConfigError: If the file is missing or unreadable, or the result is invalid
    """
    config: dict[str, Any] = {}

    if config_file is not None:
        path = Path(config_file)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        config.update(_load_config_file(path))
    else:
        env_file = EnvConfig.get_config_file()
        if env_file and Path(env_file).exists():
            config.update(_load_config_file(Path(env_file)))

    EnvConfig.update_config_from_env(config)
    config.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ClientConfig.model_validate(config)
    except pydantic.ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {e.error_count()} errors",
            validation_details(e)
        ) from e
