"""Environment variable handling for configuration."""

import os
from typing import Any


class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to ClientConfig fields
    ENV_MAPPING = {
        'GHIN_USERNAME': 'username',
        'GHIN_PASSWORD': 'password',
        'GHIN_BASE_URL': 'base_url',
        'GHIN_CONNECT_TIMEOUT': 'connect_timeout',
        'GHIN_READ_TIMEOUT': 'read_timeout',
        'GHIN_TOKEN_TTL': 'token_ttl',
    }

    CONFIG_FILE_VAR = 'GHIN_CONFIG_FILE'

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Update configuration dictionary with environment variables.

        Values stay strings; the config schema converts them.

        Args:
            config: Configuration dictionary to update
        """
        for env_var, key in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                config[key] = value

    @classmethod
    def get_config_file(cls) -> str | None:
        """Get configuration file path from environment."""
        return cls.get_env_value(cls.CONFIG_FILE_VAR)
