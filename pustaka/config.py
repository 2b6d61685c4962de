"""Application configuration loaded from an env file and the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

_CONFIG_NAMES = ("app.env", "app")
_KEYS = {"dsn": "DSN", "http_server_address": "HTTP_SERVER_ADDRESS"}


class ConfigError(Exception):
    """Raised when the configuration file cannot be found or read."""


@dataclass(frozen=True)
class Config:
    """Settings of the application."""

    dsn: str = ""
    http_server_address: str = ""


def _find_config_file(directory: Path) -> Path:
    for name in _CONFIG_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise ConfigError(f'config file "app" not found in {directory}')


def load_config(path) -> Config:
    """Read ``app.env`` from *path*; non-empty environment variables take precedence."""
    config_file = _find_config_file(Path(path))
    try:
        raw = dotenv_values(config_file)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read {config_file}: {exc}") from exc

    file_values = {key.upper(): value or "" for key, value in raw.items()}
    settings = {}
    for field_name, key in _KEYS.items():
        env_value = os.environ.get(key)
        settings[field_name] = env_value if env_value else file_values.get(key, "")
    return Config(**settings)