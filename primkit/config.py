# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Settings for the primkit CLI.

Values come from, in increasing priority: field defaults, an optional YAML
file, then ``PRIMKIT_*`` environment variables.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from primkit.core.constants import DEFAULT_TRIM_CHARS
from primkit.core.exceptions import ConfigurationError
from primkit.logging import LOG_LEVELS


DEFAULT_SETTINGS_FILE = Path("primkit.yaml")


class Settings(BaseSettings):
    """primkit settings with environment variable support.

    All settings can be overridden via environment variables with the
    PRIMKIT_ prefix. Example: PRIMKIT_LOG_LEVEL=DEBUG.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRIMKIT_",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum log level for the CLI",
    )
    trim_chars: str = Field(
        default=DEFAULT_TRIM_CHARS,
        min_length=1,
        description="Default set of characters removed by trim commands",
    )
    format_replace_all: bool = Field(
        default=False,
        description="Replace every occurrence of a placeholder, not just the first",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}'. Valid options: {list(LOG_LEVELS)}")
        return level


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed settings file: {e}", path=str(path)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must contain a mapping", path=str(path))
    return data


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from a YAML file and the environment.

    Resolution order for the file:
    1. Explicit config_path parameter (if provided)
    2. PRIMKIT_SETTINGS environment variable (if set)
    3. Default: 'primkit.yaml' in the current directory, skipped if absent

    Environment variables override values from the file.

    Args:
        config_path: Optional explicit path to the settings file.

    Returns:
        Validated settings.

    Raises:
        ConfigurationError: If an explicitly requested file does not exist,
            the YAML is malformed, or validation fails.
    """
    required = True
    if config_path is None:
        env_path = os.environ.get("PRIMKIT_SETTINGS")
        if env_path:
            config_path = Path(env_path)
        else:
            config_path = DEFAULT_SETTINGS_FILE
            required = False

    data: dict[str, Any] = {}
    if config_path.exists():
        data = _read_yaml(config_path)
    elif required:
        raise ConfigurationError("Settings file not found", path=str(config_path))

    # Environment wins over the file; init kwargs would otherwise win
    prefix = Settings.model_config.get("env_prefix", "")
    env_names = {name.upper() for name in os.environ}
    data = {k: v for k, v in data.items() if f"{prefix}{k}".upper() not in env_names}

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}", path=str(config_path)) from e
