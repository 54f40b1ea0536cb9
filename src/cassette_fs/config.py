"""
Storage configuration.

Settings are read from an optional YAML file and then overridden from
environment variables:
- CASSETTE_FS_BASE_PATH: directory relative names resolve against
- CASSETTE_FS_DIR_MODE: octal permission bits for created directories
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_DIR_MODE = 0o755

ENV_BASE_PATH = "CASSETTE_FS_BASE_PATH"
ENV_DIR_MODE = "CASSETTE_FS_DIR_MODE"


class ConfigurationError(ValueError):
    """Raised when storage settings cannot be parsed or validated."""


class StorageSettings(BaseModel):
    base_path: Path | None = None
    dir_mode: int = DEFAULT_DIR_MODE

    model_config = ConfigDict(extra="forbid")

    @field_validator("dir_mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, v: Any) -> Any:
        # "750" and "0o750" both mean octal
        if isinstance(v, str):
            try:
                return int(v, 8)
            except ValueError as e:
                raise ValueError(f"dir_mode must be an octal string, got {v!r}") from e
        return v

    @field_validator("dir_mode")
    @classmethod
    def check_mode_range(cls, v: int) -> int:
        if not 0 <= v <= 0o777:
            raise ValueError(
                f"dir_mode must be between 0 and 0o777, got {oct(v)} (decimal {v}); "
                "quote the mode ('750') or write a YAML octal literal (0750)"
            )
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in settings file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file must contain a mapping: {path}")

    # Settings may live under a "storage" namespace in a shared config file
    section = data.get("storage", data)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError("The 'storage' section must be a mapping")
    return dict(section)


def load_settings(
    path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> StorageSettings:
    """
    Load and validate storage settings.
    Raises FileNotFoundError if an explicit settings file is missing.
    Raises ConfigurationError if the YAML or any value is invalid.
    """
    if env is None:
        env = os.environ

    data = _read_yaml(path) if path is not None else {}

    if env.get(ENV_BASE_PATH):
        data["base_path"] = env[ENV_BASE_PATH]
    if env.get(ENV_DIR_MODE):
        data["dir_mode"] = env[ENV_DIR_MODE]

    try:
        return StorageSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Storage settings validation failed:\n{e}") from e
