"""TOML settings loader.

Settings come from ``default.toml`` plus an optional per-environment file
in the same directory, merged table by table.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "CONFSTORE_CONFIG_DIR"
ENVIRONMENT_ENV = "CONFSTORE_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_FILE = "default.toml"

# How many parent directories to walk when looking for config/
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the settings directory.

    CONFSTORE_CONFIG_DIR wins when set and must exist. Otherwise the
    nearest ``config/`` directory at or above the working directory is used,
    falling back to a relative ``config`` path.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    cwd = Path.cwd()
    for directory in [cwd, *cwd.parents][:SEARCH_DEPTH]:
        candidate = directory / "config"
        if candidate.is_dir():
            return candidate

    return Path("config")


def get_environment() -> str:
    """Name of the active environment, from CONFSTORE_ENV."""
    return os.environ.get(ENVIRONMENT_ENV) or DEFAULT_ENVIRONMENT


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base.

    Tables present on both sides merge recursively; anything else in
    override replaces the base value.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Read default.toml and the environment's overrides.

    Args:
        config_dir: Directory holding the TOML files (default: get_config_dir())
        environment: Environment name (default: get_environment())

    Returns:
        Merged settings dictionary

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    config_dir = config_dir if config_dir is not None else get_config_dir()
    environment = environment or get_environment()

    default_path = config_dir / DEFAULT_FILE
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/{DEFAULT_FILE} or set {CONFIG_DIR_ENV}."
        )
    config = load_toml(default_path)

    env_path = config_dir / f"{environment}.toml"
    if env_path.is_file():
        config = deep_merge(config, load_toml(env_path))

    return config
