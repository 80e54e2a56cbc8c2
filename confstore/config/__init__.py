"""Configuration loading for confstore.

Settings are loaded from TOML files with environment variable overrides.

Usage:
    from confstore.config import get_settings

    settings = get_settings()
    encoding = settings.store.encoding
"""

from functools import lru_cache

from confstore.config.loader import load_config
from confstore.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read the TOML files once and build Settings from them.

    Cached for the process; use reload_settings() after the files change.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
