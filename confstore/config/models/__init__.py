"""Configuration section models."""

from confstore.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from confstore.config.models.store import StoreConfig

__all__ = [
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "StoreConfig",
]
