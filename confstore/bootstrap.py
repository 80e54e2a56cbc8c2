"""Bootstrap module for easy confstore setup.

Builds a ready-to-use store from configuration:
- Loading settings from TOML files and CONFSTORE_* environment variables
- Configuring structured logging and metrics
- Creating the ConfigStore and loading the configured file, if any

Example usage:

    from confstore.bootstrap import bootstrap

    store = bootstrap()
    port = store.get_with_default("server.port", "8080")
"""

from confstore.config import get_settings
from confstore.config.settings import Settings
from confstore.observability.logging import get_logger, setup_logging
from confstore.observability.metrics import setup_metrics
from confstore.store import ConfigStore

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> ConfigStore:
    """Create a ConfigStore wired up from settings.

    Args:
        settings: Settings to use. Loaded with get_settings() when omitted.

    Returns:
        A store, already populated when settings.store.path is set

    Raises:
        StoreIOError: If the configured file cannot be loaded
    """
    if settings is None:
        settings = get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_secrets=log_config.redact_secrets,
    )

    if settings.observability.metrics.enabled:
        setup_metrics()

    store = ConfigStore(encoding=settings.store.encoding)
    if settings.store.path:
        store.load(settings.store.path)

    logger.info(
        "store_bootstrapped",
        app_name=settings.app_name,
        path=settings.store.path,
        entries=len(store),
    )
    return store
