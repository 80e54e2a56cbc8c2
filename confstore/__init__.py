"""confstore: thread-safe key-value configuration store.

Holds string settings in memory behind a reader/writer lock and persists
them as ``key = value`` text files.
"""

from confstore.exceptions import ConfStoreError, InvalidArgumentError, StoreIOError
from confstore.store import ConfigStore

__version__ = "0.1.0"
__all__ = [
    "ConfStoreError",
    "ConfigStore",
    "InvalidArgumentError",
    "StoreIOError",
    "__version__",
]
