"""Thread-safe in-memory key-value store with file persistence.

Entries are plain strings. Files use the line format from
:mod:`confstore.fileformat`: ``key=value`` lines, ``#`` comments and blank
lines ignored on read, ``key = value`` written back.
"""

import os
import time
from typing import Self

from confstore.exceptions import InvalidArgumentError, StoreIOError
from confstore.fileformat import format_entry, parse_line
from confstore.locking import ReadWriteLock
from confstore.observability.logging import get_logger
from confstore.observability.metrics import (
    ENTRIES_LOADED,
    ENTRIES_SAVED,
    FILE_IO_LATENCY,
    STORE_OPERATIONS,
)

logger = get_logger(__name__)

StrPath = str | os.PathLike[str]


class ConfigStore:
    """String-to-string mapping guarded by a reader/writer lock.

    Reads (get, get_with_default, has, get_all, save) share the lock.
    Writes (set, delete, load) hold it exclusively, load for the whole
    file read.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        """Initialize an empty store."""
        self._entries: dict[str, str] = {}
        self._lock = ReadWriteLock()
        self._encoding = encoding

    @classmethod
    def from_file(cls, path: StrPath, *, encoding: str = "utf-8") -> Self:
        """Create a store and load path into it."""
        store = cls(encoding=encoding)
        store.load(path)
        return store

    @property
    def encoding(self) -> str:
        return self._encoding

    def load(self, path: StrPath) -> None:
        """Merge the entries of a file into the store.

        Later lines override earlier ones and keys absent from the file are
        left untouched. Entries applied before a read failure are kept.

        Raises:
            StoreIOError: If the file cannot be opened, read, or decoded
        """
        started = time.perf_counter()
        entries_read = 0
        lines_skipped = 0

        with self._lock.write_locked():
            try:
                # Only \n ends a line; a lone \r stays in the value
                with open(path, encoding=self._encoding, newline="\n") as f:
                    for line in f:
                        entry = parse_line(line)
                        if entry is None:
                            lines_skipped += 1
                            continue
                        key, value = entry
                        self._entries[key] = value
                        entries_read += 1
            except (OSError, UnicodeDecodeError) as e:
                self._record_failure("load", path, e, started)
                raise StoreIOError(str(e), path, "load") from e
            total = len(self._entries)

        self._record_success("load", started)
        ENTRIES_LOADED.inc(entries_read)
        logger.info(
            "config_loaded",
            path=os.fspath(path),
            entries_read=entries_read,
            lines_skipped=lines_skipped,
            total_entries=total,
        )

    def get(self, key: str) -> str:
        """Return the value for key, or an empty string when absent."""
        with self._lock.read_locked():
            return self._entries.get(key, "")

    def get_with_default(self, key: str, default: str) -> str:
        """Return the value for key, or default when absent."""
        with self._lock.read_locked():
            return self._entries.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite an entry.

        Raises:
            InvalidArgumentError: If key is empty
        """
        if key == "":
            STORE_OPERATIONS.labels(operation="set", outcome="error").inc()
            logger.warning("config_set_rejected", reason="empty_key")
            raise InvalidArgumentError("key cannot be empty")

        with self._lock.write_locked():
            self._entries[key] = value

    def has(self, key: str) -> bool:
        """Return whether key is present."""
        with self._lock.read_locked():
            return key in self._entries

    def delete(self, key: str) -> None:
        """Remove key if present. Absent keys are ignored."""
        with self._lock.write_locked():
            existed = key in self._entries
            if existed:
                del self._entries[key]
        logger.debug("config_key_deleted", key=key, existed=existed)

    def get_all(self) -> dict[str, str]:
        """Return a copy of every entry."""
        with self._lock.read_locked():
            return dict(self._entries)

    def save(self, path: StrPath) -> None:
        """Write every entry to path, replacing its previous content.

        Raises:
            StoreIOError: If the file cannot be created, written, or flushed
        """
        started = time.perf_counter()

        with self._lock.read_locked():
            try:
                with open(path, "w", encoding=self._encoding, newline="\n") as f:
                    for key, value in self._entries.items():
                        f.write(format_entry(key, value))
                    f.flush()
            except (OSError, UnicodeEncodeError) as e:
                self._record_failure("save", path, e, started)
                raise StoreIOError(str(e), path, "save") from e
            written = len(self._entries)

        self._record_success("save", started)
        ENTRIES_SAVED.inc(written)
        logger.info("config_saved", path=os.fspath(path), entries_written=written)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock.read_locked():
            return key in self._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self)}, encoding={self._encoding!r})"

    def _record_success(self, operation: str, started: float) -> None:
        FILE_IO_LATENCY.labels(operation=operation).observe(time.perf_counter() - started)
        STORE_OPERATIONS.labels(operation=operation, outcome="ok").inc()

    def _record_failure(
        self,
        operation: str,
        path: StrPath,
        error: Exception,
        started: float,
    ) -> None:
        FILE_IO_LATENCY.labels(operation=operation).observe(time.perf_counter() - started)
        STORE_OPERATIONS.labels(operation=operation, outcome="error").inc()
        logger.warning(
            f"config_{operation}_failed",
            path=os.fspath(path),
            error=str(error),
            error_type=type(error).__name__,
        )
