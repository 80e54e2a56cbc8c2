"""Tests for Prometheus metrics."""

from pathlib import Path

import pytest
from prometheus_client import REGISTRY

from confstore.exceptions import InvalidArgumentError, StoreIOError
from confstore.observability.metrics import (
    ENTRIES_LOADED,
    ENTRIES_SAVED,
    FILE_IO_LATENCY,
    STORE_OPERATIONS,
    setup_metrics,
)
from confstore.store import ConfigStore


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestCollectors:
    """Tests for collector definitions."""

    def test_collectors_exist(self) -> None:
        """All collectors are defined."""
        assert STORE_OPERATIONS is not None
        assert FILE_IO_LATENCY is not None
        assert ENTRIES_LOADED is not None
        assert ENTRIES_SAVED is not None

    def test_setup_metrics_precreates_series(self) -> None:
        """Labelled series are visible right after setup."""
        setup_metrics()
        value = REGISTRY.get_sample_value(
            "confstore_operations_total", {"operation": "save", "outcome": "error"}
        )
        assert value is not None


class TestStoreInstrumentation:
    """Tests for metrics recorded by ConfigStore."""

    def test_load_counts(self, tmp_path: Path) -> None:
        """A load bumps the ok counter and the entries counter."""
        path = tmp_path / "in.conf"
        path.write_text("a=1\nb=2\n# c\n", encoding="utf-8")
        ok_before = _sample(
            "confstore_operations_total", {"operation": "load", "outcome": "ok"}
        )
        entries_before = _sample("confstore_entries_loaded_total")

        ConfigStore().load(path)

        assert _sample(
            "confstore_operations_total", {"operation": "load", "outcome": "ok"}
        ) == ok_before + 1
        assert _sample("confstore_entries_loaded_total") == entries_before + 2

    def test_failed_load_counts_error(self, tmp_path: Path) -> None:
        """A failed load bumps the error counter."""
        labels = {"operation": "load", "outcome": "error"}
        before = _sample("confstore_operations_total", labels)

        with pytest.raises(StoreIOError):
            ConfigStore().load(tmp_path / "missing.conf")

        assert _sample("confstore_operations_total", labels) == before + 1

    def test_save_records_latency(self, tmp_path: Path) -> None:
        """A save observes the latency histogram and counts entries."""
        store = ConfigStore()
        store.set("a", "1")
        count_before = _sample(
            "confstore_file_io_latency_seconds_count", {"operation": "save"}
        )
        entries_before = _sample("confstore_entries_saved_total")

        store.save(tmp_path / "out.conf")

        assert _sample(
            "confstore_file_io_latency_seconds_count", {"operation": "save"}
        ) == count_before + 1
        assert _sample("confstore_entries_saved_total") == entries_before + 1

    def test_rejected_set_counts_error(self) -> None:
        """Empty-key writes are counted as set errors."""
        labels = {"operation": "set", "outcome": "error"}
        before = _sample("confstore_operations_total", labels)

        with pytest.raises(InvalidArgumentError):
            ConfigStore().set("", "x")

        assert _sample("confstore_operations_total", labels) == before + 1
