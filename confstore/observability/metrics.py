"""Prometheus metrics for the configuration store.

Only file operations and rejected writes are counted; in-memory reads are
left uninstrumented.
"""

from prometheus_client import Counter, Histogram

# Operation metrics
STORE_OPERATIONS = Counter(
    "confstore_operations_total",
    "Total number of store operations by outcome",
    labelnames=["operation", "outcome"],
)

FILE_IO_LATENCY = Histogram(
    "confstore_file_io_latency_seconds",
    "Latency of load and save, including time spent holding the lock",
    labelnames=["operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

# Entry metrics
ENTRIES_LOADED = Counter(
    "confstore_entries_loaded_total",
    "Total number of entries read from files",
)

ENTRIES_SAVED = Counter(
    "confstore_entries_saved_total",
    "Total number of entries written to files",
)


def setup_metrics() -> None:
    """Initialize metrics configuration.

    Called at startup. Collectors register themselves on import, so this
    pre-creates the labelled series to make them visible before first use.
    """
    for operation in ("load", "save"):
        FILE_IO_LATENCY.labels(operation=operation)
        for outcome in ("ok", "error"):
            STORE_OPERATIONS.labels(operation=operation, outcome=outcome)
    STORE_OPERATIONS.labels(operation="set", outcome="error")
