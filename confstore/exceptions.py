"""Exception hierarchy for the configuration store.

All errors raised by confstore inherit from ConfStoreError. The concrete
classes also inherit the matching builtin so callers that catch OSError or
ValueError keep working.
"""

import os


class ConfStoreError(Exception):
    """Base exception for all confstore errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(ConfStoreError, ValueError):
    """Raised when a caller passes an argument the store cannot accept."""


class StoreIOError(ConfStoreError, OSError):
    """Raised when the backing file cannot be read or written.

    Attributes:
        path: File the operation was working on
        operation: "load" or "save"
    """

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str],
        operation: str,
    ) -> None:
        super().__init__(message)
        self.path = os.fspath(path)
        self.operation = operation

    def __str__(self) -> str:
        return f"{self.operation} {self.path}: {self.message}"
