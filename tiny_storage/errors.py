from __future__ import annotations


class StorageError(Exception):
    """Base class for every failure raised by a storage backend."""


class InvalidAccessModeError(StorageError, ValueError):
    """Raised for an access mode outside of r / r+ / rb / rb+."""


class StorageIOError(StorageError, OSError):
    """
    Raised when the backing file cannot be created, opened, read or written.

    The handle that raised it should be discarded.
    """


class StorageParseError(StorageError, ValueError):
    """Raised when stored content is not JSON or not a two-level mapping."""


class StorageConfigError(StorageError, ValueError):
    """Raised for invalid storage settings."""
