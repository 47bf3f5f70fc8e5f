from __future__ import annotations

from .access_mode import AccessMode
from .errors import (
    InvalidAccessModeError,
    StorageConfigError,
    StorageError,
    StorageIOError,
    StorageParseError,
)
from .interfaces import Storage
from .json_storage import JSONStorage
from .json_store import Dataset, parse_dataset, serialize_dataset, validate_dataset
from .memory_storage import MemoryStorage
from .paths import touch
from .settings import StorageSettings, create_storage, get_settings

__all__ = [
    "AccessMode",
    "Dataset",
    "InvalidAccessModeError",
    "JSONStorage",
    "MemoryStorage",
    "Storage",
    "StorageConfigError",
    "StorageError",
    "StorageIOError",
    "StorageParseError",
    "StorageSettings",
    "create_storage",
    "get_settings",
    "parse_dataset",
    "serialize_dataset",
    "touch",
    "validate_dataset",
]
