from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .access_mode import AccessMode
from .errors import StorageConfigError
from .interfaces import Storage
from .json_storage import JSONStorage
from .memory_storage import MemoryStorage

BACKENDS = ("json", "memory")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class StorageSettings:
    backend: str = "json"

    # JSON backend only
    path: str = "data.json"
    create_dirs: bool = False
    access_mode: AccessMode = AccessMode.READ_WRITE
    truncate_on_write: bool = False


def get_settings(env_file: str | os.PathLike[str] | None = None) -> StorageSettings:
    if env_file is not None:
        load_dotenv(env_file, override=False)

    backend = os.getenv("STORAGE_BACKEND", "json").strip().lower()
    if backend not in BACKENDS:
        raise StorageConfigError(f"Unknown STORAGE_BACKEND: {backend!r} (expected one of {BACKENDS})")

    return StorageSettings(
        backend=backend,
        path=os.getenv("STORAGE_PATH", "data.json"),
        create_dirs=_env_bool("STORAGE_CREATE_DIRS", False),
        access_mode=AccessMode.parse(os.getenv("STORAGE_ACCESS_MODE", "r+").strip()),
        truncate_on_write=_env_bool("STORAGE_TRUNCATE_ON_WRITE", False),
    )


def create_storage(settings: StorageSettings | None = None) -> Storage:
    """
    Build the backend selected by `settings` (read from the environment when omitted).
    """
    s = settings or get_settings()
    if s.backend == "memory":
        return MemoryStorage()
    if s.backend == "json":
        return JSONStorage(
            s.path,
            s.create_dirs,
            s.access_mode,
            truncate_on_write=s.truncate_on_write,
        )
    raise StorageConfigError(f"Unknown storage backend: {s.backend!r}")
