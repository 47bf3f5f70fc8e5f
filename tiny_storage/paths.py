from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import StorageIOError

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def touch(path: str | os.PathLike[str], create_dirs: bool = False) -> Path:
    """
    Make sure `path` exists without changing what is already in it.

    With `create_dirs`, missing parent directories are created first.
    """
    target = Path(path)
    try:
        if create_dirs and not target.parent.exists():
            logger.info("Creating directory %s", target.parent)
            ensure_dir(target.parent)
        # append mode creates the file but never truncates it
        with target.open("a", encoding="utf-8"):
            pass
    except OSError as e:
        raise StorageIOError(f"Failed to create or open the file: {target}") from e
    return target
