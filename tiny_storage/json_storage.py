from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import IO, Any

from .access_mode import AccessMode
from .errors import StorageIOError, StorageParseError
from .interfaces import Storage
from .json_store import Dataset, parse_dataset, serialize_dataset, validate_dataset
from .paths import touch

logger = logging.getLogger(__name__)


class JSONStorage(Storage):
    """
    Stores the whole dataset as one pretty-printed JSON document in a single file.

    The file handle is opened on construction and kept until close().
    Every read and write starts from offset zero.

    By default a write does not truncate the file: if the new document is
    shorter than the old one, stale bytes stay behind it and the next read
    raises StorageParseError. Pass truncate_on_write=True to cut the file
    at the end of the new document instead.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        create_dirs: bool = False,
        access_mode: AccessMode | str = AccessMode.READ_WRITE,
        *,
        truncate_on_write: bool = False,
    ):
        self._path = Path(path)
        self._mode = AccessMode.parse(access_mode)
        self._truncate_on_write = truncate_on_write
        self._handle: IO[Any] | None = None

        if self._mode.writable:
            touch(self._path, create_dirs)

        self._open()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def access_mode(self) -> AccessMode:
        return self._mode

    @property
    def closed(self) -> bool:
        return self._handle is None

    def read(self) -> Dataset | None:
        handle = self._require_handle()
        try:
            size = handle.seek(0, io.SEEK_END)
            if size == 0:
                return None
            handle.seek(0)
            raw = handle.read()
        except UnicodeDecodeError as e:
            raise StorageParseError(f"File is not valid UTF-8: {self._path}") from e
        except OSError as e:
            raise StorageIOError(f"Failed to read data from file: {self._path}") from e
        logger.debug("JSONStorage read %d bytes from %s", size, self._path)
        try:
            return parse_dataset(raw)
        except StorageParseError:
            logger.warning("JSONStorage: %s does not hold a valid dataset", self._path)
            raise

    def write(self, data: Dataset) -> None:
        handle = self._require_handle()
        validate_dataset(data)
        text = serialize_dataset(data)
        payload = text.encode("utf-8") if self._mode.binary else text
        try:
            handle.seek(0)
            handle.write(payload)
            if self._truncate_on_write:
                handle.truncate()
            handle.flush()
        except (OSError, ValueError) as e:
            raise StorageIOError(f"Failed to write data to file: {self._path}") from e
        logger.debug("JSONStorage wrote %d chars to %s", len(payload), self._path)

        # Reopen so the next read starts from a fresh handle.
        self.close()
        self._open()

    def close(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()
            logger.debug("JSONStorage closed %s", self._path)

    def __del__(self) -> None:
        # __init__ may have failed before the handle existed
        if getattr(self, "_handle", None) is not None:
            self.close()

    def __repr__(self) -> str:
        return f"JSONStorage(path={str(self._path)!r}, access_mode={self._mode.value!r})"

    def _open(self) -> None:
        try:
            if self._mode.binary:
                self._handle = open(self._path, self._mode.open_mode)
            else:
                self._handle = open(self._path, self._mode.open_mode, encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Could not open file: {self._path}") from e
        logger.debug("JSONStorage opened %s (mode=%s)", self._path, self._mode.value)

    def _require_handle(self) -> IO[Any]:
        if self._handle is None:
            raise StorageIOError(f"Storage is closed: {self._path}")
        return self._handle
