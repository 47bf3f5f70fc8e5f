from __future__ import annotations

from types import TracebackType
from typing import Protocol

from .json_store import Dataset


class Storage(Protocol):
    """
    Whole-dataset storage: every read returns the full dataset, every write replaces it.
    """

    def read(self) -> Dataset | None:
        """Return the stored dataset, or None if nothing was written yet."""
        ...

    def write(self, data: Dataset) -> None:
        """Replace the stored dataset."""
        ...

    def close(self) -> None:
        """Release held resources. Safe to call more than once."""
        return None

    def __enter__(self) -> Storage:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
