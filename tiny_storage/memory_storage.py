from __future__ import annotations

import copy

from .interfaces import Storage
from .json_store import Dataset


class MemoryStorage(Storage):
    """
    Keeps the dataset in process memory. Nothing survives the process.
    """

    def __init__(self) -> None:
        self._memory: Dataset | None = None

    def read(self) -> Dataset | None:
        if self._memory is None:
            return None
        return copy.deepcopy(self._memory)

    def write(self, data: Dataset) -> None:
        self._memory = copy.deepcopy(data)
