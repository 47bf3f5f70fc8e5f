from __future__ import annotations

from enum import Enum

from .errors import InvalidAccessModeError


class AccessMode(str, Enum):
    """
    How the backing file is opened. Fixed for the lifetime of a handle.
    """

    READ = "r"
    READ_WRITE = "r+"
    READ_BINARY = "rb"
    READ_WRITE_BINARY = "rb+"

    @classmethod
    def parse(cls, value: AccessMode | str) -> AccessMode:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidAccessModeError(f"Invalid access mode: {value!r}") from None

    @property
    def binary(self) -> bool:
        return "b" in self.value

    @property
    def writable(self) -> bool:
        return any(c in self.value for c in "+wa")

    @property
    def open_mode(self) -> str:
        return self.value
