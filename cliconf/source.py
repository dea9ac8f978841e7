"""The interface every alternate input source implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any


class InputSource(ABC):
    """A source of flag values other than the command line.

    ``source`` identifies where the values came from; for a file source it
    is the path of the file.
    """

    @abstractmethod
    def source(self) -> str:
        """Return an identifier for the source."""

    @abstractmethod
    def int(self, name: str) -> int:
        """Return the integer value stored under ``name``."""

    @abstractmethod
    def duration(self, name: str) -> timedelta:
        """Return the duration value stored under ``name``."""

    @abstractmethod
    def float(self, name: str) -> float:
        """Return the float value stored under ``name``."""

    @abstractmethod
    def string(self, name: str) -> str:
        """Return the string value stored under ``name``."""

    @abstractmethod
    def string_slice(self, name: str) -> list[str] | None:
        """Return the list of strings stored under ``name``."""

    @abstractmethod
    def int_slice(self, name: str) -> list[int] | None:
        """Return the list of integers stored under ``name``."""

    @abstractmethod
    def generic(self, name: str) -> Any:
        """Return the generic value stored under ``name``."""

    @abstractmethod
    def bool(self, name: str) -> bool:
        """Return the boolean value stored under ``name``."""

    @abstractmethod
    def is_set(self, name: str) -> bool:
        """Tell whether the source holds a value for ``name``."""