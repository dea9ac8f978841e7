"""Positional command-line arguments left over after flag parsing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Args:
    """An immutable view over positional arguments."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._values: tuple[str, ...] = tuple(values)

    def get(self, n: int) -> str:
        """Return the nth argument, or an empty string if there is none."""
        if 0 <= n < len(self._values):
            return self._values[n]
        return ""

    def first(self) -> str:
        """Return the first argument, or an empty string."""
        return self.get(0)

    def tail(self) -> list[str]:
        """Return every argument but the first, as a new list."""
        return list(self._values[1:])

    def present(self) -> bool:
        """Tell whether any arguments are present."""
        return bool(self._values)

    def slice(self) -> list[str]:
        """Return a copy of all arguments."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Args({list(self._values)!r})"