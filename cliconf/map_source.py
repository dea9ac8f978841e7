"""An input source backed by an in-memory mapping."""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal
from typing import Any

from cliconf.source import InputSource

_MISSING = object()

_NANOSECONDS_PER_UNIT = {
    "ns": Decimal(1),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),
    "μs": Decimal(1_000),
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60_000_000_000),
    "h": Decimal(3_600_000_000_000),
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|h|m|s)")

_TYPE_NAMES = {
    bool: "bool",
    int: "int",
    float: "float64",
    str: "string",
    timedelta: "Duration",
}


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``."""
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(rest):
        match = _COMPONENT.match(rest, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        number, unit = match.groups()
        total += Decimal(number) * _NANOSECONDS_PER_UNIT[unit]
        pos = match.end()

    micros = total / 1000
    return timedelta(microseconds=float(-micros if negative else micros))


def _type_name(value: Any) -> str:
    if value is None:
        return ""
    return _TYPE_NAMES.get(type(value), type(value).__name__)


class IncorrectTypeError(TypeError):
    """A stored value does not have the type a flag expects."""

    def __init__(self, name: str, expected: str, value: Any) -> None:
        self.name = name
        self.expected = expected
        self.actual = _type_name(value)
        super().__init__(
            f"Mismatched type for flag '{name}'. "
            f"Expected '{expected}' but actual is '{self.actual}'"
        )


def _nested_value(name: str, tree: dict) -> Any:
    """Follow a dotted name through nested mappings."""
    sections = name.split(".")
    if len(sections) < 2:
        return _MISSING
    node = tree
    for section in sections[:-1]:
        child = node.get(section, _MISSING)
        if not isinstance(child, dict):
            return _MISSING
        node = child
    return node.get(sections[-1], _MISSING)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_generic(value: Any) -> bool:
    return callable(getattr(value, "set", None))


class MapInputSource(InputSource):
    """Serves flag values from a mapping, with dotted names reaching into nested mappings."""

    def __init__(self, file: str = "", value_map: dict | None = None) -> None:
        self._file = file
        self._values = value_map if value_map is not None else {}

    def _lookup(self, name: str) -> Any:
        if name in self._values:
            return self._values[name]
        return _nested_value(name, self._values)

    def source(self) -> str:
        return self._file

    def int(self, name: str) -> int:
        value = self._lookup(name)
        if value is _MISSING:
            return 0
        if not _is_int(value):
            raise IncorrectTypeError(name, "int", value)
        return value

    def duration(self, name: str) -> timedelta:
        value = self._lookup(name)
        if value is _MISSING:
            return timedelta(0)
        if isinstance(value, timedelta):
            return value
        if isinstance(value, str):
            try:
                return parse_duration(value)
            except ValueError:
                pass
        raise IncorrectTypeError(name, "duration", value)

    def float(self, name: str) -> float:
        value = self._lookup(name)
        if value is _MISSING:
            return 0.0
        if not isinstance(value, float):
            raise IncorrectTypeError(name, "float64", value)
        return value

    def string(self, name: str) -> str:
        value = self._lookup(name)
        if value is _MISSING:
            return ""
        if not isinstance(value, str):
            raise IncorrectTypeError(name, "string", value)
        return value

    def _items(self, name: str, expected: str, check) -> list | None:
        value = self._lookup(name)
        if value is _MISSING:
            return None
        if not isinstance(value, (list, tuple)):
            raise IncorrectTypeError(name, "list", value)
        for index, item in enumerate(value):
            if not check(item):
                raise IncorrectTypeError(f"{name}[{index}]", expected, item)
        return list(value)

    def string_slice(self, name: str) -> list[str] | None:
        return self._items(name, "string", lambda item: isinstance(item, str))

    def int_slice(self, name: str) -> list[int] | None:
        return self._items(name, "int", _is_int)

    def generic(self, name: str) -> Any:
        value = self._lookup(name)
        if value is _MISSING:
            return None
        if not _is_generic(value):
            raise IncorrectTypeError(name, "cli.Generic", value)
        return value

    def bool(self, name: str) -> bool:
        value = self._lookup(name)
        if value is _MISSING:
            return False
        if not isinstance(value, bool):
            raise IncorrectTypeError(name, "bool", value)
        return value

    def is_set(self, name: str) -> bool:
        return self._lookup(name) is not _MISSING


def default_input_source() -> MapInputSource:
    """Return an empty source with no file."""
    return MapInputSource("", {})