"""Input sources read from JSON documents."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import timedelta
from typing import IO, Any

from cliconf.loader import load_data_from
from cliconf.map_source import default_input_source
from cliconf.source import InputSource


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _get_value(key: str, tree: dict[str, Any]) -> Any:
    """Follow a dotted key through nested JSON objects."""
    keys = key.split(".")
    working: Any = tree
    value: Any = None
    for index, part in enumerate(keys):
        if not isinstance(working, dict) or part not in working:
            raise KeyError(f"missing key {key!r}")
        value = working[part]
        working = value
        if not isinstance(value, dict) and index < len(keys) - 1:
            raise TypeError(
                f"unexpected intermediate value at {part!r} segment of "
                f"{key!r}: {_type_name(value)}"
            )
    return value


def _unexpected(value: Any, name: str) -> TypeError:
    return TypeError(f"unexpected type {_type_name(value)} for {name!r}")


class JSONSource(InputSource):
    """Serves flag values from a decoded JSON object."""

    def __init__(self, deserialized: dict[str, Any], file: str = "") -> None:
        self._file = file
        self._data = deserialized

    def source(self) -> str:
        return self._file

    def int(self, name: str) -> int:
        value = _get_value(name, self._data)
        if _is_int(value):
            return value
        if isinstance(value, float):
            return int(value)
        raise _unexpected(value, name)

    def duration(self, name: str) -> timedelta:
        value = _get_value(name, self._data)
        if not isinstance(value, timedelta):
            raise _unexpected(value, name)
        return value

    def float(self, name: str) -> float:
        value = _get_value(name, self._data)
        if isinstance(value, float) or _is_int(value):
            return float(value)
        raise _unexpected(value, name)

    def string(self, name: str) -> str:
        value = _get_value(name, self._data)
        if not isinstance(value, str):
            raise _unexpected(value, name)
        return value

    def _items(self, name: str, check: Callable[[Any], bool], kind: str) -> list:
        value = _get_value(name, self._data)
        if not isinstance(value, list):
            raise _unexpected(value, name)
        for item in value:
            if not check(item):
                raise TypeError(
                    f"unexpected item type {_type_name(item)} in list of {kind} "
                    f"for {name!r}"
                )
        return list(value)

    def string_slice(self, name: str) -> list[str]:
        return self._items(name, lambda item: isinstance(item, str), "str")

    def int_slice(self, name: str) -> list[int]:
        return self._items(name, _is_int, "int")

    def generic(self, name: str) -> Any:
        value = _get_value(name, self._data)
        if not callable(getattr(value, "set", None)):
            raise _unexpected(value, name)
        return value

    def bool(self, name: str) -> bool:
        value = _get_value(name, self._data)
        if not isinstance(value, bool):
            raise _unexpected(value, name)
        return value

    def is_set(self, name: str) -> bool:
        try:
            _get_value(name, self._data)
        except (KeyError, TypeError):
            return False
        return True


def new_json_source(data: bytes | str) -> JSONSource:
    """Build a source from raw JSON holding an object at the top level."""
    decoded = json.loads(data)
    if decoded is None:
        decoded = {}
    if not isinstance(decoded, dict):
        raise ValueError(
            f"expected a JSON object at the top level, got {_type_name(decoded)}"
        )
    return JSONSource(decoded)


def new_json_source_from_file(path: str) -> JSONSource:
    """Build a source from a JSON file or http(s) URL."""
    return new_json_source(load_data_from(path))


def new_json_source_from_reader(reader: IO[Any]) -> JSONSource:
    """Build a source from everything a readable stream yields."""
    return new_json_source(reader.read())


def new_json_source_from_flag_func(flag: str) -> Callable[[Any], InputSource]:
    """Return a factory reading JSON from the file named by a flag.

    When the flag is not set on the context the factory yields an empty
    source.
    """

    def create(context: Any) -> InputSource:
        if context.is_set(flag):
            return new_json_source_from_file(context.string(flag))
        return default_input_source()

    return create