"""Input sources read from TOML documents."""

from __future__ import annotations

import tomllib
from collections.abc import Callable
from typing import Any

from cliconf.loader import load_data_from
from cliconf.map_source import MapInputSource, default_input_source
from cliconf.source import InputSource


def _unmarshal_map(table: dict[str, Any]) -> dict[str, Any]:
    """Keep the value types a map source understands; reject the rest."""
    result: dict[str, Any] = {}
    for key, value in table.items():
        if isinstance(value, (bool, str, int, float, list)):
            result[key] = value
        elif isinstance(value, dict):
            result[key] = _unmarshal_map(value)
        else:
            raise ValueError(f"Unsupported: type = {type(value).__name__}")
    return result


def new_toml_source_from_file(file: str) -> MapInputSource:
    """Load a TOML file (or http(s) URL) into a map-backed input source."""
    try:
        data = load_data_from(file)
        values = _unmarshal_map(tomllib.loads(data.decode("utf-8")))
    except (OSError, ValueError) as exc:
        raise ValueError(
            f"Unable to load TOML file '{file}': inner error: \n'{exc}'"
        ) from exc
    return MapInputSource(file, values)


def new_toml_source_from_flag_func(
    flag_file_name: str,
) -> Callable[[Any], InputSource]:
    """Return a factory reading TOML from the file named by a flag.

    When the flag is not set on the context the factory yields an empty
    source.
    """

    def create(context: Any) -> InputSource:
        if context.is_set(flag_file_name):
            return new_toml_source_from_file(context.string(flag_file_name))
        return default_input_source()

    return create