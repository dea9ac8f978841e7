"""Input sources read from YAML documents."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import yaml

from cliconf.loader import load_data_from
from cliconf.map_source import MapInputSource, default_input_source
from cliconf.source import InputSource


def new_yaml_source_from_file(file: str) -> MapInputSource:
    """Load a YAML file (or http(s) URL) into a map-backed input source."""
    try:
        data = load_data_from(file)
        values = yaml.safe_load(data)
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ValueError(
                f"expected a mapping at the top level, got {type(values).__name__}"
            )
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ValueError(
            f"Unable to load Yaml file '{file}': inner error: \n'{exc}'"
        ) from exc
    return MapInputSource(file, values)


def new_yaml_source_from_flag_func(
    flag_file_name: str,
) -> Callable[[Any], InputSource]:
    """Return a factory reading YAML from the file named by a flag.

    When the flag is not set on the context the factory yields an empty
    source.
    """

    def create(context: Any) -> InputSource:
        if context.is_set(flag_file_name):
            return new_yaml_source_from_file(context.string(flag_file_name))
        return default_input_source()

    return create