"""Loading raw configuration bytes from a local file or an HTTP(S) URL."""

from __future__ import annotations

import os
import urllib.parse
import urllib.request
from pathlib import Path


def _read_local(file_path: str) -> bytes:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Cannot read from file: '{file_path}' because it does not exist."
        )
    return path.read_bytes()


def load_data_from(file_path: str) -> bytes:
    """Return the contents of a local file or of an http(s) URL.

    A location with a host must use the http or https scheme; anything
    else with a path is read as a local file.
    """
    parts = urllib.parse.urlsplit(file_path)

    if parts.netloc:
        if parts.scheme in ("http", "https"):
            with urllib.request.urlopen(file_path) as response:
                return response.read()
        raise ValueError(f"scheme of {file_path} is unsupported")

    if parts.path:
        return _read_local(file_path)

    if os.name == "nt" and "\\" in file_path:
        return _read_local(file_path)

    raise ValueError(f"unable to determine how to load from path {file_path}")