"""Alternate input sources (mappings, JSON, YAML, TOML) for command-line flag values, with argument and command-category helpers."""

__version__ = "0.1.0"