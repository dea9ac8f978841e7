"""Applying values from an alternate input source to parsed flags."""

from __future__ import annotations

import math
import os
from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any

from cliconf.source import InputSource

BeforeFunc = Callable[[Any], None]


class InputSourceError(Exception):
    """An input source could not be created."""


def apply_input_source_values(
    context: Any, input_source: InputSource, flags: Iterable[Any]
) -> None:
    """Let every flag that supports it take its value from ``input_source``.

    Flags without an ``apply_input_source_value`` method are left alone.
    The first error a flag raises stops the walk and propagates.
    """
    for flag in flags:
        apply = getattr(flag, "apply_input_source_value", None)
        if callable(apply):
            apply(context, input_source)


def init_input_source(
    flags: Iterable[Any], create_input_source: Callable[[], InputSource]
) -> BeforeFunc:
    """Return a before hook that builds a source and applies it to ``flags``."""
    flag_list = list(flags)

    def before(context: Any) -> None:
        try:
            input_source = create_input_source()
        except Exception as exc:
            raise InputSourceError(
                f"Unable to create input source: inner error: \n'{exc}'"
            ) from exc
        apply_input_source_values(context, input_source, flag_list)

    return before


def init_input_source_with_context(
    flags: Iterable[Any], create_input_source: Callable[[Any], InputSource]
) -> BeforeFunc:
    """Return a before hook that builds a source from the context and applies it."""
    flag_list = list(flags)

    def before(context: Any) -> None:
        try:
            input_source = create_input_source(context)
        except Exception as exc:
            raise InputSourceError(
                "Unable to create input source with context: inner error: "
                f"\n'{exc}'"
            ) from exc
        apply_input_source_values(context, input_source, flag_list)

    return before


def is_env_var_set(env_vars: Iterable[str]) -> bool:
    """Tell whether any of the named environment variables exists, even empty."""
    return any(name in os.environ for name in env_vars)


def float_to_string(value: float) -> str:
    """Format a float the short way: shortest digits, exponent form for large or tiny values."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent
    decimal_exponent = point - 1
    prefix = "-" if sign else ""

    if decimal_exponent < -4 or decimal_exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "+" if decimal_exponent >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(decimal_exponent):02d}"

    if point <= 0:
        body = "0." + "0" * (-point) + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]
    return prefix + body