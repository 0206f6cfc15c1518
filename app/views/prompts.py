"""Validated console input helpers.

Each reader keeps asking until the input is acceptable, printing a short
error after every bad attempt. Input and output functions are injectable so
the menu can be driven by scripted input.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import math

from app.views.constants import (
    INPUT_DATE_FMT,
    INPUT_DATE_HINT,
    INPUT_DATETIME_FMT,
    INPUT_DATETIME_HINT,
)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def read_string(
    prompt: str,
    allow_empty: bool = False,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> str:
    """Read a line of text; blank input is rejected unless `allow_empty`.

    Raises:
        EOFError: Input was closed.
    """
    while True:
        value = input_fn(f"{prompt}: ")
        if allow_empty or value.strip():
            return value
        output_fn("Error: input must not be empty.")


def read_int(
    prompt: str,
    min_value: int | None = None,
    max_value: int | None = None,
    default: int | None = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """Read an integer within the optional bounds.

    An empty line returns `default` when one is given.

    Raises:
        ValueError: `default` lies outside the bounds.
    """
    while True:
        raw = input_fn(f"{prompt}: ").strip()

        if not raw:
            if default is not None:
                if min_value is not None and default < min_value:
                    raise ValueError(f"Default {default} is below the minimum {min_value}.")
                if max_value is not None and default > max_value:
                    raise ValueError(f"Default {default} is above the maximum {max_value}.")
                return default
            output_fn("Error: input must not be empty.")
            continue

        try:
            value = int(raw)
        except ValueError:
            output_fn("Error: enter a valid whole number.")
            continue

        if min_value is not None and value < min_value:
            output_fn(f"Error: value must be at least {min_value}.")
            continue
        if max_value is not None and value > max_value:
            output_fn(f"Error: value must be at most {max_value}.")
            continue
        return value


def read_float(
    prompt: str,
    min_value: float | None = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> float:
    """Read a decimal number; `.` is the decimal separator, `,` groups thousands."""
    while True:
        raw = input_fn(f"{prompt}: ").strip().replace(",", "")
        try:
            value = float(raw)
        except ValueError:
            output_fn("Error: enter a valid number (use '.' as the decimal separator).")
            continue
        if not math.isfinite(value):
            output_fn("Error: enter a finite number.")
            continue
        if min_value is not None and value < min_value:
            output_fn(f"Error: value must be at least {min_value:.2f}.")
            continue
        return value


def read_datetime(
    prompt: str,
    just_date: bool = False,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> datetime:
    """Read a date and time (`dd.MM.yyyy HH:mm`), or a date when `just_date`.

    Without `just_date` a bare date is accepted too and means midnight.
    """
    hint = INPUT_DATE_HINT if just_date else INPUT_DATETIME_HINT
    formats = [INPUT_DATE_FMT] if just_date else [INPUT_DATETIME_FMT, INPUT_DATE_FMT]
    while True:
        raw = input_fn(f"{prompt} (format: {hint}): ").strip()
        for fmt in formats:
            try:
                return datetime.strptime(raw, fmt)
            except ValueError:
                continue
        what = "a date" if just_date else "a date and time"
        output_fn(f"Error: enter {what} in the format {hint}.")
