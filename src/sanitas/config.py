"""Configuration utilities for SANITAS.

This module centralizes the environment variables that change library
defaults and the helpers that read and validate them.
"""

import os

from sanitas.domain.numeric import DEFAULT_MAX_INTEGER_DIGITS
from sanitas.interfaces.entity_codec import QuoteMode

MAX_INTEGER_DIGITS_ENVVAR = "SANITAS_MAX_INTEGER_DIGITS"  # pragma: no mutate
QUOTE_MODE_ENVVAR = "SANITAS_QUOTE_MODE"  # pragma: no mutate
DEFAULT_QUOTE_MODE = QuoteMode.BOTH


class InvalidConfigError(Exception):
    """Raised when a SANITAS environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is invalid; expected {expected}.")
        self.name = name
        self.value = value
        self.expected = expected


def get_max_integer_digits() -> int:
    """Get the default integer-digit bound for `clamp_float_length`.

    Returns:
        The value of `SANITAS_MAX_INTEGER_DIGITS`, or 8 when it is not set.

    Raises:
        InvalidConfigError: If the variable is not a non-negative integer.
    """
    if not (raw := os.environ.get(MAX_INTEGER_DIGITS_ENVVAR)):
        return DEFAULT_MAX_INTEGER_DIGITS
    try:
        digits = int(raw)
    except ValueError as e:
        raise InvalidConfigError(
            MAX_INTEGER_DIGITS_ENVVAR, raw, "a non-negative integer"
        ) from e
    if digits < 0:
        raise InvalidConfigError(
            MAX_INTEGER_DIGITS_ENVVAR, raw, "a non-negative integer"
        )
    return digits


def get_quote_mode() -> QuoteMode:
    """Get the quote handling mode for the default entity codec.

    Returns:
        The `QuoteMode` named by `SANITAS_QUOTE_MODE` (case-insensitive), or
        `QuoteMode.BOTH` when it is not set.

    Raises:
        InvalidConfigError: If the variable does not name a quote mode.
    """
    if not (raw := os.environ.get(QUOTE_MODE_ENVVAR)):
        return DEFAULT_QUOTE_MODE
    try:
        return QuoteMode(raw.strip().lower())
    except ValueError as e:
        choices = ", ".join(mode.value for mode in QuoteMode)
        raise InvalidConfigError(QUOTE_MODE_ENVVAR, raw, f"one of {choices}") from e


def setting_origin(envvar: str) -> str:
    """Return ``environment`` if `envvar` holds a value, else ``default``."""
    return "environment" if os.environ.get(envvar) else "default"
