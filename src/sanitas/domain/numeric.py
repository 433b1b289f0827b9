"""Numeric normalization for human-formatted input.

Numbers typed by people (or exported by spreadsheets in some locale) use `.`
and `,` interchangeably as thousands and decimal separators. The helpers here
infer which one is the decimal mark from the *position* of the first
occurrence of each, not from any locale table:

    1.541.045,45  -> 1541045.45
    1,541,045.45  -> 1541045.45
    1541045,45    -> 1541045.45
    1541045.45    -> 1541045.45

Nothing in this module raises on malformed input; unparsable text degrades to
zero or, when conversion is not forced, is passed through unchanged.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

from .policies import Fallback, OnParseFailure
from .sequences import Scalar, apply_many

logger = logging.getLogger(__name__)

# Longest leading numeric token, like a C ``strtod`` prefix.
NUMERIC_PREFIX_PATTERN = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)
NUMERIC_STRING_PATTERN = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*"
)
EXPONENT_MARKER = "E+"  # pragma: no mutate
# Significant digits of the text form that decides whether a result needs an
# exponent; 1e14 and above are written with one.
TEXT_FORM_DIGITS = 14
DEFAULT_MAX_INTEGER_DIGITS = 8

_SWAP_SEPARATORS = str.maketrans({".": None, ",": "."})


def _as_text(value: Scalar) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def parse_float(text: str) -> float | None:
    """Parse the leading numeric token of `text`.

    Args:
        text: Text that may start with a number (e.g. ``"12.5kg"``).

    Returns:
        The parsed float, or None when the text has no numeric prefix.
    """
    if (match := NUMERIC_PREFIX_PATTERN.match(text)) is None:
        return None
    return float(match.group(0))


def comma_is_decimal_mark(text: str) -> bool:
    """Return True when `,` should be read as the decimal separator.

    The comma wins when it is present and either the first dot comes before
    the first comma, or there is no dot at all and the comma does not open
    the text.
    """
    comma = text.find(",")
    if comma == -1:
        return False
    dot = text.find(".")
    if dot == -1:
        return comma > 0
    return dot < comma


def _normalize_separators(text: str) -> str:
    if comma_is_decimal_mark(text):
        return text.replace(".", "").replace(",", ".")
    return text.replace(",", "")


def normalize_decimal(value: Scalar, force: bool = True) -> float | str:
    """Convert a human-formatted number into a machine-readable decimal.

    Args:
        value: Number or text to convert.
        force: When True (default) always return a float, with 0 for
            unparsable input. When False, the separator-normalized text is
            returned instead of a zero result (for text longer than one
            character) and instead of a value whose text form needs an
            exponent.

    Returns:
        The converted float, or the normalized text when conversion is not
        forced and one of the pass-through conditions applies.
    """
    policy = OnParseFailure.from_force(force)
    text = _normalize_separators(_as_text(value))
    parsed = parse_float(text)
    result = 0.0 if parsed is None else parsed

    if policy is OnParseFailure.PASS_THROUGH:
        if result == 0.0 and len(text) > 1:
            logger.debug(
                "Passing %r through: parsed to zero.",
                text,
                extra=Fallback.PASS_THROUGH.extra(),
            )
            return text
        if EXPONENT_MARKER in f"{result:.{TEXT_FORM_DIGITS}G}":
            logger.debug(
                "Passing %r through: %r needs an exponent.",
                text,
                result,
                extra=Fallback.PASS_THROUGH.extra(),
            )
            return text
    elif parsed is None:
        logger.debug(
            "Could not parse %r as a number; using 0.",
            text,
            extra=Fallback.ZERO.extra(),
        )

    return result


def normalize_float(value: Scalar) -> float:
    """Convert a human-formatted number into a float.

    Uses the same separator disambiguation as `normalize_decimal`, but swaps
    the separators in a single pass and always returns a float (0.0 for
    unparsable input).
    """
    text = _as_text(value)
    if comma_is_decimal_mark(text):
        text = text.translate(_SWAP_SEPARATORS)
    else:
        text = text.replace(",", "")
    parsed = parse_float(text)
    return 0.0 if parsed is None else parsed


def clamp_float_length(
    value: Scalar, max_integer_digits: int = DEFAULT_MAX_INTEGER_DIGITS
) -> float:
    """Make sure a float fits a fixed-width storage field.

    Examples:
        ``234234234.23234234`` with 8 digits returns ``99999999``;
        ``99348871.3434344`` with 8 digits is returned unchanged.

    Args:
        value: Number or human-formatted numeric text.
        max_integer_digits: Maximum number of digits before the decimal point.

    Returns:
        The normalized float, or the largest integer of `max_integer_digits`
        digits (sign preserved) when the integer part is too long.

    Raises:
        ValueError: If `max_integer_digits` is negative.
    """
    if max_integer_digits < 0:
        raise ValueError(
            f"max_integer_digits must be non-negative, got {max_integer_digits}"
        )

    number = float(normalize_decimal(value))

    if math.isfinite(number) and len(str(abs(int(number)))) <= max_integer_digits:
        return number

    ceiling = float(10**max_integer_digits - 1)
    logger.debug(
        "Clamping %r to %s (more than %d integer digits).",
        value,
        ceiling,
        max_integer_digits,
        extra=Fallback.CLAMPED.extra(),
    )
    return math.copysign(ceiling, number)


# ============================================================================
#                           Integer / numeric coercion
# ============================================================================


def is_numeric(value: Any) -> bool:
    """Return True for numbers and for strings that are entirely a number.

    Surrounding whitespace is allowed; booleans and None are not numeric.
    """
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and bool(NUMERIC_STRING_PATTERN.fullmatch(value))


def to_integer(value: Scalar) -> int:
    """Cast a scalar to an integer, truncating toward zero.

    Text is read up to the end of its leading numeric token (``"12abc"`` is
    12, ``"1e3"`` is 1000); anything else, including infinite values, is 0.
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    parsed = parse_float(_as_text(value))
    if parsed is None or not math.isfinite(parsed):
        return 0
    return int(parsed)


def to_numeric(value: Scalar) -> Scalar:
    """Return numeric values untouched (keeping leading zeros), else cast to int."""
    return value if is_numeric(value) else to_integer(value)


def is_valid_integer_input(value: Scalar) -> bool:
    """Validity predicate used when discarding invalid sequence elements."""
    return is_numeric(value) or to_integer(value) > 0


def to_integer_many(
    values: Sequence[Scalar] | Mapping[Any, Scalar], discard_invalid: bool = True
) -> list[int] | dict[Any, int]:
    """Apply `to_integer` to every element of a list or mapping.

    Args:
        values: Ordered sequence or keyed mapping of scalars.
        discard_invalid: Drop elements that are neither numeric nor cast to a
            positive integer. When False, such elements become 0.
    """
    return apply_many(
        to_integer,
        values,
        discard_invalid=discard_invalid,
        is_valid=is_valid_integer_input,
    )


def to_numeric_many(
    values: Sequence[Scalar] | Mapping[Any, Scalar], discard_invalid: bool = True
) -> list[Scalar] | dict[Any, Scalar]:
    """Apply `to_numeric` to every element of a list or mapping.

    See `to_integer_many` for the meaning of `discard_invalid`.
    """
    return apply_many(
        to_numeric,
        values,
        discard_invalid=discard_invalid,
        is_valid=is_valid_integer_input,
    )

