"""Scalar and sequence entry points for per-element transforms.

Every sanitizer works on one scalar at a time. `apply_one` and `apply_many`
are the two ways to call one: on a single value, or on every element of a
list/tuple or mapping. Shapes are checked here, at the boundary, so the
transforms themselves never see a composite value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias, TypeVar

from .errors import InvalidInputShapeError
from .policies import Fallback

logger = logging.getLogger(__name__)

Scalar: TypeAlias = str | int | float | bool | None
T = TypeVar("T")

SCALAR_TYPES = (str, int, float, bool, type(None))
SCALAR_EXPECTATION = "a str, int, float, bool or None"  # pragma: no mutate
SEQUENCE_EXPECTATION = "a list, tuple or mapping of scalars"  # pragma: no mutate


def is_scalar(value: Any) -> bool:
    """Return True if `value` is one of the supported scalar types."""
    return isinstance(value, SCALAR_TYPES)


def apply_one(transform: Callable[[Any], T], value: Any) -> T:
    """Apply `transform` to a single scalar.

    Raises:
        InvalidInputShapeError: If `value` is not a supported scalar.
    """
    if not is_scalar(value):
        raise InvalidInputShapeError(value, SCALAR_EXPECTATION)
    return transform(value)


def apply_many(
    transform: Callable[[Any], T],
    values: Any,
    *,
    discard_invalid: bool = False,
    is_valid: Callable[[Any], bool] | None = None,
) -> list[T] | dict[Any, T]:
    """Apply `transform` to every element of a flat sequence or mapping.

    Order is preserved, and so are keys when `values` is a mapping. Lists and
    tuples come back as lists; mappings come back as dicts.

    Args:
        transform: Scalar transform to apply.
        values: A list, tuple or mapping whose elements are all scalars.
        discard_invalid: Drop the elements for which `is_valid` returns False.
        is_valid: Validity predicate evaluated on the *input* element. Without
            one, every element is valid.

    Returns:
        The transformed elements in the same shape as `values`.

    Raises:
        InvalidInputShapeError: If `values` is not a list, tuple or mapping, or
            if any element is not a scalar. Nothing is transformed in that case.
    """
    if isinstance(values, Mapping):
        items: list[tuple[Any, Any]] = list(values.items())
    elif isinstance(values, (list, tuple)):
        items = list(enumerate(values))
    else:
        raise InvalidInputShapeError(values, SEQUENCE_EXPECTATION)

    for _, element in items:
        if not is_scalar(element):
            raise InvalidInputShapeError(element, SCALAR_EXPECTATION)

    if discard_invalid and is_valid is not None:
        valid = [(key, element) for key, element in items if is_valid(element)]
        if discarded := len(items) - len(valid):
            logger.debug(
                "Discarded %d invalid element(s).",
                discarded,
                extra=Fallback.DISCARDED.extra(discarded),
            )
        items = valid

    if isinstance(values, Mapping):
        return {key: transform(element) for key, element in items}
    return [transform(element) for _, element in items]
