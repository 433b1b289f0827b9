"""Domain-layer error definitions."""


class SanitasError(Exception):
    """Base class for SANITAS errors."""


class InvalidInputShapeError(SanitasError, TypeError):
    """Raised when a value is neither a supported scalar nor a flat sequence of scalars."""

    def __init__(self, value: object, expected: str) -> None:
        super().__init__(
            f"Unsupported input shape {type(value).__name__!r}; expected {expected}."
        )
        self.value = value
        self.expected = expected
