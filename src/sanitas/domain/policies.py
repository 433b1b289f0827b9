"""Named fallback policies for numeric parsing, and tags for fallback logs."""

from enum import Enum
from typing import Any


class OnParseFailure(Enum):
    """What a numeric normalizer returns when it cannot convert confidently.

    Modes:
    - ZERO_FALLBACK: always return a float; unparsable text becomes 0.
    - PASS_THROUGH: return the separator-normalized text instead of a zero
      result or of a value whose text form uses an exponent.
    """

    ZERO_FALLBACK = "zero"
    PASS_THROUGH = "pass-through"

    @classmethod
    def from_force(cls, force: bool) -> "OnParseFailure":
        """Map the `force` flag of the numeric helpers onto a policy."""
        return cls.ZERO_FALLBACK if force else cls.PASS_THROUGH


class Fallback(Enum):
    """A sanitizer settled for something other than a clean conversion.

    Log records about such outcomes carry the tag in their ``fallback``
    attribute so that the CLI can count them.
    """

    PASS_THROUGH = "pass-through"
    ZERO = "zero"
    CLAMPED = "clamped"
    DISCARDED = "discarded"
    UNTRANSLITERATED = "untransliterated"

    def extra(self, count: int = 1) -> dict[str, Any]:
        """Return the ``extra`` mapping that tags a log record."""
        return {"fallback": self.value, "fallback_count": count}
