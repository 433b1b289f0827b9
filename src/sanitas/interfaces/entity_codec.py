"""Interfaces for encoding and decoding markup entity references.

This module defines the EntityCodec interface and the QuoteMode enumeration
used by adapters to convert text to its entity-escaped form and back.
Implementations must tolerate malformed or unknown entity references
without failing.
"""

import abc
from enum import Enum

# pylint: disable=too-few-public-methods


class QuoteMode(Enum):
    """Which quote characters take part in encoding and decoding.

    Modes:
    - BOTH: double and single quotes are converted.
    - DOUBLE: only double quotes are converted.
    - NONE: quotes are left alone.
    """

    BOTH = "both"
    DOUBLE = "double"
    NONE = "none"


class EntityCodec(abc.ABC):
    """Interface for converting text to and from entity references."""

    _quote_mode: QuoteMode

    @abc.abstractmethod
    def encode(self, text: str) -> str:
        """Return `text` with special characters replaced by entity references.

        Args:
            text: Literal text.

        Returns:
            The entity-escaped text.
        """

    @abc.abstractmethod
    def decode(self, text: str, *, all_quotes: bool = False) -> str:
        """Return `text` with entity references replaced by their characters.

        Args:
            text: Text that may contain entity references.
            all_quotes: Decode quote references even when the quote mode
                excludes them.

        Returns:
            The decoded text. Unrecognized references are left as they are.
        """

    @property
    def quote_mode(self) -> QuoteMode:
        """Return the quote handling mode."""
        return self._quote_mode
