"""Interface for best-effort ASCII transliteration."""

import abc

# pylint: disable=too-few-public-methods


class TransliterationError(Exception):
    """Raised by a transliterator that cannot handle its input at all."""


class Transliterator(abc.ABC):
    """Contract for mapping text onto printable ASCII."""

    @abc.abstractmethod
    def transliterate(self, text: str) -> str:
        """Return the nearest ASCII approximation of `text`.

        Characters without an approximation are dropped.

        Raises:
            TransliterationError: If the input cannot be transliterated at all.
        """
