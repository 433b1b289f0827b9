"""Transliterators for SANITAS."""

import unicodedata

from sanitas.interfaces.transliterator import Transliterator

# pylint: disable=too-few-public-methods

# Characters that NFKD does not decompose into an ASCII base letter.
SUPPLEMENTAL_TABLE = {
    "ß": "ss",
    "Æ": "AE",
    "æ": "ae",
    "Œ": "OE",
    "œ": "oe",
    "Ø": "O",
    "ø": "o",
    "Đ": "D",
    "đ": "d",
    "Ð": "D",
    "ð": "d",
    "Ł": "L",
    "ł": "l",
    "Þ": "TH",
    "þ": "th",
    "ı": "i",
    "€": "EUR",
    "£": "GBP",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "–": "-",
    "—": "-",
}


class UnicodeTransliterator(Transliterator):
    """Best-effort ASCII folding via Unicode compatibility decomposition.

    Accented letters are decomposed (NFKD) and their combining marks dropped,
    a small table covers letters with no decomposition, and whatever is still
    outside ASCII is silently removed. Never raises.
    """

    def __init__(self, table: dict[str, str] | None = None) -> None:
        self._table = str.maketrans(SUPPLEMENTAL_TABLE if table is None else table)

    def transliterate(self, text: str) -> str:
        """Fold `text` to ASCII, dropping characters with no approximation."""
        decomposed = unicodedata.normalize("NFKD", text.translate(self._table))
        return decomposed.encode("ascii", "ignore").decode("ascii")
