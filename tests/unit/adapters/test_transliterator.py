"""Unit tests for the Unicode transliterator adapter."""

import pytest

from sanitas.adapters.transliterator import UnicodeTransliterator
from sanitas.interfaces.transliterator import Transliterator

# pylint: disable=magic-value-comparison


@pytest.fixture
def transliterator():
    """Transliterator with the built-in table."""
    return UnicodeTransliterator()


def test_transliterator_implements_interface(transliterator):
    """The adapter satisfies the Transliterator interface."""
    assert isinstance(transliterator, Transliterator)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Crème brûlée", "Creme brulee"),
        ("Straße", "Strasse"),
        ("Ærøskøbing", "AEroskobing"),
        ("Łódź", "Lodz"),
        ("“quoted” – 5 €", '"quoted" - 5 EUR'),
        ("ﬁne", "fine"),
        ("中文", ""),
        ("plain", "plain"),
        ("", ""),
    ],
)
def test_transliterate(transliterator, text, expected):
    """Accents are dropped, special letters mapped, the rest removed."""
    assert transliterator.transliterate(text) == expected


def test_transliterate_output_is_ascii(transliterator):
    """Whatever the input, the output is pure ASCII."""
    assert transliterator.transliterate("Ÿ ÿ Ĳ ☃ 𝔘").isascii()


def test_custom_table_replaces_supplemental_table():
    """A custom table is used instead of the built-in one."""
    transliterator = UnicodeTransliterator({"ä": "ae"})
    assert transliterator.transliterate("Käse") == "Kaese"
    assert transliterator.transliterate("ß") == ""
