"""Integration tests for the `Sanitizer` assembled by `sanitas.bootstrap`."""

import dataclasses

import pytest

from sanitas.adapters.entity_codec import HtmlEntityCodec
from sanitas.adapters.transliterator import UnicodeTransliterator
from sanitas.bootstrap import Sanitizer, bootstrap
from sanitas.config import InvalidConfigError
from sanitas.domain.errors import InvalidInputShapeError
from sanitas.interfaces.entity_codec import QuoteMode

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without sanitas variables."""
    monkeypatch.delenv("SANITAS_MAX_INTEGER_DIGITS", raising=False)
    monkeypatch.delenv("SANITAS_QUOTE_MODE", raising=False)


@pytest.fixture
def sanitizer() -> Sanitizer:
    """A Sanitizer built from the default configuration."""
    return bootstrap()


def test_bootstrap_wires_default_adapters(sanitizer):
    """By default the HTML codec and Unicode transliterator are bound."""
    assert isinstance(sanitizer.codec, HtmlEntityCodec)
    assert isinstance(sanitizer.transliterator, UnicodeTransliterator)
    assert sanitizer.codec.quote_mode is QuoteMode.BOTH
    assert sanitizer.max_integer_digits == 8


def test_bootstrap_reads_environment(monkeypatch):
    """Unset arguments are read from the environment."""
    monkeypatch.setenv("SANITAS_MAX_INTEGER_DIGITS", "4")
    monkeypatch.setenv("SANITAS_QUOTE_MODE", "none")
    sanitizer = bootstrap()
    assert sanitizer.max_integer_digits == 4
    assert sanitizer.codec.quote_mode is QuoteMode.NONE
    assert sanitizer.clamp_float_length(12345.5) == 9999


def test_bootstrap_arguments_override_environment(monkeypatch):
    """Explicit arguments win over the environment."""
    monkeypatch.setenv("SANITAS_MAX_INTEGER_DIGITS", "not-a-number")
    monkeypatch.setenv("SANITAS_QUOTE_MODE", "none")
    sanitizer = bootstrap(quote_mode=QuoteMode.DOUBLE, max_integer_digits=3)
    assert sanitizer.codec.quote_mode is QuoteMode.DOUBLE
    assert sanitizer.max_integer_digits == 3


def test_bootstrap_invalid_environment(monkeypatch):
    """A malformed environment setting is raised as a config error."""
    monkeypatch.setenv("SANITAS_QUOTE_MODE", "single")
    with pytest.raises(InvalidConfigError):
        bootstrap()


def test_sanitizer_is_immutable(sanitizer):
    """A bootstrapped Sanitizer cannot be reconfigured in place."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        sanitizer.max_integer_digits = 2


def test_numbers_through_facade(sanitizer):
    """Number coercions are reachable through the facade."""
    assert sanitizer.normalize_decimal("1.541.045,45") == 1541045.45
    assert sanitizer.normalize_decimal("abc", force=False) == "abc"
    assert sanitizer.normalize_float("1,541,045.45") == 1541045.45
    assert sanitizer.clamp_float_length(234234234.23234234) == 99999999
    assert sanitizer.clamp_float_length(234234234.2, max_integer_digits=9) == (
        234234234.2
    )
    assert sanitizer.to_integer("12abc") == 12
    assert sanitizer.to_numeric("007") == "007"
    assert sanitizer.to_integer_many(["1", "abc", "0", 3.7]) == [1, 0, 3]
    assert sanitizer.to_numeric_many({"a": "x"}, discard_invalid=False) == {"a": 0}


def test_markup_through_facade(sanitizer):
    """Markup sanitizers are reachable through the facade."""
    assert sanitizer.to_xml("R&D $") == "R&amp;D &#36;"
    assert sanitizer.to_xhtml('<a target="_top">') == '<a rel="external">'
    assert sanitizer.br_to_nl("a<br />b") == "a\nb"
    assert sanitizer.filter_string("<i>it's</i>") == "it&#39;s"
    assert sanitizer.to_safe_string(" <x> ") == "&lt;x&gt;"
    assert sanitizer.to_filename("a/b?.txt") == "ab.txt"


def test_text_through_facade(sanitizer):
    """Codec and transliterator sanitizers are reachable through the facade."""
    assert sanitizer.to_entities("café <b>") == "caf&eacute; &lt;b&gt;"
    assert sanitizer.from_entities("caf&eacute;") == "café"
    assert sanitizer.to_entities_many(["<", ">"]) == ["&lt;", "&gt;"]
    assert sanitizer.from_entities_many({"k": "&amp;"}) == {"k": "&"}
    assert sanitizer.to_ascii("Ærø") == "AEro"
    assert sanitizer.slugify("Héllo World!!") == "hello-world"


def test_quote_mode_flows_into_entities():
    """The configured quote mode reaches entity encoding and decoding."""
    sanitizer = bootstrap(quote_mode=QuoteMode.NONE)
    assert sanitizer.to_entities("\"a\" 'b'") == "\"a\" 'b'"
    assert sanitizer.from_entities("&quot;") == "&quot;"


def test_slug_decodes_quotes_whatever_the_quote_mode():
    """Slugs drop quote references even when the codec keeps them."""
    sanitizer = bootstrap(quote_mode=QuoteMode.NONE)
    assert sanitizer.slugify("Say &quot;Hi&quot;") == "say-hi"


@pytest.mark.parametrize(
    "method",
    [
        "normalize_decimal",
        "normalize_float",
        "clamp_float_length",
        "to_integer",
        "to_numeric",
        "to_xml",
        "to_xhtml",
        "br_to_nl",
        "filter_string",
        "to_safe_string",
        "to_filename",
        "to_entities",
        "from_entities",
        "to_ascii",
        "slugify",
    ],
)
def test_scalar_methods_reject_sequences(sanitizer, method):
    """Scalar methods refuse lists."""
    with pytest.raises(InvalidInputShapeError):
        getattr(sanitizer, method)(["not", "a", "scalar"])


@pytest.mark.parametrize(
    "method",
    ["to_integer_many", "to_numeric_many", "to_entities_many", "from_entities_many"],
)
def test_many_methods_reject_scalars(sanitizer, method):
    """List and mapping methods refuse a bare scalar."""
    with pytest.raises(InvalidInputShapeError):
        getattr(sanitizer, method)("scalar")


def test_custom_collaborators():
    """Library users may bind their own adapters."""
    sanitizer = Sanitizer(
        codec=HtmlEntityCodec(double_encode=True),
        transliterator=UnicodeTransliterator({"ö": "oe"}),
        max_integer_digits=2,
    )
    assert sanitizer.to_entities("&amp;") == "&amp;amp;"
    assert sanitizer.to_ascii("Köln") == "Koeln"
    assert sanitizer.clamp_float_length(100) == 99
