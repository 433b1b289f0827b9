"""Bootstrap a sanitizer with its collaborators and configuration."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sanitas import config
from sanitas.adapters.entity_codec import HtmlEntityCodec
from sanitas.adapters.transliterator import UnicodeTransliterator
from sanitas.domain import markup, numeric
from sanitas.domain.sequences import Scalar, apply_one
from sanitas.interfaces.entity_codec import EntityCodec, QuoteMode
from sanitas.interfaces.transliterator import Transliterator
from sanitas.service_layer import text

# pylint: disable=too-many-public-methods

Values = Sequence[Scalar] | Mapping[Any, Scalar]


@dataclass(frozen=True)
class Sanitizer:
    """Facade over every sanitizer, bound to one codec and transliterator.

    Scalar methods reject composite input with `InvalidInputShapeError`;
    the `*_many` methods accept a list, tuple or mapping of scalars.
    """

    codec: EntityCodec
    transliterator: Transliterator
    max_integer_digits: int = numeric.DEFAULT_MAX_INTEGER_DIGITS

    # ---- numbers ---------------------------------------------------------

    def normalize_decimal(self, value: Scalar, force: bool = True) -> float | str:
        """See `sanitas.domain.numeric.normalize_decimal`."""
        return apply_one(lambda v: numeric.normalize_decimal(v, force), value)

    def normalize_float(self, value: Scalar) -> float:
        """See `sanitas.domain.numeric.normalize_float`."""
        return apply_one(numeric.normalize_float, value)

    def clamp_float_length(
        self, value: Scalar, max_integer_digits: int | None = None
    ) -> float:
        """Clamp to `max_integer_digits`, defaulting to the configured bound."""
        digits = (
            self.max_integer_digits if max_integer_digits is None else max_integer_digits
        )
        return apply_one(lambda v: numeric.clamp_float_length(v, digits), value)

    def to_integer(self, value: Scalar) -> int:
        """See `sanitas.domain.numeric.to_integer`."""
        return apply_one(numeric.to_integer, value)

    def to_numeric(self, value: Scalar) -> Scalar:
        """See `sanitas.domain.numeric.to_numeric`."""
        return apply_one(numeric.to_numeric, value)

    def to_integer_many(
        self, values: Values, discard_invalid: bool = True
    ) -> list[int] | dict[Any, int]:
        """See `sanitas.domain.numeric.to_integer_many`."""
        return numeric.to_integer_many(values, discard_invalid)

    def to_numeric_many(
        self, values: Values, discard_invalid: bool = True
    ) -> list[Scalar] | dict[Any, Scalar]:
        """See `sanitas.domain.numeric.to_numeric_many`."""
        return numeric.to_numeric_many(values, discard_invalid)

    # ---- markup ----------------------------------------------------------

    def to_xml(self, value: str | None) -> str:
        """See `sanitas.domain.markup.to_xml`."""
        return apply_one(markup.to_xml, value)

    def to_xhtml(self, value: str | None) -> str:
        """See `sanitas.domain.markup.to_xhtml`."""
        return apply_one(markup.to_xhtml, value)

    def br_to_nl(self, value: str | None) -> str:
        """See `sanitas.domain.markup.br_to_nl`."""
        return apply_one(markup.br_to_nl, value)

    def filter_string(self, value: str | None) -> str:
        """See `sanitas.domain.markup.filter_string`."""
        return apply_one(markup.filter_string, value)

    def to_safe_string(self, value: Scalar) -> str:
        """See `sanitas.domain.markup.to_safe_string`."""
        return apply_one(markup.to_safe_string, value)

    def to_filename(self, value: str | None) -> str:
        """See `sanitas.domain.markup.to_filename`."""
        return apply_one(markup.to_filename, value)

    def to_entities(self, value: Scalar) -> str:
        """Encode special characters with the bound codec."""
        return apply_one(lambda v: text.to_entities(v, self.codec), value)

    def from_entities(self, value: Scalar) -> str:
        """Decode entity references with the bound codec."""
        return apply_one(lambda v: text.from_entities(v, self.codec), value)

    def to_entities_many(self, values: Values) -> list[str] | dict[Any, str]:
        """Encode every element of a list or mapping."""
        return text.to_entities_many(values, self.codec)

    def from_entities_many(self, values: Values) -> list[str] | dict[Any, str]:
        """Decode every element of a list or mapping."""
        return text.from_entities_many(values, self.codec)

    # ---- text ------------------------------------------------------------

    def to_ascii(self, value: str) -> str:
        """Fold to ASCII with the bound transliterator."""
        return apply_one(lambda v: text.to_ascii(v, self.transliterator), value)

    def slugify(self, value: str) -> str:
        """Build a URL slug with the bound codec and transliterator."""
        return apply_one(
            lambda v: text.slugify(v, self.codec, self.transliterator), value
        )


def build_entity_codec(quote_mode: QuoteMode) -> EntityCodec:
    """Build the default entity codec."""
    return HtmlEntityCodec(quote_mode=quote_mode)


def build_transliterator() -> Transliterator:
    """Build the default transliterator."""
    return UnicodeTransliterator()


def bootstrap(
    quote_mode: QuoteMode | None = None, max_integer_digits: int | None = None
) -> Sanitizer:
    """Build a `Sanitizer` wired with the default adapters.

    Args:
        quote_mode: Quote handling for the entity codec. Read from
            `SANITAS_QUOTE_MODE` when None.
        max_integer_digits: Default bound for `clamp_float_length`. Read from
            `SANITAS_MAX_INTEGER_DIGITS` when None.

    Raises:
        InvalidConfigError: If a configuration variable that is read is invalid.
    """
    if quote_mode is None:
        quote_mode = config.get_quote_mode()
    if max_integer_digits is None:
        max_integer_digits = config.get_max_integer_digits()

    return Sanitizer(
        codec=build_entity_codec(quote_mode),
        transliterator=build_transliterator(),
        max_integer_digits=max_integer_digits,
    )
