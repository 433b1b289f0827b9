"""Text sanitizers that depend on an entity codec or a transliterator."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sanitas.domain.policies import Fallback
from sanitas.domain.sequences import Scalar, apply_many
from sanitas.interfaces.transliterator import TransliterationError

if TYPE_CHECKING:
    from sanitas.interfaces.entity_codec import EntityCodec
    from sanitas.interfaces.transliterator import Transliterator

logger = logging.getLogger(__name__)

# ASCII semantics: the text has been transliterated by the time this runs.
NON_SLUG_PATTERN = re.compile(r"[^\w\s\d\-]", re.ASCII)
HYPHEN_RUN_PATTERN = re.compile(r"-{2,}")


def _as_text(value: Scalar) -> str:
    return "" if value is None else str(value)


def to_ascii(text: str | None, transliterator: Transliterator) -> str:
    """Fold `text` to plain ASCII, or return it unchanged if that fails.

    Args:
        text: Text to fold.
        transliterator: Collaborator doing the actual character mapping.

    Returns:
        The transliterated text, or `text` itself when the transliterator
        reports that it cannot handle the input.
    """
    original = _as_text(text)
    try:
        return transliterator.transliterate(original)
    except TransliterationError as e:
        logger.warning(
            "Could not transliterate %r, keeping it as is: %s",
            original,
            e,
            extra=Fallback.UNTRANSLITERATED.extra(),
        )
        return original


def slugify(text: str, codec: EntityCodec, transliterator: Transliterator) -> str:
    """Turn arbitrary text into a lowercase, hyphen-separated URL segment.

    The steps run strictly in this order:

    1. decode entity references (``&eacute;`` -> ``é``), quotes included
       whatever the codec's quote mode
    2. transliterate to ASCII (``é`` -> ``e``)
    3. lowercase and trim
    4. replace each space with a hyphen
    5. drop anything that is not a word character, whitespace or hyphen
    6. collapse runs of hyphens

    An all-punctuation input yields an empty slug; that is a valid result.

    Args:
        text: Arbitrary input text.
        codec: Entity codec used to decode references.
        transliterator: Transliterator used for the ASCII fold.

    Returns:
        The slug.
    """
    slug = to_ascii(codec.decode(_as_text(text), all_quotes=True), transliterator)
    slug = slug.lower().strip().replace(" ", "-")
    slug = NON_SLUG_PATTERN.sub("", slug)
    slug = HYPHEN_RUN_PATTERN.sub("-", slug)
    if not slug:
        logger.debug("Slug for %r is empty.", text)
    return slug


def to_entities(value: Scalar, codec: EntityCodec) -> str:
    """Convert all special characters of a scalar's text into entity references."""
    return codec.encode(_as_text(value))


def from_entities(value: Scalar, codec: EntityCodec) -> str:
    """Convert all entity references of a scalar's text back into characters."""
    return codec.decode(_as_text(value))


def to_entities_many(
    values: Sequence[Scalar] | Mapping[Any, Scalar], codec: EntityCodec
) -> list[str] | dict[Any, str]:
    """Apply `to_entities` to every element of a list or mapping."""
    return apply_many(lambda value: to_entities(value, codec), values)


def from_entities_many(
    values: Sequence[Scalar] | Mapping[Any, Scalar], codec: EntityCodec
) -> list[str] | dict[Any, str]:
    """Apply `from_entities` to every element of a list or mapping."""
    return apply_many(lambda value: from_entities(value, codec), values)
