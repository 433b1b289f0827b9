"""HTML entity codec built on the standard library.

Encoding converts markup-significant characters, and every non-ASCII
character that has a named HTML entity, into entity references. Existing
entity references are not encoded a second time unless asked to. Decoding
accepts named, decimal and hexadecimal references and leaves unknown ones
alone.
"""

import html
import re
from html.entities import codepoint2name

from sanitas.domain.markup import escape_ampersand
from sanitas.interfaces import entity_codec
from sanitas.interfaces.entity_codec import QuoteMode

ENTITY_REFERENCE_PATTERN = re.compile(
    r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);"
)
SURROGATE_PATTERN = re.compile("[\ud800-\udfff]")

MARKUP_ENTITIES = {"<": "&lt;", ">": "&gt;"}
QUOTE_ENTITIES = {
    QuoteMode.BOTH: {'"': "&quot;", "'": "&#039;"},
    QuoteMode.DOUBLE: {'"': "&quot;"},
    QuoteMode.NONE: {},
}
# Quote characters whose references survive decoding untouched.
UNDECODED_QUOTES = {
    QuoteMode.BOTH: frozenset(),
    QuoteMode.DOUBLE: frozenset("'"),
    QuoteMode.NONE: frozenset("'\""),
}
NAMED_NON_ASCII = {
    codepoint: f"&{name};"
    for codepoint, name in codepoint2name.items()
    if codepoint > 127
}


class HtmlEntityCodec(entity_codec.EntityCodec):
    """EntityCodec implementation using `html.entities` and `html.unescape`."""

    def __init__(
        self, quote_mode: QuoteMode = QuoteMode.BOTH, double_encode: bool = False
    ) -> None:
        self._quote_mode = quote_mode
        self._double_encode = double_encode
        self._table: dict[int, str] = {
            ord(character): reference
            for character, reference in (
                MARKUP_ENTITIES | QUOTE_ENTITIES[quote_mode]
            ).items()
        }
        self._table.update(NAMED_NON_ASCII)

    def encode(self, text: str) -> str:
        # Lone surrogates cannot be represented; drop them like invalid bytes.
        encoded = SURROGATE_PATTERN.sub("", text)
        if self._double_encode:
            encoded = encoded.replace("&", "&amp;")
        else:
            encoded = escape_ampersand(encoded)
        return encoded.translate(self._table)

    def decode(self, text: str, *, all_quotes: bool = False) -> str:
        kept = frozenset() if all_quotes else UNDECODED_QUOTES[self._quote_mode]

        def _decode_reference(match: re.Match[str]) -> str:
            reference = match.group(0)
            character = html.unescape(reference)
            return reference if character in kept else character

        return ENTITY_REFERENCE_PATTERN.sub(_decode_reference, text)
