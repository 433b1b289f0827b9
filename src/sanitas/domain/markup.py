"""Escaping helpers for embedding text into XML and XHTML.

The central piece is `escape_ampersand`, which escapes literal ampersands
without touching the ones that already start a well-formed entity reference
(``&amp;``, ``&#65;``, ``&#x41;``), so already-escaped text is left intact.
"""

from __future__ import annotations

import html
import re

from .sequences import Scalar

# `&` that is NOT the start of an entity reference (lookahead only).
AMPERSAND_PATTERN = re.compile(
    r"&(?!#?[xX]?(?:[0-9a-fA-F]+|\w{1,8});)", re.IGNORECASE | re.ASCII
)
LINK_TARGET_PATTERNS = (
    re.compile(re.escape('target="_blank"'), re.IGNORECASE),
    re.compile(re.escape('target="_top"'), re.IGNORECASE),
)
TAG_PATTERN = re.compile(r"\x00|<[^>]*>?")
FILENAME_PATTERN = re.compile(r"[^\w\-.%_~,;: ()\[\]|]")

EXTERNAL_REL = 'rel="external"'
DOLLAR_ENTITY = "&#36;"
BREAK_TAGS = ("<br>", "<br/>", "<br />")


def escape_ampersand(text: str | None) -> str:
    """Replace every `&` that does not begin an entity reference with ``&amp;``."""
    if text is None:
        text = ""
    return AMPERSAND_PATTERN.sub("&amp;", str(text))


def escape_dollar(text: str) -> str:
    """Replace every `$` with ``&#36;``."""
    return text.replace("$", DOLLAR_ENTITY)


def rewrite_link_targets(text: str) -> str:
    """Replace ``target="_blank"``/``target="_top"`` with ``rel="external"``.

    A literal, case-insensitive substring replacement; no attribute parsing.
    """
    for pattern in LINK_TARGET_PATTERNS:
        text = pattern.sub(EXTERNAL_REL, text)
    return text


def to_xml(text: str | None) -> str:
    """Make text safe for XML character data."""
    return escape_dollar(escape_ampersand(text))


def to_xhtml(text: str | None) -> str:
    """Make text safe for XHTML output (XML escaping plus link-target rewrite)."""
    return rewrite_link_targets(to_xml(text))


def br_to_nl(text: str | None) -> str:
    """Turn ``<br>``, ``<br/>`` and ``<br />`` into newlines."""
    text = "" if text is None else str(text)
    for tag in BREAK_TAGS:
        text = text.replace(tag, "\n")
    return text


def filter_string(text: str | None) -> str:
    """Strip NUL bytes and tags, then encode quotes as numeric entities.

    A stand-in for PHP's removed ``FILTER_SANITIZE_STRING`` filter.
    """
    if text is None:
        return ""
    stripped = TAG_PATTERN.sub("", str(text))
    return stripped.replace("'", "&#39;").replace('"', "&#34;")


def to_safe_string(value: Scalar) -> str:
    """Trim a scalar's text form and escape HTML special characters."""
    text = "" if value is None else str(value)
    return html.escape(text.strip(), quote=True)


def to_filename(text: str | None) -> str:
    """Remove every character that is not safe in a file name."""
    return FILENAME_PATTERN.sub("", "" if text is None else str(text))
