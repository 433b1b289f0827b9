"""SANITAS subcommands.

Every subcommand takes VALUES as arguments, or reads them one per line from
stdin when none are given, and prints one result per line on stdout. Notices
(empty slugs, clamped values) go to stderr.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from sanitas.bootstrap import Sanitizer

from .helpers import warn

logger = logging.getLogger(__name__)

pass_sanitizer = click.make_pass_decorator(Sanitizer)
values_argument = click.argument("values", nargs=-1)


def _read_values(values: tuple[str, ...]) -> list[str]:
    """Return the VALUES arguments, or the lines of stdin when there are none."""
    if values:
        return list(values)
    logger.debug("No VALUES given; reading them from stdin.")
    stream = click.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stream]


def _text_command(
    name: str, transform: Callable[[Sanitizer, str], str], help_text: str
) -> click.Command:
    """Build a subcommand that maps each value through `transform`."""

    @click.command(name, help=help_text)
    @values_argument
    @pass_sanitizer
    def command(sanitizer: Sanitizer, values: tuple[str, ...]) -> None:
        for value in _read_values(values):
            click.echo(transform(sanitizer, value))

    return command


# ============================================================================
#                               Numbers
# ============================================================================


@click.command("decimal")
@values_argument
@click.option(
    "--force/--no-force",
    default=True,
    show_default=True,
    help=(
        "Always print a number (0 for garbage). With --no-force, values that "
        "parse to zero or need an exponent are printed as normalized text."
    ),
)
@pass_sanitizer
def decimal(sanitizer: Sanitizer, values: tuple[str, ...], force: bool) -> None:
    """Normalize human-formatted numbers ("1.541.045,45" -> 1541045.45)."""
    for value in _read_values(values):
        click.echo(sanitizer.normalize_decimal(value, force=force))


@click.command("float")
@values_argument
@pass_sanitizer
def float_(sanitizer: Sanitizer, values: tuple[str, ...]) -> None:
    """Convert human-formatted numbers to floats."""
    for value in _read_values(values):
        click.echo(sanitizer.normalize_float(value))


@click.command("clamp")
@values_argument
@click.option(
    "--max-digits",
    "max_digits",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum integer digits. Defaults to SANITAS_MAX_INTEGER_DIGITS or 8.",
)
@pass_sanitizer
def clamp(
    sanitizer: Sanitizer, values: tuple[str, ...], max_digits: int | None
) -> None:
    """Bound numbers to a fixed number of integer digits."""
    digits = sanitizer.max_integer_digits if max_digits is None else max_digits
    for value in _read_values(values):
        number = sanitizer.normalize_decimal(value)
        clamped = sanitizer.clamp_float_length(number, digits)
        if clamped != number:
            warn(f"{value!r} has more than {digits} integer digits; clamped.")
        click.echo(clamped)


@click.command("integer")
@values_argument
@click.option(
    "--keep-invalid",
    is_flag=True,
    help="Print 0 for invalid values instead of dropping them.",
)
@pass_sanitizer
def integer(
    sanitizer: Sanitizer, values: tuple[str, ...], keep_invalid: bool
) -> None:
    """Cast values to integers, dropping invalid ones."""
    for result in sanitizer.to_integer_many(
        _read_values(values), discard_invalid=not keep_invalid
    ):
        click.echo(result)


@click.command("numeric")
@values_argument
@click.option(
    "--keep-invalid",
    is_flag=True,
    help="Print 0 for invalid values instead of dropping them.",
)
@pass_sanitizer
def numeric(
    sanitizer: Sanitizer, values: tuple[str, ...], keep_invalid: bool
) -> None:
    """Keep numeric values as written (leading zeros included), else cast to integer."""
    for result in sanitizer.to_numeric_many(
        _read_values(values), discard_invalid=not keep_invalid
    ):
        click.echo(result)


# ============================================================================
#                               Text
# ============================================================================


@click.command("slug")
@values_argument
@pass_sanitizer
def slug(sanitizer: Sanitizer, values: tuple[str, ...]) -> None:
    """Turn text into lowercase, hyphen-separated URL slugs."""
    for value in _read_values(values):
        result = sanitizer.slugify(value)
        if not result:
            warn(f"Slug for {value!r} is empty.")
        click.echo(result)


xml = _text_command(
    "xml", Sanitizer.to_xml, "Escape stray ampersands and dollar signs for XML."
)
xhtml = _text_command(
    "xhtml",
    Sanitizer.to_xhtml,
    'Escape for XHTML and rewrite target="_blank"/"_top" to rel="external".',
)
ascii_ = _text_command(
    "ascii", Sanitizer.to_ascii, "Fold text to plain ASCII (best effort)."
)
encode = _text_command(
    "encode", Sanitizer.to_entities, "Convert special characters to HTML entities."
)
decode = _text_command(
    "decode", Sanitizer.from_entities, "Convert HTML entities back to characters."
)
filename = _text_command(
    "filename", Sanitizer.to_filename, "Remove characters unsafe in file names."
)
br2nl = _text_command(
    "br2nl", Sanitizer.br_to_nl, "Replace <br>, <br/> and <br /> with newlines."
)
filter_ = _text_command(
    "filter",
    Sanitizer.filter_string,
    "Strip tags and NUL bytes, then encode quotes as entities.",
)

COMMANDS = [
    decimal,
    float_,
    clamp,
    integer,
    numeric,
    slug,
    xml,
    xhtml,
    ascii_,
    encode,
    decode,
    filename,
    br2nl,
    filter_,
]
