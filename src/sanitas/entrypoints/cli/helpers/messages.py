"""Terminal message helpers for the SANITAS CLI.

Small helpers for rendering user-visible notices with an emoji→ASCII fallback.
Notices always go to stderr: stdout carries the sanitized values, one per
line, and must stay machine-readable.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call, so a redirected or re-encoded
    stderr is always honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding"))
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    emoji, fallback = CAUTION
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold notice to **stderr**.

    Example:
        ``⚠️  Slug for '!!!' is empty.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)

