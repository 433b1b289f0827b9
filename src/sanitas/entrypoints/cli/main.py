"""SANITAS CLI entry point.

Defines the top-level ``sanitas`` command (via Click-Extra), configures
logging, bootstraps the `Sanitizer` shared by every subcommand, and registers
the subcommands from `sanitas.entrypoints.cli.commands`.

Notes
- The CLI version is sourced from `sanitas.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Click-Extra derives environment variables from option names with the
  ``SANITAS_`` prefix (e.g. ``SANITAS_LOGGER_LEVEL``).

Examples
    $ sanitas decimal "1.541.045,45"
    $ sanitas slug "Héllo World!!"
    $ cat titles.txt | sanitas -v slug
"""

import logging
from functools import partial
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from sanitas import __version__, config
from sanitas.bootstrap import bootstrap
from sanitas.interfaces.entity_codec import QuoteMode
from sanitas.logging import configure_logging, log_fallback_summary, log_startup

from .commands import COMMANDS
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """SANITAS command-line interface.

    Sanitize untrusted or loosely-formatted input for markup, URLs, file names
    and numeric storage fields. Each subcommand reads VALUES from its arguments
    (or one per line from stdin) and prints one sanitized result per line.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("sanitas", appauthor=False, ensure_exists=True))
    / "latest.log",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on clean exit if "
        "--force-flush is set. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L sanitas.domain=INFO) "
        "or via SANITAS_LOGGER_LEVEL (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--quote-mode",
    "quote_mode",
    type=click.Choice([mode.value for mode in QuoteMode], case_sensitive=False),
    help=(
        "Quote handling of the entity codec used by encode and decode. "
        "'both' converts double and single quotes, 'double' only double "
        "quotes, 'none' leaves quotes alone. Defaults to SANITAS_QUOTE_MODE "
        "or 'both'."
    ),
    default=None,
    show_envvar=True,
)
@clickx.pass_context
def sanitas(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    quote_mode: str | None,
) -> None:
    """SANITAS command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console, fallback tally and flight recorder on the root logger
    setup = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,  # None or True => allow color
        recorder_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # 2) build the sanitizer shared by subcommands
    try:
        ctx.obj = bootstrap(
            quote_mode=QuoteMode(quote_mode.lower()) if quote_mode else None
        )
    except config.InvalidConfigError as e:
        raise click.ClickException(str(e)) from e

    # 3) startup diagnostics with the resolved sanitizer settings
    log_startup(
        logger,
        setup,
        {
            "quote_mode": (
                ctx.obj.codec.quote_mode.value,
                (
                    _option_origin(ctx, "quote_mode")
                    if quote_mode
                    else config.setting_origin(config.QUOTE_MODE_ENVVAR)
                ),
            ),
            "max_integer_digits": (
                ctx.obj.max_integer_digits,
                config.setting_origin(config.MAX_INTEGER_DIGITS_ENVVAR),
            ),
        },
    )

    # close callbacks run last-registered first
    ctx.call_on_close(logging.shutdown)
    ctx.call_on_close(partial(log_fallback_summary, logger, setup.tally))


def _option_origin(ctx: click.Context, name: str) -> str:
    """Return where Click took the value of option `name` from."""
    source = ctx.get_parameter_source(name)
    return "default" if source is None else source.name.lower()


for _command in COMMANDS:
    sanitas.add_command(_command)
