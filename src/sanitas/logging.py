"""Logging setup for the SANITAS CLI.

Library modules only create loggers (``logging.getLogger(__name__)``) and tag
records about sanitizer fallbacks with `sanitas.domain.policies.Fallback`.
This module wires the handlers that consume them:

- a Rich console handler on stderr (stdout carries sanitized values);
- an optional in-memory flight recorder that dumps DEBUG history to a file
  when a WARNING arrives, marking fallback records in the file;
- a tally of fallback records, summarized when the command finishes.
"""

from __future__ import annotations

import logging
import platform
import sys
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from sanitas import __version__

if TYPE_CHECKING:
    from pathlib import Path

PROJECT_PREFIX = "sanitas"
STACK = ("click", "click-extra", "rich", "platformdirs")


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for records from other packages.

    Records from sanitas loggers get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top, _, _ = record.name.partition(".")
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


class RecorderFormatter(logging.Formatter):
    """Flight-recorder line format; fallback records end in ``[fallback=...]``."""

    def __init__(self) -> None:
        super().__init__(
            "[%(asctime)s] [%(process)d] %(levelname)s "
            "%(name)s:%(lineno)d: %(message)s"
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        if (fallback := getattr(record, "fallback", None)) is None:
            return line
        return f"{line} [fallback={fallback}]"


class FallbackTally(logging.Handler):
    """Count fallback-tagged records by kind.

    Only records that reach the root logger are counted, so per-logger level
    overrides also silence the tally for those loggers.
    """

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.counts: Counter[str] = Counter()

    def emit(self, record: logging.LogRecord) -> None:
        if (fallback := getattr(record, "fallback", None)) is not None:
            self.counts[fallback] += getattr(record, "fallback_count", 1)

    def summary(self) -> str:
        """Return ``kind=count`` pairs sorted by kind, or ``none``."""
        if not self.counts:
            return "none"
        return ", ".join(
            f"{kind}={count}" for kind, count in sorted(self.counts.items())
        )


@dataclass(frozen=True)
class LoggingSetup:
    """Handlers installed on the root logger by `configure_logging`."""

    console: RichHandler
    tally: FallbackTally
    recorder: MemoryHandler | None = None
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def handlers(self) -> list[logging.Handler]:
        """Return the installed handlers, console first."""
        installed: list[logging.Handler] = [self.console, self.tally]
        if self.recorder is not None:
            installed.append(self.recorder)
        return installed


def config_console_handler(level: int, debug_mode: bool, color: bool) -> RichHandler:
    """Return a RichHandler writing to stderr.

    Debug mode forces the DEBUG level and shows timestamps, logger names and
    source paths. Otherwise records from other packages get a short prefix.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path, capacity: int, flush_on_close: bool
) -> MemoryHandler:
    """Return a MemoryHandler that writes to `path` once a WARNING arrives.

    The file is truncated when the handler is created. Up to `capacity`
    records are buffered at DEBUG granularity; with `flush_on_close` the
    remaining buffer is also written when logging shuts down.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setFormatter(RecorderFormatter())
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool,
    color: bool,
    recorder_path: Path | None,
    recorder_capacity: int,
    flush_on_close: bool,
    logger_levels: Mapping[str, int],
) -> LoggingSetup:
    """Install the console handler, fallback tally and flight recorder.

    Args:
        level: Console level; ignored in debug mode.
        debug_mode: Verbose console format, always at DEBUG.
        color: Allow colored console output.
        recorder_path: Flight-recorder file, or None to disable the recorder.
        recorder_capacity: Number of records the recorder buffers.
        flush_on_close: Write the recorder buffer on shutdown as well.
        logger_levels: Minimum level per logger name, for every handler.

    Returns:
        The installed handlers.
    """
    setup = LoggingSetup(
        console=config_console_handler(level, debug_mode, color),
        tally=FallbackTally(),
        recorder=(
            config_flight_recorder(recorder_path, recorder_capacity, flush_on_close)
            if recorder_path is not None
            else None
        ),
        logger_levels=dict(logger_levels),
    )
    # the root logger lets everything through; handlers do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=setup.handlers, force=True)
    for name, logger_level in setup.logger_levels.items():
        logging.getLogger(name).setLevel(logger_level)
    return setup


def log_startup(
    logger: logging.Logger,
    setup: LoggingSetup,
    settings: Mapping[str, tuple[object, str]],
) -> None:
    """Log a one-line summary, then the resolved configuration at DEBUG.

    Args:
        logger: Logger used for the startup messages.
        setup: Handlers returned by `configure_logging`.
        settings: Resolved value and origin (``commandline``, ``environment``
            or ``default``) of each sanitizer setting, by name.
    """
    recorder = setup.recorder
    logger.info(
        "SANITAS %s - console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(setup.console.level),
        "OFF" if recorder is None else "ON",
    )
    logger.debug(
        "Python %s on %s %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
    )
    logger.debug("Stack: %s", ", ".join(f"{dist}={version(dist)}" for dist in STACK))
    for name, (value, origin) in settings.items():
        logger.debug("Setting %s=%s (%s)", name, value, origin)
    if recorder is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, flush_on_close=%s",
            recorder.target.baseFilename,
            recorder.capacity,
            recorder.flushOnClose,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in setup.logger_levels.items()}
        or "<none>",
    )


def log_fallback_summary(logger: logging.Logger, tally: FallbackTally) -> None:
    """Report how many fallbacks the run took, at INFO when there were any."""
    level = logging.INFO if tally.counts else logging.DEBUG
    logger.log(level, "Fallbacks: %s", tally.summary())
