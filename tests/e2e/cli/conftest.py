"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, plus fixtures to register that command, obtain a CliRunner, and
run tests within an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from sanitas.entrypoints.cli.main import sanitas

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for logging/flight-recorder tests.

    Messages go to the 'sanitas.demo' logger and to a 'some.thirdparty'
    logger, so that per-logger level overrides can be observed.
    """
    logger = logging.getLogger("sanitas.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and from Click-Extra's sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `sanitas` for the duration of a test."""
    sanitas.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(sanitas, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner; stdout and stderr are captured separately."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def clean_env(monkeypatch):
    """Unset the SANITAS_* variables that change sanitizer defaults."""
    monkeypatch.delenv("SANITAS_MAX_INTEGER_DIGITS", raising=False)
    monkeypatch.delenv("SANITAS_QUOTE_MODE", raising=False)
