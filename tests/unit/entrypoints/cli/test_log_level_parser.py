"""Unit tests for sanitas.entrypoints.cli.helpers.log_level_parser.

Covers the click_extra default, override order, the comma/space form that
arrives from SANITAS_LOGGER_LEVEL, case-insensitive level names and the
errors raised for malformed items.
"""

import logging
import types

import click
import pytest

from sanitas.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)


@pytest.fixture
def ctx():
    """The callback ignores its context; a bare namespace stands in for it."""
    return types.SimpleNamespace()


def test_empty_uses_defaults(ctx):
    """No overrides yields the library defaults."""
    assert parse_log_level(ctx, None, ()) == {"click_extra": logging.WARNING}


def test_defaults_are_not_mutated(ctx):
    """Parsing never changes the shared defaults."""
    parse_log_level(ctx, None, ("click_extra=DEBUG",))
    assert DEFAULT_LIB_LEVELS == {"click_extra": logging.WARNING}


def test_later_items_win(ctx):
    """A logger named twice keeps its last level."""
    out = parse_log_level(
        ctx, None, ("sanitas.domain=INFO", "click_extra=ERROR", "sanitas.domain=DEBUG")
    )
    assert out == {"click_extra": logging.ERROR, "sanitas.domain": logging.DEBUG}


@pytest.mark.parametrize(
    "value",
    [
        "sanitas.domain=INFO,  sanitas.adapters=WARNING click_extra=ERROR",
        ("sanitas.domain=INFO,sanitas.adapters=WARNING", "click_extra=ERROR"),
    ],
)
def test_comma_and_space_separated_items(ctx, value):
    """A plain string (from the environment) parses like repeated flags."""
    out = parse_log_level(ctx, None, value)
    assert out["sanitas.domain"] == logging.INFO
    assert out["sanitas.adapters"] == logging.WARNING
    assert out["click_extra"] == logging.ERROR


def test_case_insensitive_levels(ctx):
    """Level names are matched regardless of case."""
    out = parse_log_level(ctx, None, ("sanitas=debug", "rich=WaRnInG"))
    assert out["sanitas"] == logging.DEBUG
    assert out["rich"] == logging.WARNING


def test_missing_separator_raises(ctx):
    """An item without '=' is rejected."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(ctx, None, ("sanitas",))


def test_unknown_level_raises(ctx):
    """An unknown level name is rejected."""
    with pytest.raises(click.BadParameter, match="Invalid log level: LOUD"):
        parse_log_level(ctx, None, ("sanitas=LOUD",))
