"""Tests for issues.logging: records go to stderr, never to stdout."""

import io
import logging

import pytest

from issues.config import LoggingConfig
from issues.logging import DEFAULT_FORMAT, IssuesLogging, _resolve_level


@pytest.mark.parametrize(
    "name, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("  ERROR\t", logging.ERROR),
        ("TRACE", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_level(name: str, expected: int) -> None:
    """Names are case and whitespace insensitive; unknown ones mean INFO."""
    assert _resolve_level(name) == expected


def test_records_go_to_stderr(capsys) -> None:
    """Log output never lands on stdout."""
    IssuesLogging(LoggingConfig(level="INFO", format="%(message)s")).setup()
    logging.getLogger("issues.adapters.github").info("Fetching octo's project cat")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Fetching octo's project cat" in captured.err


def test_setup_replaces_root_handlers() -> None:
    """After setup the root logger has exactly the returned handler."""
    logging.root.addHandler(logging.StreamHandler(io.StringIO()))
    handler = IssuesLogging(LoggingConfig(level="WARNING", format="%(message)s")).setup()
    assert logging.root.handlers == [handler]
    assert logging.root.level == logging.WARNING


def test_level_filters_records() -> None:
    stream = io.StringIO()
    IssuesLogging(LoggingConfig(level="WARNING", format="%(levelname)s %(message)s"), stream=stream).setup()
    log = logging.getLogger("issues.cli")
    log.info("hidden")
    log.warning("shown")
    assert stream.getvalue() == "WARNING shown\n"


def test_empty_format_uses_default() -> None:
    handler = IssuesLogging(LoggingConfig(level="INFO", format="")).setup()
    assert handler.formatter is not None
    assert handler.formatter._fmt == DEFAULT_FORMAT
