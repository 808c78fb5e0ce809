"""Logging setup for the issues command.

stdout carries the table, the usage line and API errors and nothing else,
so every log record goes to a single stderr handler on the root logger.
Level and format come from config.yaml (logging.level, logging.format) or
env (LOGGING_LEVEL, LOGGING_FORMAT); unknown levels mean INFO.
"""

import logging
import sys
from typing import TextIO

from issues.config import LoggingConfig

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    name = level.upper().strip()
    if name in LEVEL_NAMES:
        return getattr(logging, name)
    return logging.INFO


class IssuesLogging:
    """Routes all log records of one run to stderr (or the given stream)."""

    def __init__(self, config: LoggingConfig, stream: TextIO | None = None) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._stream = stream

    def setup(self) -> logging.Handler:
        """Replace any root handlers with one stream handler and return it."""
        handler = logging.StreamHandler(self._stream or sys.stderr)
        handler.setFormatter(logging.Formatter(self._format))
        logging.basicConfig(level=self._level, handlers=[handler], force=True)
        return handler
