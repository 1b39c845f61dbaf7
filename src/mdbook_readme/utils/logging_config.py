"""Logging configuration for mdbook-readme.

All output goes to stderr so stdout stays usable for ``--stdout``.
"""

from __future__ import annotations

import logging
import sys

from mdbook_readme.config import DEFAULT_LOG_LEVEL, MDBOOK_README_LOG_LEVEL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {key: value for key, value in vars(record).items() if key not in _STANDARD_ATTRS}
        if not extras:
            return message
        fields = " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        return f"{message} {fields}"


def resolve_level(level: str) -> str:
    """Normalize a level name, falling back to WARNING for unknown names."""
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return name


def configure_logging(level: str | None = None) -> None:
    """Install a single stderr handler on the package logger.

    Without an explicit ``level`` the env default applies only when the
    handler is first installed, so a level set by the CLI is kept.
    """
    root = logging.getLogger("mdbook_readme")
    if not any(getattr(handler, "_mdbook_readme", False) for handler in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
        handler._mdbook_readme = True  # type: ignore[attr-defined]
        root.addHandler(handler)
        if level is None:
            level = MDBOOK_README_LOG_LEVEL
    if level is not None:
        root.setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring package logging on first use."""
    configure_logging()
    return logging.getLogger(name)
