"""
Logging configuration — central setup for the CLI entrypoint.

The library itself never configures logging; it only does
``logger = logging.getLogger(__name__)``.  The CLI calls
``setup_logging()`` once at startup.

Levels are resolved in precedence order:
    CLI flag  >  FUELUP_COMPONENTS_LOG_LEVEL env var  >  WARNING (default)

Optional file output via FUELUP_COMPONENTS_LOG_FILE /
FUELUP_COMPONENTS_LOG_FILE_LEVEL env vars.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "FUELUP_COMPONENTS_LOG_LEVEL"
ENV_LOG_FILE = "FUELUP_COMPONENTS_LOG_FILE"
ENV_LOG_FILE_LEVEL = "FUELUP_COMPONENTS_LOG_FILE_LEVEL"

# ── Formats ─────────────────────────────────────────────────────

_FMT_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"

# Console (format, datefmt) keyed by the most verbose level it applies to.
# WARNING and above get the bare message.
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: (_FMT_DETAILED, "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT_FORMAT: tuple[str, str | None] = ("%(message)s", None)

_FILE_FORMAT: tuple[str, str | None] = (_FMT_DETAILED, "%Y-%m-%d %H:%M:%S")


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console log level from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(ENV_LOG_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Route the root logger to stderr and, optionally, a file.

    Previously installed root handlers are replaced, so calling this twice
    does not duplicate output.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        log_file: Optional path to a log file.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    handlers = [_console_handler(console_level)]

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(min(h.level for h in handlers))


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _CONSOLE_DEFAULT_FORMAT
    for threshold in sorted(_CONSOLE_FORMATS):
        if level <= threshold:
            fmt, datefmt = _CONSOLE_FORMATS[threshold]
            break
    return _configured(logging.StreamHandler(sys.stderr), level, fmt, datefmt)


def _file_handler(path: str, level: int) -> logging.Handler:
    fmt, datefmt = _FILE_FORMAT
    return _configured(logging.FileHandler(path, encoding="utf-8"), level, fmt, datefmt)


def _configured(
    handler: logging.Handler, level: int, fmt: str, datefmt: str | None
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
