from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

import dateutil.parser as _dateutil_parser

__all__ = [
    "logger_setup",
    "camel_case",
    "parse_datetime",
    "format_datetime",
    "nullable_string",
    "nullable_datetime",
    "NULL_DATETIME",
]

# The CurseForge API encodes "no date" as .NET's DateTime.MinValue.
NULL_DATETIME = "0001-01-01T00:00:00"


def logger_setup(name: str,
                 level: int = logging.INFO,
                 *,
                 log_to_file: Optional[str] = None,
                 file_level: Optional[int] = None,
                 fmt: str = "%(asctime)s %(name)s %(levelname)s: %(message)s",
                 datefmt: str = "%Y-%m-%d %H:%M:%S") -> logging.Logger:
    """
    Create and return a configured logger for the library.

    Behavior:
        - Creates a logger with the given `name`.
        - Adds a console (StreamHandler) with the given `level`.
        - If `log_to_file` is provided, also adds a FileHandler.
          The file handler level defaults to `level` unless `file_level` is set.
        - Multiple calls with the same `name` will not duplicate handlers (idempotent).

    Parameters
    ----------
    name : str
        Logger name (usually package name).
    level : int
        Logging level for console (e.g., logging.INFO).
    log_to_file : Optional[str]
        If provided, path of file to log to (created if missing).
    file_level : Optional[int]
        Logging level for file handler (defaults to `level` if None).
    fmt : str
        Log message format string.
    datefmt : str
        Date format used by formatter.

    Returns
    -------
    logging.Logger
        Configured logger instance.

    Example
    -------
    >>> logger = logger_setup("curseforge", level=logging.DEBUG, log_to_file="curseforge.log")
    >>> logger.info("ready")
    """
    logger = logging.getLogger(name)
    lowest = level if file_level is None else min(level, file_level)
    logger.setLevel(lowest)

    if not getattr(logger, "_curseforge_setup_done", False):
        formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

        if log_to_file:
            fh = logging.FileHandler(log_to_file, encoding="utf-8")
            fh.setLevel(file_level if file_level is not None else level)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

        logger._curseforge_setup_done = True

    return logger


_CAMEL_RE = re.compile(r"_([a-z0-9])")


def camel_case(name: str) -> str:
    """``game_version_type_id`` -> ``gameVersionTypeId``."""
    return _CAMEL_RE.sub(lambda m: m.group(1).upper(), name)


def parse_datetime(value: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp from the API into an aware UTC datetime.

    Naive timestamps are assumed to be UTC. Raises ValueError/TypeError on
    anything that is not a parseable string.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = _dateutil_parser.isoparse(value)
    else:
        raise TypeError(f"expected an ISO-8601 string, got {type(value).__name__}")
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_datetime(value: datetime) -> str:
    """Inverse of parse_datetime: ISO-8601 with a trailing ``Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def nullable_string(value: Any) -> Optional[str]:
    """Empty strings are how the API says "absent"; map them to None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value or None


def nullable_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == NULL_DATETIME:
        return None
    return parse_datetime(value)
