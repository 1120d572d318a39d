"""Logging configuration helpers (human + JSON + file).

Lightweight logging setup for the CLI:
 - Plain human-readable logs to stderr
 - Optional JSON lines to stdout (for piping/collection)
 - Optional file logs

Configuration is idempotent so tests and repeated calls do not stack handlers.
"""

from __future__ import annotations
import json
import logging
import sys
from typing import Optional

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# Structured fields copied into JSON records when set via ``extra=...``
_FIELDS = ("event", "profile", "variable", "path", "error_type")


class JSONFormatter(logging.Formatter):
    """Minimal JSON formatter emitting ``level``, ``message`` and known fields."""

    def format(self, record):
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for k in _FIELDS:
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        return json.dumps(payload)


def configure_logging(
    verbose: bool,
    log_file: Optional[str] = None,
    log_json: bool = False,
    log_level: Optional[str] = None,
) -> None:
    """Configure the root logger according to CLI flags.

    Parameters
    - ``verbose``: When ``True``, sets level to ``DEBUG`` (unless ``log_level``
      overrides). Otherwise defaults to ``WARNING``.
    - ``log_file``: Optional path to tee logs to a file (plain text format).
    - ``log_json``: When ``True``, also emit JSON lines to stdout.
    - ``log_level``: Optional explicit level name (debug, info, warning, error).

    Handlers added by a previous call are removed and closed first.
    """
    if log_level:
        level = _LEVELS.get(log_level.lower(), logging.WARNING)
    else:
        level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)

    for h in list(logger.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            logger.removeHandler(h)
            h.close()

    fmt = "%(levelname)s: %(message)s"
    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(fmt))
    setattr(stream, "_added_by_configure_logging", True)
    logger.addHandler(stream)

    if log_json:
        json_handler = logging.StreamHandler(sys.stdout)
        json_handler.setFormatter(JSONFormatter())
        setattr(json_handler, "_added_by_configure_logging", True)
        logger.addHandler(json_handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(logging.Formatter(fmt))
        setattr(fh, "_added_by_configure_logging", True)
        logger.addHandler(fh)

    for handler in logger.handlers:
        handler.setLevel(level)


def log_event(event: str, level: int = logging.INFO, **fields) -> None:
    """Emit a structured event log at the given level.

    Common ``fields`` include ``profile``, ``variable``, ``path`` and
    ``error_type``.
    """
    logging.getLogger("dot_dev").log(level, event, extra={"event": event, **fields})


__all__ = ["configure_logging", "log_event", "JSONFormatter"]
