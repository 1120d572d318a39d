"""Colored status lines for the dot-dev console.

Color is used only when stdout is a terminal and ``NO_COLOR`` is unset.
"""

from __future__ import annotations
import os
import sys

RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"
GRAY = "\033[90m"


def supports_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream.
        return False


def c(text: str, style: str) -> str:
    """Wrap ``text`` in ``style`` when the console takes color."""
    if not supports_color():
        return text
    return style + text + RESET


def info(msg: str) -> None:
    print(c("ℹ ", BLUE) + msg)


def ok(msg: str) -> None:
    print(c("✓ ", GREEN) + msg)


def err(msg: str) -> None:
    """Report a failure on stderr."""
    print(c("✗ ", RED) + msg, file=sys.stderr)


__all__ = [
    "supports_color",
    "c",
    "info",
    "ok",
    "err",
    "RESET",
    "BOLD",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "CYAN",
    "GRAY",
]
