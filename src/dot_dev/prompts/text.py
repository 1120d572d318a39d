"""Free-form text prompts.

``prompt_required`` loops until a non-empty line is given; ``prompt_optional``
reads a single line and maps an empty answer to ``None``. Answers are returned
exactly as typed apart from the line terminator. End of input and Ctrl-C both
surface as :class:`~dot_dev.errors.Interrupted`.
"""

from __future__ import annotations

from typing import Optional

from ..errors import Interrupted
from ..terminal import TerminalSession
from ..ui import c, YELLOW

REQUIRED_NOTICE = "A response is required."


def _read(label: str, session: TerminalSession) -> str:
    session.write(label)
    session.flush()
    try:
        return session.read_line()
    except EOFError:
        session.write("\n")
        raise Interrupted() from None
    except KeyboardInterrupt:
        session.write("\n")
        raise Interrupted() from None


def prompt_required(label: str, session: Optional[TerminalSession] = None) -> str:
    """Prompt with ``label`` until a non-empty response is entered."""
    session = session or TerminalSession()
    while True:
        value = _read(label, session)
        if value:
            return value
        session.write(c(REQUIRED_NOTICE, YELLOW) + "\n")


def prompt_optional(
    label: str, session: Optional[TerminalSession] = None
) -> Optional[str]:
    """Prompt once; an empty response means "no value"."""
    session = session or TerminalSession()
    value = _read(label, session)
    return value or None


__all__ = ["prompt_required", "prompt_optional", "REQUIRED_NOTICE"]
