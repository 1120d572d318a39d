"""Error taxonomy shared by prompts, the merge engine and the CLI.

Every failure the tool reports is a :class:`DotDevError` carrying an
:class:`ErrorKind`. The top-level dispatcher matches on ``kind`` rather than
on concrete exception classes:

 - ``INTERRUPTED``: the user pressed Ctrl-C or input ended mid-prompt
 - ``IO_FAILURE``: terminal mode switching, cursor output or file access failed
 - ``VALIDATION_FAILURE``: bad domain input (unknown profile, malformed config)
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INTERRUPTED = "interrupted"
    IO_FAILURE = "io_failure"
    VALIDATION_FAILURE = "validation_failure"


class DotDevError(Exception):
    """Base error; subclasses pin ``kind``."""

    kind: ErrorKind = ErrorKind.VALIDATION_FAILURE


class Interrupted(DotDevError):
    """Raised when an interactive prompt is cancelled or input runs out."""

    kind = ErrorKind.INTERRUPTED

    def __init__(self, message: str = "Interrupted!") -> None:
        super().__init__(message)


class TerminalIOError(DotDevError):
    kind = ErrorKind.IO_FAILURE


class StorageError(DotDevError):
    kind = ErrorKind.IO_FAILURE


class ValidationError(DotDevError):
    kind = ErrorKind.VALIDATION_FAILURE


__all__ = [
    "ErrorKind",
    "DotDevError",
    "Interrupted",
    "TerminalIOError",
    "StorageError",
    "ValidationError",
]
