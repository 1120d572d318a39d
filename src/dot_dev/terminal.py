"""Terminal session: raw mode, cursor control and decoded key events.

Prompts only talk to the terminal through :class:`TerminalSession`, which
keeps platform details (``termios``/``tty`` on POSIX, ``msvcrt`` on Windows)
out of the prompt logic and lets tests substitute a scripted session.

Raw mode is only ever entered through :meth:`TerminalSession.raw_mode`, a
context manager that restores the saved terminal attributes on every exit
path.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from enum import Enum
from typing import Iterator, Optional, TextIO, Union

from .errors import TerminalIOError

logger = logging.getLogger(__name__)

SAVE_CURSOR = "\x1b7"
RESTORE_CURSOR = "\x1b8"
CLEAR_LINE = "\x1b[2K\r"


class Key(Enum):
    ENTER = "enter"
    CTRL_C = "ctrl_c"
    TAB = "tab"
    BACKTAB = "backtab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    BACKSPACE = "backspace"
    ESC = "esc"
    UNKNOWN = "unknown"


# A key event is either a named key or a single printable character.
KeyEvent = Union[Key, str]

_CSI_KEYS = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
    "Z": Key.BACKTAB,
}
_WIN_SCAN_KEYS = {
    "H": Key.UP,
    "P": Key.DOWN,
    "K": Key.LEFT,
    "M": Key.RIGHT,
    "\x0f": Key.BACKTAB,
}


def _restore_mode(fd: int, attrs: list) -> None:
    import termios  # type: ignore

    try:
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
    except (termios.error, OSError) as e:
        raise TerminalIOError(f"Could not restore terminal mode: {e}") from e


def decode_char(ch: str) -> KeyEvent:
    """Map a single control/printable character to a key event."""
    if ch == "\x03":
        return Key.CTRL_C
    if ch in ("\r", "\n"):
        return Key.ENTER
    if ch == "\t":
        return Key.TAB
    if ch in ("\x7f", "\x08"):
        return Key.BACKSPACE
    if ch == "\x1b":
        return Key.ESC
    if ch and ch.isprintable():
        return ch
    return Key.UNKNOWN


class TerminalSession:
    """Byte-oriented terminal bound to a pair of text streams."""

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    @property
    def interactive(self) -> bool:
        try:
            return bool(self.stdin.isatty())
        except (AttributeError, ValueError):
            return False

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Switch stdin to raw mode for the duration of the block."""
        if os.name == "nt":
            yield
            return
        import termios  # type: ignore
        import tty  # type: ignore

        try:
            fd = self.stdin.fileno()
            old = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError, ValueError) as e:
            raise TerminalIOError(f"Could not enter raw mode: {e}") from e
        try:
            yield
        except BaseException:
            try:
                _restore_mode(fd, old)
            except TerminalIOError as e:
                # Keep the in-flight exception; the restore failure is secondary.
                logger.warning("%s", e)
            raise
        _restore_mode(fd, old)

    def write(self, text: str) -> None:
        try:
            self.stdout.write(text)
        except OSError as e:
            raise TerminalIOError(f"Terminal write failed: {e}") from e

    def flush(self) -> None:
        try:
            self.stdout.flush()
        except OSError as e:
            raise TerminalIOError(f"Terminal flush failed: {e}") from e

    def save_cursor(self) -> None:
        self.write(SAVE_CURSOR)

    def restore_cursor(self) -> None:
        self.write(RESTORE_CURSOR)

    def clear_line(self) -> None:
        self.write(CLEAR_LINE)

    def read_line(self) -> str:
        """Read one line in cooked mode, dropping only the line terminator.

        Raises ``EOFError`` when the stream is exhausted.
        """
        try:
            line = self.stdin.readline()
        except OSError as e:
            raise TerminalIOError(f"Terminal read failed: {e}") from e
        if line == "":
            raise EOFError
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def read_key(self) -> KeyEvent:
        """Block for one keypress and return it decoded."""
        if os.name == "nt":
            return self._read_key_windows()
        try:
            ch = self.stdin.read(1)
            if ch == "":
                # End of input behaves like a cancel so callers never spin.
                return Key.CTRL_C
            if ch != "\x1b":
                return decode_char(ch)
            ch2 = self.stdin.read(1)
            if ch2 != "[":
                return Key.ESC
            ch3 = self.stdin.read(1)
        except OSError as e:
            raise TerminalIOError(f"Terminal read failed: {e}") from e
        return _CSI_KEYS.get(ch3, Key.UNKNOWN)

    def _read_key_windows(self) -> KeyEvent:
        import msvcrt  # type: ignore

        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WIN_SCAN_KEYS.get(msvcrt.getwch(), Key.UNKNOWN)
        return decode_char(ch)


__all__ = [
    "Key",
    "KeyEvent",
    "TerminalSession",
    "decode_char",
    "SAVE_CURSOR",
    "RESTORE_CURSOR",
    "CLEAR_LINE",
]
