"""Single-line cyclic choice prompt.

The selection logic is a pure transition over :class:`ChoiceState`; the
:func:`prompt_choice` driver owns all terminal I/O. Each keystroke is read
inside its own raw-mode block so the terminal is back in cooked mode between
keystrokes and on every exit path.

Keys
- Enter commits the highlighted option
- Ctrl-C cancels with :class:`~dot_dev.errors.Interrupted`
- Tab / Down / Right move forward, Shift-Tab / Up / Left move back; both wrap

When stdin is not a TTY the driver falls back to a numbered list answered by
line input.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple, TypeVar

from ..errors import Interrupted
from ..terminal import Key, KeyEvent, TerminalSession
from ..ui import c, BOLD, CYAN, RED

T = TypeVar("T")

FORWARD_KEYS = frozenset({Key.TAB, Key.DOWN, Key.RIGHT})
BACKWARD_KEYS = frozenset({Key.BACKTAB, Key.UP, Key.LEFT})


class Outcome(Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ChoiceState:
    options: Tuple
    selected_index: int = 0

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("ChoiceState requires at least one option")
        if not 0 <= self.selected_index < len(self.options):
            raise ValueError(
                f"selected_index {self.selected_index} out of range "
                f"for {len(self.options)} options"
            )

    @property
    def current(self):
        return self.options[self.selected_index]

    def moved(self, delta: int) -> "ChoiceState":
        return replace(
            self, selected_index=(self.selected_index + delta) % len(self.options)
        )


def step(
    state: ChoiceState, event: KeyEvent
) -> Tuple[ChoiceState, Optional[Outcome]]:
    """Apply one key event; returns the next state and an outcome if terminal."""
    if event is Key.ENTER:
        return state, Outcome.CONFIRMED
    if event is Key.CTRL_C:
        return state, Outcome.CANCELLED
    if event in FORWARD_KEYS:
        return state.moved(1), None
    if event in BACKWARD_KEYS:
        return state.moved(-1), None
    return state, None


def _render(
    session: TerminalSession, label: str, state: ChoiceState, display: Callable
) -> None:
    session.clear_line()
    session.restore_cursor()
    session.write(label + c(display(state.current), BOLD + CYAN))
    session.flush()


def _numbered_choice(
    label: str,
    options: Sequence[T],
    default: int,
    session: TerminalSession,
    display: Callable[[T], str],
) -> T:
    for i, opt in enumerate(options, 1):
        session.write(f"  {i}. {display(opt)}\n")
    while True:
        session.write(f"{label}[1-{len(options)}, default {default + 1}]: ")
        session.flush()
        try:
            s = session.read_line().strip()
        except (EOFError, KeyboardInterrupt):
            session.write("\n")
            raise Interrupted() from None
        if not s:
            return options[default]
        if s.isdigit() and 1 <= int(s) <= len(options):
            return options[int(s) - 1]
        session.write(c("Invalid choice.", RED) + "\n")


def prompt_choice(
    label: str,
    options: Sequence[T],
    default: int = 0,
    session: Optional[TerminalSession] = None,
    display: Callable[[T], str] = str,
) -> T:
    """Let the user cycle through ``options`` and return the committed one."""
    state = ChoiceState(tuple(options), default)
    session = session or TerminalSession()
    if not session.interactive:
        return _numbered_choice(label, state.options, default, session, display)

    session.save_cursor()
    dirty = True
    while True:
        with session.raw_mode():
            if dirty:
                _render(session, label, state, display)
            event = session.read_key()
            next_state, outcome = step(state, event)
            dirty = next_state != state
            state = next_state
            if outcome is Outcome.CONFIRMED:
                session.write("\r\n")
                session.flush()
                return state.current
            if outcome is Outcome.CANCELLED:
                session.write("\r\n")
                session.flush()
                raise Interrupted()


YES, NO = "Yes", "No"


def prompt_yes_no(
    question: str, default: bool = True, session: Optional[TerminalSession] = None
) -> bool:
    """Ask a Yes/No question, highlighting ``default`` first."""
    answer = prompt_choice(
        question, [YES, NO], default=0 if default else 1, session=session
    )
    return answer == YES


__all__ = [
    "Outcome",
    "ChoiceState",
    "step",
    "prompt_choice",
    "prompt_yes_no",
    "FORWARD_KEYS",
    "BACKWARD_KEYS",
]
