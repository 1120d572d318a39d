import pytest

from dot_dev.errors import ErrorKind, Interrupted, TerminalIOError
from dot_dev.prompts import ChoiceState, Outcome, prompt_choice, prompt_yes_no, step
from dot_dev.terminal import CLEAR_LINE, RESTORE_CURSOR, SAVE_CURSOR, Key


def test_forward_navigation_wraps():
    state = ChoiceState(("Yes", "No"), 0)
    state, outcome = step(state, Key.TAB)
    assert (state.selected_index, state.current, outcome) == (1, "No", None)
    state, outcome = step(state, Key.TAB)
    assert (state.selected_index, state.current, outcome) == (0, "Yes", None)


@pytest.mark.parametrize("key", [Key.TAB, Key.DOWN, Key.RIGHT])
def test_forward_keys(key):
    state, _ = step(ChoiceState(("a", "b", "c"), 1), key)
    assert state.selected_index == 2


@pytest.mark.parametrize("key", [Key.BACKTAB, Key.UP, Key.LEFT])
def test_backward_keys_wrap_to_last(key):
    state, outcome = step(ChoiceState(("a", "b", "c"), 0), key)
    assert state.selected_index == 2
    assert outcome is None


@pytest.mark.parametrize("event", ["x", " ", Key.BACKSPACE, Key.ESC, Key.UNKNOWN])
def test_other_events_leave_state_alone(event):
    state = ChoiceState(("a", "b"), 1)
    assert step(state, event) == (state, None)


def test_enter_confirms_and_ctrl_c_cancels():
    state = ChoiceState(("a", "b"), 1)
    assert step(state, Key.ENTER) == (state, Outcome.CONFIRMED)
    assert step(state, Key.CTRL_C) == (state, Outcome.CANCELLED)


def test_choice_state_validation():
    with pytest.raises(ValueError):
        ChoiceState(())
    with pytest.raises(ValueError):
        ChoiceState(("a",), 1)


def test_prompt_choice_commits_selected_option(make_session):
    session = make_session(keys=[Key.TAB, Key.ENTER])
    assert prompt_choice("Replace? ", ["Yes", "No"], session=session) == "No"
    assert session.raw_entries == session.raw_exits == 2
    assert session.raw_depth == 0
    out = session.output
    assert out.count(SAVE_CURSOR) == 1
    assert CLEAR_LINE in out and RESTORE_CURSOR in out
    assert "Replace? Yes" in out and "Replace? No" in out
    assert out.endswith("\r\n")


def test_prompt_choice_redraws_only_on_change(make_session):
    session = make_session(keys=["q", Key.UNKNOWN, Key.ENTER])
    assert prompt_choice("Pick: ", ["a", "b"], session=session) == "a"
    assert session.output.count("Pick: ") == 1
    assert session.raw_entries == 3


def test_prompt_choice_cancel_restores_terminal(make_session):
    session = make_session(keys=[Key.DOWN, Key.CTRL_C])
    with pytest.raises(Interrupted) as exc:
        prompt_choice("Pick: ", ["a", "b"], session=session)
    assert exc.value.kind is ErrorKind.INTERRUPTED
    assert session.raw_depth == 0
    assert session.raw_entries == session.raw_exits == 2


def test_prompt_choice_io_error_restores_terminal(make_session):
    session = make_session(keys=[Key.TAB, TerminalIOError("read failed")])
    with pytest.raises(TerminalIOError):
        prompt_choice("Pick: ", ["a", "b"], session=session)
    assert session.raw_depth == 0
    assert session.raw_entries == session.raw_exits


def test_prompt_choice_generic_options(make_session):
    session = make_session(keys=[Key.LEFT, Key.ENTER])
    picked = prompt_choice(
        "n? ", [1, 2, 3], default=1, session=session, display=lambda n: f"#{n}"
    )
    assert picked == 1
    assert "n? #2" in session.output


def test_prompt_yes_no(make_session):
    assert prompt_yes_no("Q? ", session=make_session(keys=[Key.ENTER])) is True
    assert (
        prompt_yes_no("Q? ", default=False, session=make_session(keys=[Key.ENTER]))
        is False
    )
    assert prompt_yes_no("Q? ", session=make_session(keys=[Key.RIGHT, Key.ENTER])) is False


def test_numbered_fallback_when_not_a_tty(make_session):
    session = make_session(lines=["0", "5", "2"], interactive=False)
    assert prompt_choice("Pick ", ["a", "b", "c"], session=session) == "b"
    assert "  1. a" in session.output
    assert session.output.count("Invalid choice.") == 2
    assert session.raw_entries == 0


def test_numbered_fallback_blank_picks_default(make_session):
    session = make_session(lines=[""], interactive=False)
    assert prompt_choice("Pick ", ["a", "b"], default=1, session=session) == "b"


def test_numbered_fallback_eof_interrupts(make_session):
    session = make_session(lines=[], interactive=False)
    with pytest.raises(Interrupted):
        prompt_choice("Pick ", ["a", "b"], session=session)
