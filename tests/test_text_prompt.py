import pytest

from dot_dev.errors import ErrorKind, Interrupted
from dot_dev.prompts import prompt_optional, prompt_required
from dot_dev.prompts.text import REQUIRED_NOTICE


def test_required_reprompts_until_non_empty(make_session):
    session = make_session(lines=["", "", "x"])
    assert prompt_required("Variable name: ", session) == "x"
    assert session.output.count("Variable name: ") == 3
    assert session.output.count(REQUIRED_NOTICE) == 2


def test_required_keeps_whitespace(make_session):
    assert prompt_required("Name: ", make_session(lines=["  A B "])) == "  A B "
    assert prompt_required("Name: ", make_session(lines=["   "])) == "   "


def test_optional_maps_empty_to_none(make_session):
    assert prompt_optional("Description: ", make_session(lines=[""])) is None
    assert prompt_optional("Description: ", make_session(lines=["abc"])) == "abc"


def test_label_written_before_read(make_session):
    session = make_session(lines=["abc"])
    prompt_optional("Default value: ", session)
    assert session.written[0] == "Default value: "


@pytest.mark.parametrize("prompt", [prompt_required, prompt_optional])
def test_end_of_input_interrupts(make_session, prompt):
    with pytest.raises(Interrupted) as exc:
        prompt("Label: ", make_session(lines=[]))
    assert exc.value.kind is ErrorKind.INTERRUPTED


def test_required_interrupted_after_empty_answers(make_session):
    with pytest.raises(Interrupted):
        prompt_required("Label: ", make_session(lines=["", ""]))


@pytest.mark.parametrize("prompt", [prompt_required, prompt_optional])
def test_ctrl_c_interrupts(make_session, prompt):
    with pytest.raises(Interrupted):
        prompt("Label: ", make_session(lines=[KeyboardInterrupt()]))
