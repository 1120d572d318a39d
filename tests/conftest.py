import contextlib
import io

import pytest

from dot_dev.terminal import TerminalSession


class FakeSession(TerminalSession):
    """Scripted terminal: replays keys and lines, records output and raw mode."""

    def __init__(self, keys=(), lines=(), interactive=True):
        super().__init__(stdin=io.StringIO(), stdout=io.StringIO())
        self.keys = list(keys)
        self.lines = list(lines)
        self._interactive = interactive
        self.raw_depth = 0
        self.raw_entries = 0
        self.raw_exits = 0
        self.written = []

    @property
    def interactive(self):
        return self._interactive

    @contextlib.contextmanager
    def raw_mode(self):
        self.raw_entries += 1
        self.raw_depth += 1
        try:
            yield
        finally:
            self.raw_depth -= 1
            self.raw_exits += 1

    def write(self, text):
        self.written.append(text)

    def flush(self):
        pass

    @property
    def output(self):
        return "".join(self.written)

    def read_key(self):
        assert self.raw_depth == 1, "keys must be read inside raw mode"
        item = self.keys.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def read_line(self):
        assert self.raw_depth == 0, "lines must be read in cooked mode"
        if not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture(autouse=True)
def _no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
