import io

import pytest

from consolebar.utils import setup_logging


class FakeTerminal(io.StringIO):
    def isatty(self):
        return True


class PipeStream(io.StringIO):
    def isatty(self):
        return False


def screen_after(output, start=""):
    """Apply written characters to a single-line screen; returns (line, cursor)."""
    line = list(start)
    cursor = len(line)
    for ch in output:
        if ch == "\b":
            cursor = max(0, cursor - 1)
        elif cursor < len(line):
            line[cursor] = ch
            cursor += 1
        else:
            line.append(ch)
            cursor += 1
    return "".join(line), cursor


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def pipe():
    return PipeStream()


@pytest.fixture(autouse=True)
def _quiet_logging():
    setup_logging()
    yield
    setup_logging()
