"""Shared test fixtures for the stylelog test suite."""

import io

import pytest
from rich.console import Console

from stylelog import create_logger
from stylelog import logger as _logger_mod


# ---------------------------------------------------------------------------
# Recording sink
# ---------------------------------------------------------------------------
class RecordingSink:
    """Sink that records every call instead of printing.

    Each entry in ``calls`` is a tuple whose first element names the
    operation: ('print', prefix, style, args), ('group_open', title, style),
    ('group_close',) or ('warn', args).
    """

    def __init__(self):
        self.calls = []

    def print_styled(self, prefix, style, *args):
        self.calls.append(("print", prefix, style, args))

    def group_open(self, title, style=None):
        self.calls.append(("group_open", title, style))

    def group_close(self):
        self.calls.append(("group_close",))

    def warn(self, *args):
        self.calls.append(("warn", args))

    @property
    def kinds(self):
        return [call[0] for call in self.calls]

    @property
    def prints(self):
        return [call for call in self.calls if call[0] == "print"]


@pytest.fixture
def sink():
    """A fresh RecordingSink."""
    return RecordingSink()


@pytest.fixture
def make_logger(sink):
    """Factory for loggers writing to the shared RecordingSink."""
    def _make(options=None, **overrides):
        return create_logger(options, sink=sink, **overrides)
    return _make


# ---------------------------------------------------------------------------
# rich consoles writing to buffers
# ---------------------------------------------------------------------------
@pytest.fixture
def plain_console():
    """A rich Console with no colour support writing to a StringIO."""
    return Console(file=io.StringIO(), force_terminal=False,
                   color_system=None, width=120)


@pytest.fixture
def color_console():
    """A rich Console forced into truecolor mode writing to a StringIO."""
    return Console(file=io.StringIO(), force_terminal=True,
                   color_system="truecolor", width=120)


@pytest.fixture
def error_console():
    """A rich Console for warnings, writing to a StringIO."""
    return Console(file=io.StringIO(), force_terminal=False,
                   color_system=None, width=120)


# ---------------------------------------------------------------------------
# Default logger singleton
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_default_logger():
    """Reset the module-level default logger between tests."""
    old = _logger_mod._logger
    _logger_mod._logger = None
    yield
    _logger_mod._logger = old
