import io

import pytest

from hierlog.appenders import StdOutAppender
from hierlog.config import TerminalSettings
from hierlog.factory import LoggerFactory, set_default_factory


@pytest.fixture(scope="function", autouse=True)
def isolated_default_factory():
    """
    Gives every test a fresh process-wide factory so loggers cached by one
    test never leak into another.
    """
    set_default_factory(None)
    yield
    set_default_factory(None)


@pytest.fixture
def factory() -> LoggerFactory:
    return LoggerFactory()


@pytest.fixture
def xterm_terminal() -> TerminalSettings:
    return TerminalSettings(xcode_colors=None, term="xterm-256color")


@pytest.fixture
def xcode_terminal() -> TerminalSettings:
    return TerminalSettings(xcode_colors="YES", term=None)


class Streams:
    def __init__(self) -> None:
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()


@pytest.fixture
def streams() -> Streams:
    return Streams()


@pytest.fixture
def console(xterm_terminal, streams) -> StdOutAppender:
    """xterm console appender writing to in-memory streams."""
    return StdOutAppender("console", terminal=xterm_terminal, stdout=streams.stdout, stderr=streams.stderr)


@pytest.fixture
def xcode_console(xcode_terminal, streams) -> StdOutAppender:
    """XcodeColors console appender writing to in-memory streams."""
    return StdOutAppender("xcode-console", terminal=xcode_terminal, stdout=streams.stdout, stderr=streams.stderr)
