"""
Console appender writing to stdout or stderr depending on the record level.

* If the error threshold is unset or not reached, the record goes to stdout
* If the error threshold is reached, the record goes to stderr

Records can be colorized per level (text and background independently) using
either the xterm 256 colors grammar or the XcodeColors RGB grammar, detected
once from the environment.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Iterable, Mapping, Optional

from hierlog.appenders.base import Appender
from hierlog.colors import (
    RESET_SEQUENCE,
    TTYColor,
    TTYType,
    background_color_sequence,
    text_color_sequence,
)
from hierlog.config import TerminalSettings
from hierlog.formatters import Formatter
from hierlog.levels import LogLevel


class StdOutAppender(Appender):
    """Threshold-driven, colorizing console appender.

    Args:
        identifier: Appender identifier, used in configuration errors
        terminal: Terminal capabilities; read from the environment when omitted
        stdout: Standard output stream (default: ``sys.stdout`` at write time)
        stderr: Error stream (default: ``sys.stderr`` at write time)
    """

    ERROR_THRESHOLD_KEY = "ErrorThresholdLevel"

    def __init__(
        self,
        identifier: str,
        *,
        terminal: Optional[TerminalSettings] = None,
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
    ) -> None:
        super().__init__(identifier)
        terminal = terminal if terminal is not None else TerminalSettings()
        self._tty_type = terminal.tty_type
        self._stdout = stdout
        self._stderr = stderr
        self.error_threshold_level: Optional[LogLevel] = LogLevel.ERROR
        self._text_colors: dict[LogLevel, TTYColor] = {}
        self._background_colors: dict[LogLevel, TTYColor] = {}

    @property
    def tty_type(self) -> TTYType:
        return self._tty_type

    def update_with_dictionary(
        self,
        options: Mapping[str, Any],
        formatters: Iterable[Formatter] = (),
    ) -> None:
        super().update_with_dictionary(options, formatters)

        # A missing key disables the error threshold, it does not keep the previous one.
        if self.ERROR_THRESHOLD_KEY in options:
            self.error_threshold_level = self._parse_level(options, self.ERROR_THRESHOLD_KEY)
        else:
            self.error_threshold_level = None

    def destination_for(self, level: LogLevel) -> IO[str]:
        threshold = self.error_threshold_level
        if threshold is not None and level >= threshold:
            return self._stderr if self._stderr is not None else sys.stderr
        return self._stdout if self._stdout is not None else sys.stdout

    def perform_log(self, message: str, level: LogLevel, info: Mapping[str, Any]) -> None:
        with self._lock:
            destination = self.destination_for(level)
            destination.write(self._colorize(message, level) + "\n")
            destination.flush()

    # -------------------------------------------------------------------------
    # Colors
    # -------------------------------------------------------------------------

    def colorize(self, message: str, level: LogLevel) -> str:
        with self._lock:
            return self._colorize(message, level)

    def _colorize(self, message: str, level: LogLevel) -> str:
        text_color = self._text_colors.get(level)
        background_color = self._background_colors.get(level)
        if text_color is None and background_color is None:
            return message

        prefix = ""
        if text_color is not None:
            prefix += text_color_sequence(text_color, self._tty_type)
        if background_color is not None:
            prefix += background_color_sequence(background_color, self._tty_type)
        return prefix + message + RESET_SEQUENCE[self._tty_type]

    def set_text_color(self, color: Optional[TTYColor], level: LogLevel) -> None:
        """Set the text color for ``level``, or remove it when ``color`` is None."""
        with self._lock:
            if color is None:
                self._text_colors.pop(level, None)
            else:
                self._text_colors[level] = color

    def set_background_color(self, color: Optional[TTYColor], level: LogLevel) -> None:
        """Set the background color for ``level``, or remove it when ``color`` is None."""
        with self._lock:
            if color is None:
                self._background_colors.pop(level, None)
            else:
                self._background_colors[level] = color

    def text_color(self, level: LogLevel) -> Optional[TTYColor]:
        with self._lock:
            return self._text_colors.get(level)

    def background_color(self, level: LogLevel) -> Optional[TTYColor]:
        with self._lock:
            return self._background_colors.get(level)

    @property
    def text_colors(self) -> dict[LogLevel, TTYColor]:
        with self._lock:
            return dict(self._text_colors)

    @property
    def background_colors(self) -> dict[LogLevel, TTYColor]:
        with self._lock:
            return dict(self._background_colors)
