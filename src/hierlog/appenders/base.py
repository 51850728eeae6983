"""
Appender abstraction.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from hierlog.diagnostics import get_logger
from hierlog.exceptions import InvalidOrMissingParameter
from hierlog.formatters import Formatter
from hierlog.levels import DEFAULT_THRESHOLD_LEVEL, LogLevel


class Appender(ABC):
    """Abstract base class for appenders.

    ``log`` applies the threshold and the optional formatter, then hands the
    rendered line to ``perform_log``. Subclasses implement the actual output.
    """

    THRESHOLD_KEY = "ThresholdLevel"
    FORMATTER_KEY = "FormatterId"

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        self.threshold_level: LogLevel = DEFAULT_THRESHOLD_LEVEL
        self.formatter: Optional[Formatter] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identifier={self.identifier!r})"

    def update_with_dictionary(
        self,
        options: Mapping[str, Any],
        formatters: Iterable[Formatter] = (),
    ) -> None:
        """Apply parsed configuration. Unknown keys are ignored."""
        if self.THRESHOLD_KEY in options:
            self.threshold_level = self._parse_level(options, self.THRESHOLD_KEY)

        if self.FORMATTER_KEY in options:
            formatter_id = options[self.FORMATTER_KEY]
            formatter = next((f for f in formatters if f.identifier == formatter_id), None)
            if formatter is None:
                get_logger(__name__).warning(
                    "appender_unknown_formatter",
                    appender=self.identifier,
                    formatter=formatter_id,
                )
                raise InvalidOrMissingParameter(
                    component=self.identifier,
                    key=self.FORMATTER_KEY,
                    value=formatter_id,
                    reason="no such formatter",
                )
            self.formatter = formatter

    def _parse_level(self, options: Mapping[str, Any], key: str) -> LogLevel:
        raw = options[key]
        level = LogLevel.parse(raw)
        if level is None:
            get_logger(__name__).warning("appender_invalid_level", appender=self.identifier, key=key, value=raw)
            raise InvalidOrMissingParameter(component=self.identifier, key=key, value=raw)
        return level

    def log(self, message: str, level: LogLevel, info: Mapping[str, Any]) -> None:
        if level is LogLevel.OFF or level < self.threshold_level:
            return
        if self.formatter is not None:
            message = self.formatter.format(message, info)
        self.perform_log(message, level, info)

    @abstractmethod
    def perform_log(self, message: str, level: LogLevel, info: Mapping[str, Any]) -> None:
        """Write an already formatted record."""
        ...

    def close(self) -> None:
        """Release resources held by the appender."""
