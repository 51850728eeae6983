"""
Logger: a named entry point forwarding accepted records to its appenders.

Loggers are normally obtained from ``LoggerFactory.get_logger`` which derives
their configuration from the closest registered ancestor.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from hierlog.levels import DEFAULT_THRESHOLD_LEVEL, LogLevel

if TYPE_CHECKING:
    from hierlog.appenders.base import Appender


class LogInfoKeys:
    """Keys of the metadata dict handed to appenders with every record."""

    LOGGER_NAME = "LoggerName"
    LOG_LEVEL = "LogLevel"
    TIMESTAMP = "Timestamp"

    ALL = frozenset({LOGGER_NAME, LOG_LEVEL, TIMESTAMP})


class Logger:
    """Hierarchically named logger.

    Args:
        identifier: Dot-delimited name, ``""`` for the root logger
        threshold_level: Records below this level are dropped
        appenders: Destinations of accepted records
    """

    def __init__(
        self,
        identifier: str = "",
        threshold_level: LogLevel = DEFAULT_THRESHOLD_LEVEL,
        appenders: Optional[Iterable["Appender"]] = None,
    ) -> None:
        self.identifier = identifier
        self.threshold_level = threshold_level
        self._appenders: list["Appender"] = list(appenders or ())
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Logger(identifier={self.identifier!r}, threshold_level={self.threshold_level.name})"

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def appenders(self) -> tuple["Appender", ...]:
        with self._lock:
            return tuple(self._appenders)

    def add_appender(self, appender: "Appender") -> None:
        with self._lock:
            self._appenders.append(appender)

    def remove_appender(self, appender: "Appender") -> None:
        with self._lock:
            if appender in self._appenders:
                self._appenders.remove(appender)

    def copy(self, new_identifier: str) -> "Logger":
        """Clone this logger's configuration under another identifier.

        Appender instances are shared with the source logger; the list holding
        them is not.
        """
        return Logger(
            identifier=new_identifier,
            threshold_level=self.threshold_level,
            appenders=self.appenders,
        )

    def reset_configuration(self) -> None:
        with self._lock:
            self.threshold_level = DEFAULT_THRESHOLD_LEVEL
            self._appenders = []

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level is not LogLevel.OFF and level >= self.threshold_level

    def log(self, message: str, level: LogLevel, info: Optional[Mapping[str, Any]] = None) -> None:
        if not self.is_enabled_for(level):
            return

        record_info: dict[str, Any] = dict(info or {})
        record_info[LogInfoKeys.LOGGER_NAME] = self.identifier
        record_info[LogInfoKeys.LOG_LEVEL] = level
        record_info[LogInfoKeys.TIMESTAMP] = time.time()

        for appender in self.appenders:
            appender.log(message, level, record_info)

    def trace(self, message: str, **info: Any) -> None:
        self.log(message, LogLevel.TRACE, info)

    def debug(self, message: str, **info: Any) -> None:
        self.log(message, LogLevel.DEBUG, info)

    def info(self, message: str, **info: Any) -> None:
        self.log(message, LogLevel.INFO, info)

    def warning(self, message: str, **info: Any) -> None:
        self.log(message, LogLevel.WARNING, info)

    def error(self, message: str, **info: Any) -> None:
        self.log(message, LogLevel.ERROR, info)

    def fatal(self, message: str, **info: Any) -> None:
        self.log(message, LogLevel.FATAL, info)
