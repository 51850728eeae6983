"""
hierlog: hierarchical logging runtime.

Loggers are named with dot-delimited identifiers. A logger that was never
registered inherits the configuration of its closest registered ancestor.
Accepted records are routed to appenders, such as the colorizing console
appender.

Usage:
    from hierlog import LogLevel, StdOutAppender, TTYColor, get_default_factory

    console = StdOutAppender("console")
    console.set_text_color(TTYColor.RED, LogLevel.ERROR)

    factory = get_default_factory()
    factory.root_logger.add_appender(console)

    factory.get_logger("app.db").error("connection lost")
"""

from .appenders import Appender, FileAppender, StdOutAppender
from .colors import TTYColor, TTYType
from .exceptions import (
    ConfigurationError,
    HierlogError,
    InvalidLoggerIdentifier,
    InvalidOrMissingParameter,
)
from .factory import LoggerFactory, get_default_factory, get_logger, set_default_factory
from .formatters import Formatter, JsonFormatter, PatternFormatter
from .levels import LogLevel
from .logger import LogInfoKeys, Logger

__all__ = [
    "Appender",
    "ConfigurationError",
    "FileAppender",
    "Formatter",
    "HierlogError",
    "InvalidLoggerIdentifier",
    "InvalidOrMissingParameter",
    "JsonFormatter",
    "LogInfoKeys",
    "LogLevel",
    "Logger",
    "LoggerFactory",
    "PatternFormatter",
    "StdOutAppender",
    "TTYColor",
    "TTYType",
    "get_default_factory",
    "get_logger",
    "set_default_factory",
]
