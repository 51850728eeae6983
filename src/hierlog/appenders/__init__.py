"""
Appenders: destinations of accepted log records.

- StdOutAppender: stdout/stderr by error threshold, per-level terminal colors
- FileAppender: local file with size-based rotation

Design Pattern: Strategy Pattern, every appender implements ``perform_log``.
"""

from .base import Appender
from .file import FileAppender
from .stdout import StdOutAppender

__all__ = ["Appender", "FileAppender", "StdOutAppender"]
