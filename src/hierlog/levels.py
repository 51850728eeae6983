"""
Log severity levels.

Levels are totally ordered by their integer rank: a higher rank is more severe.
``OFF`` is only meaningful as a threshold, nothing is ever logged at that level.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    """Ordered log severities."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5
    OFF = 6

    @classmethod
    def parse(cls, name: str) -> Optional["LogLevel"]:
        """Parse a level name (case-insensitive). Returns None for unknown names."""
        if not isinstance(name, str):
            return None
        return cls.__members__.get(name.strip().upper())

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


DEFAULT_THRESHOLD_LEVEL = LogLevel.DEBUG
