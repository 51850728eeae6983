"""
Log formatters.

A formatter turns a message and its ``LogInfo`` metadata into the final line an
appender writes. Appenders without a formatter write the message unchanged.
"""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Mapping

from hierlog.diagnostics import get_logger, orjson_dumps
from hierlog.exceptions import InvalidOrMissingParameter
from hierlog.logger import LogInfoKeys

# =============================================================================
# Formatter Abstraction
# =============================================================================


class Formatter(ABC):
    """Abstract base class for formatters."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier

    def update_with_dictionary(self, options: Mapping[str, Any]) -> None:
        """Apply parsed configuration. Unknown keys are ignored."""

    @abstractmethod
    def format(self, message: str, info: Mapping[str, Any]) -> str:
        """Render a record."""
        ...

    @staticmethod
    def _fields(message: str, info: Mapping[str, Any]) -> dict[str, Any]:
        timestamp = info.get(LogInfoKeys.TIMESTAMP)
        level = info.get(LogInfoKeys.LOG_LEVEL)
        fields = {k: v for k, v in info.items() if k not in LogInfoKeys.ALL}
        fields.update(
            message=message,
            logger=info.get(LogInfoKeys.LOGGER_NAME, ""),
            level=str(level) if level is not None else "",
            timestamp=datetime.fromtimestamp(timestamp).isoformat() if timestamp is not None else "",
        )
        return fields


class PatternFormatter(Formatter):
    """Formats records with a ``str.format`` template.

    Available fields: ``message``, ``logger``, ``level``, ``timestamp`` and any
    extra info key passed when logging, all rendered as text. Missing extra keys
    render empty. Attribute and index lookups are rejected.

    Example:
        PatternFormatter("short", pattern="[{level}] {logger}: {message}")
    """

    PATTERN_KEY = "Pattern"
    DEFAULT_PATTERN = "{message}"
    CONVERSIONS = (None, "r", "s", "a")

    def __init__(self, identifier: str, pattern: str | None = None) -> None:
        super().__init__(identifier)
        self.pattern = self.DEFAULT_PATTERN
        if pattern is not None:
            self._set_pattern(pattern)

    def update_with_dictionary(self, options: Mapping[str, Any]) -> None:
        if self.PATTERN_KEY not in options:
            get_logger(__name__).warning("formatter_missing_parameter", formatter=self.identifier, key=self.PATTERN_KEY)
            raise InvalidOrMissingParameter(component=self.identifier, key=self.PATTERN_KEY)
        self._set_pattern(options[self.PATTERN_KEY])

    def _set_pattern(self, pattern: Any) -> None:
        if not isinstance(pattern, str):
            raise InvalidOrMissingParameter(
                component=self.identifier, key=self.PATTERN_KEY, value=pattern, reason="expected a string"
            )
        try:
            parsed = list(string.Formatter().parse(pattern))
        except ValueError as exc:
            raise InvalidOrMissingParameter(
                component=self.identifier, key=self.PATTERN_KEY, value=pattern, reason=str(exc)
            ) from exc

        for _, field_name, format_spec, conversion in parsed:
            if field_name is None:
                continue
            if field_name == "" or field_name.isdigit():
                reason = "positional fields are not supported"
            elif any(c in field_name for c in ".["):
                reason = f"attribute and index lookups are not supported in '{field_name}'"
            elif format_spec and "{" in format_spec:
                reason = f"nested fields are not supported in the format spec of '{field_name}'"
            elif conversion not in self.CONVERSIONS:
                reason = f"unknown conversion '!{conversion}'"
            else:
                continue
            raise InvalidOrMissingParameter(
                component=self.identifier, key=self.PATTERN_KEY, value=pattern, reason=reason
            )

        # Format specs are only checked by formatting.
        try:
            self._render(pattern, self._fields("", {}))
        except (ValueError, TypeError, KeyError, IndexError, AttributeError) as exc:
            raise InvalidOrMissingParameter(
                component=self.identifier, key=self.PATTERN_KEY, value=pattern, reason=str(exc)
            ) from exc
        self.pattern = pattern

    @staticmethod
    def _render(pattern: str, fields: Mapping[str, Any]) -> str:
        # Every value is rendered as text so a spec accepted above holds for any record.
        return string.Formatter().vformat(pattern, (), _BlankDefault({k: str(v) for k, v in fields.items()}))

    def format(self, message: str, info: Mapping[str, Any]) -> str:
        return self._render(self.pattern, self._fields(message, info))


class _BlankDefault(dict):
    def __missing__(self, key: str) -> str:
        return ""


class JsonFormatter(Formatter):
    """Formats records as one JSON object per line (orjson)."""

    def format(self, message: str, info: Mapping[str, Any]) -> str:
        fields = self._fields(message, info)
        ordered = {
            "timestamp": fields.pop("timestamp"),
            "level": fields.pop("level"),
            "logger": fields.pop("logger"),
            "message": fields.pop("message"),
        }
        ordered.update(fields)
        return orjson_dumps(ordered, default=str)
