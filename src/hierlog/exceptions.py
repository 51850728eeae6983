"""
Unified exception hierarchy for hierlog.

Errors are split between configuration problems (bad values handed to an
appender, formatter or logger) and registry misuse. Every error carries a
stable ``code`` and a ``details`` dict so callers loading configuration can
report the offending component without parsing messages.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

# Marks a configuration value that was not supplied at all.
MISSING: Any = object()


class HierlogError(Exception):
    """Base class of every hierlog error."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Configuration errors
# ================================


class ConfigurationError(HierlogError):
    """Raised when a component rejects the configuration it was given."""

    pass


class InvalidOrMissingParameter(ConfigurationError):
    """A configuration key is missing or holds a value that cannot be used.

    ``component`` is the identifier of the appender or formatter being configured.
    Omitting ``value`` reports the key as missing; any supplied value, ``None``
    included, is reported as invalid.
    """

    def __init__(
        self,
        *,
        component: str,
        key: str,
        value: Any = MISSING,
        reason: Optional[str] = None,
    ) -> None:
        missing = value is MISSING
        if missing:
            message = f"Missing '{key}' parameter for '{component}'"
        else:
            message = f"Invalid '{key}' value {value!r} for '{component}'"
        if reason:
            message = f"{message}: {reason}"
        details = {
            "component": component,
            "key": key,
            "value": None if missing else str(value),
            "missing": missing,
        }
        super().__init__(message, code="INVALID_CONFIGURATION_VALUE", details=details)


# ================================
# Registry errors
# ================================


class InvalidLoggerIdentifier(HierlogError):
    """Raised when registering a logger whose identifier is empty.

    The empty identifier belongs to the root logger, which is always present
    and must be configured through ``LoggerFactory.root_logger``.
    """

    def __init__(self, *, identifier: str = "") -> None:
        super().__init__(
            "Cannot register a logger with an empty identifier, configure the root logger instead",
            code="INVALID_LOGGER_IDENTIFIER",
            details={"identifier": identifier},
        )
