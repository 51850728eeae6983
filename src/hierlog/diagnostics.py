"""
Diagnostics logging for hierlog itself.

hierlog reports registry activity and rejected configuration through structlog.
The pipeline is private to hierlog (loggers are wrapped explicitly rather than
through ``structlog.configure``) so an application's own structlog setup is
left untouched. Call ``get_logger`` where the event is emitted: the wrapper
class it uses is the one installed by the latest ``configure_diagnostics``.

Library: structlog + orjson for JSON output.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import orjson
import structlog
from structlog.typing import EventDict, WrappedLogger

from hierlog.config import DiagnosticsFormat, DiagnosticsLevel, settings

# =============================================================================
# Global State
# =============================================================================

_state: dict[str, Any] = {
    "level": None,
    "format": None,
    "wrapper_class": None,
}


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class _StderrProxy:
    """File-like object resolving ``sys.stderr`` on every write.

    ``PrintLogger`` keeps the file it was given, so handing it ``sys.stderr``
    directly would ignore redirections made after import (test capture included).
    """

    def write(self, s: str) -> None:
        sys.stderr.write(s)

    def flush(self) -> None:
        sys.stderr.flush()


_STDERR = _StderrProxy()


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def render(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render with the renderer matching the configured format."""
    if _state["format"] is DiagnosticsFormat.JSON:
        return _JSON_RENDERER(logger, method_name, event_dict)
    return _CONSOLE_RENDERER(logger, method_name, event_dict)


_JSON_RENDERER = structlog.processors.JSONRenderer(serializer=orjson_dumps)
_CONSOLE_RENDERER = structlog.dev.ConsoleRenderer(colors=False)

_PROCESSORS = [
    structlog.processors.add_log_level,
    add_timestamp,
    structlog.processors.format_exc_info,
    render,
]


# =============================================================================
# Configuration Logic
# =============================================================================


def configure_diagnostics(
    *,
    level: DiagnosticsLevel | str | None = None,
    fmt: DiagnosticsFormat | str | None = None,
) -> None:
    """
    Configure hierlog's diagnostics output.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to settings
        fmt: Output format (console, json); defaults to settings
    """
    level = level or settings.diagnostics.level
    fmt = fmt or settings.diagnostics.format
    _state["level"] = DiagnosticsLevel(level.upper() if isinstance(level, str) else level)
    _state["format"] = DiagnosticsFormat(fmt.lower() if isinstance(fmt, str) else fmt)
    _state["wrapper_class"] = structlog.make_filtering_bound_logger(
        getattr(logging, _state["level"].value, logging.WARNING)
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a diagnostics logger bound to ``name``."""
    if _state["wrapper_class"] is None:
        configure_diagnostics()
    return structlog.wrap_logger(
        structlog.PrintLogger(file=_STDERR),
        processors=_PROCESSORS,
        wrapper_class=_state["wrapper_class"],
        context_class=dict,
    ).bind(logger=name)
