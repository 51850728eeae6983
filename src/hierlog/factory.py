"""
LoggerFactory: registry of loggers and hierarchical resolution.

The factory holds the root logger (identifier ``""``, always present) and the
loggers registered or derived so far. Requesting an unknown identifier derives
a logger from the closest registered ancestor, or from the root when there is
none, and caches it until the next ``reset_configuration``.

Usage:
    from hierlog import get_logger

    log = get_logger("app.network.http")
    log.info("connected")
"""

from __future__ import annotations

import threading
from typing import Optional

from hierlog.diagnostics import get_logger as get_diagnostics_logger
from hierlog.exceptions import InvalidLoggerIdentifier
from hierlog.logger import Logger

IDENTIFIER_DELIMITER = "."


def parent_identifier(identifier: str) -> str:
    """Drop the last dot-delimited component: ``"a.b.c"`` -> ``"a.b"``, ``"a"`` -> ``""``."""
    head, _, _ = identifier.rpartition(IDENTIFIER_DELIMITER)
    return head


class LoggerFactory:
    """Registry resolving identifiers to loggers."""

    def __init__(self) -> None:
        self._root_logger = Logger("")
        self._loggers: dict[str, Logger] = {}
        self._lock = threading.RLock()

    @property
    def root_logger(self) -> Logger:
        """The catch-all logger used when no registered ancestor matches."""
        return self._root_logger

    @property
    def loggers(self) -> dict[str, Logger]:
        """Snapshot of the registered and derived loggers, root excluded."""
        with self._lock:
            return dict(self._loggers)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._loggers

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def register_logger(self, logger: Logger) -> None:
        """Add ``logger``, replacing any logger already registered with its identifier.

        Raises:
            InvalidLoggerIdentifier: the identifier is empty; use ``root_logger`` instead
        """
        if not logger.identifier:
            raise InvalidLoggerIdentifier(identifier=logger.identifier)

        with self._lock:
            self._loggers[logger.identifier] = logger
        get_diagnostics_logger(__name__).debug("logger_registered", identifier=logger.identifier)

    def reset_configuration(self) -> None:
        """Forget every logger and restore the root logger defaults."""
        with self._lock:
            self._loggers.clear()
            self._root_logger.reset_configuration()
        get_diagnostics_logger(__name__).info("configuration_reset")

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def get_logger(self, identifier: str) -> Logger:
        """Return the logger for ``identifier``, deriving and caching it if needed.

        The derived logger copies the configuration of the closest registered
        ancestor (``"a.b"`` before ``"a"`` for ``"a.b.c"``), or of the root
        logger. It can then be updated independently from that ancestor.
        """
        if not identifier:
            return self._root_logger

        with self._lock:
            found = self._loggers.get(identifier)
            if found is not None:
                return found

            base = self._closest_ancestor(identifier)
            found = base.copy(identifier)
            self._loggers[identifier] = found

        get_diagnostics_logger(__name__).debug("logger_derived", identifier=identifier, base=base.identifier)
        return found

    def _closest_ancestor(self, identifier: str) -> Logger:
        ancestor = parent_identifier(identifier)
        while ancestor:
            candidate = self._loggers.get(ancestor)
            if candidate is not None:
                return candidate
            ancestor = parent_identifier(ancestor)
        return self._root_logger


# =============================================================================
# Process-scoped default factory
# =============================================================================

_default_factory: Optional[LoggerFactory] = None
_default_factory_lock = threading.Lock()


def get_default_factory() -> LoggerFactory:
    """Return the process-wide factory, creating it on first use."""
    global _default_factory
    with _default_factory_lock:
        if _default_factory is None:
            _default_factory = LoggerFactory()
        return _default_factory


def set_default_factory(factory: Optional[LoggerFactory]) -> None:
    """Replace the process-wide factory. ``None`` makes the next access create a new one."""
    global _default_factory
    with _default_factory_lock:
        _default_factory = factory


def get_logger(identifier: str) -> Logger:
    """Shortcut for ``get_default_factory().get_logger(identifier)``."""
    return get_default_factory().get_logger(identifier)
