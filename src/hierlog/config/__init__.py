"""
hierlog Configuration Module.

Each sub-module is an independent concern loading from its own environment
variables:

- ``TerminalSettings``: ``XcodeColors`` and ``TERM``, read by the console appender
- ``DiagnosticsSettings``: ``HIERLOG_DIAG_*``, hierlog's own diagnostics output

Usage:
    from hierlog.config import settings

    settings.terminal.tty_type
    settings.diagnostics.level
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import DiagnosticsFormat, DiagnosticsLevel, DiagnosticsSettings
from .terminal import TerminalSettings


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(extra="ignore")

    @cached_property
    def terminal(self) -> TerminalSettings:
        return TerminalSettings()

    @cached_property
    def diagnostics(self) -> DiagnosticsSettings:
        return DiagnosticsSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "DiagnosticsFormat",
    "DiagnosticsLevel",
    "DiagnosticsSettings",
    "TerminalSettings",
]
