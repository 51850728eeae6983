"""
Diagnostics Logging Configuration.

Controls how hierlog reports on itself (registry activity, rejected
configuration). Records emitted by applications through hierlog loggers are
not affected.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiagnosticsLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DiagnosticsFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class DiagnosticsSettings(BaseSettings):
    """Internal diagnostics configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HIERLOG_DIAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: DiagnosticsLevel = Field(default=DiagnosticsLevel.WARNING, description="Diagnostics log level")
    format: DiagnosticsFormat = Field(default=DiagnosticsFormat.CONSOLE, description="Output format")
