"""
Terminal Configuration.

Captures the two environment signals the console appender uses to pick an
escape-sequence grammar. Reading them through a settings model keeps protocol
detection testable without touching the real process environment.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hierlog.colors import TTYType

XCODE_COLORS_ENABLED = "YES"


class TerminalSettings(BaseSettings):
    """Terminal capabilities advertised through the environment."""

    model_config = SettingsConfigDict(
        extra="ignore",
        frozen=True,
    )

    xcode_colors: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("xcode_colors", "XcodeColors"),
        description="Set to YES by the XcodeColors debugger plugin",
    )
    term: Optional[str] = Field(
        default=None,
        description="Terminal type",
    )

    @property
    def tty_type(self) -> TTYType:
        # Only the exact literal enables the debugger protocol.
        if self.xcode_colors == XCODE_COLORS_ENABLED:
            return TTYType.XCODE
        return TTYType.XTERM_COLOR
