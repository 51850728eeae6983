"""
Terminal color palette - single source of truth.

Every color has exactly one xterm-256 palette index and one RGB triple. Which of
the two encodings is written depends on the terminal protocol (``TTYType``) the
console appender detected at construction.
"""

from __future__ import annotations

from enum import Enum

ESC = "\x1b"


class TTYType(str, Enum):
    """Escape-sequence grammars understood by the supported consoles."""

    XCODE = "xcode"  # debugger console with the XcodeColors plugin, RGB triples
    XTERM_COLOR = "xterm_color"  # 256 colors palette


class TTYColor(Enum):
    """Named colors usable for log text and background."""

    BLACK = "black"
    DARK_GREY = "dark_grey"
    GREY = "grey"
    LIGHT_GREY = "light_grey"
    WHITE = "white"
    LIGHT_RED = "light_red"
    RED = "red"
    DARK_RED = "dark_red"
    LIGHT_GREEN = "light_green"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    LIGHT_BLUE = "light_blue"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    LIGHT_YELLOW = "light_yellow"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    PURPLE = "purple"
    LIGHT_PURPLE = "light_purple"
    DARK_PURPLE = "dark_purple"

    @property
    def xterm_code(self) -> int:
        return XTERM_CODES[self]

    @property
    def rgb_code(self) -> str:
        return RGB_CODES[self]

    def code_for(self, tty_type: TTYType) -> str:
        """Encoded color value for the given terminal protocol."""
        if tty_type is TTYType.XCODE:
            return self.rgb_code
        return str(self.xterm_code)


# =============================================================================
# xterm-256 palette indexes
# =============================================================================

XTERM_CODES: dict[TTYColor, int] = {
    TTYColor.BLACK: 0,
    TTYColor.DARK_GREY: 238,
    TTYColor.GREY: 241,
    TTYColor.LIGHT_GREY: 251,
    TTYColor.WHITE: 15,
    TTYColor.LIGHT_RED: 199,
    TTYColor.RED: 9,
    TTYColor.DARK_RED: 1,
    TTYColor.LIGHT_GREEN: 46,
    TTYColor.GREEN: 2,
    TTYColor.DARK_GREEN: 22,
    TTYColor.LIGHT_BLUE: 45,
    TTYColor.BLUE: 21,
    TTYColor.DARK_BLUE: 18,
    TTYColor.LIGHT_YELLOW: 228,
    TTYColor.YELLOW: 11,
    TTYColor.DARK_YELLOW: 3,
    TTYColor.PURPLE: 93,
    TTYColor.LIGHT_PURPLE: 135,
    TTYColor.DARK_PURPLE: 55,
}

# =============================================================================
# RGB triples (XcodeColors)
# =============================================================================

RGB_CODES: dict[TTYColor, str] = {
    TTYColor.BLACK: "0,0,0",
    TTYColor.DARK_GREY: "68,68,68",
    TTYColor.GREY: "98,98,98",
    TTYColor.LIGHT_GREY: "200,200,200",
    TTYColor.WHITE: "255,255,255",
    TTYColor.LIGHT_RED: "255,37,174",
    TTYColor.RED: "255,0,0",
    TTYColor.DARK_RED: "201,14,19",
    TTYColor.LIGHT_GREEN: "57,255,42",
    TTYColor.GREEN: "0,255,0",
    TTYColor.DARK_GREEN: "18,94,11",
    TTYColor.LIGHT_BLUE: "47,216,255",
    TTYColor.BLUE: "0,0,255",
    TTYColor.DARK_BLUE: "0,18,133",
    TTYColor.LIGHT_YELLOW: "255,255,143",
    TTYColor.YELLOW: "255,255,56",
    TTYColor.DARK_YELLOW: "206,203,43",
    TTYColor.PURPLE: "131,46,252",
    TTYColor.LIGHT_PURPLE: "172,105,252",
    TTYColor.DARK_PURPLE: "92,28,173",
}

# =============================================================================
# Escape grammar per protocol
# =============================================================================

TEXT_COLOR_PREFIX: dict[TTYType, str] = {
    TTYType.XCODE: f"{ESC}[fg",
    TTYType.XTERM_COLOR: f"{ESC}[38;5;",
}

BACKGROUND_COLOR_PREFIX: dict[TTYType, str] = {
    TTYType.XCODE: f"{ESC}[bg",
    TTYType.XTERM_COLOR: f"{ESC}[48;5;",
}

COLOR_SUFFIX: dict[TTYType, str] = {
    TTYType.XCODE: ";",
    TTYType.XTERM_COLOR: "m",
}

RESET_SEQUENCE: dict[TTYType, str] = {
    TTYType.XCODE: f"{ESC}[;",
    TTYType.XTERM_COLOR: f"{ESC}[0m",
}


def text_color_sequence(color: TTYColor, tty_type: TTYType) -> str:
    return TEXT_COLOR_PREFIX[tty_type] + color.code_for(tty_type) + COLOR_SUFFIX[tty_type]


def background_color_sequence(color: TTYColor, tty_type: TTYType) -> str:
    return BACKGROUND_COLOR_PREFIX[tty_type] + color.code_for(tty_type) + COLOR_SUFFIX[tty_type]
