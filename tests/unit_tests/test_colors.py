"""
Color table unit tests
"""

from __future__ import annotations

import pytest

from hierlog.colors import (
    RGB_CODES,
    XTERM_CODES,
    TTYColor,
    TTYType,
    background_color_sequence,
    text_color_sequence,
)


class TestColorTable:
    def test_every_color_has_both_encodings(self):
        assert set(XTERM_CODES) == set(TTYColor)
        assert set(RGB_CODES) == set(TTYColor)
        assert len(TTYColor) == 20

    def test_xterm_codes_are_palette_indexes(self):
        assert all(0 <= code <= 255 for code in XTERM_CODES.values())

    def test_rgb_codes_are_triples(self):
        for rgb in RGB_CODES.values():
            parts = rgb.split(",")
            assert len(parts) == 3
            assert all(0 <= int(part) <= 255 for part in parts)

    @pytest.mark.parametrize(
        ("color", "xterm", "rgb"),
        [
            (TTYColor.BLACK, 0, "0,0,0"),
            (TTYColor.RED, 9, "255,0,0"),
            (TTYColor.DARK_GREY, 238, "68,68,68"),
            (TTYColor.LIGHT_PURPLE, 135, "172,105,252"),
        ],
    )
    def test_known_values(self, color, xterm, rgb):
        assert color.xterm_code == xterm
        assert color.rgb_code == rgb
        assert color.code_for(TTYType.XTERM_COLOR) == str(xterm)
        assert color.code_for(TTYType.XCODE) == rgb


class TestSequences:
    def test_xterm(self):
        assert text_color_sequence(TTYColor.BLUE, TTYType.XTERM_COLOR) == "\x1b[38;5;21m"
        assert background_color_sequence(TTYColor.BLUE, TTYType.XTERM_COLOR) == "\x1b[48;5;21m"

    def test_xcode(self):
        assert text_color_sequence(TTYColor.BLUE, TTYType.XCODE) == "\x1b[fg0,0,255;"
        assert background_color_sequence(TTYColor.BLUE, TTYType.XCODE) == "\x1b[bg0,0,255;"
