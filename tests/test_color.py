# test_color.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rich.color import ColorParseError
from tuistyles.color import AdaptiveColor, Color, color_enabled, is_light_terminal


class TestColorParse:
    """Color strings to SGR sequences."""

    def test_ansi_name(self):
        red = Color.parse('red')
        assert red.to_ansi() == '\x1b[31m'
        assert red.to_ansi_background() == '\x1b[41m'

    def test_bright_name_with_dash(self):
        assert Color.parse('bright-blue').to_ansi() == '\x1b[94m'

    def test_gray_alias(self):
        assert Color.parse('gray') == Color.parse('grey') == Color.parse('bright_black')
        assert Color.parse('gray').to_ansi() == '\x1b[90m'

    def test_short_hex(self):
        color = Color.parse('#F00')
        assert color.value == '#ff0000'
        assert color.to_ansi() == '\x1b[38;2;255;0;0m'

    def test_full_hex_background(self):
        assert Color.parse('#0080ff').to_ansi_background() == '\x1b[48;2;0;128;255m'

    def test_256_index(self):
        assert Color.parse('214').to_ansi() == '\x1b[38;5;214m'

    def test_low_index_is_standard(self):
        assert Color.parse('9').to_ansi() == '\x1b[91m'

    @pytest.mark.parametrize('text', ['', '   ', 'notacolor', '256', '#12345'])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            Color.parse(text)

    def test_parse_error_is_chained(self):
        with pytest.raises(ValueError) as excinfo:
            Color.parse('notacolor')
        assert isinstance(excinfo.value.__cause__, ColorParseError)


class TestAdaptiveColor:
    """Light/dark pairs."""

    def test_resolve(self):
        pair = AdaptiveColor.parse('black', 'white')
        assert pair.resolve(True) == Color.parse('black')
        assert pair.resolve(False) == Color.parse('white')

    def test_names_the_failing_side(self):
        with pytest.raises(ValueError, match='invalid light color'):
            AdaptiveColor.parse('nope', 'white')
        with pytest.raises(ValueError, match='invalid dark color'):
            AdaptiveColor.parse('black', 'nope')


class TestEnvironmentProbes:
    """Terminal background and color capability from environment variables."""

    @pytest.mark.parametrize('environ, expected', [
        ({'TERM_BACKGROUND': 'light'}, True),
        ({'TERM_BACKGROUND': 'dark', 'COLORFGBG': '0;15'}, False),
        ({'COLORFGBG': '0;15'}, True),
        ({'COLORFGBG': '15;0'}, False),
        ({'COLORFGBG': 'garbage'}, False),
        ({}, False),
    ])
    def test_is_light_terminal(self, environ, expected):
        assert is_light_terminal(environ) is expected

    @pytest.mark.parametrize('environ, expected', [
        ({}, True),
        ({'NO_COLOR': '1'}, False),
        ({'NO_COLOR': ''}, True),
        ({'TERM': 'dumb'}, False),
        ({'TERM': 'xterm-256color'}, True),
    ])
    def test_color_enabled(self, environ, expected):
        assert color_enabled(environ) is expected
