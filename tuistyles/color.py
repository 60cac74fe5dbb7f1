# color.py

"""
Color values consumed by the renderer.

The renderer only needs objects that can produce SGR sequences (``ColorLike``).
Parsing of user-facing color strings and the light/dark background probe live
here, outside the rendering path, and are resolved before a Style is built.
"""

import os, re
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol, Tuple
from rich.color import Color as RichColor, ColorParseError

_ALIASES = {
    'gray': 'bright_black',
    'grey': 'bright_black',
    'bright_gray': 'bright_white',
    'bright_grey': 'bright_white',
}
_SHORT_HEX = re.compile(r'^#([0-9a-f]{3})$')

class ColorLike(Protocol):
    """Anything that can emit foreground and background SGR sequences."""
    def to_ansi(self) -> str: ...
    def to_ansi_background(self) -> str: ...

def _sgr(codes: Tuple[str, ...]) -> str:
    return f"\033[{';'.join(codes)}m" if codes else ''

@dataclass(frozen=True)
class Color:
    """
    A parsed terminal color.

    Build with ``Color.parse``: hex (``#RGB``/``#RRGGBB``), ANSI names
    (``red``, ``bright-blue``, ``gray``) or 256-color indexes (``"214"``).
    """
    value: str
    rich: RichColor = field(repr=False, compare=False)

    @classmethod
    def parse(cls, text: str) -> 'Color':
        if not text or not text.strip():
            raise ValueError("color cannot be empty")
        value = text.strip().lower().replace('-', '_')
        value = _ALIASES.get(value, value)
        short = _SHORT_HEX.match(value)
        if short:
            value = '#' + ''.join(c * 2 for c in short.group(1))

        if value.isdigit():
            number = int(value)
            if number > 255:
                raise ValueError(f"ANSI color code out of range (0-255): {number}")
            return cls(value, RichColor.from_ansi(number))
        try:
            return cls(value, RichColor.parse(value))
        except ColorParseError as e:
            raise ValueError(
                f"invalid color: {text} (must be hex, ANSI name, or ANSI code 0-255)"
            ) from e

    def to_ansi(self) -> str:
        return _sgr(self.rich.get_ansi_codes(foreground=True))

    def to_ansi_background(self) -> str:
        return _sgr(self.rich.get_ansi_codes(foreground=False))

@dataclass(frozen=True)
class AdaptiveColor:
    """A light/dark pair, resolved once against the terminal background."""
    light: Color
    dark: Color

    @classmethod
    def parse(cls, light: str, dark: str) -> 'AdaptiveColor':
        try:
            light_color = Color.parse(light)
        except ValueError as e:
            raise ValueError(f"invalid light color: {e}") from e
        try:
            dark_color = Color.parse(dark)
        except ValueError as e:
            raise ValueError(f"invalid dark color: {e}") from e
        return cls(light_color, dark_color)

    def resolve(self, is_light: bool) -> Color:
        return self.light if is_light else self.dark

def is_light_terminal(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Guess whether the terminal background is light.

    ``TERM_BACKGROUND=light|dark`` wins; otherwise ``COLORFGBG`` ("fg;bg")
    with a background index above 6 counts as light. Defaults to dark.
    """
    env = os.environ if environ is None else environ
    background = env.get('TERM_BACKGROUND', '')
    if background:
        return background.lower() == 'light'

    parts = env.get('COLORFGBG', '').split(';')
    if len(parts) == 2 and parts[1].isdigit():
        return int(parts[1]) > 6
    return False

def color_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """False when ``NO_COLOR`` is set to a non-empty value or ``TERM=dumb``."""
    env = os.environ if environ is None else environ
    if env.get('NO_COLOR'):
        return False
    return env.get('TERM', '') != 'dumb'
