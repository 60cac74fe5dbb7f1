# style/definitions.py

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

FMT = lambda x: f'\033[{x}m'  # Core formatting utility

FORMATS = MappingProxyType({
    'RESET': FMT('0'),
    'BOLD_ON': FMT('1'),
    'FAINT_ON': FMT('2'),
    'ITALIC_ON': FMT('3'),
    'UNDERLINE_ON': FMT('4'),
    'BLINK_ON': FMT('5'),
    'REVERSE_ON': FMT('7'),
    'STRIKETHROUGH_ON': FMT('9'),
})

# Emission order of decoration codes within one SGR prefix.
DECORATIONS = ('bold', 'faint', 'italic', 'underline', 'blink', 'reverse', 'strikethrough')

@dataclass(frozen=True)
class Border:
    """Glyphs for the four edges and four corners of a box."""
    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

class BorderType(Enum):
    NORMAL = 'normal'
    ROUNDED = 'rounded'
    THICK = 'thick'
    DOUBLE = 'double'
    BLOCK = 'block'
    OUTER_HALF_BLOCK = 'outer_half_block'
    INNER_HALF_BLOCK = 'inner_half_block'
    HIDDEN = 'hidden'

BORDERS: Mapping[BorderType, Border] = MappingProxyType({
    BorderType.NORMAL: Border('─', '─', '│', '│', '┌', '┐', '└', '┘'),
    BorderType.ROUNDED: Border('─', '─', '│', '│', '╭', '╮', '╰', '╯'),
    BorderType.THICK: Border('━', '━', '┃', '┃', '┏', '┓', '┗', '┛'),
    BorderType.DOUBLE: Border('═', '═', '║', '║', '╔', '╗', '╚', '╝'),
    BorderType.BLOCK: Border('█', '█', '█', '█', '█', '█', '█', '█'),
    BorderType.OUTER_HALF_BLOCK: Border('▀', '▄', '▌', '▐', '▛', '▜', '▙', '▟'),
    BorderType.INNER_HALF_BLOCK: Border('▄', '▀', '▐', '▌', '▗', '▖', '▝', '▘'),
    BorderType.HIDDEN: Border(' ', ' ', ' ', ' ', ' ', ' ', ' ', ' '),
})

BorderSpec = Union[BorderType, Border]

def get_border(kind: BorderSpec) -> Border:
    """Resolve a border type to its glyph set; custom ``Border`` values pass through."""
    if isinstance(kind, Border):
        return kind
    return BORDERS[kind]

@dataclass(frozen=True)
class StyleDefinitions:
    """
    Renderer configuration: SGR format codes, the border catalog, tab
    expansion and the marker used when ``max_width`` cuts a line.
    """
    formats: Mapping[str, str] = field(default_factory=lambda: FORMATS)
    borders: Mapping[BorderType, Border] = field(default_factory=lambda: BORDERS)
    tab_width: int = 4
    ellipsis: str = '...'

    def get_format(self, name: str) -> str:
        """Get a format code by name."""
        return self.formats.get(name, '')

    def get_border(self, kind: BorderSpec) -> Border:
        if isinstance(kind, Border):
            return kind
        return self.borders.get(kind, BORDERS[kind])

DEFAULT_DEFINITIONS = StyleDefinitions()
