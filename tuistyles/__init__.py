# __init__.py

from .block import RenderedBlock
from .color import AdaptiveColor, Color, ColorLike, color_enabled, is_light_terminal
from .layout import join_horizontal, join_vertical, place
from .logger import Logger
from .measure import strip_ansi, truncate, visible_width, wrap
from .position import BOTTOM, CENTER, LEFT, RIGHT, TOP, Position
from .style import (
    BORDERS, Border, BorderType, Style, StyleDefinitions, StyleProps, StyleRenderer
)

__all__ = [
    'Style', 'StyleProps', 'StyleRenderer', 'StyleDefinitions', 'RenderedBlock',
    'Border', 'BorderType', 'BORDERS',
    'Position', 'LEFT', 'CENTER', 'RIGHT', 'TOP', 'BOTTOM',
    'join_horizontal', 'join_vertical', 'place',
    'Color', 'AdaptiveColor', 'ColorLike', 'color_enabled', 'is_light_terminal',
    'visible_width', 'strip_ansi', 'truncate', 'wrap',
    'Logger',
]
