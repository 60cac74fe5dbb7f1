# position.py

from enum import Enum
from typing import Tuple

class Position(Enum):
    """Horizontal or vertical alignment. CENTER is valid on both axes."""
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'
    TOP = 'top'
    BOTTOM = 'bottom'

    @property
    def is_horizontal(self) -> bool:
        return self in (Position.LEFT, Position.CENTER, Position.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Position.TOP, Position.CENTER, Position.BOTTOM)

    def __str__(self) -> str:
        return self.name.capitalize()

LEFT = Position.LEFT
CENTER = Position.CENTER
RIGHT = Position.RIGHT
TOP = Position.TOP
BOTTOM = Position.BOTTOM

def split_slack(slack: int, pos: Position, horizontal: bool = True) -> Tuple[int, int]:
    """
    Split ``slack`` cells into (leading, trailing) amounts for an alignment.

    CENTER gives the leading side ``slack // 2`` so an odd cell lands after the
    content. Positions from the other axis fall back to the leading edge.
    """
    if slack <= 0:
        return 0, 0
    if pos is Position.CENTER:
        lead = slack // 2
        return lead, slack - lead
    trailing_edge = Position.RIGHT if horizontal else Position.BOTTOM
    if pos is trailing_edge:
        return slack, 0
    return 0, slack
