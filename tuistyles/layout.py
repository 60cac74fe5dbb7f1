# layout.py

"""
Composition of already-rendered blocks.

Functions here accept plain strings or ``RenderedBlock`` values and never look
at Style internals. Every gap is filled with plain spaces, measured with
``visible_width`` so wide characters and embedded escapes line up.
"""

from typing import List
from .block import BlockLike, RenderedBlock, as_block
from .logger import Logger
from .measure import pad_right, visible_width
from .position import Position, split_slack

logger = Logger(__name__)

def _rectangle(block: RenderedBlock) -> List[str]:
    """Lines of ``block`` right-padded to the block's own width."""
    return [pad_right(line, block.width) for line in block.lines]

def join_horizontal(pos: Position, *blocks: BlockLike) -> str:
    """
    Place blocks side by side, left to right.

    Shorter blocks get blank rows according to ``pos`` (TOP, CENTER or
    BOTTOM; any other position behaves like TOP). Each block keeps its own
    width.
    """
    if not blocks:
        return ''
    parsed = [as_block(block) for block in blocks]
    height = max(block.height for block in parsed)

    columns = []
    for block in parsed:
        above, below = split_slack(height - block.height, pos, horizontal=False)
        blank = ' ' * block.width
        columns.append([blank] * above + _rectangle(block) + [blank] * below)

    return '\n'.join(''.join(row) for row in zip(*columns))

def join_vertical(pos: Position, *blocks: BlockLike) -> str:
    """
    Stack blocks top to bottom, aligning each row within the widest block
    according to ``pos`` (LEFT, CENTER or RIGHT).
    """
    if not blocks:
        return ''
    parsed = [as_block(block) for block in blocks]
    width = max(block.width for block in parsed)

    rows = []
    for block in parsed:
        for line in block.lines:
            lead, trail = split_slack(width - visible_width(line), pos, horizontal=True)
            rows.append(' ' * lead + line + ' ' * trail)
    return '\n'.join(rows)

def place(width: int, height: int, h_pos: Position, v_pos: Position,
          block: BlockLike) -> str:
    """
    Anchor ``block`` inside a blank ``width`` x ``height`` canvas.

    A block larger than the canvas grows the canvas on that axis; nothing is
    clipped.
    """
    block = as_block(block)
    canvas_width = max(width, block.width, 0)
    canvas_height = max(height, block.height, 0)
    if canvas_width > width or canvas_height > height:
        logger.debug(
            f"place: {block.width}x{block.height} block expands the "
            f"{width}x{height} canvas to {canvas_width}x{canvas_height}"
        )

    left, right = split_slack(canvas_width - block.width, h_pos, horizontal=True)
    above, below = split_slack(canvas_height - block.height, v_pos, horizontal=False)
    blank = ' ' * canvas_width
    rows = [' ' * left + line + ' ' * right for line in _rectangle(block)]
    return '\n'.join([blank] * above + rows + [blank] * below)
