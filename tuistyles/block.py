# block.py

from dataclasses import dataclass
from typing import Tuple, Union
from .measure import split_lines, visible_width

@dataclass(frozen=True)
class RenderedBlock:
    """
    A rectangle of rendered lines.

    Every line produced by the renderer has the same visible width, so
    ``width`` is both the widest and the narrowest line.
    """
    lines: Tuple[str, ...]
    width: int

    @property
    def height(self) -> int:
        return len(self.lines)

    @classmethod
    def from_string(cls, text: str) -> 'RenderedBlock':
        """Wrap arbitrary multi-line text. Lines keep their own widths."""
        lines = tuple(split_lines(text))
        return cls(lines, max(visible_width(line) for line in lines))

    def __str__(self) -> str:
        return '\n'.join(self.lines)

BlockLike = Union[str, RenderedBlock]

def as_block(block: BlockLike) -> RenderedBlock:
    if isinstance(block, RenderedBlock):
        return block
    return RenderedBlock.from_string(block)
