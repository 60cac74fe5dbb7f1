# style/builder.py

from dataclasses import dataclass, field, fields, replace
from typing import Optional, Tuple
from ..block import RenderedBlock
from ..color import Color, ColorLike
from ..logger import Logger
from ..position import Position
from .definitions import BorderSpec

logger = Logger(__name__)

@dataclass(frozen=True)
class StyleProps:
    """
    Every styling attribute. ``None`` means "never set", which the renderer
    treats differently from an explicit ``False`` or ``0`` (an unset width
    sizes to the content, ``width == 0`` renders an empty column).
    """
    # Text decorations
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    strikethrough: Optional[bool] = None
    faint: Optional[bool] = None
    blink: Optional[bool] = None
    reverse: Optional[bool] = None

    # Colors
    foreground: Optional[ColorLike] = None
    background: Optional[ColorLike] = None
    border_foreground: Optional[ColorLike] = None
    border_background: Optional[ColorLike] = None

    # Dimensions
    width: Optional[int] = None
    height: Optional[int] = None
    max_width: Optional[int] = None
    max_height: Optional[int] = None
    truncate: Optional[bool] = None

    # Alignment
    align: Optional[Position] = None
    align_vertical: Optional[Position] = None

    # Spacing
    padding_top: Optional[int] = None
    padding_right: Optional[int] = None
    padding_bottom: Optional[int] = None
    padding_left: Optional[int] = None
    margin_top: Optional[int] = None
    margin_right: Optional[int] = None
    margin_bottom: Optional[int] = None
    margin_left: Optional[int] = None

    # Border
    border_type: Optional[BorderSpec] = None
    border_top: Optional[bool] = None
    border_right: Optional[bool] = None
    border_bottom: Optional[bool] = None
    border_left: Optional[bool] = None

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not None

    def set_fields(self) -> Tuple[str, ...]:
        """Names of the attributes that have been given a value."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

def _clamp(name: str, value: int) -> int:
    if value < 0:
        logger.debug(f"{name}: clamping {value} to 0")
        return 0
    return value

def _expand_shorthand(name: str, values: Tuple[int, ...]) -> Tuple[int, int, int, int]:
    """CSS-style edge shorthand, returned clockwise from the top."""
    count = len(values)
    if count == 1:
        (every,) = values
        return every, every, every, every
    if count == 2:
        vertical, horizontal = values
        return vertical, horizontal, vertical, horizontal
    if count == 4:
        top, right, bottom, left = values
        return top, right, bottom, left
    logger.error(f"{name}() called with {count} arguments")
    raise ValueError(f"{name}() accepts 1, 2, or 4 arguments, got {count}")

@dataclass(frozen=True)
class Style:
    """
    Immutable, fluent description of how text should look.

    Each builder method returns a new Style; the receiver keeps its values::

        base = Style().bold().padding(1, 2)
        card = base.border(BorderType.ROUNDED).width(30)
        print(card.render("Hello"))
    """
    props: StyleProps = field(default_factory=StyleProps)

    def _with(self, **changes) -> 'Style':
        return Style(replace(self.props, **changes))

    # Text decorations
    def bold(self, value: bool = True) -> 'Style': return self._with(bold=value)
    def italic(self, value: bool = True) -> 'Style': return self._with(italic=value)
    def underline(self, value: bool = True) -> 'Style': return self._with(underline=value)
    def strikethrough(self, value: bool = True) -> 'Style': return self._with(strikethrough=value)
    def faint(self, value: bool = True) -> 'Style': return self._with(faint=value)
    def blink(self, value: bool = True) -> 'Style': return self._with(blink=value)
    def reverse(self, value: bool = True) -> 'Style': return self._with(reverse=value)

    # Colors
    def foreground(self, color: ColorLike) -> 'Style': return self._with(foreground=color)
    def background(self, color: ColorLike) -> 'Style': return self._with(background=color)

    def foreground_str(self, text: str) -> 'Style':
        """
        Parse ``text`` with ``Color.parse`` and set it as the foreground.

        Raises:
            ValueError: if ``text`` is not a valid color string.
        """
        try:
            color = Color.parse(text)
        except ValueError as e:
            logger.error(f"foreground_str() rejected {text!r}")
            raise ValueError(f"invalid color string {text!r}: {e}") from e
        return self.foreground(color)

    def border_foreground(self, color: ColorLike) -> 'Style':
        return self._with(border_foreground=color)

    def border_background(self, color: ColorLike) -> 'Style':
        return self._with(border_background=color)

    # Dimensions
    def width(self, value: int) -> 'Style':
        """Content width in cells, excluding padding, border and margin."""
        return self._with(width=_clamp('width', value))

    def height(self, value: int) -> 'Style':
        """Content height in lines, excluding padding, border and margin."""
        return self._with(height=_clamp('height', value))

    def max_width(self, value: int) -> 'Style':
        return self._with(max_width=_clamp('max_width', value))

    def max_height(self, value: int) -> 'Style':
        return self._with(max_height=_clamp('max_height', value))

    def truncate(self, value: bool = True) -> 'Style':
        """Cut lines wider than ``width`` instead of word-wrapping them."""
        return self._with(truncate=value)

    # Alignment
    def align(self, pos: Position) -> 'Style': return self._with(align=pos)
    def align_vertical(self, pos: Position) -> 'Style': return self._with(align_vertical=pos)

    # Spacing
    def padding(self, *values: int) -> 'Style':
        """
        Set padding with CSS shorthand.

        Args:
            values: 1 value for every edge, 2 for (vertical, horizontal),
                or 4 for (top, right, bottom, left). Negatives clamp to 0.

        Raises:
            ValueError: for any other number of values.
        """
        top, right, bottom, left = _expand_shorthand('padding', values)
        return self._with(
            padding_top=_clamp('padding_top', top),
            padding_right=_clamp('padding_right', right),
            padding_bottom=_clamp('padding_bottom', bottom),
            padding_left=_clamp('padding_left', left)
        )

    def margin(self, *values: int) -> 'Style':
        """Set margin with the same shorthand rules as ``padding``."""
        top, right, bottom, left = _expand_shorthand('margin', values)
        return self._with(
            margin_top=_clamp('margin_top', top),
            margin_right=_clamp('margin_right', right),
            margin_bottom=_clamp('margin_bottom', bottom),
            margin_left=_clamp('margin_left', left)
        )

    def padding_top(self, value: int) -> 'Style': return self._with(padding_top=_clamp('padding_top', value))
    def padding_right(self, value: int) -> 'Style': return self._with(padding_right=_clamp('padding_right', value))
    def padding_bottom(self, value: int) -> 'Style': return self._with(padding_bottom=_clamp('padding_bottom', value))
    def padding_left(self, value: int) -> 'Style': return self._with(padding_left=_clamp('padding_left', value))

    def margin_top(self, value: int) -> 'Style': return self._with(margin_top=_clamp('margin_top', value))
    def margin_right(self, value: int) -> 'Style': return self._with(margin_right=_clamp('margin_right', value))
    def margin_bottom(self, value: int) -> 'Style': return self._with(margin_bottom=_clamp('margin_bottom', value))
    def margin_left(self, value: int) -> 'Style': return self._with(margin_left=_clamp('margin_left', value))

    # Border
    def border(self, kind: BorderSpec, *edges: bool) -> 'Style':
        """
        Set the border glyphs and, optionally, which edges are drawn.

        Args:
            kind: a ``BorderType`` from the catalog or a custom ``Border``.
            edges: none (every edge on), 1 flag for every edge, or 4 flags for
                (top, right, bottom, left). There is no 2-flag form.

        Raises:
            ValueError: for any other number of flags.
        """
        count = len(edges)
        if count == 0:
            flags = (True, True, True, True)
        elif count == 1:
            flags = (bool(edges[0]),) * 4
        elif count == 4:
            flags = tuple(bool(e) for e in edges)
        else:
            logger.error(f"border() called with {count} edge arguments")
            raise ValueError(f"border() accepts 0, 1, or 4 edge arguments, got {count}")
        top, right, bottom, left = flags
        return self._with(border_type=kind, border_top=top, border_right=right,
                          border_bottom=bottom, border_left=left)

    def border_top(self, value: bool = True) -> 'Style': return self._with(border_top=value)
    def border_right(self, value: bool = True) -> 'Style': return self._with(border_right=value)
    def border_bottom(self, value: bool = True) -> 'Style': return self._with(border_bottom=value)
    def border_left(self, value: bool = True) -> 'Style': return self._with(border_left=value)

    # Rendering
    def render(self, text: str = '', color: bool = True) -> str:
        """Apply the style and return printable, newline-joined output."""
        return str(self.render_block(text, color=color))

    def render_block(self, text: str = '', color: bool = True) -> RenderedBlock:
        from . import default_renderer
        return default_renderer(color).render_block(self, text)
