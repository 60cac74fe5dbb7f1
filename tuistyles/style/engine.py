# style/engine.py

from typing import List, Optional, Tuple
from ..block import RenderedBlock
from ..logger import Logger
from ..measure import split_lines, truncate, visible_width, wrap
from ..position import Position, split_slack
from .definitions import StyleDefinitions
from .strategies import AnsiStrategy

logger = Logger(__name__)

# (leading fill, text, trailing fill) for one content row
Row = Tuple[int, str, int]

def _edge(value: Optional[int]) -> int:
    return value or 0

class StyleEngine:
    """
    Applies a Style to text, producing an exactly-sized RenderedBlock.

    The box is built inside out: content, padding, border, margin. Width and
    height on the style describe the content area only.
    """
    def __init__(self, definitions: StyleDefinitions, strategy: AnsiStrategy):
        self.definitions = definitions
        self.strategy = strategy

    def render(self, style, text: str = '') -> RenderedBlock:
        """
        Render ``text`` with ``style`` (a ``Style`` or its ``StyleProps``).

        Never raises for any combination of attributes.
        """
        props = getattr(style, 'props', style)

        text = self.strategy.sanitize(text)
        text = text.replace('\t', ' ' * self.definitions.tab_width)
        lines = self._fit_lines(props, split_lines(text))
        content_width = self._content_width(props, lines)

        rows = self._align_rows(props, lines, content_width)
        rows = self._reconcile_height(props, rows, content_width)

        body = self._paint_content(props, rows, content_width)
        inner_width = content_width + _edge(props.padding_left) + _edge(props.padding_right)
        body, inner_width = self._apply_border(props, body, inner_width)
        body, total_width = self._apply_margin(props, body, inner_width)

        logger.debug(
            f"rendered {len(rows)} content rows at width {content_width} "
            f"into a {total_width}x{len(body)} block ({self.strategy.name})"
        )
        return RenderedBlock(tuple(body), total_width)

    # Content

    def _fit_lines(self, props, lines: List[str]) -> List[str]:
        """Wrap or cut to ``width``, then cut to ``max_width`` with an ellipsis."""
        if props.width is not None:
            if props.truncate:
                lines = [truncate(line, props.width) for line in lines]
            else:
                # A wide glyph can still overflow a 1-cell width after wrapping.
                lines = [truncate(piece, props.width)
                         for line in lines for piece in wrap(line, props.width)]
        if props.max_width is not None:
            lines = [truncate(line, props.max_width, self.definitions.ellipsis)
                     for line in lines]
        return lines

    def _content_width(self, props, lines: List[str]) -> int:
        if props.width is not None:
            width = props.width
        else:
            width = max((visible_width(line) for line in lines), default=0)
        if props.max_width is not None:
            width = min(width, props.max_width)
        return width

    def _align_rows(self, props, lines: List[str], width: int) -> List[Row]:
        align = props.align or Position.LEFT
        rows = []
        for line in lines:
            lead, trail = split_slack(width - visible_width(line), align, horizontal=True)
            rows.append((lead, line, trail))
        return rows

    def _reconcile_height(self, props, rows: List[Row], width: int) -> List[Row]:
        blank = (0, '', width)
        if props.height is not None:
            if len(rows) < props.height:
                above, below = split_slack(props.height - len(rows),
                                           props.align_vertical or Position.TOP,
                                           horizontal=False)
                rows = [blank] * above + rows + [blank] * below
            else:
                rows = rows[:props.height]
        if props.max_height is not None:
            rows = rows[:props.max_height]
        return rows

    # Painting

    def _fill(self, props, count: int) -> str:
        return self.strategy.paint(self.strategy.fill_prefix(props), ' ' * count)

    def _paint_content(self, props, rows: List[Row], width: int) -> List[str]:
        """Paint text runs and fills, then wrap the rows in padding."""
        text_prefix = self.strategy.text_prefix(props)
        left, right = _edge(props.padding_left), _edge(props.padding_right)

        painted = []
        for lead, text, trail in rows:
            # Fill runs on either side of the text merge with the padding.
            painted.append(
                self._fill(props, left + lead)
                + self.strategy.paint(text_prefix, text)
                + self._fill(props, trail + right)
            )

        blank = self._fill(props, left + width + right)
        return ([blank] * _edge(props.padding_top) + painted
                + [blank] * _edge(props.padding_bottom))

    def _apply_border(self, props, body: List[str], width: int) -> Tuple[List[str], int]:
        if props.border_type is None:
            return body, width
        top, right, bottom, left = (
            edge is None or bool(edge)
            for edge in (props.border_top, props.border_right,
                         props.border_bottom, props.border_left)
        )
        if not (top or right or bottom or left):
            return body, width

        glyphs = self.definitions.get_border(props.border_type)
        prefix = self.strategy.border_prefix(props)
        paint = lambda s: self.strategy.paint(prefix, s)

        def rule(corner_left: str, fill: str, corner_right: str) -> str:
            return paint((corner_left if left else '') + fill * width
                         + (corner_right if right else ''))

        side_left = paint(glyphs.left) if left else ''
        side_right = paint(glyphs.right) if right else ''
        lines = [side_left + line + side_right for line in body]
        if top:
            lines.insert(0, rule(glyphs.top_left, glyphs.top, glyphs.top_right))
        if bottom:
            lines.append(rule(glyphs.bottom_left, glyphs.bottom, glyphs.bottom_right))
        return lines, width + int(left) + int(right)

    def _apply_margin(self, props, body: List[str], width: int) -> Tuple[List[str], int]:
        left, right = _edge(props.margin_left), _edge(props.margin_right)
        total = width + left + right
        lines = [' ' * left + line + ' ' * right for line in body]
        blank = ' ' * total
        return ([blank] * _edge(props.margin_top) + lines
                + [blank] * _edge(props.margin_bottom)), total
