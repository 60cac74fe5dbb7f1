# style/strategies.py

from typing import TYPE_CHECKING, Optional
from ..measure import ANSI_REGEX, is_reset, strip_ansi
from .definitions import DECORATIONS, DEFAULT_DEFINITIONS, StyleDefinitions

if TYPE_CHECKING:
    from .builder import StyleProps

class AnsiStrategy:
    """
    Emits SGR sequences for decorations and colors.

    Every painted run ends with a reset, and any reset already embedded in
    the run is followed by the run's own prefix so the style survives it.
    """
    name = 'ansi'

    def __init__(self, definitions: Optional[StyleDefinitions] = None):
        self.definitions = definitions or DEFAULT_DEFINITIONS

    def text_prefix(self, props: 'StyleProps') -> str:
        """Decorations, then foreground, then background."""
        codes = [self.definitions.get_format(f'{name.upper()}_ON')
                 for name in DECORATIONS if getattr(props, name)]
        if props.foreground is not None:
            codes.append(props.foreground.to_ansi())
        if props.background is not None:
            codes.append(props.background.to_ansi_background())
        return ''.join(codes)

    def fill_prefix(self, props: 'StyleProps') -> str:
        """Whitespace inside the box only carries the background."""
        if props.background is None:
            return ''
        return props.background.to_ansi_background()

    def border_prefix(self, props: 'StyleProps') -> str:
        codes = []
        if props.border_foreground is not None:
            codes.append(props.border_foreground.to_ansi())
        if props.border_background is not None:
            codes.append(props.border_background.to_ansi_background())
        return ''.join(codes)

    def paint(self, prefix: str, text: str) -> str:
        if not prefix or not text:
            return text
        body = ANSI_REGEX.sub(
            lambda m: m.group(0) + prefix if is_reset(m.group(0)) else m.group(0),
            text
        )
        return prefix + body + self.definitions.get_format('RESET')

    def sanitize(self, text: str) -> str:
        return text

class PlainStrategy(AnsiStrategy):
    """No escape sequences at all, including ones embedded in the input."""
    name = 'plain'

    def paint(self, prefix: str, text: str) -> str:
        return text

    def sanitize(self, text: str) -> str:
        return strip_ansi(text)

def create_output_strategy(strategy_type: str,
                           definitions: Optional[StyleDefinitions] = None) -> AnsiStrategy:
    strategies = {
        "ansi": AnsiStrategy,
        "plain": PlainStrategy
    }
    if strategy_type not in strategies:
        raise ValueError(f"Unknown strategy type: {strategy_type}")
    return strategies[strategy_type](definitions)

def strategy_for(color_enabled: bool,
                 definitions: Optional[StyleDefinitions] = None) -> AnsiStrategy:
    """Map the pre-resolved terminal color capability to a strategy."""
    return create_output_strategy("ansi" if color_enabled else "plain", definitions)
