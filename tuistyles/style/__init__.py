# style/__init__.py

from typing import Dict, Optional
from ..block import RenderedBlock
from .builder import Style, StyleProps
from .definitions import (
    BORDERS, DEFAULT_DEFINITIONS, Border, BorderType, StyleDefinitions, get_border
)
from .strategies import AnsiStrategy, PlainStrategy, create_output_strategy, strategy_for
from .engine import StyleEngine

class StyleRenderer:
    """
    Primary rendering coordination layer.

    Component Hierarchy:
    StyleRenderer → StyleEngine → output strategy → StyleDefinitions
    """
    def __init__(self, definitions: Optional[StyleDefinitions] = None,
                 color_enabled: bool = True):
        """
        Args:
            definitions: renderer configuration, defaults to DEFAULT_DEFINITIONS
            color_enabled: pre-resolved terminal color capability; False
                selects plain output with embedded escapes stripped
        """
        # Initialize in dependency order
        self.definitions = definitions or DEFAULT_DEFINITIONS
        self.strategy = strategy_for(color_enabled, self.definitions)
        self._engine = StyleEngine(self.definitions, self.strategy)

    def render_block(self, style: Style, text: str = '') -> RenderedBlock:
        return self._engine.render(style, text)

    def render(self, style: Style, text: str = '') -> str:
        return str(self._engine.render(style, text))

    def __getattr__(self, name):
        """Delegate unknown attribute access to the style engine instance."""
        return getattr(self._engine, name)

_default_renderers: Dict[bool, StyleRenderer] = {}

def default_renderer(color_enabled: bool = True) -> StyleRenderer:
    """Shared renderer used by ``Style.render``, one per color setting."""
    renderer = _default_renderers.get(color_enabled)
    if renderer is None:
        renderer = _default_renderers.setdefault(color_enabled, StyleRenderer(color_enabled=color_enabled))
    return renderer

# Export the main interface
__all__ = [
    'Style', 'StyleProps', 'StyleRenderer', 'StyleEngine', 'StyleDefinitions',
    'DEFAULT_DEFINITIONS', 'Border', 'BorderType', 'BORDERS', 'get_border',
    'AnsiStrategy', 'PlainStrategy', 'create_output_strategy', 'strategy_for',
    'default_renderer',
]
