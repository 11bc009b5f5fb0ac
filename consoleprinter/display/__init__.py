# display/__init__.py

from .terminal import DisplayTerminal
from .style import StyleDefinitions
from .renderer import Renderer, render
from .layout import pad

__all__ = ['DisplayTerminal', 'StyleDefinitions', 'Renderer', 'render', 'pad']
