# display/style/__init__.py

from .definitions import (
    StyleDefinitions, Color, ColorIntensity,
    Intensity, Italic, Foreground, Reset,
    Attribute, StyleAttributes, style
)

__all__ = [
    'StyleDefinitions', 'Color', 'ColorIntensity',
    'Intensity', 'Italic', 'Foreground', 'Reset',
    'Attribute', 'StyleAttributes', 'style'
]
