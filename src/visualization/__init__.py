"""Visualization package for the forest fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import Button, InfoPanel, Slider

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'Button',
    'InfoPanel',
    'Slider',

    # Cell state colors
    'TREE_COLOR',
    'BURNING_COLOR',
    'BURNT_COLOR',
    'EMPTY_COLOR',

    # UI colors
    'BACKGROUND',
    'BLACK',
    'WHITE',

    # Default parameters
    'DEFAULT_FPS',
    'PANEL_HEIGHT',

    # Slider limits
    'MIN_WIND_DIRECTION',
    'MAX_WIND_DIRECTION',
    'WIND_DIRECTION_STEP',
    'MIN_WIND_STRENGTH',
    'MAX_WIND_STRENGTH',
]
