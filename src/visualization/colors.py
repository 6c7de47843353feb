"""Color definitions and constants for the forest fire visualization.

This module contains all RGB color tuples and default configuration values
used throughout the Pygame visualization.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

TREE_COLOR: Color = (0, 120, 0)                     # green
BURNING_COLOR: Color = (200, 100, 0)                # orange (on fire)
BURNT_COLOR: Color = (30, 30, 30)                   # dark gray (ash)
EMPTY_COLOR: Color = (30, 30, 30)                   # background shows through

# ============================================================================
# UI COLORS
# ============================================================================

BACKGROUND: Color = (30, 30, 30)
BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
BUTTON_COLOR: Color = (180, 0, 0)
SLIDER_BAR_COLOR: Color = (20, 20, 20)
SLIDER_BORDER_COLOR: Color = (70, 70, 70)

# ============================================================================
# DEFAULT VIEWER PARAMETERS
# ============================================================================

DEFAULT_FPS: int = 30                               # Ticks per second
PANEL_HEIGHT: int = 110                             # Control panel below the grid

# ============================================================================
# SLIDER LIMITS
# ============================================================================

MIN_WIND_DIRECTION: int = 0
MAX_WIND_DIRECTION: int = 360
WIND_DIRECTION_STEP: int = 15
MIN_WIND_STRENGTH: int = 0
MAX_WIND_STRENGTH: int = 10
