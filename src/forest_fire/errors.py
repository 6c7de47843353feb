"""Exceptions raised by the forest fire simulation."""


class ForestFireError(Exception):
    """Base class for all simulation errors."""


class OutOfBoundsError(ForestFireError, IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Cell ({x}, {y}) is outside the {width}x{height} grid"
        )


class ConfigError(ForestFireError, ValueError):
    """Raised when a configuration value is invalid."""
