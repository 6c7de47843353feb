"""Wind field shared by fire spread and smoke drift."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from .config import MAX_WIND_STRENGTH, WIND_SPREAD_FACTOR

logger = logging.getLogger(__name__)

compass_degree = {
    "N": 0, "NNE": 22.5, "NE": 45, "ENE": 67.5,
    "E": 90, "ESE": 112.5, "SE": 135, "SSE": 157.5,
    "S": 180, "SSW": 202.5, "SW": 225, "WSW": 247.5,
    "W": 270, "WNW": 292.5, "NW": 315, "NNW": 337.5
}


@dataclass(frozen=True)
class WindField:
    """Wind direction and strength.

    Attributes:
        direction: Degrees, 0 points up (north), 90 points right (east).
        strength: Non-negative magnitude.
    """

    direction: float = 0.0
    strength: float = 0.0

    @classmethod
    def calm(cls) -> "WindField":
        return cls(0.0, 0.0)

    @classmethod
    def from_compass(cls, name: str, strength: float) -> "WindField":
        """Build a wind pointing towards a 16-point compass direction."""
        key = str(name).upper().strip()
        if key not in compass_degree:
            raise ValueError(f"Unknown compass direction: {name!r}")
        return cls(float(compass_degree[key]), strength)

    def normalized(self, max_strength: float = MAX_WIND_STRENGTH) -> "WindField":
        """Return a copy with direction in [0, 360) and strength in [0, max_strength].

        Inputs come from UI controls, so out of range values are folded
        back instead of rejected.
        """
        direction = self.direction if math.isfinite(self.direction) else 0.0
        strength = self.strength if math.isfinite(self.strength) else 0.0
        direction = direction % 360.0
        clamped = max(0.0, min(float(max_strength), strength))
        if clamped != self.strength:
            logger.debug(f"Wind strength {self.strength} clamped to {clamped}")
        return WindField(direction, clamped)

    @property
    def unit_vector(self) -> Tuple[float, float]:
        """Direction as a unit vector in grid coordinates (y grows downward)."""
        radians = math.radians(self.direction)
        return math.sin(radians), -math.cos(radians)

    def drift(self, factor: float) -> Tuple[float, float]:
        """Wind vector scaled by ``strength * factor``."""
        ux, uy = self.unit_vector
        scale = self.strength * factor
        return ux * scale, uy * scale

    def spread_multiplier(
        self,
        dx: int,
        dy: int,
        factor: float = WIND_SPREAD_FACTOR,
    ) -> float:
        """Fire spread multiplier towards a neighbour at offset (dx, dy).

        Spreading downwind gets ``1 + cos * strength * factor``; any other
        direction keeps the base probability (no upwind penalty).
        """
        distance = math.hypot(dx, dy)
        if distance == 0 or self.strength == 0:
            return 1.0
        wx, wy = self.unit_vector
        dot_product = (dx * wx + dy * wy) / distance
        if dot_product <= 0:
            return 1.0
        return 1.0 + dot_product * self.strength * factor
