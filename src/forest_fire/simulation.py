"""Simulation aggregate driven once per frame by the presentation layer."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .cell import CellState
from .config import SimulationConfig
from .model import ForestFireModel
from .particles import ParticleSnapshot, ParticleSystem
from .wind import WindField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Committed state after one tick.

    ``states`` and ``burn_remaining`` have shape (height, width) and are
    indexed [y, x].
    """

    step: int
    wind: WindField
    states: np.ndarray
    burn_remaining: np.ndarray
    particles: Tuple[ParticleSnapshot, ...]


class Simulation:
    """Owns the forest grid and its particles.

    Triggers (``reset``, ``ignite_at``, ``ignite_random``) mutate state
    synchronously and must be called between ticks.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, seed: Optional[int] = None):
        self.config = config or SimulationConfig()
        self.seed = seed
        self.ticks = 0
        self.wind = WindField.calm()
        self.model: ForestFireModel
        self.particle_system: ParticleSystem
        self.initialize(self.config.width, self.config.height)

    def initialize(self, width: int, height: int) -> None:
        """Allocate a fresh forest of the given size."""
        self.config = dataclasses.replace(self.config, width=width, height=height)
        self.model = ForestFireModel(self.config, seed=self.seed)
        self.particle_system = ParticleSystem(self.config.particles, rng=self.model.random)
        self.ticks = 0
        logger.info(f"Simulation initialized with a {width}x{height} grid")

    @property
    def width(self) -> int:
        return self.model.width

    @property
    def height(self) -> int:
        return self.model.height

    def reset(self) -> None:
        """Reseed the forest and drop every particle."""
        self.model.reseed()
        self.particle_system.clear()
        self.ticks = 0

    def ignite_random(self) -> bool:
        return self.model.ignite_random()

    def ignite_at(self, x: int, y: int) -> bool:
        return self.model.ignite_at(x, y)

    def tick(self, wind_direction: float, wind_strength: float) -> TickResult:
        """
        Advance the grid and the particles by one tick.

        Args:
            wind_direction: Degrees, 0 = up, 90 = right. Folded into [0, 360).
            wind_strength: Clamped to [0, max_wind_strength].

        Returns:
            TickResult with the committed grid and particle state.
        """
        self.wind = WindField(wind_direction, wind_strength).normalized(
            self.config.max_wind_strength
        )
        emissions = self.model.run_tick(self.wind)
        self.particle_system.advance(self.wind, emissions)
        self.ticks += 1
        return self.snapshot()

    def snapshot(self) -> TickResult:
        return TickResult(
            step=self.ticks,
            wind=self.wind,
            states=self.model.state_array(),
            burn_remaining=self.model.burn_array(),
            particles=self.particle_system.snapshot(),
        )

    def cell_state(self, x: int, y: int) -> CellState:
        return self.model.cell_state(x, y)

    def burn_remaining(self, x: int, y: int) -> int:
        return self.model.burn_remaining(x, y)

    def particles(self) -> Tuple[ParticleSnapshot, ...]:
        return self.particle_system.snapshot()
