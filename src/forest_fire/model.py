"""Forest fire model: growth, lightning, burning and wind-driven spread."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np
from mesa import Model
from mesa.space import SingleGrid

from .cell import CellState, ForestCell
from .config import SimulationConfig
from .errors import OutOfBoundsError
from .metrics import StateCounts, count_states
from .particles import EmissionEvent, ParticleKind
from .wind import WindField

logger = logging.getLogger(__name__)


class ForestFireModel(Model):
    """Grid automaton holding one ForestCell per coordinate.

    Coordinates are (x, y) with y growing downward. The grid does not
    wrap around.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, seed: Optional[int] = None):
        """
        Initialize the forest.

        Args:
            config: Simulation parameters; defaults are used when omitted.
            seed: Seed for the model's random number generator.
        """
        super().__init__(seed=seed)
        self.config = config or SimulationConfig()
        self.grid = SingleGrid(self.config.width, self.config.height, torus=False)
        self.wind = WindField.calm()
        self.emissions: List[EmissionEvent] = []

        for _, (x, y) in self.grid.coord_iter():
            cell = ForestCell(self, self._seed_state(x, y))
            self.grid.place_agent(cell, (x, y))

        logger.info(
            f"Forest initialized: {self.config.width}x{self.config.height}, "
            f"{self.count_states().tree} trees"
        )

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def tree_probability(self, x: int, y: int) -> float:
        """Seeding probability: dense forest in the centre, sparse at the edges."""
        half_width = self.width / 2
        distance = math.hypot(x - half_width, y - self.height / 2) / half_width
        p = self.config.seed_tree_density * (1 - self.config.seed_edge_falloff * distance)
        return max(0.0, min(1.0, p))

    def _seed_state(self, x: int, y: int) -> CellState:
        if self.random.random() < self.tree_probability(x, y):
            return CellState.Tree
        return CellState.Empty

    def reseed(self) -> None:
        """Re-apply the seeding rule to every cell."""
        for cell in self.agents:
            cell.reset(self._seed_state(*cell.pos))
        self.emissions = []
        logger.info(f"Forest reseeded: {self.count_states().tree} trees")

    def step(self, wind: Optional[WindField] = None):
        """
        Execute one tick of the automaton.

        Uses a two-phase update: first all cells calculate their next state,
        then all cells commit it. Emission events of the tick are left in
        ``self.emissions``.

        Args:
            wind: Wind for this tick; the previous wind is kept when omitted.
        """
        if wind is not None:
            self.wind = wind.normalized(self.config.max_wind_strength)
        self.emissions = []

        # Phase 1: Calculate next states
        for agent in self.agents.shuffle():
            agent.step()

        # Phase 2: Apply next states
        for agent in self.agents:
            agent.advance()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Step {self.steps}: {self.count_states().burning} burning, "
                f"{len(self.emissions)} emissions"
            )

    def run_tick(self, wind: Optional[WindField] = None) -> List[EmissionEvent]:
        """Step once and return the emission events produced."""
        self.step(wind)
        return self.emissions

    def emit(self, pos: tuple[int, int], kind: ParticleKind) -> None:
        self.emissions.append(EmissionEvent(pos[0], pos[1], kind))

    def cell_at(self, x: int, y: int) -> ForestCell:
        """Return the cell at (x, y), raising OutOfBoundsError outside the grid."""
        x, y = int(x), int(y)
        if self.grid.out_of_bounds((x, y)):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self.grid[x][y]

    def ignite_at(self, x: int, y: int) -> bool:
        """Set the tree at (x, y) on fire; no-op for any other state."""
        ignited = self.cell_at(x, y).ignite()
        if ignited:
            logger.info(f"Ignited cell ({x}, {y})")
        return ignited

    def ignite_random(self) -> bool:
        """Try to ignite a uniformly chosen cell."""
        x = self.random.randrange(self.width)
        y = self.random.randrange(self.height)
        return self.ignite_at(x, y)

    def cell_state(self, x: int, y: int) -> CellState:
        return self.cell_at(x, y).state

    def burn_remaining(self, x: int, y: int) -> int:
        return self.cell_at(x, y).burn_timer

    def state_array(self) -> np.ndarray:
        """Cell states as an int8 array of shape (height, width), indexed [y, x]."""
        states = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.agents:
            x, y = cell.pos
            states[y, x] = cell.state.value
        return states

    def burn_array(self) -> np.ndarray:
        """Burn countdowns as an int32 array of shape (height, width)."""
        burn = np.zeros((self.height, self.width), dtype=np.int32)
        for cell in self.agents:
            x, y = cell.pos
            burn[y, x] = cell.burn_timer
        return burn

    def count_states(self) -> StateCounts:
        return count_states(self.state_array())
