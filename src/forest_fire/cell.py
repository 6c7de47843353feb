"""Forest cell agent implementation for the forest fire automaton."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from mesa import Agent

from .particles import ParticleKind

if TYPE_CHECKING:
    from .model import ForestFireModel


class CellState(Enum):
    """Possible states of a forest cell."""
    Empty = 0
    Tree = 1
    Burning = 2
    Burnt = 3


class ForestCell(Agent):
    """Agent representing a single cell in the forest grid.

    Updates happen in two phases. ``step`` reads only start-of-tick states
    and records the outcome in ``next_state`` (and ``catches_fire`` on
    neighbours reached by the fire); ``advance`` commits it.
    """

    def __init__(self, model: "ForestFireModel", state: CellState):
        """
        Initialize a forest cell.

        Args:
            model: The ForestFireModel instance this cell belongs to
            state: Initial CellState of the cell
        """
        super().__init__(model)
        self.state = state
        self.burn_timer = model.config.burn_time if state == CellState.Burning else 0
        self.next_state = state
        self.catches_fire = False

    def is_burnable(self) -> bool:
        """Only standing trees can catch fire."""
        return self.state == CellState.Tree

    def ignite(self) -> bool:
        """Set a tree on fire immediately. Must be called between ticks.

        Returns:
            True if the cell was a tree and is now burning
        """
        if not self.is_burnable():
            return False
        self.state = CellState.Burning
        self.next_state = CellState.Burning
        self.burn_timer = self.model.config.burn_time
        return True

    def reset(self, state: CellState) -> None:
        self.state = state
        self.next_state = state
        self.catches_fire = False
        self.burn_timer = self.model.config.burn_time if state == CellState.Burning else 0

    def step(self):
        """
        Calculate the next state of the cell.

        This method is called first in the simulation step to determine
        what the cell's next state should be.
        """
        self.next_state = self.state
        config = self.model.config
        rnd = self.model.random

        if self.state == CellState.Empty:
            if rnd.random() < config.growth_probability:
                self.next_state = CellState.Tree

        elif self.state == CellState.Tree:
            if rnd.random() < config.lightning_probability:
                self.next_state = CellState.Burning

        elif self.state == CellState.Burning:
            self._burn()

        elif self.state == CellState.Burnt:
            if rnd.random() < config.ash_clear_probability:
                self.next_state = CellState.Empty

    def _burn(self):
        """Emit particles, count down and try to ignite neighbouring trees."""
        config = self.model.config
        rnd = self.model.random

        if rnd.random() < config.particles.flame_probability:
            self.model.emit(self.pos, ParticleKind.FLAME)
        if rnd.random() < config.particles.smoke_probability:
            self.model.emit(self.pos, ParticleKind.SMOKE)

        self.burn_timer -= 1
        if self.burn_timer <= 0:
            self.next_state = CellState.Burnt

        x, y = self.pos
        wind = self.model.wind
        neighbours = self.model.grid.get_neighbors(self.pos, moore=True, include_center=False)
        for neighbour in neighbours:
            if not isinstance(neighbour, ForestCell) or not neighbour.is_burnable():
                continue
            nx, ny = neighbour.pos
            wind_influence = wind.spread_multiplier(nx - x, ny - y, config.wind_spread_factor)
            if rnd.random() < config.fire_spread_probability * wind_influence:
                neighbour.catches_fire = True

    def advance(self):
        """
        Apply the next state calculated in step().

        This two-phase update ensures all cells calculate their next state
        before any state changes are applied.
        """
        prev = self.state
        self.state = self.next_state
        if self.catches_fire and prev == CellState.Tree:
            self.state = CellState.Burning
        self.catches_fire = False
        self.next_state = self.state

        if self.state != CellState.Burning:
            self.burn_timer = 0
        elif prev != CellState.Burning:
            self.burn_timer = self.model.config.burn_time
