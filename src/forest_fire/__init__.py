"""
Forest fire simulation using cellular automata.

A stochastic forest fire automaton with tree growth, lightning, wind
biased spread and ash regrowth, plus flame and smoke particles that
drift with the same wind.
"""

from .cell import ForestCell, CellState
from .config import ParticleConfig, SimulationConfig
from .errors import ConfigError, ForestFireError, OutOfBoundsError
from .model import ForestFireModel
from .particles import EmissionEvent, Particle, ParticleKind, ParticleSnapshot, ParticleSystem
from .simulation import Simulation, TickResult
from .wind import WindField

__version__ = "0.1.0"

__all__ = [
    "ForestCell",
    "CellState",
    "ForestFireModel",
    "ParticleConfig",
    "SimulationConfig",
    "ConfigError",
    "ForestFireError",
    "OutOfBoundsError",
    "EmissionEvent",
    "Particle",
    "ParticleKind",
    "ParticleSnapshot",
    "ParticleSystem",
    "Simulation",
    "TickResult",
    "WindField",
]
