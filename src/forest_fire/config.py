"""Default parameters and configuration objects for the simulation.

Module level constants hold the defaults. ``SimulationConfig`` and
``ParticleConfig`` group them so any value can be overridden at
construction time.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .errors import ConfigError

Range = Tuple[float, float]

# ============================================================================
# GRID
# ============================================================================

DEFAULT_GRID_SIZE: int = 80                         # Cells per side
DEFAULT_CELL_SIZE: int = 6                          # Pixels per cell (viewer only)

# ============================================================================
# FOREST RULES
# ============================================================================

GROWTH_PROBABILITY: float = 0.00002                 # Empty -> Tree
LIGHTNING_PROBABILITY: float = 0.000005             # Tree -> Burning
FIRE_SPREAD_PROBABILITY: float = 0.15               # Burning -> neighbouring Tree
BURN_TIME: int = 300                                # Ticks a tree burns
ASH_REGROWTH_FACTOR: float = 5.0                    # Burnt -> Empty, times growth

# Initial seeding: p(tree) = density * (1 - falloff * distance)
SEED_TREE_DENSITY: float = 0.65
SEED_EDGE_FALLOFF: float = 0.7

# ============================================================================
# WIND
# ============================================================================

WIND_SPREAD_FACTOR: float = 0.1                     # Downwind spread bonus per unit strength
MAX_WIND_STRENGTH: float = 10.0
DEFAULT_WIND_DIRECTION: float = 90.0                # Degrees, 0 = up, 90 = right
DEFAULT_WIND_STRENGTH: float = 3.0

# ============================================================================
# PARTICLES (positions and velocities in cells, sizes in pixels)
# ============================================================================

FLAME_EMISSION_PROBABILITY: float = 0.3
SMOKE_EMISSION_PROBABILITY: float = 0.1


@dataclass
class ParticleConfig:
    """Spawn ranges and motion constants for flame and smoke particles."""

    flame_probability: float = FLAME_EMISSION_PROBABILITY
    smoke_probability: float = SMOKE_EMISSION_PROBABILITY

    spawn_jitter: float = 1 / 3

    flame_vx: Range = (-1 / 6, 1 / 6)
    flame_vy: Range = (-1 / 2, -1 / 6)
    flame_life: Tuple[int, int] = (20, 60)
    flame_size: Range = (2.0, 5.0)
    flame_green: Tuple[int, int] = (100, 200)
    flame_alpha: Tuple[int, int] = (150, 250)

    smoke_vx: Range = (-1 / 30, 1 / 30)
    smoke_vy: Range = (-1 / 4, -1 / 12)
    smoke_life: Tuple[int, int] = (100, 200)
    smoke_size: Range = (3.0, 8.0)
    smoke_gray: int = 100
    smoke_alpha: Tuple[int, int] = (50, 150)
    smoke_growth: float = 0.05

    # Wind velocity added at spawn and per tick, per unit of wind strength
    smoke_spawn_wind: float = 0.1 / 6
    smoke_drift_wind: float = 0.01 / 6

    def validate(self) -> None:
        _check_probability("flame_probability", self.flame_probability)
        _check_probability("smoke_probability", self.smoke_probability)
        for name in (
            "flame_vx", "flame_vy", "flame_life", "flame_size", "flame_green",
            "flame_alpha", "smoke_vx", "smoke_vy", "smoke_life", "smoke_size",
            "smoke_alpha",
        ):
            low, high = getattr(self, name)
            if low > high:
                raise ConfigError(f"{name} range is inverted: {low} > {high}")
        if self.flame_life[0] < 1 or self.smoke_life[0] < 1:
            raise ConfigError("Particle life must be at least one tick")
        if self.spawn_jitter < 0:
            raise ConfigError("spawn_jitter must be non-negative")


@dataclass
class SimulationConfig:
    """All tunable parameters of the forest and its particles."""

    width: int = DEFAULT_GRID_SIZE
    height: int = DEFAULT_GRID_SIZE
    cell_size: int = DEFAULT_CELL_SIZE

    growth_probability: float = GROWTH_PROBABILITY
    lightning_probability: float = LIGHTNING_PROBABILITY
    fire_spread_probability: float = FIRE_SPREAD_PROBABILITY
    burn_time: int = BURN_TIME
    ash_regrowth_factor: float = ASH_REGROWTH_FACTOR

    seed_tree_density: float = SEED_TREE_DENSITY
    seed_edge_falloff: float = SEED_EDGE_FALLOFF

    wind_spread_factor: float = WIND_SPREAD_FACTOR
    max_wind_strength: float = MAX_WIND_STRENGTH

    particles: ParticleConfig = field(default_factory=ParticleConfig)

    def __post_init__(self):
        self.validate()

    @property
    def ash_clear_probability(self) -> float:
        """Per-tick chance that ash clears to bare ground."""
        return min(1.0, self.growth_probability * self.ash_regrowth_factor)

    def validate(self) -> None:
        """Raise ConfigError if any value is out of range."""
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.burn_time < 1:
            raise ConfigError(f"burn_time must be positive, got {self.burn_time}")
        _check_probability("growth_probability", self.growth_probability)
        _check_probability("lightning_probability", self.lightning_probability)
        _check_probability("fire_spread_probability", self.fire_spread_probability)
        _check_probability("seed_tree_density", self.seed_tree_density)
        if self.ash_regrowth_factor < 0:
            raise ConfigError("ash_regrowth_factor must be non-negative")
        if self.wind_spread_factor < 0:
            raise ConfigError("wind_spread_factor must be non-negative")
        if self.max_wind_strength < 0:
            raise ConfigError("max_wind_strength must be non-negative")
        self.particles.validate()


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"{name} must be within [0, 1], got {value}")
