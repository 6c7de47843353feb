"""Flame and smoke particles emitted by burning cells."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import ParticleConfig
from .wind import WindField

logger = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]


class ParticleKind(Enum):
    """Visual effect a burning cell can emit."""
    FLAME = 0
    SMOKE = 1


@dataclass(frozen=True)
class EmissionEvent:
    """Request from the grid step to spawn a particle at cell (x, y)."""

    x: int
    y: int
    kind: ParticleKind


@dataclass
class Particle:
    """A short-lived flame or smoke particle.

    Position and velocity are in cell units (cell (x, y) spans
    [x, x + 1) x [y, y + 1)); ``size`` is a drawing size in pixels.
    """

    x: float
    y: float
    vx: float
    vy: float
    size: float
    life: int
    color: RGBA
    is_smoke: bool
    max_life: int

    @property
    def fade(self) -> float:
        """Opacity factor in [0, 1], falling linearly with remaining life."""
        if self.max_life <= 0:
            return 0.0
        return max(0.0, min(1.0, self.life / self.max_life))


@dataclass(frozen=True)
class ParticleSnapshot:
    """Read-only view of a particle handed to the presentation layer."""

    x: float
    y: float
    size: float
    life: int
    is_smoke: bool
    color: RGBA
    alpha: float

    @classmethod
    def of(cls, particle: Particle) -> "ParticleSnapshot":
        return cls(
            x=particle.x,
            y=particle.y,
            size=particle.size,
            life=particle.life,
            is_smoke=particle.is_smoke,
            color=particle.color,
            alpha=particle.fade,
        )


class ParticleSystem:
    """Owns every live particle and moves them once per tick.

    The number of particles is not capped: emission scales with the number
    of burning cells, so a large fire holds a large particle population.
    """

    def __init__(
        self,
        config: Optional[ParticleConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the particle system.

        Args:
            config: Spawn ranges and motion constants.
            rng: Random source; shared with the grid for reproducible runs.
        """
        self.config = config or ParticleConfig()
        self.random = rng or random.Random()
        self._particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def add(self, particle: Particle) -> None:
        self._particles.append(particle)

    def clear(self) -> None:
        self._particles = []

    def snapshot(self) -> Tuple[ParticleSnapshot, ...]:
        return tuple(ParticleSnapshot.of(p) for p in self._particles)

    def spawn(self, event: EmissionEvent, wind: WindField) -> Particle:
        """Create the particle described by an emission event."""
        if event.kind == ParticleKind.SMOKE:
            return self._create_smoke(event.x, event.y, wind)
        return self._create_flame(event.x, event.y)

    def _create_flame(self, x: int, y: int) -> Particle:
        cfg = self.config
        rnd = self.random
        jitter = cfg.spawn_jitter
        return Particle(
            x=x + 0.5 + rnd.uniform(-jitter, jitter),
            y=y + 0.5 + rnd.uniform(-jitter, jitter),
            vx=rnd.uniform(*cfg.flame_vx),
            vy=rnd.uniform(*cfg.flame_vy),
            size=rnd.uniform(*cfg.flame_size),
            life=rnd.randint(*cfg.flame_life),
            color=(255, rnd.randint(*cfg.flame_green), 0, rnd.randint(*cfg.flame_alpha)),
            is_smoke=False,
            max_life=cfg.flame_life[1],
        )

    def _create_smoke(self, x: int, y: int, wind: WindField) -> Particle:
        cfg = self.config
        rnd = self.random
        jitter = cfg.spawn_jitter
        wind_x, wind_y = wind.drift(cfg.smoke_spawn_wind)
        gray = cfg.smoke_gray
        # Smoke starts at the top edge of the cell
        return Particle(
            x=x + 0.5 + rnd.uniform(-jitter, jitter),
            y=y + rnd.uniform(-jitter, jitter),
            vx=rnd.uniform(*cfg.smoke_vx) + wind_x,
            vy=rnd.uniform(*cfg.smoke_vy) + wind_y,
            size=rnd.uniform(*cfg.smoke_size),
            life=rnd.randint(*cfg.smoke_life),
            color=(gray, gray, gray, rnd.randint(*cfg.smoke_alpha)),
            is_smoke=True,
            max_life=cfg.smoke_life[1],
        )

    def advance(self, wind: WindField, emissions: Iterable[EmissionEvent] = ()) -> None:
        """
        Spawn new particles, then move, age and expire every particle.

        Particles spawned in this call are moved and aged in the same call,
        so a particle created with life L is gone after L calls.

        Args:
            wind: Wind for this tick (already normalized).
            emissions: Emission events produced by the grid step.
        """
        for event in emissions:
            self._particles.append(self.spawn(event, wind))

        drift_x, drift_y = wind.drift(self.config.smoke_drift_wind)
        growth = self.config.smoke_growth

        survivors = []
        for p in self._particles:
            p.x += p.vx
            p.y += p.vy
            if p.is_smoke:
                p.vx += drift_x
                p.vy += drift_y
                p.size += growth
            p.life -= 1
            if p.life > 0:
                survivors.append(p)
        self._particles = survivors

        logger.debug(f"Particles alive: {len(survivors)}")
