from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .cell import CellState
from .config import SEED_EDGE_FALLOFF, SEED_TREE_DENSITY


ArrayLike = Any


@dataclass(frozen=True)
class StateCounts:
    """Number of cells in each state."""

    empty: int
    tree: int
    burning: int
    burnt: int

    @property
    def total(self) -> int:
        return self.empty + self.tree + self.burning + self.burnt

    @property
    def tree_fraction(self) -> float:
        return _safe_div(self.tree, self.total)

    @property
    def burning_fraction(self) -> float:
        return _safe_div(self.burning, self.total)


def _as_state_array(x: ArrayLike) -> np.ndarray:
    arr = np.asarray(x)
    if arr.ndim != 2:
        raise ValueError(f"Expected 2D array, got shape={arr.shape}")
    return arr


def _safe_div(num: float, den: float) -> float:
    return 0.0 if den == 0 else float(num) / float(den)


def count_states(states: ArrayLike) -> StateCounts:
    s = _as_state_array(states)
    return StateCounts(
        empty=int(np.count_nonzero(s == CellState.Empty.value)),
        tree=int(np.count_nonzero(s == CellState.Tree.value)),
        burning=int(np.count_nonzero(s == CellState.Burning.value)),
        burnt=int(np.count_nonzero(s == CellState.Burnt.value)),
    )


def normalized_distance(height: int, width: int) -> np.ndarray:
    """Distance of every cell from the grid centre divided by half the width."""
    ys, xs = np.mgrid[0:height, 0:width]
    half_width = width / 2
    return np.hypot(xs - half_width, ys - height / 2) / half_width


def expected_tree_probability(
    distance: ArrayLike,
    density: float = SEED_TREE_DENSITY,
    falloff: float = SEED_EDGE_FALLOFF,
) -> np.ndarray:
    """Seeding law: probability that a cell starts as a tree."""
    d = np.asarray(distance, dtype=float)
    return np.clip(density * (1 - falloff * d), 0.0, 1.0)


def radial_tree_density(states: ArrayLike, bins: int = 4) -> np.ndarray:
    """Fraction of trees in equal-width rings of normalized distance.

    Rings span [0, 1] of the normalized distance; corner cells beyond 1
    fall in the last ring. Empty rings report NaN.
    """

    s = _as_state_array(states)
    d = normalized_distance(*s.shape)
    edges = np.linspace(0.0, 1.0, bins + 1)
    ring = np.clip(np.digitize(d, edges) - 1, 0, bins - 1)
    trees = s == CellState.Tree.value

    density = np.full(bins, np.nan)
    for i in range(bins):
        in_ring = ring == i
        n = np.count_nonzero(in_ring)
        if n:
            density[i] = np.count_nonzero(trees & in_ring) / n
    return density


def check_burn_invariant(states: ArrayLike, burn: ArrayLike) -> bool:
    """True iff the burn countdown is positive exactly on burning cells."""

    s = _as_state_array(states)
    b = _as_state_array(burn)
    if s.shape != b.shape:
        raise ValueError(f"Shape mismatch: {s.shape} vs {b.shape}")
    burning = s == CellState.Burning.value
    return bool(np.array_equal(burning, b > 0) and np.all(b >= 0))
