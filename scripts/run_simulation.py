#!/usr/bin/env python3
"""Console runner for the forest fire simulation."""

import argparse
import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import CellState, Simulation, SimulationConfig


SYMBOLS = {
    CellState.Empty.value: " ",
    CellState.Tree.value: "^",
    CellState.Burning.value: "*",
    CellState.Burnt.value: ".",
}


def print_grid(states) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        states: State array of shape (height, width)
    """
    print("\n".join("".join(SYMBOLS[int(v)] for v in row) for row in states))


def main():
    """Run the forest fire simulation."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=40, help="Grid width and height")
    parser.add_argument("--steps", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--wind-direction", type=float, default=90.0)
    parser.add_argument("--wind-strength", type=float, default=3.0)
    parser.add_argument("--burn-time", type=int, default=10)
    parser.add_argument("--show-grid", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    config = SimulationConfig(width=args.size, height=args.size, burn_time=args.burn_time)
    simulation = Simulation(config, seed=args.seed)
    if not simulation.ignite_at(args.size // 2, args.size // 2):
        print("Cannot ignite starting cell.")

    for _ in range(args.steps):
        result = simulation.tick(args.wind_direction, args.wind_strength)
        counts = simulation.model.count_states()
        print(
            f"Step {result.step:4d}: trees={counts.tree} burning={counts.burning} "
            f"ash={counts.burnt} particles={len(result.particles)}"
        )
        if args.show_grid:
            print_grid(result.states)

        if counts.burning == 0:
            print("\nFire has been extinguished.")
            break


if __name__ == "__main__":
    main()
