import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def quiet_config():
    """Configuration with no growth, lightning or spread: only burning evolves."""
    from forest_fire import SimulationConfig

    return SimulationConfig(
        width=7,
        height=7,
        growth_probability=0.0,
        lightning_probability=0.0,
        fire_spread_probability=0.0,
        burn_time=5,
    )


@pytest.fixture
def fill_grid():
    """Return a helper that sets every cell of a model to one state."""

    def _fill(model, state):
        for cell in model.agents:
            cell.reset(state)
        return model

    return _fill
