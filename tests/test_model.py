"""Unit tests for ForestFireModel class."""

import numpy as np
import pytest
from forest_fire import OutOfBoundsError, SimulationConfig, WindField
from forest_fire.cell import CellState, ForestCell
from forest_fire.metrics import check_burn_invariant
from forest_fire.model import ForestFireModel
from forest_fire.particles import ParticleKind


def make_model(fill_grid, state=CellState.Tree, **overrides):
    params = dict(
        width=9, height=9, growth_probability=0.0, lightning_probability=0.0,
        fire_spread_probability=0.0, burn_time=5,
    )
    params.update(overrides)
    model = ForestFireModel(SimulationConfig(**params), seed=42)
    return fill_grid(model, state)


class TestFireModel:
    """Test cases for ForestFireModel class."""

    def test_model_creation(self):
        """Test creating a forest model."""
        model = ForestFireModel(SimulationConfig(width=10, height=6), seed=1)
        assert model.grid.width == 10
        assert model.grid.height == 6
        assert not model.grid.torus  # Grid should not wrap around

    def test_grid_initialized_with_cells(self):
        """Test that grid is initialized with forest cells."""
        model = ForestFireModel(SimulationConfig(width=5, height=5), seed=1)
        assert len(model.agents) == 25
        for agent in model.agents:
            assert isinstance(agent, ForestCell)
            assert agent.state in (CellState.Tree, CellState.Empty)
            assert agent.burn_timer == 0

    def test_same_seed_same_forest(self):
        a = ForestFireModel(SimulationConfig(width=20, height=20), seed=7)
        b = ForestFireModel(SimulationConfig(width=20, height=20), seed=7)
        assert np.array_equal(a.state_array(), b.state_array())

    def test_tree_probability_falls_off_from_centre(self):
        model = ForestFireModel(SimulationConfig(width=80, height=80), seed=1)
        assert model.tree_probability(40, 40) == pytest.approx(0.65)
        assert model.tree_probability(40, 0) == pytest.approx(0.65 * 0.3)
        assert model.tree_probability(0, 0) < model.tree_probability(20, 20)
        assert model.tree_probability(0, 0) >= 0.0

    def test_model_step(self, fill_grid):
        """Test that model can execute a step."""
        model = make_model(fill_grid)
        model.ignite_at(4, 4)
        model.step()
        assert model.burn_remaining(4, 4) == 4
        assert model.cell_state(4, 4) == CellState.Burning

    def test_burning_cell_becomes_ash(self, fill_grid):
        model = make_model(fill_grid)
        model.ignite_at(4, 4)
        model.grid[4][4].burn_timer = 1
        model.step()
        assert model.cell_state(4, 4) == CellState.Burnt
        assert model.burn_remaining(4, 4) == 0

    def test_burn_countdown_runs_to_ash(self, fill_grid):
        model = make_model(fill_grid, burn_time=3)
        model.ignite_at(4, 4)
        timers = []
        for _ in range(3):
            model.step()
            timers.append(model.burn_remaining(4, 4))
        assert timers == [2, 1, 0]
        assert model.cell_state(4, 4) == CellState.Burnt

    def test_no_same_tick_cascade(self, fill_grid):
        """Only direct neighbours of the seed ignite within one tick."""
        model = make_model(fill_grid, fire_spread_probability=1.0)
        model.ignite_at(4, 4)
        model.step()

        states = model.state_array()
        for y in range(9):
            for x in range(9):
                expected = CellState.Burning if max(abs(x - 4), abs(y - 4)) <= 1 else CellState.Tree
                assert states[y, x] == expected.value, (x, y)

    def test_spread_at_corner_is_bounds_checked(self, fill_grid):
        model = make_model(fill_grid, fire_spread_probability=1.0)
        model.ignite_at(0, 0)
        model.step()
        counts = model.count_states()
        assert counts.burning == 4
        assert model.cell_state(1, 1) == CellState.Burning
        assert model.cell_state(8, 8) == CellState.Tree

    def test_fire_does_not_spread_to_non_trees(self, fill_grid):
        model = make_model(fill_grid, state=CellState.Empty, fire_spread_probability=1.0)
        model.grid[4][4].reset(CellState.Burning)
        model.step()
        assert model.count_states().burning == 1

    def test_fire_spreads(self, fill_grid):
        """Test that fire spreads to neighbouring cells over several ticks."""
        model = make_model(fill_grid, fire_spread_probability=0.5, burn_time=10)
        model.ignite_at(4, 4)
        for _ in range(20):
            model.step()
        counts = model.count_states()
        assert counts.burning + counts.burnt > 1

    def test_state_invariant_holds_every_tick(self):
        config = SimulationConfig(
            width=20, height=20, growth_probability=0.05, lightning_probability=0.01,
            fire_spread_probability=0.3, burn_time=4,
        )
        model = ForestFireModel(config, seed=11)
        wind = WindField(45, 6)
        for _ in range(30):
            model.step(wind)
            states = model.state_array()
            assert set(np.unique(states)) <= {s.value for s in CellState}
            assert check_burn_invariant(states, model.burn_array())

    def test_emissions_come_from_burning_cells(self, fill_grid):
        model = make_model(fill_grid, state=CellState.Empty)
        model.config.particles.flame_probability = 1.0
        model.config.particles.smoke_probability = 1.0
        model.grid[2][3].reset(CellState.Burning)
        events = model.run_tick()
        assert sorted(e.kind.name for e in events) == ["FLAME", "SMOKE"]
        assert all((e.x, e.y) == (2, 3) for e in events)

    def test_emissions_reset_each_tick(self, fill_grid):
        model = make_model(fill_grid, state=CellState.Empty)
        model.config.particles.flame_probability = 1.0
        model.config.particles.smoke_probability = 0.0
        model.grid[2][3].reset(CellState.Burning)
        model.step()
        assert [e.kind for e in model.emissions] == [ParticleKind.FLAME]
        model.grid[2][3].reset(CellState.Empty)
        model.step()
        assert model.emissions == []

    def test_step_normalizes_wind(self, fill_grid):
        model = make_model(fill_grid)
        model.step(WindField(-90, 50))
        assert model.wind == WindField(270.0, model.config.max_wind_strength)

    def test_step_keeps_previous_wind(self, fill_grid):
        model = make_model(fill_grid)
        model.step(WindField(180, 4))
        model.step()
        assert model.wind == WindField(180.0, 4.0)

    def test_ignite_out_of_bounds(self, fill_grid):
        model = make_model(fill_grid)
        for x, y in [(-1, 0), (0, -1), (9, 0), (0, 9)]:
            with pytest.raises(OutOfBoundsError):
                model.ignite_at(x, y)
        assert model.count_states().burning == 0

    def test_out_of_bounds_is_index_error(self, fill_grid):
        model = make_model(fill_grid)
        with pytest.raises(IndexError) as excinfo:
            model.cell_state(12, 3)
        assert excinfo.value.x == 12
        assert excinfo.value.width == 9

    def test_ignite_random(self, fill_grid):
        model = make_model(fill_grid)
        assert model.ignite_random() is True
        assert model.count_states().burning == 1

    def test_ignite_random_noop_without_trees(self, fill_grid):
        model = make_model(fill_grid, state=CellState.Empty)
        assert model.ignite_random() is False
        assert model.count_states().burning == 0

    def test_reseed(self, fill_grid):
        model = make_model(fill_grid, state=CellState.Burning)
        model.reseed()
        states = model.state_array()
        assert set(np.unique(states)) <= {CellState.Empty.value, CellState.Tree.value}
        assert not model.burn_array().any()

    def test_arrays_are_indexed_y_x(self, fill_grid):
        model = make_model(fill_grid, state=CellState.Empty)
        model.grid[5][2].reset(CellState.Tree)
        model.ignite_at(5, 2)
        assert model.state_array()[2, 5] == CellState.Burning.value
        assert model.burn_array()[2, 5] == 5
