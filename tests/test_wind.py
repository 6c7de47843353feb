"""Unit tests for the wind field."""

import math

import pytest
from forest_fire.wind import WindField

NEIGHBOUR_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]


class TestWindField:

    @pytest.mark.parametrize("direction, expected", [
        (0, (0.0, -1.0)),     # up
        (90, (1.0, 0.0)),     # right
        (180, (0.0, 1.0)),    # down
        (270, (-1.0, 0.0)),   # left
    ])
    def test_unit_vector(self, direction, expected):
        ux, uy = WindField(direction, 1).unit_vector
        assert ux == pytest.approx(expected[0], abs=1e-12)
        assert uy == pytest.approx(expected[1], abs=1e-12)

    @pytest.mark.parametrize("direction", [0, 45, 90, 200, 315])
    def test_calm_wind_is_isotropic(self, direction):
        wind = WindField(direction, 0)
        for dx, dy in NEIGHBOUR_OFFSETS:
            assert wind.spread_multiplier(dx, dy) == 1.0

    def test_downwind_beats_upwind(self):
        wind = WindField(90, 5)
        downwind = wind.spread_multiplier(1, 0)
        upwind = wind.spread_multiplier(-1, 0)
        assert downwind > upwind
        assert downwind == pytest.approx(1.5)
        assert upwind == 1.0

    def test_no_upwind_penalty(self):
        wind = WindField(0, 10)
        for dx, dy in NEIGHBOUR_OFFSETS:
            assert wind.spread_multiplier(dx, dy) >= 1.0

    def test_diagonal_uses_unit_offset(self):
        wind = WindField(135, 10)  # towards bottom-right
        assert wind.spread_multiplier(1, 1) == pytest.approx(2.0)
        assert wind.spread_multiplier(1, 0) == pytest.approx(1 + math.sqrt(0.5))

    def test_spread_factor_is_configurable(self):
        wind = WindField(180, 4)
        assert wind.spread_multiplier(0, 1, factor=0.25) == pytest.approx(2.0)

    def test_zero_offset(self):
        assert WindField(90, 10).spread_multiplier(0, 0) == 1.0

    @pytest.mark.parametrize("raw, expected", [
        (WindField(370, 3), WindField(10.0, 3.0)),
        (WindField(-45, 3), WindField(315.0, 3.0)),
        (WindField(90, -2), WindField(90.0, 0.0)),
        (WindField(90, 25), WindField(90.0, 10.0)),
        (WindField(float("nan"), float("inf")), WindField(0.0, 0.0)),
    ])
    def test_normalized(self, raw, expected):
        assert raw.normalized(10) == expected

    def test_drift(self):
        dx, dy = WindField(270, 4).drift(0.5)
        assert dx == pytest.approx(-2.0)
        assert dy == pytest.approx(0.0, abs=1e-12)

    def test_from_compass(self):
        assert WindField.from_compass("ne", 2) == WindField(45.0, 2)
        assert WindField.from_compass(" SSW ", 1).direction == 202.5

    def test_from_compass_unknown(self):
        with pytest.raises(ValueError):
            WindField.from_compass("up", 1)
