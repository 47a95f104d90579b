# File: tests/unit/test_liquid.py
"""
Unit tests for the single-phase liquid model
"""

import pytest
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pipe_hydraulics.core.data import HydraulicInputs, InvalidInputError, G
from pipe_hydraulics.core.correlations import solve_colebrook
from pipe_hydraulics.models.liquid import calc_liquid_pressure_drop


@pytest.fixture
def water_line():
    """100 m of 0.1 m pipe, 20 kg/s water"""
    return HydraulicInputs(
        length=100.0,
        diameter=0.1,
        P_inlet=5e5,
        T_inlet=293.15,
        roughness=4.5e-5,
        mass_flow=20.0,
        liquid_density=1000.0,
        liquid_viscosity=1e-3,
    )


class TestLiquidHorizontal:

    def test_velocity_and_reynolds(self, water_line):
        r = calc_liquid_pressure_drop(water_line)
        assert r.velocity == pytest.approx(2.5465, rel=1e-4)
        assert r.reynolds == pytest.approx(254648, rel=1e-4)
        assert r.flow_regime == "Turbulent"
        assert r.success

    def test_darcy_weisbach(self, water_line):
        r = calc_liquid_pressure_drop(water_line)
        f = solve_colebrook(r.reynolds, 4.5e-4)
        assert r.friction_factor == pytest.approx(f)
        expected = f * (100.0 / 0.1) * 1000.0 * r.velocity**2 / 2.0
        assert r.dp_friction == pytest.approx(expected)

    def test_no_elevation_term(self, water_line):
        r = calc_liquid_pressure_drop(water_line)
        assert r.dp_elevation == 0.0
        assert r.pressure_drop == pytest.approx(r.dp_friction)
        assert r.pressure_out == pytest.approx(5e5 - r.pressure_drop)
        assert r.warnings == []

    def test_friction_scales_with_length(self, water_line):
        short = calc_liquid_pressure_drop(water_line)
        long = calc_liquid_pressure_drop(replace(water_line, length=200.0))
        assert long.dp_friction == pytest.approx(2.0 * short.dp_friction)

    def test_laminar(self, water_line):
        r = calc_liquid_pressure_drop(replace(water_line, liquid_viscosity=1.0))
        assert r.flow_regime == "Laminar"
        assert r.friction_factor == pytest.approx(64.0 / r.reynolds)


class TestLiquidElevation:

    def test_uphill_hydrostatic(self, water_line):
        r = calc_liquid_pressure_drop(replace(water_line, elevation=20.0))
        assert r.dp_elevation == pytest.approx(1000.0 * G * 20.0)
        assert r.pressure_drop == pytest.approx(r.dp_friction + r.dp_elevation)

    def test_downhill_recovers_pressure(self, water_line):
        flat = calc_liquid_pressure_drop(water_line)
        down = calc_liquid_pressure_drop(replace(water_line, elevation=-20.0))
        assert down.dp_elevation < 0
        assert down.pressure_out > flat.pressure_out
        assert down.dp_friction == pytest.approx(flat.dp_friction)


class TestLiquidWarnings:

    def test_high_velocity(self, water_line):
        r = calc_liquid_pressure_drop(replace(water_line, mass_flow=40.0))
        assert r.velocity > 4.5
        assert any("Velocity exceeds" in w for w in r.warnings)

    def test_vacuum_still_succeeds(self, water_line):
        r = calc_liquid_pressure_drop(replace(water_line, P_inlet=1e4, elevation=50.0))
        assert r.pressure_out < 0
        assert r.success
        assert "Negative outlet pressure likely - vacuum condition" in r.warnings


class TestLiquidInputs:

    @pytest.mark.parametrize("field", ["liquid_density", "liquid_viscosity"])
    def test_missing_property(self, water_line, field):
        with pytest.raises(InvalidInputError, match=field):
            calc_liquid_pressure_drop(replace(water_line, **{field: None}))

    def test_zero_mass_flow(self, water_line):
        with pytest.raises(InvalidInputError, match="mass_flow"):
            calc_liquid_pressure_drop(replace(water_line, mass_flow=0.0))
