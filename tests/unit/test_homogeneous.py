# File: tests/unit/test_homogeneous.py
"""
Unit tests for the homogeneous no-slip two-phase model
"""

import pytest
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pipe_hydraulics.core.data import HydraulicInputs, InvalidInputError, G
from pipe_hydraulics.models.homogeneous import calc_homogeneous, SCREENING_WARNING


@pytest.fixture
def wet_line():
    """1 kg/s gas (20 kg/m³) and 5 kg/s liquid (800 kg/m³) in 0.1 m pipe"""
    return HydraulicInputs(
        length=500.0,
        diameter=0.1,
        P_inlet=2e6,
        T_inlet=300.0,
        gas_mass_flow=1.0,
        liquid_mass_flow=5.0,
        liquid_density=800.0,
        liquid_viscosity=2e-3,
        mix_gas_density=20.0,
        mix_gas_viscosity=1.5e-5,
    )


class TestHomogeneous:

    def test_no_slip_fraction_and_density(self, wet_line):
        r = calc_homogeneous(wet_line)
        # Q_l = 0.00625, Q_g = 0.05 m³/s
        assert r.liquid_holdup == pytest.approx(1.0 / 9.0)
        assert r.mixture_density == pytest.approx(800.0 / 9.0 + 20.0 * 8.0 / 9.0)
        assert r.mixture_viscosity == pytest.approx(2e-3 / 9.0 + 1.5e-5 * 8.0 / 9.0)

    def test_velocities(self, wet_line):
        r = calc_homogeneous(wet_line)
        area = wet_line.area
        assert r.superficial_vel_liq == pytest.approx(0.00625 / area)
        assert r.superficial_vel_gas == pytest.approx(0.05 / area)
        assert r.velocity == pytest.approx(r.superficial_vel_liq + r.superficial_vel_gas)

    def test_friction_and_elevation(self, wet_line):
        r = calc_homogeneous(replace(wet_line, elevation=10.0))
        rho = r.mixture_density
        assert r.dp_friction == pytest.approx(
            r.friction_factor * (500.0 / 0.1) * 0.5 * rho * r.velocity**2)
        assert r.dp_elevation == pytest.approx(rho * G * 10.0)
        assert r.pressure_out == pytest.approx(2e6 - r.pressure_drop)

    def test_screening_warning_first(self, wet_line):
        r = calc_homogeneous(wet_line)
        assert r.warnings[0] == SCREENING_WARNING
        assert r.flow_regime == "Homogeneous (Assumed)"
        assert r.success

    def test_gas_only_allowed(self, wet_line):
        r = calc_homogeneous(replace(wet_line, liquid_mass_flow=0.0))
        assert r.liquid_holdup == 0.0
        assert r.mixture_density == pytest.approx(20.0)

    def test_liquid_only_allowed(self, wet_line):
        r = calc_homogeneous(replace(wet_line, gas_mass_flow=0.0))
        assert r.liquid_holdup == pytest.approx(1.0)
        assert r.mixture_density == pytest.approx(800.0)


class TestHomogeneousInputs:

    def test_both_phases_zero(self, wet_line):
        with pytest.raises(InvalidInputError, match="At least one phase"):
            calc_homogeneous(replace(wet_line, gas_mass_flow=0.0, liquid_mass_flow=0.0))

    def test_negative_phase_flow(self, wet_line):
        with pytest.raises(InvalidInputError, match="gas_mass_flow"):
            calc_homogeneous(replace(wet_line, gas_mass_flow=-1.0))

    def test_missing_phase_split(self, wet_line):
        with pytest.raises(InvalidInputError, match="liquid_mass_flow"):
            calc_homogeneous(replace(wet_line, liquid_mass_flow=None))

    @pytest.mark.parametrize("field", ["mix_gas_density", "mix_gas_viscosity", "liquid_density"])
    def test_missing_property(self, wet_line, field):
        with pytest.raises(InvalidInputError, match=field):
            calc_homogeneous(replace(wet_line, **{field: None}))
