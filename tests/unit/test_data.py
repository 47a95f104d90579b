# File: tests/unit/test_data.py
"""
Unit tests for the HydraulicInputs / HydraulicResult contracts
"""

import pytest
import math
import sys
from dataclasses import FrozenInstanceError, replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pipe_hydraulics.core.data import (
    HydraulicInputs,
    HydraulicResult,
    InvalidInputError,
    G,
)


@pytest.fixture
def inputs():
    return HydraulicInputs(length=100.0, diameter=0.1, P_inlet=5e5, T_inlet=293.15)


def make_result(**overrides):
    base = dict(
        success=True, pressure_out=4e5, pressure_drop=1e5, dp_friction=8e4,
        dp_elevation=2e4, velocity=2.5, reynolds=2.5e5, friction_factor=0.018,
        flow_regime="Turbulent",
    )
    base.update(overrides)
    return HydraulicResult(**base)


class TestHydraulicInputs:

    def test_defaults(self, inputs):
        assert inputs.elevation == 0.0
        assert inputs.roughness == pytest.approx(4.57e-5)
        assert inputs.gas_z == 1.0
        assert inputs.gas_k == 1.3
        assert inputs.surface_tension == 0.072
        assert inputs.liquid_density is None

    def test_area_and_relative_roughness(self, inputs):
        assert inputs.area == pytest.approx(math.pi * 0.1**2 / 4)
        assert inputs.relative_roughness == pytest.approx(4.57e-4)

    @pytest.mark.parametrize("field, value, message", [
        ("diameter", 0.0, "Diameter"),
        ("diameter", -0.1, "Diameter"),
        ("length", 0.0, "length"),
        ("roughness", -1e-5, "Roughness"),
    ])
    def test_geometry_validated(self, inputs, field, value, message):
        with pytest.raises(InvalidInputError, match=message):
            replace(inputs, **{field: value})

    def test_zero_roughness_allowed(self, inputs):
        assert replace(inputs, roughness=0.0).relative_roughness == 0.0

    def test_immutability(self, inputs):
        with pytest.raises(FrozenInstanceError):
            inputs.length = 200.0

    def test_require_positive_names_missing_field(self, inputs):
        with pytest.raises(InvalidInputError, match="'liquid_density' is required"):
            inputs.require_positive('liquid_density')

    def test_require_positive_names_bad_value(self, inputs):
        with pytest.raises(InvalidInputError, match="'mass_flow' must be positive"):
            inputs.require_positive('mass_flow')

    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)

    def test_gravity_constant(self):
        assert G == 9.80665


class TestHydraulicResult:

    def test_as_dict_joins_warnings(self):
        d = make_result(warnings=["a", "b"]).as_dict()
        assert d['warnings'] == "a; b"
        assert d['pressure_out'] == 4e5
        assert d['liquid_holdup'] is None

    def test_default_acceleration_zero(self):
        assert make_result().dp_acceleration == 0.0

    def test_summary_reports_status(self):
        assert "OK" in make_result().summary()
        failed = make_result(success=False, warnings=["choked"]).summary()
        assert "FAILED" in failed
        assert "! choked" in failed

    def test_summary_optional_lines(self):
        text = make_result(mach_number=0.2, liquid_holdup=0.3).summary()
        assert "Mach" in text
        assert "Holdup" in text
        assert "rho_mix" not in text
