# File: tests/unit/test_pipes.py
"""
Unit tests for pipe schedule and roughness tables
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pipe_hydraulics.core.data import InvalidInputError
from pipe_hydraulics.core.pipes import (
    available_schedules,
    inside_diameter,
    load_pipe_data,
    nominal_sizes,
    nps_to_inches,
    roughness,
)


class TestNominalSizes:

    @pytest.mark.parametrize("nps, inches", [
        ("1/2", 0.5), ("3/4", 0.75), ("1", 1.0), ("1-1/2", 1.5), ("2-1/2", 2.5), ("48", 48.0),
    ])
    def test_nps_to_inches(self, nps, inches):
        assert nps_to_inches(nps) == inches

    def test_sizes_ascending(self):
        sizes = nominal_sizes()
        assert sizes[0] == "1/2"
        assert sizes[-1] == "48"
        inches = [nps_to_inches(s) for s in sizes]
        assert inches == sorted(inches)

    def test_keys_are_strings(self):
        data = load_pipe_data()
        assert all(isinstance(k, str) for k in data['inside_diameter_mm'])
        assert all(isinstance(s, str) for s in data['schedule_order'])


class TestInsideDiameter:

    def test_four_inch_sch40(self):
        assert inside_diameter("4", "40") == pytest.approx(0.10226)

    def test_default_schedule_is_40(self):
        assert inside_diameter("3") == inside_diameter("3", "40")

    def test_heavier_schedule_smaller_bore(self):
        assert inside_diameter("4", "80") < inside_diameter("4", "40") < inside_diameter("4", "10s")

    def test_schedule_order(self):
        schedules = available_schedules("4")
        assert schedules[0] == "5s"
        assert "40" in schedules
        assert schedules.index("40") < schedules.index("80")

    def test_large_bore_without_sch40(self):
        assert "40" not in available_schedules("48")

    def test_unknown_size(self):
        with pytest.raises(InvalidInputError, match="Unknown nominal pipe size"):
            inside_diameter("5", "40")

    def test_unknown_schedule(self):
        with pytest.raises(InvalidInputError, match="not available for NPS 48"):
            inside_diameter("48", "40")


class TestRoughness:

    def test_carbon_steel(self):
        assert roughness("Carbon Steel (New)") == pytest.approx(4.57e-5)

    def test_custom(self):
        assert roughness("Custom", custom_mm=0.1) == pytest.approx(1e-4)

    def test_custom_requires_value(self):
        with pytest.raises(InvalidInputError, match="Custom"):
            roughness("Custom")

    def test_unknown_material(self):
        with pytest.raises(InvalidInputError, match="not available. Choose from"):
            roughness("Unobtainium")
