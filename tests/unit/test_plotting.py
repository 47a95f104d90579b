# File: tests/unit/test_plotting.py
"""
Smoke tests for plotting functions (non-interactive backend)
"""

import pytest
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pipe_hydraulics.core.data import HydraulicInputs
from pipe_hydraulics.analysis.sizing import elevation_profile
from pipe_hydraulics.visualization.plotting import (
    plot_elevation_profile,
    plot_flow_pattern_map,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.fixture
def wet_line():
    return HydraulicInputs(
        length=500.0, diameter=0.1, P_inlet=2e6, T_inlet=300.0,
        gas_mass_flow=1.0, liquid_mass_flow=5.0,
        liquid_density=800.0, liquid_viscosity=2e-3,
        mix_gas_density=20.0, mix_gas_viscosity=1.5e-5,
    )


class TestFlowPatternMap:

    def test_boundaries_only(self):
        fig, ax = plot_flow_pattern_map()
        assert ax.get_xscale() == 'log'
        assert ax.get_yscale() == 'log'
        assert len(ax.lines) == 4
        assert ax.get_legend() is None

    def test_points(self, wet_line):
        fig, ax = plot_flow_pattern_map([(0.1, 1.0), (0.1, 200.0), wet_line])
        assert len(ax.collections) == 3
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert set(labels) == {"Transition", "Distributed", "Intermittent"}

    def test_existing_axes(self):
        fig, ax = plt.subplots()
        fig2, ax2 = plot_flow_pattern_map(ax=ax)
        assert fig2 is fig
        assert ax2 is ax

    def test_save(self, tmp_path):
        out = tmp_path / "map.png"
        plot_flow_pattern_map(save_path=str(out))
        assert out.exists()


class TestElevationProfilePlot:

    def test_profile(self, wet_line):
        df = elevation_profile("mixed-beggs-brill", wet_line, elevations=[-20.0, 0.0, 20.0])
        fig, ax = plot_elevation_profile(df)
        assert len(ax.lines) >= 3

    def test_empty(self):
        fig, ax = plot_elevation_profile(pd.DataFrame())
        assert len(ax.lines) == 0
