# File: tests/unit/test_correlations.py
"""
Unit tests for correlations module
Colebrook-White solver, Haaland seed and regime labels
"""

import pytest
import math
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pipe_hydraulics.core.correlations import (
    haaland,
    solve_colebrook,
    colebrook_residual,
    reynolds_regime,
    LAMINAR_RE_LIMIT,
)


class TestColebrook:
    """Test Colebrook-White friction factor"""

    @pytest.mark.parametrize("Re", [1e-3, 1.0, 64.0, 500.0, 1000.0, 1999.0, 1999.999])
    def test_laminar_returns_64_over_Re(self, Re):
        assert solve_colebrook(Re, 1e-4) == 64.0 / Re

    def test_laminar_ignores_roughness(self):
        assert solve_colebrook(500.0, 0.0) == solve_colebrook(500.0, 0.05)

    @pytest.mark.parametrize("Re", [0.0, -10.0])
    def test_non_positive_reynolds_returns_zero(self, Re):
        assert solve_colebrook(Re, 1e-4) == 0.0

    def test_threshold_uses_turbulent_branch(self):
        """Re = 2000 is not laminar"""
        f = solve_colebrook(LAMINAR_RE_LIMIT, 0.0)
        assert f != pytest.approx(64.0 / LAMINAR_RE_LIMIT)
        assert f > 64.0 / LAMINAR_RE_LIMIT

    def test_reference_value(self):
        """Re = 1e5, e/D = 1e-4 (Moody chart ~0.0185)"""
        f = solve_colebrook(1e5, 1e-4)
        assert f == pytest.approx(0.0185, rel=0.01)

    def test_satisfies_equation(self):
        for Re, rel in [(5e3, 0.0), (1e5, 1e-4), (1e7, 1e-3), (3e6, 1e-5)]:
            f = solve_colebrook(Re, rel)
            assert abs(colebrook_residual(f, Re, rel)) < 1e-3

    def test_rough_pipe_higher_friction(self):
        assert solve_colebrook(1e5, 0.01) > solve_colebrook(1e5, 0.0)

    @pytest.mark.parametrize("Re", [LAMINAR_RE_LIMIT, 4000.0, 1e5, 1e8])
    def test_non_decreasing_in_roughness(self, Re):
        roughness = [0.0, 1e-6, 1e-5, 1e-4, 1e-3, 5e-3, 0.01, 0.02, 0.05]
        f = [solve_colebrook(Re, rel) for rel in roughness]
        assert all(b >= a for a, b in zip(f, f[1:]))

    def test_repeatable(self):
        """Identical inputs give bit-identical results"""
        first = solve_colebrook(1e5, 1e-4)
        assert all(solve_colebrook(1e5, 1e-4) == first for _ in range(10))

    def test_reynolds_effect_turbulent(self):
        assert solve_colebrook(1e4, 1e-4) > solve_colebrook(1e6, 1e-4)

    def test_negative_roughness_clamped(self):
        assert solve_colebrook(1e5, -1e-3) == pytest.approx(solve_colebrook(1e5, 0.0))

    def test_fully_rough_limit(self):
        """At very high Re, f -> von Karman rough-pipe value"""
        rel = 0.01
        f_rough = (-2.0 * math.log10(rel / 3.7)) ** -2
        assert solve_colebrook(1e9, rel) == pytest.approx(f_rough, rel=1e-3)


class TestHaaland:
    """Test Haaland seed"""

    def test_close_to_colebrook(self):
        for Re, rel in [(1e4, 1e-4), (1e5, 1e-3), (1e6, 1e-5)]:
            assert haaland(Re, rel) == pytest.approx(solve_colebrook(Re, rel), rel=0.03)

    def test_rejects_non_positive_reynolds(self):
        with pytest.raises(ValueError, match="positive"):
            haaland(0.0, 1e-4)


class TestReynoldsRegime:

    @pytest.mark.parametrize("Re, label", [
        (1500.0, "Laminar"),
        (2000.0, "Transition"),
        (3000.0, "Transition"),
        (4000.0, "Transition"),
        (5000.0, "Turbulent"),
    ])
    def test_labels(self, Re, label):
        assert reynolds_regime(Re) == label
