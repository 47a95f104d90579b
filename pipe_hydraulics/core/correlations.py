# File: pipe_hydraulics/core/correlations.py
"""
Friction factor correlations for pipe flow

Colebrook-White solved by bounded fixed-point iteration, seeded with Haaland.
"""

import math


LAMINAR_RE_LIMIT = 2000.0     # Below this, f = 64/Re
TURBULENT_RE_LIMIT = 4000.0   # Above this, regime labelled turbulent
COLEBROOK_MAX_ITER = 20
COLEBROOK_TOL = 1e-6
FRICTION_FLOOR = 0.001        # Reset value if an iterate goes non-positive


def haaland(Re: float, rel_roughness: float) -> float:
    """
    Haaland explicit approximation of the Darcy friction factor

    1/sqrt(f) = -1.8 log10((e/D/3.7)^1.11 + 6.9/Re)
    """
    if Re <= 0:
        raise ValueError(f"Reynolds number must be positive, got {Re}")
    rel_roughness = max(rel_roughness, 0.0)
    term = (rel_roughness / 3.7) ** 1.11 + 6.9 / Re
    inv_sqrt_f = -1.8 * math.log10(term)
    return 1.0 / inv_sqrt_f**2


def solve_colebrook(Re: float, rel_roughness: float) -> float:
    """
    Darcy friction factor from the Colebrook-White equation

        1/sqrt(f) = -2 log10(e/D/3.7 + 2.51/(Re sqrt(f)))

    Args:
        Re: Reynolds number
        rel_roughness: Relative roughness (e/D), negative values clamped to 0

    Returns:
        float: Darcy friction factor. 64/Re for Re < 2000 (0 if Re <= 0).

    Note: Iteration is capped at COLEBROOK_MAX_ITER. The last iterate is
          returned if the tolerance is not reached.
    """
    if Re < LAMINAR_RE_LIMIT:
        return 64.0 / Re if Re > 0 else 0.0

    rel_roughness = max(rel_roughness, 0.0)
    f = haaland(Re, rel_roughness)

    for _ in range(COLEBROOK_MAX_ITER):
        if f <= 0:
            f = FRICTION_FLOOR
        f_next = (-2.0 * math.log10(rel_roughness / 3.7 + 2.51 / (Re * math.sqrt(f)))) ** -2
        if abs(f_next - f) < COLEBROOK_TOL:
            return f_next
        f = f_next

    return f


def colebrook_residual(f: float, Re: float, rel_roughness: float) -> float:
    """Residual of the Colebrook equation, zero at the solution"""
    return 1.0 / math.sqrt(f) + 2.0 * math.log10(rel_roughness / 3.7 + 2.51 / (Re * math.sqrt(f)))


def reynolds_regime(Re: float) -> str:
    """Laminar / Transition / Turbulent label for single-phase flow"""
    if Re < LAMINAR_RE_LIMIT:
        return "Laminar"
    if Re > TURBULENT_RE_LIMIT:
        return "Turbulent"
    return "Transition"
