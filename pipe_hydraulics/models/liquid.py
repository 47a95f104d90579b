# File: pipe_hydraulics/models/liquid.py
"""
Single-phase liquid line: Darcy-Weisbach friction plus hydrostatic head
"""

from ..core.data import G, HydraulicInputs, HydraulicResult
from ..core.correlations import solve_colebrook, reynolds_regime


LIQUID_VELOCITY_LIMIT = 4.5   # m/s, typical upper limit for liquid lines


def calc_liquid_pressure_drop(inputs: HydraulicInputs) -> HydraulicResult:
    """
    Liquid pressure drop over one pipe segment

    dP_f = f (L/D) rho v²/2
    dP_z = rho g dz   (dz > 0 uphill adds to the drop, downhill recovers)

    Raises:
        InvalidInputError: liquid density/viscosity or mass flow missing or non-positive
    """
    inputs.require_positive('liquid_density', 'liquid_viscosity', 'mass_flow')

    rho = inputs.liquid_density
    mu = inputs.liquid_viscosity
    D = inputs.diameter

    velocity = inputs.mass_flow / (rho * inputs.area)
    Re = rho * velocity * D / mu
    f = solve_colebrook(Re, inputs.relative_roughness)

    dp_friction = f * (inputs.length / D) * (rho * velocity**2 / 2.0)
    dp_elevation = rho * G * inputs.elevation

    dp_total = dp_friction + dp_elevation
    p_out = inputs.P_inlet - dp_total

    warnings = []
    if velocity > LIQUID_VELOCITY_LIMIT:
        warnings.append(f"Velocity exceeds typical liquid limit ({LIQUID_VELOCITY_LIMIT} m/s)")
    if p_out < 0:
        warnings.append("Negative outlet pressure likely - vacuum condition")

    return HydraulicResult(
        success=True,
        pressure_out=p_out,
        pressure_drop=dp_total,
        dp_friction=dp_friction,
        dp_elevation=dp_elevation,
        velocity=velocity,
        reynolds=Re,
        friction_factor=f,
        flow_regime=reynolds_regime(Re),
        warnings=warnings,
    )
