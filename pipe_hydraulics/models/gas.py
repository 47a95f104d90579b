# File: pipe_hydraulics/models/gas.py
"""
Single-phase compressible gas line

Isothermal general flow equation integrated along the pipe with the
elevation term (GPSA form):

    horizontal:  P2² = P1² - F
    inclined:    P2² = P1² e^(-S) - F (1 - e^(-S)) / S

    F = (f L/D) (Z R_s T) (m_dot/A)²
    S = 2 MW g dz / (Z R T)

Reference: GPSA Engineering Data Book, Section 17
"""

import math

from ..core.data import G, R_UNIVERSAL, HydraulicInputs, HydraulicResult
from ..core.correlations import solve_colebrook


HORIZONTAL_S_LIMIT = 1e-6     # |S| below this is treated as horizontal
MACH_CHOKED = 1.0
MACH_COMPRESSIBLE = 0.3


def gas_density(P: float, MW: float, Z: float, T: float) -> float:
    """Real-gas law density rho = P MW / (Z R T)"""
    return P * MW / (Z * R_UNIVERSAL * T)


def elevation_exponent(inputs: HydraulicInputs) -> float:
    """S = 2 MW g dz / (Z R T)"""
    return 2.0 * inputs.gas_mw * G * inputs.elevation / (inputs.gas_z * R_UNIVERSAL * inputs.T_inlet)


def calc_gas_pressure_drop(inputs: HydraulicInputs) -> HydraulicResult:
    """
    Gas pressure drop over one pipe segment

    Reynolds number uses the mass-flux form, constant along the pipe, so it
    is evaluated once at inlet.

    Returns:
        HydraulicResult. success=False with regime "Choked/Vacuum" when
        the line cannot pass the mass flow at the given inlet pressure.

    Raises:
        InvalidInputError: MW, viscosity, Z, temperature, pressure or mass flow
                           missing or non-positive
    """
    inputs.require_positive('gas_mw', 'gas_viscosity', 'gas_z', 'gas_k',
                            'mass_flow', 'P_inlet', 'T_inlet')

    MW = inputs.gas_mw
    Z = inputs.gas_z
    T = inputs.T_inlet
    P_in = inputs.P_inlet
    D = inputs.diameter
    area = inputs.area

    rho_in = gas_density(P_in, MW, Z, T)
    v_in = inputs.mass_flow / (rho_in * area)
    Re = rho_in * v_in * D / inputs.gas_viscosity
    f = solve_colebrook(Re, inputs.relative_roughness)

    R_s = R_UNIVERSAL / MW                   # J/kg-K
    mass_flux = inputs.mass_flow / area      # kg/m²-s
    friction_term = (f * inputs.length / D) * (Z * R_s * T) * mass_flux**2

    S = elevation_exponent(inputs)
    if abs(S) < HORIZONTAL_S_LIMIT:
        P_out_sq = P_in**2 - friction_term
    else:
        P_out_sq = P_in**2 * math.exp(-S) - friction_term * (1.0 - math.exp(-S)) / S

    if P_out_sq <= 0:
        return HydraulicResult(
            success=False,
            pressure_out=0.0,
            pressure_drop=P_in,
            dp_friction=P_in,
            dp_elevation=0.0,
            velocity=0.0,
            reynolds=Re,
            friction_factor=f,
            flow_regime="Choked/Vacuum",
            warnings=["Pressure drop too high - potential vacuum or choked flow"],
        )

    P_out = math.sqrt(P_out_sq)
    rho_out = gas_density(P_out, MW, Z, T)
    v_out = inputs.mass_flow / (rho_out * area)

    c_sound = math.sqrt(inputs.gas_k * Z * R_s * T)
    mach = v_out / c_sound

    warnings = []
    if mach > MACH_CHOKED:
        warnings.append("Mach > 1.0: flow is choked")
    if mach > MACH_COMPRESSIBLE:
        warnings.append("Mach > 0.3: compressibility effects significant")

    # Reporting split only, linearised about the arithmetic mean pressure
    dp_total = P_in - P_out
    P_mean = (P_in + P_out) / 2.0
    dp_friction = friction_term / (2.0 * P_mean)
    dp_elevation = dp_total - dp_friction

    return HydraulicResult(
        success=True,
        pressure_out=P_out,
        pressure_drop=dp_total,
        dp_friction=dp_friction,
        dp_elevation=dp_elevation,
        velocity=v_out,
        reynolds=Re,
        friction_factor=f,
        flow_regime="Turbulent",
        mach_number=mach,
        warnings=warnings,
    )
