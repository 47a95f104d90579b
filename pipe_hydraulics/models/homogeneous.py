# File: pipe_hydraulics/models/homogeneous.py
"""
Homogeneous no-slip two-phase model (screening only)

Both phases move at the mixture velocity; properties are blended by
no-slip volume fraction.
"""

from ..core.data import G, HydraulicInputs, HydraulicResult, InvalidInputError
from ..core.correlations import solve_colebrook


SCREENING_WARNING = "SCREENING ONLY: homogeneous no-slip model, not for design"


def require_phase_flows(inputs: HydraulicInputs, strictly_positive: bool = False):
    """
    Check both phase mass flows are given

    Raises:
        InvalidInputError: a split is missing, negative (or zero when
                           strictly_positive), or both are zero
    """
    for name in ('gas_mass_flow', 'liquid_mass_flow'):
        value = getattr(inputs, name)
        if value is None:
            raise InvalidInputError(f"'{name}' is required for two-phase calculations")
        if value < 0 or (strictly_positive and value == 0):
            raise InvalidInputError(f"'{name}' must be positive, got {value}")

    if inputs.gas_mass_flow + inputs.liquid_mass_flow <= 0:
        raise InvalidInputError("At least one phase must have positive flow rate")


def calc_homogeneous(inputs: HydraulicInputs) -> HydraulicResult:
    """
    Two-phase pressure drop assuming no slip between phases

    Returns:
        HydraulicResult with liquid_holdup equal to the no-slip fraction.
        The screening warning is always the first warning.
    """
    require_phase_flows(inputs)
    inputs.require_positive('liquid_density', 'liquid_viscosity',
                            'mix_gas_density', 'mix_gas_viscosity')

    rho_l, rho_g = inputs.liquid_density, inputs.mix_gas_density
    mu_l, mu_g = inputs.liquid_viscosity, inputs.mix_gas_viscosity
    D = inputs.diameter
    area = inputs.area

    Q_g = inputs.gas_mass_flow / rho_g
    Q_l = inputs.liquid_mass_flow / rho_l
    Q_total = Q_g + Q_l
    Vm = Q_total / area

    lambda_l = Q_l / Q_total
    lambda_g = 1.0 - lambda_l

    rho_mix = rho_l * lambda_l + rho_g * lambda_g
    mu_mix = mu_l * lambda_l + mu_g * lambda_g

    Re = rho_mix * Vm * D / mu_mix
    f = solve_colebrook(Re, inputs.relative_roughness)

    dp_friction = f * (inputs.length / D) * (0.5 * rho_mix * Vm**2)
    dp_elevation = rho_mix * G * inputs.elevation
    dp_total = dp_friction + dp_elevation

    return HydraulicResult(
        success=True,
        pressure_out=inputs.P_inlet - dp_total,
        pressure_drop=dp_total,
        dp_friction=dp_friction,
        dp_elevation=dp_elevation,
        velocity=Vm,
        reynolds=Re,
        friction_factor=f,
        flow_regime="Homogeneous (Assumed)",
        liquid_holdup=lambda_l,
        mixture_density=rho_mix,
        mixture_viscosity=mu_mix,
        superficial_vel_gas=Q_g / area,
        superficial_vel_liq=Q_l / area,
        warnings=[SCREENING_WARNING],
    )
