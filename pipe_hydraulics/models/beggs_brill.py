# File: pipe_hydraulics/models/beggs_brill.py
"""
Beggs & Brill (1973) two-phase correlation

Steps:
1. No-slip liquid fraction and mixture Froude number
2. Flow pattern from the L1..L4 boundaries
3. Horizontal holdup, interpolated across the transition band
4. Inclination correction (Payne form of the Beggs & Brill C coefficient)
5. Two-phase friction factor f_tp = f_ns e^S
6. Elevation gradient with slip density, friction gradient with no-slip density

Reference: Beggs, H.D. & Brill, J.P., "A Study of Two-Phase Flow in
           Inclined Pipes", JPT (May 1973) 607-617
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..core.data import G, HydraulicInputs, HydraulicResult
from ..core.correlations import solve_colebrook
from .homogeneous import require_phase_flows


class FlowPattern(Enum):
    """Horizontal flow pattern; value is the display label"""
    SEGREGATED = "Segregated"
    TRANSITION = "Transition"
    INTERMITTENT = "Intermittent"
    DISTRIBUTED = "Distributed"


# alpha_0 = a lambda^b / Fr^c
HORIZONTAL_HOLDUP_COEFFS = {
    FlowPattern.SEGREGATED: (0.98, 0.4846, 0.0868),
    FlowPattern.INTERMITTENT: (0.845, 0.5351, 0.0173),
    FlowPattern.DISTRIBUTED: (1.065, 0.5824, 0.0609),
}

# C = (1 - lambda) ln(d lambda^e Nlv^f Fr^g)
UPHILL_COEFFS = {
    FlowPattern.SEGREGATED: (0.011, -3.768, 3.539, -1.614),
    FlowPattern.INTERMITTENT: (2.96, 0.305, -0.4473, 0.0978),
}
# Same set for every downhill pattern
DOWNHILL_COEFFS = (4.70, -0.3692, 0.1244, -0.5056)

NO_SLIP_SMALL = 0.01          # lambda below which only L1 separates patterns
NO_SLIP_LARGE = 0.4           # lambda above which L4 bounds intermittent flow
HOLDUP_MIN = 0.0001
HOLDUP_MAX = 0.9999
LOG_ARG_MIN = 1e-9
MIST_FROUDE = 300.0


@dataclass(frozen=True)
class RegimeBoundaries:
    """Beggs & Brill transition boundaries for a given no-slip fraction"""
    L1: float
    L2: float
    L3: float
    L4: float

    def transition_weight(self, Fr: float) -> float:
        """Weight of the segregated value inside the transition band"""
        return (self.L3 - Fr) / (self.L3 - self.L2)


def regime_boundaries(lambda_l: float) -> RegimeBoundaries:
    """L1..L4 for no-slip liquid fraction lambda_l (0 < lambda_l)"""
    return RegimeBoundaries(
        L1=316.0 * lambda_l**0.302,
        L2=0.0009252 * lambda_l**-2.4684,
        L3=0.10 * lambda_l**-1.4516,
        L4=0.5 * lambda_l**-6.738,
    )


def classify_flow_pattern(lambda_l: float, Fr: float,
                          bounds: Optional[RegimeBoundaries] = None) -> FlowPattern:
    """
    Horizontal flow pattern from no-slip fraction and Froude number
    """
    b = bounds or regime_boundaries(lambda_l)

    if lambda_l < NO_SLIP_SMALL and Fr < b.L1:
        return FlowPattern.SEGREGATED
    if lambda_l >= NO_SLIP_SMALL and Fr < b.L2:
        return FlowPattern.SEGREGATED
    if lambda_l >= NO_SLIP_SMALL and b.L2 < Fr < b.L3:
        return FlowPattern.TRANSITION
    if ((NO_SLIP_SMALL <= lambda_l < NO_SLIP_LARGE and b.L3 < Fr <= b.L1)
            or (lambda_l >= NO_SLIP_LARGE and b.L3 < Fr <= b.L4)):
        return FlowPattern.INTERMITTENT
    if (lambda_l < NO_SLIP_LARGE and Fr >= b.L1) or (lambda_l >= NO_SLIP_LARGE and Fr > b.L4):
        return FlowPattern.DISTRIBUTED

    # Fr sitting exactly on a boundary
    return FlowPattern.DISTRIBUTED if Fr > b.L1 else FlowPattern.SEGREGATED


def _pattern_holdup(pattern: FlowPattern, lambda_l: float, Fr: float) -> float:
    a, b, c = HORIZONTAL_HOLDUP_COEFFS[pattern]
    holdup = a * lambda_l**b / Fr**c
    return min(max(holdup, lambda_l), 1.0)


def horizontal_holdup(pattern: FlowPattern, lambda_l: float, Fr: float,
                      bounds: Optional[RegimeBoundaries] = None) -> float:
    """
    Horizontal liquid holdup alpha_0, clamped to [lambda_l, 1]

    Transition interpolates between segregated and intermittent values.
    """
    if pattern is FlowPattern.TRANSITION:
        A = (bounds or regime_boundaries(lambda_l)).transition_weight(Fr)
        return (A * _pattern_holdup(FlowPattern.SEGREGATED, lambda_l, Fr)
                + (1.0 - A) * _pattern_holdup(FlowPattern.INTERMITTENT, lambda_l, Fr))
    return _pattern_holdup(pattern, lambda_l, Fr)


def _pattern_coefficient(pattern: FlowPattern, lambda_l: float, Nlv: float,
                         Fr: float, uphill: bool) -> float:
    d, e, f, g = UPHILL_COEFFS[pattern] if uphill else DOWNHILL_COEFFS
    arg = d * lambda_l**e * Nlv**f * Fr**g
    if arg <= LOG_ARG_MIN:
        return 0.0
    return (1.0 - lambda_l) * math.log(arg)


def inclination_coefficient(pattern: FlowPattern, lambda_l: float, Nlv: float,
                            Fr: float, elevation: float,
                            bounds: Optional[RegimeBoundaries] = None) -> float:
    """
    Inclination coefficient C

    Zero for distributed flow and for horizontal pipe. A non-positive
    log argument gives C = 0 for that pattern.
    """
    if pattern is FlowPattern.DISTRIBUTED or elevation == 0:
        return 0.0

    uphill = elevation > 0
    if pattern is FlowPattern.TRANSITION:
        A = (bounds or regime_boundaries(lambda_l)).transition_weight(Fr)
        C_seg = _pattern_coefficient(FlowPattern.SEGREGATED, lambda_l, Nlv, Fr, uphill)
        C_int = _pattern_coefficient(FlowPattern.INTERMITTENT, lambda_l, Nlv, Fr, uphill)
        return A * C_seg + (1.0 - A) * C_int
    return _pattern_coefficient(pattern, lambda_l, Nlv, Fr, uphill)


def inclination_angle(elevation: float, length: float) -> float:
    """Pipe angle from horizontal (rad), positive uphill"""
    return math.asin(min(max(elevation / length, -1.0), 1.0))


def inclination_factor(C: float, theta: float) -> float:
    """Psi = 1 + C [sin(1.8 theta) - sin³(1.8 theta)/3]"""
    s = math.sin(1.8 * theta)
    return 1.0 + C * (s - s**3 / 3.0)


def friction_exponent(lambda_l: float, holdup: float) -> float:
    """
    Exponent S in f_tp / f_ns = e^S

    y = lambda / alpha²; the ln(2.2y - 1.2) form is used on 1 < y < 1.2
    where the general fit is singular.
    """
    y = lambda_l / holdup**2
    if 1.0 < y < 1.2:
        return math.log(2.2 * y - 1.2)

    ln_y = math.log(y)
    if abs(ln_y) < LOG_ARG_MIN:
        return 0.0
    return ln_y / (-0.0523 + 3.182 * ln_y - 0.8725 * ln_y**2 + 0.01853 * ln_y**4)


def liquid_velocity_number(Vsl: float, rho_l: float, sigma: float) -> float:
    """Nlv = Vsl (rho_l / (g sigma))^0.25"""
    return Vsl * (rho_l / (G * sigma))**0.25


def calc_beggs_brill(inputs: HydraulicInputs) -> HydraulicResult:
    """
    Beggs & Brill pressure drop over one pipe segment

    Elevation term uses the slip density rho_l alpha + rho_g (1 - alpha);
    friction term uses the no-slip density, as in the published method.

    Returns:
        HydraulicResult with holdup, slip mixture density, no-slip mixture
        viscosity and superficial velocities as diagnostics.

    Raises:
        InvalidInputError: a phase flow is missing or not positive, or a
                           phase density/viscosity or surface tension is
                           missing or not positive
    """
    require_phase_flows(inputs, strictly_positive=True)
    inputs.require_positive('liquid_density', 'liquid_viscosity',
                            'mix_gas_density', 'mix_gas_viscosity', 'surface_tension')

    rho_l, rho_g = inputs.liquid_density, inputs.mix_gas_density
    mu_l, mu_g = inputs.liquid_viscosity, inputs.mix_gas_viscosity
    D = inputs.diameter
    area = inputs.area

    # 1. Velocities and dimensionless groups
    Q_g = inputs.gas_mass_flow / rho_g
    Q_l = inputs.liquid_mass_flow / rho_l
    Vsl = Q_l / area
    Vsg = Q_g / area
    Vm = Vsl + Vsg
    lambda_l = Q_l / (Q_l + Q_g)
    Fr = Vm**2 / (G * D)

    # 2. Flow pattern
    bounds = regime_boundaries(lambda_l)
    pattern = classify_flow_pattern(lambda_l, Fr, bounds)

    # 3. Horizontal holdup
    alpha_0 = horizontal_holdup(pattern, lambda_l, Fr, bounds)

    # 4. Inclination correction
    Nlv = liquid_velocity_number(Vsl, rho_l, inputs.surface_tension)
    C = inclination_coefficient(pattern, lambda_l, Nlv, Fr, inputs.elevation, bounds)
    theta = inclination_angle(inputs.elevation, inputs.length)
    psi = inclination_factor(C, theta)

    holdup = min(max(alpha_0 * psi, HOLDUP_MIN), HOLDUP_MAX)

    # 5. Two-phase friction factor
    rho_ns = rho_l * lambda_l + rho_g * (1.0 - lambda_l)
    mu_ns = mu_l * lambda_l + mu_g * (1.0 - lambda_l)
    Re_ns = rho_ns * Vm * D / mu_ns
    f_ns = solve_colebrook(Re_ns, inputs.relative_roughness)
    f_tp = f_ns * math.exp(friction_exponent(lambda_l, holdup))

    # 6. Gradients
    rho_slip = rho_l * holdup + rho_g * (1.0 - holdup)
    dp_elevation = rho_slip * G * inputs.elevation
    dp_friction = f_tp * rho_ns * Vm**2 / (2.0 * D) * inputs.length
    dp_total = dp_elevation + dp_friction

    warnings = []
    if Fr > MIST_FROUDE and pattern is not FlowPattern.DISTRIBUTED:
        warnings.append("High Froude number suggests mist flow")
    if holdup > 0.95 and lambda_l < 0.5:
        warnings.append("Liquid accumulation predicted")

    return HydraulicResult(
        success=True,
        pressure_out=inputs.P_inlet - dp_total,
        pressure_drop=dp_total,
        dp_friction=dp_friction,
        dp_elevation=dp_elevation,
        velocity=Vm,
        reynolds=Re_ns,
        friction_factor=f_tp,
        flow_regime=pattern.value,
        liquid_holdup=holdup,
        mixture_density=rho_slip,
        mixture_viscosity=mu_ns,
        superficial_vel_gas=Vsg,
        superficial_vel_liq=Vsl,
        warnings=warnings,
    )


def froude_and_no_slip(inputs: HydraulicInputs) -> Tuple[float, float]:
    """(lambda_l, Fr) for an input set, for placing points on a pattern map"""
    require_phase_flows(inputs, strictly_positive=True)
    inputs.require_positive('liquid_density', 'mix_gas_density')
    Q_g = inputs.gas_mass_flow / inputs.mix_gas_density
    Q_l = inputs.liquid_mass_flow / inputs.liquid_density
    Vm = (Q_g + Q_l) / inputs.area
    return Q_l / (Q_l + Q_g), Vm**2 / (G * inputs.diameter)
