# File: pipe_hydraulics/core/data.py
"""
Physical constants and the data contracts shared by every hydraulic model

HydraulicInputs describes one pipe segment and its flow (SI units).
HydraulicResult is what every model returns.
"""

import math
from dataclasses import dataclass, field, asdict
from typing import List, Optional


class InvalidInputError(ValueError):
    """Raised when a model is called with missing or invalid inputs"""
    pass


G = 9.80665                  # Gravity (m/s²)
R_UNIVERSAL = 8314.462618    # Universal gas constant (J/kmol-K)
P_ATM = 101325.0             # Standard atmosphere (Pa)


@dataclass(frozen=True)
class HydraulicInputs:
    """
    One pipe segment with fixed fluid properties at representative conditions

    Geometry is validated on construction. Fluid properties are optional
    here and checked by the model that needs them.

    Example:
        >>> inputs = HydraulicInputs(
        ...     length=100.0, diameter=0.1, P_inlet=5e5, T_inlet=293.15,
        ...     mass_flow=20.0, liquid_density=1000.0, liquid_viscosity=1e-3,
        ... )
    """
    # Geometry
    length: float                            # Pipe length (m)
    diameter: float                          # Inner diameter (m)

    # Upstream state
    P_inlet: float                           # Inlet absolute pressure (Pa)
    T_inlet: float                           # Inlet temperature (K)

    elevation: float = 0.0                   # z_out - z_in (m), positive = uphill
    roughness: float = 4.57e-5               # Absolute roughness (m)

    # Flow
    mass_flow: float = 0.0                   # Total mass flow (kg/s), single-phase models
    gas_mass_flow: Optional[float] = None    # Gas phase mass flow (kg/s), two-phase models
    liquid_mass_flow: Optional[float] = None # Liquid phase mass flow (kg/s), two-phase models

    # Liquid properties (liquid and two-phase models)
    liquid_density: Optional[float] = None   # kg/m³
    liquid_viscosity: Optional[float] = None # Pa-s

    # Gas properties (single-phase gas model)
    gas_mw: Optional[float] = None           # Molecular weight (kg/kmol)
    gas_z: float = 1.0                       # Compressibility factor
    gas_viscosity: Optional[float] = None    # Pa-s
    gas_k: float = 1.3                       # Cp/Cv

    # Two-phase gas properties at flowing conditions
    mix_gas_density: Optional[float] = None   # kg/m³
    mix_gas_viscosity: Optional[float] = None # Pa-s
    surface_tension: float = 0.072            # N/m

    def __post_init__(self):
        if not self.diameter > 0:
            raise InvalidInputError(f"Diameter must be positive, got {self.diameter}")
        if not self.length > 0:
            raise InvalidInputError(f"Pipe length must be positive, got {self.length}")
        if self.roughness < 0:
            raise InvalidInputError(f"Roughness must be non-negative, got {self.roughness}")

    @property
    def area(self) -> float:
        """Flow cross-section (m²)"""
        return math.pi * self.diameter**2 / 4.0

    @property
    def relative_roughness(self) -> float:
        """Absolute roughness over inner diameter"""
        return self.roughness / self.diameter

    def require_positive(self, *names: str):
        """
        Check that every named field is set and strictly positive

        Raises:
            InvalidInputError: naming the first field that fails
        """
        for name in names:
            value = getattr(self, name)
            if value is None:
                raise InvalidInputError(f"'{name}' is required for this calculation")
            if not value > 0:
                raise InvalidInputError(f"'{name}' must be positive, got {value}")


@dataclass(frozen=True)
class HydraulicResult:
    """
    Outcome of one hydraulic calculation

    success=False means the flow cannot be sustained (choked/vacuum),
    not that the inputs were bad.
    """
    success: bool
    pressure_out: float                      # Outlet absolute pressure (Pa)
    pressure_drop: float                     # Total pressure drop (Pa)
    dp_friction: float                       # Friction component (Pa)
    dp_elevation: float                      # Elevation component (Pa)
    velocity: float                          # Representative / mixture velocity (m/s)
    reynolds: float
    friction_factor: float                   # Darcy
    flow_regime: str
    dp_acceleration: float = 0.0             # Acceleration component (Pa)

    # Diagnostics
    mach_number: Optional[float] = None
    liquid_holdup: Optional[float] = None
    mixture_density: Optional[float] = None      # kg/m³
    mixture_viscosity: Optional[float] = None    # Pa-s
    superficial_vel_gas: Optional[float] = None  # m/s
    superficial_vel_liq: Optional[float] = None  # m/s

    warnings: List[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        """Flat dict, warnings joined into one string"""
        d = asdict(self)
        d['warnings'] = "; ".join(self.warnings)
        return d

    def summary(self) -> str:
        """Return formatted summary string."""
        lines = [
            f"Hydraulic Result ({'OK' if self.success else 'FAILED'}):",
            f"  Regime        = {self.flow_regime}",
            f"  P_out         = {self.pressure_out/1e5:.4f} bar(a)",
            f"  dP total      = {self.pressure_drop/1e5:.4f} bar",
            f"    friction    = {self.dp_friction/1e5:.4f} bar",
            f"    elevation   = {self.dp_elevation/1e5:.4f} bar",
            f"  Velocity      = {self.velocity:.3f} m/s",
            f"  Re            = {self.reynolds:.4g}",
            f"  f (Darcy)     = {self.friction_factor:.5f}",
        ]
        if self.mach_number is not None:
            lines.append(f"  Mach          = {self.mach_number:.4f}")
        if self.liquid_holdup is not None:
            lines.append(f"  Holdup        = {self.liquid_holdup:.4f}")
        if self.mixture_density is not None:
            lines.append(f"  rho_mix       = {self.mixture_density:.3f} kg/m³")
        for w in self.warnings:
            lines.append(f"  ! {w}")
        return "\n".join(lines) + "\n"
