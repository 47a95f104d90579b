# File: pipe_hydraulics/core/thermodynamics.py
"""
Fluid property lookups using CoolProp

Fills the fluid-property fields of HydraulicInputs from a named fluid
at representative line conditions.
"""

import math
from dataclasses import dataclass, field
import CoolProp.CoolProp as CP


class ThermoException(Exception):
    """Exception raised when thermodynamic property calculation fails"""
    pass


@dataclass(frozen=True)
class FluidState:
    """
    Thermodynamic state properties needed for line hydraulics
    """
    P: float = math.nan      # Pressure (Pa)
    T: float = math.nan      # Temperature (K)
    D: float = math.nan      # Density (kg/m³)
    V: float = math.nan      # Dynamic viscosity (Pa-s)
    Z: float = math.nan      # Compressibility factor
    MW: float = math.nan     # Molecular weight (kg/kmol)
    cp: float = math.nan     # Specific heat for constant pressure mass based
    cv: float = math.nan     # Specific heat for constant volume mass based
    sigma: float = math.nan  # Surface tension (N/m), saturated states only
    phase: str = ""          # Phase description
    fluid: 'Fluid' = field(default=None, repr=False)

    @property
    def is_valid(self) -> bool:
        """Check if state has valid pressure"""
        return not math.isnan(self.P)

    @property
    def k(self) -> float:
        """Isentropic exponent cp/cv"""
        return self.cp / self.cv

    def is_two_phase(self) -> bool:
        return self.phase.lower() == 'twophase'


class Fluid:
    """
    Fluid property calculator using CoolProp
    """

    def __init__(self, fluid_name: str = "Water"):
        """
        Args:
            fluid_name: CoolProp fluid identifier (e.g., "Water", "Methane", "Air")
        """
        self.name = fluid_name

        try:
            self.MW = CP.PropsSI('M', fluid_name) * 1000.0   # kg/mol -> kg/kmol
        except ValueError:
            raise ValueError(f"Fluid '{fluid_name}' not available in CoolProp")

    def _props(self, key1: str, val1: float, key2: str, val2: float, outputs: dict) -> dict:
        return {
            name: CP.PropsSI(out, key1, val1, key2, val2, self.name)
            for name, out in outputs.items()
        }

    def thermo_prop(self, mode: str, val1: float, val2: float) -> FluidState:
        """
        Calculate thermodynamic properties

        Args:
            mode: "PT" (single phase) or "TQ" (saturated, Q=0 liquid, Q=1 vapour)
            val1: First property value
            val2: Second property value

        Returns:
            FluidState object

        Example:
            >>> water = Fluid("Water")
            >>> state = water.thermo_prop("PT", 5e5, 300)
        """
        try:
            if mode == "PT":
                P, T = val1, val2
                return FluidState(
                    P=P,
                    T=T,
                    MW=self.MW,
                    phase=CP.PhaseSI('P', P, 'T', T, self.name),
                    fluid=self,
                    **self._props('P', P, 'T', T, {
                        'D': 'D', 'V': 'V', 'Z': 'Z', 'cp': 'Cpmass', 'cv': 'Cvmass',
                    }),
                )

            elif mode == "TQ":
                T, Q = val1, val2
                return FluidState(
                    P=CP.PropsSI('P', 'T', T, 'Q', Q, self.name),
                    T=T,
                    MW=self.MW,
                    sigma=CP.PropsSI('I', 'T', T, 'Q', Q, self.name),
                    phase="twophase",
                    fluid=self,
                    **self._props('T', T, 'Q', Q, {'D': 'D', 'V': 'V'}),
                )

            else:
                raise ValueError(f"Unknown mode: {mode}. Use PT or TQ")

        except Exception as e:
            raise ThermoException(f"Property calculation failed for {mode}({val1}, {val2}): {e}")


def gas_properties(fluid: Fluid, P: float, T: float) -> dict:
    """
    Gas-model fields of HydraulicInputs at (P, T)

    Use with dataclasses.replace(inputs, **gas_properties(fluid, P, T)).
    """
    state = fluid.thermo_prop("PT", P, T)
    return {
        'gas_mw': state.MW,
        'gas_z': state.Z,
        'gas_viscosity': state.V,
        'gas_k': state.k,
    }


def liquid_properties(fluid: Fluid, P: float, T: float) -> dict:
    """Liquid-model fields of HydraulicInputs at (P, T)"""
    state = fluid.thermo_prop("PT", P, T)
    return {
        'liquid_density': state.D,
        'liquid_viscosity': state.V,
    }


def saturated_two_phase_properties(fluid: Fluid, T: float) -> dict:
    """
    Two-phase fields of HydraulicInputs for a saturated fluid at T

    Liquid from Q=0, gas from Q=1, surface tension from the liquid side.
    """
    liq = fluid.thermo_prop("TQ", T, 0.0)
    vap = fluid.thermo_prop("TQ", T, 1.0)
    return {
        'liquid_density': liq.D,
        'liquid_viscosity': liq.V,
        'mix_gas_density': vap.D,
        'mix_gas_viscosity': vap.V,
        'surface_tension': liq.sigma,
    }
