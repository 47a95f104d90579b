# File: pipe_hydraulics/core/__init__.py

"""
Core utilities for pipe hydraulics calculations

This module provides:
- Physical constants and the HydraulicInputs / HydraulicResult contracts
- Colebrook-White friction factor
- Fluid property lookups using CoolProp
- Pipe schedule, roughness and unit tables

Usage:
    from pipe_hydraulics.core import HydraulicInputs, Fluid, inside_diameter

    D = inside_diameter('4', '40')
    water = Fluid('Water')
    state = water.thermo_prop('PT', 5e5, 293.15)
"""

# ============================================================================
# Constants and data contracts - from data.py
# ============================================================================
from .data import (
    G,
    R_UNIVERSAL,
    P_ATM,
    InvalidInputError,
    HydraulicInputs,
    HydraulicResult,
)

# ============================================================================
# Correlations - from correlations.py
# ============================================================================
from .correlations import (
    haaland,
    solve_colebrook,
    colebrook_residual,
    reynolds_regime,
)

# ============================================================================
# Thermodynamics - from thermodynamics.py
# ============================================================================
from .thermodynamics import (
    FluidState,
    Fluid,
    ThermoException,
    gas_properties,
    liquid_properties,
    saturated_two_phase_properties,
)

# ============================================================================
# Pipe data and units - from pipes.py, units.py
# ============================================================================
from .pipes import (
    nominal_sizes,
    available_schedules,
    inside_diameter,
    roughness,
)
from .units import (
    UNIT_CONVERSIONS,
    to_si,
    from_si,
    barg_to_pa,
    celsius_to_kelvin,
    STANDARD_CONDITIONS,
    standard_density,
    standard_gas_to_mass_flow,
)

# ============================================================================
# Public API
# ============================================================================
__all__ = [
    # Constants
    'G',
    'R_UNIVERSAL',
    'P_ATM',

    # Data contracts
    'InvalidInputError',
    'HydraulicInputs',
    'HydraulicResult',

    # Correlations
    'haaland',
    'solve_colebrook',
    'colebrook_residual',
    'reynolds_regime',

    # Thermodynamics
    'FluidState',
    'Fluid',
    'ThermoException',
    'gas_properties',
    'liquid_properties',
    'saturated_two_phase_properties',

    # Pipe data
    'nominal_sizes',
    'available_schedules',
    'inside_diameter',
    'roughness',

    # Units
    'UNIT_CONVERSIONS',
    'to_si',
    'from_si',
    'barg_to_pa',
    'celsius_to_kelvin',
    'STANDARD_CONDITIONS',
    'standard_density',
    'standard_gas_to_mass_flow',
]

# ============================================================================
# Package metadata
# ============================================================================
__version__ = '0.1.0'
__description__ = 'Core utilities for pipe hydraulics'
