"""
Hydraulic models for a single pipe segment

Includes:
- Liquid (Darcy-Weisbach)
- Gas (isothermal general flow equation)
- Two-phase homogeneous no-slip (screening)
- Two-phase Beggs & Brill
"""

from .liquid import calc_liquid_pressure_drop
from .gas import calc_gas_pressure_drop, gas_density
from .homogeneous import calc_homogeneous
from .beggs_brill import FlowPattern, calc_beggs_brill, classify_flow_pattern
from .calculator import (
    AVAILABLE_MODELS,
    CalculationType,
    available_models,
    get_model,
    calculate_hydraulics,
)

__all__ = [
    'calc_liquid_pressure_drop',
    'calc_gas_pressure_drop',
    'gas_density',
    'calc_homogeneous',
    'FlowPattern',
    'calc_beggs_brill',
    'classify_flow_pattern',
    'AVAILABLE_MODELS',
    'CalculationType',
    'available_models',
    'get_model',
    'calculate_hydraulics',
]
