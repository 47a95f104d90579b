# File: pipe_hydraulics/__init__.py
"""
Steady-state pipe-flow hydraulics for process lines
"""

__version__ = "0.1.0"

from pipe_hydraulics.core.data import HydraulicInputs, HydraulicResult, InvalidInputError
from pipe_hydraulics.core.correlations import solve_colebrook
from pipe_hydraulics.core.thermodynamics import (
    FluidState,
    Fluid,
    ThermoException
)
from pipe_hydraulics.models.calculator import (
    CalculationType,
    available_models,
    calculate_hydraulics,
)

__all__ = [
    # Core
    "HydraulicInputs",
    "HydraulicResult",
    "InvalidInputError",

    # Thermodynamics
    "FluidState",
    "Fluid",
    "ThermoException",

    # Correlations
    "solve_colebrook",

    # Models
    "CalculationType",
    "available_models",
    "calculate_hydraulics",
]
