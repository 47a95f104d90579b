# File: pipe_hydraulics/models/calculator.py
"""
Dispatcher - selects a hydraulic model by calculation type
"""

from enum import Enum
from typing import Callable, Dict, List, Union

from ..core.data import HydraulicInputs, HydraulicResult, InvalidInputError
from .liquid import calc_liquid_pressure_drop
from .gas import calc_gas_pressure_drop
from .homogeneous import calc_homogeneous
from .beggs_brill import calc_beggs_brill


class CalculationType(str, Enum):
    GAS = "gas"
    LIQUID = "liquid"
    MIXED_BEGGS_BRILL = "mixed-beggs-brill"
    MIXED_HOMOGENEOUS = "mixed-homogeneous"


ModelFunction = Callable[[HydraulicInputs], HydraulicResult]

AVAILABLE_MODELS: Dict[str, ModelFunction] = {
    CalculationType.GAS.value: calc_gas_pressure_drop,
    CalculationType.LIQUID.value: calc_liquid_pressure_drop,
    CalculationType.MIXED_BEGGS_BRILL.value: calc_beggs_brill,
    CalculationType.MIXED_HOMOGENEOUS.value: calc_homogeneous,
}


def available_models() -> List[str]:
    """List available calculation types"""
    return list(AVAILABLE_MODELS.keys())


def get_model(calc_type: Union[str, CalculationType]) -> ModelFunction:
    """Model function for a calculation type"""
    key = calc_type.value if isinstance(calc_type, CalculationType) else calc_type
    if key not in AVAILABLE_MODELS:
        available = ', '.join(AVAILABLE_MODELS.keys())
        raise InvalidInputError(f"Model '{calc_type}' not available. Choose from: {available}")
    return AVAILABLE_MODELS[key]


def calculate_hydraulics(calc_type: Union[str, CalculationType],
                         inputs: HydraulicInputs) -> HydraulicResult:
    """
    Run one model on one pipe segment

    Args:
        calc_type: 'gas', 'liquid', 'mixed-beggs-brill' or 'mixed-homogeneous'
        inputs: HydraulicInputs in SI units

    Returns:
        HydraulicResult

    Example:
        >>> result = calculate_hydraulics("liquid", inputs)
        >>> print(result.summary())
    """
    return get_model(calc_type)(inputs)
