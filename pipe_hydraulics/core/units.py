# File: pipe_hydraulics/core/units.py
"""
Conversion factors to SI

Callers convert into the SI fields of HydraulicInputs before calling a
model and back to display units afterwards. Standard gas rates convert to
m³/s at their reference conditions; use standard_gas_to_mass_flow to get
the mass flow the gas model needs.
"""

from .data import InvalidInputError, P_ATM, R_UNIVERSAL


FT3 = 0.3048 ** 3            # Cubic foot (m³)

UNIT_CONVERSIONS = {
    'length': {'m': 1.0, 'km': 1000.0, 'mm': 0.001, 'ft': 0.3048, 'in': 0.0254, 'mi': 1609.34},
    'pressure': {'Pa': 1.0, 'kPa': 1000.0, 'bar': 1e5, 'MPa': 1e6, 'psi': 6894.76},
    'density': {'kg/m³': 1.0, 'lb/ft³': 16.0185, 'g/cm³': 1000.0},
    'viscosity': {'Pa·s': 1.0, 'cP': 0.001, 'mPa·s': 0.001},
    'volumetric_flow': {
        'm³/s': 1.0,
        'm³/h': 1 / 3600,
        'L/min': 1 / 60000,
        'L/s': 0.001,
        'gpm': 0.0000630902,
        'bbl/d': 0.00000184013,
    },
    'mass_flow': {'kg/s': 1.0, 'kg/h': 1 / 3600, 't/h': 1000 / 3600, 'lb/h': 0.45359237 / 3600},
    # Standard m³/s at the unit's reference conditions
    'standard_gas_flow': {
        'MMSCFD': 1e6 * FT3 / 86400,
        'Nm³/h': 1 / 3600,
        'Sm³/h': 1 / 3600,
        'SCFM': FT3 / 60,
    },
}

# Reference conditions for standard gas volumes (Pa, K)
STANDARD_CONDITIONS = {
    'Nm3': {'pressure': P_ATM, 'temperature': 273.15},    # 0 °C
    'Sm3': {'pressure': P_ATM, 'temperature': 288.15},    # 15 °C
    'SCF': {'pressure': P_ATM, 'temperature': 288.706},   # 60 °F
}

STANDARD_GAS_BASIS = {
    'MMSCFD': 'SCF',
    'Nm³/h': 'Nm3',
    'Sm³/h': 'Sm3',
    'SCFM': 'SCF',
}


def _factor(unit: str) -> float:
    for table in UNIT_CONVERSIONS.values():
        if unit in table:
            return table[unit]
    raise InvalidInputError(f"Unknown unit: '{unit}'")


def to_si(value: float, unit: str) -> float:
    """Convert value in unit to the SI base unit of its quantity"""
    return value * _factor(unit)


def from_si(value: float, unit: str) -> float:
    """Convert SI value to unit"""
    return value / _factor(unit)


def barg_to_pa(p_barg: float) -> float:
    """Gauge bar to absolute Pa"""
    return p_barg * 1e5 + P_ATM


def celsius_to_kelvin(t_c: float) -> float:
    """Degrees Celsius to Kelvin"""
    return t_c + 273.15


def standard_density(basis: str, mw: float) -> float:
    """
    Ideal-gas density at standard conditions

    Args:
        basis: Key of STANDARD_CONDITIONS ('Nm3', 'Sm3' or 'SCF')
        mw: Molecular weight (kg/kmol)

    Returns:
        Density (kg/m³), P_std * MW / (R * T_std)
    """
    if basis not in STANDARD_CONDITIONS:
        raise InvalidInputError(
            f"Standard basis '{basis}' not available. "
            f"Choose from: {list(STANDARD_CONDITIONS.keys())}"
        )
    if mw <= 0:
        raise InvalidInputError(f"Molecular weight must be positive, got {mw}")
    std = STANDARD_CONDITIONS[basis]
    return std['pressure'] * mw / (R_UNIVERSAL * std['temperature'])


def standard_gas_to_mass_flow(value: float, unit: str, mw: float) -> float:
    """
    Convert a standard gas rate to mass flow (kg/s)

    Example:
        >>> m = standard_gas_to_mass_flow(10.0, 'MMSCFD', 19.0)   # ~2.6 kg/s
    """
    if unit not in STANDARD_GAS_BASIS:
        raise InvalidInputError(
            f"Unit '{unit}' is not a standard gas rate. "
            f"Choose from: {list(STANDARD_GAS_BASIS.keys())}"
        )
    return to_si(value, unit) * standard_density(STANDARD_GAS_BASIS[unit], mw)
