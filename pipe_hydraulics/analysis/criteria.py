# File: pipe_hydraulics/analysis/criteria.py
"""
Line sizing criteria checks

Velocity, momentum (rho v²), Mach and friction gradient limits per
service, plus the API RP 14E erosional velocity.

Data in pipe_hydraulics/data/service_criteria.yml
Reference: API RP 14E, Section 2.5
"""

import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional

import yaml

from ..core.data import HydraulicInputs, HydraulicResult, InvalidInputError
from ..core.pipes import DATA_DIR, nps_to_inches
from ..core.units import UNIT_CONVERSIONS
from ..models.gas import gas_density


CRITERIA_FILE = DATA_DIR / "service_criteria.yml"
LINE_TYPES = ('gas', 'liquid', 'mixed')
EROSIONAL_C = 100.0           # Continuous service, solids-free


@dataclass(frozen=True)
class ServiceCriteria:
    """
    Limits for one service; None means no limit

    Liquid velocity limits depend on line size and are held in
    velocity_bands keyed size2, size3_6, size8_12, size14_18, size20_plus.
    """
    line_type: str
    service: str
    pressure_range: str = "All"
    dp_bar_km: Optional[float] = None
    velocity: Optional[float] = None
    velocity_bands: Optional[Dict[str, float]] = None
    rho_v2: Optional[float] = None
    mach: Optional[float] = None
    note: str = ""

    def velocity_limit(self, nps: Optional[str] = None) -> Optional[float]:
        """Velocity limit (m/s); banded limits need the nominal size"""
        if self.velocity_bands is None:
            return self.velocity
        if nps is None:
            return None
        return self.velocity_bands[velocity_band(nps)]


@dataclass
class CriteriaCheck:
    """Result of checking one hydraulic result against a service"""
    criteria: ServiceCriteria
    rho_v2: float                     # kg/m-s²
    erosional_velocity: float         # m/s
    erosional_ratio: float
    dp_per_km: float                  # bar/km, friction component
    limit_velocity: Optional[float] = None
    limit_rho_v2: Optional[float] = None
    limit_mach: Optional[float] = None
    limit_dp_per_km: Optional[float] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def is_within_limits(self) -> bool:
        return not self.warnings


def velocity_band(nps: str) -> str:
    """Liquid velocity band key for a nominal pipe size"""
    size = nps_to_inches(nps)
    if size <= 2:
        return 'size2'
    if size <= 6:
        return 'size3_6'
    if size <= 12:
        return 'size8_12'
    if size <= 18:
        return 'size14_18'
    return 'size20_plus'


@lru_cache(maxsize=None)
def load_service_criteria() -> Dict[str, List[ServiceCriteria]]:
    """Load and cache service_criteria.yml"""
    with open(CRITERIA_FILE, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    table = {}
    for line_type in LINE_TYPES:
        entries = []
        for entry in raw[line_type]:
            entry = dict(entry)
            velocity = entry.pop('velocity', None)
            if isinstance(velocity, dict):
                entry['velocity_bands'] = velocity
            else:
                entry['velocity'] = velocity
            entries.append(ServiceCriteria(line_type=line_type, **entry))
        table[line_type] = entries
    return table


def list_services(line_type: str) -> List[str]:
    """Distinct service names for a line type, in file order"""
    if line_type not in LINE_TYPES:
        raise InvalidInputError(f"Unknown line type '{line_type}'. Use gas, liquid or mixed")
    seen = []
    for c in load_service_criteria()[line_type]:
        if c.service not in seen:
            seen.append(c.service)
    return seen


def get_criteria(line_type: str, service: str,
                 pressure_range: Optional[str] = None) -> ServiceCriteria:
    """
    Look up one service

    Args:
        line_type: 'gas', 'liquid' or 'mixed'
        service: e.g. 'Continuous', 'Pump Discharge (Pop < 35 barg)'
        pressure_range: Needed where a gas service has several ranges,
                        e.g. '7 to 35 barg'
    """
    if line_type not in LINE_TYPES:
        raise InvalidInputError(f"Unknown line type '{line_type}'. Use gas, liquid or mixed")

    matches = [c for c in load_service_criteria()[line_type] if c.service == service]
    if pressure_range is not None:
        matches = [c for c in matches if c.pressure_range == pressure_range]

    if not matches:
        raise InvalidInputError(
            f"Service '{service}' ({pressure_range or 'any range'}) not available for {line_type} lines"
        )
    if len(matches) > 1:
        ranges = ', '.join(c.pressure_range for c in matches)
        raise InvalidInputError(f"Service '{service}' needs a pressure range: {ranges}")
    return matches[0]


def erosional_velocity(density: float, c: float = EROSIONAL_C) -> float:
    """
    API RP 14E erosional velocity (m/s)

    Ve = C / sqrt(rho) with rho in lb/ft³ and Ve in ft/s.
    Returns 0 for non-positive density.
    """
    rho_lb_ft3 = density / UNIT_CONVERSIONS['density']['lb/ft³']
    if rho_lb_ft3 <= 0:
        return 0.0
    return c / math.sqrt(rho_lb_ft3) * UNIT_CONVERSIONS['length']['ft']


def _line_density(criteria: ServiceCriteria, inputs: HydraulicInputs,
                  result: HydraulicResult) -> float:
    if result.mixture_density is not None:
        return result.mixture_density
    if criteria.line_type == 'liquid' and inputs.liquid_density:
        return inputs.liquid_density
    if criteria.line_type == 'gas' and inputs.gas_mw:
        return gas_density(inputs.P_inlet, inputs.gas_mw, inputs.gas_z, inputs.T_inlet)
    raise InvalidInputError("Density needed for criteria check; pass density explicitly")


def check_criteria(criteria: ServiceCriteria, inputs: HydraulicInputs,
                   result: HydraulicResult, density: Optional[float] = None,
                   nps: Optional[str] = None) -> CriteriaCheck:
    """
    Check a hydraulic result against service limits

    Args:
        criteria: ServiceCriteria from get_criteria()
        inputs: The inputs the result was computed from
        result: HydraulicResult
        density: Density for rho v² (default: mixture density, liquid
                 density, or inlet gas density by line type)
        nps: Nominal pipe size, needed for banded liquid velocity limits

    Returns:
        CriteriaCheck; warnings lists every exceeded limit
    """
    rho = density if density is not None else _line_density(criteria, inputs, result)
    v = result.velocity
    rho_v2 = rho * v**2
    v_e = erosional_velocity(rho)
    dp_per_km = result.dp_friction / 1e5 / (inputs.length / 1000.0)

    check = CriteriaCheck(
        criteria=criteria,
        rho_v2=rho_v2,
        erosional_velocity=v_e,
        erosional_ratio=v / v_e if v_e > 0 else 0.0,
        dp_per_km=dp_per_km,
        limit_velocity=criteria.velocity_limit(nps),
        limit_rho_v2=criteria.rho_v2,
        limit_mach=criteria.mach,
        limit_dp_per_km=criteria.dp_bar_km,
    )

    if check.limit_velocity is not None and v > check.limit_velocity:
        check.warnings.append(f"Velocity ({v:.1f} m/s) exceeds limit ({check.limit_velocity} m/s)")

    if check.limit_rho_v2 is not None and rho_v2 > check.limit_rho_v2:
        check.warnings.append(f"Momentum ({rho_v2:.0f} kg/m·s²) exceeds limit ({check.limit_rho_v2})")

    if check.limit_mach is not None and result.mach_number is not None \
            and result.mach_number > check.limit_mach:
        check.warnings.append(
            f"Mach number ({result.mach_number:.3f}) exceeds limit ({check.limit_mach})"
        )

    if check.limit_dp_per_km is not None and dp_per_km > check.limit_dp_per_km:
        check.warnings.append(
            f"Pressure drop ({dp_per_km:.2f} bar/km) exceeds limit ({check.limit_dp_per_km} bar/km)"
        )

    if criteria.line_type == 'mixed' and check.erosional_ratio > 1.0:
        check.warnings.append(
            f"Velocity ({v:.1f} m/s) exceeds API RP 14E erosional velocity ({v_e:.1f} m/s)"
        )

    return check
