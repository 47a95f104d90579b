# File: pipe_hydraulics/analysis/sizing.py
"""
Line sizing and capacity tools built on the hydraulic models

- max_gas_flow: capacity of a gas line for a minimum delivery pressure
- size_line: smallest standard pipe meeting the limits
- sweep / elevation_profile: one input varied, results tabulated
"""

import warnings
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd
from scipy import optimize

from ..core.data import HydraulicInputs, HydraulicResult, InvalidInputError
from ..core.pipes import available_schedules, inside_diameter, nominal_sizes
from ..models.calculator import calculate_hydraulics
from ..models.gas import calc_gas_pressure_drop
from .criteria import CriteriaCheck, ServiceCriteria, check_criteria


MIN_TRIAL_FLOW = 1e-6         # kg/s
MAX_BRACKET_DOUBLINGS = 60


@dataclass
class SizingResult:
    """Selected line size and the calculation behind it"""
    nps: str
    schedule: str
    diameter: float                   # m
    result: HydraulicResult
    check: Optional[CriteriaCheck] = None


def max_gas_flow(inputs: HydraulicInputs, P_outlet_min: float) -> float:
    """
    Largest gas mass flow that still delivers P_outlet_min at the outlet

    Args:
        inputs: Gas-model inputs; mass_flow is only used as first bracket guess
        P_outlet_min: Required outlet pressure (Pa, absolute)

    Returns:
        float: Mass flow (kg/s)

    Raises:
        InvalidInputError: P_outlet_min cannot be met even at vanishing flow
    """
    def margin(m_dot: float) -> float:
        r = calc_gas_pressure_drop(replace(inputs, mass_flow=m_dot))
        return (r.pressure_out if r.success else 0.0) - P_outlet_min

    m_lo = MIN_TRIAL_FLOW
    if margin(m_lo) <= 0:
        raise InvalidInputError(
            f"Outlet pressure {P_outlet_min:.0f} Pa not reachable from inlet {inputs.P_inlet:.0f} Pa"
        )

    m_hi = max(inputs.mass_flow, 1.0)
    for _ in range(MAX_BRACKET_DOUBLINGS):
        if margin(m_hi) < 0:
            break
        m_lo, m_hi = m_hi, 2.0 * m_hi
    else:
        raise InvalidInputError("Could not bracket the line capacity")

    return optimize.brentq(margin, m_lo, m_hi, xtol=1e-9, rtol=1e-10)


def _meets_limits(result: HydraulicResult, check: Optional[CriteriaCheck],
                  length: float, max_velocity: Optional[float],
                  max_dp_per_km: Optional[float]) -> bool:
    if not result.success or result.pressure_out <= 0:
        return False
    if check is not None and not check.is_within_limits:
        return False
    if max_velocity is not None and result.velocity > max_velocity:
        return False
    if max_dp_per_km is not None and result.dp_friction / 1e5 / (length / 1000.0) > max_dp_per_km:
        return False
    return True


def size_line(calc_type: str, inputs: HydraulicInputs, schedule: str = "40",
              criteria: Optional[ServiceCriteria] = None,
              max_velocity: Optional[float] = None,
              max_dp_per_km: Optional[float] = None,
              sizes: Optional[Iterable[str]] = None) -> Optional[SizingResult]:
    """
    Smallest nominal size (ascending) that meets every given limit

    Args:
        calc_type: Calculation type for calculate_hydraulics
        inputs: Inputs; diameter is replaced by each candidate size
        schedule: Pipe schedule; sizes without it are skipped
        criteria: Optional service criteria to check against
        max_velocity: Optional velocity limit (m/s)
        max_dp_per_km: Optional friction gradient limit (bar/km)
        sizes: Candidate nominal sizes (default: all, ascending)

    Returns:
        SizingResult, or None if no candidate qualifies
    """
    for nps in (sizes if sizes is not None else nominal_sizes()):
        if schedule not in available_schedules(nps):
            continue

        D = inside_diameter(nps, schedule)
        trial = replace(inputs, diameter=D)
        result = calculate_hydraulics(calc_type, trial)
        check = check_criteria(criteria, trial, result, nps=nps) if criteria else None

        if _meets_limits(result, check, trial.length, max_velocity, max_dp_per_km):
            return SizingResult(nps=nps, schedule=schedule, diameter=D, result=result, check=check)

    return None


def sweep(calc_type: str, inputs: HydraulicInputs, name: str,
          values: Iterable[float]) -> pd.DataFrame:
    """
    Vary one HydraulicInputs field and tabulate the results

    Points with invalid inputs are skipped with a warning.

    Returns:
        DataFrame with one row per value: the swept value followed by the
        HydraulicResult fields
    """
    rows: List[dict] = []
    for value in values:
        try:
            result = calculate_hydraulics(calc_type, replace(inputs, **{name: float(value)}))
        except InvalidInputError as e:
            warnings.warn(f"Sweep point {name}={value} skipped: {e}")
            continue
        rows.append({name: float(value), **result.as_dict()})
    return pd.DataFrame(rows)


def elevation_profile(calc_type: str, inputs: HydraulicInputs,
                      elevations: Optional[Iterable[float]] = None,
                      n_points: int = 11) -> pd.DataFrame:
    """
    Outlet pressure and regime against net elevation change

    Default range is -L/10 to +L/10.
    """
    if elevations is None:
        elevations = np.linspace(-0.1 * inputs.length, 0.1 * inputs.length, n_points)
    return sweep(calc_type, inputs, 'elevation', elevations)
