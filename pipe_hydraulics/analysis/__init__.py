"""
Analysis tools built on the hydraulic models

Includes:
- Service criteria checks (API RP 14E)
- Line sizing and gas line capacity
- Parameter sweeps and elevation profiles
"""

from .criteria import (
    ServiceCriteria,
    CriteriaCheck,
    get_criteria,
    list_services,
    check_criteria,
    erosional_velocity,
)
from .sizing import (
    SizingResult,
    max_gas_flow,
    size_line,
    sweep,
    elevation_profile,
)

__all__ = [
    'ServiceCriteria',
    'CriteriaCheck',
    'get_criteria',
    'list_services',
    'check_criteria',
    'erosional_velocity',
    'SizingResult',
    'max_gas_flow',
    'size_line',
    'sweep',
    'elevation_profile',
]
