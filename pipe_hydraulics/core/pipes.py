# File: pipe_hydraulics/core/pipes.py
"""
Pipe schedule and roughness tables

Data in pipe_hydraulics/data/pipe_data.yml (ASME B36.10M / B36.19M).
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml

from .data import InvalidInputError


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
PIPE_DATA_FILE = DATA_DIR / "pipe_data.yml"


@lru_cache(maxsize=None)
def load_pipe_data() -> dict:
    """Load and cache pipe_data.yml"""
    with open(PIPE_DATA_FILE, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    # YAML may read bare schedule numbers as ints
    data['schedule_order'] = [str(s) for s in data['schedule_order']]
    data['inside_diameter_mm'] = {
        str(nps): {str(sch): float(d) for sch, d in table.items()}
        for nps, table in data['inside_diameter_mm'].items()
    }
    return data


def nps_to_inches(nps: str) -> float:
    """'1-1/2' -> 1.5, '3/4' -> 0.75, '10' -> 10.0"""
    whole, _, frac = nps.partition("-")
    if "/" in whole:
        whole, frac = "0", whole
    value = float(whole)
    if frac:
        num, den = frac.split("/")
        value += float(num) / float(den)
    return value


def nominal_sizes() -> List[str]:
    """Nominal pipe sizes in ascending order"""
    return sorted(load_pipe_data()['inside_diameter_mm'], key=nps_to_inches)


def available_schedules(nps: str) -> List[str]:
    """Schedules listed for a size, in conventional order"""
    table = load_pipe_data()['inside_diameter_mm'].get(nps)
    if table is None:
        raise InvalidInputError(f"Unknown nominal pipe size: '{nps}'")
    return [s for s in load_pipe_data()['schedule_order'] if s in table]


def inside_diameter(nps: str, schedule: str = "40") -> float:
    """
    Inside diameter in metres

    Args:
        nps: Nominal pipe size, e.g. '4', '1-1/2'
        schedule: e.g. '40', 'STD', '80s'
    """
    table = load_pipe_data()['inside_diameter_mm'].get(nps)
    if table is None:
        raise InvalidInputError(f"Unknown nominal pipe size: '{nps}'")
    if schedule not in table:
        raise InvalidInputError(
            f"Schedule '{schedule}' not available for NPS {nps}. "
            f"Choose from: {', '.join(available_schedules(nps))}"
        )
    return table[schedule] * 0.001


def roughness(material: str, custom_mm: Optional[float] = None) -> float:
    """
    Absolute roughness in metres

    'Custom' uses custom_mm, which must then be given.
    """
    if material == "Custom":
        if custom_mm is None or custom_mm < 0:
            raise InvalidInputError("Custom material needs a non-negative roughness in mm")
        return custom_mm * 0.001

    table = load_pipe_data()['roughness_mm']
    if material not in table:
        raise InvalidInputError(
            f"Material '{material}' not available. Choose from: {', '.join(table)}"
        )
    return float(table[material]) * 0.001
