# File: pipe_hydraulics/visualization/plotting.py
"""
Plots for two-phase flow pattern maps and line profiles
"""

from typing import Iterable, Optional, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
import pandas as pd

from ..core.data import HydraulicInputs
from ..models.beggs_brill import (
    FlowPattern,
    NO_SLIP_LARGE,
    NO_SLIP_SMALL,
    classify_flow_pattern,
    froude_and_no_slip,
    regime_boundaries,
)


PATTERN_COLORS = {
    FlowPattern.SEGREGATED: 'tab:blue',
    FlowPattern.TRANSITION: 'tab:orange',
    FlowPattern.INTERMITTENT: 'tab:green',
    FlowPattern.DISTRIBUTED: 'tab:red',
}

MapPoint = Union[HydraulicInputs, Tuple[float, float]]


def _boundary_curves(n: int = 200):
    """(lambda, L) arrays for each boundary over the range where it applies"""
    lam_all = np.logspace(-4, 0, n)
    lam_l1 = lam_all[lam_all < NO_SLIP_LARGE]
    lam_l23 = lam_all[lam_all >= NO_SLIP_SMALL]
    lam_l4 = lam_all[lam_all >= NO_SLIP_LARGE]

    return {
        'L1': (lam_l1, np.array([regime_boundaries(x).L1 for x in lam_l1])),
        'L2': (lam_l23, np.array([regime_boundaries(x).L2 for x in lam_l23])),
        'L3': (lam_l23, np.array([regime_boundaries(x).L3 for x in lam_l23])),
        'L4': (lam_l4, np.array([regime_boundaries(x).L4 for x in lam_l4])),
    }


def plot_flow_pattern_map(
    points: Optional[Iterable[MapPoint]] = None,
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[int, int] = (9, 7),
    save_path: Optional[str] = None
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Beggs & Brill horizontal flow pattern map (Fr against lambda_L, log-log)

    Parameters:
    -----------
    points : iterable, optional
        Operating points, each a HydraulicInputs with two-phase data or a
        (lambda_l, Fr) tuple. Points are coloured by predicted pattern.
    ax : Axes, optional
        Axes to draw on; a new figure is created if omitted
    figsize : tuple
        Figure size for a new figure
    save_path : str, optional
        Path to save figure

    Returns:
    --------
    fig, ax : Figure and Axes objects

    Example:
    --------
    >>> fig, ax = plot_flow_pattern_map([(0.1, 1.0), inputs])
    >>> plt.show()
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    for name, (lam, L) in _boundary_curves().items():
        ax.plot(lam, L, '-', linewidth=1.5, color='black', alpha=0.7)
        ax.annotate(name, (lam[-1], L[-1]), fontsize=9,
                    xytext=(4, 0), textcoords='offset points')

    labelled = set()
    for point in points or []:
        if isinstance(point, HydraulicInputs):
            lambda_l, Fr = froude_and_no_slip(point)
        else:
            lambda_l, Fr = point
        pattern = classify_flow_pattern(lambda_l, Fr)
        ax.scatter([lambda_l], [Fr], s=60, c=PATTERN_COLORS[pattern],
                   edgecolors='black', linewidth=0.5, zorder=5,
                   label=pattern.value if pattern not in labelled else None)
        labelled.add(pattern)

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlim(1e-4, 1.0)
    ax.set_ylim(1e-2, 1e4)
    ax.set_xlabel('No-slip liquid fraction, $\\lambda_L$ [-]', fontsize=12)
    ax.set_ylabel('Mixture Froude number, $Fr = V_m^2 / gD$ [-]', fontsize=12)
    ax.set_title('Beggs & Brill Flow Pattern Map', fontsize=13, fontweight='bold')
    ax.grid(True, which='both', alpha=0.3)
    if labelled:
        ax.legend(loc='best')

    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Figure saved to: {save_path}")

    return fig, ax


def plot_elevation_profile(
    profile: pd.DataFrame,
    figsize: Tuple[int, int] = (8, 6),
    save_path: Optional[str] = None
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Outlet pressure and its components against elevation change

    Parameters:
    -----------
    profile : DataFrame
        Output of analysis.sizing.elevation_profile()

    Returns:
    --------
    fig, ax : Figure and Axes objects
    """
    fig, ax = plt.subplots(figsize=figsize)

    if profile.empty:
        print("Warning: No points to plot")
        return fig, ax

    ok = profile[profile['success']]
    ax.plot(ok['elevation'], ok['pressure_out'] / 1e5, 'o-', linewidth=2, label='P_out')
    ax.plot(ok['elevation'], ok['dp_friction'] / 1e5, 's--', label='dP friction')
    ax.plot(ok['elevation'], ok['dp_elevation'] / 1e5, '^--', label='dP elevation')

    failed = profile[~profile['success']]
    if not failed.empty:
        ax.scatter(failed['elevation'], np.zeros(len(failed)), marker='x', s=80,
                   c='red', zorder=5, label='Choked / vacuum')

    ax.axhline(y=0, color='gray', linewidth=1)
    ax.set_xlabel('Elevation change, $\\Delta z$ [m]', fontsize=12)
    ax.set_ylabel('Pressure [bar]', fontsize=12)
    ax.set_title('Elevation Profile', fontsize=13, fontweight='bold')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')

    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Figure saved to: {save_path}")

    return fig, ax
