#!/usr/bin/env python3
"""
Run script for single pipe segments

Usage:
    $ python run.py

This script:
  1. Builds a water line, a gas line and a two-phase line
  2. Runs each through its model (and both two-phase models)
  3. Prints result summaries, a criteria check and a line sizing
  4. Plots the two-phase point on the Beggs & Brill flow pattern map
"""

import sys
import os
from dataclasses import replace

import matplotlib.pyplot as plt

# --------------------------------------------------------------------------- #
# Ensure project root is in path
# --------------------------------------------------------------------------- #
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


from pipe_hydraulics.core.data import HydraulicInputs
from pipe_hydraulics.core.pipes import inside_diameter, roughness
from pipe_hydraulics.core.thermodynamics import Fluid, gas_properties
from pipe_hydraulics.models.calculator import calculate_hydraulics
from pipe_hydraulics.analysis.criteria import get_criteria, check_criteria
from pipe_hydraulics.analysis.sizing import size_line, max_gas_flow
from pipe_hydraulics.visualization.plotting import plot_flow_pattern_map


# --------------------------------------------------------------------------- #
# Liquid line: 4" Sch 40 carbon steel, 20 m rise
# --------------------------------------------------------------------------- #
water = HydraulicInputs(
    length=100.0,                              # m
    diameter=inside_diameter("4", "40"),       # m
    P_inlet=5e5,                               # Pa
    T_inlet=293.15,                            # K
    elevation=20.0,                            # m
    roughness=roughness("Carbon Steel (New)"), # m
    mass_flow=20.0,                            # kg/s
    liquid_density=998.2,                      # kg/m³
    liquid_viscosity=1.002e-3,                 # Pa-s
)

print("\n" + "=" * 80)
print("  LIQUID LINE")
print("=" * 80 + "\n")

liquid_result = calculate_hydraulics("liquid", water)
print(liquid_result.summary())

criteria = get_criteria("liquid", "Cooling Water")
check = check_criteria(criteria, water, liquid_result, nps="4")
print(f"Criteria: {criteria.service}")
print(f"  Velocity limit:   {check.limit_velocity} m/s")
print(f"  Friction dP:      {check.dp_per_km:.3f} bar/km")
print(f"  Within limits:    {check.is_within_limits}")
for w in check.warnings:
    print(f"  ! {w}")

# --------------------------------------------------------------------------- #
# Gas line: methane, properties from CoolProp
# --------------------------------------------------------------------------- #
methane = Fluid("Methane")
gas = HydraulicInputs(
    length=1000.0,
    diameter=0.1,
    P_inlet=20e5,
    T_inlet=300.0,
    elevation=50.0,
    roughness=4.5e-5,
    mass_flow=5.0,
    **gas_properties(methane, 20e5, 300.0),
)

print("\n" + "=" * 80)
print("  GAS LINE (Methane)")
print("=" * 80 + "\n")

gas_result = calculate_hydraulics("gas", gas)
print(gas_result.summary())

capacity = max_gas_flow(gas, P_outlet_min=15e5)
print(f"Capacity at P_out >= 15 bar(a): {capacity:.3f} kg/s")

# --------------------------------------------------------------------------- #
# Two-phase line: both models on the same inputs
# --------------------------------------------------------------------------- #
wet = HydraulicInputs(
    length=500.0,
    diameter=0.1,
    P_inlet=20e5,
    T_inlet=300.0,
    elevation=10.0,
    gas_mass_flow=1.0,
    liquid_mass_flow=5.0,
    liquid_density=800.0,
    liquid_viscosity=2e-3,
    mix_gas_density=20.0,
    mix_gas_viscosity=1.5e-5,
    surface_tension=0.025,
)

print("\n" + "=" * 80)
print("  TWO-PHASE LINE")
print("=" * 80 + "\n")

for model in ("mixed-homogeneous", "mixed-beggs-brill"):
    print(f"--- {model} ---")
    print(calculate_hydraulics(model, wet).summary())

# --------------------------------------------------------------------------- #
# Sizing: smallest Sch 40 size for the two-phase line
# --------------------------------------------------------------------------- #
print("=" * 80)
print("  SIZING (Sch 40, mixed 'Continuous (P > 7 barg)')")
print("=" * 80 + "\n")

sized = size_line(
    "mixed-beggs-brill",
    wet,
    schedule="40",
    criteria=get_criteria("mixed", "Continuous (P > 7 barg)"),
)
if sized is None:
    print("No standard size meets the criteria")
else:
    print(f"Selected NPS {sized.nps} Sch {sized.schedule}: ID = {sized.diameter*1000:.1f} mm")
    print(f"  Velocity = {sized.result.velocity:.2f} m/s, "
          f"rho v² = {sized.check.rho_v2:.0f} kg/m·s²")

# --------------------------------------------------------------------------- #
# Flow pattern map
# --------------------------------------------------------------------------- #
points = [wet, replace(wet, diameter=0.05), replace(wet, diameter=0.2)]
fig, ax = plot_flow_pattern_map(points)
plt.show()

print("\n" + "=" * 80 + "\n")
