#!/usr/bin/env python3
"""
Batch run for all line cases defined in data/example_cases.yml

This script:
  1. Loads all cases from the YAML file
  2. Fills fluid properties from CoolProp where a fluid is named
  3. Runs each case through its model and criteria check
  4. Prints a tabulated summary and saves it to CSV

Usage:
    python run_all.py
"""

import os
import sys
from dataclasses import replace

import yaml
import pandas as pd

# ---------------------------------------------------------------------------- #
# Ensure project root in path
# ---------------------------------------------------------------------------- #
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from pipe_hydraulics.core.data import HydraulicInputs
from pipe_hydraulics.core.thermodynamics import Fluid, gas_properties, liquid_properties
from pipe_hydraulics.models.calculator import calculate_hydraulics
from pipe_hydraulics.analysis.criteria import get_criteria, check_criteria

# ---------------------------------------------------------------------------- #
# Locate YAML file
# ---------------------------------------------------------------------------- #
DATA_FILE = os.path.join(ROOT, "pipe_hydraulics", "data", "example_cases.yml")

if not os.path.exists(DATA_FILE):
    raise FileNotFoundError(f"Data file not found: {DATA_FILE}")

with open(DATA_FILE, "r", encoding="utf-8") as f:
    cases = yaml.safe_load(f)

print("\n" + "=" * 90)
print(f" RUNNING {len(cases)} LINE CASES FROM {DATA_FILE}")
print("=" * 90)


def build_inputs(case):
    """HydraulicInputs for a case, with CoolProp properties if a fluid is named"""
    inputs = HydraulicInputs(**{k: float(v) for k, v in case["inputs"].items()})
    fluid_name = case.get("fluid")
    if fluid_name is None:
        return inputs

    fluid = Fluid(fluid_name)
    if case["model"] == "gas":
        props = gas_properties(fluid, inputs.P_inlet, inputs.T_inlet)
    else:
        props = liquid_properties(fluid, inputs.P_inlet, inputs.T_inlet)
    return replace(inputs, **props)


# ---------------------------------------------------------------------------- #
# Run each case and collect results
# ---------------------------------------------------------------------------- #
results = []

for case in cases:
    name = case.get("name", "Unnamed")

    try:
        inputs = build_inputs(case)
        print(f"\n--- Running case: {name} ({case['model']}) ---")
        result = calculate_hydraulics(case["model"], inputs)

        row = {
            "Name": name,
            "Model": case["model"],
            "OK": result.success,
            "Regime": result.flow_regime,
            "P_out(bar)": result.pressure_out / 1e5,
            "dP(bar)": result.pressure_drop / 1e5,
            "V(m/s)": result.velocity,
            "Re": result.reynolds,
            "f": result.friction_factor,
            "Holdup": result.liquid_holdup,
            "Criteria": "",
        }

        crit = case.get("criteria")
        if crit and result.success:
            check = check_criteria(
                get_criteria(crit["line_type"], crit["service"], crit.get("pressure_range")),
                inputs, result, nps=case.get("nps"),
            )
            row["Criteria"] = "pass" if check.is_within_limits else "; ".join(check.warnings)

        results.append(row)
        mark = "✓" if result.success else "✗"
        print(f"{mark} {name}: P_out={row['P_out(bar)']:.3f} bar(a), regime={result.flow_regime}")
        for w in result.warnings:
            print(f"   ! {w}")

    except Exception as e:
        print(f"✗ {name}: Error → {e}")

# ---------------------------------------------------------------------------- #
# Print summary table
# ---------------------------------------------------------------------------- #
print("\n" + "=" * 90)
print(" SUMMARY OF ALL CASES")
print("=" * 90)

if results:
    df = pd.DataFrame(results)
    print(df.to_string(index=False, justify="center", float_format=lambda x: f"{x:.4g}"))

    out_csv = os.path.join(ROOT, "pipe_hydraulics", "data", "results_summary.csv")
    df.to_csv(out_csv, index=False)
    print(f"\n✓ Results saved to: {out_csv}")
else:
    print("No successful runs found.")

print("=" * 90)
print("✓ BATCH EVALUATION COMPLETE")
print("=" * 90)
