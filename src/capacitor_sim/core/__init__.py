# MIT License (see LICENSE)
"""
Core physics of the capacitor model.

This subpackage provides:
    - Electrostatics: plate area, field strength, capacitance, charge.
    - Invariants: validity checks for a SimulationState.

Typical usage:
    from capacitor_sim.core import compute_readout

    r = compute_readout(voltage=10.0, distance_m=0.1, side_length=10.0)
    r.capacitance  # 8.85e-09
"""
from .electrostatics import (
    DerivedReadout,
    plate_area,
    field_strength,
    capacitance,
    charge,
    compute_readout,
)

__all__ = [
    "DerivedReadout",
    "plate_area",
    "field_strength",
    "capacitance",
    "charge",
    "compute_readout",
]
