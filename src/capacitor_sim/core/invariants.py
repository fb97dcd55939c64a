# MIT License (see LICENSE)
"""
Checks for the invariants every SimulationState must satisfy.

Used by tests and available to hosts for debugging. A valid state has:
  0 < distance <= max_distance, side_length > 0, and all carrier phases
  in [0, 1).
"""
from __future__ import annotations
import math

import numpy as np

from ..state import SimulationState


def invariant_violations(state: SimulationState) -> list[str]:
    """
    List every invariant the state currently breaks.

    Returns:
        Human-readable descriptions; an empty list means the state is valid.
    """
    problems = []
    if not math.isfinite(state.voltage):
        problems.append(f"voltage is not finite: {state.voltage}")
    if not state.max_distance > 0:
        problems.append(f"max_distance must be > 0, got {state.max_distance}")
    if not 0 < state.distance <= state.max_distance:
        problems.append(
            f"distance must lie in (0, {state.max_distance}], got {state.distance}"
        )
    if not state.side_length > 0:
        problems.append(f"side_length must be > 0, got {state.side_length}")
    phases = np.asarray(state.carrier_phases)
    if phases.size and (np.any(phases < 0.0) or np.any(phases >= 1.0)):
        problems.append(f"carrier phases outside [0, 1): {phases.tolist()}")
    return problems


def is_valid(state: SimulationState) -> bool:
    """True if the state satisfies every invariant."""
    return not invariant_violations(state)
