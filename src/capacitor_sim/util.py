# MIT License (see LICENSE)
"""
Small numeric helpers shared by the state, animation and layout code.
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def as_finite(value) -> float | None:
    """
    Coerce a raw edit value to float.

    Returns None for anything that is not a finite real number (NaN, ±inf,
    None, booleans, unparsable strings), which callers treat as "not a
    valid edit".
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(v):
        return None
    return v


def wrap_phases(phases: np.ndarray) -> np.ndarray:
    """
    Wrap phases into [0, 1).

    np.mod can return exactly 1.0 for tiny negative inputs due to rounding;
    those are folded back to 0.0.
    """
    out = np.mod(phases, 1.0)
    out[out >= 1.0] = 0.0
    return out
