# MIT License (see LICENSE)
"""
Electrostatics of an ideal parallel-plate capacitor.

All functions are pure and take SI inputs (meters, volts). The model uses the
uniform-field approximation and ignores fringing at the plate edges:

  A = s²              (square plate of side s)
  E = V / d           (uniform field between the plates)
  C = ε₀ · A / d      (parallel-plate capacitance)
  Q = C · V           (stored charge on each plate)

Nothing here is cached: callers recompute a DerivedReadout from the current
state every time they need one.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from ..constants import EPSILON_0


@dataclass(frozen=True)
class DerivedReadout:
    """
    Quantities derived from the current capacitor configuration.

    Attributes:
        field_strength: Electric field between the plates in V/m.
        capacitance: Capacitance in farads.
        charge: Charge magnitude on each plate in coulombs (sign follows voltage).
        plate_area: Area of one plate in m².
    """
    field_strength: float
    capacitance: float
    charge: float
    plate_area: float


def _check_distance(distance_m: float) -> float:
    """Reject separations that would make E or C infinite or NaN."""
    d = float(distance_m)
    if not math.isfinite(d) or d <= 0.0:
        raise ValueError(f"Plate separation must be a positive finite length in meters, got {distance_m!r}")
    return d


def plate_area(side_length: float) -> float:
    """Area of a square plate with the given side length (m → m²)."""
    return float(side_length) ** 2


def field_strength(voltage: float, distance_m: float) -> float:
    """
    Uniform electric field E = V / d.

    Raises:
        ValueError: If distance_m is not a positive finite number.
    """
    return float(voltage) / _check_distance(distance_m)


def capacitance(side_length: float, distance_m: float, epsilon: float = EPSILON_0) -> float:
    """
    Parallel-plate capacitance C = ε · A / d.

    Raises:
        ValueError: If distance_m is not a positive finite number.
    """
    return epsilon * plate_area(side_length) / _check_distance(distance_m)


def charge(capacitance_f: float, voltage: float) -> float:
    """Stored charge Q = C · V."""
    return float(capacitance_f) * float(voltage)


def compute_readout(voltage: float, distance_m: float, side_length: float) -> DerivedReadout:
    """
    Compute every derived quantity for one configuration.

    Args:
        voltage: Potential difference across the plates in volts.
        distance_m: Plate separation in meters (> 0).
        side_length: Plate side length in meters.

    Returns:
        A fresh DerivedReadout.
    """
    c = capacitance(side_length, distance_m)
    return DerivedReadout(
        field_strength=field_strength(voltage, distance_m),
        capacitance=c,
        charge=charge(c, voltage),
        plate_area=plate_area(side_length),
    )
