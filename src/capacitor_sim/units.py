# MIT License (see LICENSE)
"""
Length unit conversion between display units and meters.

Plate distances are edited in a user-selected unit (cm, mm or nm) while all
physics is computed in meters. Conversions go through meters using fixed
scale factors, so `from_meters(to_meters(x, u), u) == x` up to rounding.

Example:
    to_meters(10, "cm")             # 0.1
    convert_unit(10, Unit.CM, "mm")  # 100.0
"""
from __future__ import annotations
from enum import Enum


class Unit(str, Enum):
    """Display unit for plate distances."""
    CM = "cm"
    MM = "mm"
    NM = "nm"

    @property
    def label(self) -> str:
        """Short label used in readouts ("cm", "mm", "nm")."""
        return self.value

    @property
    def meters(self) -> float:
        """Length of one unit in meters."""
        return METERS_PER_UNIT[self]


# Meters per one display unit.
METERS_PER_UNIT: dict[Unit, float] = {
    Unit.CM: 0.01,
    Unit.MM: 0.001,
    Unit.NM: 1e-9,
}


def parse_unit(unit: Unit | str) -> Unit:
    """
    Resolve a unit given as enum member or label.

    Raises:
        ValueError: If the label is not one of the supported units.
    """
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(str(unit).strip().lower())
    except ValueError:
        supported = ", ".join(u.value for u in Unit)
        raise ValueError(f"Unknown length unit: {unit!r} (supported: {supported})") from None


def to_meters(value: float, unit: Unit | str) -> float:
    """Convert a length expressed in `unit` to meters."""
    return float(value) * METERS_PER_UNIT[parse_unit(unit)]


def from_meters(value: float, unit: Unit | str) -> float:
    """Convert a length in meters to `unit`."""
    return float(value) / METERS_PER_UNIT[parse_unit(unit)]


def convert_unit(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """Re-express a length given in `from_unit` in `to_unit`, preserving its meter value."""
    return from_meters(to_meters(value, from_unit), to_unit)
