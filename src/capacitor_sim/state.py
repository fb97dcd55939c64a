# MIT License (see LICENSE)
"""
Authoritative mutable state of a capacitor session.

SimulationState is the single record that both user-input handlers and the
animation driver write to. Every public mutation validates and clamps its
input before committing, so the invariants below hold after any call:

  - 0 < distance <= max_distance        (both in the current display unit)
  - side_length > 0                     (meters)
  - every carrier phase in [0, 1)

Setters never raise. Non-positive numbers are replaced by a floor value;
non-finite numbers (NaN from a failed parse, ±inf) and unknown units are
rejected and the previous value is kept. Each setter returns True when the
edit was committed and False when it was rejected.

User edits touch every field except `carrier_phases`; the animation driver
touches only `carrier_phases`. The two sources never write the same field.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from .config import SimulationConfig
from .constants import (
    DISTANCE_STEP,
    MIN_DISTANCE,
    MIN_MAX_DISTANCE,
    MIN_SIDE_LENGTH,
    NUM_CARRIERS,
)
from .core.electrostatics import DerivedReadout, compute_readout
from .units import Unit, convert_unit, parse_unit, to_meters
from .util import as_finite, f64, wrap_phases

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable copy of the state handed to presentation code."""
    voltage: float
    distance: float
    max_distance: float
    side_length: float
    unit: Unit
    show_field_lines: bool
    carrier_phases: tuple[float, ...]

    @property
    def distance_m(self) -> float:
        return to_meters(self.distance, self.unit)

    @property
    def max_distance_m(self) -> float:
        return to_meters(self.max_distance, self.unit)


@dataclass
class SimulationState:
    """
    Capacitor configuration plus animated carrier positions.

    Attributes:
        voltage: Signed potential difference in volts.
        distance: Plate separation in `unit`.
        max_distance: Upper bound for `distance`, in `unit`.
        side_length: Plate side length in meters.
        unit: Display unit of `distance` and `max_distance`.
        show_field_lines: Visualization toggle, no physical effect.
        carrier_phases: Normalized carrier positions across the gap, in [0, 1).

    Note:
        Prefer the set_* methods over assigning fields directly; only they
        enforce the invariants.
    """
    voltage: float = 10.0
    distance: float = 10.0
    max_distance: float = 50.0
    side_length: float = 10.0
    unit: Unit = Unit.CM
    show_field_lines: bool = True
    carrier_phases: np.ndarray = field(
        default_factory=lambda: np.zeros(NUM_CARRIERS, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.unit = parse_unit(self.unit)
        self.carrier_phases = wrap_phases(f64(self.carrier_phases))

    @classmethod
    def from_config(
        cls,
        config: SimulationConfig,
        rng: np.random.Generator | None = None,
    ) -> "SimulationState":
        """
        Create the initial session state.

        Carrier phases are drawn uniformly from [0, 1) using `rng`, or a
        generator seeded from `config.seed` when no generator is given.
        """
        if rng is None:
            rng = np.random.default_rng(config.seed)
        return cls(
            voltage=config.voltage,
            distance=config.distance,
            max_distance=config.max_distance,
            side_length=config.side_length,
            unit=config.unit,
            show_field_lines=config.show_field_lines,
            carrier_phases=rng.random(config.num_carriers),
        )

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def distance_m(self) -> float:
        """Plate separation in meters."""
        return to_meters(self.distance, self.unit)

    @property
    def max_distance_m(self) -> float:
        """Slider maximum in meters."""
        return to_meters(self.max_distance, self.unit)

    def readout(self) -> DerivedReadout:
        """Field, capacitance, charge and plate area for the current state."""
        return compute_readout(self.voltage, self.distance_m, self.side_length)

    def distance_range(self) -> tuple[float, float, float]:
        """Slider bounds (min, max, step) for the distance, in the current unit."""
        return (min(MIN_DISTANCE, self.max_distance), self.max_distance, DISTANCE_STEP)

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            voltage=self.voltage,
            distance=self.distance,
            max_distance=self.max_distance,
            side_length=self.side_length,
            unit=self.unit,
            show_field_lines=self.show_field_lines,
            carrier_phases=tuple(float(p) for p in self.carrier_phases),
        )

    # ------------------------------------------------------------------
    # User mutations
    # ------------------------------------------------------------------

    def set_voltage(self, value) -> bool:
        """Set the voltage. Any finite real is accepted, including zero and negatives."""
        v = as_finite(value)
        if v is None:
            logger.warning("Rejected voltage edit %r: not a finite number", value)
            return False
        self.voltage = v
        return True

    def set_max_distance(self, value) -> bool:
        """
        Set the slider maximum (in the current unit).

        Non-positive values are replaced by MIN_MAX_DISTANCE. If the current
        distance exceeds the new maximum it is pulled down to it.
        """
        v = as_finite(value)
        if v is None:
            logger.warning("Rejected max distance edit %r: not a finite number", value)
            return False
        if v <= 0:
            logger.debug("Max distance %s clamped to floor %s", v, MIN_MAX_DISTANCE)
            v = MIN_MAX_DISTANCE
        self.max_distance = v
        if self.distance > v:
            logger.debug("Distance %s clamped to new max distance %s", self.distance, v)
            self.distance = v
        return True

    def set_distance(self, value) -> bool:
        """
        Set the plate separation (in the current unit).

        Non-positive values are replaced by MIN_DISTANCE; the result is then
        capped at max_distance, so direct input and the slider agree.
        """
        v = as_finite(value)
        if v is None:
            logger.warning("Rejected distance edit %r: not a finite number", value)
            return False
        if v <= 0:
            logger.debug("Distance %s clamped to floor %s", v, MIN_DISTANCE)
            v = MIN_DISTANCE
        if v > self.max_distance:
            logger.debug("Distance %s capped at max distance %s", v, self.max_distance)
            v = self.max_distance
        self.distance = v
        return True

    def set_side_length(self, value) -> bool:
        """Set the plate side length in meters. Non-positive values become MIN_SIDE_LENGTH."""
        v = as_finite(value)
        if v is None:
            logger.warning("Rejected side length edit %r: not a finite number", value)
            return False
        if v <= 0:
            logger.debug("Side length %s clamped to floor %s", v, MIN_SIDE_LENGTH)
            v = MIN_SIDE_LENGTH
        self.side_length = v
        return True

    def set_unit(self, unit: Unit | str) -> bool:
        """
        Switch the display unit, re-expressing distance and max distance so
        their meter values do not change.
        """
        try:
            new_unit = parse_unit(unit)
        except ValueError as exc:
            logger.warning("Rejected unit edit: %s", exc)
            return False
        if new_unit is self.unit:
            return True
        old_unit = self.unit
        self.distance = convert_unit(self.distance, old_unit, new_unit)
        self.max_distance = convert_unit(self.max_distance, old_unit, new_unit)
        self.unit = new_unit
        logger.debug("Unit changed %s -> %s", old_unit.label, new_unit.label)
        return True

    def toggle_field_lines(self) -> bool:
        """Flip field-line visibility. Returns the new value."""
        self.show_field_lines = not self.show_field_lines
        return self.show_field_lines

    # ------------------------------------------------------------------
    # Animation mutation
    # ------------------------------------------------------------------

    def advance_carriers(self, step: float) -> None:
        """Advance every carrier phase by `step`, wrapping modulo 1."""
        self.carrier_phases = wrap_phases(self.carrier_phases + step)
