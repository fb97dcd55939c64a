# MIT License (see LICENSE)
"""
Session configuration.

SimulationConfig holds the defaults a new session starts from. The tick
period and the random seed for initial carrier phases can be overridden
through environment variables:

    CAPACITOR_SIM_TICK_PERIOD   seconds between animation ticks (float)
    CAPACITOR_SIM_SEED          integer seed for initial carrier phases
"""
from __future__ import annotations
import os
from dataclasses import dataclass, replace

from .constants import NUM_CARRIERS, PHASE_STEP, TICK_PERIOD
from .units import Unit, parse_unit
from .util import as_finite

ENV_TICK_PERIOD = "CAPACITOR_SIM_TICK_PERIOD"
ENV_SEED = "CAPACITOR_SIM_SEED"


@dataclass(frozen=True)
class SimulationConfig:
    """
    Initial values and animation parameters for a session.

    Attributes:
        voltage: Initial potential difference in volts.
        max_distance: Initial slider maximum, in `unit`.
        distance: Initial plate separation, in `unit`.
        side_length: Initial plate side length in meters.
        unit: Initial display unit for distances.
        show_field_lines: Whether field lines and carriers start visible.
        num_carriers: Number of animated charge carriers.
        tick_period: Seconds between animation ticks.
        phase_step: Phase increment applied to every carrier per tick.
        seed: Seed for the initial random carrier phases (None = nondeterministic).
    """
    voltage: float = 10.0
    max_distance: float = 50.0
    distance: float = 10.0
    side_length: float = 10.0
    unit: Unit | str = Unit.CM
    show_field_lines: bool = True
    num_carriers: int = NUM_CARRIERS
    tick_period: float = TICK_PERIOD
    phase_step: float = PHASE_STEP
    seed: int | None = None

    def __post_init__(self) -> None:
        """Normalize the unit and reject configurations the state could not hold."""
        object.__setattr__(self, "unit", parse_unit(self.unit))
        for name in ("voltage", "max_distance", "distance", "side_length", "tick_period", "phase_step"):
            value = as_finite(getattr(self, name))
            if value is None:
                raise ValueError(f"{name} must be a finite number, got {getattr(self, name)!r}")
            object.__setattr__(self, name, value)
        if self.max_distance <= 0:
            raise ValueError(f"max_distance must be positive, got {self.max_distance}")
        if not 0 < self.distance <= self.max_distance:
            raise ValueError(
                f"distance must lie in (0, max_distance={self.max_distance}], got {self.distance}"
            )
        if self.side_length <= 0:
            raise ValueError(f"side_length must be positive, got {self.side_length}")
        if self.num_carriers < 1:
            raise ValueError(f"num_carriers must be at least 1, got {self.num_carriers}")
        if self.tick_period <= 0:
            raise ValueError(f"tick_period must be positive, got {self.tick_period}")

    @classmethod
    def from_env(cls, **overrides) -> "SimulationConfig":
        """
        Build a config from defaults, environment variables and explicit overrides.

        Explicit keyword overrides win over the environment.
        """
        env: dict = {}
        period = os.environ.get(ENV_TICK_PERIOD)
        if period:
            env["tick_period"] = float(period)
        seed = os.environ.get(ENV_SEED)
        if seed:
            env["seed"] = int(seed)
        return replace(cls(), **{**env, **overrides})
