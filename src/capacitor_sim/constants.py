# MIT License (see LICENSE)
"""
Physical constants and fixed simulation parameters.

Physical values are in SI units. Floors and animation parameters are the
values the interactive model uses to keep its state physically valid.
"""
from __future__ import annotations

# Vacuum permittivity ε₀ in F/m (C²/(N·m²)).
# Rounded to three significant figures; readouts are shown to that precision.
EPSILON_0: float = 8.85e-12

# Number of visualized charge carriers travelling across the gap.
NUM_CARRIERS: int = 10

# Floors substituted for non-positive edits.
# Distance floors are expressed in the current display unit, side length in meters.
MIN_DISTANCE: float = 0.1
MIN_MAX_DISTANCE: float = 1.0
MIN_SIDE_LENGTH: float = 0.1

# Slider granularity for the plate distance, in the current display unit.
DISTANCE_STEP: float = 0.1

# Animation cadence: one tick every TICK_PERIOD seconds advances every
# carrier phase by PHASE_STEP (one full crossing takes 100 ticks = 5 s).
TICK_PERIOD: float = 0.05
PHASE_STEP: float = 0.01
