# MIT License (see LICENSE)
"""
capacitor_sim - An interactive parallel-plate capacitor model.

This package provides the state and physics behind a live capacitor
visualization: plate distance and voltage edits, derived field/capacitance/
charge readouts, animated charge carriers and the geometry a view draws.

Main entry points:
    - CapacitorSimulation: A session owning the state and the animation driver.
    - SimulationState: The validated, clamped mutable state.
    - SimulationConfig: Initial values and animation parameters.
    - Unit: Display units for plate distance (cm, mm, nm).

Submodules:
    - core: Electrostatics formulas and state invariants.
    - renderer: Visual mapping and optional rendering adapters.
    - units: Length unit conversion.
    - animation: Fixed-cadence carrier animation.

Example:
    from capacitor_sim import CapacitorSimulation

    sim = CapacitorSimulation()
    sim.set_distance(20)
    sim.readout().capacitance
"""
from .config import SimulationConfig
from .units import Unit, to_meters, from_meters, convert_unit
from .state import SimulationState, StateSnapshot
from .animation import AnimationDriver
from .simulation import CapacitorSimulation
from .core.electrostatics import DerivedReadout

__all__ = [
    # Session
    "CapacitorSimulation",
    "SimulationConfig",
    "SimulationState",
    "StateSnapshot",
    "AnimationDriver",
    "DerivedReadout",
    # Units
    "Unit",
    "to_meters",
    "from_meters",
    "convert_unit",
]
