# MIT License (see LICENSE)
"""
Capacitor simulation session.

CapacitorSimulation is the object a presentation layer holds for the
lifetime of its view. It owns:
- The single SimulationState (user-editable values + carrier phases).
- The AnimationDriver that advances carriers on a fixed cadence.

Structure:
    - Host creates a CapacitorSimulation (optionally from a SimulationConfig).
    - Host calls start() when the view mounts and await stop() when it unmounts.
    - Input widgets forward raw edits to the set_* methods.
    - The view reads snapshot(), readout() and layout() whenever it redraws.
"""
from __future__ import annotations
import logging

import numpy as np

from .animation import AnimationDriver, TickCallback
from .config import SimulationConfig
from .core.electrostatics import DerivedReadout
from .renderer.layout import DEFAULT_VIEWPORT_WIDTH, Layout, compute_layout
from .state import SimulationState, StateSnapshot
from .units import Unit

logger = logging.getLogger(__name__)


class CapacitorSimulation:
    """
    Session facade over the state and the animation driver.

    Attributes:
        config: The configuration the session was created from.
        state: The authoritative SimulationState.
        driver: The AnimationDriver advancing carrier phases.
        viewport_width: Viewport width used by layout() (px).
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        rng: np.random.Generator | None = None,
        viewport_width: float = DEFAULT_VIEWPORT_WIDTH,
    ) -> None:
        self.config = config or SimulationConfig()
        self.state = SimulationState.from_config(self.config, rng=rng)
        self.driver = AnimationDriver(
            self.state, period=self.config.tick_period, step=self.config.phase_step
        )
        self.viewport_width = viewport_width
        logger.debug("Session created: %s", self.config)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin animating carriers (view mounted). Requires a running event loop."""
        self.driver.start()

    async def stop(self) -> None:
        """Halt the animation and release its scheduled tick (view unmounted)."""
        await self.driver.stop()

    @property
    def running(self) -> bool:
        return self.driver.running

    @property
    def ticks(self) -> int:
        return self.driver.ticks

    def on_tick(self, callback: TickCallback) -> None:
        """Register a redraw callback invoked after every animation tick."""
        self.driver.add_callback(callback)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def snapshot(self) -> StateSnapshot:
        return self.state.snapshot()

    def readout(self) -> DerivedReadout:
        """Derived quantities, recomputed from the current state on every call."""
        return self.state.readout()

    def layout(self) -> Layout:
        """Geometry for the current state, recomputed on every call."""
        s = self.state
        return compute_layout(
            s.distance,
            s.max_distance,
            s.carrier_phases,
            show_field_lines=s.show_field_lines,
            viewport_width=self.viewport_width,
        )

    def distance_range(self) -> tuple[float, float, float]:
        return self.state.distance_range()

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def set_voltage(self, value) -> bool:
        return self.state.set_voltage(value)

    def set_max_distance(self, value) -> bool:
        return self.state.set_max_distance(value)

    def set_distance(self, value) -> bool:
        return self.state.set_distance(value)

    def set_side_length(self, value) -> bool:
        return self.state.set_side_length(value)

    def set_unit(self, unit: Unit | str) -> bool:
        return self.state.set_unit(unit)

    def toggle_field_lines(self) -> bool:
        return self.state.toggle_field_lines()
