# MIT License (see LICENSE)
"""
Fixed-cadence animation of the charge carriers.

The driver has two states:

    Idle  --start()-->  Running  --stop()-->  Idle

While Running, an asyncio task calls tick() and then sleeps for `period`
seconds, so ticks never overlap. Each tick adds `step` to every carrier
phase (mod 1). There is no drift correction and no catch-up: if the loop is
busy and a tick runs late, that time is simply lost.

tick() can also be called directly by a host loop that does its own
scheduling, or by tests.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Callable

from .constants import PHASE_STEP, TICK_PERIOD
from .state import SimulationState

logger = logging.getLogger(__name__)

TickCallback = Callable[[SimulationState], None]


class AnimationDriver:
    """
    Periodically advances `state.carrier_phases`.

    The driver only ever writes carrier phases; voltage, distance and the
    other user-controlled fields are left alone.

    Usage:
        driver = AnimationDriver(state)
        driver.start()          # inside a running event loop
        ...
        await driver.stop()
    """

    def __init__(
        self,
        state: SimulationState,
        period: float = TICK_PERIOD,
        step: float = PHASE_STEP,
    ) -> None:
        if period <= 0:
            raise ValueError(f"Tick period must be positive, got {period}")
        self.state = state
        self.period = float(period)
        self.step = float(step)
        self.ticks = 0
        self._task: asyncio.Task | None = None
        self._callbacks: list[TickCallback] = []

    @property
    def running(self) -> bool:
        """True while a tick task is scheduled."""
        return self._task is not None and not self._task.done()

    def add_callback(self, callback: TickCallback) -> None:
        """Register a function called with the state after every tick (e.g. a redraw)."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: TickCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def tick(self) -> None:
        """
        Advance every carrier by one step and notify callbacks.

        A callback that raises is logged and skipped; the animation keeps running.
        """
        self.state.advance_carriers(self.step)
        self.ticks += 1
        for cb in list(self._callbacks):
            try:
                cb(self.state)
            except Exception:
                logger.exception("Tick callback %r failed at tick %d", cb, self.ticks)

    async def _run(self) -> None:
        while True:
            self.tick()
            await asyncio.sleep(self.period)

    def start(self) -> None:
        """
        Idle -> Running. Schedules the tick task on the running event loop.

        Calling start() while already Running does nothing.

        Raises:
            RuntimeError: If no event loop is running.
        """
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Animation started (period=%.3fs, step=%.4f)", self.period, self.step)

    async def stop(self) -> None:
        """
        Running -> Idle. Cancels the scheduled tick and waits for it to finish.

        Calling stop() while Idle does nothing.
        """
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Animation stopped after %d ticks", self.ticks)
