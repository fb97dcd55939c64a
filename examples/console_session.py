# examples/console_session.py
"""
Run a short animated session and print a text frame every 10 ticks.
Run:
  python examples/console_session.py
"""
import asyncio
import logging

from capacitor_sim import CapacitorSimulation, SimulationConfig
from capacitor_sim.logging_config import setup_logging
from capacitor_sim.renderer import DebugRenderer


async def main() -> None:
    setup_logging(logging.INFO)
    sim = CapacitorSimulation(SimulationConfig.from_env())
    renderer = DebugRenderer(verbose=False)

    def redraw(_state) -> None:
        if sim.ticks % 10 == 0:
            renderer.render(sim)

    sim.on_tick(redraw)

    sim.start()
    await asyncio.sleep(1.0)
    sim.set_distance(25)
    await asyncio.sleep(1.0)
    sim.set_unit("mm")
    sim.set_voltage(-5)
    await asyncio.sleep(1.0)
    await sim.stop()


if __name__ == "__main__":
    asyncio.run(main())
