"""
Microbenchmark: time per tick + readout + layout vs number of carriers.
Run:
  python benchmarks/bench_ticks.py
"""
import time

from capacitor_sim import CapacitorSimulation, SimulationConfig
from capacitor_sim.renderer import NullRenderer


def run(n: int, frames: int = 2000) -> float:
    sim = CapacitorSimulation(SimulationConfig(num_carriers=n, seed=12345))
    renderer = NullRenderer()

    # warmup
    for _ in range(50):
        sim.driver.tick()
        renderer.render(sim)

    t0 = time.perf_counter()
    for _ in range(frames):
        sim.driver.tick()
        renderer.render(sim)
    t1 = time.perf_counter()
    return (t1 - t0) / frames


if __name__ == "__main__":
    for n in [10, 100, 1000, 10000]:
        per_frame = run(n)
        print(f"N={n:6d}  frame={1e6*per_frame:9.2f} us  frames/s={1/per_frame:10.1f}")
