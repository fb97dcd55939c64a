# examples/unit_switch.py
from capacitor_sim import CapacitorSimulation

sim = CapacitorSimulation()

for unit in ["cm", "mm", "nm", "cm"]:
    sim.set_unit(unit)
    s = sim.snapshot()
    r = sim.readout()
    print(f"{s.distance:g} {unit} = {s.distance_m:g} m  C={r.capacitance:.3e} F  E={r.field_strength:.2f} V/m")
