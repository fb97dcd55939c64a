# MIT License (see LICENSE)
"""
Renderer adapters for capacitor visualization.

This module provides an abstract base class for presenting a simulation and
a few concrete implementations. The core has no rendering dependency; a GUI
or web front end implements RendererAdapter and draws from the snapshot,
readout and layout it is handed.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..core.electrostatics import DerivedReadout
from ..state import StateSnapshot
from .layout import Layout

if TYPE_CHECKING:
    from ..simulation import CapacitorSimulation


def format_readout(snapshot: StateSnapshot, readout: DerivedReadout) -> list[str]:
    """
    Human-readable readout lines.

    Example:
        Distance between plates (d): 10.0 cm
        Electric Field: 100.00 V/m
        Capacitance: 8.850e-09 F
        Charge: 8.850e-08 C
        Plate Area: 100.000000 m²
    """
    return [
        f"Voltage (ΔV): {snapshot.voltage:g} V",
        f"Distance between plates (d): {snapshot.distance:.1f} {snapshot.unit.label}"
        f" (max {snapshot.max_distance:g} {snapshot.unit.label})",
        f"Plate Side Length: {snapshot.side_length:g} m",
        f"Electric Field: {readout.field_strength:.2f} V/m",
        f"Capacitance: {readout.capacitance:.3e} F",
        f"Charge: {readout.charge:.3e} C",
        f"Plate Area: {readout.plate_area:.6f} m²",
    ]


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.ticks)
        renderer.draw_readout(sim.snapshot(), sim.readout())
        renderer.draw_layout(sim.layout())
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(sim)
    """

    @abstractmethod
    def begin_frame(self, ticks: int) -> None:
        """
        Begin a new frame.

        Args:
            ticks: Number of animation ticks applied so far.
        """
        ...

    @abstractmethod
    def draw_readout(self, snapshot: StateSnapshot, readout: DerivedReadout) -> None:
        """Draw the numeric inputs and derived quantities."""
        ...

    @abstractmethod
    def draw_layout(self, layout: Layout) -> None:
        """Draw plates, field lines and carriers."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, simulation: "CapacitorSimulation") -> None:
        """Render one full frame of a simulation."""
        self.begin_frame(simulation.ticks)
        self.draw_readout(simulation.snapshot(), simulation.readout())
        self.draw_layout(simulation.layout())
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Frame tick=12 ===
        Voltage (ΔV): 10 V
        Distance between plates (d): 10.0 cm (max 50 cm)
        ...
        gap=136.0px (r=0.200) lines=5 carriers=10
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also print every carrier position.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, ticks: int) -> None:
        self.output.write(f"=== Frame tick={ticks} ===\n")

    def draw_readout(self, snapshot: StateSnapshot, readout: DerivedReadout) -> None:
        for line in format_readout(snapshot, readout):
            self.output.write(line + "\n")

    def draw_layout(self, layout: Layout) -> None:
        self.output.write(
            f"gap={layout.gap_width:.1f}px (r={layout.gap_ratio:.3f}) "
            f"lines={len(layout.field_line_y)} carriers={len(layout.carrier_xy)}\n"
        )
        if self.verbose:
            for i, (x, y) in enumerate(layout.carrier_xy):
                self.output.write(f"  [{i}] ({x:.1f}, {y:.1f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, useful as a placeholder or for timing without output."""

    def begin_frame(self, ticks: int) -> None:
        pass

    def draw_readout(self, snapshot: StateSnapshot, readout: DerivedReadout) -> None:
        pass

    def draw_layout(self, layout: Layout) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames as plain dicts for later inspection.

    Example:
        renderer = BufferedRenderer()
        sim.driver.add_callback(lambda _: renderer.render(sim))
        ...
        for frame in renderer.frames:
            print(frame["ticks"], frame["readout"]["capacitance"])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, ticks: int) -> None:
        self._current_frame = {"ticks": ticks}

    def draw_readout(self, snapshot: StateSnapshot, readout: DerivedReadout) -> None:
        if self._current_frame is None:
            return
        self._current_frame["state"] = {
            "voltage": snapshot.voltage,
            "distance": snapshot.distance,
            "max_distance": snapshot.max_distance,
            "side_length": snapshot.side_length,
            "unit": snapshot.unit.value,
            "show_field_lines": snapshot.show_field_lines,
        }
        self._current_frame["readout"] = {
            "field_strength": readout.field_strength,
            "capacitance": readout.capacitance,
            "charge": readout.charge,
            "plate_area": readout.plate_area,
        }

    def draw_layout(self, layout: Layout) -> None:
        if self._current_frame is None:
            return
        self._current_frame["layout"] = {
            "gap_ratio": layout.gap_ratio,
            "gap_width": layout.gap_width,
            "field_line_y": layout.field_line_y.tolist(),
            "carrier_xy": layout.carrier_xy.tolist(),
        }

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
