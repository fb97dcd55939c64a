# MIT License (see LICENSE)
"""
Visual mapping and rendering adapters.

This subpackage provides:
    - compute_layout / Layout: pixel geometry derived from distance,
      max distance and carrier phases.
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for timing.
    - BufferedRenderer: Records frames for playback or inspection.

The simulation core has no rendering dependency; these adapters are optional.

Typical usage:
    from capacitor_sim.renderer import DebugRenderer

    DebugRenderer().render(sim)
"""
from .layout import Layout, compute_layout, gap_ratio
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    format_readout,
)

__all__ = [
    # Layout
    "Layout",
    "compute_layout",
    "gap_ratio",
    # Renderers
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "format_readout",
]
