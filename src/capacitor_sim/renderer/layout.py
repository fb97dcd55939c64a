# MIT License (see LICENSE)
"""
Mapping from physical plate distance to on-screen geometry.

The view draws two plates facing each other inside a fixed-height container.
The physical distance is shown relative to the slider maximum:

  r         = distance / max_distance                      ∈ (0, 1]
  available = min(viewport - 2·(plate_width + padding),
                  max_width - 2·plate_width)
  gap       = available · r

Field lines are horizontal segments spanning the gap, evenly spaced
vertically. Carrier i sits on field line (i mod n_lines) and moves from the
positive plate to the negative plate as its phase goes from 0 to 1.

All positions are pixel offsets from the container's top-left corner. The
layout is a pure function of its inputs; nothing is cached.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from ..util import f64

# Container and plate geometry (px)
PLATE_WIDTH: float = 60.0
PLATE_HEIGHT: float = 190.0
CONTAINER_PADDING: float = 40.0
CONTAINER_HEIGHT: float = 200.0
MAX_CONTAINER_WIDTH: float = 800.0
DEFAULT_VIEWPORT_WIDTH: float = 1280.0

# Field lines and carriers (px)
NUM_FIELD_LINES: int = 5
FIELD_LINE_SPACING: float = 30.0
CARRIER_SIZE: float = 8.0
# Horizontal travel of a carrier is the gap minus this margin
CARRIER_MARGIN: float = 10.0


@dataclass(frozen=True, eq=False)
class Layout:
    """
    Layout-ready geometry for one frame.

    Attributes:
        gap_ratio: distance / max_distance, in (0, 1].
        gap_width: Horizontal gap between the plates in px.
        center_x: Horizontal center of the container in px.
        positive_plate_x: Left edge of the positive plate in px.
        negative_plate_x: Left edge of the negative plate in px.
        plate_top: Top edge of both plates in px.
        field_line_y: Vertical position of each field line, shape (n_lines,).
        carrier_xy: Carrier marker positions, shape (n_carriers, 2).
            Empty when field lines are hidden.
    """
    gap_ratio: float
    gap_width: float
    center_x: float
    positive_plate_x: float
    negative_plate_x: float
    plate_top: float
    field_line_y: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    carrier_xy: np.ndarray = field(default_factory=lambda: np.zeros((0, 2), dtype=np.float64))

    @property
    def field_line_x(self) -> tuple[float, float]:
        """Start and end x of every field line (they span the gap)."""
        return (self.center_x - self.gap_width / 2, self.center_x + self.gap_width / 2)


def gap_ratio(distance: float, max_distance: float) -> float:
    """
    Normalized gap r = distance / max_distance.

    Both arguments must be in the same unit. With a valid state the result is
    in (0, 1]; it is clipped to that range so a transiently inconsistent pair
    still produces drawable geometry.
    """
    if max_distance <= 0:
        raise ValueError(f"max_distance must be positive, got {max_distance}")
    r = float(distance) / float(max_distance)
    return float(min(max(r, 0.0), 1.0))


def available_width(viewport_width: float = DEFAULT_VIEWPORT_WIDTH) -> float:
    """Widest gap the container can show (gap at r = 1), in px."""
    return max(
        0.0,
        min(
            viewport_width - 2 * (PLATE_WIDTH + CONTAINER_PADDING),
            MAX_CONTAINER_WIDTH - 2 * PLATE_WIDTH,
        ),
    )


def field_line_positions(n_lines: int = NUM_FIELD_LINES) -> np.ndarray:
    """Vertical position of each field line: (i + 1) · spacing."""
    return FIELD_LINE_SPACING * np.arange(1, n_lines + 1, dtype=np.float64)


def carrier_positions(
    phases: Sequence[float] | np.ndarray,
    center_x: float,
    gap_width: float,
    n_lines: int = NUM_FIELD_LINES,
) -> np.ndarray:
    """
    Marker positions for each carrier, shape (n, 2) as (x, y).

    x interpolates across the gap by phase; y follows field line i mod n_lines.
    """
    p = f64(phases)
    idx = np.arange(p.shape[0])
    x = center_x - gap_width / 2 + (gap_width - CARRIER_MARGIN) * p
    y = FIELD_LINE_SPACING + (idx % n_lines) * FIELD_LINE_SPACING
    return np.column_stack([x, y.astype(np.float64)])


def compute_layout(
    distance: float,
    max_distance: float,
    carrier_phases: Sequence[float] | np.ndarray,
    show_field_lines: bool = True,
    viewport_width: float = DEFAULT_VIEWPORT_WIDTH,
) -> Layout:
    """
    Compute plate, field-line and carrier geometry for one frame.

    Args:
        distance: Plate separation (same unit as max_distance).
        max_distance: Slider maximum.
        carrier_phases: Carrier phases in [0, 1).
        show_field_lines: When False, no field lines or carriers are laid out.
        viewport_width: Width of the hosting viewport in px.
    """
    r = gap_ratio(distance, max_distance)
    gap = available_width(viewport_width) * r
    container_width = min(viewport_width - 2 * CONTAINER_PADDING, MAX_CONTAINER_WIDTH)
    center_x = max(container_width, 0.0) / 2

    if show_field_lines:
        lines_y = field_line_positions()
        carriers = carrier_positions(carrier_phases, center_x, gap)
    else:
        lines_y = np.zeros(0, dtype=np.float64)
        carriers = np.zeros((0, 2), dtype=np.float64)

    return Layout(
        gap_ratio=r,
        gap_width=gap,
        center_x=center_x,
        positive_plate_x=center_x - gap / 2 - PLATE_WIDTH,
        negative_plate_x=center_x + gap / 2,
        plate_top=(CONTAINER_HEIGHT - PLATE_HEIGHT) / 2,
        field_line_y=lines_y,
        carrier_xy=carriers,
    )
