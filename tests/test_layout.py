import numpy as np
import pytest
from capacitor_sim.renderer.layout import (
    compute_layout, gap_ratio, available_width, field_line_positions,
    PLATE_WIDTH, NUM_FIELD_LINES, CARRIER_MARGIN,
)


def test_gap_ratio():
    assert gap_ratio(10, 50) == pytest.approx(0.2)
    assert gap_ratio(50, 50) == 1.0
    assert 0 < gap_ratio(0.1, 50) <= 1
    with pytest.raises(ValueError):
        gap_ratio(1, 0)


def test_available_width():
    # Wide viewport: limited by the 800 px container minus both plates
    assert available_width(1920) == pytest.approx(680.0)
    # Narrow viewport: viewport minus plates and padding
    assert available_width(600) == pytest.approx(400.0)
    assert available_width(100) == 0.0


def test_gap_scales_with_ratio():
    half = compute_layout(25, 50, [], viewport_width=1920)
    full = compute_layout(50, 50, [], viewport_width=1920)
    assert full.gap_width == pytest.approx(680.0)
    assert half.gap_width == pytest.approx(340.0)


def test_plates_surround_gap():
    lay = compute_layout(10, 50, [], viewport_width=1280)
    assert lay.negative_plate_x - (lay.positive_plate_x + PLATE_WIDTH) == pytest.approx(lay.gap_width)
    assert (lay.positive_plate_x + PLATE_WIDTH + lay.negative_plate_x) / 2 == pytest.approx(lay.center_x)
    x0, x1 = lay.field_line_x
    assert x1 - x0 == pytest.approx(lay.gap_width)


def test_field_lines_evenly_spaced():
    ys = field_line_positions()
    assert len(ys) == NUM_FIELD_LINES
    np.testing.assert_allclose(np.diff(ys), 30.0)
    assert ys[0] == 30.0


def test_carrier_positions():
    phases = [0.0, 0.5, 0.99, 0.25, 0.1, 0.7]
    lay = compute_layout(50, 50, phases, viewport_width=1920)
    left = lay.center_x - lay.gap_width / 2
    xy = lay.carrier_xy
    assert xy.shape == (6, 2)
    assert xy[0, 0] == pytest.approx(left)
    assert xy[1, 0] == pytest.approx(left + 0.5 * (lay.gap_width - CARRIER_MARGIN))
    # carrier 5 wraps back onto the first field line
    assert xy[5, 1] == xy[0, 1] == 30.0
    assert xy[4, 1] == 150.0


def test_hidden_field_lines_hide_carriers():
    lay = compute_layout(10, 50, [0.1, 0.2], show_field_lines=False)
    assert lay.field_line_y.size == 0
    assert lay.carrier_xy.shape == (0, 2)
    assert lay.gap_width > 0


def test_layouts_compare_by_identity():
    a = compute_layout(10, 50, [0.1, 0.2])
    b = compute_layout(10, 50, [0.1, 0.2])
    assert a == a
    assert a != b
    np.testing.assert_allclose(a.carrier_xy, b.carrier_xy)
