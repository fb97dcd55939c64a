import pytest
from capacitor_sim.units import Unit, to_meters, from_meters, convert_unit, parse_unit

UNITS = ["cm", "mm", "nm"]


def test_scale_factors():
    assert to_meters(1, "cm") == pytest.approx(0.01)
    assert to_meters(1, Unit.MM) == pytest.approx(0.001)
    assert to_meters(1, Unit.NM) == pytest.approx(1e-9)
    assert from_meters(0.1, "cm") == pytest.approx(10.0)


@pytest.mark.parametrize("u1", UNITS)
@pytest.mark.parametrize("u2", UNITS)
@pytest.mark.parametrize("v", [10.0, 0.37, 123456.0, -2.5])
def test_convert_round_trip(v, u1, u2):
    """convert(convert(v, u1, u2), u2, u1) == v within rounding."""
    back = convert_unit(convert_unit(v, u1, u2), u2, u1)
    assert back == pytest.approx(v, rel=1e-12)


def test_convert_preserves_meters():
    mm = convert_unit(10, "cm", "mm")
    assert mm == pytest.approx(100.0)
    assert to_meters(mm, "mm") == pytest.approx(to_meters(10, "cm"))
    assert convert_unit(1, "mm", "nm") == pytest.approx(1e6)


def test_non_positive_values_are_converted():
    assert to_meters(0, "cm") == 0.0
    assert to_meters(-5, "mm") == pytest.approx(-0.005)


def test_parse_unit():
    assert parse_unit("CM") is Unit.CM
    assert parse_unit(" nm ") is Unit.NM
    assert parse_unit(Unit.MM) is Unit.MM
    assert Unit.CM.label == "cm"
    assert Unit.NM.meters == 1e-9
    with pytest.raises(ValueError):
        parse_unit("inch")
