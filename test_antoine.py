import math

import pytest

from antoine import (Component, boiling_temperature, check_range,
                     saturation_pressure, vapor_pressure_curve)
from config import ATMOSPHERIC_PRESSURE, BENZENE, TOLUENE
from errors import DomainError, SingularityError


def test_saturation_pressure_formula():
    expected = math.exp(16.27 - 2817.29 / (221.37 + 100.0))
    assert saturation_pressure(BENZENE, 100.0) == pytest.approx(expected)


@pytest.mark.parametrize("component", [BENZENE, TOLUENE])
@pytest.mark.parametrize("fraction", [0.0, 0.25, 0.5, 0.9, 1.0])
def test_boiling_temperature_inverts_saturation_pressure(component, fraction):
    T = component.t_min + fraction * (component.t_max - component.t_min)
    P = saturation_pressure(component, T)
    assert boiling_temperature(component, P) == pytest.approx(T, abs=1e-8)


def test_benzene_boils_below_toluene_at_one_atmosphere():
    t_benzene = boiling_temperature(BENZENE, ATMOSPHERIC_PRESSURE)
    t_toluene = boiling_temperature(TOLUENE, ATMOSPHERIC_PRESSURE)
    assert 79 < t_benzene < 81
    assert 110 < t_toluene < 112


def test_out_of_range_is_extrapolated_not_fatal():
    assert check_range(BENZENE, 100.0) is None
    error = check_range(BENZENE, 200.0)
    assert isinstance(error, DomainError)
    assert error.temperature == 200.0

    assert saturation_pressure(BENZENE, 200.0) > saturation_pressure(BENZENE, 140.0)
    with pytest.raises(DomainError):
        saturation_pressure(BENZENE, 200.0, strict=True)


def test_domain_error_is_a_value_error():
    assert issubclass(DomainError, ValueError)


def test_singular_antoine_denominators():
    with pytest.raises(SingularityError):
        saturation_pressure(BENZENE, -BENZENE.c)
    with pytest.raises(SingularityError):
        boiling_temperature(BENZENE, math.exp(BENZENE.a))


def test_boiling_temperature_requires_positive_pressure():
    with pytest.raises(ValueError):
        boiling_temperature(BENZENE, 0.0)
    with pytest.raises(TypeError):
        boiling_temperature(BENZENE, "1013")


def test_component_validation():
    with pytest.raises(ValueError):
        Component("bad", 1.0, 1.0, 1.0, t_min=10.0, t_max=5.0)
    with pytest.raises(ValueError):
        Component("bad", float("nan"), 1.0, 1.0, t_min=0.0, t_max=5.0)


def test_vapor_pressure_curve_spans_valid_range():
    points = vapor_pressure_curve(TOLUENE, 11)
    assert len(points) == 11
    assert points[0].temperature == pytest.approx(TOLUENE.t_min)
    assert points[-1].temperature == pytest.approx(TOLUENE.t_max)
    assert all(p.in_range for p in points)
    pressures = [p.pressure for p in points]
    assert pressures == sorted(pressures)


def test_below_asymptote_is_singular_not_overflow():
    with pytest.raises(SingularityError):
        saturation_pressure(BENZENE, -222.0)
    with pytest.raises(SingularityError):
        saturation_pressure(BENZENE, -1000.0)


def test_no_boiling_point_above_exp_a():
    # ln(2e7) > A: the correlation never reaches this pressure
    with pytest.raises(SingularityError):
        boiling_temperature(BENZENE, 2e7)


def test_vapor_pressure_curve_skips_samples_below_asymptote():
    wide = Component("Wide benzene", BENZENE.a, BENZENE.b, BENZENE.c, t_min=-250.0, t_max=140.0)
    points = vapor_pressure_curve(wide, 101)
    assert 0 < len(points) < 101
    assert all(p.temperature > -wide.c for p in points)
    assert points[-1].temperature == pytest.approx(140.0)


def test_vapor_pressure_curve_marks_out_of_range_samples():
    points = vapor_pressure_curve(BENZENE, 11, t_low=0.0, t_high=150.0)
    assert [p.temperature for p in points][5] == pytest.approx(75.0)
    assert not points[0].in_range
    assert not points[-1].in_range
    assert all(p.in_range for p in points[1:-1])

    with pytest.raises(ValueError):
        vapor_pressure_curve(BENZENE, 11, t_low=50.0, t_high=50.0)
