import math

import pytest

from chartkit.mathutil import (
    circle_point,
    degrees_add,
    degrees_to_compass,
    degrees_to_radians,
    get_round_to_for_delta,
    mean,
    mean_int,
    min_max,
    normalize,
    percent_difference,
    percent_to_radians,
    radian_add,
    radians_to_degrees,
    rotate_coordinate,
    round_down,
    round_places,
    round_up,
)


def test_min_max_of_values():
    assert min_max(3.0, -1.0, 7.5, 2.0) == (-1.0, 7.5)


def test_min_max_empty_is_zero():
    assert min_max() == (0.0, 0.0)


def test_degrees_to_radians_half_turn_is_pi():
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("degrees", [0.0, 45.0, 90.0, 270.0])
def test_degrees_radians_round_trip(degrees):
    assert radians_to_degrees(degrees_to_radians(degrees)) == pytest.approx(degrees)


def test_percent_to_radians_matches_degrees():
    assert percent_to_radians(0.5) == pytest.approx(degrees_to_radians(180.0))
    assert percent_to_radians(0.25) == pytest.approx(degrees_to_radians(90.0))


@pytest.mark.parametrize("base,delta", [(1.0, 0.5), (6.0, 1.0), (0.5, -2.0), (3.0, -0.5)])
def test_radian_add_stays_within_one_turn(base, delta):
    result = radian_add(base, delta)
    assert 0.0 <= result <= 2 * math.pi
    assert math.cos(result) == pytest.approx(math.cos(base + delta))


def test_degrees_add_wraps():
    assert degrees_add(350.0, 20.0) == pytest.approx(10.0)


@pytest.mark.parametrize("deg", [0.0, 45.0, 180.0, 300.0])
def test_degrees_to_compass_is_quarter_turn_back(deg):
    assert degrees_to_compass(deg) == degrees_add(deg, -90.0)


def test_circle_point_at_zero_is_straight_up():
    assert circle_point(10, 10, 5.0, 0.0) == (10, 5)


def test_rotate_coordinate_by_zero_is_identity():
    assert rotate_coordinate(3, 4, 10, -2, 0.0) == (10, -2)


def test_rotate_coordinate_full_turn_returns_near_start():
    x, y = rotate_coordinate(0, 0, 100, 50, 2 * math.pi)
    assert abs(x - 100) <= 1
    assert abs(y - 50) <= 1


@pytest.mark.parametrize("value,round_to", [(17.3, 5.0), (-17.3, 5.0), (0.123, 0.01)])
def test_round_up_and_down_bracket_value(value, round_to):
    up = round_up(value, round_to)
    down = round_down(value, round_to)
    assert down <= value <= up
    assert up - down <= round_to + 1e-9


def test_round_with_tiny_round_to_returns_value():
    assert round_up(1.2345, 0.0) == 1.2345
    assert round_down(1.2345, 0.0) == 1.2345


def test_normalize_worked_example():
    result = normalize(4, 3, 2, 1)
    assert result == pytest.approx([0.4, 0.3, 0.2, 0.1], abs=1e-3)
    assert sum(result) <= 1.0


def test_mean_of_equal_values():
    assert mean(2.5, 2.5, 2.5) == 2.5


def test_mean_of_nothing_is_nan():
    assert repr(mean()) == "nan"


def test_mean_int_of_equal_values():
    assert mean_int(4, 4, 4) == 4


def test_mean_int_empty_raises():
    with pytest.raises(ZeroDivisionError):
        mean_int()


def test_percent_difference():
    assert percent_difference(0.0, 5.0) == 0.0
    assert percent_difference(7.0, 7.0) == 0.0
    assert percent_difference(4.0, 8.0) == percent_difference(2.0, 4.0)


def test_get_round_to_for_delta_zero():
    assert get_round_to_for_delta(0.0) == 0.0


@pytest.mark.parametrize("delta", [0.5, 7.0, 1234.0, 98765.0])
def test_get_round_to_for_delta_is_power_of_ten_below_delta(delta):
    result = get_round_to_for_delta(delta)
    assert 0 < result < delta
    exponent = math.log10(result)
    assert exponent == pytest.approx(round(exponent))


def test_round_places_nan_is_zero():
    assert round_places(math.nan, 2) == 0.0


@pytest.mark.parametrize("value", [1.2345, 17.891, 0.005])
def test_round_places_is_symmetric_and_close(value):
    assert round_places(-value, 2) == -round_places(value, 2)
    assert abs(round_places(value, 2) - value) <= 0.005 + 1e-12