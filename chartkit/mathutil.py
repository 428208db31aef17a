"""Small numeric helpers used for chart geometry and value scaling."""

from __future__ import annotations

import math

_TWO_PI = 2 * math.pi
_DEG_TO_RAD = math.pi / 180.0
_RAD_TO_DEG = 180.0 / math.pi
_ROUND_TO_THRESHOLD = 0.000000000000001


def min_max(*args: float) -> tuple:
    """Return (minimum, maximum) of the values; (0.0, 0.0) when there are none."""
    if not args:
        return 0.0, 0.0
    return min(args), max(args)


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * _DEG_TO_RAD


def radians_to_degrees(value: float) -> float:
    """Convert radians to degrees, wrapping the input to one turn first."""
    return math.fmod(value, _TWO_PI) * _RAD_TO_DEG


def percent_to_radians(pct: float) -> float:
    """Convert a fraction of a full turn to radians."""
    return degrees_to_radians(360.0 * pct)


def radian_add(base: float, delta: float) -> float:
    """Add a delta to an angle in radians, wrapping into one turn."""
    value = base + delta
    if value > _TWO_PI:
        return math.fmod(value, _TWO_PI)
    if value < 0:
        return math.fmod(_TWO_PI + value, _TWO_PI)
    return value


def degrees_add(base_degrees: float, delta_degrees: float) -> float:
    """Add a delta to an angle in degrees, wrapping into one turn."""
    value = base_degrees + delta_degrees
    if value > _TWO_PI:
        return math.fmod(value, 360.0)
    if value < 0:
        return math.fmod(360.0 + value, 360.0)
    return value


def degrees_to_compass(deg: float) -> float:
    """Turn a mathematical angle into compass / clock orientation."""
    return degrees_add(deg, -90.0)


def circle_point(cx: int, cy: int, radius: float, theta_radians: float) -> tuple:
    """Absolute position of the point at theta on a circle around (cx, cy)."""
    x = cx + int(radius * math.sin(theta_radians))
    y = cy - int(radius * math.cos(theta_radians))
    return x, y


def rotate_coordinate(cx: int, cy: int, x: int, y: int, theta_radians: float) -> tuple:
    """Rotate (x, y) around (cx, cy) by theta radians."""
    dx, dy = float(x - cx), float(y - cy)
    cos_t, sin_t = math.cos(theta_radians), math.sin(theta_radians)
    rotated_x = dx * cos_t - dy * sin_t
    rotated_y = dx * sin_t + dy * cos_t
    return int(rotated_x) + cx, int(rotated_y) + cy


def _scaled(value: float, round_to: float, rounder) -> float:
    if round_to < _ROUND_TO_THRESHOLD:
        return value
    ratio = value / round_to
    if not math.isfinite(ratio):
        return ratio * round_to
    return rounder(ratio) * round_to


def round_up(value: float, round_to: float) -> float:
    """Round up to a multiple of round_to."""
    return _scaled(value, round_to, math.ceil)


def round_down(value: float, round_to: float) -> float:
    """Round down to a multiple of round_to."""
    return _scaled(value, round_to, math.floor)


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def normalize(*args: float) -> list:
    """Each value as its share of the total, rounded down to four places."""
    total = sum(args)
    return [round_down(_divide(v, total), 0.0001) for v in args]


def mean(*args: float) -> float:
    """Arithmetic mean; NaN when there are no values."""
    return _divide(sum(args), float(len(args)))


def mean_int(*args: int) -> int:
    """Integer mean, truncated toward zero."""
    if not args:
        raise ZeroDivisionError("mean of no values")
    total = sum(args)
    quotient = abs(total) // len(args)
    return quotient if total >= 0 else -quotient


def percent_difference(v1: float, v2: float) -> float:
    """(v2 - v1) / v1, or 0 when v1 is zero."""
    if v1 == 0:
        return 0.0
    return (v2 - v1) / v1


def get_round_to_for_delta(delta: float) -> float:
    """A power of ten suited to rounding values spread over delta."""
    cursor = math.pow(10.0, 10.0)
    while cursor > 0:
        if delta > cursor:
            return cursor / 10.0
        cursor /= 10.0
    return 0.0


def round_places(value: float, places: int) -> float:
    """Round half away from zero to the given number of decimal places."""
    if math.isnan(value):
        return 0.0
    sign = 1.0
    if value < 0:
        sign = -1.0
        value = -value
    precision = math.pow(10, places)
    digit = value * precision
    if math.isinf(digit):
        return digit / precision * sign
    fraction, _ = math.modf(digit)
    rounded = math.ceil(digit) if fraction >= 0.5 else math.floor(digit)
    return rounded / precision * sign