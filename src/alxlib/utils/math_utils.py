"""
Mathematical utility functions for AlxLib.

Interpolation, easing, clamping and range mapping. None of these raise for
numeric input: out-of-range factors extrapolate and degenerate ranges fall
back to a step function.
"""

import math
from typing import Union

Number = Union[int, float]

PI = 3.1415926535897932384626433832795
SMALL_NUMBER = 1.e-8


def _pow(base: float, exp: float) -> float:
    # IEEE pow results where Python's math.pow raises
    odd = float(exp).is_integer() and exp % 2 == 1
    try:
        return math.pow(base, exp)
    except ValueError:
        if base != 0:
            return math.nan
        return math.copysign(math.inf, base) if odd else math.inf
    except OverflowError:
        return math.copysign(math.inf, base) if odd else math.inf


def lerp(a: Number, b: Number, alpha: Number) -> Number:
    """
    Linear interpolation between two values.

    Alpha is not bounded, values outside 0-1 extrapolate past a or b.

    Args:
        a: Start value
        b: End value
        alpha: Interpolation factor (0.0 = a, 1.0 = b)

    Returns:
        Interpolated value

    Example:
        >>> lerp(0.0, 10.0, 0.5)
        5.0
        >>> lerp(0.0, 10.0, 1.5)
        15.0
    """
    return a + alpha * (b - a)


def interp_ease_in(a: Number, b: Number, alpha: float, exp: float) -> float:
    """
    Interpolate with an ease-in curve (starts slow).

    Args:
        a: Start value
        b: End value
        alpha: Interpolation factor
        exp: Curve exponent (1.0 = linear, higher = slower start)

    Returns:
        Interpolated value

    Example:
        >>> interp_ease_in(0.0, 10.0, 0.5, 2.0)
        2.5
    """
    return lerp(a, b, _pow(alpha, exp))


def interp_ease_out(a: Number, b: Number, alpha: float, exp: float) -> float:
    """
    Interpolate with an ease-out curve (ends slow).

    Example:
        >>> interp_ease_out(0.0, 10.0, 0.5, 2.0)
        7.5
    """
    return lerp(a, b, 1.0 - _pow(1.0 - alpha, exp))


def interp_ease_in_out(a: Number, b: Number, alpha: float, exp: float) -> float:
    """
    Interpolate with an S-curve: ease-in up to the midpoint, ease-out after.

    The midpoint itself (alpha == 0.5) belongs to the ease-out half.

    Example:
        >>> interp_ease_in_out(0.0, 10.0, 0.25, 2.0)
        1.25
        >>> interp_ease_in_out(0.0, 10.0, 0.5, 2.0)
        5.0
    """
    if alpha < 0.5:
        modified = interp_ease_in(0.0, 1.0, alpha * 2.0, exp) * 0.5
    else:
        modified = interp_ease_out(0.0, 1.0, alpha * 2.0 - 1.0, exp) * 0.5 + 0.5
    return lerp(a, b, modified)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """
    Constrain a value to a range.

    The bounds are not reordered. With min_val > max_val any value
    at or above min_val yields max_val.

    Args:
        value: The value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        The clamped value

    Example:
        >>> clamp(1.5, 0.0, 1.0)
        1.0
        >>> clamp(-0.5, 0.0, 1.0)
        0.0
    """
    if value < min_val:
        return min_val
    return value if value < max_val else max_val


# Float wrappers

def f_lerp(a: float, b: float, alpha: float) -> float:
    return lerp(float(a), float(b), float(alpha))


def f_interp_ease_in(a: float, b: float, alpha: float, exp: float) -> float:
    return interp_ease_in(float(a), float(b), float(alpha), float(exp))


def f_interp_ease_out(a: float, b: float, alpha: float, exp: float) -> float:
    return interp_ease_out(float(a), float(b), float(alpha), float(exp))


def f_clamp(value: float, min_val: float, max_val: float) -> float:
    return clamp(float(value), float(min_val), float(max_val))


# Range mapping

def near_tolerance(value: float, tolerance: float = SMALL_NUMBER) -> bool:
    """Check if a value is within tolerance of zero."""
    return abs(value) <= tolerance


def get_range_alpha(min_value: float, max_value: float, value: float) -> float:
    """
    Find how far a value lies within a range.

    A range whose width is near zero cannot be divided by, so it
    collapses to a step at max_value.

    Args:
        min_value: Range start
        max_value: Range end
        value: The value to locate

    Returns:
        The range alpha (may be outside 0-1 if value is outside range)

    Example:
        >>> get_range_alpha(0.0, 10.0, 2.5)
        0.25
        >>> get_range_alpha(3.0, 3.0, 3.0)
        1.0
    """
    div = max_value - min_value
    if near_tolerance(div):
        return 1.0 if value >= max_value else 0.0
    return (value - min_value) / div


def get_mapped_value_unclamped(in_min: float, in_max: float,
                               out_min: float, out_max: float,
                               value: float) -> float:
    """
    Remap a value from one range to another, extrapolating outside it.

    Example:
        >>> get_mapped_value_unclamped(0.0, 10.0, 0.0, 1.0, 15.0)
        1.5
    """
    return f_lerp(out_min, out_max, get_range_alpha(in_min, in_max, value))


def get_mapped_value_clamped(in_min: float, in_max: float,
                             out_min: float, out_max: float,
                             value: float) -> float:
    """
    Remap a value from one range to another, staying inside the output range.

    Example:
        >>> get_mapped_value_clamped(0.0, 10.0, 0.0, 1.0, 15.0)
        1.0
        >>> get_mapped_value_clamped(0.0, 10.0, 0.0, 1.0, -5.0)
        0.0
    """
    clamped_alpha = f_clamp(get_range_alpha(in_min, in_max, value), 0.0, 1.0)
    return f_lerp(out_min, out_max, clamped_alpha)
