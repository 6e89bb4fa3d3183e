"""Floating-point operations with IEEE results instead of Python exceptions."""

from __future__ import annotations

import math
from typing import Callable

PI = 3.141592653589793
E = 2.718281828459045
TAU = 6.283185307179586

_NAN = math.nan
_INF = math.inf


def _nan_on_domain_error(func: Callable[..., float], *args: float) -> float:
    try:
        return func(*args)
    except ValueError:
        return _NAN


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _log_with(func: Callable[[float], float], x: float) -> float:
    if math.isnan(x) or x < 0:
        return _NAN
    if x == 0:
        return -_INF
    return func(x)


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return _NAN
        return math.copysign(_INF, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _integral(func: Callable[[float], int], x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(float(func(x)), x)


def fabs(x: float) -> float:
    """Absolute value."""
    return -x if x < 0.0 else x


def fmin(a: float, b: float) -> float:
    """The smaller of two values; ``b`` when they are unordered."""
    return a if a < b else b


def fmax(a: float, b: float) -> float:
    """The larger of two values; ``b`` when they are unordered."""
    return a if a > b else b


def clamp(x: float, min_val: float, max_val: float) -> float:
    """Limit ``x`` to the range ``[min_val, max_val]``."""
    if x < min_val:
        return min_val
    if x > max_val:
        return max_val
    return x


def floor(x: float) -> float:
    """Largest integral value not above ``x``."""
    return _integral(math.floor, x)


def ceil(x: float) -> float:
    """Smallest integral value not below ``x``."""
    return _integral(math.ceil, x)


def trunc(x: float) -> float:
    """Integral part of ``x``."""
    return _integral(math.trunc, x)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(x):
        return x
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return math.copysign(float(whole), x)


def sqrt(x: float) -> float:
    """Square root; NaN for negative input."""
    return _nan_on_domain_error(math.sqrt, x)


def pow(base: float, exp: float) -> float:
    """``base`` raised to ``exp``."""
    try:
        return math.pow(base, exp)
    except OverflowError:
        return -_INF if base < 0 and _is_odd_integer(exp) else _INF
    except ValueError:
        if base == 0:
            return math.copysign(_INF, base) if _is_odd_integer(exp) else _INF
        return _NAN


def exp(x: float) -> float:
    """e raised to ``x``."""
    try:
        return math.exp(x)
    except OverflowError:
        return _INF


def ln(x: float) -> float:
    """Natural logarithm."""
    return _log_with(math.log, x)


def log(x: float, base: float) -> float:
    """Logarithm of ``x`` in ``base``."""
    return _divide(ln(x), ln(base))


def log2(x: float) -> float:
    """Base-2 logarithm."""
    return _log_with(math.log2, x)


def log10(x: float) -> float:
    """Base-10 logarithm."""
    return _log_with(math.log10, x)


def sin(x: float) -> float:
    """Sine of ``x`` in radians."""
    return _nan_on_domain_error(math.sin, x)


def cos(x: float) -> float:
    """Cosine of ``x`` in radians."""
    return _nan_on_domain_error(math.cos, x)


def tan(x: float) -> float:
    """Tangent of ``x`` in radians."""
    return _nan_on_domain_error(math.tan, x)


def asin(x: float) -> float:
    """Arcsine; NaN outside ``[-1, 1]``."""
    return _nan_on_domain_error(math.asin, x)


def acos(x: float) -> float:
    """Arccosine; NaN outside ``[-1, 1]``."""
    return _nan_on_domain_error(math.acos, x)


def atan(x: float) -> float:
    """Arctangent."""
    return math.atan(x)


def atan2(y: float, x: float) -> float:
    """Four-quadrant arctangent of ``y / x``."""
    return math.atan2(y, x)