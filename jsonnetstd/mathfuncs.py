"""Numeric standard library functions."""

from __future__ import annotations

import math
from typing import Iterable

from .values import JsonnetError


def abs_(n: float) -> float:
    return abs(n)


def sign(n: float) -> float:
    if n == 0:
        return 0.0
    return math.copysign(1.0, n)


def max_(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def min_(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def clamp(x: float, min_val: float, max_val: float) -> float:
    if min_val > max_val:
        raise JsonnetError("clamp: minVal must not exceed maxVal")
    return min(max(x, min_val), max_val)


def sum_(arr: Iterable[float]) -> float:
    return float(sum(arr))


def modulo(x: float, y: float) -> float:
    if y == 0:
        return math.nan
    return math.fmod(x, y)


def floor(x: float) -> float:
    return float(math.floor(x))


def ceil(x: float) -> float:
    return float(math.ceil(x))


def log(x: float) -> float:
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return math.log(x)


def pow_(x: float, n: float) -> float:
    try:
        return math.pow(x, n)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def sqrt(x: float) -> float:
    if x < 0:
        raise JsonnetError("expected positive number")
    return math.sqrt(x)


def sin(x: float) -> float:
    return math.sin(x)


def cos(x: float) -> float:
    return math.cos(x)


def tan(x: float) -> float:
    return math.tan(x)


def asin(x: float) -> float:
    return math.asin(x) if -1 <= x <= 1 else math.nan


def acos(x: float) -> float:
    return math.acos(x) if -1 <= x <= 1 else math.nan


def atan(x: float) -> float:
    return math.atan(x)


def atan2(y: float, x: float) -> float:
    return math.atan2(y, x)


def exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def frexp(x: float) -> tuple[float, int]:
    """Split x into a mantissa in [0.5, 1) (signed) and a power of two."""
    if x == 0:
        return x, 0
    lg = math.log2(abs(x))
    mant = 2.0 ** (lg - math.floor(lg) - 1.0)
    return math.copysign(mant, x), int(math.floor(lg) + 1)


def mantissa(x: float) -> float:
    return frexp(x)[0]


def exponent(x: float) -> int:
    return frexp(x)[1]


def round_(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def is_even(x: float) -> bool:
    return math.fmod(round_(x), 2.0) == 0.0


def is_odd(x: float) -> bool:
    return math.fmod(round_(x), 2.0) == 1.0


def is_integer(x: float) -> bool:
    return round_(x) == x


def is_decimal(x: float) -> bool:
    return round_(x) != x