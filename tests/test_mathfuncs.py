import math

import pytest

from jsonnetstd import mathfuncs as m
from jsonnetstd.values import JsonnetError


def test_sign_and_abs():
    assert m.sign(0) == 0
    assert m.sign(-5) == -1
    assert m.abs_(-2.5) == 2.5


def test_min_max_clamp():
    assert m.max_(1, 2) == 2
    assert m.min_(1, 2) == 1
    assert m.max_(math.nan, 3) == 3
    assert m.clamp(10, 0, 5) == 5
    assert m.clamp(-1, 0, 5) == 0
    with pytest.raises(JsonnetError):
        m.clamp(1, 5, 0)


def test_sum_and_modulo():
    assert m.sum_([1, 2, 3]) == 6
    assert m.modulo(7, 3) == 1
    assert math.isnan(m.modulo(1, 0))


def test_floor_ceil_round():
    assert m.floor(1.7) == 1
    assert m.ceil(1.2) == 2
    assert m.round_(2.5) == 3
    assert m.round_(-2.5) == -3


def test_log_exp_inverse():
    for x in (0.5, 1.0, 7.25):
        assert math.isclose(m.exp(m.log(x)), x)
    assert m.log(0) == -math.inf


def test_sqrt():
    assert math.isclose(m.sqrt(2) ** 2, 2)
    with pytest.raises(JsonnetError):
        m.sqrt(-1)


def test_trig_inverse():
    for x in (0.1, 0.5, -0.3):
        assert math.isclose(m.sin(m.asin(x)), x)
        assert math.isclose(m.cos(m.acos(x)), x)
        assert math.isclose(m.tan(m.atan(x)), x)
    assert math.isnan(m.asin(2))
    assert math.isclose(m.atan2(1, 1), m.atan(1))


def test_frexp_reconstructs():
    for x in (1.0, 3.5, -12.0, 0.1):
        mant, e = m.frexp(x)
        assert 0.5 <= abs(mant) < 1
        assert math.isclose(mant * 2 ** e, x)
        assert m.mantissa(x) == mant and m.exponent(x) == e
    assert m.frexp(0.0) == (0.0, 0)


def test_parity_and_integrality():
    assert m.is_even(4) and not m.is_even(3)
    assert m.is_odd(3) and not m.is_odd(4)
    assert m.is_integer(2.0) and not m.is_integer(2.5)
    assert m.is_decimal(2.5) and not m.is_decimal(2.0)


def test_pow():
    assert m.pow_(2, 10) == 1024
    assert m.pow_(10, 400) == math.inf