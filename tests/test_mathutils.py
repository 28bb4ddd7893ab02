import sys
from types import SimpleNamespace

import pytest

from cadgeom.mathutils import (
    ANGULAR,
    EPSILON,
    LINEAR,
    coords_equal,
    is_angular_equal,
    is_equal,
    is_linear_equal,
    is_negative,
    is_positive,
    is_zero,
    round_to,
)


def test_default_tolerances_match_documented_values():
    assert is_zero(sys.float_info.epsilon / 2)
    assert not is_zero(sys.float_info.epsilon)
    assert is_linear_equal(0.0, 1.0e-7)
    assert not is_linear_equal(0.0, 1.1e-7)
    assert is_angular_equal(0.0, 1.0e-12)
    assert not is_angular_equal(0.0, 1.1e-12)


def test_is_positive_respects_epsilon():
    assert is_positive(1.0)
    assert not is_positive(EPSILON)
    assert not is_positive(-1.0)
    assert is_positive(0.5, epsilon=0.1)
    assert not is_positive(0.05, epsilon=0.1)


def test_is_negative_respects_epsilon():
    assert is_negative(-1.0)
    assert not is_negative(-EPSILON)
    assert not is_negative(1.0)
    assert not is_negative(-0.05, epsilon=0.1)


def test_is_zero_is_strict_at_boundary():
    assert is_zero(0.0)
    assert is_zero(-EPSILON / 2)
    assert not is_zero(EPSILON)
    assert is_zero(LINEAR / 2, LINEAR)
    assert not is_zero(LINEAR, LINEAR)


def test_is_equal_is_inclusive_at_boundary():
    assert is_equal(1.0, 1.0)
    assert is_equal(0.0, 0.25, epsilon=0.25)
    assert not is_equal(0.0, 0.5, epsilon=0.25)
    assert not is_equal(1.0, 1.0 + 1e-9)


def test_is_linear_equal_uses_linear_tolerance():
    assert is_linear_equal(1.0, 1.0 + LINEAR / 2)
    assert not is_linear_equal(1.0, 1.0 + 2 * LINEAR)


def test_is_angular_equal_uses_angular_tolerance():
    assert is_angular_equal(0.5, 0.5 + ANGULAR / 2)
    assert not is_angular_equal(0.5, 0.5 + LINEAR)


def test_coords_equal_within_tolerance():
    a = SimpleNamespace(x=1.0, y=2.0, z=3.0)
    b = SimpleNamespace(x=1.0 + LINEAR / 2, y=2.0, z=3.0 - LINEAR / 2)
    c = SimpleNamespace(x=1.0, y=2.0 + 10 * LINEAR, z=3.0)
    assert coords_equal(a, b)
    assert not coords_equal(a, c)


def test_round_to_default_three_places():
    assert round_to(1.23456) == 1.235


def test_round_to_keeps_exact_value():
    assert round_to(0.25, 2) == 0.25
    assert round_to(7.0, 0) == 7.0


def test_round_to_truncates_toward_zero_for_negatives():
    assert round_to(-1.5, 0) == -1.0


def test_round_to_rejects_negative_precision():
    with pytest.raises(ValueError):
        round_to(1.0, -1)