import math

import pytest

from tensorlite import functor


def test_fill_ignores_current():
    op = functor.fill(7.5)
    assert op(0.0) == 7.5
    assert op(-1.0) == 7.5


@pytest.mark.parametrize("value", [0.0, 1.5, -3.0])
def test_negate_is_involution(value):
    assert functor.negate(functor.negate(value)) == value
    assert functor.negate(value) == -value


@pytest.mark.parametrize("lhs,rhs", [(5.0, 3.0), (-1.0, 4.0), (0.0, 0.0)])
def test_difference_inverts_addition(lhs, rhs):
    assert functor.difference(None, lhs, rhs) + rhs == lhs


def test_quotient_regular():
    assert functor.quotient(None, 6.0, 3.0) == 6.0 / 3.0


def test_quotient_by_zero_follows_ieee():
    assert functor.quotient(None, 2.0, 0.0) == math.inf
    assert functor.quotient(None, -2.0, 0.0) == -math.inf
    assert functor.quotient(None, 2.0, -0.0) == -math.inf
    assert math.isnan(functor.quotient(None, 0.0, 0.0))


def test_total_and_product_fold_operands():
    assert functor.total(None, 1.0, 2.0, 3.0) == 1.0 + 2.0 + 3.0
    assert functor.product(None, 2.0, 3.0, 4.0) == 2.0 * 3.0 * 4.0
    assert functor.total(None, 4.0) == 4.0


def test_fold_without_operands_rejected():
    with pytest.raises(ValueError):
        functor.total(None)
    with pytest.raises(ValueError):
        functor.product(None)


def test_bind_lhs_and_rhs():
    assert functor.bind_lhs(functor.difference, 10.0)(None, 4.0) == functor.difference(
        None, 10.0, 4.0
    )
    assert functor.bind_rhs(functor.difference, 10.0)(None, 4.0) == functor.difference(
        None, 4.0, 10.0
    )