"""Element-wise operations used by :meth:`Tensor.map`.

Each operation receives the current element of the target tensor first,
followed by the matching elements of the source tensors, and returns the
new value of the target element.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable
from functools import partial, reduce
from typing import Any

ElementFunc = Callable[..., Any]


def _replace(value: Any, current: Any) -> Any:
    """Discard ``current`` in favour of ``value``."""
    del current
    return value


def fill(value: Any) -> ElementFunc:
    """Return an operation that sets every element to ``value``."""
    return partial(_replace, value)


def negate(current: Any) -> Any:
    """Negate the current element."""
    return -current


def difference(current: Any, lhs: Any, rhs: Any) -> Any:
    """Return ``lhs - rhs``."""
    return lhs - rhs


def quotient(current: Any, lhs: Any, rhs: Any) -> Any:
    """Return ``lhs / rhs`` with IEEE results for division by zero."""
    try:
        return lhs / rhs
    except ZeroDivisionError:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


def total(current: Any, *args: Any) -> Any:
    """Return the sum of all operands."""
    if not args:
        raise ValueError("total needs at least one operand")
    return reduce(operator.add, args)


def product(current: Any, *args: Any) -> Any:
    """Return the product of all operands."""
    if not args:
        raise ValueError("product needs at least one operand")
    return reduce(operator.mul, args)


def bind_lhs(func: ElementFunc, lhs: Any) -> ElementFunc:
    """Fix the left operand of a binary operation."""

    def _bound(current: Any, rhs: Any) -> Any:
        return func(current, lhs, rhs)

    return _bound


def bind_rhs(func: ElementFunc, rhs: Any) -> ElementFunc:
    """Fix the right operand of a binary operation."""

    def _bound(current: Any, lhs: Any) -> Any:
        return func(current, lhs, rhs)

    return _bound