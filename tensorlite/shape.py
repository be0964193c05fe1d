"""Shapes of dense tensors."""

from __future__ import annotations

import operator
from collections.abc import Iterable


class Shape(tuple):
    """Immutable sequence of non-negative dimension sizes."""

    __slots__ = ()

    def __new__(cls, dims: Iterable[int]) -> Shape:
        sizes = tuple(operator.index(size) for size in dims)
        if any(size < 0 for size in sizes):
            raise ValueError(f"dimension sizes must be non-negative, got {sizes}")
        return super().__new__(cls, sizes)

    def __str__(self) -> str:
        return "(" + ", ".join(str(size) for size in self) + ")"

    def __repr__(self) -> str:
        return f"Shape({tuple(self)!r})"

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        return len(self)

    @property
    def tail(self) -> Shape:
        """The shape without its leading dimension."""
        return Shape(self[1:])