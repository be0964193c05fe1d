"""Dense nested tensors with element-wise arithmetic."""

from __future__ import annotations

import numbers
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from tensorlite import functor
from tensorlite.shape import Shape


def _format_scalar(value: Any) -> str:
    if isinstance(value, numbers.Real):
        return format(value, "g")
    return str(value)


class Tensor:
    """An N-dimensional tensor stored as nested rows, initialised to zero."""

    def __init__(self, shape: Iterable[int]) -> None:
        self._shape = Shape(shape)
        if self._shape.ndim < 1:
            raise ValueError("a tensor needs at least one dimension")
        self._data: list[Any] = []
        self._resize_recurse(self._shape)

    @classmethod
    def from_shape(cls, shape: Iterable[int]) -> Tensor:
        """Create a zero tensor of the given shape."""
        return cls(shape)

    @classmethod
    def like(cls, tensor: Tensor) -> Tensor:
        """Create a zero tensor with the shape of ``tensor``."""
        return cls(tensor.shape)

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def ndim(self) -> int:
        return self._shape.ndim

    def resize(self, shape: Iterable[int]) -> Tensor:
        """Change the shape, keeping elements that remain in range."""
        new_shape = Shape(shape)
        if new_shape.ndim != self.ndim:
            raise ValueError(
                f"cannot resize a {self.ndim}-dimensional tensor to shape {new_shape}"
            )
        if new_shape != self._shape:
            self._resize_recurse(new_shape)
        return self

    def _resize_recurse(self, shape: Shape) -> None:
        self._shape = shape
        length = shape[0]
        del self._data[length:]
        if shape.ndim == 1:
            self._data.extend(0.0 for _ in range(length - len(self._data)))
            return
        sub_shape = shape.tail
        for sub in self._data:
            sub._resize_recurse(sub_shape)
        self._data.extend(Tensor(sub_shape) for _ in range(length - len(self._data)))

    def _check_operands(self, others: tuple[Any, ...]) -> None:
        for other in others:
            if not isinstance(other, Tensor) or other.ndim != self.ndim:
                raise TypeError(f"operands must be {self.ndim}-dimensional tensors")

    def map(self, func: Callable[..., Any], *args: Tensor) -> Tensor:
        """Replace each element with ``func(element, *matching elements)``.

        Shapes are not checked; see :meth:`map_safe`.
        """
        self._check_operands(args)
        self._map_recurse(func, args)
        return self

    def map_safe(self, func: Callable[..., Any], *args: Tensor) -> Tensor:
        """Like :meth:`map`, but every operand must have this tensor's shape."""
        self._check_operands(args)
        if any(other.shape != self._shape for other in args):
            raise ValueError("invalid dimensions")
        self._map_recurse(func, args)
        return self

    def _map_recurse(self, func: Callable[..., Any], others: tuple[Tensor, ...]) -> None:
        rows = zip(self._data, *(other._data for other in others))
        if self.ndim == 1:
            for index, (current, *values) in enumerate(rows):
                self._data[index] = func(current, *values)
        else:
            for sub, *subs in rows:
                sub._map_recurse(func, tuple(subs))

    def fill(self, value: Any) -> Tensor:
        """Set every element to ``value``."""
        return self.map(functor.fill(value))

    def at(self, index: int) -> Any:
        """Bounds-checked access to a row or element."""
        position = operator.index(index)
        if not 0 <= position < len(self._data):
            raise IndexError(f"index {position} out of range for length {len(self._data)}")
        return self._data[position]

    def assign(self, other: Tensor) -> Tensor:
        """Copy the values of ``other``, which must have the same shape."""
        if not isinstance(other, Tensor) or other.shape != self._shape:
            raise ValueError("invalid dimensions")
        if other is self:
            return self
        if self.ndim == 1:
            self._data[:] = other._data
        else:
            for sub, other_sub in zip(self._data, other._data):
                sub.assign(other_sub)
        return self

    def copy(self) -> Tensor:
        return Tensor(self._shape).assign(self)

    def tolist(self) -> list[Any]:
        if self.ndim == 1:
            return list(self._data)
        return [sub.tolist() for sub in self._data]

    def __getitem__(self, index: int) -> Any:
        return self._data[operator.index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        position = operator.index(index)
        if self.ndim == 1:
            self._data[position] = value
        else:
            self._data[position].assign(value)

    def __len__(self) -> int:
        return self._shape[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __pos__(self) -> Tensor:
        return self.copy()

    def __neg__(self) -> Tensor:
        return Tensor(self._shape).map(lambda _, value: functor.negate(value), self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        if self._shape != other._shape:
            return False
        return all(mine == theirs for mine, theirs in zip(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def _binary(self, other: Any, func: Callable[..., Any], reflected: bool) -> Tensor:
        result = Tensor(self._shape)
        if isinstance(other, Tensor):
            return result.map(func, self, other)
        if isinstance(other, numbers.Number):
            bind = functor.bind_lhs if reflected else functor.bind_rhs
            return result.map(bind(func, other), self)
        return NotImplemented

    def __add__(self, other: Any) -> Tensor:
        return self._binary(other, functor.total, reflected=False)

    def __radd__(self, other: Any) -> Tensor:
        return self._binary(other, functor.total, reflected=True)

    def __sub__(self, other: Any) -> Tensor:
        return self._binary(other, functor.difference, reflected=False)

    def __rsub__(self, other: Any) -> Tensor:
        return self._binary(other, functor.difference, reflected=True)

    def __mul__(self, other: Any) -> Tensor:
        return self._binary(other, functor.product, reflected=False)

    def __rmul__(self, other: Any) -> Tensor:
        return self._binary(other, functor.product, reflected=True)

    def __truediv__(self, other: Any) -> Tensor:
        return self._binary(other, functor.quotient, reflected=False)

    def __rtruediv__(self, other: Any) -> Tensor:
        return self._binary(other, functor.quotient, reflected=True)

    def __str__(self) -> str:
        if self.ndim == 1:
            return "{" + " ".join(_format_scalar(value) for value in self._data) + "}"
        return "{" + "\n".join(str(sub) for sub in self._data) + "}"

    def __repr__(self) -> str:
        return f"Tensor(shape={tuple(self._shape)!r}, data={self.tolist()!r})"