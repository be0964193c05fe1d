"""Two-dimensional convolution filters."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

from tensorlite.tensor import Tensor


class BorderType(Enum):
    """How cells on the edge of the image are treated."""

    INTERNAL = "internal"
    CONSTANT = "constant"
    REPLICATE = "replicate"
    REFLECT = "reflect"
    WRAP = "wrap"


_SUPPORTED = frozenset({BorderType.INTERNAL, BorderType.REFLECT})
_OFFSETS = (-1, 0, 1)


def _reflect(index: int, limit: int) -> int:
    if index < 0:
        return -index
    if index > limit:
        return 2 * limit - index
    return index


def _border_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for i in range(rows):
        if i in (0, rows - 1):
            yield from ((i, j) for j in range(cols))
        else:
            yield i, 0
            yield i, cols - 1


def conv2d(
    tensor: Tensor,
    kernel: Tensor,
    ret: Tensor,
    border: BorderType = BorderType.REFLECT,
    constant: Any = 0.0,
) -> Tensor:
    """Convolve ``tensor`` with a 3x3 ``kernel`` and write the result to ``ret``.

    Interior cells use the transposed kernel; with ``BorderType.REFLECT`` the
    edge cells are computed with mirrored indices. ``INTERNAL`` leaves the edge
    cells at zero. ``constant`` is the padding value for ``CONSTANT`` borders,
    which are not accepted, nor are ``REPLICATE`` and ``WRAP``.
    """
    for name, operand in (("tensor", tensor), ("kernel", kernel), ("ret", ret)):
        if not isinstance(operand, Tensor) or operand.ndim != 2:
            raise ValueError(f"{name} must be a two-dimensional tensor")
    if kernel.shape != (3, 3):
        raise ValueError("invalid shape of kernel given")
    if ret.shape != tensor.shape:
        raise ValueError("shape of result does not match the given tensor")
    border = BorderType(border)
    if border not in _SUPPORTED:
        raise ValueError(f"border type {border.name} is not supported")

    rows, cols = tensor.shape
    if border is BorderType.REFLECT and (rows < 2 or cols < 2):
        raise ValueError("reflected borders need at least two rows and two columns")

    source = tensor.tolist()
    weights = kernel.tolist()
    ret.fill(0.0)

    for i in range(1, rows - 1):
        out_row = ret[i]
        for j in range(1, cols - 1):
            acc = 0.0
            for dy in _OFFSETS:
                for dx in _OFFSETS:
                    acc += source[i + dy][j + dx] * weights[dx + 1][dy + 1]
            out_row[j] = acc

    if border is BorderType.REFLECT:
        y_lim, x_lim = rows - 1, cols - 1
        for i, j in _border_cells(rows, cols):
            acc = 0.0
            for dy in _OFFSETS:
                y = _reflect(i + dy, y_lim)
                for dx in _OFFSETS:
                    acc += source[y][_reflect(j + dx, x_lim)] * weights[dy + 1][dx + 1]
            ret[i][j] = acc

    return ret