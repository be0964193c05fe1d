# tensorlite

Small tensors of any fixed rank, built from nested rows of numbers, with no
dependencies outside the standard library. They support element-wise
arithmetic, mapping a function over one or more tensors, and a 3×3
two-dimensional convolution with border handling.

## Installation

```
pip install tensorlite
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "tensorlite[test]"
pytest
```

## Shapes

`tensorlite.shape.Shape` is an immutable tuple of non-negative dimension
sizes. A negative size raises `ValueError`.

```python
from tensorlite.shape import Shape

s = Shape((2, 3))
print(s)         # (2, 3)
s.ndim           # 2
s.tail           # Shape((3,))
```

## Tensors

`tensorlite.tensor.Tensor` takes a shape of at least one dimension and starts
with every element at `0.0`.

```python
from tensorlite.tensor import Tensor

a = Tensor((2, 2))              # zero-filled; same as Tensor.from_shape((2, 2))
b = Tensor.like(a).fill(3.0)    # same shape, all 3.0
a[0][1] = 1.0
a[1][0] = 2.0

c = a + b                       # tensor with tensor
d = 2.0 * a - 1.0               # a number on either side
e = a / b                       # division by zero gives inf or nan, not an error
-a, +a                          # new tensors

a.shape                         # Shape((2, 2))
a.ndim                          # 2
len(a)                          # 2, the leading dimension
a.tolist()                      # [[0.0, 1.0], [2.0, 0.0]]
print(a)                        # {{0 1}
                                #  {2 0}}   (rows on separate lines)
```

Other members:

- `a[i]` returns a row (or an element of a one-dimensional tensor);
  `a.at(i)` does the same but raises `IndexError` for an index outside
  `0 .. len(a) - 1`, negative ones included.
- `a[i] = row` on a tensor of two or more dimensions copies the values of
  `row` into the existing row, which must have the same shape.
- `assign(other)` copies values from a tensor of the same shape and raises
  `ValueError` when the shapes differ. `copy()` returns an independent copy.
- `resize(shape)` changes the shape in place, keeping elements that are still
  in range and filling new ones with `0.0`. The number of dimensions cannot
  change; that raises `ValueError`.
- Tensors compare equal when their shapes and all their elements are equal.
  Tensors are not hashable.

### Mapping

`map` writes into the tensor it is called on and returns it. The function gets
the current element first, then the matching element of each argument tensor,
and returns the new value. The arguments must be tensors with the same number
of dimensions (otherwise `TypeError`); their sizes are not checked.
`map_safe` also requires every argument to have exactly the same shape, and
raises `ValueError` otherwise.

`tensorlite.functor` holds ready-made element functions: `fill(value)`,
`negate`, `difference`, `quotient`, `total`, `product`, and `bind_lhs` /
`bind_rhs` to fix one operand of a binary function to a number.

```python
from tensorlite import functor

out = Tensor.like(a)
out.map(functor.total, a, b)                          # out = a + b
out.map(functor.bind_rhs(functor.quotient, 2.0), a)   # out = a / 2
out.map(functor.negate)                               # out = -out
```

## Convolution

```python
from tensorlite.filter import BorderType, conv2d

kernel = Tensor((3, 3))
# ... set the kernel weights ...
image = Tensor((10, 10)).fill(1.0)
result = Tensor.like(image)
conv2d(image, kernel, result, BorderType.REFLECT, 0.0)
```

`conv2d(tensor, kernel, ret, border=BorderType.REFLECT, constant=0.0)` writes
into `ret` and returns it. All three must be two-dimensional tensors, the
kernel must be 3×3 and `ret` must have the shape of `tensor`; otherwise
`ValueError` is raised.

Interior cells are weighted with the transposed kernel. With
`BorderType.INTERNAL` the edge cells stay at zero. With `BorderType.REFLECT`
the edge cells are computed by mirroring indices across the edges (without
repeating the edge row or column), using the kernel as given; this needs at
least two rows and two columns. `BorderType.CONSTANT`, `REPLICATE` and `WRAP`
are not supported and raise `ValueError`, so `constant` currently has no
effect.

## What it does not do

tensorlite is a plain Python library: it has no command-line tool, no
parallel or vectorised execution, no broadcasting between shapes, and no
convolution kernels other than 3×3.