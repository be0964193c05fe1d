import pytest

from tensorlite.filter import BorderType, conv2d
from tensorlite.tensor import Tensor


def make(rows):
    t = Tensor((len(rows), len(rows[0])))
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            t[i][j] = value
    return t


def get_tensor():
    return make([[0.0, 0.0, 0.0], [0.0, 5.0, 0.0], [0.0, 0.0, 0.0]])


def get_2d_filter():
    return make([[0.0, 1.0, 0.0], [2.0, -6.0, 2.0], [0.0, 1.0, 0.0]])


def test_conv2d():
    kernel = get_2d_filter()
    t1 = Tensor((10, 10)).fill(1.0)
    t2 = get_tensor()
    expect1 = Tensor.like(t1).fill(0.0)
    expect2 = make([[0.0, 10.0, 0.0], [20.0, -30.0, 20.0], [0.0, 10.0, 0.0]])

    actual1 = Tensor.like(t1)
    conv2d(t1, kernel, actual1)
    assert actual1 == expect1

    actual2 = Tensor.like(t2)
    assert conv2d(t2, kernel, actual2) is actual2
    assert actual2 == expect2


def test_internal_leaves_border_zero():
    actual = Tensor((3, 3)).fill(7.0)
    conv2d(get_tensor(), get_2d_filter(), actual, BorderType.INTERNAL)
    assert actual[1][1] == -30.0
    cells = actual.tolist()
    border = [cells[0], cells[2], [cells[1][0], cells[1][2]]]
    assert all(value == 0.0 for row in border for value in row)


def test_input_is_not_modified():
    t = get_tensor()
    conv2d(t, get_2d_filter(), Tensor.like(t))
    assert t == get_tensor()


def test_kernel_must_be_3x3():
    t = Tensor((4, 4))
    with pytest.raises(ValueError, match="kernel"):
        conv2d(t, Tensor((2, 2)), Tensor.like(t))


def test_result_shape_must_match():
    with pytest.raises(ValueError):
        conv2d(Tensor((4, 4)), get_2d_filter(), Tensor((4, 5)))


@pytest.mark.parametrize(
    "border", [BorderType.CONSTANT, BorderType.REPLICATE, BorderType.WRAP]
)
def test_unsupported_borders_raise(border):
    t = get_tensor()
    with pytest.raises(ValueError):
        conv2d(t, get_2d_filter(), Tensor.like(t), border)


def test_reflect_needs_two_cells_per_axis():
    t = Tensor((1, 4))
    with pytest.raises(ValueError):
        conv2d(t, get_2d_filter(), Tensor.like(t))


def test_operands_must_be_two_dimensional():
    t = Tensor((3,))
    with pytest.raises(ValueError):
        conv2d(t, get_2d_filter(), Tensor.like(t))