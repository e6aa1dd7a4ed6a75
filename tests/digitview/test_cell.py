import numpy as np
import pytest

from src.digitview import IntegerCell, IntegerWidth


@pytest.mark.parametrize("dtype", [np.int8, np.int16, np.int32, np.int64])
def test_magnitude_of_minimum_signed_value(dtype):
    width = IntegerWidth.of(dtype)
    lowest = int(np.iinfo(dtype).min)
    assert width.magnitude(lowest) == -lowest
    assert width.magnitude(-1) == 1
    assert width.magnitude(0) == 0


def test_magnitude_of_unsigned_max():
    width = IntegerWidth.of(np.uint64)
    assert width.magnitude(2**64 - 1) == 2**64 - 1
    assert width.umax == 2**64 - 1


def test_wrap_uses_twos_complement():
    width = IntegerWidth.of(np.int8)
    assert width.wrap(127) == 127
    assert width.wrap(128) == -128
    assert width.wrap(927) == -97
    assert width.wrap(-5) == -5
    assert isinstance(width.wrap(3), np.int8)


def test_non_integer_dtypes_rejected():
    with pytest.raises(TypeError):
        IntegerWidth.of(np.float64)
    with pytest.raises(TypeError):
        IntegerWidth.of(np.bool_)


def test_cell_reads_through_to_array():
    arr = np.array([10, 20, 30], dtype=np.int32)
    cell = IntegerCell(arr, 1)
    assert cell.get() == 20
    arr[1] = 25
    assert cell.get() == 25
    cell.put(-7)
    assert arr.tolist() == [10, -7, 30]


def test_cell_requires_single_element():
    with pytest.raises(TypeError):
        IntegerCell(np.array([1, 2, 3]))


def test_wrap_value_makes_immutable_inputs_read_only():
    assert not IntegerCell.wrap_value(42).writeable
    assert not IntegerCell.wrap_value(np.int16(42)).writeable
    assert IntegerCell.wrap_value(np.array(42)).writeable
    with pytest.raises(TypeError):
        IntegerCell.wrap_value(True)
    with pytest.raises(TypeError):
        IntegerCell.wrap_value(4.2)
