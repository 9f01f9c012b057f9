import numpy as np
import pytest

from unitmath.domain.angle import Deg, Rad
from unitmath.domain.bool_vector import BoolVector2, BoolVector3
from unitmath.domain.exceptions import (
    BitIndexException,
    InvalidScalarException,
    SizeMismatchException,
    UnitMismatchException,
)
from unitmath.domain.validators import (
    is_real_scalar,
    validate_bit_index,
    validate_same_angle_type,
    validate_same_size,
    validate_scalar,
    validate_vector_size,
)


@pytest.mark.parametrize("value", [0, -3, 2.5, np.float32(1), np.int8(4), float("nan")])
def test_real_scalars_accepted(value):
    assert is_real_scalar(value)
    validate_scalar(value)


@pytest.mark.parametrize("value", [True, np.bool_(False), "1", None, 1j, Deg(1.0)])
def test_non_scalars_rejected(value):
    assert not is_real_scalar(value)
    with pytest.raises(InvalidScalarException, match="Expected a real number"):
        validate_scalar(value)


def test_validate_bit_index_returns_int():
    assert validate_bit_index(np.int64(2), 3) == 2


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_validate_bit_index_out_of_range(index):
    with pytest.raises(BitIndexException, match=f"Bit index {index} out of range"):
        validate_bit_index(index, 3)


def test_validate_same_angle_type():
    validate_same_angle_type(Deg(1.0), Deg(2.0))
    with pytest.raises(UnitMismatchException, match="Cannot combine Deg with Rad"):
        validate_same_angle_type(Deg(1.0), Rad(1.0))


def test_validate_same_size():
    validate_same_size(BoolVector2(), BoolVector2(True))
    with pytest.raises(SizeMismatchException, match="size 2 with one of size 3"):
        validate_same_size(BoolVector2(), BoolVector3())


def test_validate_vector_size():
    assert validate_vector_size(0) == 0
    assert validate_vector_size(np.uint16(9)) == 9
    with pytest.raises(ValueError):
        validate_vector_size(-2)
    with pytest.raises(TypeError):
        validate_vector_size(True)
