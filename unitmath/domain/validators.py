"""Input validation utilities for angle and bool vector operations."""

import numbers
import operator

import numpy as np

from unitmath.domain.exceptions import (
    BitIndexException,
    InvalidScalarException,
    SizeMismatchException,
    UnitMismatchException,
)


def is_real_scalar(value: object) -> bool:
    """Check whether value is a bare real number usable as a scalar.

    Booleans are not scalars here, numpy booleans neither.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, np.integer, np.floating))


def validate_scalar(value: object) -> None:
    """Validate a bare scalar operand.

    Args:
        value: Value used as a raw angle value or a scale factor

    Raises:
        InvalidScalarException: If value is not a real number
    """
    if not is_real_scalar(value):
        raise InvalidScalarException(
            f"Expected a real number, got {type(value).__name__}"
        )


def validate_bit_index(index: object, size: int) -> int:
    """Validate a bit position against the vector size.

    Args:
        index: Requested bit position
        size: Number of bits in the vector

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        BitIndexException: If index is outside [0, size)
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError("Bit index must be an integer, got bool")
    position = operator.index(index)

    if not 0 <= position < size:
        raise BitIndexException(
            f"Bit index {position} out of range for a vector of size {size}"
        )
    return position


def validate_same_angle_type(left: object, right: object) -> None:
    """Validate that two angles share unit and precision.

    Raises:
        UnitMismatchException: If the angle types differ
    """
    if type(left) is not type(right):
        raise UnitMismatchException(
            f"Cannot combine {type(left).__name__} with {type(right).__name__}"
        )


def validate_same_size(left: object, right: object) -> None:
    """Validate that two bool vectors have the same size.

    Raises:
        SizeMismatchException: If the vector sizes differ
    """
    if left.SIZE != right.SIZE:
        raise SizeMismatchException(
            f"Cannot combine a vector of size {left.SIZE} with one of size {right.SIZE}"
        )


def validate_vector_size(size: object) -> int:
    """Validate a bool vector size.

    Raises:
        TypeError: If size is not an integer
        ValueError: If size is negative
    """
    if isinstance(size, (bool, np.bool_)):
        raise TypeError("Vector size must be an integer, got bool")
    n = operator.index(size)

    if n < 0:
        raise ValueError(f"Vector size must be non-negative, got {n}")
    return n
