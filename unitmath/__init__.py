"""Unit-tagged angles and packed boolean vectors."""

from unitmath.domain.angle import Angle, Deg, Degd, Rad, Radd, angle_type
from unitmath.domain.bool_vector import (
    BoolVector,
    BoolVector2,
    BoolVector3,
    BoolVector4,
    bool_vector_type,
)
from unitmath.domain.exceptions import (
    BitIndexException,
    InvalidScalarException,
    SizeMismatchException,
    TypeMismatchException,
    UnitMathException,
    UnitMismatchException,
)
from unitmath.domain.units import Precision, Unit, ZeroInit

__version__ = "0.1.0"

__all__ = [
    # angles
    "Angle",
    "Deg",
    "Rad",
    "Degd",
    "Radd",
    "angle_type",
    # bool vectors
    "BoolVector",
    "BoolVector2",
    "BoolVector3",
    "BoolVector4",
    "bool_vector_type",
    # tags
    "Unit",
    "Precision",
    "ZeroInit",
    # errors
    "UnitMathException",
    "BitIndexException",
    "TypeMismatchException",
    "UnitMismatchException",
    "SizeMismatchException",
    "InvalidScalarException",
]
