# unitmath/domain/units.py
"""
Unit and precision tags for the angle types.

Usage:
    from unitmath.domain.units import Precision, Unit

    Precision.SINGLE.cast(0.1)  # numpy.float32(0.1)
"""

import math
from enum import Enum

import numpy as np


class Unit(str, Enum):
    """Angular unit an Angle value is interpreted in."""

    DEGREE = "Deg"
    RADIAN = "Rad"


class Precision(str, Enum):
    """Floating point width of an Angle value."""

    SINGLE = "float32"
    DOUBLE = "float64"

    @property
    def dtype(self) -> type[np.floating]:
        return np.dtype(self.value).type

    def cast(self, value) -> np.floating:
        """Round a number to this precision, overflowing to infinity."""
        try:
            value = float(value)
        except OverflowError:
            # Python ints past the double range
            value = math.inf if value > 0 else -math.inf
        with np.errstate(over="ignore"):
            return self.dtype(value)


class _ZeroInitType:
    """Tag selecting the zero-filled constructor."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ZeroInit"


ZeroInit = _ZeroInitType()
