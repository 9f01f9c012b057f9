# unitmath/domain/angle.py
"""
Type-safe angle values for degree and radian measures.

One generic implementation, instantiated per (unit, precision) pair:

    Deg   float32 degrees      Rad   float32 radians
    Degd  float64 degrees      Radd  float64 radians

Values of different types never mix implicitly. Conversions are explicit
constructor calls and apply the pi/180 factor exactly once:

    >>> Rad(Deg(180.0))
    Rad(3.14159)
    >>> Degd(Deg(90.0))
    Deg(90)
    >>> Deg(90.0) + Rad(1.0)
    Traceback (most recent call last):
    ...
    unitmath.domain.exceptions.UnitMismatchException: Cannot combine Deg with Rad

The only way to get a bare number back is ``to_scalar()``.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from unitmath.domain.constants import DEGREES_PER_HALF_TURN, PI
from unitmath.domain.exceptions import UnitMismatchException
from unitmath.domain.units import Precision, Unit, ZeroInit
from unitmath.domain.validators import (
    is_real_scalar,
    validate_same_angle_type,
    validate_scalar,
)
from unitmath.infrastructure.output.formatters import format_angle
from unitmath.logging_config import get_logger

logger = get_logger(__name__)

_ANGLE_TYPES: dict[tuple[Unit, Precision], type["Angle"]] = {}


def angle_type(unit: Unit, precision: Precision) -> type["Angle"]:
    """Look up the concrete angle class for a unit and a precision."""
    try:
        return _ANGLE_TYPES[(Unit(unit), Precision(precision))]
    except KeyError:
        raise UnitMismatchException(
            f"No angle type registered for {unit} in {precision} precision"
        ) from None


def _convert(source: "Angle", target: type["Angle"]) -> np.floating:
    """Convert the value of source into the unit and precision of target."""
    if type(source) is target:
        return source._value

    same_unit = source.unit is target.unit
    same_precision = source.precision is target.precision

    if same_unit and not same_precision:
        logger.debug(f"Casting {source!r} to {target.__name__}")
        return target.precision.cast(source._value)

    if same_precision and not same_unit:
        logger.debug(f"Converting {source!r} to {target.__name__}")
        cast = target.precision.cast
        with np.errstate(all="ignore"):
            if target.unit is Unit.RADIAN:
                return source._value * cast(PI) / cast(DEGREES_PER_HALF_TURN)
            return cast(DEGREES_PER_HALF_TURN) * source._value / cast(PI)

    raise UnitMismatchException(
        f"No conversion from {type(source).__name__} to {target.__name__}; "
        "convert the unit and the precision in separate steps"
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Angle:
    """
    Scalar tagged with an angular unit and a floating point precision.

    Not instantiable itself; concrete types are declared as

        class Deg(Angle, unit=Unit.DEGREE, precision=Precision.SINGLE): ...

    Instances are frozen. Arithmetic and comparisons accept only
    operands of the very same type, scaling accepts bare real numbers.

    Args:
        _value: ZeroInit (default) for zero, a bare real number already
            expressed in this unit, or an angle of the same precision
            in the other unit, or of the same unit in the other precision.

    Raises:
        UnitMismatchException: If the value is an angle with no defined
            conversion to this type
        InvalidScalarException: If the value is neither an angle nor a real
    """

    _value: Any = ZeroInit

    unit: ClassVar[Unit]
    precision: ClassVar[Precision]

    def __init_subclass__(
        cls,
        unit: Unit | None = None,
        precision: Precision | None = None,
        **kwargs,
    ):
        # Explicit form: the slots dataclass is a rebuilt class object
        super(Angle, cls).__init_subclass__(**kwargs)
        if unit is None and precision is None:
            if not hasattr(cls, "unit"):
                raise TypeError(f"{cls.__name__} needs unit= and precision=")
            return
        if unit is None or precision is None:
            raise TypeError(f"{cls.__name__} needs both unit= and precision=")

        key = (Unit(unit), Precision(precision))
        if key in _ANGLE_TYPES:
            raise TypeError(
                f"{_ANGLE_TYPES[key].__name__} is already the angle type for "
                f"{key[0].name} in {key[1].name} precision"
            )
        cls.unit, cls.precision = key
        _ANGLE_TYPES[key] = cls

    def __post_init__(self) -> None:
        if type(self) is Angle:
            raise TypeError("Angle is generic, use Deg, Rad, Degd or Radd")

        value = self._value
        if value is ZeroInit:
            stored = 0
        elif isinstance(value, Angle):
            stored = _convert(value, type(self))
        else:
            validate_scalar(value)
            stored = value
        object.__setattr__(self, "_value", self.precision.cast(stored))

    @classmethod
    def zero(cls) -> "Angle":
        return cls(ZeroInit)

    @classmethod
    def from_raw(cls, value) -> "Angle":
        """Construct from a bare number interpreted in this unit."""
        validate_scalar(value)
        return cls(value)

    def _new(self, value) -> "Angle":
        return type(self)(self.precision.cast(value))

    # Conversions

    def to_scalar(self) -> float:
        """Underlying value in this unit, as a bare float."""
        return float(self._value)

    def to_deg(self) -> "Angle":
        return angle_type(Unit.DEGREE, self.precision)(self)

    def to_rad(self) -> "Angle":
        return angle_type(Unit.RADIAN, self.precision)(self)

    def to_single(self) -> "Angle":
        return angle_type(self.unit, Precision.SINGLE)(self)

    def to_double(self) -> "Angle":
        return angle_type(self.unit, Precision.DOUBLE)(self)

    # Arithmetic

    def __neg__(self) -> "Angle":
        return self._new(-self._value)

    def __pos__(self) -> "Angle":
        return self._new(self._value)

    def __abs__(self) -> "Angle":
        return self._new(abs(self._value))

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        validate_same_angle_type(self, other)
        with np.errstate(all="ignore"):
            return self._new(self._value + other._value)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        validate_same_angle_type(self, other)
        with np.errstate(all="ignore"):
            return self._new(self._value - other._value)

    def __mul__(self, other):
        if not is_real_scalar(other):
            return NotImplemented
        with np.errstate(all="ignore"):
            return self._new(self._value * self.precision.cast(other))

    __rmul__ = __mul__

    def __truediv__(self, other):
        # Angle / angle cancels the unit and gives the bare ratio
        if isinstance(other, Angle):
            validate_same_angle_type(self, other)
            with np.errstate(all="ignore"):
                return float(self._value / other._value)
        if not is_real_scalar(other):
            return NotImplemented
        with np.errstate(all="ignore"):
            return self._new(self._value / self.precision.cast(other))

    # Comparison

    def _comparable(self, other) -> bool:
        if not isinstance(other, Angle):
            return False
        validate_same_angle_type(self, other)
        return True

    def __eq__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return bool(self._value == other._value)

    def __ne__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return bool(self._value != other._value)

    def __lt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return bool(self._value < other._value)

    def __le__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return bool(self._value <= other._value)

    def __gt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return bool(self._value > other._value)

    def __ge__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return bool(self._value >= other._value)

    def __hash__(self):
        return hash((type(self), float(self._value)))

    def __repr__(self) -> str:
        return format_angle(self.unit.value, self._value)


class Deg(Angle, unit=Unit.DEGREE, precision=Precision.SINGLE):
    """Float degrees."""

    __slots__ = ()


class Rad(Angle, unit=Unit.RADIAN, precision=Precision.SINGLE):
    """Float radians."""

    __slots__ = ()


class Degd(Angle, unit=Unit.DEGREE, precision=Precision.DOUBLE):
    """Double degrees."""

    __slots__ = ()


class Radd(Angle, unit=Unit.RADIAN, precision=Precision.DOUBLE):
    """Double radians."""

    __slots__ = ()
