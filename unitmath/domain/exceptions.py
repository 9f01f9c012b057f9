class UnitMathException(Exception):
    """
    Base exception for all unitmath errors.
    """


class BitIndexException(UnitMathException, IndexError):
    """
    Raised when a bit index is outside [0, size) of a bool vector.
    Negative indices are never wrapped.
    """


class TypeMismatchException(UnitMathException, TypeError):
    """
    Base exception for operands whose type does not match the operation.
    """


class UnitMismatchException(TypeMismatchException):
    """
    Raised when angles of different unit or precision are combined,
    or when a conversion between them is not defined.
    """


class SizeMismatchException(TypeMismatchException):
    """
    Raised when bool vectors of different sizes are combined.
    """


class InvalidScalarException(UnitMathException, TypeError):
    """
    Raised when a bare real number is required but something else was given.
    """
