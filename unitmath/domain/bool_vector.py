# unitmath/domain/bool_vector.py
"""
Fixed-size packed boolean vectors.

Bit ``i`` lives in byte ``i // 8`` at bit position ``i % 8``. Storage bits
past the vector size (padding) are zero after every operation, so
byte-wise comparison and the ``all``/``any``/``none`` queries only need
the precomputed valid-bit mask.

    >>> v = BoolVector4.from_packed(0b1010)
    >>> v[1], v[2]
    (True, False)
    >>> ~v
    BoolVector(1010)
"""

import types

import numpy as np

from unitmath.domain.constants import BITS_PER_BYTE, BYTE_MASK
from unitmath.domain.exceptions import BitIndexException
from unitmath.domain.units import ZeroInit
from unitmath.domain.validators import (
    validate_bit_index,
    validate_same_size,
    validate_vector_size,
)
from unitmath.infrastructure.output.formatters import format_bool_vector
from unitmath.logging_config import get_logger

logger = get_logger(__name__)

_VECTOR_TYPES: dict[int, type["BoolVector"]] = {}


def _valid_bit_mask(size: int) -> np.ndarray:
    data_size = -(-size // BITS_PER_BYTE)
    mask = np.full(data_size, BYTE_MASK, dtype=np.uint8)
    remainder = size % BITS_PER_BYTE
    if remainder:
        mask[-1] = (1 << remainder) - 1
    mask.setflags(write=False)
    return mask


def bool_vector_type(size: int) -> type["BoolVector"]:
    """Return the bool vector class holding ``size`` bits, creating it once."""
    n = validate_vector_size(size)
    if n not in _VECTOR_TYPES:
        types.new_class(
            f"BoolVector{n}",
            (BoolVector,),
            {"size": n},
            lambda ns: ns.update(
                __slots__=(),
                __module__=__name__,
                __doc__=f"{n}-component bool vector",
            ),
        )
    return _VECTOR_TYPES[n]


class BoolVector:
    """
    Packed vector of SIZE booleans.

    Not instantiable itself; sized types are declared as

        class BoolVector4(BoolVector, size=4): ...

    or obtained from ``bool_vector_type(n)``. Bitwise operators and
    equality accept only vectors of the same size.
    """

    __slots__ = ("_data",)
    __hash__ = None

    SIZE: int
    DATA_SIZE: int
    _MASK: np.ndarray

    def __init_subclass__(cls, size: int | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if size is None:
            if not hasattr(cls, "SIZE"):
                raise TypeError(f"{cls.__name__} needs size=")
            return

        n = validate_vector_size(size)
        if n in _VECTOR_TYPES:
            raise TypeError(
                f"{_VECTOR_TYPES[n].__name__} is already the bool vector type of size {n}"
            )
        cls.SIZE = n
        cls.DATA_SIZE = -(-n // BITS_PER_BYTE)
        cls._MASK = _valid_bit_mask(n)
        _VECTOR_TYPES[n] = cls

    def __init__(self, value=ZeroInit):
        """
        Args:
            value: ZeroInit (default) for all bits false, a bool to set all
                bits to, or packed bits accepted by ``from_packed``.
        """
        if type(self) is BoolVector:
            raise TypeError("BoolVector is generic, use bool_vector_type(n)")

        if value is ZeroInit:
            self._data = np.zeros(self.DATA_SIZE, dtype=np.uint8)
        elif isinstance(value, (bool, np.bool_)):
            self._data = self._filled(bool(value))
        else:
            self._data = self._pack(value)

    @classmethod
    def _from_data(cls, data: np.ndarray) -> "BoolVector":
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def _filled(cls, value: bool) -> np.ndarray:
        if not value:
            return np.zeros(cls.DATA_SIZE, dtype=np.uint8)
        return cls._MASK.copy()

    @staticmethod
    def _byte_values(source) -> bytes:
        """Read a bytes-like object or a sequence of byte values by value."""
        if isinstance(source, (bytes, bytearray, memoryview)):
            return bytes(source)

        values = np.asarray(source)
        if values.ndim != 1:
            raise TypeError(
                f"Packed bits must be a flat sequence of byte values, got {type(source).__name__}"
            )
        if values.size == 0:
            return b""
        if not np.issubdtype(values.dtype, np.integer):
            raise TypeError(f"Byte values must be integers, got {values.dtype}")
        if np.any(values < 0) or np.any(values > BYTE_MASK):
            raise ValueError("Byte values must be in range(0, 256)")
        return values.astype(np.uint8).tobytes()

    @classmethod
    def _pack(cls, source) -> np.ndarray:
        if isinstance(source, BoolVector):
            validate_same_size(cls, source)
            return source._data.copy()

        if isinstance(source, (int, np.integer)):
            pattern = int(source) & ((1 << cls.SIZE) - 1)
            raw = pattern.to_bytes(cls.DATA_SIZE, "little")
            discarded = pattern != int(source)
        else:
            raw = cls._byte_values(source)
            discarded = any(raw[cls.DATA_SIZE :])

        data = np.zeros(cls.DATA_SIZE, dtype=np.uint8)
        head = np.frombuffer(raw[: cls.DATA_SIZE], dtype=np.uint8)
        data[: head.size] = head
        masked = data & cls._MASK

        if discarded or not np.array_equal(masked, data):
            logger.debug(f"Discarded bits past position {cls.SIZE} of packed input")
        return masked

    @classmethod
    def zero(cls) -> "BoolVector":
        return cls(ZeroInit)

    @classmethod
    def fill(cls, value: bool) -> "BoolVector":
        """All SIZE bits set to value, padding left zero."""
        return cls._from_data(cls._filled(bool(value)))

    @classmethod
    def from_packed(cls, source) -> "BoolVector":
        """
        Construct from packed bits.

        Args:
            source: An int bit pattern (bit i is 1 << i) or a bytes-like
                object / sequence of byte values, least significant byte
                first. Bits at positions >= SIZE are dropped.
        """
        return cls._from_data(cls._pack(source))

    def copy(self) -> "BoolVector":
        return self._from_data(self._data.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def to_bytes(self) -> bytes:
        """Packed storage, padding bits included (always zero)."""
        return self._data.tobytes()

    # Bit access

    def _position(self, index) -> int:
        try:
            return validate_bit_index(index, self.SIZE)
        except BitIndexException:
            logger.debug(f"Rejected bit index {index!r} for {type(self).__name__}")
            raise

    def get(self, index: int) -> bool:
        position = self._position(index)
        byte = int(self._data[position // BITS_PER_BYTE])
        return bool(byte >> (position % BITS_PER_BYTE) & 1)

    def set(self, index: int, value: bool) -> None:
        position = self._position(index)
        offset = position // BITS_PER_BYTE
        bit = 1 << (position % BITS_PER_BYTE)
        byte = int(self._data[offset])
        if value:
            byte |= bit
        else:
            byte &= ~bit & BYTE_MASK
        self._data[offset] = byte

    __getitem__ = get
    __setitem__ = set

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self):
        bits = np.unpackbits(self._data, count=self.SIZE, bitorder="little")
        for bit in bits:
            yield bool(bit)

    # Queries

    def all(self) -> bool:
        return bool(np.array_equal(self._data & self._MASK, self._MASK))

    def none(self) -> bool:
        return not self.any()

    def any(self) -> bool:
        return bool(np.any(self._data & self._MASK))

    def __bool__(self) -> bool:
        return self.any()

    # Bitwise algebra

    def _operand(self, other) -> bool:
        if not isinstance(other, BoolVector):
            return False
        validate_same_size(self, other)
        return True

    def __invert__(self) -> "BoolVector":
        # Inverting flips the padding too, mask it back to zero
        return self._from_data(~self._data & self._MASK)

    def __and__(self, other):
        if not self._operand(other):
            return NotImplemented
        return self._from_data(self._data & other._data)

    def __or__(self, other):
        if not self._operand(other):
            return NotImplemented
        return self._from_data(self._data | other._data)

    def __xor__(self, other):
        if not self._operand(other):
            return NotImplemented
        return self._from_data(self._data ^ other._data)

    def __iand__(self, other):
        if not self._operand(other):
            return NotImplemented
        np.bitwise_and(self._data, other._data, out=self._data)
        return self

    def __ior__(self, other):
        if not self._operand(other):
            return NotImplemented
        np.bitwise_or(self._data, other._data, out=self._data)
        return self

    def __ixor__(self, other):
        if not self._operand(other):
            return NotImplemented
        np.bitwise_xor(self._data, other._data, out=self._data)
        return self

    # Comparison

    def __eq__(self, other):
        if not self._operand(other):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other):
        if not self._operand(other):
            return NotImplemented
        return not np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return format_bool_vector(self)


class BoolVector2(BoolVector, size=2):
    """Two-component bool vector."""

    __slots__ = ()


class BoolVector3(BoolVector, size=3):
    """Three-component bool vector."""

    __slots__ = ()


class BoolVector4(BoolVector, size=4):
    """Four-component bool vector."""

    __slots__ = ()
