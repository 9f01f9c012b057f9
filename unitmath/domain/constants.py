"""Constants used across the package."""

import math

# Angle conversion, applied in the target precision
PI = math.pi
DEGREES_PER_HALF_TURN = 180.0

# Significant digits used when rendering values, per precision
SINGLE_PRECISION_DIGITS = 6
DOUBLE_PRECISION_DIGITS = 15

# Bit vector storage
BITS_PER_BYTE = 8
BYTE_MASK = 0xFF
BIT_GROUP_SIZE = 8  # bits rendered per space-separated group
