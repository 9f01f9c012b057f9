"""Deterministic text rendering of angle and bool vector values."""

from typing import Iterable

import numpy as np

from unitmath.domain.constants import (
    BIT_GROUP_SIZE,
    DOUBLE_PRECISION_DIGITS,
    SINGLE_PRECISION_DIGITS,
)


def format_scalar(value: np.floating) -> str:
    """Render a float the way a debug printer would.

    Single precision values use 6 significant digits, everything else 15.
    Output does not depend on the locale.
    """
    if isinstance(value, np.float32):
        digits = SINGLE_PRECISION_DIGITS
    else:
        digits = DOUBLE_PRECISION_DIGITS
    return format(float(value), f".{digits}g")


def format_angle(unit_name: str, value: np.floating) -> str:
    return f"{unit_name}({format_scalar(value)})"


def format_bits(bits: Iterable[bool]) -> str:
    """Render bits in index order, grouped by eight."""
    chars = ["1" if bit else "0" for bit in bits]
    groups = [
        "".join(chars[i : i + BIT_GROUP_SIZE])
        for i in range(0, len(chars), BIT_GROUP_SIZE)
    ]
    return " ".join(groups)


def format_bool_vector(bits: Iterable[bool]) -> str:
    return f"BoolVector({format_bits(bits)})"
