"""Helpers emulating IEEE 754 binary32 arithmetic on Python floats.

Python floats are binary64.  Values requested as 32-bit floats are rounded
through :mod:`struct` so that range checks and results match what a binary32
computation would produce: a difference that overflows binary32 is treated as
non-finite even though it is finite as a binary64 value.
"""

from __future__ import annotations

import math
import struct

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")

# Smallest positive binary32 subnormal.
FLOAT32_MIN_SUBNORMAL: float = 2.0**-149


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest binary32 value.

    Raises
    ------
    OverflowError
        If ``value`` is finite but rounds beyond the binary32 range.
    """

    return _F32.unpack(_F32.pack(value))[0]


def is_finite_float32(value: float) -> bool:
    """Return ``True`` when ``value`` is finite after rounding to binary32."""

    if not math.isfinite(value):
        return False
    try:
        to_float32(value)
    except OverflowError:
        return False
    return True


def next_down_float32(value: float) -> float:
    """Return the largest binary32 value strictly below ``value``."""

    value = to_float32(value)
    if math.isnan(value) or value == -math.inf:
        return value
    if value == 0.0:
        return -FLOAT32_MIN_SUBNORMAL
    bits = _U32.unpack(_F32.pack(value))[0]
    bits = bits - 1 if value > 0.0 else bits + 1
    return _F32.unpack(_U32.pack(bits))[0]


__all__ = [
    "FLOAT32_MIN_SUBNORMAL",
    "to_float32",
    "is_finite_float32",
    "next_down_float32",
]
