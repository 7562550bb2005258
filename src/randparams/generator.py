"""Seeded pseudo-random generator with bounded-range helpers.

:class:`SeededGenerator` is a :class:`random.Random` (Mersenne Twister) bound
to one seed.  Besides the stdlib API it offers the bounded draws the samplers
need.  All bounded helpers use the half-open convention ``[low, high)`` and
raise :class:`~randparams.utils.errors.UnsupportedRangeError` for empty or
unusable ranges instead of wrapping around.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterator

from .utils.constants import INT64_MAX, INT64_MIN, MAX_CODE_POINT, MIN_CODE_POINT
from .utils.errors import UnsupportedRangeError
from .utils.float32 import is_finite_float32, next_down_float32, to_float32

_FLOAT_UNIT = 2.0**-24
_SEED_MASK = 2**64 - 1


class SeededGenerator(random.Random):
    """Mersenne Twister generator that remembers the seed it was built from.

    Seeds are signed 64-bit integers.  The generator state is seeded with the
    two's complement bit pattern of the seed, so ``-n`` and ``n`` give
    different streams; ``initial_seed`` keeps the signed value.
    """

    def __init__(self, seed: int) -> None:
        if not INT64_MIN <= seed <= INT64_MAX:
            raise ValueError(f"seed must fit in 64 bits, got {seed}")
        super().__init__(seed & _SEED_MASK)
        self.initial_seed: int = seed

    def __repr__(self) -> str:
        return f"SeededGenerator(seed={self.initial_seed})"

    def __reduce__(self) -> tuple[type[SeededGenerator], tuple[int], tuple[object, ...]]:
        return (self.__class__, (self.initial_seed,), self.getstate())

    # -- integers ---------------------------------------------------------

    def _bounded_integer(self, low: int, high: int) -> int:
        if low >= high:
            raise UnsupportedRangeError(f"empty integer range [{low}, {high})")
        return self.randrange(low, high)

    def next_int(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from ``[low, high)``."""

        return self._bounded_integer(low, high)

    def next_long(self, low: int, high: int) -> int:
        """Return a 64-bit style integer uniformly drawn from ``[low, high)``."""

        return self._bounded_integer(low, high)

    # -- floating point ---------------------------------------------------

    def next_double(self, low: float | None = None, high: float | None = None) -> float:
        """Return a float from ``[0, 1)`` or, with bounds, from ``[low, high)``."""

        if low is None and high is None:
            return self.random()
        if low is None or high is None:
            raise TypeError("next_double() needs both bounds or neither")
        if not (low < high and math.isfinite(high - low)):
            raise UnsupportedRangeError(f"unusable float range [{low}, {high})")
        value = self.random() * (high - low) + low
        if value >= high:
            value = math.nextafter(high, -math.inf)
        return value

    def next_float(self, low: float | None = None, high: float | None = None) -> float:
        """32-bit variant of :meth:`next_double`; results are exact binary32 values."""

        unit = self.getrandbits(24) * _FLOAT_UNIT
        if low is None and high is None:
            return unit
        if low is None or high is None:
            raise TypeError("next_float() needs both bounds or neither")
        low, high = to_float32(low), to_float32(high)
        if not (low < high and is_finite_float32(high - low)):
            raise UnsupportedRangeError(f"unusable float range [{low}, {high})")
        value = to_float32(unit * (high - low) + low)
        if value >= high:
            value = next_down_float32(high)
        return value

    # -- streams ----------------------------------------------------------

    def code_points(self) -> Iterator[int]:
        """Yield code points drawn uniformly from ``[MIN_CODE_POINT, MAX_CODE_POINT)``."""

        while True:
            yield self.randrange(MIN_CODE_POINT, MAX_CODE_POINT)

    def next_bytes(self, length: int) -> bytes:
        """Return ``length`` independently uniform bytes."""

        if length < 0:
            raise ValueError("length must be non-negative")
        return self.randbytes(length)


__all__ = ["SeededGenerator"]
