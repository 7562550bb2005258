"""Bounded numeric sampling.

Every sampler draws from ``[min, max)`` using the bounds of a
:class:`~randparams.config.Randomize`.  Integer samplers reject empty ranges
with :class:`~randparams.utils.errors.UnsupportedRangeError`.

Floating point samplers first compute ``max - min``.  With the default bounds
(the most negative and most positive finite values) that difference overflows,
so an unusable difference falls back to the unit interval ``[0, 1)`` rather
than producing infinities or NaN.  ``float`` bounds are checked in 32-bit
precision, ``double`` bounds in 64-bit precision.
"""

from __future__ import annotations

import math
from decimal import Decimal

from ..config import Randomize
from ..generator import SeededGenerator
from ..utils.float32 import is_finite_float32


def sample_int(cfg: Randomize, rng: SeededGenerator) -> int:
    return rng.next_int(cfg.int_min, cfg.int_max)


def sample_long(cfg: Randomize, rng: SeededGenerator) -> int:
    return rng.next_long(cfg.long_min, cfg.long_max)


def sample_float(cfg: Randomize, rng: SeededGenerator) -> float:
    """Return a 32-bit float from ``[float_min, float_max)`` or ``[0, 1)``."""

    if not is_finite_float32(cfg.float_max - cfg.float_min):
        return rng.next_float()
    return rng.next_float(cfg.float_min, cfg.float_max)


def sample_double(cfg: Randomize, rng: SeededGenerator) -> float:
    """Return a float from ``[double_min, double_max)`` or ``[0, 1)``."""

    if not math.isfinite(cfg.double_max - cfg.double_min):
        return rng.next_double()
    return rng.next_double(cfg.double_min, cfg.double_max)


def sample_big_integer(cfg: Randomize, rng: SeededGenerator) -> int:
    """Arbitrary-precision integer drawn with the ``long`` bounds."""

    return sample_long(cfg, rng)


def sample_big_decimal(cfg: Randomize, rng: SeededGenerator) -> Decimal:
    """Decimal built from the shortest representation of a ``double`` draw."""

    return Decimal(repr(sample_double(cfg, rng)))


__all__ = [
    "sample_int",
    "sample_long",
    "sample_float",
    "sample_double",
    "sample_big_integer",
    "sample_big_decimal",
]
