"""Sampling algorithms applied to a :class:`~randparams.generator.SeededGenerator`."""

from .binary import sample_bytes
from .numeric import (
    sample_big_decimal,
    sample_big_integer,
    sample_double,
    sample_float,
    sample_int,
    sample_long,
)
from .text import sample_string

__all__ = [
    "sample_big_decimal",
    "sample_big_integer",
    "sample_bytes",
    "sample_double",
    "sample_float",
    "sample_int",
    "sample_long",
    "sample_string",
]
