"""Numeric limits shared by the configuration schema and the samplers."""

from __future__ import annotations

__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "FLOAT32_MAX",
    "FLOAT64_MAX",
    "MIN_CODE_POINT",
    "MAX_CODE_POINT",
    "DEFAULT_LENGTH",
    "DEFAULT_UNICODE_BLOCKS",
]

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Largest finite IEEE 754 binary32 and binary64 values.
FLOAT32_MAX: float = 3.4028234663852886e38
FLOAT64_MAX: float = 1.7976931348623157e308

MIN_CODE_POINT: int = 0x000000
MAX_CODE_POINT: int = 0x10FFFF

DEFAULT_LENGTH: int = 5
DEFAULT_UNICODE_BLOCKS: frozenset[str] = frozenset({"BASIC_LATIN"})
