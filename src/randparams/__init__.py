"""Reproducible random values for test parameters.

The package resolves parameters annotated with :class:`Randomize` to
pseudo-random values.  Every resolved value is produced by a fresh
:class:`SeededGenerator` whose seed is logged so that a failing run can be
replayed exactly.
"""

from __future__ import annotations

from .config import EngineSettings, Randomize, load_config
from .context import CallSiteContext
from .decorator import randomized
from .generator import SeededGenerator
from .kinds import BigInteger, Float32, Long, ValueKind, kind_for
from .registry import DEFAULT_REGISTRY, GenerationRequest, TypeRegistry, generate
from .resolver import ParameterRequest, ParameterResolver
from .utils.errors import (
    GenerationError,
    ParameterResolutionError,
    UnresolvableBlockFilterError,
    UnsupportedRangeError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "BigInteger",
    "CallSiteContext",
    "DEFAULT_REGISTRY",
    "EngineSettings",
    "Float32",
    "GenerationError",
    "GenerationRequest",
    "Long",
    "ParameterRequest",
    "ParameterResolutionError",
    "ParameterResolver",
    "Randomize",
    "SeededGenerator",
    "TypeRegistry",
    "UnresolvableBlockFilterError",
    "UnsupportedRangeError",
    "UnsupportedTypeError",
    "ValueKind",
    "generate",
    "kind_for",
    "load_config",
    "randomized",
    "__version__",
]
