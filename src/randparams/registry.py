"""Kind-keyed registry of generation strategies.

A strategy receives a :class:`GenerationRequest`, builds its own
:class:`~randparams.generator.SeededGenerator` through
:func:`~randparams.seed.seeded_generator` and applies one sampler.  No
generator outlives a call except for :attr:`ValueKind.RANDOM`, where the
generator itself is the returned value and belongs to the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from . import samplers
from .config import Randomize
from .context import CallSiteContext
from .generator import SeededGenerator
from .kinds import ValueKind, kind_for
from .seed import LogSink, seeded_generator
from .utils.errors import UnsupportedTypeError


@dataclass(slots=True, frozen=True)
class GenerationRequest:
    """One generation call: the kind, its constraints and the call site."""

    kind: ValueKind
    config: Randomize
    context: CallSiteContext
    sink: LogSink | None = None

    def generator(self) -> SeededGenerator:
        return seeded_generator(self.config, self.context, sink=self.sink)


Strategy = Callable[[GenerationRequest], Any]
Sampler = Callable[[Randomize, SeededGenerator], Any]


def _sampling(sampler: Sampler) -> Strategy:
    def strategy(request: GenerationRequest) -> Any:
        return sampler(request.config, request.generator())

    strategy.__name__ = f"generate_{sampler.__name__.removeprefix('sample_')}"
    return strategy


def _generate_random(request: GenerationRequest) -> SeededGenerator:
    return request.generator()


class TypeRegistry:
    """Immutable mapping from :class:`ValueKind` to generation strategy."""

    def __init__(self, strategies: Mapping[ValueKind, Strategy]) -> None:
        self._strategies: Mapping[ValueKind, Strategy] = MappingProxyType(dict(strategies))

    @property
    def kinds(self) -> frozenset[ValueKind]:
        return frozenset(self._strategies)

    def supports(self, kind: ValueKind | None) -> bool:
        return kind is not None and kind in self._strategies

    def resolve(self, request: GenerationRequest) -> Any:
        """Generate a value for ``request``.

        Raises
        ------
        UnsupportedTypeError
            If no strategy is registered for ``request.kind``.
        """

        strategy = self._strategies.get(request.kind)
        if strategy is None:
            raise UnsupportedTypeError(f"No strategy registered for {request.kind.name}")
        return strategy(request)


DEFAULT_REGISTRY = TypeRegistry(
    {
        ValueKind.RANDOM: _generate_random,
        ValueKind.INT: _sampling(samplers.sample_int),
        ValueKind.LONG: _sampling(samplers.sample_long),
        ValueKind.FLOAT: _sampling(samplers.sample_float),
        ValueKind.DOUBLE: _sampling(samplers.sample_double),
        ValueKind.BIG_INTEGER: _sampling(samplers.sample_big_integer),
        ValueKind.BIG_DECIMAL: _sampling(samplers.sample_big_decimal),
        ValueKind.BYTES: _sampling(samplers.sample_bytes),
        ValueKind.STRING: _sampling(samplers.sample_string),
    }
)


def generate(
    kind_or_type: Any,
    config: Randomize | None = None,
    *,
    context: CallSiteContext | None = None,
    sink: LogSink | None = None,
    registry: TypeRegistry = DEFAULT_REGISTRY,
) -> Any:
    """Generate one value outside of any test host.

    ``kind_or_type`` is a :class:`ValueKind` or an annotation understood by
    :func:`~randparams.kinds.kind_for` (``int``, ``str``, ``Long``...).
    """

    kind = kind_for(kind_or_type)
    if kind is None:
        raise UnsupportedTypeError(f"No value kind for {kind_or_type!r}")
    if context is None:
        context = CallSiteContext("randparams", "generate", kind.value)
    request = GenerationRequest(kind, config if config is not None else Randomize(), context, sink)
    return registry.resolve(request)


__all__ = [
    "DEFAULT_REGISTRY",
    "GenerationRequest",
    "Strategy",
    "TypeRegistry",
    "generate",
]
