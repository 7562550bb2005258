"""Host-facing parameter resolution boundary.

A host test framework asks :meth:`ParameterResolver.supports_parameter`
whether it should hand a parameter over and then calls
:meth:`ParameterResolver.resolve_parameter`.  A parameter is supported only
when it carries a :class:`~randparams.config.Randomize` configuration and its
annotation maps to a registered :class:`~randparams.kinds.ValueKind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .config import EngineSettings, Randomize, load_config
from .context import CallSiteContext
from .kinds import kind_for
from .registry import DEFAULT_REGISTRY, GenerationRequest, TypeRegistry
from .seed import LogSink
from .utils.errors import GenerationError, ParameterResolutionError


@dataclass(slots=True, frozen=True)
class ParameterRequest:
    """A parameter offered by the host: its annotation, configuration and site."""

    annotation: Any
    config: Randomize | None
    context: CallSiteContext


class ParameterResolver:
    """Resolve randomized parameters against a :class:`TypeRegistry`."""

    def __init__(
        self,
        settings: EngineSettings | None = None,
        *,
        registry: TypeRegistry = DEFAULT_REGISTRY,
        sink: LogSink | None = None,
    ) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        settings:
            Defaults merged under every parameter's configuration.  Loaded with
            :func:`~randparams.config.load_config` when omitted.
        registry:
            Strategy table used to generate values.
        sink:
            Optional callable receiving the seed log line instead of the
            package logger.
        """

        self.settings: EngineSettings = settings if settings is not None else load_config()
        self.registry = registry
        self.sink = sink

    def supports_parameter(self, request: ParameterRequest) -> bool:
        return request.config is not None and self.registry.supports(kind_for(request.annotation))

    def resolve_parameter(self, request: ParameterRequest) -> Any:
        """Return a value for ``request``.

        Raises
        ------
        ParameterResolutionError
            If the parameter is unsupported or generation fails.
        """

        kind = kind_for(request.annotation)
        if request.config is None or kind is None or not self.registry.supports(kind):
            raise ParameterResolutionError(
                f"No random value available for {request.context.describe()} "
                f"of type {request.annotation!r}"
            )
        config = self.settings.apply(request.config)
        generation = GenerationRequest(kind, config, request.context, self.sink)
        try:
            return self.registry.resolve(generation)
        except GenerationError as exc:
            raise ParameterResolutionError(
                f"Failed to resolve {request.context.describe()}: {exc}"
            ) from exc


__all__ = ["ParameterRequest", "ParameterResolver"]
