"""Decorator that fills ``Annotated[..., Randomize(...)]`` parameters.

Example::

    from typing import Annotated

    from randparams import Randomize, randomized


    @randomized
    def test_roundtrip(payload: Annotated[bytes, Randomize(length=16)]) -> None:
        assert decode(encode(payload)) == payload

Randomized parameters are removed from the wrapper's signature so that pytest
does not try to resolve them as fixtures; the remaining parameters (fixtures,
``parametrize`` arguments) pass through unchanged.  A value passed explicitly
by keyword is used as-is.  Parameters whose annotation has no registered kind
are left alone, so the host reports them as it would any unknown argument.
"""

from __future__ import annotations

import functools
import inspect
import os
import typing
from collections.abc import Callable
from typing import Annotated, Any, TypeVar, overload

from .config import Randomize, load_config
from .context import CallSiteContext
from .kinds import kind_for
from .registry import DEFAULT_REGISTRY
from .resolver import ParameterRequest, ParameterResolver
from .utils.logging import ensure_level

F = TypeVar("F", bound=Callable[..., Any])


def _declaring_scope(func: Callable[..., Any]) -> str:
    qualname = getattr(func, "__qualname__", func.__name__)
    parts = [part for part in qualname.split(".") if part != "<locals>"]
    if len(parts) > 1:
        return parts[-2]
    module = getattr(func, "__module__", None) or "__main__"
    return module.rsplit(".", 1)[-1]


def _randomized_requests(func: Callable[..., Any]) -> dict[str, ParameterRequest]:
    hints = typing.get_type_hints(func, include_extras=True)
    scope = _declaring_scope(func)
    requests: dict[str, ParameterRequest] = {}
    for name in inspect.signature(func).parameters:
        hint = hints.get(name)
        if typing.get_origin(hint) is not Annotated:
            continue
        base, *metadata = typing.get_args(hint)
        config = next((item for item in metadata if isinstance(item, Randomize)), None)
        if config is None:
            continue
        requests[name] = ParameterRequest(base, config, CallSiteContext(scope, func.__name__, name))
    return requests


@overload
def randomized(func: F) -> F: ...


@overload
def randomized(
    *,
    resolver: ParameterResolver | None = None,
    settings_path: str | os.PathLike[str] | None = None,
) -> Callable[[F], F]: ...


def randomized(
    func: F | None = None,
    *,
    resolver: ParameterResolver | None = None,
    settings_path: str | os.PathLike[str] | None = None,
) -> F | Callable[[F], F]:
    """Resolve ``Randomize``-annotated parameters of ``func`` on every call.

    Parameters
    ----------
    resolver:
        Resolver to use.  By default a new one is built per call from
        :func:`~randparams.config.load_config` so that environment overrides
        such as ``RANDPARAMS_SEED`` are honoured at call time.
    settings_path:
        Optional YAML file merged over the package defaults when no
        ``resolver`` is given.
    """

    def decorate(target: F) -> F:
        registry = resolver.registry if resolver is not None else DEFAULT_REGISTRY
        requests = {
            name: request
            for name, request in _randomized_requests(target).items()
            if registry.supports(kind_for(request.annotation))
        }
        signature = inspect.signature(target)

        @functools.wraps(target)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            active = resolver
            if active is None:
                settings = load_config(settings_path)
                ensure_level(settings.log_level)
                active = ParameterResolver(settings)
            for name, request in requests.items():
                if name not in kwargs:
                    kwargs[name] = active.resolve_parameter(request)
            return target(*args, **kwargs)

        if requests:
            wrapper.__signature__ = signature.replace(  # type: ignore[attr-defined]
                parameters=[p for p in signature.parameters.values() if p.name not in requests]
            )
        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorate(func)
    return decorate


__all__ = ["randomized"]
