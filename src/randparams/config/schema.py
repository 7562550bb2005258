"""Typed configuration schema and loader for the randparams package."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from ..utils.constants import (
    DEFAULT_LENGTH,
    DEFAULT_UNICODE_BLOCKS,
    FLOAT32_MAX,
    FLOAT64_MAX,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
)
from ..utils.float32 import to_float32

# ---------------------------------------------------------------------------
# Block name normalization
# ---------------------------------------------------------------------------

_NAME_SEPARATORS = re.compile(r"[\s\-]+")


def canonical_block_name(name: str) -> str:
    """Return ``name`` upper-cased with spaces and hyphens replaced by ``_``.

    ``"Latin-1 Supplement"`` becomes ``"LATIN_1_SUPPLEMENT"``; names that are
    already canonical are returned unchanged.
    """

    return _NAME_SEPARATORS.sub("_", name.strip()).upper()


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class Randomize(BaseModel):
    """Constraints for one randomized value.

    Bounds are half-open: ``*_min`` is inclusive and ``*_max`` exclusive.  The
    model does not check that ``min < max``; the samplers reject empty ranges
    when they are actually used.  ``seed=None`` derives a seed from the clock.
    """

    int_min: conint(ge=INT32_MIN, le=INT32_MAX) = INT32_MIN
    int_max: conint(ge=INT32_MIN, le=INT32_MAX) = INT32_MAX
    long_min: conint(ge=INT64_MIN, le=INT64_MAX) = INT64_MIN
    long_max: conint(ge=INT64_MIN, le=INT64_MAX) = INT64_MAX
    float_min: float = -FLOAT32_MAX
    float_max: float = FLOAT32_MAX
    double_min: float = -FLOAT64_MAX
    double_max: float = FLOAT64_MAX
    length: conint(ge=0) = DEFAULT_LENGTH
    seed: conint(ge=INT64_MIN, le=INT64_MAX) | None = None
    unicode_blocks: frozenset[str] = DEFAULT_UNICODE_BLOCKS
    max_attempts: conint(ge=1) | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("float_min", "float_max")
    @classmethod
    def _round_to_float32(cls, value: float) -> float:
        try:
            return to_float32(value)
        except OverflowError:
            raise ValueError(f"{value!r} is outside the 32-bit float range") from None

    @field_validator("unicode_blocks", mode="before")
    @classmethod
    def _normalize_blocks(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, Iterable):
            value = frozenset(
                canonical_block_name(name) if isinstance(name, str) else name for name in value
            )
        return value

    @field_validator("unicode_blocks")
    @classmethod
    def _require_blocks(cls, value: frozenset[str]) -> frozenset[str]:
        if not value:
            raise ValueError("unicode_blocks must name at least one block")
        return value


class EngineSettings(BaseModel):
    """Top-level settings model."""

    schema_version: conint(ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"]
    seed_env: str
    defaults: Randomize

    model_config = ConfigDict(extra="forbid")

    def apply(self, config: Randomize) -> Randomize:
        """Return ``config`` with unset fields taken from ``defaults``."""

        explicit = {name: getattr(config, name) for name in config.model_fields_set}
        return self.defaults.model_copy(update=explicit)


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> EngineSettings:
    """Load settings from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed_env``, which replaces the default
    seed.

    Raises
    ------
    pydantic.ValidationError
        If the merged YAML does not match the schema.
    ValueError
        If the seed environment variable is not a 64-bit integer.
    """

    with (
        importlib_resources.files("randparams.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    settings = EngineSettings.model_validate(merged)

    environ = env if env is not None else os.environ
    raw_seed = environ.get(settings.seed_env)
    if raw_seed is not None and raw_seed.strip():
        try:
            seed = int(raw_seed.strip())
        except ValueError:
            raise ValueError(f"{settings.seed_env} must be an integer, got {raw_seed!r}") from None
        if not INT64_MIN <= seed <= INT64_MAX:
            raise ValueError(f"{settings.seed_env} must fit in 64 bits, got {seed}")
        defaults_with_seed = settings.defaults.model_copy(update={"seed": seed})
        settings = settings.model_copy(update={"defaults": defaults_with_seed})

    return settings


__all__ = [
    "EngineSettings",
    "Randomize",
    "canonical_block_name",
    "deep_merge_dicts",
    "load_config",
]
