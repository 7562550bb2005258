"""Seed resolution and the reproducibility log line.

A request either carries an explicit seed or leaves it unset (``None``), in
which case a seed is derived from a monotonic high-resolution clock.  Either
way exactly one record ``Using seed <seed> for <context>`` is emitted so that
the value can be regenerated later by passing the same seed explicitly.

The record goes to a pluggable sink, a callable taking the message string.
Without a sink the package logger is used at ``INFO``.  A failing sink never
fails generation; the failure is reported at ``DEBUG`` on the package logger.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Final

from .config import Randomize
from .context import CallSiteContext
from .generator import SeededGenerator
from .utils.logging import get_logger

LogSink = Callable[[str], None]

UNSET_SEED: Final = None

_LOGGER = get_logger(__name__)


def resolve_seed(seed: int | None) -> int:
    """Return ``seed`` or, when it is unset, a clock-derived seed."""

    if seed is UNSET_SEED:
        return time.perf_counter_ns()
    return seed


def seed_message(seed: int, context: CallSiteContext) -> str:
    return f"Using seed {seed} for {context.describe()}"


def log_seed(seed: int, context: CallSiteContext, sink: LogSink | None = None) -> None:
    """Emit the reproducibility record for ``seed`` at ``context``."""

    message = seed_message(seed, context)
    if sink is None:
        _LOGGER.info(message)
        return
    try:
        sink(message)
    except Exception:
        _LOGGER.debug("Seed log sink failed for %s", context.describe(), exc_info=True)


def seeded_generator(
    config: Randomize,
    context: CallSiteContext,
    *,
    sink: LogSink | None = None,
) -> SeededGenerator:
    """Return a fresh generator for one request and log its seed."""

    seed = resolve_seed(config.seed)
    log_seed(seed, context, sink)
    return SeededGenerator(seed)


__all__ = [
    "LogSink",
    "UNSET_SEED",
    "resolve_seed",
    "seed_message",
    "log_seed",
    "seeded_generator",
]
