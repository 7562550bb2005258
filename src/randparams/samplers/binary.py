"""Fixed-length byte string sampling."""

from __future__ import annotations

from ..config import Randomize
from ..generator import SeededGenerator


def sample_bytes(cfg: Randomize, rng: SeededGenerator) -> bytes:
    """Return exactly ``cfg.length`` uniformly random bytes."""

    return rng.next_bytes(cfg.length)


__all__ = ["sample_bytes"]
