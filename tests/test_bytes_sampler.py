from __future__ import annotations

import pytest

from randparams import Randomize, generate
from randparams.generator import SeededGenerator
from randparams.samplers import sample_bytes


def _quiet(_: str) -> None:
    return None


@pytest.mark.parametrize("length", [0, 1, 5, 64])
def test_exact_length(length: int) -> None:
    value = sample_bytes(Randomize(length=length), SeededGenerator(length))
    assert isinstance(value, bytes)
    assert len(value) == length


def test_default_length() -> None:
    assert len(generate(bytes, Randomize(seed=1), sink=_quiet)) == 5


def test_distinct_seeds_differ() -> None:
    a = generate(bytes, Randomize(length=32, seed=1), sink=_quiet)
    b = generate(bytes, Randomize(length=32, seed=2), sink=_quiet)
    assert a != b


def test_same_seed_same_bytes() -> None:
    cfg = Randomize(length=16, seed=99)
    assert generate(bytes, cfg, sink=_quiet) == generate(bytes, cfg, sink=_quiet)


def test_full_byte_range_reachable() -> None:
    value = sample_bytes(Randomize(length=20_000), SeededGenerator(3))
    assert set(value) == set(range(256))


@pytest.mark.parametrize("seed", [1, 5, 2**62])
def test_negated_seed_differs(seed: int) -> None:
    a = generate(bytes, Randomize(length=16, seed=seed), sink=_quiet)
    b = generate(bytes, Randomize(length=16, seed=-seed), sink=_quiet)
    assert a != b


def test_extreme_seeds_all_differ() -> None:
    seeds = [0, 1, -1, 2**63 - 1, -(2**63), -(2**63) + 1]
    values = {generate(bytes, Randomize(length=16, seed=seed), sink=_quiet) for seed in seeds}
    assert len(values) == len(seeds)
