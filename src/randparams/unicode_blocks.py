"""Unicode block lookup backed by the packaged ``unicode_blocks.yml`` table.

The table is read once with PyYAML through :mod:`importlib.resources` and is
immutable afterwards.  Lookups bisect over the sorted block starts; code
points that fall between blocks belong to no block.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources as importlib_resources

import yaml

from .config.schema import canonical_block_name


@dataclass(slots=True, frozen=True)
class UnicodeBlock:
    """A named inclusive range of code points."""

    name: str
    first: int
    last: int

    def __contains__(self, code_point: object) -> bool:
        return isinstance(code_point, int) and self.first <= code_point <= self.last

    @property
    def size(self) -> int:
        return self.last - self.first + 1


class UnicodeBlockTable:
    """Sorted, non-overlapping collection of :class:`UnicodeBlock` entries."""

    def __init__(self, blocks: Iterable[UnicodeBlock], *, version: str = "") -> None:
        ordered = tuple(sorted(blocks, key=lambda block: block.first))
        for prev, cur in zip(ordered, ordered[1:]):
            if cur.first <= prev.last:
                raise ValueError(f"Unicode blocks {prev.name} and {cur.name} overlap")
        self._blocks = ordered
        self._starts = tuple(block.first for block in ordered)
        self._by_name = {block.name: block for block in ordered}
        self.version = version

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[UnicodeBlock]:
        return iter(self._blocks)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(block.name for block in self._blocks)

    def get(self, name: str) -> UnicodeBlock | None:
        """Return the block called ``name`` (any spelling accepted by
        :func:`~randparams.config.schema.canonical_block_name`)."""

        return self._by_name.get(canonical_block_name(name))

    def block_of(self, code_point: int) -> UnicodeBlock | None:
        idx = bisect.bisect_right(self._starts, code_point) - 1
        if idx < 0:
            return None
        block = self._blocks[idx]
        return block if code_point <= block.last else None

    def name_of(self, code_point: int) -> str | None:
        """Return the block name of ``code_point`` or ``None``."""

        block = self.block_of(code_point)
        return block.name if block is not None else None

    def known(self, names: Iterable[str]) -> frozenset[str]:
        """Return the subset of ``names`` that name a block in this table."""

        return frozenset(name for name in names if name in self._by_name)


@lru_cache(maxsize=1)
def load_block_table() -> UnicodeBlockTable:
    """Load the packaged block table."""

    with (
        importlib_resources.files("randparams")
        .joinpath("data")
        .joinpath("unicode_blocks.yml")
        .open("r", encoding="utf-8") as f
    ):
        raw = yaml.safe_load(f) or {}

    blocks = [
        UnicodeBlock(name=name, first=int(first), last=int(last))
        for name, (first, last) in raw.get("blocks", {}).items()
    ]
    return UnicodeBlockTable(blocks, version=str(raw.get("unicode_version", "")))


__all__ = ["UnicodeBlock", "UnicodeBlockTable", "load_block_table"]
