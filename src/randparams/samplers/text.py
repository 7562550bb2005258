"""Unicode string sampling filtered by block.

Candidates are drawn uniformly from the whole code-point space and accepted
only when their block is one of ``cfg.unicode_blocks``; accepted code points
are appended in generation order until ``cfg.length`` have been collected.
The draw always spans the full code-point space so that a seed yields the same
string however the filter is spelled.

A zero-length request draws nothing and always succeeds.  Otherwise a filter
naming only unknown blocks can never be satisfied and is rejected before
drawing.  ``cfg.max_attempts`` optionally caps the number of draws;
without it a filter with at least one known block terminates with
probability one but has no latency bound.
"""

from __future__ import annotations

from ..config import Randomize
from ..generator import SeededGenerator
from ..unicode_blocks import UnicodeBlockTable, load_block_table
from ..utils.errors import UnresolvableBlockFilterError


def sample_string(
    cfg: Randomize,
    rng: SeededGenerator,
    *,
    table: UnicodeBlockTable | None = None,
) -> str:
    """Return a string of exactly ``cfg.length`` code points from the requested blocks.

    Raises
    ------
    UnresolvableBlockFilterError
        If no requested block exists, or ``cfg.max_attempts`` draws did not
        complete the string.
    """

    if cfg.length == 0:
        return ""

    table = table if table is not None else load_block_table()
    wanted = table.known(cfg.unicode_blocks)
    if not wanted:
        names = ", ".join(sorted(cfg.unicode_blocks))
        raise UnresolvableBlockFilterError(f"No known Unicode block among: {names}")

    chars: list[str] = []
    attempts = 0
    for code_point in rng.code_points():
        attempts += 1
        if table.name_of(code_point) in wanted:
            chars.append(chr(code_point))
            if len(chars) == cfg.length:
                break
        if cfg.max_attempts is not None and attempts >= cfg.max_attempts:
            raise UnresolvableBlockFilterError(
                f"Collected {len(chars)} of {cfg.length} code points "
                f"after {attempts} draws"
            )
    return "".join(chars)


__all__ = ["sample_string"]
