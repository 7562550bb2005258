"""Typer-based command line interface.

``generate`` replays values from the shell: copy the seed from a ``Using seed
<seed> for <context>`` log line and pass it with the same constraints to get
the exact value a test received.  ``blocks`` lists the Unicode block names
accepted by ``--block`` or reports the block of each character of a text.

Exit codes
----------
0 success
4 configuration error (invalid kind, option values or config file)
5 generation error (empty range, unresolvable block filter)
"""

from __future__ import annotations

import json
import os
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .config import load_config
from .config.schema import Randomize
from .context import CallSiteContext
from .generator import SeededGenerator
from .kinds import ValueKind
from .registry import DEFAULT_REGISTRY, GenerationRequest
from .unicode_blocks import load_block_table
from .utils.errors import GenerationError
from .utils.logging import configure_logging, reset_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="randparams",
    help="Reproducible random values. Use 'randparams generate' to replay a logged seed.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def format_value(value: Any) -> str:
    """Render a generated value on one line."""

    if isinstance(value, SeededGenerator):
        return f"seed={value.initial_seed}"
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, Decimal):
        return str(value)
    return repr(value)


@app.callback()
def main() -> None:
    """Entry point for the randparams command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    kind: str = typer.Argument(  # noqa: B008
        ...,
        help="Value kind [random|int|long|float|double|big-integer|big-decimal|bytes|string]",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Explicit seed"),  # noqa: B008
    int_min: Optional[int] = typer.Option(None, "--int-min"),  # noqa: B008
    int_max: Optional[int] = typer.Option(None, "--int-max"),  # noqa: B008
    long_min: Optional[int] = typer.Option(None, "--long-min"),  # noqa: B008
    long_max: Optional[int] = typer.Option(None, "--long-max"),  # noqa: B008
    float_min: Optional[float] = typer.Option(None, "--float-min"),  # noqa: B008
    float_max: Optional[float] = typer.Option(None, "--float-max"),  # noqa: B008
    double_min: Optional[float] = typer.Option(None, "--double-min"),  # noqa: B008
    double_max: Optional[float] = typer.Option(None, "--double-max"),  # noqa: B008
    length: Optional[int] = typer.Option(None, "--length"),  # noqa: B008
    blocks: Optional[list[str]] = typer.Option(  # noqa: B008
        None, "--block", help="Unicode block name; repeat for several blocks"
    ),
    max_attempts: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-attempts", help="Cap on string rejection draws"
    ),
    count: int = typer.Option(1, "--count", min=1, help="Number of values"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log the seed of each value to stderr"
    ),
) -> None:
    """Generate ``count`` values of ``kind`` and print one per line."""

    try:
        value_kind = ValueKind.parse(kind)
        settings = load_config(config_path)
        options = {
            "seed": seed,
            "int_min": int_min,
            "int_max": int_max,
            "long_min": long_min,
            "long_max": long_max,
            "float_min": float_min,
            "float_max": float_max,
            "double_min": double_min,
            "double_max": double_max,
            "length": length,
            "unicode_blocks": blocks or None,
            "max_attempts": max_attempts,
        }
        config = settings.apply(
            Randomize(**{name: value for name, value in options.items() if value is not None})
        )
    except (ValidationError, ValueError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    if verbose:
        configure_logging(settings.log_level, stream=sys.stderr)

    context = CallSiteContext("cli", "generate", value_kind.value)
    try:
        for _ in range(count):
            try:
                value = DEFAULT_REGISTRY.resolve(GenerationRequest(value_kind, config, context))
            except GenerationError as exc:
                _safe_exit(5, str(exc))
            typer.echo(format_value(value))
    finally:
        if verbose:
            reset_logging()


@app.command()
def blocks(
    of: Optional[str] = typer.Option(  # noqa: B008
        None, "--of", help="Print the block of each character of this text"
    ),
) -> None:
    """List known Unicode block names."""

    table = load_block_table()
    if of is None:
        for name in table.names:
            typer.echo(name)
        return
    for char in of:
        name = table.name_of(ord(char)) or "-"
        typer.echo(f"U+{ord(char):04X} {name}")
