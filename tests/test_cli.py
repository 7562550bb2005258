from __future__ import annotations

import json
import random
from decimal import Decimal
from pathlib import Path

from typer.testing import CliRunner

from randparams import Randomize, generate
from randparams.cli import app


def _quiet(_: str) -> None:
    return None


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "generate" in result.stdout
    assert "blocks" in result.stdout


def test_generate_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--help"])
    assert "--seed" in result.stdout
    assert "--block" in result.stdout
    assert "--config" in result.stdout


def test_generate_int_replays_seed() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "int", "--seed", "0", "--int-min", "0", "--int-max", "10"])
    assert result.exit_code == 0
    assert result.stdout.strip() == str(random.Random(0).randrange(0, 10))


def test_generate_negative_bounds() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "long", "--seed", "3", "--long-min", "-5", "--long-max", "-1"]
    )
    assert result.exit_code == 0
    assert -5 <= int(result.stdout.strip()) < -1


def test_generate_bytes_hex() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "bytes", "--seed", "1", "--length", "6"])
    assert result.exit_code == 0
    out = result.stdout.strip()
    assert len(out) == 12
    assert bytes.fromhex(out) == generate(bytes, Randomize(seed=1, length=6), sink=_quiet)


def test_generate_string_json() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "string", "--seed", "42"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == generate(str, Randomize(seed=42), sink=_quiet)


def test_generate_big_decimal() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "big-decimal", "--seed", "8", "--double-min", "0", "--double-max", "1"]
    )
    assert result.exit_code == 0
    expected = generate(Decimal, Randomize(seed=8, double_min=0.0, double_max=1.0), sink=_quiet)
    assert result.stdout.strip() == str(expected)


def test_generate_random_prints_seed() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "random", "--seed", "9"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "seed=9"


def test_count_repeats_with_same_seed() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "double", "--seed", "5", "--count", "3"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 3
    assert len(set(lines)) == 1


def test_empty_range_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "int", "--int-min", "3", "--int-max", "3"])
    assert result.exit_code == 5
    assert "empty integer range" in result.output


def test_unknown_block_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "string", "--block", "NOT_A_BLOCK"])
    assert result.exit_code == 5


def test_attempt_cap_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["generate", "string", "--seed", "1", "--block", "TAGS", "--max-attempts", "1"],
    )
    assert result.exit_code == 5


def test_unknown_kind_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "complex"])
    assert result.exit_code == 4
    assert "complex" in result.output


def test_invalid_option_value_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "bytes", "--length", "-1"])
    assert result.exit_code == 4
    result = runner.invoke(app, ["generate", "float", "--float-max", "1e39"])
    assert result.exit_code == 4


def test_bad_config_exit_code(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "int", "--config", str(bad_cfg)])
    assert result.exit_code == 4
    missing = tmp_path / "missing.yml"
    result = runner.invoke(app, ["generate", "int", "--config", str(missing)])
    assert result.exit_code == 4


def test_config_defaults_used(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("defaults:\n  int_min: 100\n  int_max: 101\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "int", "--config", str(cfg)])
    assert result.exit_code == 0
    assert result.stdout.strip() == "100"


def test_verbose_logs_seed() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "int", "--seed", "12", "-v"])
    assert result.exit_code == 0
    assert "Using seed 12 for cli#generate#int" in result.output


def test_blocks_lists_names() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["blocks"])
    assert result.exit_code == 0
    names = result.stdout.split()
    assert "BASIC_LATIN" in names
    assert "CJK_UNIFIED_IDEOGRAPHS" in names


def test_blocks_of_text() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["blocks", "--of", "Aé"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["U+0041 BASIC_LATIN", "U+00E9 LATIN_1_SUPPLEMENT"]


def test_generate_replays_negative_seed() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "bytes", "--seed", "-5", "--length", "8"])
    assert result.exit_code == 0
    expected = generate(bytes, Randomize(seed=-5, length=8), sink=_quiet)
    assert result.stdout.strip() == expected.hex()
    assert expected != generate(bytes, Randomize(seed=5, length=8), sink=_quiet)


def test_seed_outside_64_bits_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "int", "--seed", str(2**63)])
    assert result.exit_code == 4
