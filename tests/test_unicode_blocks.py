from __future__ import annotations

import pytest

from randparams.unicode_blocks import UnicodeBlock, UnicodeBlockTable, load_block_table


def test_table_loads() -> None:
    table = load_block_table()
    assert table.version == "15.0"
    assert len(table) > 300
    assert {"BASIC_LATIN", "GREEK", "CJK_UNIFIED_IDEOGRAPHS", "EMOTICONS"} <= set(table.names)


def test_blocks_sorted_and_disjoint() -> None:
    blocks = list(load_block_table())
    assert blocks[0].first == 0
    assert blocks[-1].last == 0x10FFFF
    for prev, cur in zip(blocks, blocks[1:]):
        assert prev.first <= prev.last < cur.first <= cur.last


@pytest.mark.parametrize(
    "code_point,name",
    [
        (ord("A"), "BASIC_LATIN"),
        (0x7F, "BASIC_LATIN"),
        (0x80, "LATIN_1_SUPPLEMENT"),
        (0x03B1, "GREEK"),
        (0x0416, "CYRILLIC"),
        (0x4E2D, "CJK_UNIFIED_IDEOGRAPHS"),
        (0xD800, "HIGH_SURROGATES"),
        (0x1F600, "EMOTICONS"),
        (0x10FFFF, "SUPPLEMENTARY_PRIVATE_USE_AREA_B"),
    ],
)
def test_name_of(code_point: int, name: str) -> None:
    assert load_block_table().name_of(code_point) == name


def test_code_points_outside_blocks() -> None:
    table = load_block_table()
    assert table.name_of(0x2FE0) is None
    assert table.name_of(0x3FFFF) is None
    assert table.block_of(-1) is None


def test_get_accepts_loose_spelling() -> None:
    table = load_block_table()
    block = table.get("Basic Latin")
    assert block is not None
    assert (block.first, block.last, block.size) == (0, 0x7F, 128)
    assert ord("z") in block
    assert table.get("NOT_A_BLOCK") is None


def test_known_filters_names() -> None:
    table = load_block_table()
    assert table.known({"BASIC_LATIN", "NOT_A_BLOCK"}) == frozenset({"BASIC_LATIN"})
    assert table.known({"NOT_A_BLOCK"}) == frozenset()


def test_overlapping_blocks_rejected() -> None:
    with pytest.raises(ValueError):
        UnicodeBlockTable([UnicodeBlock("A", 0, 10), UnicodeBlock("B", 10, 20)])
