from randparams.config.schema import deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "defaults": {"length": 5, "unicode_blocks": ["BASIC_LATIN"]},
        "log_level": "INFO",
    }
    override = {
        "defaults": {"unicode_blocks": ["GREEK"]},
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {
        "defaults": {"length": 5, "unicode_blocks": ["GREEK"]},
        "log_level": "INFO",
    }
    # ensure original not mutated
    assert base["defaults"]["unicode_blocks"] == ["BASIC_LATIN"]
