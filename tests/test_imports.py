"""Smoke tests for package import and version."""

import randparams


def test_import_package() -> None:
    assert isinstance(randparams, object)


def test_version() -> None:
    assert randparams.__version__ == "0.1.0"
