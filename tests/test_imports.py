"""Smoke tests for package import and version."""

import myna


def test_import_package() -> None:
    assert isinstance(myna, object)


def test_version() -> None:
    assert myna.__version__ == "0.1.0"


def test_public_api() -> None:
    for name in myna.__all__:
        assert hasattr(myna, name), name
