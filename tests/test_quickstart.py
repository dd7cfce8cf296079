"""Test that the quickstart API works for semverkit."""
from __future__ import annotations


def test_quickstart_parse_import() -> None:
    import semverkit

    assert callable(semverkit.parse)
    assert callable(semverkit.try_parse)
    assert callable(semverkit.valid)


def test_quickstart_version_string(expected_version: str) -> None:
    import semverkit

    assert semverkit.__version__ == expected_version


def test_quickstart_parse_and_render() -> None:
    import semverkit

    version = semverkit.parse("1.2.3-alpha.1+B001")
    assert str(version) == "1.2.3-alpha.1+B001"


def test_quickstart_strict_error() -> None:
    import pytest

    import semverkit

    with pytest.raises(semverkit.VersionParseError) as exc_info:
        semverkit.parse("1.2", strict=True)
    assert exc_info.value.kind is semverkit.ParseErrorKind.MISSING_PATCH_COMPONENT


def test_quickstart_try_parse() -> None:
    import semverkit

    assert semverkit.try_parse("garbage") is None


def test_quickstart_valid() -> None:
    import semverkit

    assert semverkit.valid("01.2.3", strict=True) is False
    assert semverkit.valid("01.2.3") is True


def test_quickstart_compare() -> None:
    import semverkit

    assert semverkit.compare("1.0.0-rc.1", "1.0.0") == -1
    assert semverkit.compare("1.0.0+a", "1.0.0+b") == 0


def test_quickstart_shared_parser() -> None:
    import semverkit

    assert semverkit.get_parser(strict=True) is semverkit.get_parser(strict=True)


def test_quickstart_public_names(package_name: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    for name in module.__all__:
        assert hasattr(module, name)
