"""Unit tests for semverkit.convenience — the parse-or-None boundary."""
from __future__ import annotations

import logging

import pytest

from semverkit.convenience import try_parse, version_from_mapping
from semverkit.version.version import Version


class TestTryParse:
    def test_valid_text(self) -> None:
        assert try_parse("1.2.3") == Version(1, 2, 3)

    def test_invalid_text_returns_none(self) -> None:
        assert try_parse("not a version") is None

    def test_empty_text_returns_none(self) -> None:
        assert try_parse("") is None

    def test_strict_mode(self) -> None:
        assert try_parse("1.2", strict=True) is None
        assert try_parse("1.2", strict=False) == Version(1, 2)

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="semverkit"):
            try_parse("1.2", strict=True)
        assert any("missing patch component" in r.getMessage() for r in caplog.records)


class TestVersionFromMapping:
    def test_present_key(self) -> None:
        metadata = {"CFBundleShortVersionString": "2.4"}
        version = version_from_mapping(metadata, "CFBundleShortVersionString")
        assert version is not None
        assert str(version) == "2.4"

    def test_missing_key(self) -> None:
        assert version_from_mapping({}, "version") is None

    def test_non_string_value(self) -> None:
        assert version_from_mapping({"version": 3}, "version") is None

    def test_unparseable_value(self) -> None:
        assert version_from_mapping({"version": "three"}, "version") is None

    def test_strict_mode(self) -> None:
        assert version_from_mapping({"version": "1.0"}, "version", strict=True) is None
