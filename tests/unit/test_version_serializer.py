"""Unit tests for semverkit.version.serializer — dict, JSON and YAML forms."""
from __future__ import annotations

import json

import pytest
import yaml

from semverkit.version.serializer import VersionSerializer
from semverkit.version.version import Version


@pytest.fixture()
def serializer() -> VersionSerializer:
    return VersionSerializer()


FULL = Version(1, 2, 3, "alpha.1", "B001")
PARTIAL = Version(4, 5)


class TestToDict:
    def test_all_fields_present(self, serializer: VersionSerializer) -> None:
        assert serializer.to_dict(FULL) == {
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": "alpha.1",
            "build": "B001",
        }

    def test_absent_components_are_none(self, serializer: VersionSerializer) -> None:
        data = serializer.to_dict(PARTIAL)
        assert data["patch"] is None
        assert data["prerelease"] is None

    def test_to_json_is_valid_json(self, serializer: VersionSerializer) -> None:
        assert json.loads(serializer.to_json(FULL, indent=2))["build"] == "B001"

    def test_to_yaml_is_valid_yaml(self, serializer: VersionSerializer) -> None:
        assert yaml.safe_load(serializer.to_yaml(PARTIAL))["minor"] == 5


class TestFromDict:
    @pytest.mark.parametrize("version", [FULL, PARTIAL, Version(0, prerelease="1", build="007")])
    def test_json_round_trip_is_identical(
        self, serializer: VersionSerializer, version: Version
    ) -> None:
        restored = serializer.from_json(serializer.to_json(version))
        assert restored.identical(version)
        assert str(restored) == str(version)

    def test_yaml_round_trip_keeps_string_identifiers(self, serializer: VersionSerializer) -> None:
        version = Version(0, prerelease="1", build="007")
        restored = serializer.from_yaml(serializer.to_yaml(version))
        assert restored.identical(version)

    def test_missing_optional_fields_default_to_none(self, serializer: VersionSerializer) -> None:
        assert serializer.from_dict({"major": 3}).identical(Version(3))

    def test_missing_major_rejected(self, serializer: VersionSerializer) -> None:
        with pytest.raises(ValueError, match="major"):
            serializer.from_dict({"minor": 1})

    def test_unknown_field_rejected(self, serializer: VersionSerializer) -> None:
        with pytest.raises(ValueError, match="epoch"):
            serializer.from_dict({"major": 1, "epoch": 2})

    def test_negative_component_rejected(self, serializer: VersionSerializer) -> None:
        with pytest.raises(ValueError):
            serializer.from_dict({"major": 1, "patch": -1})

    def test_non_string_prerelease_rejected(self, serializer: VersionSerializer) -> None:
        with pytest.raises(TypeError):
            serializer.from_dict({"major": 1, "prerelease": 5})

    def test_non_mapping_rejected(self, serializer: VersionSerializer) -> None:
        with pytest.raises(TypeError):
            serializer.from_json("[1, 2, 3]")
