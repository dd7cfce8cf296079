"""Version serialization to and from plain dicts, JSON and YAML.

The serialized form keeps absent components as ``null`` and includes
build metadata, so a round-trip yields a version that is ``identical``
to the original, not merely equal.

Usage
-----
::

    from semverkit.version.serializer import VersionSerializer

    serializer = VersionSerializer()
    data = serializer.to_dict(version)
    json_text = serializer.to_json(version)
    version2 = serializer.from_json(json_text)
    assert version.identical(version2)
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from semverkit.version.version import Version

_FIELDS: tuple[str, ...] = ("major", "minor", "patch", "prerelease", "build")


class VersionSerializer:
    """Converts between ``Version`` objects and plain Python structures."""

    # ------------------------------------------------------------------
    # Serialization (Version → dict)
    # ------------------------------------------------------------------

    def to_dict(self, version: Version) -> dict[str, object]:
        """Serialize a ``Version`` to a JSON-compatible dict."""
        return {name: getattr(version, name) for name in _FIELDS}

    def to_json(self, version: Version, indent: int | None = None) -> str:
        """Serialize a ``Version`` to a JSON string."""
        return json.dumps(self.to_dict(version), indent=indent)

    def to_yaml(self, version: Version) -> str:
        """Serialize a ``Version`` to a YAML string."""
        return yaml.safe_dump(self.to_dict(version), sort_keys=False)

    # ------------------------------------------------------------------
    # Deserialization (dict → Version)
    # ------------------------------------------------------------------

    def from_dict(self, data: Mapping[str, Any]) -> Version:
        """Deserialize a ``Version`` from a plain mapping.

        Raises
        ------
        ValueError
            If ``major`` is missing, unknown keys are present, or a
            numeric component is negative.
        TypeError
            If a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        unknown = set(data) - set(_FIELDS)
        if unknown:
            raise ValueError(f"Unknown version fields: {sorted(unknown)}")
        if "major" not in data:
            raise ValueError("Serialized version is missing 'major'")
        for name in ("prerelease", "build"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"Version {name} must be a string, got {type(value).__name__}")
        return Version(**{name: data.get(name) for name in _FIELDS})

    def from_json(self, text: str) -> Version:
        """Deserialize a ``Version`` from a JSON string."""
        return self.from_dict(json.loads(text))

    def from_yaml(self, text: str) -> Version:
        """Deserialize a ``Version`` from a YAML string."""
        return self.from_dict(yaml.safe_load(text))
