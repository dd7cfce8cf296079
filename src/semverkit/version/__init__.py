"""Version value type module.

Exports the ``Version`` class, the precedence helpers, and the
``VersionSerializer``.
"""
from __future__ import annotations

from semverkit.version.precedence import compare_prerelease, compare_versions
from semverkit.version.serializer import VersionSerializer
from semverkit.version.version import Version

__all__ = [
    "Version",
    "VersionSerializer",
    "compare_prerelease",
    "compare_versions",
]
