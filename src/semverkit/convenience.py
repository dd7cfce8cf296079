"""Convenience API for semverkit: parse-or-``None`` helpers.

``Version.parse`` always raises on bad input.  The helpers here are the
single place where a parse failure becomes ``None`` instead, for call
sites that read version strings from outside sources (application
manifests, package metadata, platform descriptors) where a missing or
garbled version is an expected outcome.

Example
-------
::

    from semverkit import try_parse, version_from_mapping

    try_parse("1.2.3")            # Version(major=1, minor=2, patch=3, ...)
    try_parse("not a version")    # None

    manifest = {"CFBundleShortVersionString": "2.4"}
    version_from_mapping(manifest, "CFBundleShortVersionString")
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from semverkit.parser.errors import VersionParseError

if TYPE_CHECKING:
    from semverkit.version.version import Version

logger = logging.getLogger(__name__)


def try_parse(text: str, strict: bool = False) -> "Version | None":
    """Parse ``text``, returning ``None`` instead of raising.

    Parameters
    ----------
    text:
        The version string.
    strict:
        Use strict mode instead of the default lenient mode.

    Returns
    -------
    Version | None
        The parsed version, or ``None`` if ``text`` is not valid.
    """
    from semverkit.parser.parser import parse

    try:
        return parse(text, strict=strict)
    except VersionParseError as exc:
        logger.debug("No version from %r: %s", text, exc.kind.value)
        return None


def version_from_mapping(
    metadata: Mapping[str, object], key: str, strict: bool = False
) -> "Version | None":
    """Look up ``key`` in ``metadata`` and parse its value as a version.

    Parameters
    ----------
    metadata:
        Any string-keyed mapping supplied by a metadata provider.
    key:
        The entry holding the version string.
    strict:
        Use strict mode instead of the default lenient mode.

    Returns
    -------
    Version | None
        ``None`` when the key is missing, the value is not a string, or
        the string is not a valid version.
    """
    value = metadata.get(key)
    if not isinstance(value, str):
        logger.debug("Metadata entry %r is not a version string: %r", key, value)
        return None
    return try_parse(value, strict=strict)
