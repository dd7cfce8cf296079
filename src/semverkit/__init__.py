"""semverkit — semantic-version value type: parsing, precedence, rendering.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import semverkit

    # Parse leniently (minor/patch optional) or strictly
    v = semverkit.parse("1.2.3-alpha.1+B001")
    semverkit.parse("1.2", strict=True)     # raises VersionParseError

    # Parse without raising
    semverkit.try_parse("garbage")          # None

    # Validate without building a Version
    semverkit.valid("01.2.3", strict=True)  # False

    # Order by SemVer precedence
    semverkit.compare("1.0.0-rc.1", "1.0.0")  # -1

    semverkit.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from semverkit.convenience import try_parse, version_from_mapping
from semverkit.parser.errors import ParseErrorKind, VersionParseError
from semverkit.pattern.matcher import PatternError
from semverkit.version.version import Version

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from semverkit.parser.parser import VersionParser


def parse(text: str, strict: bool = False) -> Version:
    """Parse a version string into a ``Version``.

    Parameters
    ----------
    text:
        The version string, ``MAJOR[.MINOR[.PATCH]][-PRERELEASE][+BUILD]``.
    strict:
        When ``True``, require ``MAJOR.MINOR.PATCH`` without leading zeros.

    Returns
    -------
    Version
        The parsed version.

    Raises
    ------
    semverkit.VersionParseError
        If ``text`` is not a valid version in the requested mode.
    """
    from semverkit.parser.parser import parse as _parse

    return _parse(text, strict=strict)


def valid(text: str, strict: bool = False) -> bool:
    """Return True if ``text`` would parse under the requested strictness."""
    return Version.valid(text, strict=strict)


def compare(left: str, right: str, strict: bool = False) -> int:
    """Compare two version strings by SemVer precedence.

    Returns
    -------
    int
        ``-1``, ``0`` or ``1``.

    Raises
    ------
    semverkit.VersionParseError
        If either string is not a valid version.
    """
    return parse(left, strict=strict).compare(parse(right, strict=strict))


def get_parser(strict: bool = False) -> "VersionParser":
    """Return the shared parser for the requested mode."""
    from semverkit.parser.parser import get_parser as _get_parser

    return _get_parser(strict)


__all__ = [
    "__version__",
    "Version",
    "VersionParseError",
    "ParseErrorKind",
    "PatternError",
    "parse",
    "try_parse",
    "valid",
    "compare",
    "get_parser",
    "version_from_mapping",
]
