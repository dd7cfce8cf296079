"""SemVer 2.0.0 precedence rules.

Versions are ordered by priority tiers: major, then minor, then patch
(absent minor/patch count as ``0``).  When all three tie, a version
carrying a prerelease sorts before the same version without one, and two
prereleases are compared identifier by identifier.  Build metadata never
takes part.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Final

from semverkit.pattern.matcher import Matcher, compile_pattern

if TYPE_CHECKING:
    from semverkit.version.version import Version

_NUMERIC_IDENTIFIER: Final[Matcher] = compile_pattern(r"\A[0-9]+\Z")


def _sign(left: object, right: object) -> int:
    return (left > right) - (left < right)  # type: ignore[operator]


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if ``identifier`` consists of ASCII digits only."""
    return _NUMERIC_IDENTIFIER.matches(identifier)


def _compare_digits(left: str, right: str) -> int:
    """Compare two digit strings by numeric value without converting to int."""
    left_digits = left.lstrip("0")
    right_digits = right.lstrip("0")
    return _sign(len(left_digits), len(right_digits)) or _sign(left_digits, right_digits)


def compare_prerelease(left: str, right: str) -> int:
    """Compare two prerelease strings.

    Both strings are split on ``.``.  At the first pair of differing
    identifiers, pure-digit pairs compare numerically and anything else
    compares as ASCII text.  When one identifier list is a prefix of the
    other, the shorter one sorts first.

    Returns
    -------
    int
        ``-1``, ``0`` or ``1``.
    """
    left_ids = left.split(".")
    right_ids = right.split(".")
    for lid, rid in zip(left_ids, right_ids):
        if lid == rid:
            continue
        if is_numeric_identifier(lid) and is_numeric_identifier(rid):
            # numeric ties such as "01" vs "1" fall back to text order
            return _compare_digits(lid, rid) or _sign(lid, rid)
        return _sign(lid, rid)
    return _sign(len(left_ids), len(right_ids))


def compare_versions(left: "Version", right: "Version") -> int:
    """Compare two versions by SemVer precedence, ignoring build metadata.

    Returns
    -------
    int
        ``-1`` if ``left`` sorts first, ``1`` if ``right`` does, ``0``
        if they have equal precedence.
    """
    for lnum, rnum in (
        (left.major, right.major),
        (left.canonical_minor, right.canonical_minor),
        (left.canonical_patch, right.canonical_patch),
    ):
        if lnum != rnum:
            return _sign(lnum, rnum)

    if left.prerelease is None and right.prerelease is None:
        return 0
    if left.prerelease is None:
        return 1
    if right.prerelease is None:
        return -1
    return compare_prerelease(left.prerelease, right.prerelease)
