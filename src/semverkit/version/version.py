"""The ``Version`` value type.

A ``Version`` holds a required major number, optional minor and patch
numbers, and optional prerelease and build strings.  Missing minor and
patch components are kept as ``None`` so that ``str()`` reproduces what
was parsed, but they behave as ``0`` for equality, ordering and hashing.
``canonicalize()`` writes those zero defaults back into the fields.

Two equivalence relations exist:

``equals`` / ``==``
    SemVer precedence equality; build metadata is ignored.
``identical``
    ``equals`` plus equal build metadata.

Example
-------
::

    from semverkit import Version

    v = Version.parse("1.2-beta.2+exp-sha")   # raises VersionParseError on bad input
    str(v)                                    # '1.2-beta.2+exp-sha'
    v == Version(1, 2, 0, "beta.2")           # True
    v.identical(Version(1, 2, 0, "beta.2"))   # False
"""
from __future__ import annotations

import dataclasses
import functools
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

from semverkit.version.precedence import compare_versions

_NUMERIC_FIELDS: Final[frozenset[str]] = frozenset({"major", "minor", "patch"})


def _check_component(name: str, value: object) -> None:
    """Reject non-integer or negative numeric components."""
    if value is None and name != "major":
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Version {name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Version {name} must be a non-negative integer, got {value}")


@functools.total_ordering
@dataclass(eq=False)
class Version:
    """A semantic version.

    Parameters
    ----------
    major:
        Non-negative major number.
    minor:
        Optional non-negative minor number.
    patch:
        Optional non-negative patch number.
    prerelease:
        Optional prerelease string, e.g. ``"alpha.1"``.  Not validated
        here; only the parser enforces the identifier grammar.
    build:
        Optional build metadata, e.g. ``"B001"``.

    Raises
    ------
    ValueError
        If a numeric component is negative (on construction or assignment).
    TypeError
        If a numeric component is not an ``int``.
    """

    major: int = 0
    minor: int | None = None
    patch: int | None = None
    prerelease: str | None = None
    build: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _NUMERIC_FIELDS:
            _check_component(name, value)
        object.__setattr__(self, name, value)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> "Version":
        """Parse a version string, leniently unless ``strict`` is set.

        Raises
        ------
        semverkit.parser.VersionParseError
            If ``text`` is not a valid version in the requested mode.
        """
        from semverkit.parser.parser import parse as _parse

        parsed = _parse(text, strict=strict)
        if cls is Version:
            return parsed
        return cls(
            major=parsed.major,
            minor=parsed.minor,
            patch=parsed.patch,
            prerelease=parsed.prerelease,
            build=parsed.build,
        )

    @classmethod
    def parse_strict(cls, text: str) -> "Version":
        """Parse ``text`` requiring ``MAJOR.MINOR.PATCH`` without leading zeros."""
        return cls.parse(text, strict=True)

    @classmethod
    def from_tuple(cls, parts: Sequence[int]) -> "Version":
        """Build a version from ``(major[, minor[, patch]])``.

        Handy for platform descriptors such as ``sys.version_info[:3]``.

        Raises
        ------
        ValueError
            If ``parts`` is empty, longer than three items, or negative.
        """
        if not 1 <= len(parts) <= 3:
            raise ValueError(f"Expected 1 to 3 version numbers, got {len(parts)}")
        return cls(*parts)

    @staticmethod
    def valid(text: str, strict: bool = False) -> bool:
        """Return True if ``text`` parses under the requested strictness."""
        from semverkit.parser.parser import get_parser

        return get_parser(strict).is_valid(text)

    # ------------------------------------------------------------------
    # Canonical view
    # ------------------------------------------------------------------

    @property
    def canonical_minor(self) -> int:
        """The minor number, ``0`` when absent."""
        return self.minor if self.minor is not None else 0

    @property
    def canonical_patch(self) -> int:
        """The patch number, ``0`` when absent."""
        return self.patch if self.patch is not None else 0

    @property
    def release_tuple(self) -> tuple[int, int, int]:
        """``(major, minor, patch)`` with absent components as ``0``."""
        return (self.major, self.canonical_minor, self.canonical_patch)

    @property
    def is_prerelease(self) -> bool:
        """True when a prerelease string is set."""
        return self.prerelease is not None

    @property
    def is_canonical(self) -> bool:
        """True when both minor and patch are explicitly set."""
        return self.minor is not None and self.patch is not None

    def canonicalize(self) -> None:
        """Replace absent minor/patch with ``0`` in place."""
        self.minor = self.canonical_minor
        self.patch = self.canonical_patch

    def canonicalized(self) -> "Version":
        """Return a canonicalized copy, leaving this version untouched."""
        return self.replace(minor=self.canonical_minor, patch=self.canonical_patch)

    def replace(self, **changes: Any) -> "Version":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------
    # Equality and ordering
    # ------------------------------------------------------------------

    def _precedence_identity(self) -> tuple[int, int, int, str | None]:
        return (self.major, self.canonical_minor, self.canonical_patch, self.prerelease)

    def equals(self, other: "Version") -> bool:
        """SemVer equality: build metadata is ignored."""
        return self._precedence_identity() == other._precedence_identity()

    def identical(self, other: "Version") -> bool:
        """``equals`` plus equal build metadata."""
        return self.equals(other) and self.build == other.build

    def compare(self, other: "Version") -> int:
        """Return ``-1``, ``0`` or ``1`` by SemVer precedence."""
        return compare_versions(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __hash__(self) -> int:
        return hash(self._precedence_identity())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        parts = [str(self.major)]
        if self.minor is not None:
            parts.append(f".{self.minor}")
        if self.patch is not None:
            parts.append(f".{self.patch}")
        if self.prerelease is not None:
            parts.append(f"-{self.prerelease}")
        if self.build is not None:
            parts.append(f"+{self.build}")
        return "".join(parts)
