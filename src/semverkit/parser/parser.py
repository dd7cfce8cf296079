"""Version parser: turns raw text into a ``Version``.

The parser runs a single anchored regular-expression match and then
inspects which capture groups took part, failing with a specific
``ParseErrorKind`` at the first component that is missing or malformed.

Two modes are supported:

strict
    Exactly ``MAJOR.MINOR.PATCH``; numbers may not carry leading zeros.
lenient
    ``MINOR`` and ``PATCH`` are each optional; leading zeros are accepted.

Both modes accept an optional ``-PRERELEASE`` made of dot-separated
``[0-9A-Za-z-]`` identifiers and an optional ``+BUILD`` suffix.

The whole version expression is itself optional inside the anchors, so
an empty string is a controlled match with no participating groups and
is rejected by the component checks rather than by a separate path.
In strict mode, text that fails the full pattern is matched once more
with minor and patch optional so that the error names the missing
component (``"1.2"`` fails with ``MISSING_PATCH_COMPONENT``).
"""
from __future__ import annotations

import functools
import logging
from collections.abc import Sequence
from typing import Final

from semverkit.parser.errors import ParseErrorKind, VersionParseError
from semverkit.pattern.matcher import Matcher, compile_pattern
from semverkit.version.version import Version

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pattern building blocks
# ---------------------------------------------------------------------------

_STRICT_NUMBER: Final[str] = "0|[1-9][0-9]*"
_LENIENT_NUMBER: Final[str] = "[0-9]+"
_PRERELEASE: Final[str] = r"(?:-([0-9A-Za-z][0-9A-Za-z.-]*))?"
_BUILD: Final[str] = r"(?:\+([0-9A-Za-z-]+))?"

# whole match, major, minor, patch, prerelease, build
_GROUP_COUNT: Final[int] = 6


def _number_source(strict: bool) -> str:
    return _STRICT_NUMBER if strict else _LENIENT_NUMBER


def _anchor(source: str) -> str:
    return rf"\A(?:{source})?\Z"


def _version_source(number: str, require_all: bool) -> str:
    if require_all:
        core = rf"({number})\.({number})\.({number})"
    else:
        core = rf"({number})(?:\.({number}))?(?:\.({number}))?"
    return core + _PRERELEASE + _BUILD


def version_pattern(strict: bool, anchored: bool = True) -> Matcher:
    """Build the full version pattern for the given mode.

    Parameters
    ----------
    strict:
        Require ``MAJOR.MINOR.PATCH`` without leading zeros.
    anchored:
        Require the pattern to cover the entire input.  The version
        expression is optional inside the anchors so that the empty
        string matches with every group absent.

    Returns
    -------
    Matcher
        The compiled pattern with five capture groups: major, minor,
        patch, prerelease and build.
    """
    source = _version_source(_number_source(strict), require_all=strict)
    return compile_pattern(_anchor(source) if anchored else source)


def number_pattern(strict: bool, anchored: bool = True) -> Matcher:
    """Build the bare-number pattern for the given mode."""
    number = _number_source(strict)
    return compile_pattern(_anchor(number) if anchored else number)


def _to_int(component: str | None) -> int | None:
    """Convert a captured component to an int, or ``None`` if impossible."""
    if component is None:
        return None
    try:
        return int(component)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class VersionParser:
    """Parses version strings in strict or lenient mode.

    Construction compiles both patterns once; afterwards the parser holds
    no mutable state, so a single instance may be shared freely.  Use
    :func:`get_parser` to obtain the process-wide instance for a mode.

    Parameters
    ----------
    strict:
        When ``True`` (the default), require ``MAJOR.MINOR.PATCH`` with
        no leading zeros.
    """

    __slots__ = ("_strict", "_version_matcher", "_number_matcher", "_partial_matcher")

    def __init__(self, strict: bool = True) -> None:
        self._strict: bool = strict
        self._version_matcher: Matcher = version_pattern(strict, anchored=True)
        self._number_matcher: Matcher = number_pattern(strict, anchored=True)
        # strict numbers with optional minor/patch, used to name the missing component
        self._partial_matcher: Matcher = (
            compile_pattern(_anchor(_version_source(_STRICT_NUMBER, require_all=False)))
            if strict
            else self._version_matcher
        )

    @property
    def strict(self) -> bool:
        """Whether this parser runs in strict mode."""
        return self._strict

    @property
    def version_matcher(self) -> Matcher:
        """The anchored full-version pattern."""
        return self._version_matcher

    @property
    def number_matcher(self) -> Matcher:
        """The anchored bare-number pattern."""
        return self._number_matcher

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Version:
        """Parse ``text`` into a :class:`Version`.

        Raises
        ------
        VersionParseError
            With the ``ParseErrorKind`` of the first failed check.
        """
        groups = self._version_matcher.first_match_groups(text)
        if not groups and self._strict:
            groups = self._partial_matcher.first_match_groups(text)
        try:
            return self.parse_components(groups)
        except VersionParseError as exc:
            logger.debug(
                "Rejected version %r (strict=%r): %s", text, self._strict, exc.kind.value
            )
            raise VersionParseError(exc.kind, text) from None

    def parse_components(self, components: Sequence[str | None]) -> Version:
        """Assemble a :class:`Version` from pre-extracted match groups.

        Parameters
        ----------
        components:
            ``[whole, major, minor, patch, prerelease, build]`` as returned
            by :meth:`Matcher.first_match_groups`.

        Raises
        ------
        VersionParseError
            If the groups are incomplete or a component is malformed.
        """
        if len(components) != _GROUP_COUNT:
            raise VersionParseError(ParseErrorKind.INVALID_COMPONENTS)

        _, major_text, minor_text, patch_text, prerelease, build = components

        if self._strict:
            if minor_text is None:
                raise VersionParseError(ParseErrorKind.MISSING_MINOR_COMPONENT)
            if patch_text is None:
                raise VersionParseError(ParseErrorKind.MISSING_PATCH_COMPONENT)

        major = _to_int(major_text)
        if major is None or major < 0:
            raise VersionParseError(ParseErrorKind.INVALID_MAJOR_COMPONENT)

        minor = _to_int(minor_text)
        if minor_text is not None and (minor is None or minor < 0):
            raise VersionParseError(ParseErrorKind.INVALID_MINOR_COMPONENT)

        patch = _to_int(patch_text)
        if patch_text is not None and (patch is None or patch < 0):
            raise VersionParseError(ParseErrorKind.INVALID_PATCH_COMPONENT)

        return Version(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=prerelease,
            build=build,
        )

    def is_valid(self, text: str) -> bool:
        """Return True if ``text`` would parse successfully in this mode."""
        try:
            self.parse_components(self._version_matcher.first_match_groups(text))
        except VersionParseError:
            return False
        return True

    def is_number(self, text: str) -> bool:
        """Return True if ``text`` is a bare number under this mode's grammar.

        The empty string is accepted, mirroring the optional body of the
        anchored pattern.
        """
        return self._number_matcher.matches(text)

    def __repr__(self) -> str:
        return f"VersionParser(strict={self._strict!r})"


@functools.lru_cache(maxsize=2)
def _shared_parser(strict: bool) -> VersionParser:
    logger.debug("Building shared %s version parser", "strict" if strict else "lenient")
    return VersionParser(strict=strict)


def get_parser(strict: bool) -> VersionParser:
    """Return the shared parser for ``strict`` mode, building it on first use."""
    return _shared_parser(bool(strict))


def parse(text: str, strict: bool = False) -> Version:
    """Parse ``text`` with the shared parser for the requested mode.

    Parameters
    ----------
    text:
        The version string.
    strict:
        Use strict mode instead of the default lenient mode.

    Returns
    -------
    Version
        The parsed version; absent minor/patch are kept as ``None``.

    Raises
    ------
    VersionParseError
        If ``text`` is not a valid version in the requested mode.
    """
    return get_parser(strict).parse(text)
