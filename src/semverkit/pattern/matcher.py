"""Thin wrapper around compiled regular expressions.

A ``Matcher`` compiles its pattern exactly once and then exposes the
handful of queries the version parser needs: a boolean match test and
extraction of capture groups, where groups that did not participate in
the match are reported as ``None`` rather than omitted.

Usage
-----
::

    from semverkit.pattern import compile_pattern

    matcher = compile_pattern(r"\\A([0-9]+)(?:\\.([0-9]+))?\\Z")
    matcher.matches("1.2")              # True
    matcher.first_match_groups("1")     # ["1", "1", None]
    matcher.first_match_groups("x")     # []
"""
from __future__ import annotations

import re


class PatternError(ValueError):
    """Raised when a pattern string is not a valid regular expression.

    Parameters
    ----------
    pattern:
        The pattern text that failed to compile.
    reason:
        The message reported by the regular-expression engine.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"PatternError: invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class Matcher:
    """A compiled regular expression with group-extraction helpers.

    Instances are immutable; two matchers are equal when they were built
    from the same pattern text and flags.

    Parameters
    ----------
    pattern:
        Regular expression source text.
    flags:
        ``re`` module flags passed through to :func:`re.compile`.

    Raises
    ------
    PatternError
        If ``pattern`` does not compile.
    """

    __slots__ = ("_pattern", "_flags", "_regex")

    def __init__(self, pattern: str, flags: int = 0) -> None:
        try:
            regex = re.compile(pattern, flags)
        except re.error as exc:
            raise PatternError(pattern, str(exc)) from exc
        object.__setattr__(self, "_pattern", pattern)
        object.__setattr__(self, "_flags", flags)
        object.__setattr__(self, "_regex", regex)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def pattern(self) -> str:
        """The source text of the compiled pattern."""
        return self._pattern

    @property
    def flags(self) -> int:
        """The flags the pattern was compiled with."""
        return self._flags

    @property
    def group_count(self) -> int:
        """Number of capture groups, not counting the whole match."""
        return self._regex.groups

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def matches(self, text: str) -> bool:
        """Return True if the pattern matches anywhere in ``text``.

        Anchored patterns (``\\A...\\Z``) therefore only match when they
        cover the whole of ``text``.
        """
        return self._regex.search(text) is not None

    def first_match_groups(self, text: str) -> list[str | None]:
        """Return the groups of the first match in ``text``.

        Returns
        -------
        list[str | None]
            The whole match at index 0 followed by every capture group,
            with ``None`` for groups that did not participate.  An empty
            list when the pattern does not match at all.
        """
        match = self._regex.search(text)
        if match is None:
            return []
        return [match.group(0), *match.groups()]

    def all_matches(self, text: str) -> list[str]:
        """Return the text of every non-overlapping match, in order."""
        return [m.group(0) for m in self._regex.finditer(text)]

    def all_match_groups(self, text: str) -> list[list[str | None]]:
        """Return the group list (as ``first_match_groups``) of every match."""
        return [[m.group(0), *m.groups()] for m in self._regex.finditer(text)]

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matcher):
            return NotImplemented
        return self._pattern == other._pattern and self._flags == other._flags

    def __hash__(self) -> int:
        return hash((self._pattern, self._flags))

    def __repr__(self) -> str:
        if self._flags:
            return f"Matcher({self._pattern!r}, flags={self._flags!r})"
        return f"Matcher({self._pattern!r})"


def compile_pattern(pattern: str, flags: int = 0) -> Matcher:
    """Compile ``pattern`` into a :class:`Matcher`.

    Parameters
    ----------
    pattern:
        Regular expression source text.
    flags:
        Optional ``re`` flags.

    Returns
    -------
    Matcher
        The compiled matcher.

    Raises
    ------
    PatternError
        If ``pattern`` is not a valid regular expression.
    """
    return Matcher(pattern, flags)
