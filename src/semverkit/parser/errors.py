"""Parse error types for the version parser.

Every rejection carries a ``ParseErrorKind`` so that callers can tell an
absent optional component apart from malformed input, together with the
text that was rejected.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ParseErrorKind(Enum):
    """Why a version string was rejected.

    INVALID_COMPONENTS
        The pattern did not yield the expected capture groups.  This is
        also the outcome for text that does not match the version grammar.
    MISSING_MINOR_COMPONENT
        Strict mode requires a minor component and none was given.
    MISSING_PATCH_COMPONENT
        Strict mode requires a patch component and none was given.
    INVALID_MAJOR_COMPONENT
        The major component is absent or not a non-negative integer.
    INVALID_MINOR_COMPONENT
        The minor component is present but not a non-negative integer.
    INVALID_PATCH_COMPONENT
        The patch component is present but not a non-negative integer.
    """

    INVALID_COMPONENTS = "invalid components"
    MISSING_MINOR_COMPONENT = "missing minor component"
    MISSING_PATCH_COMPONENT = "missing patch component"
    INVALID_MAJOR_COMPONENT = "invalid major component"
    INVALID_MINOR_COMPONENT = "invalid minor component"
    INVALID_PATCH_COMPONENT = "invalid patch component"


@dataclass(frozen=True)
class VersionParseError(ValueError):
    """A version string could not be turned into a ``Version``.

    Parameters
    ----------
    kind:
        The specific reason for the rejection.
    text:
        The rejected input, or ``None`` when parsing pre-extracted
        components.
    """

    kind: ParseErrorKind
    text: str | None = None

    def __str__(self) -> str:
        if self.text is None:
            return f"VersionParseError: {self.kind.value}"
        return f"VersionParseError: {self.kind.value} in {self.text!r}"

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))

    def __reduce__(self) -> tuple[object, ...]:
        return (type(self), (self.kind, self.text))
