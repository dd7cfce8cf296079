"""Version parser module.

Exports the ``VersionParser`` class, the cached ``get_parser`` accessor,
the ``parse`` convenience function, and parse error types.
"""
from __future__ import annotations

from semverkit.parser.errors import ParseErrorKind, VersionParseError
from semverkit.parser.parser import (
    VersionParser,
    get_parser,
    number_pattern,
    parse,
    version_pattern,
)

__all__ = [
    "VersionParser",
    "get_parser",
    "parse",
    "version_pattern",
    "number_pattern",
    "ParseErrorKind",
    "VersionParseError",
]
