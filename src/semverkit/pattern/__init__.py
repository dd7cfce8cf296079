"""Pattern matching module.

Exports the ``Matcher`` wrapper around compiled regular expressions and
the ``PatternError`` raised for malformed patterns.
"""
from __future__ import annotations

from semverkit.pattern.matcher import Matcher, PatternError, compile_pattern

__all__ = [
    "Matcher",
    "PatternError",
    "compile_pattern",
]
