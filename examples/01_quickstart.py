#!/usr/bin/env python3
"""Example: Quickstart — semverkit

Minimal working example: parse version strings, inspect and
canonicalize them, and order them by SemVer precedence.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install semverkit
"""
from __future__ import annotations

import semverkit
from semverkit import Version

RELEASES = [
    "1.0.0",
    "1.0.0-rc.1",
    "1.0.0-beta.11",
    "1.0.0-beta.2",
    "0.9",
    "1.0.0-alpha+exp.7",
]


def main() -> None:
    print(f"semverkit version: {semverkit.__version__}")

    # Step 1: Parse a version string into its components
    version = semverkit.parse("1.2.3-alpha.1+B001")
    print(f"Parsed: major={version.major}, minor={version.minor}, "
          f"patch={version.patch}, prerelease={version.prerelease}, "
          f"build={version.build}")

    # Step 2: Lenient vs strict parsing
    short = semverkit.parse("1.2")
    print(f"Lenient '1.2' -> {short} (canonical {short.canonicalized()})")
    try:
        semverkit.parse("1.2", strict=True)
    except semverkit.VersionParseError as exc:
        print(f"Strict '1.2' rejected: {exc.kind.value}")

    # Step 3: Equality ignores build metadata, identity does not
    a = Version.parse("1.0.0-alpha+buildA")
    b = Version.parse("1.0.0-alpha+buildB")
    print(f"{a} == {b}: {a == b}, identical: {a.identical(b)}")

    # Step 4: Sort by precedence
    ordered = sorted(Version.parse(text) for text in RELEASES)
    print("Sorted:", ", ".join(str(v) for v in ordered))

    # Step 5: Validate without building a Version
    for text in ("01.2.3", "1.2.3"):
        print(f"valid({text!r}, strict=True) = {semverkit.valid(text, strict=True)}")


if __name__ == "__main__":
    main()
