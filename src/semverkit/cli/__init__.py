"""semverkit CLI — ``semverkit parse``, ``validate``, ``compare``, ``sort``, ``info``."""
from __future__ import annotations
