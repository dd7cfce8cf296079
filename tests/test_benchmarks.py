"""Structural tests for the semverkit benchmark module."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_latency_importable() -> None:
    """Verify bench_latency module can be imported."""
    mod = importlib.import_module("bench_latency")
    assert hasattr(mod, "bench_parse_latency")
    assert hasattr(mod, "bench_sort_latency")


def test_parse_latency_returns_expected_keys() -> None:
    """Verify bench_parse_latency returns expected result keys."""
    from bench_latency import bench_parse_latency

    result = bench_parse_latency(strict=True)
    assert result["operation"] == "semverkit_parse_latency_strict"
    assert "p50_ms" in result
    assert "p95_ms" in result
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]


def test_sort_latency_returns_expected_keys() -> None:
    """Verify bench_sort_latency returns expected result keys."""
    from bench_latency import bench_sort_latency

    result = bench_sort_latency()
    assert "avg_latency_ms" in result
    assert result["iterations"] == 3_000
