"""Benchmark: version parse and sort latency (p50/p95/mean).

Measures per-call latency for lenient and strict parsing and for sorting
a batch of parsed versions by precedence.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import semverkit

_WARMUP: int = 100
_ITERATIONS: int = 3_000

_SAMPLES: tuple[str, ...] = (
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "2.4",
    "10.20.30+build-7",
)


def _summarize(operation: str, latencies_ms: list[float]) -> dict[str, object]:
    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": n,
        "total_seconds": round(total, 4),
        "ops_per_second": round(n / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_parse_latency(strict: bool = False) -> dict[str, object]:
    """Benchmark parsing every sample string once per iteration.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    samples = [s for s in _SAMPLES if semverkit.valid(s, strict=strict)]

    # Warmup
    for _ in range(_WARMUP):
        for text in samples:
            semverkit.parse(text, strict=strict)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        for text in samples:
            semverkit.parse(text, strict=strict)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    mode = "strict" if strict else "lenient"
    return _summarize(f"semverkit_parse_latency_{mode}", latencies_ms)


def bench_sort_latency() -> dict[str, object]:
    """Benchmark sorting the parsed samples by precedence."""
    versions = [semverkit.parse(text) for text in reversed(_SAMPLES)]

    for _ in range(_WARMUP):
        sorted(versions)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        sorted(versions)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    return _summarize("semverkit_sort_latency", latencies_ms)


if __name__ == "__main__":
    results = [bench_parse_latency(), bench_parse_latency(strict=True), bench_sort_latency()]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
