"""Benchmark: lisplex tokenize throughput.

Measures how many ``lisplex.tokenize`` calls complete per second on a
small program.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import lisplex

_ITERATIONS: int = 5_000

_SAMPLE_SOURCE = """(
  (define r 10)
  (define pi 3.14)
  (* pi (* r r))
)"""


def bench_tokenize_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark tokenization throughput.

    Returns
    -------
    dict with keys: operation, iterations, token_count, total_seconds,
    ops_per_second, avg_latency_ms.
    """
    token_count = len(lisplex.tokenize(_SAMPLE_SOURCE))

    start = time.perf_counter()
    for _ in range(iterations):
        lisplex.tokenize(_SAMPLE_SOURCE)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "lisplex_tokenize_throughput",
        "iterations": iterations,
        "token_count": token_count,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    result = bench_tokenize_throughput()
    output_path = results_dir / "tokenize_throughput_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
