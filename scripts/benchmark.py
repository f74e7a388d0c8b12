#!/usr/bin/env python3
"""Benchmark script for statetypes validation throughput.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of statetypes package."""
    start = time.perf_counter()
    import statetypes  # noqa: F401

    return time.perf_counter() - start


def benchmark_primitives() -> float:
    """Measure primitive validation of mixed values."""
    from statetypes import validators

    values = (1, "x", [1], {"a": 1}, True, None)

    start = time.perf_counter()
    for _ in range(10000):
        for value in values:
            validators.number(value, "value")
    return time.perf_counter() - start


def benchmark_nested_shapes() -> float:
    """Measure validation of a list of nested records."""
    from statetypes import validators

    record = validators.shapeOf(
        {
            "id": validators.oneOfType([validators.number, validators.string]),
            "tags": validators.arrayOf(validators.string),
            "meta": validators.objectOf(validators.number),
        }
    )
    records = validators.arrayOf(record)
    data = [{"id": i, "tags": ["a", "b"], "meta": {"x": 1, "y": 2}} for i in range(1000)]

    start = time.perf_counter()
    for _ in range(10):
        records(data, "records")
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run statetypes benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": "Primitive Validators (60k calls)",
            "unit": "seconds",
            "value": benchmark_primitives(),
        },
        {
            "name": "Nested Shapes (10 x 1k records)",
            "unit": "seconds",
            "value": benchmark_nested_shapes(),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
