#!/usr/bin/env python3
"""
Benchmark nesting repair on generated polygon grids.

Each cell of a square grid holds a stack of concentric square rings, all
clockwise, so fix_nesting_errors removes every nested ring and
rewind_polygon alternates their direction.

Usage:
    python scripts/benchmark_nesting.py [--grid N] [--depth D] [--repeat R]

Examples:
    python scripts/benchmark_nesting.py
    python scripts/benchmark_nesting.py --grid 20 --depth 4
    python scripts/benchmark_nesting.py --grid 10 --depth 8 --json
"""

from __future__ import annotations

import argparse
import json
import time
from typing import Any, Callable

from ring_topology import ArcStore, fix_nesting_errors, rewind_polygon


def generate_rings(grid: int, depth: int) -> tuple[ArcStore, list[list[int]]]:
    """Build grid x grid stacks of depth concentric clockwise squares."""
    arcs = ArcStore()
    rings: list[list[int]] = []
    cell = 2.0 * depth + 2.0
    for row in range(grid):
        for col in range(grid):
            x0, y0 = col * cell, row * cell
            for level in range(depth):
                lo = level
                hi = cell - 2.0 - level
                points = [
                    (x0 + lo, y0 + lo),
                    (x0 + lo, y0 + hi),
                    (x0 + hi, y0 + hi),
                    (x0 + hi, y0 + lo),
                    (x0 + lo, y0 + lo),
                ]
                rings.append([arcs.add_arc(points)])
    return arcs, rings


def benchmark(
    func: Callable[..., Any],
    arcs: ArcStore,
    rings: list[list[int]],
    repeat: int,
) -> dict[str, Any]:
    """
    Time a nesting function.

    Returns:
        Dict with best/mean timing and result size
    """
    timings = []
    result: Any = None
    for _ in range(repeat):
        start = time.perf_counter()
        result = func(rings, arcs)
        timings.append(time.perf_counter() - start)

    return {
        "name": func.__name__,
        "best_seconds": min(timings),
        "mean_seconds": sum(timings) / len(timings),
        "num_rings": len(rings),
        "num_result": len(result),
    }


def main():
    parser = argparse.ArgumentParser(description="Benchmark ring nesting repair")
    parser.add_argument("--grid", type=int, default=10, help="Grid cells per side")
    parser.add_argument("--depth", type=int, default=3, help="Rings per cell")
    parser.add_argument("--repeat", type=int, default=3, help="Runs per function")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    args = parser.parse_args()

    arcs, rings = generate_rings(args.grid, args.depth)
    results = [
        benchmark(fix_nesting_errors, arcs, rings, args.repeat),
        benchmark(rewind_polygon, arcs, rings, args.repeat),
    ]

    if args.json:
        print(json.dumps(results, indent=2))
        return

    print(f"{'Function':<22} {'Rings':>8} {'Result':>8} {'Best (s)':>10} {'Mean (s)':>10}")
    print("-" * 62)
    for r in results:
        print(
            f"{r['name']:<22} {r['num_rings']:>8} {r['num_result']:>8} "
            f"{r['best_seconds']:>10.4f} {r['mean_seconds']:>10.4f}"
        )


if __name__ == "__main__":
    main()
