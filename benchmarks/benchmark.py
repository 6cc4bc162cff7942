"""
Benchmarks comparing lazy chains with eager list pipelines.

Each eager stage builds a full intermediate list; the lazy chain makes one
pass. Run with:
    python benchmarks/benchmark.py
"""

import time
import tracemalloc
from collections.abc import Callable
from typing import Any

from lazyiter import from_range

# ---------------------------------------------------------------------------
# Module-level worker functions
# ---------------------------------------------------------------------------


def _even(x: int) -> bool:
    return x % 2 == 0


def _div4(x: int) -> bool:
    return x % 4 == 0


def _div8(x: int) -> bool:
    return x % 8 == 0


def _div16000(x: int) -> bool:
    return x % 16000 == 0


def _sixteenth(x: int) -> int:
    return x // 16


def _add(a: int, b: int) -> int:
    return a + b


# ---------------------------------------------------------------------------
# Benchmark harness
# ---------------------------------------------------------------------------


def benchmark(
    name: str,
    lazy_fn: Callable[[], Any],
    eager_fn: Callable[[], Any],
    iterations: int = 3,
):
    """
    Benchmark a lazy chain against its eager equivalent.

    Args:
        name: Name of the benchmark
        lazy_fn: Function using lazyiter
        eager_fn: Function materialising every stage
        iterations: Number of times to run each function
    """
    print(f"\n{'=' * 60}")
    print(f"Benchmark: {name}")
    print(f"{'=' * 60}")

    results = []
    for label, fn in (("Lazy", lazy_fn), ("Eager", eager_fn)):
        times = []
        for _ in range(iterations):
            start = time.perf_counter()
            result = fn()
            times.append(time.perf_counter() - start)

        tracemalloc.start()
        fn()
        _current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        avg = sum(times) / len(times)
        print(f"{label + ' (avg):':<14}{avg:.4f} seconds, peak {peak / 1024 / 1024:.1f} MiB")
        results.append(result)

    if results[0] != results[1]:
        raise AssertionError(f"{name}: lazy {results[0]!r} != eager {results[1]!r}")


# ---------------------------------------------------------------------------
# Individual benchmarks
# ---------------------------------------------------------------------------


def bench_filter_chain():
    """Benchmark: Four filters and a map, then a sum."""
    N = 2_000_000

    def lazy():
        return (
            from_range(1, N)
            .filter(_even)
            .filter(_div4)
            .filter(_div8)
            .filter(_div16000)
            .map(_sixteenth)
            .foldl(_add, 0)
        )

    def eager():
        data = list(range(1, N + 1))
        data = [x for x in data if _even(x)]
        data = [x for x in data if _div4(x)]
        data = [x for x in data if _div8(x)]
        data = [x for x in data if _div16000(x)]
        return sum(_sixteenth(x) for x in data)

    benchmark("Filter Chain", lazy, eager)


def bench_early_exit():
    """Benchmark: Taking a small slice of a large pipeline."""
    N = 2_000_000

    def lazy():
        return from_range(1, N).filter(_even).slice(0, 99).to_list()

    def eager():
        return [x for x in range(1, N + 1) if _even(x)][:100]

    benchmark("Early Exit", lazy, eager)


def main():
    """Run all benchmarks."""
    print("lazyiter Benchmarks")
    print("=" * 60)
    print("These benchmarks compare lazy chains with eager list stages.")
    print("=" * 60)

    bench_filter_chain()
    bench_early_exit()


if __name__ == "__main__":
    main()
