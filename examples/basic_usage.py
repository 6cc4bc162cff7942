"""
Basic usage examples for lazyiter.

This demonstrates the core combinators and how they chain.
"""

import itertools
import logging

from lazyiter import (
    EXHAUSTED,
    Span,
    concat,
    delete,
    foldl,
    from_range,
    into_lazy_iter,
    rev_pairs,
    set_trace,
    slice,
    zip,
)


def example_map_filter():
    """Example: Map and filter, as methods."""
    print("=== Map and Filter Example ===")

    doubled = from_range(2, 10).map(lambda x: x * 2).to_list()
    print(f"Doubled 2..10: {doubled}")

    evens = from_range(1, 11).filter(lambda x: x % 2 == 0).to_list()
    print(f"Evens in 1..11: {evens}")


def example_chaining():
    """Example: One pass through a stack of combinators."""
    print("\n=== Chaining Example ===")

    result = (
        from_range(2, 10)
        .filter(lambda x: x % 2 == 0)
        .map(lambda x: x * 2)
        .filter(lambda x: x % 8 == 0)
        .to_list()
    )
    print(f"filter -> map -> filter: {result}")

    # Nothing runs until the first pull
    pipeline = from_range(1, 3).map(lambda x: print(f"  mapping {x}") or x)
    print("Pipeline built, pulling once:")
    print(f"  got {pipeline.pull()}")


def example_free_functions():
    """Example: The free-function forms."""
    print("\n=== Free Function Example ===")

    print(f"concat: {list(concat(Span(1, 4), Span(20, 23)))}")
    print(f"zip:    {list(zip(Span(1, 4), Span(20, 24)))}")
    print(f"slice:  {list(slice(Span(0, 100), 10, 20, 2))}")
    print(f"delete: {list(delete(Span(1, 10), 4, 8))}")
    print(f"foldl:  {foldl(Span(1, 10), lambda acc, x: acc + x)}")


def example_endless():
    """Example: Slicing an endless source."""
    print("\n=== Endless Source Example ===")

    squares = into_lazy_iter(itertools.count()).map(lambda x: x * x)
    print(f"First six squares: {list(slice(squares, 0, 5))}")


def example_pull():
    """Example: Pulling by hand and replaying."""
    print("\n=== Pull Example ===")

    it = rev_pairs("abc")
    while (value := it.pull()) is not EXHAUSTED:
        print(f"pulled {value}")
    print(f"after the end: {it.pull()!r}")
    print(f"replayed: {it.restart().to_list()}")


def example_tracing():
    """Example: Logging every pull."""
    print("\n=== Tracing Example ===")

    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    set_trace(True)
    from_range(1, 2).map(lambda x: x * 10).to_list()
    set_trace(False)

    # You can also enable tracing via environment variable:
    # export LAZYITER_TRACE=1


def main():
    """Run all examples."""
    print("lazyiter - Lazy sequence combinators\n")

    example_map_filter()
    example_chaining()
    example_free_functions()
    example_endless()
    example_pull()
    example_tracing()

    print("\n=== All Examples Complete ===")


if __name__ == "__main__":
    main()
