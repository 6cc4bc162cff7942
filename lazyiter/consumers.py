"""
Consumer implementations for terminal operations.

Consumers drain the elements produced by a lazy iterator and reduce them
to a single result. They are the only part of the library that is not
lazy.
"""

from collections.abc import Callable, Iterator
from typing import TypeVar

from .errors import EmptySequenceError

T = TypeVar("T")
S = TypeVar("S")


class FoldConsumer[T, S]:
    """Consumer that folds elements into an accumulator, starting from a seed."""

    def __init__(self, fold_op: Callable[[S, T], S], seed: S):
        self.fold_op = fold_op
        self.seed = seed

    def consume_iter(self, iterator: Iterator[T]) -> S:
        """Fold all elements from left to right; the seed if there are none."""
        accumulator = self.seed
        for item in iterator:
            accumulator = self.fold_op(accumulator, item)
        return accumulator


class ReduceConsumer[T]:
    """
    Consumer that folds elements using the first one as the seed.

    Raises EmptySequenceError when there is no first element.
    """

    def __init__(self, reduce_op: Callable[[T, T], T]):
        self.reduce_op = reduce_op

    def consume_iter(self, iterator: Iterator[T]) -> T:
        """Reduce all elements using the reduce operation."""
        try:
            accumulator = next(iterator)
        except StopIteration:
            raise EmptySequenceError(
                "Cannot fold an empty sequence without a seed"
            ) from None

        for item in iterator:
            accumulator = self.reduce_op(accumulator, item)
        return accumulator


class CollectConsumer[T]:
    """Consumer that collects all elements into a list."""

    def consume_iter(self, iterator: Iterator[T]) -> list[T]:
        """Collect all elements into a list."""
        return list(iterator)


class ForEachConsumer[T]:
    """Consumer that executes a function on each element."""

    def __init__(self, func: Callable[[T], None]):
        self.func = func

    def consume_iter(self, iterator: Iterator[T]) -> None:
        """Execute function on each element."""
        for item in iterator:
            self.func(item)
        return None


class CountConsumer[T]:
    """Consumer that counts elements."""

    def consume_iter(self, iterator: Iterator[T]) -> int:
        """Count all elements."""
        count = 0
        for _ in iterator:
            count += 1
        return count
