"""
Core lazy iterator implementations.

This module contains the LazyIterator base class, which owns the pull
protocol and the sticky exhaustion state, and the combinators that wrap an
upstream iterator in a new one without consuming it eagerly.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from .bridge import drive
from .config import IterConfig
from .consumers import (
    CollectConsumer,
    CountConsumer,
    FoldConsumer,
    ForEachConsumer,
    ReduceConsumer,
)
from .errors import InvalidParameterError
from .protocols import EXHAUSTED, Exhausted, Pulled

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

# Default for foldl's seed; distinguishes "no seed" from a seed of None.
MISSING: Any = object()


class LazyIterator[T](ABC):
    """
    Base class for lazy iterators.

    A lazy iterator is a resumable producer: each ``pull()`` computes just
    enough to return the next element, pulling from upstream iterators on
    demand. Once it returns ``EXHAUSTED`` it keeps doing so and never calls
    upstream or user functions again.

    Lazy iterators are also ordinary Python iterators, so they can be used
    in ``for`` loops and passed to ``list()``.
    """

    def __init__(self) -> None:
        self._exhausted = False
        # Set once a combinator takes this iterator as its upstream.
        self._owned = False

    @abstractmethod
    def _advance(self) -> Pulled[T]:
        """
        Compute the next element while still active.

        Subclasses implement this and signal the end by returning
        ``self._finish()``; ``pull()`` takes care of stickiness. Returning
        the ``EXHAUSTED`` value any other way passes it through as data.

        Returns:
            The next element, or the result of ``self._finish()``
        """
        ...

    def _finish(self) -> Exhausted:
        """Enter the exhausted state and return the sentinel."""
        self._exhausted = True
        return EXHAUSTED

    @abstractmethod
    def restart(self) -> LazyIterator[T]:
        """
        Build a fresh iterator over the same source and parameters.

        The result starts from the beginning and is independent of this
        iterator's position.
        """
        ...

    @property
    def exhausted(self) -> bool:
        """True once the end of the data has been reached."""
        return self._exhausted

    def pull(self) -> Pulled[T]:
        """
        Produce the next element, or ``EXHAUSTED``.

        Pulling after exhaustion is allowed and returns ``EXHAUSTED`` again.
        If the data may itself contain the ``EXHAUSTED`` object, check
        ``exhausted`` after pulling instead of comparing the result.
        """
        if self._exhausted:
            value = EXHAUSTED
        else:
            value = self._advance()

        if IterConfig.global_config().trace:
            logger.debug("pull %r -> %r", self, value)
        return value

    def __iter__(self) -> LazyIterator[T]:
        return self

    def __next__(self) -> T:
        try:
            value = self.pull()
        except StopIteration as exc:
            # StopIteration from user code must not end the caller's loop.
            raise RuntimeError("lazy iterator raised StopIteration") from exc
        if self._exhausted:
            raise StopIteration
        return value

    def map(self, func: Callable[[T], U]) -> LazyIterator[U]:
        """
        Apply a function to each element lazily.

        Args:
            func: Function to apply to each element

        Returns:
            A new lazy iterator of transformed elements
        """
        return MapIterator(self, func)

    def filter(self, predicate: Callable[[T], bool]) -> LazyIterator[T]:
        """
        Keep only the elements for which the predicate holds.

        Args:
            predicate: Function that returns True for elements to keep

        Returns:
            A new lazy iterator of the kept elements
        """
        return FilterIterator(self, predicate)

    def concat(self, *others: Any) -> LazyIterator[T]:
        """
        Append the elements of other sources after this iterator's.

        Args:
            *others: Sources (ranges, spans, sequences, lazy iterators, ...)

        Returns:
            A lazy iterator over this iterator followed by each source
        """
        from .adapters import into_lazy_iter

        return ConcatIterator([self, *(into_lazy_iter(o) for o in others)])

    def zip(self, other: Any) -> LazyIterator[tuple[T, Any]]:
        """
        Pair this iterator's elements with another source's.

        Stops as soon as either side runs out.

        Args:
            other: The source to pair with

        Returns:
            A lazy iterator of ``(mine, theirs)`` tuples
        """
        from .adapters import into_lazy_iter

        return ZipIterator(self, into_lazy_iter(other))

    def slice(self, first: int, last: int, step: int = 1) -> LazyIterator[T]:
        """
        Keep every ``step``-th element between positions first and last.

        Args:
            first: First position to keep (zero-based, inclusive)
            last: Last position to consider (inclusive)
            step: Distance between kept positions (must be >= 1)

        Returns:
            A lazy iterator over the selected positions
        """
        return SliceIterator(self, first, last, step)

    def delete(self, first: int, last: int) -> LazyIterator[T]:
        """
        Drop the elements at positions first through last.

        Args:
            first: First position to drop (zero-based, inclusive)
            last: Last position to drop (inclusive)

        Returns:
            A lazy iterator over the remaining elements
        """
        return DeleteIterator(self, first, last)

    def foldl(self, func: Callable[[Any, T], Any], seed: Any = MISSING) -> Any:
        """
        Fold the elements from left to right into a single value.

        Without a seed the first element starts the accumulation, and an
        empty iterator raises EmptySequenceError.

        Args:
            func: Function combining the accumulator with the next element
            seed: Optional initial accumulator

        Returns:
            The final accumulator
        """
        if seed is MISSING:
            return drive(self, ReduceConsumer(func))
        return drive(self, FoldConsumer(func, seed))

    def to_list(self) -> list[T]:
        """
        Drain the remaining elements into a list.

        Returns:
            A list containing all remaining elements
        """
        return drive(self, CollectConsumer())

    def count(self) -> int:
        """
        Drain the remaining elements and count them.

        Returns:
            The number of elements
        """
        return drive(self, CountConsumer())

    def for_each(self, func: Callable[[T], None]) -> None:
        """
        Call a function on each remaining element.

        Args:
            func: Function to execute for each element
        """
        drive(self, ForEachConsumer(func))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# Concrete iterator adapters


def _check_bounds(first: int, last: int) -> None:
    if first < 0 or last < 0:
        raise InvalidParameterError(
            f"Positions must be non-negative, got first={first}, last={last}"
        )


def _adopt(*upstreams: LazyIterator[Any]) -> None:
    """Mark upstreams as owned by a new combinator, refusing shared ones."""
    seen: set[int] = set()
    for upstream in upstreams:
        if upstream._owned or id(upstream) in seen:
            raise InvalidParameterError(
                f"{upstream!r} already feeds another combinator; "
                "use restart() for an independent copy"
            )
        seen.add(id(upstream))
    for upstream in upstreams:
        upstream._owned = True


class MapIterator[T, U](LazyIterator[U]):
    """Lazy iterator that maps a function over elements."""

    def __init__(self, base: LazyIterator[T], func: Callable[[T], U]):
        super().__init__()
        _adopt(base)
        self.base = base
        self.func = func

    def _advance(self) -> Pulled[U]:
        value = self.base.pull()
        if self.base.exhausted:
            return self._finish()
        return self.func(value)

    def restart(self) -> MapIterator[T, U]:
        return MapIterator(self.base.restart(), self.func)

    def __repr__(self) -> str:
        return f"MapIterator({self.base!r})"


class FilterIterator(LazyIterator[T]):
    """Lazy iterator that filters elements by a predicate."""

    def __init__(self, base: LazyIterator[T], predicate: Callable[[T], bool]):
        super().__init__()
        _adopt(base)
        self.base = base
        self.predicate = predicate

    def _advance(self) -> Pulled[T]:
        while True:
            value = self.base.pull()
            if self.base.exhausted:
                return self._finish()
            if self.predicate(value):
                return value

    def restart(self) -> FilterIterator[T]:
        return FilterIterator(self.base.restart(), self.predicate)

    def __repr__(self) -> str:
        return f"FilterIterator({self.base!r})"


class ConcatIterator(LazyIterator[T]):
    """
    Lazy iterator that chains several iterators together.

    Each iterator is drained completely before the next one is pulled. The
    same iterator cannot appear twice; concatenate ``it`` with
    ``it.restart()`` to repeat a sequence.
    """

    def __init__(self, iterators: Sequence[LazyIterator[T]]):
        super().__init__()
        _adopt(*iterators)
        self.iterators = list(iterators)
        self._current = 0

    def _advance(self) -> Pulled[T]:
        while self._current < len(self.iterators):
            current = self.iterators[self._current]
            value = current.pull()
            if not current.exhausted:
                return value
            self._current += 1
        return self._finish()

    def restart(self) -> ConcatIterator[T]:
        return ConcatIterator([it.restart() for it in self.iterators])

    def __repr__(self) -> str:
        inner = ", ".join(repr(it) for it in self.iterators)
        return f"ConcatIterator([{inner}])"


class ZipIterator[T, U](LazyIterator[tuple[T, U]]):
    """
    Lazy iterator that pairs up the elements of two iterators.

    Both sides are pulled on every step before checking for exhaustion, so
    on the final step the longer side is advanced once and its element is
    dropped. Both sides must be distinct iterators.
    """

    def __init__(self, left: LazyIterator[T], right: LazyIterator[U]):
        super().__init__()
        _adopt(left, right)
        self.left = left
        self.right = right

    def _advance(self) -> Pulled[tuple[T, U]]:
        left_value = self.left.pull()
        right_value = self.right.pull()
        if self.left.exhausted or self.right.exhausted:
            return self._finish()
        return (left_value, right_value)

    def restart(self) -> ZipIterator[T, U]:
        return ZipIterator(self.left.restart(), self.right.restart())

    def __repr__(self) -> str:
        return f"ZipIterator({self.left!r}, {self.right!r})"


class SliceIterator(LazyIterator[T]):
    """
    Lazy iterator over positions ``first..last`` (inclusive) of its base,
    keeping every ``step``-th one.

    Positions count elements of the base, not of the result. Once the next
    position would pass ``last`` the iterator is exhausted without pulling
    the base again, so slicing an endless source terminates. ``last < first``
    selects nothing.
    """

    def __init__(
        self, base: LazyIterator[T], first: int, last: int, step: int = 1
    ):
        super().__init__()
        if step <= 0:
            raise InvalidParameterError(f"Slice step must be positive, got {step}")
        _check_bounds(first, last)
        _adopt(base)

        self.base = base
        self.first = first
        self.last = last
        self.step = step
        self._position = 0

    def _advance(self) -> Pulled[T]:
        if self.last < self.first:
            return self._finish()

        while self._position <= self.last:
            value = self.base.pull()
            if self.base.exhausted:
                return self._finish()

            position = self._position
            self._position += 1
            if position >= self.first and (position - self.first) % self.step == 0:
                return value

        return self._finish()

    def restart(self) -> SliceIterator[T]:
        return SliceIterator(self.base.restart(), self.first, self.last, self.step)

    def __repr__(self) -> str:
        return (
            f"SliceIterator({self.base!r}, first={self.first}, "
            f"last={self.last}, step={self.step})"
        )


class DeleteIterator(LazyIterator[T]):
    """
    Lazy iterator that drops positions ``first..last`` (inclusive) of its base.

    Everything after ``last`` passes through, so the whole base is traversed.
    ``last < first`` drops nothing.
    """

    def __init__(self, base: LazyIterator[T], first: int, last: int):
        super().__init__()
        _check_bounds(first, last)
        _adopt(base)

        self.base = base
        self.first = first
        self.last = last
        self._position = 0

    def _advance(self) -> Pulled[T]:
        while True:
            value = self.base.pull()
            if self.base.exhausted:
                return self._finish()

            position = self._position
            self._position += 1
            if not self.first <= position <= self.last:
                return value

    def restart(self) -> DeleteIterator[T]:
        return DeleteIterator(self.base.restart(), self.first, self.last)

    def __repr__(self) -> str:
        return (
            f"DeleteIterator({self.base!r}, first={self.first}, last={self.last})"
        )
