"""
Producer implementations for common data sources.

Producers turn ranges, sequences and arbitrary iterables into lazy
iterators that the combinators in ``lazyiter.core`` can pull from.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

from .core import LazyIterator
from .errors import InvalidParameterError, NotRestartableError
from .protocols import Pulled

T = TypeVar("T")

# End marker for wrapped iterators, distinct from any user value.
_END: Any = object()


class RangeProducer(LazyIterator[int]):
    """
    Producer for integer ranges.

    Follows ``range`` conventions: ``stop`` is exclusive and ``step`` may be
    negative. Use ``from_range`` for inclusive bounds.
    """

    def __init__(self, start: int, stop: int, step: int = 1):
        """
        Create a range producer.

        Args:
            start: Starting value (inclusive)
            stop: Ending value (exclusive)
            step: Step size (default 1)
        """
        super().__init__()
        if step == 0:
            raise InvalidParameterError("Range step cannot be zero")

        self.start = start
        self.stop = stop
        self.step = step
        self._next = start

    def _advance(self) -> Pulled[int]:
        current = self._next
        if (self.step > 0 and current >= self.stop) or (
            self.step < 0 and current <= self.stop
        ):
            return self._finish()
        self._next = current + self.step
        return current

    def restart(self) -> RangeProducer:
        """Start the same range over."""
        return RangeProducer(self.start, self.stop, self.step)

    def __repr__(self) -> str:
        if self.step == 1:
            return f"RangeProducer({self.start}, {self.stop})"
        return f"RangeProducer({self.start}, {self.stop}, {self.step})"


class SequenceProducer(LazyIterator[Any]):
    """
    Producer for indexable sequences.

    This walks lists, tuples, strings and other sequences by index, either
    front to back or back to front, optionally yielding ``(index, item)``
    pairs. The sequence is read at pull time, never copied.
    """

    def __init__(
        self, data: Sequence[T], reverse: bool = False, indexed: bool = False
    ):
        """
        Create a sequence producer.

        Args:
            data: The sequence to iterate over
            reverse: Walk from the last item to the first
            indexed: Yield ``(index, item)`` pairs instead of bare items
        """
        super().__init__()
        self.data = data
        self.reverse = reverse
        self.indexed = indexed
        self._index = len(data) - 1 if reverse else 0

    def _advance(self) -> Pulled[Any]:
        index = self._index
        if index < 0 or index >= len(self.data):
            return self._finish()

        self._index += -1 if self.reverse else 1
        item = self.data[index]
        return (index, item) if self.indexed else item

    def restart(self) -> SequenceProducer:
        """Walk the same sequence again."""
        return SequenceProducer(self.data, self.reverse, self.indexed)

    def __repr__(self) -> str:
        return (
            f"SequenceProducer(<{type(self.data).__name__} of {len(self.data)}>, "
            f"reverse={self.reverse}, indexed={self.indexed})"
        )


class IterableProducer(LazyIterator[T]):
    """
    Producer wrapping any Python iterable.

    Generators, dict views, sets and other iterables become lazy iterators
    this way. Replaying is possible only when the iterable can be iterated
    again; a bare iterator or generator is one-shot.
    """

    def __init__(self, iterable: Iterable[T]):
        super().__init__()
        self.iterable = iterable
        self._iterator: Iterator[T] = iter(iterable)

    def _advance(self) -> Pulled[T]:
        value = next(self._iterator, _END)
        if value is _END:
            return self._finish()
        return value

    def restart(self) -> IterableProducer[T]:
        """
        Iterate the wrapped iterable again.

        Raises:
            NotRestartableError: If the wrapped object is itself an iterator
        """
        if isinstance(self.iterable, Iterator):
            raise NotRestartableError(
                f"Cannot restart a one-shot {type(self.iterable).__name__}"
            )
        return IterableProducer(self.iterable)

    def __repr__(self) -> str:
        return f"IterableProducer(<{type(self.iterable).__name__}>)"
