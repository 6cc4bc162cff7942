"""
Adapters for converting standard Python objects into lazy iterators.

This module provides the ergonomic interface for creating lazy iterators
from inclusive spans, ranges, sequences and other iterables.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple, TypeVar, overload

from .core import LazyIterator
from .producers import IterableProducer, RangeProducer, SequenceProducer

T = TypeVar("T")


class Span(NamedTuple):
    """
    An immutable pair of inclusive integer bounds.

    ``Span(2, 5)`` stands for 2, 3, 4, 5. A span whose ``a`` is greater than
    its ``b`` is empty. Spans are not iterators themselves; every combinator
    converts them on demand.
    """

    a: int
    b: int

    def into_lazy_iter(self) -> RangeProducer:
        """Create a fresh producer over this span."""
        return from_range(self.a, self.b)


type SourceLike[T] = LazyIterator[T] | Span | range | Iterable[T]


def from_range(a: int, b: int) -> RangeProducer:
    """
    Create a lazy iterator over ``a..b``, both ends inclusive.

    Args:
        a: First value
        b: Last value; nothing is produced if it is smaller than ``a``

    Returns:
        A RangeProducer

    Example:
        >>> from lazyiter import from_range
        >>> from_range(1, 4).to_list()
        [1, 2, 3, 4]
    """
    return RangeProducer(a, b + 1)


@overload
def into_lazy_iter(source: Span | range) -> RangeProducer: ...


@overload
def into_lazy_iter[T](source: LazyIterator[T]) -> LazyIterator[T]: ...


@overload
def into_lazy_iter[T](source: Iterable[T]) -> LazyIterator[T]: ...


def into_lazy_iter(source: Any) -> LazyIterator[Any]:
    """
    Convert a source into a lazy iterator.

    Lazy iterators are returned unchanged, so every combinator can accept
    either a raw source or the result of another combinator.

    Args:
        source: A LazyIterator, Span, range, sequence or other iterable

    Returns:
        A lazy iterator over the source

    Raises:
        TypeError: If the source is not iterable

    Example:
        >>> from lazyiter import into_lazy_iter
        >>> into_lazy_iter([1, 2, 3]).map(lambda x: x * 10).to_list()
        [10, 20, 30]
    """
    if isinstance(source, LazyIterator):
        return source
    elif isinstance(source, Span):
        return source.into_lazy_iter()
    elif isinstance(source, range):
        return RangeProducer(source.start, source.stop, source.step)
    elif isinstance(source, Sequence):
        return SequenceProducer(source)
    elif isinstance(source, Iterable):
        return IterableProducer(source)
    raise TypeError(f"Cannot iterate lazily over {type(source).__name__}")


def rev_items[T](data: Sequence[T]) -> LazyIterator[T]:
    """
    Lazily yield the items of a sequence from last to first.

    Args:
        data: The sequence to walk backwards

    Example:
        >>> from lazyiter import rev_items
        >>> rev_items([1, 3, 5]).to_list()
        [5, 3, 1]
    """
    return SequenceProducer(data, reverse=True)


def rev_pairs[T](data: Sequence[T]) -> LazyIterator[tuple[int, T]]:
    """
    Lazily yield ``(index, item)`` pairs of a sequence from last to first.

    Example:
        >>> from lazyiter import rev_pairs
        >>> rev_pairs("abc").to_list()
        [(2, 'c'), (1, 'b'), (0, 'a')]
    """
    return SequenceProducer(data, reverse=True, indexed=True)
