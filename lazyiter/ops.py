"""
Free-function forms of the lazy combinators.

Each function accepts any source (a lazy iterator, a Span, a range, a
sequence or another iterable) and is equivalent to the method of the same
name on LazyIterator, so these two chains do the same single pass:

    >>> from lazyiter import Span, filter, map
    >>> list(map(filter(Span(2, 10), lambda x: x % 2 == 0), lambda x: x * 2))
    [4, 8, 12, 16, 20]
    >>> from lazyiter import from_range
    >>> from_range(2, 10).filter(lambda x: x % 2 == 0).map(lambda x: x * 2).to_list()
    [4, 8, 12, 16, 20]

The names shadow builtins on purpose; import them explicitly or use them
through the package namespace.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .adapters import SourceLike, into_lazy_iter
from .core import (
    MISSING,
    ConcatIterator,
    DeleteIterator,
    FilterIterator,
    LazyIterator,
    MapIterator,
    SliceIterator,
    ZipIterator,
)

T = TypeVar("T")
U = TypeVar("U")


def map(source: SourceLike[T], func: Callable[[T], U]) -> LazyIterator[U]:
    """
    Lazily apply ``func`` to every element of ``source``.

    Example:
        >>> from lazyiter import Span, map
        >>> list(map(Span(1, 3), lambda x: f"foo: {x}"))
        ['foo: 1', 'foo: 2', 'foo: 3']
    """
    return MapIterator(into_lazy_iter(source), func)


def filter(source: SourceLike[T], predicate: Callable[[T], bool]) -> LazyIterator[T]:
    """
    Lazily keep the elements of ``source`` that satisfy ``predicate``.

    Example:
        >>> from lazyiter import Span, filter
        >>> list(filter(Span(1, 11), lambda x: x % 2 == 0))
        [2, 4, 6, 8, 10]
    """
    return FilterIterator(into_lazy_iter(source), predicate)


def concat(*sources: SourceLike[T]) -> LazyIterator[T]:
    """
    Lazily chain the elements of several sources, in order.

    With no sources the result is empty. A lazy iterator can be passed only
    once; use its restart() to repeat it.

    Example:
        >>> from lazyiter import Span, concat
        >>> list(concat(Span(1, 4), Span(20, 23)))
        [1, 2, 3, 4, 20, 21, 22, 23]
    """
    return ConcatIterator([into_lazy_iter(source) for source in sources])


def zip(left: SourceLike[T], right: SourceLike[U]) -> LazyIterator[tuple[T, U]]:
    """
    Lazily pair up the elements of two sources until either runs out.

    Both sources are pulled before the end is detected, so the longer one
    is advanced once past the last pair. The two sources must not be the
    same lazy iterator.

    Example:
        >>> from lazyiter import Span, zip
        >>> list(zip(Span(1, 4), Span(20, 24)))
        [(1, 20), (2, 21), (3, 22), (4, 23)]
    """
    return ZipIterator(into_lazy_iter(left), into_lazy_iter(right))


def slice(
    source: SourceLike[T], first: int, last: int, step: int = 1
) -> LazyIterator[T]:
    """
    Lazily yield every ``step``-th element at positions ``first..last``.

    Positions are zero-based and inclusive. The source is not pulled past
    position ``last``, so this works on endless sources.

    Raises:
        InvalidParameterError: If ``step <= 0`` or a position is negative

    Example:
        >>> from lazyiter import Span, slice
        >>> list(slice(Span(0, 100), 10, 20, 2))
        [10, 12, 14, 16, 18, 20]
    """
    return SliceIterator(into_lazy_iter(source), first, last, step)


def delete(source: SourceLike[T], first: int, last: int) -> LazyIterator[T]:
    """
    Lazily yield the elements of ``source`` except positions ``first..last``.

    Raises:
        InvalidParameterError: If a position is negative

    Example:
        >>> from lazyiter import Span, delete
        >>> list(delete(Span(1, 10), 4, 8))
        [1, 2, 3, 4, 10]
    """
    return DeleteIterator(into_lazy_iter(source), first, last)


def foldl(
    source: SourceLike[T], func: Callable[[Any, T], Any], seed: Any = MISSING
) -> Any:
    """
    Fold ``source`` from the left into a single value.

    Args:
        source: The elements to fold
        func: Function of ``(accumulator, element)`` returning the new
            accumulator
        seed: Initial accumulator; when omitted the first element is used

    Returns:
        The final accumulator (``seed`` for an empty source)

    Raises:
        EmptySequenceError: If no seed is given and the source is empty

    Example:
        >>> from lazyiter import Span, foldl
        >>> foldl(Span(1, 10), lambda acc, x: acc + x, 0)
        55
    """
    return into_lazy_iter(source).foldl(func, seed)


def to_list(source: SourceLike[T]) -> list[T]:
    """Drain a source into a list."""
    return into_lazy_iter(source).to_list()
