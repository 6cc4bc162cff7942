"""
Core protocol definitions for lazy iterators.

A producer is pulled one element at a time; when it has nothing left it sets
its ``exhausted`` flag and returns the ``EXHAUSTED`` sentinel, and keeps
returning it on every later pull. Consumers drain a producer and reduce it to
a single result.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from enum import Enum
from typing import Literal, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)  # Covariant for Producer (output only)
T_contra = TypeVar(
    "T_contra", contravariant=True
)  # Contravariant for Consumer (input only)
R_co = TypeVar("R_co", covariant=True)


class Exhausted(Enum):
    """Marker type for the single "no more elements" value."""

    EXHAUSTED = "EXHAUSTED"

    def __repr__(self) -> str:
        return "EXHAUSTED"


EXHAUSTED = Exhausted.EXHAUSTED

type Pulled[T] = T | Literal[Exhausted.EXHAUSTED]


@runtime_checkable
class Producer(Protocol[T_co]):
    """
    A resumable, stateful source of elements.

    Producers are single-owner and single-threaded: pulling mutates the
    producer's captured position.
    """

    @abstractmethod
    def pull(self) -> T_co | Literal[Exhausted.EXHAUSTED]:
        """
        Produce the next element.

        Returns:
            The next element, or ``EXHAUSTED`` once the source is used up.
            Pulling an exhausted producer returns ``EXHAUSTED`` again.
        """
        ...

    @property
    @abstractmethod
    def exhausted(self) -> bool:
        """
        Whether the source is used up.

        This is the authoritative end signal: an ``EXHAUSTED`` object that
        appears in the data is returned by ``pull()`` like any other value
        and does not set this flag.
        """
        ...

    @abstractmethod
    def restart(self) -> Producer[T_co]:
        """
        Build a fresh producer over the same source and parameters.

        The new producer starts from the beginning and shares no position
        state with ``self``.
        """
        ...


class Consumer(Protocol[T_contra, R_co]):
    """A consumer drains elements and produces a single result."""

    @abstractmethod
    def consume_iter(self, iterator: Iterator[T_contra]) -> R_co:
        """
        Consume all elements from the iterator and produce a result.

        Args:
            iterator: An iterator producing elements to consume

        Returns:
            The result of consuming all elements
        """
        ...
