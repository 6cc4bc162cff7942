"""
Exceptions raised by lazyiter.

Failures inside user-supplied functions and predicates are never wrapped;
they reach the caller of the outermost ``pull()`` or terminal operation
unchanged.
"""


class LazyIterError(Exception):
    """Base class for errors raised by lazyiter itself."""


class EmptySequenceError(LazyIterError, ValueError):
    """An unseeded fold was asked to reduce a source with no elements."""


class InvalidParameterError(LazyIterError, ValueError):
    """A combinator received parameters it cannot honour (e.g. ``step <= 0``)."""


class NotRestartableError(LazyIterError, TypeError):
    """The producer wraps a one-shot iterator and cannot be replayed."""
