"""
lazyiter - Lazy, composable sequence combinators

Every combinator returns a new lazy iterator that pulls from its upstream on
demand, so a chain like ``filter(...).map(...).filter(...)`` makes a single
pass over the data instead of one pass per stage.
"""

import logging

from .adapters import Span, from_range, into_lazy_iter, rev_items, rev_pairs
from .config import IterConfig, get_trace, set_trace
from .core import LazyIterator
from .errors import (
    EmptySequenceError,
    InvalidParameterError,
    LazyIterError,
    NotRestartableError,
)
from .ops import concat, delete, filter, foldl, map, slice, to_list, zip
from .producers import IterableProducer, RangeProducer, SequenceProducer
from .protocols import EXHAUSTED, Exhausted

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "LazyIterator",
    "Span",
    "from_range",
    "into_lazy_iter",
    "rev_items",
    "rev_pairs",
    "map",
    "filter",
    "concat",
    "zip",
    "slice",
    "delete",
    "foldl",
    "to_list",
    "RangeProducer",
    "SequenceProducer",
    "IterableProducer",
    "EXHAUSTED",
    "Exhausted",
    "IterConfig",
    "set_trace",
    "get_trace",
    "LazyIterError",
    "EmptySequenceError",
    "InvalidParameterError",
    "NotRestartableError",
]
