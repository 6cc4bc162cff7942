"""
Bridge function that connects producers and consumers.

Every terminal operation goes through ``drive``: the consumer pulls the
producer to exhaustion in the calling thread.
"""

import logging
from collections.abc import Iterator
from typing import TypeVar

from .protocols import Consumer

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def drive(producer: Iterator[T], consumer: Consumer[T, R]) -> R:
    """
    Drain a producer into a consumer.

    Exceptions raised by user functions anywhere in the producer chain, or
    by the consumer, propagate unchanged.

    Args:
        producer: The lazy iterator generating elements
        consumer: The consumer processing elements

    Returns:
        The result from the consumer
    """
    logger.debug("driving %r into %s", producer, type(consumer).__name__)
    result = consumer.consume_iter(producer)
    logger.debug("%s finished", type(consumer).__name__)
    return result
