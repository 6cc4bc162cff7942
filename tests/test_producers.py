"""
Tests for source producers and adapters.
"""

import pytest

from lazyiter import (
    EXHAUSTED,
    InvalidParameterError,
    IterableProducer,
    LazyIterator,
    NotRestartableError,
    RangeProducer,
    SequenceProducer,
    Span,
    from_range,
    into_lazy_iter,
    rev_items,
    rev_pairs,
)


class TestFromRange:
    """Tests for inclusive range sources."""

    def test_inclusive(self):
        """Test that both bounds are included."""
        assert from_range(1, 4).to_list() == [1, 2, 3, 4]

    def test_single_element(self):
        """Test single element range."""
        assert from_range(3, 3).to_list() == [3]

    def test_empty_range(self):
        """Test that a > b yields nothing."""
        it = from_range(5, 4)
        assert it.pull() is EXHAUSTED

    def test_negative_numbers(self):
        """Test with negative numbers."""
        assert from_range(-2, 2).to_list() == [-2, -1, 0, 1, 2]


class TestRangeProducer:
    """Tests for the exclusive-stop range producer."""

    def test_step(self):
        """Test a positive step."""
        assert RangeProducer(0, 10, 3).to_list() == [0, 3, 6, 9]

    def test_negative_step(self):
        """Test counting down."""
        assert RangeProducer(10, 0, -3).to_list() == [10, 7, 4, 1]

    def test_zero_step(self):
        """Test that a zero step is rejected."""
        with pytest.raises(InvalidParameterError):
            RangeProducer(0, 10, 0)

    def test_repr(self):
        """Test the repr used in log messages."""
        assert repr(RangeProducer(1, 5)) == "RangeProducer(1, 5)"
        assert repr(RangeProducer(5, 1, -1)) == "RangeProducer(5, 1, -1)"


class TestSequenceProducer:
    """Tests for sequence sources."""

    def test_list(self):
        """Test walking a list."""
        assert SequenceProducer([1, 2, 3]).to_list() == [1, 2, 3]

    def test_strings(self):
        """Test with strings."""
        assert SequenceProducer("abc").to_list() == ["a", "b", "c"]

    def test_reads_at_pull_time(self):
        """Test that the sequence is not copied up front."""
        data = [1, 2]
        it = SequenceProducer(data)
        data.append(3)
        assert it.to_list() == [1, 2, 3]

    def test_rev_items(self):
        """Test walking a sequence backwards."""
        assert rev_items([1, 3, 5, 7, 9, 11]).to_list() == [11, 9, 7, 5, 3, 1]

    def test_rev_pairs(self):
        """Test reversed (index, item) pairs."""
        assert rev_pairs("ab").to_list() == [(1, "b"), (0, "a")]

    def test_rev_empty(self):
        """Test reversing an empty sequence."""
        assert rev_items([]).to_list() == []
        assert rev_pairs(()).to_list() == []

    def test_restart(self):
        """Test replaying a reversed walk."""
        it = rev_items((1, 2, 3))
        it.pull()
        assert it.restart().to_list() == [3, 2, 1]


class TestIterableProducer:
    """Tests for wrapping arbitrary iterables."""

    def test_generator(self):
        """Test wrapping a generator."""
        it = IterableProducer(x * x for x in range(4))
        assert it.to_list() == [0, 1, 4, 9]

    def test_dict_values(self):
        """Test wrapping a dict view."""
        d = {1: 4, 2: 5, 3: 6}
        assert IterableProducer(d.values()).to_list() == [4, 5, 6]

    def test_restart_reiterable(self):
        """Test replaying a container that can be iterated again."""
        it = IterableProducer({"a": 1, "b": 2})
        assert it.to_list() == ["a", "b"]
        assert it.restart().to_list() == ["a", "b"]

    def test_restart_one_shot(self):
        """Test that a bare iterator cannot be replayed."""
        it = IterableProducer(iter([1, 2, 3]))
        with pytest.raises(NotRestartableError):
            it.restart()

    def test_not_restartable_is_type_error(self):
        """Test the builtin category of the replay error."""
        with pytest.raises(TypeError):
            IterableProducer(x for x in "ab").restart()


class TestIntoLazyIter:
    """Tests for source resolution."""

    def test_identity(self):
        """Test that lazy iterators pass through unchanged."""
        it = from_range(1, 3).map(str)
        assert into_lazy_iter(it) is it

    def test_span(self):
        """Test inclusive spans."""
        assert into_lazy_iter(Span(2, 5)).to_list() == [2, 3, 4, 5]
        assert into_lazy_iter(Span(5, 2)).to_list() == []

    def test_range(self):
        """Test Python ranges keep their own conventions."""
        it = into_lazy_iter(range(0, 10, 3))
        assert isinstance(it, RangeProducer)
        assert it.to_list() == [0, 3, 6, 9]

    def test_sequence(self):
        """Test that sequences become sequence producers."""
        assert isinstance(into_lazy_iter((1, 2)), SequenceProducer)
        assert isinstance(into_lazy_iter("ab"), SequenceProducer)

    def test_other_iterable(self):
        """Test that other iterables are wrapped."""
        it = into_lazy_iter({1, 2, 3})
        assert isinstance(it, IterableProducer)
        assert sorted(it) == [1, 2, 3]

    def test_not_iterable(self):
        """Test that non-iterables are rejected."""
        with pytest.raises(TypeError):
            into_lazy_iter(42)

    def test_result_is_lazy_iterator(self):
        """Test that every conversion yields a LazyIterator."""
        for source in (Span(1, 2), range(3), [1], iter([1]), from_range(1, 2)):
            assert isinstance(into_lazy_iter(source), LazyIterator)


class TestSpan:
    """Tests for the Span value type."""

    def test_immutable(self):
        """Test that spans cannot be modified."""
        span = Span(1, 10)
        with pytest.raises(AttributeError):
            span.a = 5

    def test_fresh_producer_each_time(self):
        """Test that a span can be converted repeatedly."""
        span = Span(1, 3)
        assert span.into_lazy_iter().to_list() == [1, 2, 3]
        assert span.into_lazy_iter().to_list() == [1, 2, 3]
