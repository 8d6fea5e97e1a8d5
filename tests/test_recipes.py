"""
Tests for recipes: generators and the push/pull stream handshake.
"""

import pytest

from pond.app import arity
from pond.recipes import DATA, END, GREET, growing, sink, source, take


class TestGrowing:
    """Tests for growing()."""

    def test_first_values(self):
        values, _ = take(growing([1, 2, 3]), 7)
        assert values == [1, 2, 3, 10, 20, 30, 100]

    def test_resume_from_returned_generator(self):
        _, gen = take(growing([1, 2]), 3)
        values, _ = take(gen, 3)
        assert values == [20, 100, 200]

    def test_single_call(self):
        value, gen = growing([5])()
        assert value == 5
        assert gen()[0] == 50

    def test_generator_is_nullary(self):
        assert arity(growing([1])) == 0

    def test_empty_ints(self):
        with pytest.raises(ValueError):
            growing([])


class TestTake:
    """Tests for take()."""

    def test_zero(self):
        gen = growing([1])
        values, same = take(gen, 0)
        assert values == []
        assert same is gen

    def test_negative(self):
        with pytest.raises(ValueError):
            take(growing([1]), -1)


class TestStream:
    """Tests for source() and sink()."""

    def test_handshake_returns_greeted_source(self):
        src = sink()(GREET, source(["hello", "world"]))
        assert arity(src) == 2

    def test_pull_collects_items_in_order(self):
        src = sink()(GREET, source(["hello", "world"]))
        assert src(DATA, None) == ["hello", "world"]

    def test_empty_source(self):
        assert sink()(GREET, source([]))(DATA, None) == []

    def test_pull_twice(self):
        src = sink()(GREET, source([1, 2, 3]))
        assert src(DATA, None) == src(DATA, None) == [1, 2, 3]

    def test_sink_fed_by_hand(self):
        collected = sink()
        # A greeted sink collects whatever is pushed into it.
        pushed = []

        def fake_source(signal, payload):
            pushed.append(signal)
            return payload

        s = collected(GREET, fake_source)
        s = s(DATA, "a")
        s = s(DATA, "b")
        assert s(END, None) == ["a", "b"]
        assert pushed == [GREET]

    def test_idle_sink_rejects_data(self):
        with pytest.raises(ValueError):
            sink()(DATA, 1)

    def test_idle_source_rejects_data(self):
        with pytest.raises(ValueError):
            source([1])(DATA, None)
