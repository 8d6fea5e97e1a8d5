# pond/acc.py
"""
Functions for accumulating state.

Accumulators are useful together with `pipe` for driving closures that
return (value, next_closure) pairs while keeping every value seen so far:

    def hello(rebuild, state):
        if state == "hello":
            return state, rebuild("world")
        return state, rebuild(state)

    f = pond("hello", hello)
    value(pipe(pipe(into(f, as_list()))))    # ["hello", "world"]

Accumulators are themselves ponds of arity 1, so they can be fed by hand:

    a = as_list()
    a = a("hello")
    a = a("world")
    value(a)                                  # ["hello", "world"]

Feeding the HALT marker asks an accumulator for its current value; that is
what `value` does.
"""

from __future__ import annotations

from typing import Any, Callable

from .app import Composite, is_callable_of
from .core import pond
from .errors import UnsupportedCallableKind


class _Marker:
    """Private accumulator marker."""
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


IDLE = _Marker("IDLE")
HALT = _Marker("HALT")

_NO_INITIAL = _Marker("NO_INITIAL")


def into(closure: Any, acc: Callable) -> Composite:
    """Pair `closure` with accumulator `acc` for piping."""
    return Composite(acc, closure)


def value(acc: Any) -> Any:
    """
    Extract the current value from an accumulator.

    Accepts a Composite (its accumulator is used) or a bare unary
    accumulator.
    """
    if isinstance(acc, Composite):
        acc = acc.acc
    if not is_callable_of(acc, 1):
        raise UnsupportedCallableKind(f"not an accumulator: {acc!r}")
    return acc(HALT)


def as_list() -> Callable:
    """Accumulator returning every value given to it, in order."""

    def step(rebuild, state, item):
        if item is HALT:
            return [] if state is IDLE else list(state)
        if state is IDLE:
            return rebuild((item,))
        return rebuild(state + (item,))

    return pond(IDLE, step)


def last() -> Callable:
    """Accumulator keeping only the most recent value (None if empty)."""

    def step(rebuild, state, item):
        if item is HALT:
            return None if state is IDLE else state
        return rebuild(item)

    return pond(IDLE, step)


def reduce(reducer: Callable[[Any, Any], Any], initial: Any = _NO_INITIAL) -> Callable:
    """
    Accumulator folding values with reducer(acc, value).

    Without `initial` the first value starts the fold and an empty
    accumulator yields None.
    """
    if initial is _NO_INITIAL:
        def step(rebuild, state, item):
            if item is HALT:
                return None if state is IDLE else state
            if state is IDLE:
                return rebuild(item)
            return rebuild(reducer(state, item))

        return pond(IDLE, step)

    def step_from(rebuild, state, item):
        if item is HALT:
            return state
        return rebuild(reducer(state, item))

    return pond(initial, step_from)
