# pond/recipes.py
"""
Small programs built from ponds.

growing(ints)    an endless generator: each call returns (value, next)
take(gen, n)     pull n values out of a generator with an accumulator
source(items)    push side of a stream handshake
sink()           pull side of a stream handshake

The stream pair talks over arity-2 closures taking (signal, payload):

    GREET  payload is the other side's closure
    DATA   payload is one item (or None when the sink asks for data)
    END    no more items

    src = sink()(GREET, source(["hello", "world"]))
    src(DATA, None)    # ["hello", "world"]

Neither side holds a mutable buffer: the sink threads the items it has
seen through its own state, and each push returns the next sink.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Tuple

from .acc import as_list, into, value
from .core import pond
from .pipe import pipe

GREET = 0
DATA = 1
END = 2


class _Idle:
    __slots__ = ()

    def __repr__(self) -> str:
        return "IDLE"


_IDLE = _Idle()


def growing(ints: Iterable[int]) -> Callable:
    """
    Generator over n * m for n in `ints`, with m growing tenfold each lap.

        growing([1, 2]) yields 1, 2, 10, 20, 100, 200, ...
    """
    ints = tuple(ints)
    if not ints:
        raise ValueError("growing() needs at least one int")

    def step(rebuild, state):
        pending, m = state
        if pending:
            return pending[0] * m, rebuild((pending[1:], m))
        return rebuild((ints, m * 10))()

    return pond((ints, 1), step)


def take(gen: Callable, n: int) -> Tuple[List[Any], Callable]:
    """Call generator `gen` n times; return (values, next generator)."""
    if n < 0:
        raise ValueError(f"take() needs n >= 0, got {n}")
    piped = into(gen, as_list())
    for _ in range(n):
        piped = pipe(piped)
    return value(piped), piped.app


def source(items: Iterable[Any]) -> Callable:
    """Push side: on DATA, pushes every item into the greeted sink."""
    items = tuple(items)

    def step(rebuild, state, signal, payload):
        if state is _IDLE and signal == GREET:
            return payload(GREET, rebuild(payload))
        if state is not _IDLE and signal == DATA:
            out = state
            for item in items:
                out = out(DATA, item)
            return out(END, None)
        raise ValueError(f"source: unexpected signal {signal!r} in state {state!r}")

    return pond(_IDLE, step)


def sink() -> Callable:
    """Pull side: collects pushed items and returns them on END."""

    def step(rebuild, state, signal, payload):
        if state is _IDLE and signal == GREET:
            return payload(GREET, rebuild(()))
        if state == () and signal == GREET:
            return payload
        if state is not _IDLE and signal == DATA:
            return rebuild(state + (payload,))
        if state is not _IDLE and signal == END:
            return list(state)
        raise ValueError(f"sink: unexpected signal {signal!r} in state {state!r}")

    return pond(_IDLE, step)
