# pond/core.py
"""
Pond closure constructor.

    pond(state, handler) -> closure

`handler` takes (rebuild, state, *args). The closure returned by `pond`
takes exactly the trailing *args and calls

    handler(rebuild, state, *args)

where `rebuild(next_state)` builds the same closure again over
`next_state`. The handler decides what the call returns; usually that is
a value together with `rebuild(next_state)`:

    def hello(rebuild, state):
        if state == "hello":
            return state, rebuild("world")
        return state, rebuild(state)

    f = pond("hello", hello)
    value, f = f()    # "hello"
    value, f = f()    # "world"

Nothing is mutated: every call builds a new closure, and the same
handler object is reused along the whole chain. Calling one closure
twice with the same arguments gives equal results.

Self-reference is set up with a self-application combinator,
fix(g) == g(g), so `rebuild` can refer to itself without a named
recursive binding.

A handler that keeps calling its own closures without returning will
eventually raise RecursionError. That is a caller-level loop and is left
to propagate.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

from . import config
from .app import Composite, apply, arity, nary
from .errors import ArityTooLarge, HandlerArityTooSmall

_LOGGER = logging.getLogger(__name__)


def fix(generator: Callable[[Callable], Any]) -> Any:
    """Apply `generator` to itself."""
    return generator(generator)


def pond(state: Any, handler: Any) -> Callable:
    """
    Build a stateful closure of arity arity(handler) - 2 over `state`.

    Raises:
        HandlerArityTooSmall: if the handler takes fewer than 2 arguments.
        ArityTooLarge: if the closure arity would exceed MAX_ARITY.
        UnsupportedCallableKind: if the handler has no fixed arity.
    """
    handler_arity = arity(handler)
    if handler_arity < 2:
        raise HandlerArityTooSmall(
            f"handler must take at least (rebuild, state), "
            f"got arity {handler_arity}"
        )
    if handler_arity > config.MAX_HANDLER_ARITY:
        raise ArityTooLarge(
            f"handler arity {handler_arity} exceeds the supported maximum "
            f"of {config.MAX_HANDLER_ARITY}"
        )

    n = handler_arity - 2
    if config.trace_enabled():
        _LOGGER.debug("pond/%d over %r", n, state)
    return _rebuilder(n, handler)(state)


construct = pond


def _rebuilder(n: int, handler: Any) -> Callable[[Any], Callable]:
    invoke = _invoker(handler)

    def generator(self_generator):
        def rebuild(state):
            return _bind(n, invoke, fix(self_generator), state)
        return rebuild

    return fix(generator)


def _invoker(handler: Any) -> Callable[[Tuple[Any, ...]], Any]:
    # Composites are not callable; they only run through apply.
    if isinstance(handler, Composite):
        return lambda args: apply(handler, args)
    return lambda args: handler(*args)


def _bind(
    n: int,
    invoke: Callable[[Tuple[Any, ...]], Any],
    rebuild: Callable[[Any], Callable],
    state: Any,
) -> Callable:
    return nary(n, lambda args: invoke((rebuild, state) + args), name="pond")
