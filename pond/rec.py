# pond/rec.py
"""
Function invocations recorder.

A recorder is itself a pond wrapped around another callable `fun`
(usually a stateful closure built by `pond`).

Modes
-----
AUTO     The recorder hands every call to `fun`. While the result is
         another callable of the same arity, the next call goes to that
         result instead. The first result that is anything else is the
         divergence point: the recorder saves the callable that produced
         it in `Rec.fun`, the result in `Rec.value`, and from then on only
         queues the arguments of further calls in `Rec.next`.
REC      Start queueing at once, without ever calling `fun`. `fun` may
         also be a bare arity, in which case there is nothing to call and
         `Rec.fun` stays None.
STOPPED  `stop(recorder)` calls the recorder with STOP in every position
         and returns the finished `Rec`.
PLAY     `play(rec)` starts an AUTO recorder over `rec.fun`, replays every
         argument list of `rec.next` in order, and stops it.

Example, with a closure that collects three values and then returns them:

    def upto3(rebuild, acc, value):
        if len(acc) == 2:
            return acc + [value]
        return rebuild(acc + [value])

    r = start(pond([], upto3))
    for item in ("one", "two", "three", "four", "five"):
        r = r(item)
    tape = stop(r)
    tape.value    # ["one", "two", "three"]
    tape.next     # [["four"], ["five"]]

Known limitation: a result that is a callable of the recorder's arity is
always forwarded, even when the wrapped closure meant it as a final value.

A recorder of arity 0 has no positions to tell a stop from a call, so every
call on it finishes the recording.

Set POND_TRACE=1 to log each transition at DEBUG level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

from . import config
from .app import Composite, arity, is_callable_of, nary
from .core import pond
from .errors import ArityTooLarge, UnsupportedCallableKind

_LOGGER = logging.getLogger(__name__)


class Mode(Enum):
    """Recorder modes."""
    AUTO = "auto"
    REC = "rec"
    PLAY = "play"
    STOPPED = "stopped"


class StopMarker:
    """Sentinel asking a recorder to finish."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "STOP"


STOP = StopMarker()


@dataclass(frozen=True)
class Rec:
    """
    A recording.

    fun:   the last callable driven before divergence (or the wrapped
           callable in REC mode).
    value: the terminal value produced at divergence, None if there was
           none.
    next:  argument lists of calls made after divergence, in call order
           once the recording is stopped.
    """
    fun: Optional[Callable] = None
    value: Any = None
    next: Sequence[Sequence[Any]] = ()


def _trace(msg: str, *args: Any) -> None:
    if config.trace_enabled():
        _LOGGER.debug(msg, *args)


# ---------------------------------------------------------------------------
# Recording handler
# ---------------------------------------------------------------------------

def _finalize(state: Any) -> Rec:
    if isinstance(state, Rec):
        # The queue is kept newest-first while recording.
        rec = replace(state, next=[list(args) for args in reversed(state.next)])
    else:
        rec = Rec(fun=state, next=[])
    _trace("%s: %d queued call(s)", Mode.STOPPED.value, len(rec.next))
    return rec


def _recorder(n: int) -> Callable:
    """Build the recording handler for closures of arity `n`."""

    def step(args):
        rebuild, state, call = args[0], args[1], args[2:]

        if all(arg is STOP for arg in call):
            return _finalize(state)

        if isinstance(state, Rec):
            _trace("queue %r", call)
            return rebuild(replace(state, next=(list(call),) + tuple(state.next)))

        result = state(*call)
        if is_callable_of(result, n):
            _trace("forward %r", call)
            return rebuild(result)

        _trace("diverge at %r with %r", call, result)
        return rebuild(Rec(fun=state, value=result))

    return nary(n + 2, step, name="rec", limit=config.MAX_HANDLER_ARITY)


def _checked_arity(n: int) -> int:
    if n < 0:
        raise ValueError(f"recorder arity must be >= 0, got {n}")
    if n > config.MAX_ARITY:
        raise ArityTooLarge(
            f"recorder arity {n} exceeds the supported maximum of {config.MAX_ARITY}"
        )
    return n


def _plain_callable(source: Any) -> Callable:
    if isinstance(source, Composite) or not callable(source):
        raise UnsupportedCallableKind(
            f"recorder needs a plain callable, got {source!r}"
        )
    return source


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def start(source: Union[Callable, int], mode: Union[Mode, str] = Mode.AUTO) -> Callable:
    """
    Create a recorder over `source`.

    `source` is a callable, or (REC mode only) a bare arity.

    Raises:
        UnsupportedCallableKind: AUTO mode without a plain callable.
        ArityTooLarge: source arity above MAX_ARITY.
        ValueError: unknown mode, or PLAY/STOPPED given as a start mode.
    """
    mode = Mode(mode)

    if mode is Mode.AUTO:
        if isinstance(source, int):
            raise UnsupportedCallableKind(
                f"auto mode needs a callable to forward to, got arity {source}"
            )
        fun = _plain_callable(source)
        n = _checked_arity(arity(fun))
        _trace("%s/%d over %r", mode.value, n, fun)
        return pond(fun, _recorder(n))

    if mode is Mode.REC:
        if isinstance(source, int):
            n = _checked_arity(source)
            state = Rec()
        else:
            fun = _plain_callable(source)
            n = _checked_arity(arity(fun))
            state = Rec(fun=fun)
        _trace("%s/%d", mode.value, n)
        return pond(state, _recorder(n))

    raise ValueError(
        f"{mode.value!r} is not a start mode; use play() or stop()"
    )


def rec(fun: Callable) -> Callable:
    """Shorthand for start(fun, Mode.AUTO)."""
    return start(fun, Mode.AUTO)


def stop(recorder: Callable) -> Rec:
    """Finish a recording and return its Rec."""
    n = arity(recorder)
    return recorder(*([STOP] * n))


def play(tape: Rec) -> Rec:
    """
    Replay `tape.next` against `tape.fun` and return the new recording.

    Raises:
        UnsupportedCallableKind: if the tape has no callable to play on.
    """
    if tape.fun is None:
        raise UnsupportedCallableKind("cannot play a Rec without a fun")

    _trace("%s %d call(s)", Mode.PLAY.value, len(tape.next))
    recorder = start(tape.fun, Mode.AUTO)
    for args in tape.next:
        recorder = recorder(*args)
    return stop(recorder)
