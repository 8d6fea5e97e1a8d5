# pond/app.py
"""
Pond Applicative.

An applicative is anything pond can call with a fixed number of arguments
and get another value back. The set of kinds is closed:

    Primitive   a plain Python callable whose positional arity can be read
                with inspect.signature (positional parameters without
                defaults)

    Composite   Composite(acc, app): an accumulator riding on another
                applicative. Calling it calls `app`, expects a
                (value, next_app) pair, feeds `value` into `acc`, and
                returns Composite(acc(value), next_app)

Composite is what lets a pipe keep collecting values from a chain of
stateful closures without the closures knowing anything about it.

Every closure built by pond goes through `nary`, a fixed table of N-ary
adapters (N in 0..MAX_HANDLER_ARITY). Adapters carry an explicit
__signature__ so their arity reads back exactly, and they raise
ArityMismatch instead of silently padding or truncating.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, NamedTuple, Sequence, Tuple

from .config import MAX_ARITY, MAX_HANDLER_ARITY
from .errors import (
    ArityMismatch,
    ArityTooLarge,
    MalformedResult,
    UnsupportedCallableKind,
)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class Composite(NamedTuple):
    """An accumulator paired with the applicative it collects from."""
    acc: Any
    app: Any


# ---------------------------------------------------------------------------
# Arity
# ---------------------------------------------------------------------------

def _native_arity(fun: Callable) -> int:
    try:
        sig = inspect.signature(fun)
    except (TypeError, ValueError) as err:
        raise UnsupportedCallableKind(
            f"cannot read the signature of {fun!r}"
        ) from err

    n = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            raise UnsupportedCallableKind(
                f"{fun!r} takes *{param.name} and has no fixed arity"
            )
        if param.default is not inspect.Parameter.empty:
            continue
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            raise UnsupportedCallableKind(
                f"{fun!r} requires keyword-only argument {param.name!r}"
            )
        if param.kind in _POSITIONAL:
            n += 1
    return n


def arity(app: Any) -> int:
    """
    Return the number of arguments `app` takes.

    Raises:
        UnsupportedCallableKind: if `app` is neither a Composite nor a
            callable with a fixed positional arity.
    """
    if isinstance(app, Composite):
        return arity(app.app)
    if callable(app):
        return _native_arity(app)
    raise UnsupportedCallableKind(
        f"{type(app).__name__} is not an applicative: {app!r}"
    )


def is_callable_of(value: Any, n: int) -> bool:
    """
    True if `value` is a plain callable taking exactly `n` arguments.

    Composites and callables without a readable arity answer False.
    """
    if isinstance(value, Composite) or not callable(value):
        return False
    try:
        return _native_arity(value) == n
    except UnsupportedCallableKind:
        return False


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

def apply(app: Any, args: Sequence[Any]) -> Any:
    """
    Apply `args` to `app`.

    For a Composite the inner result must be a (value, next_app) pair; the
    return value is Composite(acc(value), next_app).

    Raises:
        ArityMismatch: if len(args) != arity(app).
        MalformedResult: if a Composite's inner call is not a 2-tuple.
    """
    args = tuple(args)
    expected = arity(app)
    if len(args) != expected:
        raise ArityMismatch(
            f"{_describe(app)} takes {expected} argument(s), got {len(args)}"
        )

    if isinstance(app, Composite):
        result = apply(app.app, args)
        if not (isinstance(result, tuple) and len(result) == 2):
            raise MalformedResult(
                f"expected a (value, next) pair from {_describe(app.app)}, "
                f"got {result!r}"
            )
        value, next_app = result
        return Composite(apply(app.acc, (value,)), next_app)

    return app(*args)


def _describe(app: Any) -> str:
    if isinstance(app, Composite):
        return f"Composite over {_describe(app.app)}"
    return getattr(app, "__qualname__", None) or repr(app)


# ---------------------------------------------------------------------------
# Fixed-arity adapters
# ---------------------------------------------------------------------------

def _adapter(n: int) -> Callable[[Callable[[Tuple[Any, ...]], Any], str], Callable]:
    signature = inspect.Signature([
        inspect.Parameter(f"arg{i}", inspect.Parameter.POSITIONAL_ONLY)
        for i in range(n)
    ])

    def bind(call: Callable[[Tuple[Any, ...]], Any], name: str) -> Callable:
        def fun(*args):
            if len(args) != n:
                raise ArityMismatch(
                    f"{name}/{n} takes {n} argument(s), got {len(args)}"
                )
            return call(args)

        fun.__signature__ = signature
        fun.__name__ = fun.__qualname__ = f"{name}/{n}"
        return fun

    return bind


_ADAPTERS = tuple(_adapter(n) for n in range(MAX_HANDLER_ARITY + 1))


def nary(
    n: int,
    call: Callable[[Tuple[Any, ...]], Any],
    name: str = "app",
    limit: int = MAX_ARITY,
) -> Callable:
    """
    Build a function of exactly `n` positional arguments.

    The function hands its arguments to `call` as one tuple. `limit` is the
    largest arity the caller accepts (MAX_ARITY for closures,
    MAX_HANDLER_ARITY for handlers).

    Raises:
        ArityTooLarge: if n > limit.
    """
    if n < 0:
        raise ValueError(f"arity must be >= 0, got {n}")
    bound = min(limit, MAX_HANDLER_ARITY)
    if n > bound:
        raise ArityTooLarge(f"arity {n} exceeds the supported maximum of {bound}")
    return _ADAPTERS[n](call, name)


def to_fun(app: Any) -> Callable:
    """
    Return a plain function with the same arity as `app`.

    Plain callables are returned as they are; Composites are wrapped in an
    adapter that calls `apply`.
    """
    if not isinstance(app, Composite) and callable(app):
        return app
    n = arity(app)
    return nary(n, lambda args: apply(app, args), name="composite")
