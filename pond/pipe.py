# pond/pipe.py
"""
Piping helper.

`pipe(app, *args)` calls `app` with `args` through the applicative layer,
so plain functions and Composites chain the same way:

    f = lambda x: lambda y, z: x + y + z
    pipe(pipe(f, 10), 200, 3)    # 213

It is a convenience for driving closures built by `pond`, which return
other closures (or (value, closure) pairs wrapped in a Composite).
"""

from __future__ import annotations

from typing import Any

from .app import apply


def pipe(app: Any, *args: Any) -> Any:
    """Call `app` with `args`; the count must match arity(app)."""
    return apply(app, args)
