# pond/__init__.py
"""
Pond public API surface.

Stateful functions without mutable state: a pond closure returns, on each
call, whatever its handler computes, typically a value together with a
fresh closure over the next state.

    - Constructor: pond / construct
    - Applicatives: Composite, callable_arity, callable_apply, pipe
    - Accumulators: acc_into, acc_value, acc_list, acc_last, acc_reduce
    - Recorder: Rec, Mode, STOP, recorder_start, recorder_stop,
                recorder_play
    - Errors: PondError and its subclasses
"""

from __future__ import annotations

import logging

from .errors import (
    PondError,
    HandlerArityTooSmall,
    ArityMismatch,
    UnsupportedCallableKind,
    MalformedResult,
    ArityTooLarge,
)

# ---------------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------------

from .app import Composite, to_fun
from .app import arity as callable_arity
from .app import apply as callable_apply
from .core import pond, construct
from .pipe import pipe

# ---------------------------------------------------------------------------
# Accumulators
# ---------------------------------------------------------------------------

from .acc import (
    into as acc_into,
    value as acc_value,
    as_list as acc_list,
    last as acc_last,
    reduce as acc_reduce,
)

# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------

from .rec import (
    Rec,
    Mode,
    STOP,
    start as recorder_start,
    stop as recorder_stop,
    play as recorder_play,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    # errors
    "PondError",
    "HandlerArityTooSmall",
    "ArityMismatch",
    "UnsupportedCallableKind",
    "MalformedResult",
    "ArityTooLarge",

    # core
    "pond",
    "construct",
    "Composite",
    "callable_arity",
    "callable_apply",
    "to_fun",
    "pipe",

    # accumulators
    "acc_into",
    "acc_value",
    "acc_list",
    "acc_last",
    "acc_reduce",

    # recorder
    "Rec",
    "Mode",
    "STOP",
    "recorder_start",
    "recorder_stop",
    "recorder_play",
]
