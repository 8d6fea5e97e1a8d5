"""
Pond configuration.

Arity bounds are fixed constants. Tracing is an environment feature flag
read once at import time:

    POND_TRACE=1   emit debug log records for closure construction and
                   recorder transitions (see pond.rec)
"""

from __future__ import annotations

import os

# Largest arity a closure (or recorder) may have.
MAX_ARITY = 10

# Handlers take (self, state) in front of the closure arguments.
MAX_HANDLER_ARITY = MAX_ARITY + 2

# Feature flag: set POND_TRACE=1 to enable debug trace records
POND_TRACE_ENABLED = os.environ.get("POND_TRACE", "0") == "1"


def trace_enabled() -> bool:
    """True if trace records should be emitted."""
    return POND_TRACE_ENABLED
