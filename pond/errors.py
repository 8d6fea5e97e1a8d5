"""
Pond error taxonomy.

All of these are contract errors raised at the call site that broke the
contract. The library never retries or masks them. Each class also derives
from the builtin a Python caller would already expect (TypeError for a bad
call shape, ValueError for a bad value), so plain ``except TypeError``
handlers keep working.
"""

from __future__ import annotations


class PondError(Exception):
    """Base class for every error raised by pond."""
    pass


class HandlerArityTooSmall(PondError, ValueError):
    """A handler declared fewer than the two (self, state) parameters."""
    pass


class ArityMismatch(PondError, TypeError):
    """Argument count differs from a closure's fixed arity."""
    pass


class UnsupportedCallableKind(PondError, TypeError):
    """Value is neither a fixed-arity function nor a Composite."""
    pass


class MalformedResult(PondError, ValueError):
    """A Composite's inner call did not return a (value, next) pair."""
    pass


class ArityTooLarge(PondError, ValueError):
    """Requested arity is beyond the supported fixed range."""
    pass
