"""Precondition contracts with eager and lazy failure messages.

A precondition is a boolean invariant that must hold before work proceeds.
When it does not, the check fails immediately with ValidationError.

Key distinction:
- require_lazy: the message is a zero-argument callable, built only on failure
- require_eager: the message was already built by the caller, pass or fail
"""

from lazyreq.contracts.failure import ValidationError
from lazyreq.contracts.base import (
    require_lazy,
    require_eager,
    validate_lazy,
    validate_eager,
)

__all__ = [
    "ValidationError",
    "require_lazy",
    "require_eager",
    "validate_lazy",
    "validate_eager",
]
