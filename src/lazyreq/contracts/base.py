"""Base precondition enforcement utilities.

require_lazy() is the preferred check: its message is a callable evaluated
only when the condition fails, so the passing path does no message work at
all. require_eager() takes a message the caller has already built and exists
as the contrast case.
"""

import logging
from typing import Any, Callable

from lazyreq.contracts.failure import ValidationError


logger = logging.getLogger(__name__)


def require_lazy(condition: bool, lazy_message: Callable[[], Any]) -> None:
    """Enforce a precondition, building the failure message only on failure.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ValidationError is raised.

    lazy_message : callable
        Zero-argument callable returning any value. Called exactly once, and
        only if ``condition`` is False. Its result is converted with ``str()``.
        Exceptions raised by the callable propagate unchanged.

    Raises
    ------
    ValidationError
        If condition is False.

    Examples
    --------
    >>> require_lazy(count > 0, lambda: f"count must be positive, got {count}")
    >>> require_lazy(path.exists(), lambda: describe_missing(path))
    """
    if condition:
        return

    message = str(lazy_message())
    logger.debug("Precondition failed: %s", message)
    raise ValidationError(message)


def require_eager(condition: bool, message: Any) -> None:
    """Enforce a precondition with a message the caller already built.

    The message expression is evaluated at the call site before this
    function runs, so whatever it costs (string formatting, lookups,
    printing) is paid even when the check passes. Prefer require_lazy().

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ValidationError is raised.

    message : Any
        Pre-computed failure message, converted with ``str()`` on failure.

    Raises
    ------
    ValidationError
        If condition is False.
    """
    if condition:
        return

    text = str(message)
    logger.debug("Precondition failed: %s", text)
    raise ValidationError(text)


validate_lazy = require_lazy
validate_eager = require_eager
