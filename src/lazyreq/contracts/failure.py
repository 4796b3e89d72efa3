"""Failure type for precondition violations.

Checks fail fast, loud, and once. Every violation raises the same
exception type so callers can handle bad input uniformly.
"""


class ValidationError(ValueError):
    """Raised when a precondition check fails.

    Carries the stringified failure message. It subclasses ValueError because
    a failed precondition means the caller supplied an illegal argument or
    state, not that the library itself is broken.

    Not to be confused with ``pydantic.ValidationError``, which reports bad
    configuration.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
