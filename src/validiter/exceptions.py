"""Exceptions raised by validiter.

Validation failures are never raised: they flow through a pipeline as
``Failure`` outcomes. The exceptions below signal programming or
configuration errors only.

Key distinction:
- Failure outcome: an element violated a check (ordinary data)
- ValueError: bad adapter parameters or configuration (user error)
- ValiditerError: misuse of the outcome API (programmer error)
"""


class ValiditerError(Exception):
    """Base class for validiter errors."""
    pass


class UnwrapError(ValiditerError):
    """Raised when the value of a failed outcome is requested."""

    def __init__(self, failure):
        self.failure = failure
        super().__init__(f"called unwrap() on a failed outcome: {failure!r}")
