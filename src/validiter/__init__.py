"""validiter - Lazy, composable validation for Python iterators.

validiter turns iterables into streams of Success/Failure outcomes and
lets validation checks be chained inline, without eager materialization:

    from validiter import validate

    rows = validate(readings).at_least(1).between(0.0, 100.0).at_most(24)
    result = rows.collect()
"""

__version__ = "0.1.0"
__author__ = "validiter contributors"
__description__ = "Lazy, composable validation adapters for Python iterators"

from validiter.consume import Tally, collect, tally
from validiter.exceptions import UnwrapError, ValiditerError
from validiter.outcome import (
    Duplicate,
    Failure,
    FailureCode,
    FailureKind,
    LookBackFailed,
    Mapped,
    NotConstant,
    Outcome,
    OutOfBounds,
    PredicateFailed,
    Success,
    TooFew,
    TooMany,
    is_outcome,
)
from validiter.producers import attempt, rebase, validate
from validiter.valid_iter import ValidIter

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    # Producers
    "validate",
    "rebase",
    "attempt",
    "ValidIter",
    # Outcomes
    "Outcome",
    "Success",
    "Failure",
    "FailureCode",
    "FailureKind",
    "TooMany",
    "TooFew",
    "OutOfBounds",
    "PredicateFailed",
    "NotConstant",
    "Mapped",
    "LookBackFailed",
    "Duplicate",
    "is_outcome",
    # Consumption
    "collect",
    "tally",
    "Tally",
    # Errors
    "ValiditerError",
    "UnwrapError",
]
