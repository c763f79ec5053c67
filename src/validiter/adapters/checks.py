"""Stateless per-element checks: between and ensure."""

import logging
from typing import Any, Callable, Iterable, TypeVar

from ..outcome import Failure, OutOfBounds, Outcome, PredicateFailed, Success
from ..valid_iter import Adapter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Between(Adapter[T]):
    """Fails successes outside the inclusive range [low, high].

    Values that are unordered against the bounds (e.g. NaN) are out of
    bounds.
    """

    def __init__(self, upstream: Iterable[Outcome[T]], low: T, high: T):
        super().__init__(upstream)
        if high < low:
            raise ValueError(f"between() requires low <= high, got: low={low!r}, high={high!r}")
        self.low = low
        self.high = high

    def _check(self, outcome: Success[T]) -> Outcome[T]:
        if self.low <= outcome.value <= self.high:
            return outcome
        logger.debug(f"between({self.low!r}, {self.high!r}): {outcome.value!r} out of bounds")
        return Failure(OutOfBounds(outcome.value))


class Ensure(Adapter[T]):
    """Fails successes for which the predicate is falsy."""

    def __init__(self, upstream: Iterable[Outcome[T]], predicate: Callable[[T], Any]):
        super().__init__(upstream)
        self.predicate = predicate

    def _check(self, outcome: Success[T]) -> Outcome[T]:
        if self.predicate(outcome.value):
            return outcome
        return Failure(PredicateFailed(outcome.value))
