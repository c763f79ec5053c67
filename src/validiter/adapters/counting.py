"""Counting adapters: at_most and at_least."""

import logging
from enum import Enum
from typing import Iterable, TypeVar

from ..outcome import Failure, Outcome, Success, TooFew, TooMany
from ..valid_iter import Adapter, ValidIter

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got: {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got: {value}")
    return value


class AtMost(Adapter[T]):
    """Turns every success beyond the first max_count into TooMany.

    Never truncates: upstream is pulled until it ends.
    """

    def __init__(self, upstream: Iterable[Outcome[T]], max_count: int):
        super().__init__(upstream)
        self.max_count = _require_count("max_count", max_count)
        self.count = 0

    def _check(self, outcome: Success[T]) -> Outcome[T]:
        if self.count >= self.max_count:
            logger.debug(f"at_most({self.max_count}): too many, rejecting {outcome.value!r}")
            return Failure(TooMany(outcome.value))
        self.count += 1
        return outcome


class AtLeastState(str, Enum):
    """Lifecycle of an AtLeast adapter."""
    COUNTING = "counting"
    EMITTING_SYNTHETIC = "emitting_synthetic"
    EXHAUSTED = "exhausted"


class AtLeast(ValidIter[T]):
    """Appends a single TooFew failure when upstream ends too early.

    Successes are never demoted retroactively; the failure is synthesized
    as the element following upstream exhaustion.
    """

    def __init__(self, upstream: Iterable[Outcome[T]], min_count: int):
        self._upstream = iter(upstream)
        self.min_count = _require_count("min_count", min_count)
        self.count = 0
        self.state = AtLeastState.COUNTING

    def _pull(self) -> Outcome[T]:
        if self.state == AtLeastState.COUNTING:
            try:
                outcome = next(self._upstream)
            except StopIteration:
                self.state = (
                    AtLeastState.EMITTING_SYNTHETIC
                    if self.count < self.min_count
                    else AtLeastState.EXHAUSTED
                )
            else:
                if outcome.is_success:
                    self.count += 1
                return outcome

        if self.state == AtLeastState.EMITTING_SYNTHETIC:
            self.state = AtLeastState.EXHAUSTED
            logger.debug(f"at_least({self.min_count}): upstream ended after {self.count} successes")
            return Failure(TooFew(self.count))

        raise StopIteration
