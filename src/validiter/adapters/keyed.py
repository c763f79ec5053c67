"""Adapters validating a key derived from each success.

- ``ConstOver``: every key equals the first one
- ``LookBack``: each key passes a comparison with the key ``steps`` back
- ``UniqueOver``: no key repeats
"""

import logging
from typing import Any, Callable, Generic, Hashable, Iterable, TypeVar

from ..outcome import Duplicate, Failure, LookBackFailed, NotConstant, Outcome, Success
from ..valid_iter import Adapter

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")


class ConstOver(Adapter[T], Generic[T, K]):
    """Fails successes whose derived key differs from the first success's key.

    The first key stays authoritative: a rejected key never replaces it.
    """

    def __init__(self, upstream: Iterable[Outcome[T]], key: Callable[[T], K]):
        super().__init__(upstream)
        self.key = key
        self.established: K | None = None
        self._has_established = False

    def _check(self, outcome: Success[T]) -> Outcome[T]:
        observed = self.key(outcome.value)
        if not self._has_established:
            self.established = observed
            self._has_established = True
            return outcome
        if observed == self.established:
            return outcome
        logger.debug(f"const_over: key {observed!r} differs from established {self.established!r}")
        return Failure(NotConstant(outcome.value, observed, self.established))


class LookBack(Adapter[T], Generic[T, K]):
    """Checks each success against the key stored ``steps`` successes back.

    Keys of accepted successes are kept in a ring buffer of size ``steps``.
    Until the ring is full, successes pass unchecked. A rejected success
    does not enter the ring. ``steps == 0`` disables the check.
    """

    def __init__(
        self,
        upstream: Iterable[Outcome[T]],
        steps: int,
        key: Callable[[T], K],
        check: Callable[[T, K], Any],
    ):
        super().__init__(upstream)
        if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
            raise ValueError(f"steps must be a non-negative integer, got: {steps!r}")
        self.steps = steps
        self.key = key
        self.check = check
        self.position = 0
        self.stored: list[K] = []

    def _check(self, outcome: Success[T]) -> Outcome[T]:
        if self.steps == 0:
            return outcome

        value = outcome.value
        if self.position < self.steps:
            self.stored.append(self.key(value))
            self.position += 1
            return outcome

        index = self.position % self.steps
        against = self.stored[index]
        if not self.check(value, against):
            logger.debug(f"look_back({self.steps}): {value!r} failed against {against!r}")
            return Failure(LookBackFailed(value, against))

        self.stored[index] = self.key(value)
        self.position += 1
        return outcome


class UniqueOver(Adapter[T]):
    """Fails successes whose derived key was already seen.

    Only first occurrences are recorded. Keys must be hashable; without a
    key function the element itself is the key.
    """

    def __init__(self, upstream: Iterable[Outcome[T]], key: Callable[[T], Hashable] | None = None):
        super().__init__(upstream)
        self.key = key
        self.seen: set[Hashable] = set()

    def _check(self, outcome: Success[T]) -> Outcome[T]:
        key = outcome.value if self.key is None else self.key(outcome.value)
        if key in self.seen:
            logger.debug(f"unique_over: duplicate key {key!r}")
            return Failure(Duplicate(outcome.value, key))
        self.seen.add(key)
        return outcome
