"""Core pull protocol shared by every validated iterator.

A ``ValidIter`` is a plain Python iterator over ``Outcome`` values. Each
adapter wraps exactly one upstream iterator and pulls from it exactly
once per call to ``__next__``; chaining is done through the fluent
methods below, each of which wraps ``self`` in a new adapter.

Example:
    from validiter import validate

    outcomes = validate(range(10)).between(2, 8).at_most(3)
    for outcome in outcomes:
        ...
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

from .outcome import Failure, Outcome, Success

if TYPE_CHECKING:
    from .consume import Tally

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")


class ValidIter(ABC, Generic[T]):
    """Base class for lazy iterators producing outcomes."""

    def __iter__(self) -> Iterator[Outcome[T]]:
        return self

    def __next__(self) -> Outcome[T]:
        return self._pull()

    @abstractmethod
    def _pull(self) -> Outcome[T]:
        """Produce the next outcome or raise StopIteration when exhausted."""
        pass

    # Validation adapters

    def at_most(self, max_count: int) -> "ValidIter[T]":
        """Fail every success arriving after max_count successes."""
        from .adapters.counting import AtMost
        return AtMost(self, max_count)

    def at_least(self, min_count: int) -> "ValidIter[T]":
        """Append a TooFew failure if fewer than min_count successes arrive."""
        from .adapters.counting import AtLeast
        return AtLeast(self, min_count)

    def between(self, low: T, high: T) -> "ValidIter[T]":
        """Fail successes outside the inclusive range [low, high]."""
        from .adapters.checks import Between
        return Between(self, low, high)

    def ensure(self, predicate: Callable[[T], Any]) -> "ValidIter[T]":
        """Fail successes for which predicate is falsy."""
        from .adapters.checks import Ensure
        return Ensure(self, predicate)

    def const_over(self, key: Callable[[T], K]) -> "ValidIter[T]":
        """Fail successes whose key differs from the first success's key."""
        from .adapters.keyed import ConstOver
        return ConstOver(self, key)

    def look_back(
        self,
        steps: int,
        key: Callable[[T], K],
        check: Callable[[T, K], Any],
    ) -> "ValidIter[T]":
        """Compare each success against the key of the success steps back."""
        from .adapters.keyed import LookBack
        return LookBack(self, steps, key, check)

    def unique_over(self, key: Callable[[T], Hashable] | None = None) -> "ValidIter[T]":
        """Fail successes whose key was already seen."""
        from .adapters.keyed import UniqueOver
        return UniqueOver(self, key)

    # Consumption

    def successes(self) -> Iterator[T]:
        """Lazily yield the values of successful outcomes only."""
        return (outcome.value for outcome in self if outcome.is_success)

    def failures(self) -> Iterator[Failure[T]]:
        """Lazily yield failed outcomes only."""
        return (outcome for outcome in self if outcome.is_failure)

    def collect(self) -> "Outcome[list[T]]":
        """Collect successes into a list, stopping at the first failure."""
        from .consume import collect
        return collect(self)

    def tally(self) -> "Tally":
        """Consume the whole iterator and count outcomes per failure code."""
        from .consume import tally
        return tally(self)


class Adapter(ValidIter[T]):
    """A validated iterator wrapping a single upstream outcome iterator.

    Failures pulled from upstream are forwarded verbatim and never reach
    ``_check``; subclasses only see successes.
    """

    def __init__(self, upstream: Iterable[Outcome[T]]):
        self._upstream = iter(upstream)

    def _pull(self) -> Outcome[T]:
        outcome = next(self._upstream)
        if outcome.is_failure:
            return outcome
        return self._check(outcome)

    @abstractmethod
    def _check(self, outcome: Success[T]) -> Outcome[T]:
        """Validate a successful outcome.

        Args:
            outcome: Success pulled from upstream

        Returns:
            The same outcome if it passes, otherwise a new Failure
        """
        pass
