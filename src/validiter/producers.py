"""Entry points turning ordinary iterables into validated iterators.

Two distinct producers exist and are never unified:

- ``validate`` promotes plain elements, wrapping each one in ``Success``.
- ``rebase`` resumes validation over outcomes of an earlier stage,
  re-expressing their failures as ``Mapped``.

``attempt`` covers the Python-native foreign vocabulary: a function that
raises on bad input.
"""

import logging
from typing import Callable, Iterable, TypeVar

from .outcome import Failure, Mapped, Outcome, Success
from .valid_iter import ValidIter

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Validatable(ValidIter[T]):
    """Promotes every element of a plain iterable to a Success."""

    def __init__(self, iterable: Iterable[T]):
        self._source = iter(iterable)

    def _pull(self) -> Outcome[T]:
        return Success(next(self._source))


class Rebased(ValidIter[T]):
    """Re-expresses the failures of an earlier stage as Mapped failures."""

    def __init__(self, outcomes: Iterable[Outcome[T]]):
        self._source = iter(outcomes)

    def _pull(self) -> Outcome[T]:
        outcome = next(self._source)
        if isinstance(outcome, Success):
            return outcome
        if isinstance(outcome, Failure):
            return Failure(Mapped(outcome))
        raise TypeError(f"rebase() expects Success or Failure elements, got {type(outcome).__name__}")


class Attempt(ValidIter[U]):
    """Applies a function to each element, catching the listed exceptions."""

    def __init__(
        self,
        func: Callable[[T], U],
        iterable: Iterable[T],
        catch: tuple[type[BaseException], ...] = (ValueError,),
    ):
        self._func = func
        self._source = iter(iterable)
        self._catch = catch

    def _pull(self) -> Outcome[U]:
        element = next(self._source)
        try:
            return Success(self._func(element))
        except self._catch as e:
            logger.debug(f"attempt: {element!r} rejected with {type(e).__name__}: {e}")
            return Failure(Mapped(e))


def validate(iterable: Iterable[T]) -> Validatable[T]:
    """Begin a validation pipeline over a plain iterable.

    Args:
        iterable: Any iterable; it is consumed lazily

    Returns:
        Validated iterator yielding Success for every element
    """
    return Validatable(iterable)


def rebase(outcomes: Iterable[Outcome[T]]) -> Rebased[T]:
    """Resume validation over the outcomes of an earlier stage.

    Typically used after collecting inner pipelines, e.g. one collected
    row per line of a file, so that row-level checks can be chained.

    Args:
        outcomes: Iterable of Success/Failure values

    Returns:
        Validated iterator passing successes through and wrapping each
        failure as ``Failure(Mapped(original))``

    Raises:
        TypeError: When an element is not an outcome (raised lazily)
    """
    return Rebased(outcomes)


def attempt(
    func: Callable[[T], U],
    iterable: Iterable[T],
    catch: tuple[type[BaseException], ...] = (ValueError,),
) -> Attempt[U]:
    """Map func over iterable, turning caught exceptions into Mapped failures.

    Args:
        func: Conversion applied to every element, e.g. ``float``
        iterable: Source elements
        catch: Exception types treated as failures; anything else propagates

    Returns:
        Validated iterator of converted values
    """
    return Attempt(func, iterable, catch)
