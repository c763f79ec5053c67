"""Helpers for consuming outcome iterators.

The adapters never aggregate; these helpers are the caller-side
equivalents of collecting into a single success/failure result or
inspecting every outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, TypeVar

from .outcome import Failure, FailureCode, Outcome, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")


def collect(outcomes: Iterable[Outcome[T]]) -> Outcome[list[T]]:
    """Collect successful values, stopping at the first failure.

    Nothing past the first failure is pulled from ``outcomes``.

    Args:
        outcomes: Iterable of outcomes

    Returns:
        ``Success(list_of_values)`` or the first ``Failure`` encountered
    """
    values = []
    for outcome in outcomes:
        if outcome.is_failure:
            return outcome
        values.append(outcome.value)
    return Success(values)


@dataclass
class Tally:
    """Counts of every outcome produced by a pipeline."""
    successes: int = 0
    failures: dict[FailureCode, int] = field(default_factory=dict)
    first_failure: Failure | None = None

    @property
    def total_failures(self) -> int:
        return sum(self.failures.values())

    @property
    def passed(self) -> bool:
        return self.total_failures == 0

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = no failures, 1 = at least one failure."""
        return 0 if self.passed else 1

    def add(self, outcome: Outcome) -> None:
        """Count a single outcome."""
        if outcome.is_success:
            self.successes += 1
            return
        self.failures[outcome.code] = self.failures.get(outcome.code, 0) + 1
        if self.first_failure is None:
            self.first_failure = outcome

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "passed": self.passed,
            "exit_code": self.exit_code,
            "successes": self.successes,
            "failures": {code.value: count for code, count in self.failures.items()},
            "first_failure": self.first_failure.kind.to_dict() if self.first_failure else None,
        }


def tally(outcomes: Iterable[Outcome]) -> Tally:
    """Consume every outcome and count successes and failures per code."""
    result = Tally()
    for outcome in outcomes:
        result.add(outcome)
    logger.debug(f"tally: {result.successes} successes, {result.total_failures} failures")
    return result
