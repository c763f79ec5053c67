"""Outcome types flowing through a validation pipeline.

Every element of a validated pipeline is an ``Outcome``: either a
``Success`` carrying the element, or a ``Failure`` carrying one of the
``FailureKind`` variants below. Outcomes are immutable once produced.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, Union

from .exceptions import UnwrapError

T = TypeVar("T")
U = TypeVar("U")


class FailureCode(str, Enum):
    """Which check produced a failure."""
    TOO_MANY = "too_many"
    TOO_FEW = "too_few"
    OUT_OF_BOUNDS = "out_of_bounds"
    PREDICATE_FAILED = "predicate_failed"
    NOT_CONSTANT = "not_constant"
    MAPPED = "mapped"
    LOOK_BACK_FAILED = "look_back_failed"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class FailureKind:
    """Base class of the closed set of failure variants."""
    code: ClassVar[FailureCode]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        data = {"code": self.code.value}
        for name, value in vars(self).items():
            data[name] = value if isinstance(value, (int, float, str, bool, list, type(None))) else repr(value)
        return data


@dataclass(frozen=True)
class TooMany(FailureKind, Generic[T]):
    """An element arrived after the maximum success count was reached."""
    code: ClassVar[FailureCode] = FailureCode.TOO_MANY
    element: T


@dataclass(frozen=True)
class TooFew(FailureKind):
    """Upstream ended before the minimum success count was reached."""
    code: ClassVar[FailureCode] = FailureCode.TOO_FEW
    count: int


@dataclass(frozen=True)
class OutOfBounds(FailureKind, Generic[T]):
    """An element fell outside an inclusive range."""
    code: ClassVar[FailureCode] = FailureCode.OUT_OF_BOUNDS
    element: T


@dataclass(frozen=True)
class PredicateFailed(FailureKind, Generic[T]):
    """An element failed a caller-supplied test."""
    code: ClassVar[FailureCode] = FailureCode.PREDICATE_FAILED
    element: T


@dataclass(frozen=True)
class NotConstant(FailureKind, Generic[T]):
    """The derived key of an element differs from the first key seen."""
    code: ClassVar[FailureCode] = FailureCode.NOT_CONSTANT
    element: T
    observed: Any
    expected: Any


@dataclass(frozen=True)
class Mapped(FailureKind):
    """A failure that originated outside of this pipeline stage.

    ``source`` holds the foreign failure as it was received: a ``Failure``
    of an earlier stage, or the exception caught by ``attempt``.
    """
    code: ClassVar[FailureCode] = FailureCode.MAPPED
    source: Any = None


@dataclass(frozen=True)
class LookBackFailed(FailureKind, Generic[T]):
    """An element failed the comparison against a key stored steps ago."""
    code: ClassVar[FailureCode] = FailureCode.LOOK_BACK_FAILED
    element: T
    against: Any


@dataclass(frozen=True)
class Duplicate(FailureKind, Generic[T]):
    """The derived key of an element was already seen."""
    code: ClassVar[FailureCode] = FailureCode.DUPLICATE
    element: T
    key: Any


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successfully validated element."""
    value: T

    is_success: ClassVar[bool] = True
    is_failure: ClassVar[bool] = False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: U) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[T]):
    """A failed element, described by its failure kind."""
    kind: FailureKind

    is_success: ClassVar[bool] = False
    is_failure: ClassVar[bool] = True

    @property
    def code(self) -> FailureCode:
        return self.kind.code

    def unwrap(self) -> T:
        raise UnwrapError(self)

    def unwrap_or(self, default: U) -> U:
        return default


Outcome = Union[Success[T], Failure[T]]


def is_outcome(obj: Any) -> bool:
    """Check whether obj is a Success or a Failure."""
    return isinstance(obj, (Success, Failure))
