"""Tests for adapter composition: laziness, ordering and failure propagation."""

from validiter import (
    Failure,
    FailureCode,
    OutOfBounds,
    PredicateFailed,
    Success,
    TooFew,
    TooMany,
    ValidIter,
    validate,
)
from validiter.adapters import AtMost, Between


class TestChainOrder:
    """Stacking order decides which check classifies a failing element."""

    def test_between_then_at_most(self):
        results = list(validate(range(10)).between(2, 8).at_most(3))
        assert results == [
            Failure(OutOfBounds(0)),
            Failure(OutOfBounds(1)),
            Success(2),
            Success(3),
            Success(4),
            Failure(TooMany(5)),
            Failure(TooMany(6)),
            Failure(TooMany(7)),
            Failure(TooMany(8)),
            Failure(OutOfBounds(9)),
        ]

    def test_at_most_then_between(self):
        results = list(validate(range(10)).at_most(3).between(2, 8))
        assert results == [
            Failure(OutOfBounds(0)),
            Failure(OutOfBounds(1)),
            Success(2),
        ] + [Failure(TooMany(i)) for i in range(3, 10)]

    def test_orders_diverge_on_same_element(self):
        first = list(validate(range(10)).between(2, 8).at_most(3))
        second = list(validate(range(10)).at_most(3).between(2, 8))

        # 9 is rejected by both checks; the check nearer the source wins
        assert first[9].code == FailureCode.OUT_OF_BOUNDS
        assert second[9].code == FailureCode.TOO_MANY
        # 3 only passes at_most when out-of-range elements were not counted
        assert first[3] == Success(3)
        assert second[3] == Failure(TooMany(3))


class TestLaziness:
    """Each pull evaluates exactly one upstream element."""

    def test_one_pull_per_element(self, counting_source):
        source = counting_source(range(100))
        chain = (
            validate(source)
            .between(0, 50)
            .ensure(lambda i: i % 2 == 0)
            .const_over(lambda i: i >= 0)
            .at_most(10)
            .unique_over()
        )
        assert source.pulled == 0

        for expected in range(1, 6):
            next(chain)
            assert source.pulled == expected

    def test_stop_pulling_is_cancellation(self, counting_source):
        source = counting_source(range(1000))
        chain = validate(source).at_most(2)
        for _, outcome in zip(range(3), chain):
            pass
        assert source.pulled == 3

    def test_infinite_source(self):
        def naturals():
            n = 0
            while True:
                yield n
                n += 1

        chain = validate(naturals()).ensure(lambda n: n % 3 == 0).at_most(2)
        failure = next(chain.failures())
        assert failure == Failure(PredicateFailed(1))

    def test_each_element_flows_once(self):
        seen = []

        def record(value):
            seen.append(value)
            return True

        list(validate([1, 2, 3]).ensure(record).at_least(1).ensure(record))
        assert seen == [1, 1, 2, 2, 3, 3]


class TestFailurePropagation:
    """Failures are forwarded verbatim by every later adapter."""

    def test_failure_identity_preserved(self):
        failure = Failure(TooFew(0))
        inner = iter([Success(5), failure])
        results = list(Between(AtMost(inner, 10), 0, 1))
        assert results[0] == Failure(OutOfBounds(5))
        assert results[1] is failure

    def test_later_adapters_never_see_failures(self):
        calls = []
        results = list(
            validate(range(5))
            .between(1, 3)
            .ensure(lambda i: calls.append(i) or True)
        )
        assert calls == [1, 2, 3]
        assert [r.is_success for r in results] == [False, True, True, True, False]

    def test_adapters_are_valid_iters(self):
        chain = validate([1]).at_most(1).at_least(1).between(0, 2).ensure(bool).const_over(int)
        assert isinstance(chain, ValidIter)
        assert list(chain) == [Success(1)]


class TestMultiValidation:
    """A long chain over a mixed input."""

    def test_combined(self):
        values = list(range(10)) + [-1, 12]
        results = list(
            validate(values)
            .const_over(lambda i: i >= 0)
            .between(0, 10)
            .ensure(lambda i: i % 2 == 0)
            .at_most(3)
            .at_least(4)
        )
        assert results == [
            Success(0),
            Failure(PredicateFailed(1)),
            Success(2),
            Failure(PredicateFailed(3)),
            Success(4),
            Failure(PredicateFailed(5)),
            Failure(TooMany(6)),
            Failure(PredicateFailed(7)),
            Failure(TooMany(8)),
            Failure(PredicateFailed(9)),
            results[10],
            Failure(OutOfBounds(12)),
            Failure(TooFew(3)),
        ]
        assert results[10].code == FailureCode.NOT_CONSTANT
        assert results[10].kind.element == -1
