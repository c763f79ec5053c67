"""Tests for between and ensure adapters."""

import math

import pytest

from validiter import Failure, FailureCode, OutOfBounds, PredicateFailed, Success, rebase, validate


class TestBetween:
    """Test Between adapter."""

    def test_inclusive_bounds(self):
        results = list(validate(range(6)).between(1, 4))
        assert results == [
            Failure(OutOfBounds(0)),
            Success(1),
            Success(2),
            Success(3),
            Success(4),
            Failure(OutOfBounds(5)),
        ]

    def test_floats_and_infinities(self):
        values = [-1.3, -0.3, 0.7, 1.7, float("-inf"), float("inf")]
        results = list(validate(values).between(-0.5, 1.5))
        assert results == [
            Failure(OutOfBounds(-1.3)),
            Success(-0.3),
            Success(0.7),
            Failure(OutOfBounds(1.7)),
            Failure(OutOfBounds(float("-inf"))),
            Failure(OutOfBounds(float("inf"))),
        ]

    def test_nan_is_out_of_bounds(self):
        (result,) = list(validate([float("nan")]).between(-1.0, 1.0))
        assert result.code == FailureCode.OUT_OF_BOUNDS
        assert math.isnan(result.kind.element)

    def test_order_independent(self):
        values = [5, 0, 9, 3, 2]
        forward = dict(zip(values, validate(values).between(2, 8)))
        backward = dict(zip(reversed(values), validate(reversed(values)).between(2, 8)))
        assert forward == backward

    def test_strings(self):
        results = list(validate("amz").between("b", "y"))
        assert results == [Failure(OutOfBounds("a")), Success("m"), Failure(OutOfBounds("z"))]

    def test_single_point_range(self):
        assert list(validate([2, 3]).between(3, 3)) == [Failure(OutOfBounds(2)), Success(3)]

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError, match="low <= high"):
            validate([]).between(5, 1)

    def test_upstream_failures_not_inspected(self, mixed_outcomes):
        results = list(rebase(mixed_outcomes).between(0, 3))
        assert [r.code for r in results if r.is_failure] == [
            FailureCode.MAPPED,
            FailureCode.MAPPED,
            FailureCode.OUT_OF_BOUNDS,
        ]


class TestEnsure:
    """Test Ensure adapter."""

    def test_even(self):
        results = list(validate(range(6)).ensure(lambda i: i % 2 == 0))
        for i, result in enumerate(results):
            if i % 2 == 0:
                assert result == Success(i)
            else:
                assert result == Failure(PredicateFailed(i))

    def test_predicate_called_once_per_success(self):
        calls = []

        def is_positive(value):
            calls.append(value)
            return value > 0

        list(rebase([Success(1), Failure(OutOfBounds(-5)), Success(-2)]).ensure(is_positive))
        assert calls == [1, -2]

    def test_truthiness(self):
        results = list(validate(["", "x", 0, [1]]).ensure(lambda v: v))
        assert [r.is_success for r in results] == [False, True, False, True]

    def test_chained_ensures_first_failure_wins(self):
        results = list(
            validate(range(4))
            .ensure(lambda i: i % 2 == 0)
            .ensure(lambda i: i % 2 == 1)
        )
        assert all(r.is_failure for r in results)
        assert [r.kind.element for r in results] == [0, 1, 2, 3]
        assert all(r.code == FailureCode.PREDICATE_FAILED for r in results)
