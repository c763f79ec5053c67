"""Pytest configuration and fixtures for validiter tests."""

import pytest

from validiter import Failure, Success, TooMany, validate


class CountingIterable:
    """Iterable recording how many elements have been pulled from it."""

    def __init__(self, elements):
        self.elements = list(elements)
        self.pulled = 0

    def __iter__(self):
        for element in self.elements:
            self.pulled += 1
            yield element


@pytest.fixture
def counting_source():
    """Factory for iterables that count pulls."""
    return CountingIterable


@pytest.fixture
def mixed_outcomes():
    """Outcomes of an earlier stage, failures interleaved with successes."""
    return [
        Success(1),
        Failure(TooMany(2)),
        Success(3),
        Failure(TooMany(4)),
        Success(5),
    ]


@pytest.fixture
def ten():
    """Validated iterator over 0..9."""
    return validate(range(10))


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "endtoend" in item.nodeid.lower():
            item.add_marker(pytest.mark.integration)
