"""Validation adapters.

Each adapter wraps a single upstream outcome iterator. They are usually
built through the fluent methods of ``ValidIter`` rather than directly.
"""

from .checks import Between, Ensure
from .counting import AtLeast, AtLeastState, AtMost
from .keyed import ConstOver, LookBack, UniqueOver

__all__ = [
    "AtMost",
    "AtLeast",
    "AtLeastState",
    "Between",
    "Ensure",
    "ConstOver",
    "LookBack",
    "UniqueOver",
]
