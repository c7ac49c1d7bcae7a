"""
Null predicates - match missing or present values.
"""

from typing import Any

from .base import PredicateConfig, PredicateInstance, is_missing


class NullPredicate(PredicateInstance):
    """Match None, NaN and NaT values. Takes no parameters."""

    def __init__(self, config: PredicateConfig = None):
        self.is_valid = True

    def test(self, value: Any) -> bool:
        return is_missing(value)


class NotNullPredicate(NullPredicate):
    """Match every value NullPredicate does not."""

    def test(self, value: Any) -> bool:
        return not is_missing(value)
