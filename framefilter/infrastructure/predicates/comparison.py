"""
Comparison predicates - numeric thresholds and equality.
"""

import operator
from typing import Any, Callable

import pandas as pd

from ..frames import FieldType
from .base import PredicateConfig, PredicateInstance, is_missing, parse_number, to_number


class NumericComparisonPredicate(PredicateInstance):
    """
    Compare numeric values against a threshold parsed from the expression.

    Args:
        config: Predicate configuration, filter_expression holds the threshold
        compare: Binary operator applied as compare(value, threshold)

    Example - values above 10:
        predicate = NumericComparisonPredicate(
            PredicateConfig(filter_expression='10', field_type=FieldType.NUMBER),
            operator.gt
        )
        predicate.test(12)  # True
    """

    def __init__(self, config: PredicateConfig, compare: Callable[[float, float], bool]):
        self.threshold = parse_number(config.filter_expression)
        self.compare = compare
        self.is_valid = self.threshold is not None
        self.expression1_invalid = not self.is_valid

    def test(self, value: Any) -> bool:
        number = to_number(value)
        if number is None:
            return False
        return bool(self.compare(number, self.threshold))


def comparison_factory(compare: Callable[[float, float], bool]):
    """Bind an operator into a factory for the registry."""

    def factory(config: PredicateConfig) -> NumericComparisonPredicate:
        return NumericComparisonPredicate(config, compare)

    return factory


greater = comparison_factory(operator.gt)
greater_or_equal = comparison_factory(operator.ge)
lower = comparison_factory(operator.lt)
lower_or_equal = comparison_factory(operator.le)


class EqualPredicate(PredicateInstance):
    """
    Match values equal to the expression.

    The comparison depends on the field type:
    - number: numeric equality when the expression parses as a number
    - boolean: 'true'/'false' (case-insensitive) against the value
    - time: timestamp equality when the expression parses as a timestamp
    - anything else, or when parsing fails: string equality

    Missing values never match. The expression may be an empty string,
    which matches empty strings; only None is invalid.
    """

    def __init__(self, config: PredicateConfig):
        expression = config.filter_expression
        self.expression = None if expression is None else str(expression)
        self.field_type = config.field_type
        self.is_valid = self.expression is not None
        self.expression1_invalid = not self.is_valid

        self.number = None
        self.timestamp = None

        if not self.is_valid:
            return

        if self.field_type == FieldType.NUMBER:
            self.number = parse_number(self.expression)
        elif self.field_type == FieldType.TIME:
            try:
                self.timestamp = pd.Timestamp(self.expression.strip())
            except (TypeError, ValueError):
                self.timestamp = None
            if self.timestamp is pd.NaT:
                self.timestamp = None

    def test(self, value: Any) -> bool:
        if is_missing(value):
            return False

        if self.number is not None:
            number = to_number(value)
            return number is not None and number == self.number

        if self.field_type == FieldType.BOOLEAN and isinstance(value, bool):
            return str(value).lower() == self.expression.strip().lower()

        if self.timestamp is not None:
            try:
                return bool(pd.Timestamp(value) == self.timestamp)
            except (TypeError, ValueError):
                return False

        return str(value) == self.expression


class NotEqualPredicate(EqualPredicate):
    """Match every value EqualPredicate does not, missing values included."""

    def test(self, value: Any) -> bool:
        return not super().test(value)
