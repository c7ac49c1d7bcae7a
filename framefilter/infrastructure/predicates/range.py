"""
Range predicate - keeps numeric values between two bounds.
"""

from typing import Any

from .base import PredicateConfig, PredicateInstance, parse_number, to_number


class RangePredicate(PredicateInstance):
    """
    Match numeric values within [from, to], both bounds inclusive.

    filter_expression holds the lower bound, filter_expression2 the upper.
    Each unparseable bound sets its own invalid flag; a lower bound above the
    upper bound flags both.

    Example:
        predicate = RangePredicate(PredicateConfig(
            filter_expression='100',
            filter_expression2='1000',
            field_type=FieldType.NUMBER
        ))
        predicate.test(500)  # True
    """

    def __init__(self, config: PredicateConfig):
        self.lower = parse_number(config.filter_expression)
        self.upper = parse_number(config.filter_expression2)

        self.expression1_invalid = self.lower is None
        self.expression2_invalid = self.upper is None

        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            self.expression1_invalid = True
            self.expression2_invalid = True

        self.is_valid = not (self.expression1_invalid or self.expression2_invalid)

    def test(self, value: Any) -> bool:
        number = to_number(value)
        if number is None:
            return False
        return self.lower <= number <= self.upper
