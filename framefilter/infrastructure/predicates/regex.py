"""
Regex predicate - matches values against a regular expression.
"""

import re
from typing import Any

from .base import PredicateConfig, PredicateInstance, is_missing


class RegexPredicate(PredicateInstance):
    """
    Match values whose string form contains a match of a regular expression.

    An empty or uncompilable expression makes the instance invalid.
    Missing values never match.

    Example:
        predicate = RegexPredicate(PredicateConfig(filter_expression='^fail'))
        predicate.test('failed')  # True
    """

    def __init__(self, config: PredicateConfig):
        self.pattern = None
        expression = config.filter_expression

        if expression is not None and str(expression):
            try:
                self.pattern = re.compile(str(expression))
            except re.error:
                self.pattern = None

        self.is_valid = self.pattern is not None
        self.expression1_invalid = not self.is_valid

    def test(self, value: Any) -> bool:
        if is_missing(value):
            return False
        return self.pattern.search(str(value)) is not None
