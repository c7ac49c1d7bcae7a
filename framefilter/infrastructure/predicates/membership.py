"""
Membership predicate - keeps rows whose value is one of a list of values.
"""

from typing import Any

import pandas as pd

from .base import PredicateConfig, PredicateInstance, is_missing


class InPredicate(PredicateInstance):
    """
    Match values contained in filter_args['values'].

    Values are compared as-is first and then by string form, so a list of
    strings typed in an editor still matches numeric fields. Non-scalar
    values (arrays, lists) never match.

    Example:
        predicate = InPredicate(PredicateConfig(
            filter_args={'values': ['BELOW_LOWER', 'ABOVE_UPPER']}
        ))
        predicate.test('ABOVE_UPPER')  # True
    """

    def __init__(self, config: PredicateConfig):
        values = (config.filter_args or {}).get('values')

        if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple, set, frozenset)):
            values = None

        self.values = list(values) if values else []
        self.labels = {str(v) for v in self.values}
        self.is_valid = len(self.values) > 0
        self.invalid_args = not self.is_valid

    def test(self, value: Any) -> bool:
        if not pd.api.types.is_scalar(value) or is_missing(value):
            return False
        return value in self.values or str(value) in self.labels
