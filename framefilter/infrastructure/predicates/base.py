"""
Base classes for value predicates.

A predicate kind is described by a PredicateDescriptor and materialized, per
filter and field type, into a PredicateInstance that tests single values.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Optional

import pandas as pd

from ..frames import FieldType


@dataclass(frozen=True)
class PredicateConfig:
    """
    Raw configuration handed to a predicate factory.

    Args:
        filter_expression: First free-text parameter
        filter_expression2: Second free-text parameter (few kinds use it)
        filter_args: Structured parameters
        field_type: Type tag of the field being filtered
    """

    filter_expression: Optional[str] = None
    filter_expression2: Optional[str] = None
    filter_args: Dict[str, Any] = field(default_factory=dict)
    field_type: FieldType = FieldType.OTHER


class PredicateInstance(ABC):
    """
    Abstract base class for ready-to-evaluate predicates.

    Subclasses set is_valid in their constructor and implement test().
    test() is only called on valid instances and must return a bool for
    every value, None and NaN included.

    The expression1_invalid, expression2_invalid and invalid_args flags are
    advisory, for editors showing which parameter is wrong.
    """

    is_valid: bool = True
    expression1_invalid: bool = False
    expression2_invalid: bool = False
    invalid_args: bool = False

    @abstractmethod
    def test(self, value: Any) -> bool:
        """
        Evaluate the predicate against one field value.

        Args:
            value: Field value, possibly None

        Returns:
            bool: True if the value matches
        """
        pass


class InvalidPredicate(PredicateInstance):
    """Instance for configurations that cannot be evaluated; matches nothing."""

    is_valid = False

    def __init__(
        self,
        expression1_invalid: bool = False,
        expression2_invalid: bool = False,
        invalid_args: bool = False
    ):
        self.expression1_invalid = expression1_invalid
        self.expression2_invalid = expression2_invalid
        self.invalid_args = invalid_args

    def test(self, value: Any) -> bool:
        return False


@dataclass(frozen=True)
class PredicateDescriptor:
    """
    Registry entry for one predicate kind.

    Args:
        id: Kind identifier referenced by filter configurations
        name: Human-readable name
        description: Human-readable description
        factory: Callable building a PredicateInstance from a PredicateConfig
        supported_field_types: Field types the kind applies to, None for all
        placeholder: Label for the first free-text parameter
        placeholder2: Label for the second free-text parameter

    Example:
        descriptor = PredicateDescriptor(
            id='isNull',
            name='Is null',
            description='Match where value is null',
            factory=lambda config: NullPredicate()
        )
    """

    id: str
    name: str
    description: str
    factory: Callable[[PredicateConfig], PredicateInstance]
    supported_field_types: Optional[FrozenSet[FieldType]] = None
    placeholder: Optional[str] = None
    placeholder2: Optional[str] = None

    def supports(self, field_type: FieldType) -> bool:
        """Return True if this kind can be applied to fields of field_type."""
        if self.supported_field_types is None:
            return True
        return field_type in self.supported_field_types

    def get_instance(self, config: PredicateConfig) -> PredicateInstance:
        """
        Build a predicate instance for config.

        Never raises for bad expressions: unsupported field types and
        unparseable parameters come back as an invalid instance.

        Args:
            config: Predicate configuration

        Returns:
            PredicateInstance: Instance with is_valid set accordingly
        """
        if not self.supports(config.field_type):
            return InvalidPredicate()
        return self.factory(config)


def is_missing(value: Any) -> bool:
    """Return True for None, NaN, NaT and pd.NA."""
    if value is None:
        return True
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse a free-text parameter as a float.

    Returns:
        float or None if text is empty or not a number
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def to_number(value: Any) -> Optional[float]:
    """
    Convert a field value to float for numeric comparison.

    Returns:
        float or None for missing, boolean or non-numeric values
    """
    if is_missing(value) or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return None
