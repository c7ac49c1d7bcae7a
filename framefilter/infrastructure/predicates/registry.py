"""
Predicate registry - maps predicate kind identifiers to descriptors.
"""

from typing import Dict, List

from ..frames import FieldType
from .base import PredicateDescriptor
from .comparison import EqualPredicate, NotEqualPredicate, greater, greater_or_equal, lower, lower_or_equal
from .exceptions import UnknownPredicateKindError
from .membership import InPredicate
from .null import NotNullPredicate, NullPredicate
from .range import RangePredicate
from .regex import RegexPredicate


class PredicateRegistry:
    """
    Registry of predicate kinds.

    Descriptors are looked up by id when a transform runs, so kinds can be
    registered at any time before that.

    Example:
        registry = PredicateRegistry()
        registry.register(PredicateDescriptor(
            id='isNull',
            name='Is null',
            description='Match where value is null',
            factory=NullPredicate
        ))
        registry.get('isNull').get_instance(PredicateConfig()).is_valid  # True
    """

    def __init__(self):
        self._descriptors: Dict[str, PredicateDescriptor] = {}

    def __contains__(self, kind: str) -> bool:
        return kind in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def register(self, descriptor: PredicateDescriptor) -> None:
        """
        Register a predicate kind.

        Args:
            descriptor: Descriptor with a unique id

        Raises:
            TypeError: If descriptor is not a PredicateDescriptor
            ValueError: If a kind with the same id is already registered
        """
        if not isinstance(descriptor, PredicateDescriptor):
            raise TypeError(
                f"Expected PredicateDescriptor, got {type(descriptor).__name__}"
            )

        if descriptor.id in self._descriptors:
            raise ValueError(f"Predicate kind '{descriptor.id}' already registered")

        self._descriptors[descriptor.id] = descriptor

    def get(self, kind: str) -> PredicateDescriptor:
        """
        Look up a predicate kind.

        Raises:
            UnknownPredicateKindError: If kind was never registered
        """
        try:
            return self._descriptors[kind]
        except (KeyError, TypeError):
            raise UnknownPredicateKindError(kind) from None

    def list(self) -> List[PredicateDescriptor]:
        """Return all descriptors in registration order."""
        return list(self._descriptors.values())

    def list_for_field_type(self, field_type: FieldType) -> List[PredicateDescriptor]:
        """Return the descriptors applicable to fields of field_type."""
        return [d for d in self._descriptors.values() if d.supports(field_type)]


NUMERIC_TYPES = frozenset({FieldType.NUMBER})


def create_default_registry() -> PredicateRegistry:
    """
    Build a registry holding the built-in predicate kinds.

    Returns:
        PredicateRegistry: regex, isNull, isNotNull, greater, greaterOrEqual,
            lower, lowerOrEqual, equal, notEqual, range and in
    """
    registry = PredicateRegistry()

    registry.register(PredicateDescriptor(
        id='regex',
        name='Regex',
        description='Match a field value against a regular expression',
        factory=RegexPredicate,
        placeholder='Regular expression'
    ))
    registry.register(PredicateDescriptor(
        id='isNull',
        name='Is null',
        description='Match where value is null',
        factory=NullPredicate
    ))
    registry.register(PredicateDescriptor(
        id='isNotNull',
        name='Is not null',
        description='Match where value is not null',
        factory=NotNullPredicate
    ))
    registry.register(PredicateDescriptor(
        id='greater',
        name='Greater',
        description='Match where field value is greater than the value',
        factory=greater,
        supported_field_types=NUMERIC_TYPES,
        placeholder='Value'
    ))
    registry.register(PredicateDescriptor(
        id='greaterOrEqual',
        name='Greater or equal',
        description='Match where field value is greater than or equal to the value',
        factory=greater_or_equal,
        supported_field_types=NUMERIC_TYPES,
        placeholder='Value'
    ))
    registry.register(PredicateDescriptor(
        id='lower',
        name='Lower',
        description='Match where field value is lower than the value',
        factory=lower,
        supported_field_types=NUMERIC_TYPES,
        placeholder='Value'
    ))
    registry.register(PredicateDescriptor(
        id='lowerOrEqual',
        name='Lower or equal',
        description='Match where field value is lower than or equal to the value',
        factory=lower_or_equal,
        supported_field_types=NUMERIC_TYPES,
        placeholder='Value'
    ))
    registry.register(PredicateDescriptor(
        id='equal',
        name='Equal',
        description='Match where value is equal to the value',
        factory=EqualPredicate,
        placeholder='Value'
    ))
    registry.register(PredicateDescriptor(
        id='notEqual',
        name='Different',
        description='Match where value is different from the value',
        factory=NotEqualPredicate,
        placeholder='Value'
    ))
    registry.register(PredicateDescriptor(
        id='range',
        name='Range',
        description='Match where field value is between two values, bounds included',
        factory=RangePredicate,
        supported_field_types=NUMERIC_TYPES,
        placeholder='From',
        placeholder2='To'
    ))
    registry.register(PredicateDescriptor(
        id='in',
        name='In list',
        description='Match where value is one of a list of values',
        factory=InPredicate
    ))

    return registry


value_filters_registry = create_default_registry()
